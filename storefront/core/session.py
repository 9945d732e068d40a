"""Session identity for the acting storefront user"""

import logging
from datetime import datetime, timezone
from typing import Optional, TYPE_CHECKING
from dataclasses import dataclass

from .events import InvalidationBus, USER_SCOPED

if TYPE_CHECKING:
    from ..services.backend_client import BackendClient

logger = logging.getLogger(__name__)


@dataclass
class Identity:
    """Authenticated caller"""
    user_id: str
    access_token: str
    authenticated_at: datetime


class Session:
    """
    Holds the acting user's identity and attaches it to backend calls.

    Switching identity drops every user-scoped cache entry (cart, orders,
    account) so one user's state is never shown to another.
    """

    def __init__(self, client: "BackendClient", bus: InvalidationBus):
        self._client = client
        self._bus = bus
        self.identity: Optional[Identity] = None

    @property
    def is_authenticated(self) -> bool:
        return self.identity is not None

    def current_user_id(self) -> Optional[str]:
        return self.identity.user_id if self.identity else None

    async def authenticate(self, user_id: str) -> Identity:
        """Obtain a bearer token for `user_id` and use it for all calls"""
        token = await self._client.issue_token(user_id)
        self.identity = Identity(
            user_id=user_id,
            access_token=token,
            authenticated_at=datetime.now(timezone.utc),
        )
        self._client.set_access_token(token)
        self._bus.publish(*USER_SCOPED)
        logger.info(f"Authenticated as {user_id}")
        return self.identity

    def logout(self) -> None:
        """Forget the current identity"""
        if self.identity is None:
            return
        logger.info(f"Logged out {self.identity.user_id}")
        self.identity = None
        self._client.set_access_token(None)
        self._bus.publish(*USER_SCOPED)
