"""Caller role and profile"""

import logging
from typing import Optional

from ..core.cache import QueryCache
from ..core.events import PROFILE, ROLE, InvalidationBus
from ..models import UserProfile, UserRole
from .backend_client import BackendClient

logger = logging.getLogger(__name__)


class AccountService:
    """Role and profile of the acting user"""

    def __init__(self, client: BackendClient, cache: QueryCache, bus: InvalidationBus):
        self._client = client
        self._cache = cache
        self._bus = bus

    async def get_role(self) -> UserRole:
        return await self._cache.fetch(ROLE, self._client.get_caller_role)

    async def is_admin(self) -> bool:
        return await self.get_role() == UserRole.ADMIN

    async def get_profile(self) -> Optional[UserProfile]:
        """Caller's profile, or None if none was saved yet"""
        return await self._cache.fetch(PROFILE, self._client.get_caller_profile)

    async def save_profile(self, profile: UserProfile) -> None:
        await self._client.save_caller_profile(profile)
        self._bus.publish(PROFILE)

    async def assign_role(self, user_id: str, role: UserRole) -> None:
        """Change another user's role (admin only on the backend)"""
        await self._client.assign_role(user_id, role)
        logger.info(f"Assigned role {role.value} to {user_id}")
        self._bus.publish(ROLE)
