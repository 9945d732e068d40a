"""
Caller Identity Middleware

Resolves the bearer token on incoming requests to a user id.
Requests without a token proceed as guests; a bad token is rejected.
"""

import logging
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Callable, Optional

import jwt
from fastapi import Request, HTTPException
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import Response

from ..config import MerchantSettings
from ..models.account import UserRole

logger = logging.getLogger(__name__)


class TokenIssuer:
    """Signs and verifies development bearer tokens (HS256)"""

    def __init__(self, settings: MerchantSettings):
        self._secret = settings.jwt_secret
        self._algorithm = settings.jwt_algorithm
        self._ttl = timedelta(minutes=settings.token_ttl_minutes)

    def issue(self, user_id: str) -> str:
        now = datetime.now(timezone.utc)
        payload = {
            "sub": user_id,
            "iat": int(now.timestamp()),
            "exp": int((now + self._ttl).timestamp()),
        }
        return jwt.encode(payload, self._secret, algorithm=self._algorithm)

    def verify(self, token: str) -> str:
        """Return the user id in a valid token; raises jwt.PyJWTError"""
        payload = jwt.decode(token, self._secret, algorithms=[self._algorithm])
        return payload["sub"]


class AuthenticationMiddleware(BaseHTTPMiddleware):
    """
    Middleware that resolves the caller's identity.

    If a request has an Authorization header, the token is verified.
    If verification fails, the request is rejected with 401.
    If no header is present, the request proceeds as a guest.
    """

    def __init__(self, app, issuer: TokenIssuer):
        super().__init__(app)
        self.issuer = issuer

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        authorization = request.headers.get("Authorization")
        request.state.user_id = None

        if authorization:
            scheme, _, token = authorization.partition(" ")
            if scheme.lower() != "bearer" or not token:
                return JSONResponse(
                    status_code=401,
                    content={"detail": "Unsupported authorization scheme"},
                )
            try:
                request.state.user_id = self.issuer.verify(token)
            except (jwt.PyJWTError, KeyError) as e:
                logger.warning(f"Token verification failed: {e}")
                return JSONResponse(
                    status_code=401,
                    content={"detail": "Session expired, please sign in again"},
                )

        return await call_next(request)


@dataclass
class Caller:
    """Identity and role of the caller of a request"""
    user_id: Optional[str]
    role: UserRole

    @property
    def is_admin(self) -> bool:
        return self.role == UserRole.ADMIN


class AuthDependency:
    """
    FastAPI dependency resolving the Caller.

    Use route-level flags to require a signed-in user or the admin role.
    """

    def __init__(self, require_user: bool = False, require_admin: bool = False):
        """
        Args:
            require_user: If True, reject anonymous requests (401)
            require_admin: If True, also require the admin role (403)
        """
        self.require_user = require_user or require_admin
        self.require_admin = require_admin

    async def __call__(self, request: Request) -> Caller:
        user_id = getattr(request.state, "user_id", None)
        role = request.app.state.user_db.get_role(user_id)

        if self.require_user and user_id is None:
            raise HTTPException(
                status_code=401,
                detail="This action requires a signed-in user",
            )

        if self.require_admin and role != UserRole.ADMIN:
            raise HTTPException(
                status_code=403,
                detail="This action requires the admin role",
            )

        return Caller(user_id=user_id, role=role)


# Dependency instances
optional_user = AuthDependency()
require_user = AuthDependency(require_user=True)
require_admin = AuthDependency(require_admin=True)
