# Caller identity

from .auth import (
    AuthenticationMiddleware,
    AuthDependency,
    Caller,
    TokenIssuer,
    optional_user,
    require_user,
    require_admin,
)

__all__ = [
    "AuthenticationMiddleware",
    "AuthDependency",
    "Caller",
    "TokenIssuer",
    "optional_user",
    "require_user",
    "require_admin",
]
