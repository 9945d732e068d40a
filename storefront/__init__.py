"""
Storefront client

Catalog browsing, cart, checkout, order lookup and catalog administration
against an authoritative backend.
"""

from .shop import Storefront
from .core.errors import (
    StorefrontError,
    NotAuthenticated,
    Forbidden,
    NotFound,
    ValidationFailed,
    EmptyCart,
    RequestRejected,
    CheckoutRejected,
    BackendUnavailable,
)

__version__ = "1.0.0"

__all__ = [
    "Storefront",
    "StorefrontError",
    "NotAuthenticated",
    "Forbidden",
    "NotFound",
    "ValidationFailed",
    "EmptyCart",
    "RequestRejected",
    "CheckoutRejected",
    "BackendUnavailable",
]
