# Mock Merchant Models

from .product import Product, ProductFieldsRequest, ProductCreatedResponse
from .cart import CartLine, SetQuantityRequest
from .checkout import CheckoutRequest, CheckoutResponse, Order
from .account import (
    UserRole,
    UserProfile,
    RoleResponse,
    AssignRoleRequest,
    TokenRequest,
    TokenResponse,
)

__all__ = [
    "Product",
    "ProductFieldsRequest",
    "ProductCreatedResponse",
    "CartLine",
    "SetQuantityRequest",
    "CheckoutRequest",
    "CheckoutResponse",
    "Order",
    "UserRole",
    "UserProfile",
    "RoleResponse",
    "AssignRoleRequest",
    "TokenRequest",
    "TokenResponse",
]
