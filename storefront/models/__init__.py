# Storefront Models

from .product import Product, ProductFields
from .cart import (
    CartLine,
    EnrichedCartLine,
    Resolved,
    Missing,
    ProductResolution,
    UNKNOWN_PRODUCT_NAME,
    subtotal,
    item_count,
)
from .order import Order
from .account import UserRole, UserProfile
from .checkout import CheckoutForm, CheckoutState, is_plausible_email

__all__ = [
    "Product",
    "ProductFields",
    "CartLine",
    "EnrichedCartLine",
    "Resolved",
    "Missing",
    "ProductResolution",
    "UNKNOWN_PRODUCT_NAME",
    "subtotal",
    "item_count",
    "Order",
    "UserRole",
    "UserProfile",
    "CheckoutForm",
    "CheckoutState",
    "is_plausible_email",
]
