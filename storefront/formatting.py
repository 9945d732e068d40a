"""
Presentation helpers

Money stays in integer minor units inside the client; conversion to and
from major units happens only here.
"""

from decimal import Decimal, InvalidOperation, ROUND_HALF_UP

from .core.errors import (
    BackendUnavailable,
    CheckoutRejected,
    EmptyCart,
    Forbidden,
    NotAuthenticated,
    NotFound,
    RequestRejected,
    ValidationFailed,
)

CENTS = Decimal(100)


def format_price(cents: int, symbol: str = "$") -> str:
    """1999 -> '$19.99'"""
    amount = (Decimal(cents) / CENTS).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)
    return f"{symbol}{amount:,.2f}"


def parse_price(text: str) -> int:
    """
    Admin price input in major units to cents.

    '19.99' -> 1999, '5' -> 500, '0.125' -> 13 (half-up).

    Raises:
        ValidationFailed: on field 'price' for blank, non-numeric or
            negative input
    """
    if not text or not text.strip():
        raise ValidationFailed({"price": "Price is required"})
    try:
        amount = Decimal(text.strip().lstrip("$"))
    except InvalidOperation:
        raise ValidationFailed({"price": "Price must be a number"}) from None
    if not amount.is_finite() or amount < 0:
        raise ValidationFailed({"price": "Price must be zero or more"})
    return int((amount * CENTS).quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def error_message(error: Exception, action: str) -> str:
    """
    User-facing message for a failed action.

    Args:
        error: Exception raised by a storefront service
        action: What the user tried, e.g. "place order"
    """
    if isinstance(error, ValidationFailed):
        return "; ".join(error.errors.values()) or f"Could not {action}: check the form"
    if isinstance(error, EmptyCart):
        return f"Could not {action}: your cart is empty"
    if isinstance(error, NotAuthenticated):
        return f"Please sign in to {action}"
    if isinstance(error, Forbidden):
        return f"You are not allowed to {action}"
    if isinstance(error, NotFound):
        return f"Could not {action}: it no longer exists"
    if isinstance(error, CheckoutRejected):
        return f"Could not {action}: {error}. Your cart was not changed"
    if isinstance(error, RequestRejected):
        return f"Could not {action}: {error}"
    if isinstance(error, BackendUnavailable):
        return "Something went wrong. Please try again"
    return f"Could not {action}"
