"""Checkout models for the storefront client"""

from enum import Enum

from pydantic import BaseModel, field_validator


class CheckoutState(str, Enum):
    """Lifecycle of a single checkout attempt"""
    IDLE = "idle"
    VALIDATING = "validating"
    SUBMITTING = "submitting"
    SUCCEEDED = "succeeded"
    FAILED = "failed"


def is_plausible_email(value: str) -> bool:
    """
    Syntactic email check.

    Exactly one '@', non-empty local and domain parts, no whitespace, and a
    '.' inside the domain with characters on both sides.
    """
    if any(ch.isspace() for ch in value):
        return False
    if value.count("@") != 1:
        return False
    local, domain = value.split("@")
    if not local or not domain:
        return False
    return "." in domain[1:-1]


class CheckoutForm(BaseModel):
    """Contact and shipping details captured at checkout"""
    customer_name: str
    customer_email: str
    shipping_address: str

    @field_validator("customer_name")
    @classmethod
    def name_required(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("Name is required")
        return value

    @field_validator("customer_email")
    @classmethod
    def email_valid(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("Email is required")
        if not is_plausible_email(value):
            raise ValueError("Invalid email address")
        return value

    @field_validator("shipping_address")
    @classmethod
    def address_required(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("Shipping address is required")
        return value
