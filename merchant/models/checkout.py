"""Checkout models for mock merchant"""

from datetime import datetime

from pydantic import BaseModel, Field

from .cart import CartLine


class CheckoutRequest(BaseModel):
    """Request to checkout the caller's cart"""
    customer_name: str = Field(min_length=1)
    customer_email: str = Field(min_length=3)
    shipping_address: str = Field(min_length=1)


class CheckoutResponse(BaseModel):
    """Response from checkout"""
    order_id: str


class Order(BaseModel):
    """Completed order; items and total frozen at checkout"""
    id: str
    user_id: str
    customer_name: str
    customer_email: str
    shipping_address: str
    items: list[CartLine]
    total: int
    created_at: datetime
