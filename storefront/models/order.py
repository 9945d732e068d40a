"""Order models for the storefront client"""

from datetime import datetime

from pydantic import BaseModel, Field

from .cart import CartLine


class Order(BaseModel):
    """
    Completed order.

    Items and total are frozen at checkout time and never re-resolved
    against the catalog.
    """
    id: str
    user_id: str
    customer_name: str
    customer_email: str
    shipping_address: str
    items: tuple[CartLine, ...]
    total: int = Field(ge=0)
    created_at: datetime

    class Config:
        frozen = True
