"""Cart models for mock merchant"""

from pydantic import BaseModel, Field


class CartLine(BaseModel):
    """Line in a user's cart"""
    product_id: str
    quantity: int = Field(gt=0)


class SetQuantityRequest(BaseModel):
    """Request to set a product's quantity in the cart"""
    quantity: int = Field(gt=0)
