"""Product models for mock merchant"""

from pydantic import BaseModel, Field


class Product(BaseModel):
    """Product in the catalog"""
    id: str
    name: str
    price: int = Field(ge=0)  # cents
    description: str = ""
    image_ref: str = ""

    class Config:
        from_attributes = True


class ProductFieldsRequest(BaseModel):
    """Request to create or update a product"""
    name: str = Field(min_length=1)
    price: int = Field(ge=0)
    description: str = ""
    image_ref: str = ""


class ProductCreatedResponse(BaseModel):
    """Response from product creation"""
    id: str
