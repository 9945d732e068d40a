"""Product models for the storefront client"""

from pydantic import BaseModel, Field, field_validator


class Product(BaseModel):
    """Product in the catalog"""
    id: str
    name: str
    price: int = Field(ge=0)  # minor units (cents)
    description: str = ""
    image_ref: str = ""

    class Config:
        frozen = True


class ProductFields(BaseModel):
    """Editable product fields for admin create/update"""
    name: str
    price: int = Field(ge=0)
    description: str = ""
    image_ref: str = ""

    @field_validator("name")
    @classmethod
    def name_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("Product name is required")
        return value.strip()
