"""Cart models for the storefront client"""

from dataclasses import dataclass
from typing import Union

from pydantic import BaseModel, Field

from .product import Product

UNKNOWN_PRODUCT_NAME = "Unknown Product"


class CartLine(BaseModel):
    """Authoritative cart line as stored by the backend"""
    product_id: str
    quantity: int = Field(gt=0)

    class Config:
        frozen = True


@dataclass(frozen=True)
class Resolved:
    """Catalog lookup that found the product"""
    product: Product


@dataclass(frozen=True)
class Missing:
    """Catalog lookup for a product that no longer exists"""
    product_id: str


ProductResolution = Union[Resolved, Missing]


@dataclass(frozen=True)
class EnrichedCartLine:
    """
    Cart line joined with the catalog at read time.

    Never persisted; rebuilt on every cart read so price and name follow
    the live catalog until checkout.
    """
    product_id: str
    quantity: int
    price: int
    name: str
    available: bool = True

    @property
    def line_total(self) -> int:
        return self.price * self.quantity

    @classmethod
    def from_resolution(
        cls, line: CartLine, resolution: ProductResolution
    ) -> "EnrichedCartLine":
        if isinstance(resolution, Resolved):
            return cls(
                product_id=line.product_id,
                quantity=line.quantity,
                price=resolution.product.price,
                name=resolution.product.name,
            )
        return cls(
            product_id=line.product_id,
            quantity=line.quantity,
            price=0,
            name=UNKNOWN_PRODUCT_NAME,
            available=False,
        )


def subtotal(lines: list[EnrichedCartLine]) -> int:
    """Sum of price * quantity in minor units; no rounding"""
    return sum(line.price * line.quantity for line in lines)


def item_count(lines: list[EnrichedCartLine]) -> int:
    return sum(line.quantity for line in lines)
