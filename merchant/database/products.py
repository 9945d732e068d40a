"""Mock product database"""

import uuid
from typing import Optional

from ..models.product import Product, ProductFieldsRequest

# Demo catalog, prices in cents
SEED_PRODUCTS: list[Product] = [
    Product(
        id="prod-001",
        name="Sony WH-1000XM5 Wireless Headphones",
        description="Industry-leading noise cancellation with 30-hour battery life.",
        price=34999,
        image_ref="images/sony-headphones.jpg",
    ),
    Product(
        id="prod-002",
        name="Patagonia Better Sweater Jacket",
        description="Classic fleece jacket made with recycled polyester.",
        price=13900,
        image_ref="images/patagonia-sweater.jpg",
    ),
    Product(
        id="prod-003",
        name="KitchenAid Stand Mixer",
        description="5.5-Quart bowl-lift stand mixer. 11 speeds.",
        price=44999,
        image_ref="images/kitchenaid.jpg",
    ),
    Product(
        id="prod-004",
        name="Yeti Tundra 45 Cooler",
        description="Rotomolded construction. PermaFrost insulation.",
        price=32500,
        image_ref="images/yeti-cooler.jpg",
    ),
    Product(
        id="prod-005",
        name="Atomic Habits by James Clear",
        description="An Easy & Proven Way to Build Good Habits & Break Bad Ones. Hardcover.",
        price=2499,
        image_ref="images/atomic-habits.jpg",
    ),
]


class ProductDatabase:
    """In-memory product database for mock merchant"""

    def __init__(self, seed: bool = True):
        self.products: dict[str, Product] = {}
        if seed:
            for product in SEED_PRODUCTS:
                self.products[product.id] = product.model_copy()

    def get_product(self, product_id: str) -> Optional[Product]:
        """Get a product by ID"""
        return self.products.get(product_id)

    def get_all_products(self) -> list[Product]:
        """Get all products"""
        return list(self.products.values())

    def create_product(self, fields: ProductFieldsRequest) -> Product:
        """Create a product with a new id"""
        product = Product(id=f"prod-{uuid.uuid4().hex[:8]}", **fields.model_dump())
        self.products[product.id] = product
        return product

    def update_product(
        self, product_id: str, fields: ProductFieldsRequest
    ) -> Optional[Product]:
        """Replace a product's fields; the id never changes"""
        if product_id not in self.products:
            return None
        product = Product(id=product_id, **fields.model_dump())
        self.products[product_id] = product
        return product

    def delete_product(self, product_id: str) -> bool:
        """Delete a product"""
        if product_id in self.products:
            del self.products[product_id]
            return True
        return False
