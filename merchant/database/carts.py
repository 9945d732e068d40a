"""Cart storage for mock merchant"""

from ..models.cart import CartLine


class CartDatabase:
    """In-memory carts, one per user, as product_id -> quantity"""

    def __init__(self):
        self.carts: dict[str, dict[str, int]] = {}

    def get_lines(self, user_id: str) -> list[CartLine]:
        """Get a user's cart lines in insertion order"""
        cart = self.carts.get(user_id, {})
        return [
            CartLine(product_id=product_id, quantity=quantity)
            for product_id, quantity in cart.items()
        ]

    def set_quantity(self, user_id: str, product_id: str, quantity: int) -> None:
        """Set (not add to) the quantity for a product"""
        self.carts.setdefault(user_id, {})[product_id] = quantity

    def remove_item(self, user_id: str, product_id: str) -> bool:
        """Remove a line; returns False if it was not there"""
        cart = self.carts.get(user_id, {})
        return cart.pop(product_id, None) is not None

    def clear_cart(self, user_id: str) -> None:
        """Clear all items from a user's cart"""
        self.carts.pop(user_id, None)
