"""Order storage for mock merchant"""

import uuid
from datetime import datetime, timezone
from typing import Optional

from ..models.cart import CartLine
from ..models.checkout import CheckoutRequest, Order


class OrderDatabase:
    """In-memory order storage"""

    def __init__(self):
        self.orders: dict[str, Order] = {}

    def create_order(
        self,
        user_id: str,
        request: CheckoutRequest,
        items: list[CartLine],
        total: int,
    ) -> Order:
        """Create an order; items are copied so later cart edits never leak in"""
        order = Order(
            id=f"ORD-{uuid.uuid4().hex[:8].upper()}",
            user_id=user_id,
            customer_name=request.customer_name,
            customer_email=request.customer_email,
            shipping_address=request.shipping_address,
            items=[item.model_copy() for item in items],
            total=total,
            created_at=datetime.now(timezone.utc),
        )
        self.orders[order.id] = order
        return order

    def get_order(self, order_id: str) -> Optional[Order]:
        """Get an order by ID"""
        return self.orders.get(order_id)

    def list_orders(self, user_id: Optional[str] = None) -> list[Order]:
        """List orders, newest first, optionally for one user"""
        orders = [
            order for order in self.orders.values()
            if user_id is None or order.user_id == user_id
        ]
        orders.sort(key=lambda o: o.created_at, reverse=True)
        return orders
