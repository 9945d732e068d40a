"""Order lookup (read-only)"""

from ..core.cache import QueryCache
from ..core.events import ALL_ORDERS, MY_ORDERS, order_key
from ..models import Order
from .backend_client import BackendClient


class OrderLookup:
    """
    Previously created orders.

    Authorization (own orders only, unless admin) is decided by the
    backend; an order the caller may not see reads as NotFound.
    """

    def __init__(self, client: BackendClient, cache: QueryCache):
        self._client = client
        self._cache = cache

    async def get_order(self, order_id: str) -> Order:
        return await self._cache.fetch(
            order_key(order_id),
            lambda: self._client.get_order(order_id),
        )

    async def list_my_orders(self) -> list[Order]:
        return await self._cache.fetch(MY_ORDERS, self._client.list_my_orders)

    async def list_all_orders(self) -> list[Order]:
        """Every order in the store; admin only (Forbidden otherwise)"""
        return await self._cache.fetch(ALL_ORDERS, self._client.list_all_orders)
