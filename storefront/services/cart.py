"""
Cart Store

Projection of the caller's authoritative cart. Raw lines are cached; price
and name are read from the backend catalog on every cart read, so edits
made by any session show up.
"""

import asyncio
import logging
from collections import Counter
from contextlib import asynccontextmanager

from ..core.cache import QueryCache
from ..core.errors import NotAuthenticated, ValidationFailed
from ..core.events import CART, InvalidationBus
from ..core.session import Session
from ..models import CartLine, EnrichedCartLine, item_count, subtotal
from .backend_client import BackendClient
from .catalog import ProductCatalogReader

logger = logging.getLogger(__name__)


class CartStore:
    """
    Cart reads and mutations for the acting user.

    Mutations for the same product are issued one at a time, so the
    backend commits them in the order the caller issued them.
    """

    def __init__(
        self,
        client: BackendClient,
        cache: QueryCache,
        bus: InvalidationBus,
        catalog: ProductCatalogReader,
        session: Session,
    ):
        self._client = client
        self._cache = cache
        self._bus = bus
        self._catalog = catalog
        self._session = session
        # Held only while a mutation for the product is running or waiting
        self._locks: dict[str, asyncio.Lock] = {}
        self._lock_users: Counter[str] = Counter()

    async def get_lines(self) -> list[CartLine]:
        """Raw authoritative lines (cached until a cart mutation)"""
        return await self._cache.fetch(CART, self._client.get_cart, ttl=None)

    async def get_cart(self) -> list[EnrichedCartLine]:
        """Cart lines joined with current catalog price and name"""
        lines = await self.get_lines()
        resolutions = await asyncio.gather(
            *(self._catalog.resolve(line.product_id, fresh=True) for line in lines)
        )
        return [
            EnrichedCartLine.from_resolution(line, resolution)
            for line, resolution in zip(lines, resolutions)
        ]

    async def add_to_cart(self, product_id: str, quantity: int) -> None:
        """
        Set the quantity of `product_id` in the cart.

        Calling again with another quantity replaces it; quantities are
        never accumulated.

        Raises:
            ValidationFailed: quantity is not a positive integer
            NotAuthenticated: no user identity is present
        """
        if isinstance(quantity, bool) or not isinstance(quantity, int) or quantity < 1:
            raise ValidationFailed({"quantity": "Quantity must be a positive whole number"})
        self._require_identity()

        async with self._product_lock(product_id):
            await self._client.add_to_cart(product_id, quantity)
        logger.info(f"Cart: set {product_id} x{quantity}")
        self._bus.publish(CART)

    async def remove_from_cart(self, product_id: str) -> None:
        """Remove a line; removing an absent product is not an error"""
        self._require_identity()

        async with self._product_lock(product_id):
            await self._client.remove_from_cart(product_id)
        logger.info(f"Cart: removed {product_id}")
        self._bus.publish(CART)

    async def clear_cart(self) -> None:
        """Remove all lines in a single backend call"""
        self._require_identity()

        await self._client.clear_cart()
        logger.info("Cart cleared")
        self._bus.publish(CART)

    async def subtotal(self) -> int:
        """Current subtotal in minor units"""
        return subtotal(await self.get_cart())

    async def item_count(self) -> int:
        return item_count(await self.get_cart())

    def _require_identity(self) -> None:
        if not self._session.is_authenticated:
            raise NotAuthenticated("Sign in to change your cart")

    @asynccontextmanager
    async def _product_lock(self, product_id: str):
        lock = self._locks.setdefault(product_id, asyncio.Lock())
        self._lock_users[product_id] += 1
        try:
            async with lock:
                yield
        finally:
            self._lock_users[product_id] -= 1
            if not self._lock_users[product_id]:
                del self._lock_users[product_id]
                del self._locks[product_id]
