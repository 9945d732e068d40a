"""
Product Catalog Reader

Read-through access to the backend catalog. Entries stay cached until an
admin mutation publishes their invalidation or a fresh read replaces them.
"""

import logging

from ..core.cache import QueryCache
from ..core.errors import BackendUnavailable, NotFound
from ..core.events import PRODUCTS, product_key
from ..models import Missing, Product, ProductResolution, Resolved
from .backend_client import BackendClient

logger = logging.getLogger(__name__)


class ProductCatalogReader:
    """Cached product list and single-product lookups"""

    def __init__(self, client: BackendClient, cache: QueryCache):
        self._client = client
        self._cache = cache

    async def list_products(self) -> list[Product]:
        """
        Full current catalog.

        Raises:
            BackendUnavailable: the backend could not be reached
        """
        return await self._cache.fetch(PRODUCTS, self._client.list_products, ttl=None)

    async def list_products_or_empty(self) -> list[Product]:
        """Catalog for browsing; an unreachable backend reads as empty"""
        try:
            return await self.list_products()
        except BackendUnavailable as e:
            logger.warning(f"Catalog unavailable, showing no products: {e}")
            return []

    async def get_product(self, product_id: str, fresh: bool = False) -> Product:
        """
        Single product by id.

        Args:
            product_id: Product id
            fresh: Read from the backend even if cached. Other sessions'
                catalog edits are only seen this way.

        Raises:
            NotFound: no product has this id
        """
        read = self._cache.refresh if fresh else self._cache.fetch
        return await read(
            product_key(product_id),
            lambda: self._client.get_product(product_id),
            ttl=None,
        )

    async def resolve(self, product_id: str, fresh: bool = False) -> ProductResolution:
        """Look up a product, reporting a deleted one as Missing"""
        try:
            return Resolved(await self.get_product(product_id, fresh=fresh))
        except NotFound:
            logger.info(f"Product {product_id} no longer in catalog")
            return Missing(product_id)
