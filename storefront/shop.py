"""
Storefront

Wires settings, session, backend client, query cache and the services
into one object per user session.
"""

import logging
from typing import Optional

import httpx

from .core.cache import QueryCache
from .core.config import Settings, get_settings
from .core.events import InvalidationBus
from .core.session import Session
from .services.account import AccountService
from .services.admin import AdminCatalogMutator
from .services.assets import UrlAssetResolver
from .services.backend_client import BackendClient
from .services.cart import CartStore
from .services.catalog import ProductCatalogReader
from .services.checkout import CheckoutProcess
from .services.orders import OrderLookup

logger = logging.getLogger(__name__)


class Storefront:
    """
    Client-side storefront for one user session.

    Usage:
        async with Storefront.from_settings() as shop:
            await shop.session.authenticate("alice")
            await shop.cart.add_to_cart("prod-001", 2)
            lines = await shop.cart.get_cart()
            order_id = await shop.new_checkout().submit(form, lines)
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.settings = settings or get_settings()
        self.bus = InvalidationBus()
        self.cache = QueryCache(self.bus, default_ttl=self.settings.query_cache_ttl)
        self.client = BackendClient(
            base_url=self.settings.backend_base_url,
            timeout=self.settings.request_timeout,
            transport=transport,
        )
        self.session = Session(self.client, self.bus)
        self.assets = UrlAssetResolver(self.settings.asset_base_url)

        self.catalog = ProductCatalogReader(self.client, self.cache)
        self.cart = CartStore(self.client, self.cache, self.bus, self.catalog, self.session)
        self.orders = OrderLookup(self.client, self.cache)
        self.account = AccountService(self.client, self.cache, self.bus)
        self.admin = AdminCatalogMutator(self.client, self.bus, self.account)

        logger.debug(f"Storefront ready for {self.settings.backend_base_url}")

    @classmethod
    def from_settings(cls, settings: Optional[Settings] = None) -> "Storefront":
        return cls(settings=settings)

    def new_checkout(self) -> CheckoutProcess:
        """Start a fresh checkout attempt"""
        return CheckoutProcess(self.client, self.bus)

    async def close(self) -> None:
        await self.client.close()

    async def __aenter__(self) -> "Storefront":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.close()
