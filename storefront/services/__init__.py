# Storefront services

from .backend_client import BackendClient
from .catalog import ProductCatalogReader
from .cart import CartStore
from .checkout import CheckoutProcess
from .orders import OrderLookup
from .account import AccountService
from .admin import AdminCatalogMutator
from .assets import AssetResolver, UrlAssetResolver

__all__ = [
    "BackendClient",
    "ProductCatalogReader",
    "CartStore",
    "CheckoutProcess",
    "OrderLookup",
    "AccountService",
    "AdminCatalogMutator",
    "AssetResolver",
    "UrlAssetResolver",
]
