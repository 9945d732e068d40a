"""
Invalidation Bus

Mutating operations publish the cache keys they made stale; readers
(the query cache) subscribe. Keys are tuples and match by prefix, so
publishing ("orders",) drops ("orders", "mine") and ("orders", "all").
"""

import logging
from typing import Callable

logger = logging.getLogger(__name__)

CacheKey = tuple[str, ...]

# Catalog
PRODUCTS: CacheKey = ("products",)


def product_key(product_id: str) -> CacheKey:
    return ("product", product_id)


# Per-user state
CART: CacheKey = ("cart",)
ORDERS: CacheKey = ("orders",)
MY_ORDERS: CacheKey = ("orders", "mine")
ALL_ORDERS: CacheKey = ("orders", "all")
ACCOUNT: CacheKey = ("account",)
ROLE: CacheKey = ("account", "role")
PROFILE: CacheKey = ("account", "profile")


def order_key(order_id: str) -> CacheKey:
    return ("orders", "by-id", order_id)


USER_SCOPED: tuple[CacheKey, ...] = (CART, ORDERS, ACCOUNT)


def key_matches(key: CacheKey, prefix: CacheKey) -> bool:
    """True if `key` starts with `prefix`"""
    return key[: len(prefix)] == prefix


class InvalidationBus:
    """Synchronous publish/subscribe channel for invalidation messages"""

    def __init__(self):
        self._subscribers: list[Callable[[CacheKey], None]] = []

    def subscribe(self, callback: Callable[[CacheKey], None]) -> None:
        """Register a callback invoked once per published key"""
        self._subscribers.append(callback)

    def unsubscribe(self, callback: Callable[[CacheKey], None]) -> None:
        if callback in self._subscribers:
            self._subscribers.remove(callback)

    def publish(self, *keys: CacheKey) -> None:
        """Deliver invalidation of each key to every subscriber"""
        for key in keys:
            logger.debug(f"Invalidating {key}")
            for callback in list(self._subscribers):
                callback(key)
