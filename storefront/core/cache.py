"""
Query Cache

In-memory read-through cache keyed by tuples. Entries live until they are
invalidated through the InvalidationBus, or until their optional TTL runs
out. Readers never invalidate on their own.
"""

import logging
import time
from collections import Counter
from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Optional

from .events import CacheKey, InvalidationBus, key_matches

logger = logging.getLogger(__name__)


@dataclass
class CacheEntry:
    """Cached value with its expiry (monotonic seconds, None = never)"""
    value: Any
    expires_at: Optional[float] = None

    def is_fresh(self, now: float) -> bool:
        return self.expires_at is None or now < self.expires_at


class QueryCache:
    """
    Read-through cache shared by the storefront services.

    Usage:
        cache = QueryCache(bus, default_ttl=30.0)
        products = await cache.fetch(PRODUCTS, client.list_products, ttl=None)
        bus.publish(PRODUCTS)  # next fetch goes back to the backend
    """

    def __init__(
        self,
        bus: InvalidationBus,
        default_ttl: Optional[float] = None,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.default_ttl = default_ttl
        self._clock = clock
        self._entries: dict[CacheKey, CacheEntry] = {}
        # Invalidation counter and the value it had when each prefix was
        # last invalidated; used to drop results of reads that overlapped an
        # invalidation of their key. Only kept while such reads are running.
        self._epoch = 0
        self._invalidated_at: dict[CacheKey, int] = {}
        self._inflight: Counter[int] = Counter()
        bus.subscribe(self.invalidate)

    _NO_TTL = object()

    async def fetch(
        self,
        key: CacheKey,
        loader: Callable[[], Awaitable[Any]],
        ttl: Any = _NO_TTL,
    ) -> Any:
        """
        Return the cached value for `key`, loading it on a miss.

        Args:
            key: Cache key
            loader: Coroutine function performing the backend read
            ttl: Seconds to keep the entry; None keeps it until invalidated.
                Defaults to the cache's default_ttl.
        """
        now = self._clock()
        entry = self._entries.get(key)
        if entry is not None and entry.is_fresh(now):
            logger.debug(f"Cache hit: {key}")
            return entry.value

        logger.debug(f"Cache miss: {key}")
        return await self._load(key, loader, ttl)

    async def refresh(
        self,
        key: CacheKey,
        loader: Callable[[], Awaitable[Any]],
        ttl: Any = _NO_TTL,
    ) -> Any:
        """
        Load `key` from the backend even if cached, and store the result.

        The previous entry is dropped first, so a failed load never leaves
        an outdated value behind.
        """
        self._entries.pop(key, None)
        return await self._load(key, loader, ttl)

    async def _load(
        self,
        key: CacheKey,
        loader: Callable[[], Awaitable[Any]],
        ttl: Any,
    ) -> Any:
        started_epoch = self._epoch
        self._inflight[started_epoch] += 1
        try:
            value = await loader()
            stale = self._invalidated_since(key, started_epoch)
        finally:
            self._release(started_epoch)

        if stale:
            logger.debug(f"Discarding stale result for {key}")
            return value

        lifetime = self.default_ttl if ttl is self._NO_TTL else ttl
        expires_at = None if lifetime is None else self._clock() + lifetime
        self._entries[key] = CacheEntry(value=value, expires_at=expires_at)
        return value

    def peek(self, key: CacheKey) -> Optional[Any]:
        """Cached value without loading, or None"""
        entry = self._entries.get(key)
        if entry is None or not entry.is_fresh(self._clock()):
            return None
        return entry.value

    def invalidate(self, prefix: CacheKey) -> int:
        """Drop every entry whose key starts with `prefix`"""
        self._epoch += 1
        if self._inflight:
            self._invalidated_at[prefix] = self._epoch

        stale = [key for key in self._entries if key_matches(key, prefix)]
        for key in stale:
            del self._entries[key]
        return len(stale)

    def clear(self) -> None:
        self.invalidate(())

    def _invalidated_since(self, key: CacheKey, epoch: int) -> bool:
        return any(
            at > epoch and key_matches(key, prefix)
            for prefix, at in self._invalidated_at.items()
        )

    def _release(self, epoch: int) -> None:
        self._inflight[epoch] -= 1
        if not self._inflight[epoch]:
            del self._inflight[epoch]

        # Keep only records newer than the oldest running read
        if not self._inflight:
            self._invalidated_at.clear()
            return
        oldest = min(self._inflight)
        for prefix in [p for p, at in self._invalidated_at.items() if at <= oldest]:
            del self._invalidated_at[prefix]

    def __contains__(self, key: CacheKey) -> bool:
        entry = self._entries.get(key)
        return entry is not None and entry.is_fresh(self._clock())

    def __len__(self) -> int:
        return len(self._entries)
