"""Test transports and client settings.

Wrap the in-process ASGI transport to count requests, or replace it to
simulate an unreachable or failing backend.
"""

from __future__ import annotations

from typing import Optional

import httpx

from storefront.core.config import Settings

ADMIN_ID = "admin-1"
TEST_SECRET = "test-secret-with-at-least-thirty-two-bytes"


class CountingTransport(httpx.AsyncBaseTransport):
    """Forwards to an inner transport and records every request."""

    def __init__(self, inner: httpx.AsyncBaseTransport) -> None:
        self._inner = inner
        self.requests: list[httpx.Request] = []

    async def handle_async_request(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return await self._inner.handle_async_request(request)

    def count(self, method: Optional[str] = None, path: Optional[str] = None) -> int:
        return sum(
            1 for r in self.requests
            if (method is None or r.method == method)
            and (path is None or r.url.path == path)
        )

    def reset(self) -> None:
        self.requests.clear()

    async def aclose(self) -> None:
        await self._inner.aclose()


class UnreachableTransport(httpx.AsyncBaseTransport):
    """Every request fails as if the backend were down."""

    def __init__(self) -> None:
        self.attempts = 0

    async def handle_async_request(self, request: httpx.Request) -> httpx.Response:
        self.attempts += 1
        raise httpx.ConnectError("Connection refused", request=request)


def status_transport(status_code: int, detail: Optional[str] = None) -> httpx.MockTransport:
    """Transport answering every request with the given status."""

    def handler(request: httpx.Request) -> httpx.Response:
        if detail is None:
            return httpx.Response(status_code)
        return httpx.Response(status_code, json={"detail": detail})

    return httpx.MockTransport(handler)


def client_settings(**overrides) -> Settings:
    """Client settings pointing at the in-process merchant."""
    values = {
        "backend_base_url": "http://merchant.test",
        "query_cache_ttl": 30.0,
        "asset_base_url": "https://cdn.test/assets",
    }
    values.update(overrides)
    return Settings(**values)
