"""
Backend API Client

HTTP client for the authoritative storefront backend.
Maps HTTP failures onto the storefront error taxonomy.
"""

import logging
from typing import Optional, Any

import httpx

from ..core.errors import (
    BackendUnavailable,
    Forbidden,
    NotAuthenticated,
    NotFound,
    RequestRejected,
)
from ..models import CartLine, Order, Product, ProductFields, UserProfile, UserRole

logger = logging.getLogger(__name__)


class BackendClient:
    """
    Client for the storefront backend API.

    One instance per session; the bearer token set through
    `set_access_token` identifies the caller on every request.
    """

    def __init__(
        self,
        base_url: str,
        timeout: float = 30.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Initialize backend client.

        Args:
            base_url: Base URL of the backend API
            timeout: Per-request timeout in seconds
            transport: Optional httpx transport (e.g. ASGITransport in tests)
        """
        self.base_url = base_url.rstrip("/")
        self._http_client = httpx.AsyncClient(
            base_url=self.base_url,
            timeout=timeout,
            transport=transport,
        )
        self._access_token: Optional[str] = None

    async def close(self) -> None:
        """Close HTTP client"""
        await self._http_client.aclose()

    def set_access_token(self, token: Optional[str]) -> None:
        self._access_token = token

    def _generate_headers(self) -> dict[str, str]:
        """Generate headers including the bearer token if available"""
        headers = {
            "Content-Type": "application/json",
            "Accept": "application/json",
        }
        if self._access_token:
            headers["Authorization"] = f"Bearer {self._access_token}"
        return headers

    async def _request(
        self,
        method: str,
        path: str,
        body: Optional[dict] = None,
    ) -> Any:
        """Make an HTTP request and decode the JSON response"""
        try:
            response = await self._http_client.request(
                method=method,
                url=path,
                headers=self._generate_headers(),
                json=body,
            )
        except httpx.TransportError as e:
            logger.error(f"Request failed: {method} {path} - {e!r}")
            raise BackendUnavailable(f"{method} {path} could not complete") from e

        if response.status_code >= 400:
            logger.error(f"Request failed: {response.status_code} - {response.text}")
            raise self._error_for(response)

        if response.status_code == 204 or not response.content:
            return None
        return response.json()

    @staticmethod
    def _error_for(response: httpx.Response) -> Exception:
        """Translate an error response into a storefront exception"""
        try:
            payload = response.json()
        except ValueError:
            payload = None
        detail = payload.get("detail") if isinstance(payload, dict) else None
        if detail is None:
            message = response.text or response.reason_phrase
        else:
            message = detail if isinstance(detail, str) else str(detail)
        status = response.status_code

        if status == 401:
            return NotAuthenticated(message)
        if status == 403:
            return Forbidden(message)
        if status == 404:
            return NotFound(message)
        if status >= 500:
            return BackendUnavailable(message)
        return RequestRejected(message, status_code=status)

    # ==================== Identity APIs ====================

    async def issue_token(self, user_id: str) -> str:
        """Obtain a bearer token for `user_id` (development login)"""
        data = await self._request("POST", "/api/auth/token", body={"user_id": user_id})
        return data["access_token"]

    # ==================== Product APIs ====================

    async def list_products(self) -> list[Product]:
        """Get the full catalog"""
        data = await self._request("GET", "/api/products")
        return [Product.model_validate(item) for item in data]

    async def get_product(self, product_id: str) -> Product:
        """Get product details"""
        data = await self._request("GET", f"/api/products/{product_id}")
        return Product.model_validate(data)

    async def add_product(self, fields: ProductFields) -> str:
        """Create a product; returns the backend-assigned id"""
        data = await self._request("POST", "/api/products", body=fields.model_dump())
        return data["id"]

    async def update_product(self, product_id: str, fields: ProductFields) -> None:
        await self._request("PUT", f"/api/products/{product_id}", body=fields.model_dump())

    async def delete_product(self, product_id: str) -> None:
        await self._request("DELETE", f"/api/products/{product_id}")

    # ==================== Cart APIs ====================

    async def get_cart(self) -> list[CartLine]:
        """Get the caller's cart lines"""
        data = await self._request("GET", "/api/cart")
        return [CartLine.model_validate(item) for item in data]

    async def add_to_cart(self, product_id: str, quantity: int) -> None:
        """Set the quantity of a product in the cart"""
        await self._request(
            "PUT",
            f"/api/cart/items/{product_id}",
            body={"quantity": quantity},
        )

    async def remove_from_cart(self, product_id: str) -> None:
        await self._request("DELETE", f"/api/cart/items/{product_id}")

    async def clear_cart(self) -> None:
        await self._request("DELETE", "/api/cart")

    # ==================== Checkout APIs ====================

    async def checkout(
        self,
        customer_name: str,
        customer_email: str,
        shipping_address: str,
    ) -> str:
        """
        Convert the caller's server-side cart into an order.

        The cart contents are not sent; the backend reads its own cart.
        """
        data = await self._request(
            "POST",
            "/api/checkout",
            body={
                "customer_name": customer_name,
                "customer_email": customer_email,
                "shipping_address": shipping_address,
            },
        )
        return data["order_id"]

    # ==================== Order APIs ====================

    async def get_order(self, order_id: str) -> Order:
        """Get order details"""
        data = await self._request("GET", f"/api/orders/{order_id}")
        return Order.model_validate(data)

    async def list_my_orders(self) -> list[Order]:
        data = await self._request("GET", "/api/orders/mine")
        return [Order.model_validate(item) for item in data]

    async def list_all_orders(self) -> list[Order]:
        data = await self._request("GET", "/api/orders")
        return [Order.model_validate(item) for item in data]

    # ==================== Account APIs ====================

    async def get_caller_role(self) -> UserRole:
        data = await self._request("GET", "/api/account/role")
        return UserRole(data["role"])

    async def get_caller_profile(self) -> Optional[UserProfile]:
        data = await self._request("GET", "/api/account/profile")
        return UserProfile.model_validate(data) if data else None

    async def save_caller_profile(self, profile: UserProfile) -> None:
        await self._request("PUT", "/api/account/profile", body=profile.model_dump())

    async def assign_role(self, user_id: str, role: UserRole) -> None:
        await self._request(
            "PUT",
            f"/api/account/roles/{user_id}",
            body={"role": role.value},
        )
