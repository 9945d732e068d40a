"""Tests for the mock merchant HTTP routes."""

from datetime import datetime, timedelta, timezone

import httpx
import jwt
import pytest

from merchant.config import MerchantSettings
from merchant.main import create_app
from tests.fakes import ADMIN_ID, TEST_SECRET

CHECKOUT_BODY = {
    "customer_name": "Alice",
    "customer_email": "alice@example.com",
    "shipping_address": "1 Rabbit Hole",
}


@pytest.fixture
def seeded_app():
    return create_app(
        MerchantSettings(admin_users=ADMIN_ID, jwt_secret=TEST_SECRET, seed_catalog=True)
    )


@pytest.fixture
async def http(seeded_app):
    transport = httpx.ASGITransport(app=seeded_app)
    async with httpx.AsyncClient(transport=transport, base_url="http://merchant.test") as client:
        yield client


async def _login(http: httpx.AsyncClient, user_id: str) -> dict[str, str]:
    response = await http.post("/api/auth/token", json={"user_id": user_id})
    assert response.status_code == 200
    return {"Authorization": f"Bearer {response.json()['access_token']}"}


async def test_health(http):
    response = await http.get("/health")
    assert response.json()["status"] == "healthy"


async def test_seeded_catalog_is_public(http):
    response = await http.get("/api/products")
    assert response.status_code == 200
    products = response.json()
    assert {p["id"] for p in products} >= {"prod-001", "prod-005"}
    assert all(isinstance(p["price"], int) for p in products)


class TestAuthentication:

    async def test_anonymous_cart_is_unauthorized(self, http):
        response = await http.get("/api/cart")
        assert response.status_code == 401

    async def test_garbage_token(self, http):
        response = await http.get("/api/products", headers={"Authorization": "Bearer nope"})
        assert response.status_code == 401

    async def test_unsupported_scheme(self, http):
        response = await http.get("/api/products", headers={"Authorization": "Basic abc"})
        assert response.status_code == 401

    async def test_expired_token(self, http):
        past = datetime.now(timezone.utc) - timedelta(hours=2)
        token = jwt.encode(
            {"sub": "alice", "iat": int(past.timestamp()), "exp": int(past.timestamp()) + 60},
            TEST_SECRET,
            algorithm="HS256",
        )
        response = await http.get("/api/cart", headers={"Authorization": f"Bearer {token}"})
        assert response.status_code == 401
        assert response.json()["detail"] == "Session expired, please sign in again"

    async def test_token_signed_with_other_secret(self, http):
        token = jwt.encode({"sub": ADMIN_ID}, "x" * 40, algorithm="HS256")
        response = await http.delete(
            "/api/products/prod-001", headers={"Authorization": f"Bearer {token}"}
        )
        assert response.status_code == 401

    async def test_user_cannot_create_product(self, http):
        headers = await _login(http, "alice")
        response = await http.post(
            "/api/products", json={"name": "X", "price": 1}, headers=headers
        )
        assert response.status_code == 403


class TestCart:

    async def test_set_quantity_replaces(self, http):
        headers = await _login(http, "alice")
        await http.put("/api/cart/items/prod-001", json={"quantity": 2}, headers=headers)
        await http.put("/api/cart/items/prod-001", json={"quantity": 5}, headers=headers)

        response = await http.get("/api/cart", headers=headers)
        assert response.json() == [{"product_id": "prod-001", "quantity": 5}]

    async def test_unknown_product(self, http):
        headers = await _login(http, "alice")
        response = await http.put(
            "/api/cart/items/prod-404", json={"quantity": 1}, headers=headers
        )
        assert response.status_code == 404

    async def test_zero_quantity_rejected(self, http):
        headers = await _login(http, "alice")
        response = await http.put(
            "/api/cart/items/prod-001", json={"quantity": 0}, headers=headers
        )
        assert response.status_code == 422

    async def test_remove_absent_item_is_noop(self, http):
        headers = await _login(http, "alice")
        response = await http.delete("/api/cart/items/prod-002", headers=headers)
        assert response.status_code == 204


class TestCheckout:

    async def test_empty_cart(self, http):
        headers = await _login(http, "alice")
        response = await http.post("/api/checkout", json=CHECKOUT_BODY, headers=headers)
        assert response.status_code == 400
        assert response.json()["detail"] == "Cart is empty"

    async def test_creates_order_and_clears_cart(self, http):
        headers = await _login(http, "alice")
        await http.put("/api/cart/items/prod-005", json={"quantity": 2}, headers=headers)

        response = await http.post("/api/checkout", json=CHECKOUT_BODY, headers=headers)

        assert response.status_code == 200
        order_id = response.json()["order_id"]
        assert order_id.startswith("ORD-")
        assert (await http.get("/api/cart", headers=headers)).json() == []

        order = (await http.get(f"/api/orders/{order_id}", headers=headers)).json()
        assert order["total"] == 2 * 2499
        assert order["user_id"] == "alice"

    async def test_missing_product_leaves_cart(self, http):
        alice = await _login(http, "alice")
        admin = await _login(http, ADMIN_ID)
        await http.put("/api/cart/items/prod-003", json={"quantity": 1}, headers=alice)
        await http.delete("/api/products/prod-003", headers=admin)

        response = await http.post("/api/checkout", json=CHECKOUT_BODY, headers=alice)

        assert response.status_code == 409
        cart = (await http.get("/api/cart", headers=alice)).json()
        assert cart == [{"product_id": "prod-003", "quantity": 1}]


class TestAccount:

    async def test_guest_role(self, http):
        response = await http.get("/api/account/role")
        assert response.json() == {"role": "guest"}

    async def test_profile_null_until_saved(self, http):
        headers = await _login(http, "alice")
        assert (await http.get("/api/account/profile", headers=headers)).json() is None

        await http.put("/api/account/profile", json={"name": "Alice"}, headers=headers)

        response = await http.get("/api/account/profile", headers=headers)
        assert response.json() == {"name": "Alice"}
