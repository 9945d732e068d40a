"""Shared fixtures.

Every test gets a fresh mock merchant app. Storefront clients talk to it
in-process through httpx.ASGITransport, so requests run the real routes.
"""

import httpx
import pytest

from merchant.config import MerchantSettings
from merchant.main import create_app
from storefront import Storefront
from storefront.models import ProductFields
from tests.fakes import ADMIN_ID, TEST_SECRET, CountingTransport, client_settings


@pytest.fixture
def merchant_settings():
    return MerchantSettings(
        admin_users=ADMIN_ID,
        seed_catalog=False,
        jwt_secret=TEST_SECRET,
    )


@pytest.fixture
def merchant_app(merchant_settings):
    return create_app(merchant_settings)


@pytest.fixture
def alice_transport(merchant_app):
    return CountingTransport(httpx.ASGITransport(app=merchant_app))


@pytest.fixture
async def alice(alice_transport):
    """Signed-in regular user."""
    async with Storefront(settings=client_settings(), transport=alice_transport) as shop:
        await shop.session.authenticate("alice")
        alice_transport.reset()
        yield shop


@pytest.fixture
async def bob(merchant_app):
    """A second regular user."""
    transport = httpx.ASGITransport(app=merchant_app)
    async with Storefront(settings=client_settings(), transport=transport) as shop:
        await shop.session.authenticate("bob")
        yield shop


@pytest.fixture
def admin_transport(merchant_app):
    return CountingTransport(httpx.ASGITransport(app=merchant_app))


@pytest.fixture
async def admin(admin_transport):
    """Signed-in admin."""
    async with Storefront(settings=client_settings(), transport=admin_transport) as shop:
        await shop.session.authenticate(ADMIN_ID)
        admin_transport.reset()
        yield shop


@pytest.fixture
def guest_transport(merchant_app):
    return CountingTransport(httpx.ASGITransport(app=merchant_app))


@pytest.fixture
async def guest(guest_transport):
    """Not signed in."""
    async with Storefront(settings=client_settings(), transport=guest_transport) as shop:
        yield shop


@pytest.fixture
async def products(admin) -> dict[str, str]:
    """Widget at $15.00 and Gadget at $25.00; returns name -> id."""
    widget = await admin.admin.create_product(
        ProductFields(name="Widget", price=1500, description="A widget", image_ref="w.png")
    )
    gadget = await admin.admin.create_product(
        ProductFields(name="Gadget", price=2500, description="A gadget", image_ref="g.png")
    )
    return {"Widget": widget, "Gadget": gadget}
