"""Tests for order lookup and order visibility."""

import pytest

from storefront.core.errors import Forbidden, NotAuthenticated, NotFound

FORM = {
    "customer_name": "Alice Liddell",
    "customer_email": "alice@example.com",
    "shipping_address": "1 Rabbit Hole",
}


async def _place_order(shop, product_id: str, quantity: int = 1) -> str:
    await shop.cart.add_to_cart(product_id, quantity)
    lines = await shop.cart.get_cart()
    return await shop.new_checkout().submit(FORM, lines)


class TestOrderSnapshot:

    async def test_unaffected_by_price_change(self, alice, admin, products):
        order_id = await _place_order(alice, products["Widget"], 3)
        await admin.admin.update_product(
            products["Widget"],
            {"name": "Widget", "price": 9900, "description": "", "image_ref": ""},
        )
        # Bypass the client cache: the backend copy must be frozen too
        order = await alice.client.get_order(order_id)
        assert order.total == 3 * 1500

    async def test_unaffected_by_product_deletion(self, alice, admin, products):
        order_id = await _place_order(alice, products["Gadget"], 2)
        await admin.admin.delete_product(products["Gadget"])

        order = await alice.client.get_order(order_id)
        assert [(i.product_id, i.quantity) for i in order.items] == [
            (products["Gadget"], 2)
        ]
        assert order.total == 5000

    async def test_order_is_immutable(self, alice, products):
        order_id = await _place_order(alice, products["Widget"])
        order = await alice.orders.get_order(order_id)
        with pytest.raises(Exception):
            order.total = 0


class TestVisibility:

    async def test_my_orders_only_lists_own(self, alice, bob, products):
        mine = await _place_order(alice, products["Widget"])
        theirs = await _place_order(bob, products["Gadget"])

        assert [o.id for o in await alice.orders.list_my_orders()] == [mine]
        assert [o.id for o in await bob.orders.list_my_orders()] == [theirs]

    async def test_other_users_order_reads_as_not_found(self, alice, bob, products):
        order_id = await _place_order(alice, products["Widget"])
        with pytest.raises(NotFound):
            await bob.orders.get_order(order_id)

    async def test_unknown_order(self, alice):
        with pytest.raises(NotFound):
            await alice.orders.get_order("ORD-NOPE0000")

    async def test_admin_reads_any_order(self, alice, admin, products):
        order_id = await _place_order(alice, products["Widget"])
        order = await admin.orders.get_order(order_id)
        assert order.user_id == "alice"

    async def test_list_all_orders_requires_admin(self, alice, bob, admin, products):
        first = await _place_order(alice, products["Widget"])
        second = await _place_order(bob, products["Gadget"])

        with pytest.raises(Forbidden):
            await alice.orders.list_all_orders()

        ids = {o.id for o in await admin.orders.list_all_orders()}
        assert ids == {first, second}

    async def test_guest_cannot_list_orders(self, guest):
        with pytest.raises(NotAuthenticated):
            await guest.orders.list_my_orders()


class TestCaching:

    async def test_order_read_is_cached(self, alice, alice_transport, products):
        order_id = await _place_order(alice, products["Widget"])
        alice_transport.reset()

        await alice.orders.get_order(order_id)
        await alice.orders.get_order(order_id)

        assert alice_transport.count("GET", f"/api/orders/{order_id}") == 1

    async def test_failed_read_is_not_cached(self, alice, alice_transport):
        for _ in range(2):
            with pytest.raises(NotFound):
                await alice.orders.get_order("ORD-MISSING0")
        assert alice_transport.count("GET", "/api/orders/ORD-MISSING0") == 2
