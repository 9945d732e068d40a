"""Tests for invalidation keys and the bus."""

from storefront.core.events import (
    ALL_ORDERS,
    MY_ORDERS,
    ORDERS,
    InvalidationBus,
    key_matches,
    order_key,
    product_key,
)


class TestKeyMatching:

    def test_exact_key_matches(self):
        assert key_matches(product_key("p1"), product_key("p1"))

    def test_prefix_matches_children(self):
        assert key_matches(MY_ORDERS, ORDERS)
        assert key_matches(ALL_ORDERS, ORDERS)
        assert key_matches(order_key("ORD-1"), ORDERS)

    def test_other_ids_do_not_match(self):
        assert not key_matches(product_key("p1"), product_key("p2"))

    def test_empty_prefix_matches_everything(self):
        assert key_matches(product_key("p1"), ())


class TestBus:

    def test_every_subscriber_receives_every_key(self):
        bus = InvalidationBus()
        first, second = [], []
        bus.subscribe(first.append)
        bus.subscribe(second.append)

        bus.publish(ORDERS, product_key("p1"))

        assert first == [ORDERS, product_key("p1")]
        assert second == first

    def test_unsubscribe(self):
        bus = InvalidationBus()
        received = []
        bus.subscribe(received.append)
        bus.unsubscribe(received.append)
        bus.publish(ORDERS)
        assert received == []
