"""Tests for presentation helpers."""

import pytest

from storefront.core.errors import (
    BackendUnavailable,
    CheckoutRejected,
    EmptyCart,
    Forbidden,
    NotAuthenticated,
    NotFound,
    ValidationFailed,
)
from storefront.formatting import error_message, format_price, parse_price
from storefront.services.assets import UrlAssetResolver


class TestFormatPrice:

    def test_two_decimals(self):
        assert format_price(1999) == "$19.99"
        assert format_price(500) == "$5.00"
        assert format_price(0) == "$0.00"
        assert format_price(7) == "$0.07"

    def test_thousands_separator(self):
        assert format_price(123456) == "$1,234.56"


class TestParsePrice:

    def test_major_units_to_cents(self):
        assert parse_price("19.99") == 1999
        assert parse_price("5") == 500
        assert parse_price("$12.50") == 1250

    def test_rounds_half_up(self):
        assert parse_price("0.125") == 13
        assert parse_price("0.124") == 12

    @pytest.mark.parametrize("text", ["", "  ", "abc", "-1", "1,000", "nan"])
    def test_rejects(self, text):
        with pytest.raises(ValidationFailed) as exc_info:
            parse_price(text)
        assert "price" in exc_info.value.errors


class TestErrorMessage:

    def test_validation_lists_field_messages(self):
        error = ValidationFailed({"customer_email": "Invalid email address"})
        assert error_message(error, "place order") == "Invalid email address"

    def test_action_scoped_messages(self):
        assert error_message(EmptyCart("x"), "place order") == (
            "Could not place order: your cart is empty"
        )
        assert error_message(NotAuthenticated("x"), "add to cart") == (
            "Please sign in to add to cart"
        )
        assert error_message(Forbidden("x"), "delete product") == (
            "You are not allowed to delete product"
        )
        assert "no longer exists" in error_message(NotFound("x"), "view order")

    def test_checkout_rejection_mentions_cart(self):
        message = error_message(CheckoutRejected("Product p1 is no longer available"), "place order")
        assert "Product p1 is no longer available" in message
        assert "cart was not changed" in message

    def test_backend_unavailable_is_generic(self):
        assert error_message(BackendUnavailable("x"), "anything") == (
            "Something went wrong. Please try again"
        )


class TestAssetResolver:

    def test_relative_ref_joins_base(self):
        resolver = UrlAssetResolver("https://cdn.test/assets/")
        assert resolver.resolve("images/a b.jpg") == "https://cdn.test/assets/images/a%20b.jpg"

    def test_absolute_url_passes_through(self):
        resolver = UrlAssetResolver(None)
        assert resolver.resolve("https://img.test/x.png") == "https://img.test/x.png"

    def test_unresolvable(self):
        assert UrlAssetResolver(None).resolve("x.png") is None
        assert UrlAssetResolver("https://cdn.test").resolve("") is None
