"""Integration tests for the cart and catalog use cases."""

import pytest

from storefront.application.add_to_cart import AddToCartHandler
from storefront.application.list_products import ListProductsHandler
from storefront.application.show_cart import ShowCartHandler
from storefront.domain.exceptions import CapacityExceededError, NotFoundError
from storefront.domain.model.cart import Cart
from tests.fakes import make_catalog


class TestAddToCart:

    def test_adds_line_by_case_insensitive_id(self):
        cart = Cart()
        dto = AddToCartHandler(make_catalog()).handle(cart, "x9y8z7", 3)
        assert dto.item_id == "X9Y8Z7"
        assert dto.item_name == "Zesto Juice Drink"
        assert dto.line_total == "₱42.00"
        assert len(cart) == 1

    def test_unknown_item_leaves_cart_unchanged(self):
        cart = Cart()
        with pytest.raises(NotFoundError):
            AddToCartHandler(make_catalog()).handle(cart, "nope", 1)
        assert cart.is_empty()

    def test_full_cart_rejected(self):
        cart = Cart(capacity=1)
        handler = AddToCartHandler(make_catalog())
        handler.handle(cart, "J1K2L3", 1)
        with pytest.raises(CapacityExceededError):
            handler.handle(cart, "J1K2L3", 1)

    def test_find_returns_item(self):
        dto = AddToCartHandler(make_catalog()).find("a1b2c3")
        assert dto.name == "C2 Green Tea"
        assert dto.unit_price == "₱32.00"


class TestShowCart:

    def test_empty_cart(self):
        dto = ShowCartHandler().handle(Cart(capacity=4))
        assert dto.is_empty
        assert dto.total == "₱0.00"
        assert dto.capacity == 4

    def test_lines_and_total(self):
        cart = Cart()
        handler = AddToCartHandler(make_catalog())
        handler.handle(cart, "A1B2C3", 2)
        handler.handle(cart, "X9Y8Z7", 1)

        dto = ShowCartHandler().handle(cart)

        assert [line.quantity for line in dto.lines] == [2, 1]
        assert dto.total == "₱78.00"


class TestListProducts:

    def test_lists_every_item_formatted(self):
        dtos = ListProductsHandler(make_catalog()).handle()
        assert [(d.id, d.unit_price) for d in dtos] == [
            ("A1B2C3", "₱32.00"),
            ("X9Y8Z7", "₱14.00"),
            ("J1K2L3", "₱12.50"),
        ]
