"""Unit tests for the read-only Catalog."""

import pytest

from storefront.domain.exceptions import NotFoundError, ValidationError
from storefront.domain.model.catalog import Catalog
from storefront.domain.model.item import Item
from storefront.domain.model.value_objects import Money
from tests.fakes import make_catalog


class TestCatalogLookup:

    def test_lookup_is_case_insensitive(self):
        catalog = make_catalog()
        assert catalog.lookup("a1b2c3") is catalog.lookup("A1B2C3")

    def test_lookup_ignores_surrounding_whitespace(self):
        catalog = make_catalog()
        assert catalog.lookup("  j1k2l3 ").name == "Milo"

    def test_unknown_id_raises(self):
        with pytest.raises(NotFoundError, match="Product with ID 'ZZZ' not found!"):
            make_catalog().lookup("ZZZ")


class TestCatalogContents:

    def test_list_all_keeps_seed_order(self):
        ids = [item.id for item in make_catalog().list_all()]
        assert ids == ["A1B2C3", "X9Y8Z7", "J1K2L3"]

    def test_list_all_is_a_copy(self):
        catalog = make_catalog()
        catalog.list_all().clear()
        assert len(catalog) == 3

    def test_duplicate_ids_rejected_regardless_of_case(self):
        with pytest.raises(ValidationError, match="Duplicate item ID"):
            Catalog([
                Item(id="abc", name="One", unit_price=Money.of("1")),
                Item(id="ABC", name="Two", unit_price=Money.of("2")),
            ])


class TestItem:

    def test_blank_id_rejected(self):
        with pytest.raises(ValidationError, match="Item ID is required"):
            Item(id="  ", name="Milo", unit_price=Money.of("12.50"))

    def test_blank_name_rejected(self):
        with pytest.raises(ValidationError, match="needs a name"):
            Item(id="J1K2L3", name="", unit_price=Money.of("12.50"))

    def test_free_item_allowed(self):
        item = Item(id="FREE01", name="Sample", unit_price=Money.of("0"))
        assert item.unit_price == Money.zero()
