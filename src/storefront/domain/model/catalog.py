"""Catalog - read-only registry of purchasable items."""

from __future__ import annotations

from typing import Iterable

from storefront.domain.exceptions import NotFoundError, ValidationError
from storefront.domain.model.item import Item


class Catalog:
    """Fixed set of items, keyed by case-insensitive identifier.

    Populated once at startup from seed data. There is deliberately no
    add/remove API.
    """

    def __init__(self, items: Iterable[Item]) -> None:
        self._items: dict[str, Item] = {}
        for item in items:
            if item.key in self._items:
                raise ValidationError(f"Duplicate item ID in catalog: '{item.id}'")
            self._items[item.key] = item

    def lookup(self, item_id: str) -> Item:
        item = self._items.get(item_id.strip().casefold())
        if item is None:
            raise NotFoundError(f"Product with ID '{item_id}' not found!")
        return item

    def list_all(self) -> list[Item]:
        return list(self._items.values())

    def __len__(self) -> int:
        return len(self._items)
