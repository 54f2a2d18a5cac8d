"""JSON-file-backed catalog seed.

The catalog is read-only at runtime, so this module only loads. When the
seed file does not exist yet it is created with the default products.
"""

from __future__ import annotations

import json
from pathlib import Path

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.catalog import Catalog
from storefront.domain.model.item import Item
from storefront.domain.model.value_objects import Money

DEFAULT_PRODUCTS: list[dict] = [
    {"id": "A1B2C3", "name": "C2 Green Tea", "price": "32.00"},
    {"id": "X9Y8Z7", "name": "Zesto Juice Drink", "price": "14.00"},
    {"id": "P4Q5R6", "name": "Cobra Energy Drink", "price": "29.00"},
    {"id": "M7N8O9", "name": "1.5L Royal", "price": "75.00"},
    {"id": "J1K2L3", "name": "Milo", "price": "12.50"},
]


class JsonCatalogSource:
    """Reads ``[{"id", "name", "price", "currency"?}, ...]``.

    Malformed content raises ValidationError. OSErrors from reading or
    creating the file propagate.
    """

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._ensure_file()

    def load(self) -> Catalog:
        try:
            raw = json.loads(self._file_path.read_text(encoding="utf-8"))
        except json.JSONDecodeError as exc:
            raise ValidationError(f"Catalog seed {self._file_path} is not valid JSON") from exc
        if not isinstance(raw, list):
            raise ValidationError(f"Catalog seed {self._file_path} must be a JSON list")
        return Catalog(self._to_domain(entry) for entry in raw)

    @staticmethod
    def _to_domain(entry: object) -> Item:
        if not isinstance(entry, dict):
            raise ValidationError(f"Catalog entry must be an object, got {entry!r}")
        try:
            item_id, name, price = entry["id"], entry["name"], entry["price"]
        except KeyError as exc:
            raise ValidationError(f"Catalog entry is missing field {exc}") from exc
        if not isinstance(item_id, str) or not isinstance(name, str):
            raise ValidationError(f"Catalog entry {entry!r} needs a string 'id' and 'name'")
        return Item(
            id=item_id,
            name=name,
            unit_price=Money.of(price, entry.get("currency", "PHP")),
        )

    def _ensure_file(self) -> None:
        if not self._file_path.exists():
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.write_text(
                json.dumps(DEFAULT_PRODUCTS, indent=2) + "\n", encoding="utf-8"
            )
