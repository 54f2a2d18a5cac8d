"""Item - a purchasable product in the catalog.

Items are created once when the catalog is seeded and never change
afterwards, so the dataclass is frozen.
"""

from __future__ import annotations

from dataclasses import dataclass

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.value_objects import Money


@dataclass(frozen=True)
class Item:
    """A catalog entry: identifier, display name and unit price."""

    id: str
    name: str
    unit_price: Money

    def __post_init__(self) -> None:
        if not self.id or not self.id.strip():
            raise ValidationError("Item ID is required")
        if not self.name or not self.name.strip():
            raise ValidationError(f"Item '{self.id}' needs a name")

    @property
    def key(self) -> str:
        """Normalised identifier used for case-insensitive lookups."""
        return self.id.strip().casefold()
