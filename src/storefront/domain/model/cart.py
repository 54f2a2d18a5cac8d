"""Shopping cart for the active session.

The cart is the only mutable domain object: lines are appended while the
shopper browses and wiped after a successful checkout.
"""

from __future__ import annotations

from dataclasses import dataclass

from storefront.domain.exceptions import CapacityExceededError
from storefront.domain.model.item import Item
from storefront.domain.model.value_objects import Money, Quantity

DEFAULT_CART_CAPACITY = 10


@dataclass(frozen=True)
class CartLine:
    """One add-to-cart event: an item and how many of it."""

    item: Item
    quantity: Quantity

    @property
    def line_total(self) -> Money:
        return self.item.unit_price * self.quantity.value


class Cart:
    """Ordered, bounded collection of cart lines.

    Invariants:
    - never holds more than ``capacity`` lines
    - ``total()`` is the sum of every line total

    Adding the same item twice produces two lines; lines are not merged.
    """

    def __init__(self, capacity: int = DEFAULT_CART_CAPACITY) -> None:
        self._capacity = capacity
        self._lines: list[CartLine] = []

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def lines(self) -> tuple[CartLine, ...]:
        return tuple(self._lines)

    def add_line(self, item: Item, quantity: int) -> CartLine:
        """Append a new line, failing without side effects if the cart is full."""
        if len(self._lines) >= self._capacity:
            raise CapacityExceededError("Shopping cart")
        line = CartLine(item=item, quantity=Quantity(quantity))
        self._lines.append(line)
        return line

    def clear(self) -> None:
        self._lines.clear()

    def total(self) -> Money:
        result = Money.zero()
        for line in self._lines:
            result = result + line.line_total
        return result

    def is_empty(self) -> bool:
        return not self._lines

    def __len__(self) -> int:
        return len(self._lines)
