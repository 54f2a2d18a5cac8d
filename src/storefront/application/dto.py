"""Data Transfer Objects - plain containers that cross layer boundaries.

DTOs carry preformatted values to the CLI so the presentation layer
never touches domain objects directly.
"""

from __future__ import annotations

from dataclasses import dataclass

from storefront.domain.model.cart import CartLine
from storefront.domain.model.item import Item
from storefront.domain.model.order import Order


@dataclass(frozen=True)
class ItemDTO:
    """Output: a catalog entry."""

    id: str
    name: str
    unit_price: str  # formatted, e.g. "₱32.00"


@dataclass(frozen=True)
class CartLineDTO:
    """Output: a single cart or order line."""

    item_id: str
    item_name: str
    unit_price: str
    quantity: int
    line_total: str


@dataclass(frozen=True)
class CartDTO:
    lines: list[CartLineDTO]
    total: str
    capacity: int

    @property
    def is_empty(self) -> bool:
        return not self.lines


@dataclass(frozen=True)
class OrderDTO:
    """Output: a completed order as displayed in the order history."""

    id: int
    payment_method: str
    lines: list[CartLineDTO]
    total: str
    created_at: str


# --- Mapping ------------------------------------------------------------------


def to_item_dto(item: Item) -> ItemDTO:
    return ItemDTO(id=item.id, name=item.name, unit_price=str(item.unit_price))


def to_line_dto(line: CartLine) -> CartLineDTO:
    return CartLineDTO(
        item_id=line.item.id,
        item_name=line.item.name,
        unit_price=str(line.item.unit_price),
        quantity=line.quantity.value,
        line_total=str(line.line_total),
    )


def to_order_dto(order: Order) -> OrderDTO:
    return OrderDTO(
        id=order.order_id,
        payment_method=order.payment_method,
        lines=[to_line_dto(line) for line in order.lines],
        total=str(order.total),
        created_at=order.created_at.strftime("%Y-%m-%d %H:%M UTC"),
    )
