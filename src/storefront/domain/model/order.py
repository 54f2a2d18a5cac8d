"""Order - immutable record of one completed checkout."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Iterable

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.cart import CartLine
from storefront.domain.model.value_objects import Money


@dataclass(frozen=True)
class Order:
    """Snapshot of the cart at the moment it was paid for.

    ``total`` is derived from ``lines`` every time it is read; there is
    no stored total that could drift from the lines.
    """

    order_id: int
    lines: tuple[CartLine, ...]
    payment_method: str
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @staticmethod
    def create(order_id: int, lines: Iterable[CartLine], payment_method: str) -> Order:
        if order_id < 1:
            raise ValidationError(f"Order ID must be positive, got {order_id}")
        if not payment_method or not payment_method.strip():
            raise ValidationError("Payment method is required")
        return Order(order_id=order_id, lines=tuple(lines), payment_method=payment_method)

    @property
    def total(self) -> Money:
        result = Money.zero()
        for line in self.lines:
            result = result + line.line_total
        return result
