"""In-memory implementation of OrderLedger.

Orders live for the lifetime of the process only; the durable trace is
the audit log.
"""

from __future__ import annotations

from storefront.domain.exceptions import CapacityExceededError
from storefront.domain.model.order import Order
from storefront.domain.repository.order_ledger import OrderLedger

DEFAULT_LEDGER_CAPACITY = 10


class InMemoryOrderLedger(OrderLedger):

    def __init__(self, capacity: int = DEFAULT_LEDGER_CAPACITY) -> None:
        self._capacity = capacity
        self._orders: list[Order] = []
        self._next_id = 1

    @property
    def capacity(self) -> int:
        return self._capacity

    # --- OrderLedger interface ------------------------------------------------

    def next_id(self) -> int:
        order_id = self._next_id
        self._next_id += 1
        return order_id

    def peek_next_id(self) -> int:
        return self._next_id

    def append(self, order: Order) -> None:
        if self.is_full():
            raise CapacityExceededError("Orders database")
        self._orders.append(order)

    def all(self) -> tuple[Order, ...]:
        return tuple(self._orders)

    def count(self) -> int:
        return len(self._orders)

    def is_full(self) -> bool:
        return len(self._orders) >= self._capacity
