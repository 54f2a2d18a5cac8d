"""Abstract store of completed orders.

Defined in the domain layer so the checkout handler never depends on
how orders are kept. The process owns exactly one ledger, built by the
composition root and injected wherever it is needed.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from storefront.domain.model.order import Order


class OrderLedger(ABC):

    @abstractmethod
    def next_id(self) -> int:
        """Allocate the next order ID. IDs are never handed out twice."""

    @abstractmethod
    def peek_next_id(self) -> int:
        """Return the ID ``next_id()`` would allocate, without allocating it."""

    @abstractmethod
    def append(self, order: Order) -> None:
        """Store a completed order, raising CapacityExceededError when full."""

    @abstractmethod
    def all(self) -> tuple[Order, ...]:
        """Every stored order, oldest first."""

    @abstractmethod
    def count(self) -> int:
        """Number of stored orders."""

    @abstractmethod
    def is_full(self) -> bool:
        """True if ``append`` would be rejected."""
