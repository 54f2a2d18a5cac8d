"""Abstract append-only audit trail of completed orders."""

from __future__ import annotations

from abc import ABC, abstractmethod

from storefront.domain.model.order import Order


class AuditLog(ABC):

    @abstractmethod
    def record(self, order: Order) -> None:
        """Append one line for *order*. May raise OSError."""
