"""Plain-text, append-only audit log of completed orders."""

from __future__ import annotations

from pathlib import Path

from storefront.domain.model.order import Order
from storefront.domain.repository.audit_log import AuditLog


def format_entry(order: Order) -> str:
    return (
        f"[LOG] -> Order ID: {order.order_id} has been successfully "
        f"checked out and paid using {order.payment_method}"
    )


class FileAuditLog(AuditLog):
    """One free-text line per order. No header, no rotation.

    The file is opened and closed for every entry. OSErrors propagate;
    the checkout handler decides what to do with them.
    """

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path

    @property
    def file_path(self) -> Path:
        return self._file_path

    def record(self, order: Order) -> None:
        with self._file_path.open("a", encoding="utf-8") as fh:
            fh.write(format_entry(order) + "\n")
