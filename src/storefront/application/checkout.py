"""Application service: Checkout use case.

This is the only place that coordinates the cart, a payment method, the
order ledger and the audit log. The order of the steps matters:

1. Settle the cart total with the chosen payment method.
2. Refuse if the ledger is full.
3. Allocate an order ID (only once payment went through).
4. Snapshot the cart into an Order and append it to the ledger.
5. Write the audit line, best effort.

Emptiness of the cart is checked by the caller, and so is clearing it
afterwards.
"""

from __future__ import annotations

import logging

from storefront.domain.exceptions import CapacityExceededError, PaymentFailedError
from storefront.domain.model.cart import Cart
from storefront.domain.model.order import Order
from storefront.domain.model.payment import PaymentStrategy
from storefront.domain.model.value_objects import Money
from storefront.domain.repository.audit_log import AuditLog
from storefront.domain.repository.order_ledger import OrderLedger

log = logging.getLogger(__name__)


class CheckoutHandler:

    def __init__(self, ledger: OrderLedger, audit_log: AuditLog) -> None:
        self._ledger = ledger
        self._audit_log = audit_log

    def handle(self, cart: Cart, payment: PaymentStrategy) -> Order:
        amount = cart.total()
        self._settle(payment, amount)

        if self._ledger.is_full():
            raise CapacityExceededError("Orders database")

        order = Order.create(
            order_id=self._ledger.next_id(),
            lines=cart.lines,
            payment_method=payment.label,
        )
        self._ledger.append(order)
        log.info("Order #%d recorded (%s, %s)", order.order_id, order.total, order.payment_method)

        self._write_audit_line(order)
        return order

    # --- Internal helpers -----------------------------------------------------

    @staticmethod
    def _settle(payment: PaymentStrategy, amount: Money) -> None:
        try:
            settled = payment.settle(amount)
        except Exception:
            log.debug("Settlement via %s raised", payment.label, exc_info=True)
            raise PaymentFailedError(payment.label) from None
        if not settled:
            raise PaymentFailedError(payment.label)

    def _write_audit_line(self, order: Order) -> None:
        try:
            self._audit_log.record(order)
        except OSError as exc:
            log.warning("Could not write audit log for order #%d: %s", order.order_id, exc)
