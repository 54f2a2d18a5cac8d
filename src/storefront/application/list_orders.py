"""Application service: List Orders use case (query)."""

from __future__ import annotations

from storefront.application.dto import OrderDTO, to_order_dto
from storefront.domain.repository.order_ledger import OrderLedger


class ListOrdersHandler:

    def __init__(self, ledger: OrderLedger) -> None:
        self._ledger = ledger

    def handle(self) -> list[OrderDTO]:
        return [to_order_dto(order) for order in self._ledger.all()]
