"""Application service: List Products use case (query)."""

from __future__ import annotations

from storefront.application.dto import ItemDTO, to_item_dto
from storefront.domain.model.catalog import Catalog


class ListProductsHandler:

    def __init__(self, catalog: Catalog) -> None:
        self._catalog = catalog

    def handle(self) -> list[ItemDTO]:
        return [to_item_dto(item) for item in self._catalog.list_all()]
