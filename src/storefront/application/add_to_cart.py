"""Application service: Add To Cart use case."""

from __future__ import annotations

from storefront.application.dto import CartLineDTO, ItemDTO, to_item_dto, to_line_dto
from storefront.domain.model.cart import Cart
from storefront.domain.model.catalog import Catalog


class AddToCartHandler:

    def __init__(self, catalog: Catalog) -> None:
        self._catalog = catalog

    def find(self, item_id: str) -> ItemDTO:
        """Check that *item_id* exists before asking for a quantity."""
        return to_item_dto(self._catalog.lookup(item_id))

    def handle(self, cart: Cart, item_id: str, quantity: int) -> CartLineDTO:
        """Resolve *item_id* against the catalog and append a cart line.

        Raises NotFoundError for an unknown ID, CapacityExceededError when
        the cart is full and ValidationError for a non-positive quantity.
        """
        item = self._catalog.lookup(item_id)
        line = cart.add_line(item, quantity)
        return to_line_dto(line)
