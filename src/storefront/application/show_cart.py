"""Application service: Show Cart use case (query)."""

from __future__ import annotations

from storefront.application.dto import CartDTO, to_line_dto
from storefront.domain.model.cart import Cart


class ShowCartHandler:

    def handle(self, cart: Cart) -> CartDTO:
        return CartDTO(
            lines=[to_line_dto(line) for line in cart.lines],
            total=str(cart.total()),
            capacity=cart.capacity,
        )
