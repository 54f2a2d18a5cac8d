"""Payment methods.

Settlement is simulated: every method reports success without talking to
any gateway. The checkout handler only depends on the ``PaymentStrategy``
protocol, so tests can pass in strategies that fail.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Protocol

from storefront.domain.exceptions import InvalidInputError
from storefront.domain.model.value_objects import Money

log = logging.getLogger(__name__)


class PaymentStrategy(Protocol):

    @property
    def label(self) -> str: ...

    def settle(self, amount: Money) -> bool: ...


class PaymentMethod(Enum):
    """The closed set of payment methods offered at checkout."""

    CASH = ("Cash", "cash")
    CARD = ("Credit / Debit Card", "credit/debit card")
    DIGITAL_WALLET = ("GCash", "GCash")

    def __init__(self, label: str, description: str) -> None:
        self._label = label
        self._description = description

    @property
    def label(self) -> str:
        return self._label

    def settlement_message(self, amount: Money) -> str:
        return f"Processing {self._description} payment of {amount}"

    def settle(self, amount: Money) -> bool:
        log.info("%s", self.settlement_message(amount))
        return True

    @classmethod
    def from_choice(cls, choice: int) -> PaymentMethod:
        """Map a 1-based menu number to a payment method."""
        members = list(cls)
        if not 1 <= choice <= len(members):
            raise InvalidInputError(
                f"Please enter a number between 1 and {len(members)}."
            )
        return members[choice - 1]
