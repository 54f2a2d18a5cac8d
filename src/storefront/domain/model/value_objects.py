"""Value Objects shared across the domain.

Immutable, compared by value, and validated on construction so an
invalid amount or quantity can never be passed around.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation

from storefront.domain.exceptions import ValidationError

_CURRENCY_SYMBOLS = {"PHP": "₱", "USD": "$"}


@dataclass(frozen=True)
class Money:
    """Monetary amount with currency.

    Backed by Decimal so cart and order totals add up exactly. Only the
    operations a cart needs are defined: adding line totals together and
    scaling a unit price by a quantity.
    """

    amount: Decimal
    currency: str = "PHP"

    def __post_init__(self) -> None:
        if not isinstance(self.amount, Decimal):
            raise ValidationError(
                f"Money amount must be a Decimal, got {type(self.amount).__name__}"
            )
        if not self.amount.is_finite():
            raise ValidationError(f"Money amount must be a finite number, got {self.amount}")
        if self.amount < 0:
            raise ValidationError(f"Money amount cannot be negative, got {self.amount}")

    @staticmethod
    def zero(currency: str = "PHP") -> Money:
        return Money(Decimal("0.00"), currency)

    @staticmethod
    def of(amount: str | int | Decimal, currency: str = "PHP") -> Money:
        """Parse *amount* into Money; unparseable input is a ValidationError."""
        try:
            parsed = Decimal(str(amount))
        except (InvalidOperation, ValueError) as exc:
            raise ValidationError(f"Invalid money amount: {amount!r}") from exc
        return Money(parsed, currency)

    def __add__(self, other: Money) -> Money:
        if other.currency != self.currency:
            raise ValidationError(f"Cannot combine {self.currency} with {other.currency}")
        return Money(self.amount + other.amount, self.currency)

    def __mul__(self, factor: int) -> Money:
        if not isinstance(factor, int):
            raise TypeError(f"Can only multiply Money by int, got {type(factor).__name__}")
        return Money(self.amount * factor, self.currency)

    def __str__(self) -> str:
        symbol = _CURRENCY_SYMBOLS.get(self.currency, f"{self.currency} ")
        return f"{symbol}{self.amount:.2f}"


@dataclass(frozen=True)
class Quantity:
    """How many units of an item a cart line holds. Always positive."""

    value: int

    def __post_init__(self) -> None:
        # bool is an int subclass; True is not a quantity
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise ValidationError(
                f"Quantity must be a whole number, got {type(self.value).__name__}"
            )
        if self.value < 1:
            raise ValidationError(f"Quantity must be positive, got {self.value}")

    def __str__(self) -> str:
        return str(self.value)
