"""Domain-level exceptions.

Every failure a shopper can recover from is a DomainException, so the
CLI layer can catch them in one place, print a single line and keep the
session going.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A business rule or invariant was violated."""


class InvalidInputError(DomainException):
    """The shopper typed something that cannot be interpreted."""

    def __init__(self, detail: str) -> None:
        super().__init__(f"Invalid input: {detail}")


class NotFoundError(DomainException):
    """A requested entity does not exist."""


class CapacityExceededError(DomainException):
    """A bounded collection (cart or order ledger) is already full."""

    def __init__(self, collection: str) -> None:
        self.collection = collection
        super().__init__(f"{collection} is full. Cannot add more items.")


class PaymentFailedError(DomainException):
    """Settlement did not go through.

    Only the payment method label is kept; the underlying cause is not
    part of the message and is not chained.
    """

    def __init__(self, method_label: str) -> None:
        self.method_label = method_label
        super().__init__(f"Payment failed with method: {method_label}")
