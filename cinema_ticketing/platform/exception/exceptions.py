from enum import StrEnum


class CustomBaseError(Exception):
    """Base class for all custom exceptions - controls logging behavior in @Logger.io"""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class InvalidArgumentError(CustomBaseError, ValueError):
    """Raised when a value object is constructed from invalid input."""


class PurchaseRejectionReason(StrEnum):
    INVALID_ACCOUNT = 'invalid account'
    TICKET_LIMIT_EXCEEDED = 'ticket limit exceeded'
    ADULT_REQUIRED = 'adult required'
    UNKNOWN_CATEGORY = 'unknown category'


class InvalidPurchaseError(CustomBaseError):
    """A rejected purchase, tagged with the rule it broke.

    ``reason`` is the machine-readable tag, ``message`` the text shown to the buyer.
    """

    def __init__(self, reason: PurchaseRejectionReason, message: str | None = None) -> None:
        self.reason = reason
        super().__init__(message or str(reason))

    def __repr__(self) -> str:
        return f'{type(self).__name__}(reason={self.reason.name}, message={self.message!r})'
