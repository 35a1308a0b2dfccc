"""Transaction domain specific exceptions."""

from fintrackr.modules.common import DomainError


class TransactionError(DomainError):
    """Base class for income/expense transaction errors."""


class TransactionNotFoundError(TransactionError):
    """Raised when the transaction does not exist or is not visible to the owner."""
