"""Transfer domain specific exceptions."""

from fintrackr.modules.common import DomainError


class TransferError(DomainError):
    """Base class for transfer domain errors."""


class TransferNotFoundError(TransferError):
    """Raised when the transfer does not exist or is not visible to the owner."""
