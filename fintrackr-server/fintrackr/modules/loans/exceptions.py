"""Loan domain specific exceptions."""

from fintrackr.modules.common import DomainError


class LoanError(DomainError):
    """Base class for loan errors."""


class LoanNotFoundError(LoanError):
    """Raised when the loan does not exist or is not visible to the owner."""
