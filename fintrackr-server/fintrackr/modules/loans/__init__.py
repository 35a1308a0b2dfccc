"""Exports for loans"""

from .exceptions import LoanError, LoanNotFoundError
from .models import (
    ACTIVE,
    BORROWED,
    COMPLETED,
    LENT,
    LOAN_STATUSES,
    LOAN_TYPES,
    Loan,
    LoanCreateInput,
    LoanSummary,
    LoanUpdateInput,
)
from .service import LoanService

__all__ = [
    "ACTIVE",
    "BORROWED",
    "COMPLETED",
    "LENT",
    "LOAN_STATUSES",
    "LOAN_TYPES",
    "Loan",
    "LoanCreateInput",
    "LoanError",
    "LoanNotFoundError",
    "LoanService",
    "LoanSummary",
    "LoanUpdateInput",
]
