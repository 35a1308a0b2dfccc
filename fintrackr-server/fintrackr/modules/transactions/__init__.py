"""Exports for income/expense transactions"""

from .exceptions import TransactionError, TransactionNotFoundError
from .models import (
    EXPENSE,
    INCOME,
    TRANSACTION_TYPES,
    Transaction,
    TransactionCreateInput,
    TransactionFilter,
    TransactionUpdateInput,
)
from .service import TransactionService

__all__ = [
    "EXPENSE",
    "INCOME",
    "TRANSACTION_TYPES",
    "Transaction",
    "TransactionCreateInput",
    "TransactionError",
    "TransactionFilter",
    "TransactionNotFoundError",
    "TransactionService",
    "TransactionUpdateInput",
]
