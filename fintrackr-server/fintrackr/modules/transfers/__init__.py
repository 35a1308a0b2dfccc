"""Exports for the transfer ledger"""

from .exceptions import TransferError, TransferNotFoundError
from .models import (
    CANCELLED,
    COMPLETED,
    PENDING,
    TRANSFER_STATUSES,
    Transfer,
    TransferCreateInput,
    TransferUpdateInput,
)
from .service import TransferLedger

__all__ = [
    "CANCELLED",
    "COMPLETED",
    "PENDING",
    "TRANSFER_STATUSES",
    "Transfer",
    "TransferCreateInput",
    "TransferError",
    "TransferLedger",
    "TransferNotFoundError",
    "TransferUpdateInput",
]
