"""Domain representations for wallet transfers."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal
from typing import Optional

from fintrackr.modules.common import UNSET

COMPLETED = "completed"
PENDING = "pending"
CANCELLED = "cancelled"
TRANSFER_STATUSES = frozenset({COMPLETED, PENDING, CANCELLED})


@dataclass(slots=True)
class Transfer:
    id: str
    owner_id: str
    from_wallet_id: str
    to_wallet_id: str
    amount: Decimal
    date: date
    status: str
    description: Optional[str]
    applied: bool
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


@dataclass(slots=True)
class TransferCreateInput:
    from_wallet_id: str
    to_wallet_id: str
    amount: Decimal
    date: date
    status: str = COMPLETED
    description: Optional[str] = None


@dataclass(slots=True)
class TransferUpdateInput:
    from_wallet_id: str | object = UNSET
    to_wallet_id: str | object = UNSET
    amount: Decimal | object = UNSET
    date: date | object = UNSET
    status: str | object = UNSET
    description: Optional[str] | object = UNSET
