"""Domain models for income and expense entries."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal
from typing import Optional

from fintrackr.modules.common import UNSET

INCOME = "income"
EXPENSE = "expense"
TRANSACTION_TYPES = frozenset({INCOME, EXPENSE})


@dataclass(slots=True)
class Transaction:
    id: str
    owner_id: str
    wallet_id: str
    category_id: Optional[str]
    reason: str
    type: str
    amount: Decimal
    date: date
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @property
    def signed_amount(self) -> Decimal:
        return self.amount if self.type == INCOME else -self.amount


@dataclass(slots=True)
class TransactionCreateInput:
    wallet_id: str
    reason: str
    type: str
    amount: Decimal
    date: date
    category_id: Optional[str] = None


@dataclass(slots=True)
class TransactionUpdateInput:
    wallet_id: str | object = UNSET
    reason: str | object = UNSET
    type: str | object = UNSET
    amount: Decimal | object = UNSET
    date: date | object = UNSET
    category_id: Optional[str] | object = UNSET


@dataclass(slots=True)
class TransactionFilter:
    wallet_id: Optional[str] = None
    category_id: Optional[str] = None
    type: Optional[str] = None
    date_from: Optional[date] = None
    date_to: Optional[date] = None
    limit: int = 50
    offset: int = 0
