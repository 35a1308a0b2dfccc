"""Domain models for borrowed and lent money."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal
from typing import Optional

from fintrackr.modules.common import UNSET

BORROWED = "borrowed"
LENT = "lent"
LOAN_TYPES = frozenset({BORROWED, LENT})

ACTIVE = "active"
COMPLETED = "completed"
LOAN_STATUSES = frozenset({ACTIVE, COMPLETED})


@dataclass(slots=True)
class Loan:
    id: str
    owner_id: str
    name: str
    type: str
    amount: Decimal
    remaining_amount: Decimal
    due_date: Optional[date]
    status: str
    description: Optional[str]
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @property
    def repaid_amount(self) -> Decimal:
        return self.amount - self.remaining_amount


@dataclass(slots=True)
class LoanCreateInput:
    name: str
    type: str
    amount: Decimal
    remaining_amount: Optional[Decimal] = None
    due_date: Optional[date] = None
    status: str = ACTIVE
    description: Optional[str] = None


@dataclass(slots=True)
class LoanUpdateInput:
    name: str | object = UNSET
    type: str | object = UNSET
    amount: Decimal | object = UNSET
    remaining_amount: Decimal | object = UNSET
    due_date: Optional[date] | object = UNSET
    status: str | object = UNSET
    description: Optional[str] | object = UNSET


@dataclass(slots=True)
class LoanSummary:
    total_borrowed: Decimal
    total_lent: Decimal
    active_count: int

    @property
    def net_position(self) -> Decimal:
        return self.total_lent - self.total_borrowed
