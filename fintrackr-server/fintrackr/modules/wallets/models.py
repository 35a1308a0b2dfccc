"""Domain models for wallet operations."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from typing import Optional

from fintrackr.modules.common import UNSET


@dataclass(slots=True)
class Wallet:
    id: str
    owner_id: str
    name: str
    balance: Decimal
    currency: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


@dataclass(slots=True)
class WalletCreateInput:
    name: str
    balance: Decimal = Decimal("0")
    currency: Optional[str] = None


@dataclass(slots=True)
class WalletUpdateInput:
    name: Optional[str] | object = UNSET
    currency: Optional[str] | object = UNSET


@dataclass(slots=True)
class CurrencyTotal:
    currency: str
    balance: Decimal
    wallet_count: int
