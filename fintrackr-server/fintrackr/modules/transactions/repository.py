"""Repository protocol for income/expense transactions."""

from __future__ import annotations

from datetime import date
from decimal import Decimal
from typing import Protocol, Sequence

from fintrackr.db.models import Transaction as TransactionModel


class TransactionRepository(Protocol):
    async def get_transaction(self, owner_id: str, transaction_id: str) -> TransactionModel | None:
        ...

    async def list_transactions(
        self,
        owner_id: str,
        *,
        wallet_id: str | None = None,
        category_id: str | None = None,
        type: str | None = None,
        date_from: date | None = None,
        date_to: date | None = None,
        limit: int = 50,
        offset: int = 0,
    ) -> Sequence[TransactionModel]:
        ...

    async def list_in_range(self, owner_id: str, date_from: date, date_to: date) -> Sequence[TransactionModel]:
        ...

    async def create_transaction(
        self,
        owner_id: str,
        *,
        wallet_id: str,
        category_id: str | None,
        reason: str,
        type: str,
        amount: Decimal,
        date: date,
    ) -> TransactionModel:
        ...

    async def update_transaction(
        self,
        model: TransactionModel,
        *,
        wallet_id: str,
        category_id: str | None,
        reason: str,
        type: str,
        amount: Decimal,
        date: date,
    ) -> TransactionModel:
        ...

    async def set_applied(self, model: TransactionModel, *, amount: Decimal | None, wallet_id: str | None) -> TransactionModel:
        ...

    async def delete_transaction(self, model: TransactionModel) -> None:
        ...

    async def clear_category(self, owner_id: str, category_id: str) -> int:
        ...
