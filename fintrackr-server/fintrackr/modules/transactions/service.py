"""Income and expense entries against a single wallet."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from typing import Any

from sqlalchemy.ext.asyncio import AsyncSession

from fintrackr.db.models import Transaction as TransactionModel
from fintrackr.infrastructure.database.repositories.category_repository import SqlCategoryRepository
from fintrackr.infrastructure.database.repositories.transaction_repository import SqlTransactionRepository
from fintrackr.modules.categories.exceptions import CategoryNotFoundError
from fintrackr.modules.categories.repository import CategoryRepository
from fintrackr.modules.common import ValidationError, backend_errors, resolve, to_money
from fintrackr.modules.wallets import WalletService

from .exceptions import TransactionNotFoundError
from .models import (
    INCOME,
    TRANSACTION_TYPES,
    Transaction,
    TransactionCreateInput,
    TransactionFilter,
    TransactionUpdateInput,
)
from .repository import TransactionRepository

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class TransactionService:
    repository: TransactionRepository
    categories: CategoryRepository
    wallets: WalletService

    @classmethod
    def with_session(cls, session: AsyncSession) -> "TransactionService":
        return cls(
            SqlTransactionRepository(session),
            SqlCategoryRepository(session),
            WalletService.with_session(session),
        )

    async def create(self, owner_id: str, payload: TransactionCreateInput) -> Transaction:
        fields = _validated(
            wallet_id=payload.wallet_id,
            category_id=payload.category_id,
            reason=payload.reason,
            type=payload.type,
            amount=payload.amount,
            date=payload.date,
        )
        with backend_errors("create transaction"):
            await self._check_category(owner_id, fields["category_id"])
            await self.wallets.require_wallets(owner_id, [fields["wallet_id"]])
            model = await self.repository.create_transaction(owner_id, **fields)
            await self._apply(owner_id, model)
        logger.info("Transaction %s created (%s %s)", model.id, model.type, model.amount)
        return self._to_domain(model)

    async def update(self, owner_id: str, transaction_id: str, changes: TransactionUpdateInput) -> Transaction:
        with backend_errors("update transaction"):
            model = await self._load(owner_id, transaction_id)
            fields = _validated(
                wallet_id=resolve(changes.wallet_id, model.wallet_id),
                category_id=resolve(changes.category_id, model.category_id),
                reason=resolve(changes.reason, model.reason),
                type=resolve(changes.type, model.type),
                amount=resolve(changes.amount, model.amount),
                date=resolve(changes.date, model.date),
            )
            await self._check_category(owner_id, fields["category_id"])
            await self.wallets.require_wallets(owner_id, [fields["wallet_id"]])
            await self._reverse(owner_id, model)
            model = await self.repository.update_transaction(model, **fields)
            await self._apply(owner_id, model)
        logger.info("Transaction %s updated", model.id)
        return self._to_domain(model)

    async def delete(self, owner_id: str, transaction_id: str) -> None:
        with backend_errors("delete transaction"):
            model = await self._load(owner_id, transaction_id)
            await self._reverse(owner_id, model)
            await self.repository.delete_transaction(model)
        logger.info("Transaction %s deleted", transaction_id)

    async def get(self, owner_id: str, transaction_id: str) -> Transaction:
        with backend_errors("load transaction"):
            model = await self._load(owner_id, transaction_id)
        return self._to_domain(model)

    async def list(self, owner_id: str, filters: TransactionFilter | None = None) -> list[Transaction]:
        filters = filters or TransactionFilter()
        if filters.type is not None and filters.type not in TRANSACTION_TYPES:
            raise ValidationError(f"unknown transaction type: {filters.type}")
        if filters.date_from and filters.date_to and filters.date_from > filters.date_to:
            raise ValidationError("date_from must not be after date_to")
        with backend_errors("list transactions"):
            models = await self.repository.list_transactions(
                owner_id,
                wallet_id=filters.wallet_id,
                category_id=filters.category_id,
                type=filters.type,
                date_from=filters.date_from,
                date_to=filters.date_to,
                limit=filters.limit,
                offset=filters.offset,
            )
        return [self._to_domain(model) for model in models]

    async def in_range(self, owner_id: str, date_from: date, date_to: date) -> list[Transaction]:
        with backend_errors("load transactions"):
            models = await self.repository.list_in_range(owner_id, date_from, date_to)
        return [self._to_domain(model) for model in models]

    async def _load(self, owner_id: str, transaction_id: str) -> TransactionModel:
        model = await self.repository.get_transaction(owner_id, transaction_id)
        if model is None:
            raise TransactionNotFoundError(transaction_id)
        return model

    async def _check_category(self, owner_id: str, category_id: str | None) -> None:
        if category_id is None:
            return
        if await self.categories.get_category(owner_id, category_id) is None:
            raise CategoryNotFoundError(category_id)

    async def _apply(self, owner_id: str, model: TransactionModel) -> None:
        delta = model.amount if model.type == INCOME else -model.amount
        await self.wallets.apply_deltas(owner_id, [(model.wallet_id, delta)])
        await self.repository.set_applied(model, amount=delta, wallet_id=model.wallet_id)

    async def _reverse(self, owner_id: str, model: TransactionModel) -> None:
        if model.applied_amount is None:
            return
        await self.wallets.apply_deltas(owner_id, [(model.applied_wallet_id, -model.applied_amount)])
        await self.repository.set_applied(model, amount=None, wallet_id=None)

    @staticmethod
    def _to_domain(model: TransactionModel) -> Transaction:
        return Transaction(
            id=model.id,
            owner_id=model.user_id,
            wallet_id=model.wallet_id,
            category_id=model.category_id,
            reason=model.reason,
            type=model.type,
            amount=model.amount,
            date=model.date,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )


def _validated(
    *,
    wallet_id: str,
    category_id: str | None,
    reason: str,
    type: str,
    amount: Any,
    date: date,
) -> dict[str, Any]:
    if not wallet_id:
        raise ValidationError("wallet is required")
    cleaned_reason = (reason or "").strip()
    if not cleaned_reason:
        raise ValidationError("description is required")
    if type not in TRANSACTION_TYPES:
        raise ValidationError(f"unknown transaction type: {type}")
    if amount is None or to_money(amount) <= 0:
        raise ValidationError("non-positive amount")
    if date is None:
        raise ValidationError("transaction date is required")
    return {
        "wallet_id": wallet_id,
        "category_id": category_id or None,
        "reason": cleaned_reason,
        "type": type,
        "amount": to_money(amount),
        "date": date,
    }
