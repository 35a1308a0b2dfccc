"""SQLAlchemy implementation of the income/expense transaction repository."""

from __future__ import annotations

from datetime import date
from decimal import Decimal

from sqlalchemy import desc, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from fintrackr.db.models import Transaction


class SqlTransactionRepository:
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def get_transaction(self, owner_id: str, transaction_id: str) -> Transaction | None:
        stmt = (
            select(Transaction)
            .where(Transaction.id == transaction_id, Transaction.user_id == owner_id)
            .with_for_update()
            .execution_options(populate_existing=True)
        )
        result = await self.session.execute(stmt)
        return result.scalars().first()

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
    ) -> list[Transaction]:
        stmt = select(Transaction).where(Transaction.user_id == owner_id)
        if wallet_id:
            stmt = stmt.where(Transaction.wallet_id == wallet_id)
        if category_id:
            stmt = stmt.where(Transaction.category_id == category_id)
        if type:
            stmt = stmt.where(Transaction.type == type)
        if date_from:
            stmt = stmt.where(Transaction.date >= date_from)
        if date_to:
            stmt = stmt.where(Transaction.date <= date_to)
        stmt = (
            stmt.order_by(desc(Transaction.date), desc(Transaction.created_at))
            .offset(offset)
            .limit(limit)
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def list_in_range(self, owner_id: str, date_from: date, date_to: date) -> list[Transaction]:
        stmt = (
            select(Transaction)
            .where(
                Transaction.user_id == owner_id,
                Transaction.date >= date_from,
                Transaction.date <= date_to,
            )
            .order_by(Transaction.date)
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

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
    ) -> Transaction:
        tx = Transaction(
            user_id=owner_id,
            wallet_id=wallet_id,
            category_id=category_id,
            reason=reason,
            type=type,
            amount=amount,
            date=date,
        )
        self.session.add(tx)
        await self.session.flush()
        return tx

    async def update_transaction(
        self,
        model: Transaction,
        *,
        wallet_id: str,
        category_id: str | None,
        reason: str,
        type: str,
        amount: Decimal,
        date: date,
    ) -> Transaction:
        model.wallet_id = wallet_id
        model.category_id = category_id
        model.reason = reason
        model.type = type
        model.amount = amount
        model.date = date
        await self.session.flush()
        return model

    async def set_applied(self, model: Transaction, *, amount: Decimal | None, wallet_id: str | None) -> Transaction:
        model.applied_amount = amount
        model.applied_wallet_id = wallet_id
        await self.session.flush()
        return model

    async def delete_transaction(self, model: Transaction) -> None:
        await self.session.delete(model)
        await self.session.flush()

    async def clear_category(self, owner_id: str, category_id: str) -> int:
        stmt = (
            update(Transaction)
            .where(Transaction.user_id == owner_id, Transaction.category_id == category_id)
            .values(category_id=None)
            .execution_options(synchronize_session="fetch")
        )
        result = await self.session.execute(stmt)
        return result.rowcount or 0
