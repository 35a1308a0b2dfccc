"""SQLAlchemy implementation of the loan repository."""

from __future__ import annotations

from typing import Any

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from fintrackr.db.models import Loan


class SqlLoanRepository:
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def get_loan(self, owner_id: str, loan_id: str) -> Loan | None:
        stmt = select(Loan).where(Loan.id == loan_id, Loan.user_id == owner_id)
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none()

    async def list_loans(self, owner_id: str, *, type: str | None, status: str | None) -> list[Loan]:
        stmt = select(Loan).where(Loan.user_id == owner_id)
        if type:
            stmt = stmt.where(Loan.type == type)
        if status:
            stmt = stmt.where(Loan.status == status)
        stmt = stmt.order_by(Loan.due_date.is_(None), Loan.due_date, Loan.created_at)
        result = await self._session.execute(stmt)
        return list(result.scalars().all())

    async def create_loan(self, owner_id: str, **fields: Any) -> Loan:
        model = Loan(user_id=owner_id, **fields)
        self._session.add(model)
        await self._session.flush()
        return model

    async def update_loan(self, model: Loan, **fields: Any) -> Loan:
        for key, value in fields.items():
            setattr(model, key, value)
        await self._session.flush()
        return model

    async def delete_loan(self, model: Loan) -> None:
        await self._session.delete(model)
        await self._session.flush()
