"""Loan service: money borrowed from or lent to others."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Any, Optional

from sqlalchemy.ext.asyncio import AsyncSession

from fintrackr.db.models import Loan as LoanModel
from fintrackr.infrastructure.database.repositories.loan_repository import SqlLoanRepository
from fintrackr.modules.common import CENT, ValidationError, backend_errors, resolve, to_money

from .exceptions import LoanNotFoundError
from .models import (
    ACTIVE,
    BORROWED,
    LENT,
    LOAN_STATUSES,
    LOAN_TYPES,
    Loan,
    LoanCreateInput,
    LoanSummary,
    LoanUpdateInput,
)
from .repository import LoanRepository


@dataclass(slots=True)
class LoanService:
    repository: LoanRepository

    @classmethod
    def with_session(cls, session: AsyncSession) -> "LoanService":
        return cls(SqlLoanRepository(session))

    async def create_loan(self, owner_id: str, payload: LoanCreateInput) -> Loan:
        fields = _validated(
            name=payload.name,
            type=payload.type,
            amount=payload.amount,
            remaining_amount=payload.remaining_amount,
            due_date=payload.due_date,
            status=payload.status,
            description=payload.description,
        )
        with backend_errors("create loan"):
            model = await self.repository.create_loan(owner_id, **fields)
        return self._to_domain(model)

    async def get_loan(self, owner_id: str, loan_id: str) -> Loan:
        with backend_errors("load loan"):
            model = await self.repository.get_loan(owner_id, loan_id)
        if model is None:
            raise LoanNotFoundError(loan_id)
        return self._to_domain(model)

    async def list_loans(self, owner_id: str, *, type: str | None = None, status: str | None = None) -> list[Loan]:
        if type is not None and type not in LOAN_TYPES:
            raise ValidationError(f"unknown loan type: {type}")
        if status is not None and status not in LOAN_STATUSES:
            raise ValidationError(f"unknown loan status: {status}")
        with backend_errors("list loans"):
            models = await self.repository.list_loans(owner_id, type=type, status=status)
        return [self._to_domain(model) for model in models]

    async def update_loan(self, owner_id: str, loan_id: str, payload: LoanUpdateInput) -> Loan:
        with backend_errors("update loan"):
            model = await self.repository.get_loan(owner_id, loan_id)
            if model is None:
                raise LoanNotFoundError(loan_id)
            fields = _validated(
                name=resolve(payload.name, model.name),
                type=resolve(payload.type, model.type),
                amount=resolve(payload.amount, model.amount),
                remaining_amount=resolve(payload.remaining_amount, model.remaining_amount),
                due_date=resolve(payload.due_date, model.due_date),
                status=resolve(payload.status, model.status),
                description=resolve(payload.description, model.description),
            )
            model = await self.repository.update_loan(model, **fields)
        return self._to_domain(model)

    async def delete_loan(self, owner_id: str, loan_id: str) -> None:
        with backend_errors("delete loan"):
            model = await self.repository.get_loan(owner_id, loan_id)
            if model is None:
                raise LoanNotFoundError(loan_id)
            await self.repository.delete_loan(model)

    async def summary(self, owner_id: str) -> LoanSummary:
        """Outstanding totals over active loans only."""
        loans = await self.list_loans(owner_id, status=ACTIVE)
        borrowed = sum((loan.remaining_amount for loan in loans if loan.type == BORROWED), Decimal("0"))
        lent = sum((loan.remaining_amount for loan in loans if loan.type == LENT), Decimal("0"))
        return LoanSummary(
            total_borrowed=borrowed.quantize(CENT), total_lent=lent.quantize(CENT), active_count=len(loans)
        )

    @staticmethod
    def _to_domain(model: LoanModel) -> Loan:
        return Loan(
            id=model.id,
            owner_id=model.user_id,
            name=model.name,
            type=model.type,
            amount=model.amount,
            remaining_amount=model.remaining_amount,
            due_date=model.due_date,
            status=model.status,
            description=model.description,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )


def _validated(
    *,
    name: str,
    type: str,
    amount: Any,
    remaining_amount: Any,
    due_date: Optional[date],
    status: str,
    description: Optional[str],
) -> dict[str, Any]:
    cleaned = (name or "").strip()
    if not cleaned:
        raise ValidationError("loan name is required")
    if type not in LOAN_TYPES:
        raise ValidationError(f"unknown loan type: {type}")
    if status not in LOAN_STATUSES:
        raise ValidationError(f"unknown loan status: {status}")
    if amount is None or to_money(amount) <= 0:
        raise ValidationError("non-positive amount")
    principal = to_money(amount)
    remaining = principal if remaining_amount is None else to_money(remaining_amount)
    if remaining < 0:
        raise ValidationError("remaining amount cannot be negative")
    if remaining > principal:
        raise ValidationError("remaining amount cannot exceed the loan amount")
    return {
        "name": cleaned,
        "type": type,
        "amount": principal,
        "remaining_amount": remaining,
        "due_date": due_date,
        "status": status,
        "description": description or None,
    }
