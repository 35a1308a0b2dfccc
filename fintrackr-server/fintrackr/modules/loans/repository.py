"""Repository protocol for loans."""

from __future__ import annotations

from typing import Any, Protocol, Sequence

from fintrackr.db.models import Loan as LoanModel


class LoanRepository(Protocol):
    async def get_loan(self, owner_id: str, loan_id: str) -> LoanModel | None:
        ...

    async def list_loans(self, owner_id: str, *, type: str | None, status: str | None) -> Sequence[LoanModel]:
        ...

    async def create_loan(self, owner_id: str, **fields: Any) -> LoanModel:
        ...

    async def update_loan(self, model: LoanModel, **fields: Any) -> LoanModel:
        ...

    async def delete_loan(self, model: LoanModel) -> None:
        ...
