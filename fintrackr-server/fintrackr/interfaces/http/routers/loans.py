"""Loan endpoints."""
from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from fintrackr.interfaces.http.deps import commit, get_current_owner, get_db_session
from fintrackr.interfaces.http.errors import domain_errors
from fintrackr.modules.common import UNSET
from fintrackr.modules.loans import LoanCreateInput, LoanService, LoanUpdateInput
from fintrackr.schemas import (
    LoanCreate,
    LoanListResponse,
    LoanResponse,
    LoanSummaryResponse,
    LoanUpdate,
    SuccessResponse,
)

router = APIRouter()


@router.get("", response_model=LoanListResponse, summary="List loans")
async def list_loans(
    type: Optional[str] = Query(None, description="borrowed or lent"),
    status_filter: Optional[str] = Query(None, alias="status"),
    owner_id: str = Depends(get_current_owner),
    db: AsyncSession = Depends(get_db_session),
) -> LoanListResponse:
    with domain_errors():
        loans = await LoanService.with_session(db).list_loans(owner_id, type=type, status=status_filter)
    return LoanListResponse(loans=[LoanResponse.model_validate(loan) for loan in loans])


@router.post("", response_model=LoanResponse, status_code=status.HTTP_201_CREATED, summary="Record a loan")
async def create_loan(
    payload: LoanCreate,
    owner_id: str = Depends(get_current_owner),
    db: AsyncSession = Depends(get_db_session),
) -> LoanResponse:
    with domain_errors():
        loan = await LoanService.with_session(db).create_loan(
            owner_id,
            LoanCreateInput(
                name=payload.name,
                type=payload.type,
                amount=payload.amount,
                remaining_amount=payload.remaining_amount,
                due_date=payload.due_date,
                status=payload.status,
                description=payload.description,
            ),
        )
        await commit(db)
    return LoanResponse.model_validate(loan)


@router.get("/summary", response_model=LoanSummaryResponse, summary="Outstanding borrowed and lent totals")
async def loan_summary(
    owner_id: str = Depends(get_current_owner),
    db: AsyncSession = Depends(get_db_session),
) -> LoanSummaryResponse:
    with domain_errors():
        summary = await LoanService.with_session(db).summary(owner_id)
    return LoanSummaryResponse.model_validate(summary)


@router.get("/{loan_id}", response_model=LoanResponse, summary="Get a loan")
async def get_loan(
    loan_id: str,
    owner_id: str = Depends(get_current_owner),
    db: AsyncSession = Depends(get_db_session),
) -> LoanResponse:
    with domain_errors():
        loan = await LoanService.with_session(db).get_loan(owner_id, loan_id)
    return LoanResponse.model_validate(loan)


@router.patch("/{loan_id}", response_model=LoanResponse, summary="Edit a loan or record a repayment")
async def update_loan(
    loan_id: str,
    payload: LoanUpdate,
    owner_id: str = Depends(get_current_owner),
    db: AsyncSession = Depends(get_db_session),
) -> LoanResponse:
    changes = payload.model_dump(exclude_unset=True)
    with domain_errors():
        loan = await LoanService.with_session(db).update_loan(
            owner_id,
            loan_id,
            LoanUpdateInput(**{key: changes.get(key, UNSET) for key in LoanUpdate.model_fields}),
        )
        await commit(db)
    return LoanResponse.model_validate(loan)


@router.delete("/{loan_id}", response_model=SuccessResponse, summary="Delete a loan")
async def delete_loan(
    loan_id: str,
    owner_id: str = Depends(get_current_owner),
    db: AsyncSession = Depends(get_db_session),
) -> SuccessResponse:
    with domain_errors():
        await LoanService.with_session(db).delete_loan(owner_id, loan_id)
        await commit(db)
    return SuccessResponse(message="Loan deleted")
