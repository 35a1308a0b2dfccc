"""Income and expense endpoints."""
from __future__ import annotations

from datetime import date
from typing import Optional

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from fintrackr.interfaces.http.deps import commit, get_current_owner, get_db_session
from fintrackr.interfaces.http.errors import domain_errors
from fintrackr.modules.common import UNSET
from fintrackr.modules.transactions import (
    TransactionCreateInput,
    TransactionFilter,
    TransactionService,
    TransactionUpdateInput,
)
from fintrackr.schemas import (
    SuccessResponse,
    TransactionCreate,
    TransactionListResponse,
    TransactionResponse,
    TransactionUpdate,
)

router = APIRouter()


@router.get("", response_model=TransactionListResponse, summary="List transactions, newest first")
async def list_transactions(
    wallet_id: Optional[str] = None,
    category_id: Optional[str] = None,
    type: Optional[str] = Query(None, description="income or expense"),
    date_from: Optional[date] = None,
    date_to: Optional[date] = None,
    limit: int = Query(50, ge=1, le=500),
    offset: int = Query(0, ge=0),
    owner_id: str = Depends(get_current_owner),
    db: AsyncSession = Depends(get_db_session),
) -> TransactionListResponse:
    filters = TransactionFilter(
        wallet_id=wallet_id,
        category_id=category_id,
        type=type,
        date_from=date_from,
        date_to=date_to,
        limit=limit,
        offset=offset,
    )
    with domain_errors():
        transactions = await TransactionService.with_session(db).list(owner_id, filters)
    return TransactionListResponse(
        transactions=[TransactionResponse.model_validate(item) for item in transactions]
    )


@router.post("", response_model=TransactionResponse, status_code=status.HTTP_201_CREATED, summary="Record income or an expense")
async def create_transaction(
    payload: TransactionCreate,
    owner_id: str = Depends(get_current_owner),
    db: AsyncSession = Depends(get_db_session),
) -> TransactionResponse:
    with domain_errors():
        transaction = await TransactionService.with_session(db).create(
            owner_id,
            TransactionCreateInput(
                wallet_id=payload.wallet_id,
                reason=payload.reason,
                type=payload.type,
                amount=payload.amount,
                date=payload.date,
                category_id=payload.category_id,
            ),
        )
        await commit(db)
    return TransactionResponse.model_validate(transaction)


@router.get("/{transaction_id}", response_model=TransactionResponse, summary="Get a transaction")
async def get_transaction(
    transaction_id: str,
    owner_id: str = Depends(get_current_owner),
    db: AsyncSession = Depends(get_db_session),
) -> TransactionResponse:
    with domain_errors():
        transaction = await TransactionService.with_session(db).get(owner_id, transaction_id)
    return TransactionResponse.model_validate(transaction)


@router.patch("/{transaction_id}", response_model=TransactionResponse, summary="Edit a transaction")
async def update_transaction(
    transaction_id: str,
    payload: TransactionUpdate,
    owner_id: str = Depends(get_current_owner),
    db: AsyncSession = Depends(get_db_session),
) -> TransactionResponse:
    changes = payload.model_dump(exclude_unset=True)
    with domain_errors():
        transaction = await TransactionService.with_session(db).update(
            owner_id,
            transaction_id,
            TransactionUpdateInput(**{key: changes.get(key, UNSET) for key in TransactionUpdate.model_fields}),
        )
        await commit(db)
    return TransactionResponse.model_validate(transaction)


@router.delete("/{transaction_id}", response_model=SuccessResponse, summary="Delete a transaction")
async def delete_transaction(
    transaction_id: str,
    owner_id: str = Depends(get_current_owner),
    db: AsyncSession = Depends(get_db_session),
) -> SuccessResponse:
    with domain_errors():
        await TransactionService.with_session(db).delete(owner_id, transaction_id)
        await commit(db)
    return SuccessResponse(message="Transaction deleted")
