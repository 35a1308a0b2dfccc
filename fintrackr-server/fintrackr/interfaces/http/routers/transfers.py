"""Transfer endpoints backed by the transfer ledger."""
from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from fintrackr.interfaces.http.deps import commit, get_current_owner, get_db_session
from fintrackr.interfaces.http.errors import domain_errors
from fintrackr.modules.common import UNSET
from fintrackr.modules.transfers import TransferCreateInput, TransferLedger, TransferUpdateInput
from fintrackr.schemas import (
    SuccessResponse,
    TransferCreate,
    TransferListResponse,
    TransferResponse,
    TransferUpdate,
)

router = APIRouter()


@router.get("", response_model=TransferListResponse, summary="List transfers, newest first")
async def list_transfers(
    status_filter: Optional[str] = Query(None, alias="status"),
    wallet_id: Optional[str] = None,
    limit: int = Query(50, ge=1, le=500),
    offset: int = Query(0, ge=0),
    owner_id: str = Depends(get_current_owner),
    db: AsyncSession = Depends(get_db_session),
) -> TransferListResponse:
    with domain_errors():
        transfers = await TransferLedger.with_session(db).list(
            owner_id, status=status_filter, wallet_id=wallet_id, limit=limit, offset=offset
        )
    return TransferListResponse(transfers=[TransferResponse.model_validate(item) for item in transfers])


@router.post("", response_model=TransferResponse, status_code=status.HTTP_201_CREATED, summary="Create a transfer")
async def create_transfer(
    payload: TransferCreate,
    owner_id: str = Depends(get_current_owner),
    db: AsyncSession = Depends(get_db_session),
) -> TransferResponse:
    with domain_errors():
        transfer = await TransferLedger.with_session(db).create(
            owner_id,
            TransferCreateInput(
                from_wallet_id=payload.from_wallet_id,
                to_wallet_id=payload.to_wallet_id,
                amount=payload.amount,
                date=payload.date,
                status=payload.status,
                description=payload.description,
            ),
        )
        await commit(db)
    return TransferResponse.model_validate(transfer)


@router.get("/{transfer_id}", response_model=TransferResponse, summary="Get a transfer")
async def get_transfer(
    transfer_id: str,
    owner_id: str = Depends(get_current_owner),
    db: AsyncSession = Depends(get_db_session),
) -> TransferResponse:
    with domain_errors():
        transfer = await TransferLedger.with_session(db).get(owner_id, transfer_id)
    return TransferResponse.model_validate(transfer)


@router.patch("/{transfer_id}", response_model=TransferResponse, summary="Edit a transfer")
async def update_transfer(
    transfer_id: str,
    payload: TransferUpdate,
    owner_id: str = Depends(get_current_owner),
    db: AsyncSession = Depends(get_db_session),
) -> TransferResponse:
    changes = payload.model_dump(exclude_unset=True)
    with domain_errors():
        transfer = await TransferLedger.with_session(db).update(
            owner_id,
            transfer_id,
            TransferUpdateInput(**{key: changes.get(key, UNSET) for key in TransferUpdate.model_fields}),
        )
        await commit(db)
    return TransferResponse.model_validate(transfer)


@router.delete("/{transfer_id}", response_model=SuccessResponse, summary="Delete a transfer")
async def delete_transfer(
    transfer_id: str,
    owner_id: str = Depends(get_current_owner),
    db: AsyncSession = Depends(get_db_session),
) -> SuccessResponse:
    with domain_errors():
        await TransferLedger.with_session(db).delete(owner_id, transfer_id)
        await commit(db)
    return SuccessResponse(message="Transfer deleted")
