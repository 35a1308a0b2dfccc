"""Wallet endpoints."""
from __future__ import annotations

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from fintrackr.interfaces.http.deps import commit, get_current_owner, get_db_session
from fintrackr.interfaces.http.errors import domain_errors
from fintrackr.modules.common import UNSET
from fintrackr.modules.wallets import WalletCreateInput, WalletService, WalletUpdateInput
from fintrackr.schemas import (
    CurrencyTotalResponse,
    SuccessResponse,
    WalletBalanceSummaryResponse,
    WalletCreate,
    WalletListResponse,
    WalletResponse,
    WalletUpdate,
)

router = APIRouter()


@router.get("", response_model=WalletListResponse, summary="List wallets")
async def list_wallets(
    owner_id: str = Depends(get_current_owner),
    db: AsyncSession = Depends(get_db_session),
) -> WalletListResponse:
    with domain_errors():
        wallets = await WalletService.with_session(db).list_wallets(owner_id)
    return WalletListResponse(
        total=len(wallets),
        wallets=[WalletResponse.model_validate(wallet) for wallet in wallets],
    )


@router.post("", response_model=WalletResponse, status_code=status.HTTP_201_CREATED, summary="Create a wallet")
async def create_wallet(
    payload: WalletCreate,
    owner_id: str = Depends(get_current_owner),
    db: AsyncSession = Depends(get_db_session),
) -> WalletResponse:
    with domain_errors():
        wallet = await WalletService.with_session(db).create_wallet(
            owner_id,
            WalletCreateInput(name=payload.name, balance=payload.balance, currency=payload.currency),
        )
        await commit(db)
    return WalletResponse.model_validate(wallet)


@router.get("/summary/balance", response_model=WalletBalanceSummaryResponse, summary="Total balance per currency")
async def wallet_balance_summary(
    owner_id: str = Depends(get_current_owner),
    db: AsyncSession = Depends(get_db_session),
) -> WalletBalanceSummaryResponse:
    with domain_errors():
        totals = await WalletService.with_session(db).total_balance(owner_id)
    return WalletBalanceSummaryResponse(totals=[CurrencyTotalResponse.model_validate(total) for total in totals])


@router.get("/{wallet_id}", response_model=WalletResponse, summary="Get a wallet")
async def get_wallet(
    wallet_id: str,
    owner_id: str = Depends(get_current_owner),
    db: AsyncSession = Depends(get_db_session),
) -> WalletResponse:
    with domain_errors():
        wallet = await WalletService.with_session(db).get_wallet(owner_id, wallet_id)
    return WalletResponse.model_validate(wallet)


@router.patch("/{wallet_id}", response_model=WalletResponse, summary="Rename a wallet or change its currency")
async def update_wallet(
    wallet_id: str,
    payload: WalletUpdate,
    owner_id: str = Depends(get_current_owner),
    db: AsyncSession = Depends(get_db_session),
) -> WalletResponse:
    changes = payload.model_dump(exclude_unset=True)
    with domain_errors():
        wallet = await WalletService.with_session(db).update_wallet(
            owner_id,
            wallet_id,
            WalletUpdateInput(
                name=changes.get("name", UNSET),
                currency=changes.get("currency", UNSET),
            ),
        )
        await commit(db)
    return WalletResponse.model_validate(wallet)


@router.delete("/{wallet_id}", response_model=SuccessResponse, summary="Delete an unused wallet")
async def delete_wallet(
    wallet_id: str,
    owner_id: str = Depends(get_current_owner),
    db: AsyncSession = Depends(get_db_session),
) -> SuccessResponse:
    with domain_errors():
        await WalletService.with_session(db).delete_wallet(owner_id, wallet_id)
        await commit(db)
    return SuccessResponse(message="Wallet deleted")
