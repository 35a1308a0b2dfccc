"""SQLAlchemy implementation for wallet domain"""

from __future__ import annotations

from decimal import Decimal
from typing import Iterable

from sqlalchemy import exists, or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from fintrackr.db.models import Transaction, Transfer, Wallet


class SqlWalletRepository:
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def get_wallet(self, owner_id: str, wallet_id: str) -> Wallet | None:
        stmt = select(Wallet).where(Wallet.id == wallet_id, Wallet.user_id == owner_id)
        result = await self.session.execute(stmt)
        return result.scalars().first()

    async def list_wallets(self, owner_id: str) -> list[Wallet]:
        stmt = select(Wallet).where(Wallet.user_id == owner_id).order_by(Wallet.created_at, Wallet.name)
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def create_wallet(self, owner_id: str, *, name: str, balance: Decimal, currency: str) -> Wallet:
        wallet = Wallet(user_id=owner_id, name=name, balance=balance, currency=currency)
        self.session.add(wallet)
        await self.session.flush()
        await self.session.refresh(wallet)
        return wallet

    async def update_wallet(self, model: Wallet, *, name: str, currency: str) -> Wallet:
        model.name = name
        model.currency = currency
        await self.session.flush()
        await self.session.refresh(model)
        return model

    async def delete_wallet(self, model: Wallet) -> None:
        await self.session.delete(model)
        await self.session.flush()

    async def is_referenced(self, wallet_id: str) -> bool:
        transfer_ref = exists().where(
            or_(Transfer.from_wallet_id == wallet_id, Transfer.to_wallet_id == wallet_id)
        )
        transaction_ref = exists().where(Transaction.wallet_id == wallet_id)
        result = await self.session.execute(select(or_(transfer_ref, transaction_ref)))
        return bool(result.scalar())

    async def lock_wallets(self, owner_id: str, wallet_ids: Iterable[str]) -> dict[str, Wallet]:
        """Re-read the owner's wallets with a row lock, in ascending id order."""
        ids = sorted(set(wallet_ids))
        if not ids:
            return {}
        stmt = (
            select(Wallet)
            .where(Wallet.id.in_(ids), Wallet.user_id == owner_id)
            .order_by(Wallet.id)
            .with_for_update()
            .execution_options(populate_existing=True)
        )
        result = await self.session.execute(stmt)
        return {wallet.id: wallet for wallet in result.scalars().all()}

    async def adjust_balance(self, model: Wallet, delta: Decimal) -> Wallet:
        model.balance = model.balance + delta
        await self.session.flush()
        return model
