"""SQLAlchemy implementation of the transfer repository."""

from __future__ import annotations

from datetime import date
from decimal import Decimal

from sqlalchemy import desc, or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from fintrackr.db.models import Transfer


class SqlTransferRepository:
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def get_transfer(self, owner_id: str, transfer_id: str) -> Transfer | None:
        stmt = (
            select(Transfer)
            .where(Transfer.id == transfer_id, Transfer.user_id == owner_id)
            .with_for_update()
            .execution_options(populate_existing=True)
        )
        result = await self.session.execute(stmt)
        return result.scalars().first()

    async def list_transfers(
        self,
        owner_id: str,
        *,
        status: str | None,
        wallet_id: str | None,
        limit: int,
        offset: int,
    ) -> list[Transfer]:
        stmt = select(Transfer).where(Transfer.user_id == owner_id)
        if status:
            stmt = stmt.where(Transfer.status == status)
        if wallet_id:
            stmt = stmt.where(or_(Transfer.from_wallet_id == wallet_id, Transfer.to_wallet_id == wallet_id))
        stmt = stmt.order_by(desc(Transfer.date), desc(Transfer.created_at)).offset(offset).limit(limit)
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def create_transfer(
        self,
        owner_id: str,
        *,
        from_wallet_id: str,
        to_wallet_id: str,
        amount: Decimal,
        date: date,
        status: str,
        description: str | None,
    ) -> Transfer:
        transfer = Transfer(
            user_id=owner_id,
            from_wallet_id=from_wallet_id,
            to_wallet_id=to_wallet_id,
            amount=amount,
            date=date,
            status=status,
            description=description,
        )
        self.session.add(transfer)
        await self.session.flush()
        return transfer

    async def update_transfer(
        self,
        model: Transfer,
        *,
        from_wallet_id: str,
        to_wallet_id: str,
        amount: Decimal,
        date: date,
        status: str,
        description: str | None,
    ) -> Transfer:
        model.from_wallet_id = from_wallet_id
        model.to_wallet_id = to_wallet_id
        model.amount = amount
        model.date = date
        model.status = status
        model.description = description
        await self.session.flush()
        return model

    async def set_applied(
        self,
        model: Transfer,
        *,
        amount: Decimal | None,
        from_wallet_id: str | None,
        to_wallet_id: str | None,
    ) -> Transfer:
        model.applied_amount = amount
        model.applied_from_wallet_id = from_wallet_id
        model.applied_to_wallet_id = to_wallet_id
        await self.session.flush()
        return model

    async def delete_transfer(self, model: Transfer) -> None:
        await self.session.delete(model)
        await self.session.flush()
