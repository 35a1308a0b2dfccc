"""Repository protocol for transfers."""

from __future__ import annotations

from datetime import date
from decimal import Decimal
from typing import Protocol, Sequence

from fintrackr.db.models import Transfer as TransferModel


class TransferRepository(Protocol):
    async def get_transfer(self, owner_id: str, transfer_id: str) -> TransferModel | None:
        ...

    async def list_transfers(
        self,
        owner_id: str,
        *,
        status: str | None,
        wallet_id: str | None,
        limit: int,
        offset: int,
    ) -> Sequence[TransferModel]:
        ...

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
    ) -> TransferModel:
        ...

    async def update_transfer(
        self,
        model: TransferModel,
        *,
        from_wallet_id: str,
        to_wallet_id: str,
        amount: Decimal,
        date: date,
        status: str,
        description: str | None,
    ) -> TransferModel:
        ...

    async def set_applied(
        self,
        model: TransferModel,
        *,
        amount: Decimal | None,
        from_wallet_id: str | None,
        to_wallet_id: str | None,
    ) -> TransferModel:
        ...

    async def delete_transfer(self, model: TransferModel) -> None:
        ...
