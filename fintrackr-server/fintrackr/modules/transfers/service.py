"""Transfer ledger: moves money between two wallets of the same owner.

A transfer's effect on balances is recorded on the row itself as an applied
snapshot (amount, source, destination). The snapshot is present exactly when
the stored status is ``completed``; reversal always undoes the snapshot, never
a value reconstructed from the caller's view of the record.

Every operation runs inside the caller's session transaction, so the record
write and both balance writes commit or roll back together.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Any

from sqlalchemy.ext.asyncio import AsyncSession

from fintrackr.db.models import Transfer as TransferModel
from fintrackr.infrastructure.database.repositories.transfer_repository import SqlTransferRepository
from fintrackr.modules.common import ValidationError, backend_errors, resolve, to_money
from fintrackr.modules.wallets import WalletService

from .exceptions import TransferNotFoundError
from .models import COMPLETED, TRANSFER_STATUSES, Transfer, TransferCreateInput, TransferUpdateInput
from .repository import TransferRepository

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class TransferLedger:
    repository: TransferRepository
    wallets: WalletService

    @classmethod
    def with_session(cls, session: AsyncSession) -> "TransferLedger":
        return cls(SqlTransferRepository(session), WalletService.with_session(session))

    async def create(self, owner_id: str, payload: TransferCreateInput) -> Transfer:
        fields = _validated(
            from_wallet_id=payload.from_wallet_id,
            to_wallet_id=payload.to_wallet_id,
            amount=payload.amount,
            date=payload.date,
            status=payload.status,
            description=payload.description,
        )
        with backend_errors("create transfer"):
            await self.wallets.require_wallets(owner_id, [fields["from_wallet_id"], fields["to_wallet_id"]])
            model = await self.repository.create_transfer(owner_id, **fields)
            if model.status == COMPLETED:
                await self._apply(owner_id, model)
        logger.info("Transfer %s created (%s)", model.id, model.status)
        return self._to_domain(model)

    async def update(self, owner_id: str, transfer_id: str, changes: TransferUpdateInput) -> Transfer:
        with backend_errors("update transfer"):
            model = await self._load(owner_id, transfer_id)
            fields = _validated(
                from_wallet_id=resolve(changes.from_wallet_id, model.from_wallet_id),
                to_wallet_id=resolve(changes.to_wallet_id, model.to_wallet_id),
                amount=resolve(changes.amount, model.amount),
                date=resolve(changes.date, model.date),
                status=resolve(changes.status, model.status),
                description=resolve(changes.description, model.description),
            )
            await self.wallets.require_wallets(owner_id, [fields["from_wallet_id"], fields["to_wallet_id"]])
            await self._reverse(owner_id, model)
            model = await self.repository.update_transfer(model, **fields)
            if model.status == COMPLETED:
                await self._apply(owner_id, model)
        logger.info("Transfer %s updated (%s)", model.id, model.status)
        return self._to_domain(model)

    async def delete(self, owner_id: str, transfer_id: str) -> None:
        with backend_errors("delete transfer"):
            model = await self._load(owner_id, transfer_id)
            await self._reverse(owner_id, model)
            await self.repository.delete_transfer(model)
        logger.info("Transfer %s deleted", transfer_id)

    async def get(self, owner_id: str, transfer_id: str) -> Transfer:
        with backend_errors("load transfer"):
            model = await self._load(owner_id, transfer_id)
        return self._to_domain(model)

    async def list(
        self,
        owner_id: str,
        *,
        status: str | None = None,
        wallet_id: str | None = None,
        limit: int = 50,
        offset: int = 0,
    ) -> list[Transfer]:
        if status is not None and status not in TRANSFER_STATUSES:
            raise ValidationError(f"unknown transfer status: {status}")
        with backend_errors("list transfers"):
            models = await self.repository.list_transfers(
                owner_id, status=status, wallet_id=wallet_id, limit=limit, offset=offset
            )
        return [self._to_domain(model) for model in models]

    async def _load(self, owner_id: str, transfer_id: str) -> TransferModel:
        model = await self.repository.get_transfer(owner_id, transfer_id)
        if model is None:
            raise TransferNotFoundError(transfer_id)
        return model

    async def _apply(self, owner_id: str, model: TransferModel) -> None:
        amount = model.amount
        await self.wallets.apply_deltas(
            owner_id,
            [(model.from_wallet_id, -amount), (model.to_wallet_id, amount)],
        )
        await self.repository.set_applied(
            model,
            amount=amount,
            from_wallet_id=model.from_wallet_id,
            to_wallet_id=model.to_wallet_id,
        )
        logger.info(
            "Applied transfer %s: %s from %s to %s",
            model.id, amount, model.from_wallet_id, model.to_wallet_id,
        )

    async def _reverse(self, owner_id: str, model: TransferModel) -> None:
        if model.applied_amount is None:
            return
        amount = model.applied_amount
        source = model.applied_from_wallet_id
        destination = model.applied_to_wallet_id
        await self.wallets.apply_deltas(owner_id, [(source, amount), (destination, -amount)])
        await self.repository.set_applied(model, amount=None, from_wallet_id=None, to_wallet_id=None)
        logger.info("Reversed transfer %s: %s back from %s to %s", model.id, amount, destination, source)

    @staticmethod
    def _to_domain(model: TransferModel) -> Transfer:
        return Transfer(
            id=model.id,
            owner_id=model.user_id,
            from_wallet_id=model.from_wallet_id,
            to_wallet_id=model.to_wallet_id,
            amount=model.amount,
            date=model.date,
            status=model.status,
            description=model.description,
            applied=model.applied_amount is not None,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )


def _validated(
    *,
    from_wallet_id: str,
    to_wallet_id: str,
    amount: Any,
    date: date,
    status: str,
    description: str | None,
) -> dict[str, Any]:
    if not from_wallet_id or not to_wallet_id:
        raise ValidationError("both wallets are required")
    if from_wallet_id == to_wallet_id:
        raise ValidationError("same wallet")
    if amount is None:
        raise ValidationError("non-positive amount")
    money: Decimal = to_money(amount)
    if money <= 0:
        raise ValidationError("non-positive amount")
    if status not in TRANSFER_STATUSES:
        raise ValidationError(f"unknown transfer status: {status}")
    if date is None:
        raise ValidationError("transfer date is required")
    return {
        "from_wallet_id": from_wallet_id,
        "to_wallet_id": to_wallet_id,
        "amount": money,
        "date": date,
        "status": status,
        "description": description or None,
    }
