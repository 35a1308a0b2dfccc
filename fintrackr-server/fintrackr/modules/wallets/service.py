"""Wallet domain service"""

from __future__ import annotations

import logging
from collections import defaultdict
from dataclasses import dataclass
from decimal import Decimal
from typing import Iterable

from sqlalchemy.ext.asyncio import AsyncSession

from fintrackr.core.config import get_settings
from fintrackr.db.models import Wallet as WalletModel
from fintrackr.infrastructure.database.repositories.wallet_repository import SqlWalletRepository
from fintrackr.modules.common import CENT, ValidationError, backend_errors, resolve, to_money

from .exceptions import WalletInUseError, WalletNotFoundError
from .models import CurrencyTotal, Wallet, WalletCreateInput, WalletUpdateInput
from .repository import WalletRepository

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class WalletService:
    repository: WalletRepository

    @classmethod
    def with_session(cls, session: AsyncSession) -> "WalletService":
        return cls(SqlWalletRepository(session))

    async def create_wallet(self, owner_id: str, payload: WalletCreateInput) -> Wallet:
        name = _clean_name(payload.name)
        currency = _clean_currency(payload.currency or get_settings().default_currency)
        with backend_errors("create wallet"):
            model = await self.repository.create_wallet(
                owner_id,
                name=name,
                balance=to_money(payload.balance),
                currency=currency,
            )
        logger.info("Wallet %s created for %s with opening balance %s", model.id, owner_id, model.balance)
        return self._to_domain(model)

    async def get_wallet(self, owner_id: str, wallet_id: str) -> Wallet:
        with backend_errors("load wallet"):
            model = await self.repository.get_wallet(owner_id, wallet_id)
        if model is None:
            raise WalletNotFoundError(wallet_id)
        return self._to_domain(model)

    async def list_wallets(self, owner_id: str) -> list[Wallet]:
        with backend_errors("list wallets"):
            models = await self.repository.list_wallets(owner_id)
        return [self._to_domain(model) for model in models]

    async def update_wallet(self, owner_id: str, wallet_id: str, payload: WalletUpdateInput) -> Wallet:
        with backend_errors("update wallet"):
            model = await self.repository.get_wallet(owner_id, wallet_id)
            if model is None:
                raise WalletNotFoundError(wallet_id)
            name = _clean_name(resolve(payload.name, model.name))
            currency = _clean_currency(resolve(payload.currency, model.currency))
            model = await self.repository.update_wallet(model, name=name, currency=currency)
        return self._to_domain(model)

    async def delete_wallet(self, owner_id: str, wallet_id: str) -> None:
        with backend_errors("delete wallet"):
            model = await self.repository.get_wallet(owner_id, wallet_id)
            if model is None:
                raise WalletNotFoundError(wallet_id)
            if await self.repository.is_referenced(wallet_id):
                raise WalletInUseError(wallet_id)
            await self.repository.delete_wallet(model)
        logger.info("Wallet %s deleted for %s", wallet_id, owner_id)

    async def total_balance(self, owner_id: str) -> list[CurrencyTotal]:
        wallets = await self.list_wallets(owner_id)
        totals: dict[str, Decimal] = defaultdict(Decimal)
        counts: dict[str, int] = defaultdict(int)
        for wallet in wallets:
            totals[wallet.currency] += wallet.balance
            counts[wallet.currency] += 1
        return [
            CurrencyTotal(currency=currency, balance=totals[currency].quantize(CENT), wallet_count=counts[currency])
            for currency in sorted(totals)
        ]

    async def apply_deltas(self, owner_id: str, deltas: Iterable[tuple[str, Decimal]]) -> dict[str, Wallet]:
        """Add each signed delta to its wallet's freshly read balance.

        Every wallet is locked and every new balance range-checked before any
        balance is written, so a missing wallet or an out-of-range result
        leaves all balances untouched.
        """
        pending = [(wallet_id, to_money(delta)) for wallet_id, delta in deltas]
        if not pending:
            return {}
        locked = await self.repository.lock_wallets(owner_id, (wallet_id for wallet_id, _ in pending))
        for wallet_id, _ in pending:
            if wallet_id not in locked:
                raise WalletNotFoundError(wallet_id)
        projected = {wallet_id: model.balance for wallet_id, model in locked.items()}
        for wallet_id, delta in pending:
            try:
                projected[wallet_id] = to_money(projected[wallet_id] + delta)
            except ValidationError as exc:
                raise ValidationError(f"balance of wallet {wallet_id} would leave the storable range") from exc
        for wallet_id, delta in pending:
            if not delta:
                continue
            model = await self.repository.adjust_balance(locked[wallet_id], delta)
            logger.info("Wallet %s balance adjusted by %s to %s", wallet_id, delta, model.balance)
        return {wallet_id: self._to_domain(model) for wallet_id, model in locked.items()}

    async def require_wallets(self, owner_id: str, wallet_ids: Iterable[str]) -> dict[str, Wallet]:
        ids = list(wallet_ids)
        locked = await self.repository.lock_wallets(owner_id, ids)
        for wallet_id in ids:
            if wallet_id not in locked:
                raise WalletNotFoundError(wallet_id)
        return {wallet_id: self._to_domain(model) for wallet_id, model in locked.items()}

    @staticmethod
    def _to_domain(model: WalletModel) -> Wallet:
        return Wallet(
            id=model.id,
            owner_id=model.user_id,
            name=model.name,
            balance=model.balance,
            currency=model.currency,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )


def _clean_name(name: str | None) -> str:
    cleaned = (name or "").strip()
    if not cleaned:
        raise ValidationError("wallet name is required")
    return cleaned


def _clean_currency(currency: str | None) -> str:
    cleaned = (currency or "").strip().upper()
    if not 3 <= len(cleaned) <= 10:
        raise ValidationError("currency must be a 3 to 10 letter code")
    return cleaned
