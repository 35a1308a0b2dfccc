"""Repository protocol for wallet operations."""

from __future__ import annotations

from decimal import Decimal
from typing import Iterable, Protocol, Sequence

from fintrackr.db.models import Wallet as WalletModel


class WalletRepository(Protocol):
    async def get_wallet(self, owner_id: str, wallet_id: str) -> WalletModel | None:
        ...

    async def list_wallets(self, owner_id: str) -> Sequence[WalletModel]:
        ...

    async def create_wallet(self, owner_id: str, *, name: str, balance: Decimal, currency: str) -> WalletModel:
        ...

    async def update_wallet(self, model: WalletModel, *, name: str, currency: str) -> WalletModel:
        ...

    async def delete_wallet(self, model: WalletModel) -> None:
        ...

    async def is_referenced(self, wallet_id: str) -> bool:
        ...

    async def lock_wallets(self, owner_id: str, wallet_ids: Iterable[str]) -> dict[str, WalletModel]:
        ...

    async def adjust_balance(self, model: WalletModel, delta: Decimal) -> WalletModel:
        ...
