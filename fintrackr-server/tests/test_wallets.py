from datetime import date
from decimal import Decimal

import pytest

from fintrackr.core.config import get_settings
from fintrackr.modules.common import ValidationError
from fintrackr.modules.transfers import TransferCreateInput, TransferLedger
from fintrackr.modules.wallets import (
    WalletInUseError,
    WalletNotFoundError,
    WalletService,
    WalletUpdateInput,
)

from .conftest import OTHER_OWNER, OWNER


async def test_create_wallet_uses_configured_default_currency(make_wallet):
    wallet = await make_wallet("Cash", "12.30")

    assert wallet.currency == get_settings().default_currency
    assert wallet.balance == Decimal("12.3")
    assert wallet.owner_id == OWNER


async def test_currency_is_normalised_and_validated(make_wallet):
    wallet = await make_wallet("Travel", "0", currency=" usd ")
    assert wallet.currency == "USD"

    with pytest.raises(ValidationError):
        await make_wallet("Broken", "0", currency="X")


@pytest.mark.parametrize("balance", ["12.345", "1e30", "100000000000000000"])
async def test_opening_balance_must_be_storable_cents(session, make_wallet, balance):
    with pytest.raises(ValidationError):
        await make_wallet("Cash", balance)

    assert await WalletService.with_session(session).list_wallets(OWNER) == []


async def test_apply_deltas_range_checks_balances_before_writing(session, make_wallet):
    low = await make_wallet("Low", "10")
    high = await make_wallet("High", "9999999999999.00")
    service = WalletService.with_session(session)

    with pytest.raises(ValidationError, match="storable range"):
        await service.apply_deltas(OWNER, [(low.id, Decimal("5")), (high.id, Decimal("1"))])

    assert (await service.get_wallet(OWNER, low.id)).balance == Decimal("10")
    assert (await service.get_wallet(OWNER, high.id)).balance == Decimal("9999999999999.00")


async def test_blank_name_is_rejected(make_wallet):
    with pytest.raises(ValidationError):
        await make_wallet("   ")


async def test_update_keeps_balance(session, make_wallet):
    wallet = await make_wallet("Cash", "100")
    service = WalletService.with_session(session)

    updated = await service.update_wallet(OWNER, wallet.id, WalletUpdateInput(name="Pocket"))

    assert updated.name == "Pocket"
    assert updated.balance == Decimal("100")
    assert updated.currency == wallet.currency


async def test_wallets_are_scoped_to_their_owner(session, make_wallet):
    wallet = await make_wallet("Cash", "100")
    service = WalletService.with_session(session)

    with pytest.raises(WalletNotFoundError):
        await service.get_wallet(OTHER_OWNER, wallet.id)
    assert await service.list_wallets(OTHER_OWNER) == []


async def test_delete_refuses_referenced_wallet(session, make_wallet):
    a = await make_wallet("A", "100")
    b = await make_wallet("B", "0")
    spare = await make_wallet("Spare", "0")
    await TransferLedger.with_session(session).create(
        OWNER,
        TransferCreateInput(from_wallet_id=a.id, to_wallet_id=b.id, amount=Decimal("10"), date=date(2026, 1, 1)),
    )
    service = WalletService.with_session(session)

    with pytest.raises(WalletInUseError):
        await service.delete_wallet(OWNER, a.id)

    await service.delete_wallet(OWNER, spare.id)
    with pytest.raises(WalletNotFoundError):
        await service.get_wallet(OWNER, spare.id)


async def test_total_balance_is_grouped_by_currency(session, make_wallet):
    await make_wallet("Cash", "100.50", currency="NPR")
    await make_wallet("Bank", "899.50", currency="NPR")
    await make_wallet("Card", "20", currency="USD")
    await make_wallet("Elsewhere", "999", owner_id=OTHER_OWNER, currency="USD")

    totals = await WalletService.with_session(session).total_balance(OWNER)

    assert [(t.currency, t.balance, t.wallet_count) for t in totals] == [
        ("NPR", Decimal("1000.00"), 2),
        ("USD", Decimal("20.00"), 1),
    ]


async def test_apply_deltas_checks_every_wallet_before_writing(session, make_wallet):
    a = await make_wallet("A", "100")
    service = WalletService.with_session(session)

    with pytest.raises(WalletNotFoundError):
        await service.apply_deltas(OWNER, [(a.id, Decimal("-50")), ("missing", Decimal("50"))])

    assert (await service.get_wallet(OWNER, a.id)).balance == Decimal("100")
