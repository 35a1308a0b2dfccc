from datetime import date
from decimal import Decimal

import pytest

from fintrackr.modules.common import ValidationError
from fintrackr.modules.transfers import (
    CANCELLED,
    COMPLETED,
    PENDING,
    TransferCreateInput,
    TransferLedger,
    TransferNotFoundError,
    TransferUpdateInput,
)
from fintrackr.modules.wallets import WalletNotFoundError, WalletService

from .conftest import OTHER_OWNER, OWNER

TODAY = date(2026, 10, 19)


async def balances(session, *wallets) -> list[Decimal]:
    service = WalletService.with_session(session)
    return [(await service.get_wallet(OWNER, wallet.id)).balance for wallet in wallets]


def transfer_input(source, destination, amount="200", status=COMPLETED) -> TransferCreateInput:
    return TransferCreateInput(
        from_wallet_id=source.id,
        to_wallet_id=destination.id,
        amount=Decimal(amount),
        date=TODAY,
        status=status,
    )


async def test_completed_transfer_moves_money_between_two_wallets_only(session, make_wallet):
    a = await make_wallet("A", "1000")
    b = await make_wallet("B", "500")
    bystander = await make_wallet("C", "42.50")
    ledger = TransferLedger.with_session(session)

    transfer = await ledger.create(OWNER, transfer_input(a, b, "123.45"))

    assert transfer.applied is True
    assert await balances(session, a, b, bystander) == [Decimal("876.55"), Decimal("623.45"), Decimal("42.50")]


async def test_scenario_create_update_delete(session, make_wallet):
    a = await make_wallet("A", "1000")
    b = await make_wallet("B", "500")
    ledger = TransferLedger.with_session(session)

    transfer = await ledger.create(OWNER, transfer_input(a, b, "200"))
    assert await balances(session, a, b) == [Decimal("800"), Decimal("700")]

    await ledger.update(OWNER, transfer.id, TransferUpdateInput(amount=Decimal("300")))
    assert await balances(session, a, b) == [Decimal("700"), Decimal("800")]

    await ledger.delete(OWNER, transfer.id)
    assert await balances(session, a, b) == [Decimal("1000"), Decimal("500")]
    with pytest.raises(TransferNotFoundError):
        await ledger.get(OWNER, transfer.id)


async def test_create_then_delete_restores_exact_balances(session, make_wallet):
    a = await make_wallet("A", "0.10")
    b = await make_wallet("B", "0.20")
    ledger = TransferLedger.with_session(session)

    for amount in ("0.01", "0.07", "19.99", "0.10"):
        transfer = await ledger.create(OWNER, transfer_input(a, b, amount))
        await ledger.delete(OWNER, transfer.id)

    assert await balances(session, a, b) == [Decimal("0.10"), Decimal("0.20")]


@pytest.mark.parametrize("status", [PENDING, CANCELLED])
async def test_non_completed_transfer_leaves_balances_alone(session, make_wallet, status):
    a = await make_wallet("A", "1000")
    b = await make_wallet("B", "500")
    ledger = TransferLedger.with_session(session)

    transfer = await ledger.create(OWNER, transfer_input(a, b, "200", status=status))
    assert transfer.applied is False
    assert await balances(session, a, b) == [Decimal("1000"), Decimal("500")]

    await ledger.delete(OWNER, transfer.id)
    assert await balances(session, a, b) == [Decimal("1000"), Decimal("500")]


async def test_status_toggle_is_net_zero(session, make_wallet):
    a = await make_wallet("A", "1000")
    b = await make_wallet("B", "500")
    ledger = TransferLedger.with_session(session)
    transfer = await ledger.create(OWNER, transfer_input(a, b, "200"))

    paused = await ledger.update(OWNER, transfer.id, TransferUpdateInput(status=PENDING))
    assert paused.applied is False
    assert await balances(session, a, b) == [Decimal("1000"), Decimal("500")]

    resumed = await ledger.update(OWNER, transfer.id, TransferUpdateInput(status=COMPLETED))
    assert resumed.applied is True
    assert await balances(session, a, b) == [Decimal("800"), Decimal("700")]


async def test_pending_to_completed_applies_new_values(session, make_wallet):
    a = await make_wallet("A", "1000")
    b = await make_wallet("B", "500")
    ledger = TransferLedger.with_session(session)
    transfer = await ledger.create(OWNER, transfer_input(a, b, "200", status=PENDING))

    await ledger.update(OWNER, transfer.id, TransferUpdateInput(amount=Decimal("50"), status=COMPLETED))

    assert await balances(session, a, b) == [Decimal("950"), Decimal("550")]


async def test_reassigning_destination_moves_only_the_credit(session, make_wallet):
    w1 = await make_wallet("W1", "1000")
    w2 = await make_wallet("W2", "500")
    w3 = await make_wallet("W3", "0")
    ledger = TransferLedger.with_session(session)
    transfer = await ledger.create(OWNER, transfer_input(w1, w2, "200"))

    await ledger.update(OWNER, transfer.id, TransferUpdateInput(to_wallet_id=w3.id))

    assert await balances(session, w1, w2, w3) == [Decimal("800"), Decimal("500"), Decimal("200")]


async def test_swapping_direction_reverses_the_old_effect_first(session, make_wallet):
    a = await make_wallet("A", "1000")
    b = await make_wallet("B", "500")
    ledger = TransferLedger.with_session(session)
    transfer = await ledger.create(OWNER, transfer_input(a, b, "200"))

    await ledger.update(OWNER, transfer.id, TransferUpdateInput(from_wallet_id=b.id, to_wallet_id=a.id))

    assert await balances(session, a, b) == [Decimal("1200"), Decimal("300")]


async def test_same_wallet_is_rejected_without_writes(session, make_wallet):
    a = await make_wallet("A", "1000")
    ledger = TransferLedger.with_session(session)

    with pytest.raises(ValidationError, match="same wallet"):
        await ledger.create(OWNER, transfer_input(a, a, "100"))

    assert await balances(session, a) == [Decimal("1000")]
    assert await ledger.list(OWNER) == []


@pytest.mark.parametrize("amount", ["0", "-5", "-0.01"])
async def test_non_positive_amount_is_rejected(session, make_wallet, amount):
    a = await make_wallet("A", "1000")
    b = await make_wallet("B", "500")
    ledger = TransferLedger.with_session(session)

    with pytest.raises(ValidationError, match="non-positive amount"):
        await ledger.create(OWNER, transfer_input(a, b, amount))

    assert await balances(session, a, b) == [Decimal("1000"), Decimal("500")]


@pytest.mark.parametrize("amount", ["0.001", "100.999"])
async def test_sub_cent_amount_is_rejected_not_rounded(session, make_wallet, amount):
    a = await make_wallet("A", "1000")
    b = await make_wallet("B", "500")
    ledger = TransferLedger.with_session(session)

    with pytest.raises(ValidationError, match="whole number of cents"):
        await ledger.create(OWNER, transfer_input(a, b, amount))

    assert await balances(session, a, b) == [Decimal("1000"), Decimal("500")]


@pytest.mark.parametrize("amount", ["1e30", "100000000000000000"])
async def test_oversized_amount_is_rejected(session, make_wallet, amount):
    a = await make_wallet("A", "1000")
    b = await make_wallet("B", "500")
    ledger = TransferLedger.with_session(session)

    with pytest.raises(ValidationError):
        await ledger.create(OWNER, transfer_input(a, b, amount))

    assert await balances(session, a, b) == [Decimal("1000"), Decimal("500")]


async def test_transfer_that_would_overflow_destination_balance_changes_nothing(session, make_wallet):
    a = await make_wallet("A", "9999999999999.99")
    b = await make_wallet("B", "9999999999999.99")
    ledger = TransferLedger.with_session(session)

    with pytest.raises(ValidationError, match="storable range"):
        await ledger.create(OWNER, transfer_input(a, b, "0.01"))

    assert await balances(session, a, b) == [Decimal("9999999999999.99"), Decimal("9999999999999.99")]


async def test_invalid_edit_keeps_previous_effect(session, make_wallet):
    a = await make_wallet("A", "1000")
    b = await make_wallet("B", "500")
    ledger = TransferLedger.with_session(session)
    transfer = await ledger.create(OWNER, transfer_input(a, b, "200"))

    with pytest.raises(ValidationError):
        await ledger.update(OWNER, transfer.id, TransferUpdateInput(to_wallet_id=a.id))
    with pytest.raises(ValidationError):
        await ledger.update(OWNER, transfer.id, TransferUpdateInput(status="reversed"))

    assert await balances(session, a, b) == [Decimal("800"), Decimal("700")]
    assert (await ledger.get(OWNER, transfer.id)).applied is True


async def test_wallet_of_another_owner_is_not_found(session, make_wallet):
    mine = await make_wallet("Mine", "1000")
    theirs = await make_wallet("Theirs", "0", owner_id=OTHER_OWNER)
    ledger = TransferLedger.with_session(session)

    with pytest.raises(WalletNotFoundError):
        await ledger.create(OWNER, transfer_input(mine, theirs, "100"))

    assert await balances(session, mine) == [Decimal("1000")]
    other = await WalletService.with_session(session).get_wallet(OTHER_OWNER, theirs.id)
    assert other.balance == Decimal("0")


async def test_transfers_are_scoped_to_their_owner(session, make_wallet):
    a = await make_wallet("A", "1000")
    b = await make_wallet("B", "500")
    ledger = TransferLedger.with_session(session)
    transfer = await ledger.create(OWNER, transfer_input(a, b, "10"))

    with pytest.raises(TransferNotFoundError):
        await ledger.get(OTHER_OWNER, transfer.id)
    with pytest.raises(TransferNotFoundError):
        await ledger.delete(OTHER_OWNER, transfer.id)
    assert await ledger.list(OTHER_OWNER) == []


async def test_list_filters_by_status_and_wallet(session, make_wallet):
    a = await make_wallet("A", "1000")
    b = await make_wallet("B", "500")
    c = await make_wallet("C", "0")
    ledger = TransferLedger.with_session(session)
    first = await ledger.create(OWNER, transfer_input(a, b, "10"))
    second = await ledger.create(OWNER, transfer_input(b, c, "5", status=PENDING))

    assert [t.id for t in await ledger.list(OWNER, status=PENDING)] == [second.id]
    assert [t.id for t in await ledger.list(OWNER, wallet_id=a.id)] == [first.id]
    assert {t.id for t in await ledger.list(OWNER, wallet_id=b.id)} == {first.id, second.id}
    with pytest.raises(ValidationError):
        await ledger.list(OWNER, status="unknown")
