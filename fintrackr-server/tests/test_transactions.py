from datetime import date
from decimal import Decimal

import pytest

from fintrackr.modules.categories import CategoryCreateInput, CategoryNotFoundError, CategoryService
from fintrackr.modules.common import ValidationError
from fintrackr.modules.transactions import (
    EXPENSE,
    INCOME,
    TransactionCreateInput,
    TransactionFilter,
    TransactionNotFoundError,
    TransactionService,
    TransactionUpdateInput,
)
from fintrackr.modules.wallets import WalletNotFoundError, WalletService

from .conftest import OTHER_OWNER, OWNER


async def balance(session, wallet) -> Decimal:
    return (await WalletService.with_session(session).get_wallet(OWNER, wallet.id)).balance


def entry(wallet, type=EXPENSE, amount="25", on=date(2026, 10, 5), category_id=None, reason="Groceries"):
    return TransactionCreateInput(
        wallet_id=wallet.id,
        reason=reason,
        type=type,
        amount=Decimal(amount),
        date=on,
        category_id=category_id,
    )


async def test_income_and_expense_adjust_wallet_balance(session, make_wallet):
    wallet = await make_wallet("Cash", "100")
    service = TransactionService.with_session(session)

    await service.create(OWNER, entry(wallet, INCOME, "50"))
    assert await balance(session, wallet) == Decimal("150")

    expense = await service.create(OWNER, entry(wallet, EXPENSE, "30.25"))
    assert expense.signed_amount == Decimal("-30.25")
    assert await balance(session, wallet) == Decimal("119.75")


async def test_editing_reverses_previous_effect(session, make_wallet):
    cash = await make_wallet("Cash", "100")
    bank = await make_wallet("Bank", "100")
    service = TransactionService.with_session(session)
    tx = await service.create(OWNER, entry(cash, EXPENSE, "40"))

    await service.update(OWNER, tx.id, TransactionUpdateInput(type=INCOME))
    assert await balance(session, cash) == Decimal("140")

    await service.update(OWNER, tx.id, TransactionUpdateInput(wallet_id=bank.id, amount=Decimal("10")))
    assert await balance(session, cash) == Decimal("100")
    assert await balance(session, bank) == Decimal("110")


async def test_delete_reverses_effect(session, make_wallet):
    wallet = await make_wallet("Cash", "100")
    service = TransactionService.with_session(session)
    tx = await service.create(OWNER, entry(wallet, EXPENSE, "99.99"))

    await service.delete(OWNER, tx.id)

    assert await balance(session, wallet) == Decimal("100")
    with pytest.raises(TransactionNotFoundError):
        await service.get(OWNER, tx.id)


@pytest.mark.parametrize(
    "overrides",
    [
        {"amount": "0"},
        {"amount": "-1"},
        {"type": "refund"},
        {"reason": "  "},
    ],
)
async def test_invalid_entries_are_rejected(session, make_wallet, overrides):
    wallet = await make_wallet("Cash", "100")
    service = TransactionService.with_session(session)

    with pytest.raises(ValidationError):
        await service.create(OWNER, entry(wallet, **overrides))

    assert await balance(session, wallet) == Decimal("100")


async def test_unknown_wallet_or_category_is_not_found(session, make_wallet):
    wallet = await make_wallet("Cash", "100")
    foreign = await make_wallet("Foreign", "0", owner_id=OTHER_OWNER)
    service = TransactionService.with_session(session)

    with pytest.raises(WalletNotFoundError):
        await service.create(OWNER, entry(foreign))
    with pytest.raises(CategoryNotFoundError):
        await service.create(OWNER, entry(wallet, category_id="nope"))


async def test_list_filters(session, make_wallet):
    cash = await make_wallet("Cash", "1000")
    bank = await make_wallet("Bank", "1000")
    food = await CategoryService.with_session(session).create_category(OWNER, CategoryCreateInput(name="Food"))
    service = TransactionService.with_session(session)
    lunch = await service.create(OWNER, entry(cash, on=date(2026, 10, 1), category_id=food.id, reason="Lunch"))
    salary = await service.create(OWNER, entry(bank, INCOME, "500", on=date(2026, 10, 3), reason="Salary"))
    older = await service.create(OWNER, entry(cash, on=date(2026, 9, 15), reason="Taxi"))

    everything = await service.list(OWNER)
    assert [tx.id for tx in everything] == [salary.id, lunch.id, older.id]

    assert [tx.id for tx in await service.list(OWNER, TransactionFilter(wallet_id=cash.id))] == [lunch.id, older.id]
    assert [tx.id for tx in await service.list(OWNER, TransactionFilter(category_id=food.id))] == [lunch.id]
    assert [tx.id for tx in await service.list(OWNER, TransactionFilter(type=INCOME))] == [salary.id]
    october = TransactionFilter(date_from=date(2026, 10, 1), date_to=date(2026, 10, 31))
    assert {tx.id for tx in await service.list(OWNER, october)} == {lunch.id, salary.id}
    assert len(await service.list(OWNER, TransactionFilter(limit=1, offset=1))) == 1

    with pytest.raises(ValidationError):
        await service.list(OWNER, TransactionFilter(date_from=date(2026, 10, 2), date_to=date(2026, 10, 1)))


@pytest.mark.parametrize("amount", ["1e30", "100000000000000000", "25.001"])
async def test_unstorable_transaction_amount_leaves_wallet_untouched(session, make_wallet, amount):
    wallet = await make_wallet("Cash", "100")
    service = TransactionService.with_session(session)

    with pytest.raises(ValidationError):
        await service.create(OWNER, entry(wallet, INCOME, amount))

    assert await balance(session, wallet) == Decimal("100")
