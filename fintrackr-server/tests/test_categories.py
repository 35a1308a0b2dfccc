from datetime import date
from decimal import Decimal

import pytest

from fintrackr.modules.categories import (
    DEFAULT_COLOR,
    CategoryAlreadyExistsError,
    CategoryCreateInput,
    CategoryNotFoundError,
    CategoryService,
    CategoryUpdateInput,
)
from fintrackr.modules.common import ValidationError
from fintrackr.modules.transactions import TransactionCreateInput, TransactionService

from .conftest import OTHER_OWNER, OWNER


async def test_create_and_list_sorted_by_name(session):
    service = CategoryService.with_session(session)
    await service.create_category(OWNER, CategoryCreateInput(name="Travel", color="#10b981"))
    food = await service.create_category(OWNER, CategoryCreateInput(name="Food"))

    assert food.color == DEFAULT_COLOR
    categories = await service.list_categories(OWNER)
    assert [c.name for c in categories] == ["Food", "Travel"]
    assert categories[1].color == "#10B981"
    assert await service.list_categories(OTHER_OWNER) == []


async def test_duplicate_names_are_rejected_case_insensitively(session):
    service = CategoryService.with_session(session)
    await service.create_category(OWNER, CategoryCreateInput(name="Food"))
    bills = await service.create_category(OWNER, CategoryCreateInput(name="Bills"))

    with pytest.raises(CategoryAlreadyExistsError):
        await service.create_category(OWNER, CategoryCreateInput(name="food"))
    with pytest.raises(CategoryAlreadyExistsError):
        await service.update_category(OWNER, bills.id, CategoryUpdateInput(name="FOOD"))

    await service.create_category(OTHER_OWNER, CategoryCreateInput(name="Food"))


@pytest.mark.parametrize("color", ["red", "#12345", "#GGGGGG", ""])
async def test_invalid_color_is_rejected(session, color):
    with pytest.raises(ValidationError):
        await CategoryService.with_session(session).create_category(OWNER, CategoryCreateInput(name="X", color=color))


async def test_delete_uncategorizes_transactions(session, make_wallet):
    wallet = await make_wallet("Cash", "100")
    categories = CategoryService.with_session(session)
    transactions = TransactionService.with_session(session)
    food = await categories.create_category(OWNER, CategoryCreateInput(name="Food"))
    tx = await transactions.create(
        OWNER,
        TransactionCreateInput(
            wallet_id=wallet.id,
            reason="Dinner",
            type="expense",
            amount=Decimal("20"),
            date=date(2026, 10, 10),
            category_id=food.id,
        ),
    )

    await categories.delete_category(OWNER, food.id)

    assert (await transactions.get(OWNER, tx.id)).category_id is None
    with pytest.raises(CategoryNotFoundError):
        await categories.get_category(OWNER, food.id)
