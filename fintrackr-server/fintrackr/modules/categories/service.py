"""Domain services for transaction categories."""

from __future__ import annotations

import re
from typing import Sequence

from sqlalchemy.ext.asyncio import AsyncSession

from fintrackr.db.models import Category as CategoryModel
from fintrackr.infrastructure.database.repositories.category_repository import SqlCategoryRepository
from fintrackr.infrastructure.database.repositories.transaction_repository import SqlTransactionRepository
from fintrackr.modules.common import ValidationError, backend_errors, resolve

from .exceptions import CategoryAlreadyExistsError, CategoryNotFoundError
from .models import Category, CategoryCreateInput, CategoryUpdateInput
from .repository import CategoryRepository

COLOR_PATTERN = re.compile(r"^#[0-9A-Fa-f]{6}$")


class CategoryService:
    """Encapsulates category use cases."""

    def __init__(self, repository: CategoryRepository, transactions: SqlTransactionRepository) -> None:
        self._repository = repository
        self._transactions = transactions

    @classmethod
    def with_session(cls, session: AsyncSession) -> "CategoryService":
        return cls(SqlCategoryRepository(session), SqlTransactionRepository(session))

    async def list_categories(self, owner_id: str) -> Sequence[Category]:
        with backend_errors("list categories"):
            models = await self._repository.list_categories(owner_id)
        return [self._to_domain(model) for model in models]

    async def get_category(self, owner_id: str, category_id: str) -> Category:
        with backend_errors("load category"):
            model = await self._repository.get_category(owner_id, category_id)
        if model is None:
            raise CategoryNotFoundError(category_id)
        return self._to_domain(model)

    async def create_category(self, owner_id: str, payload: CategoryCreateInput) -> Category:
        name, color = _validated(payload.name, payload.color)
        with backend_errors("create category"):
            if await self._repository.get_by_name(owner_id, name) is not None:
                raise CategoryAlreadyExistsError(f"category already exists: {name}")
            model = await self._repository.create_category(owner_id, name=name, color=color)
        return self._to_domain(model)

    async def update_category(self, owner_id: str, category_id: str, payload: CategoryUpdateInput) -> Category:
        with backend_errors("update category"):
            model = await self._repository.get_category(owner_id, category_id)
            if model is None:
                raise CategoryNotFoundError(category_id)
            name, color = _validated(resolve(payload.name, model.name), resolve(payload.color, model.color))
            existing = await self._repository.get_by_name(owner_id, name)
            if existing is not None and existing.id != model.id:
                raise CategoryAlreadyExistsError(f"category already exists: {name}")
            model = await self._repository.update_category(model, name=name, color=color)
        return self._to_domain(model)

    async def delete_category(self, owner_id: str, category_id: str) -> None:
        """Delete the category; its transactions become uncategorized."""
        with backend_errors("delete category"):
            model = await self._repository.get_category(owner_id, category_id)
            if model is None:
                raise CategoryNotFoundError(category_id)
            await self._transactions.clear_category(owner_id, category_id)
            await self._repository.delete_category(model)

    @staticmethod
    def _to_domain(model: CategoryModel) -> Category:
        return Category(
            id=model.id,
            owner_id=model.user_id,
            name=model.name,
            color=model.color,
            created_at=model.created_at,
        )


def _validated(name: str | None, color: str | None) -> tuple[str, str]:
    cleaned = (name or "").strip()
    if not cleaned:
        raise ValidationError("category name is required")
    if not color or not COLOR_PATTERN.match(color):
        raise ValidationError("color must look like #RRGGBB")
    return cleaned, color.upper()
