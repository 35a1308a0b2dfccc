"""Repository protocol for categories."""

from __future__ import annotations

from typing import Protocol, Sequence

from fintrackr.db.models import Category as CategoryModel


class CategoryRepository(Protocol):
    async def get_category(self, owner_id: str, category_id: str) -> CategoryModel | None:
        ...

    async def get_by_name(self, owner_id: str, name: str) -> CategoryModel | None:
        ...

    async def list_categories(self, owner_id: str) -> Sequence[CategoryModel]:
        ...

    async def create_category(self, owner_id: str, *, name: str, color: str) -> CategoryModel:
        ...

    async def update_category(self, model: CategoryModel, *, name: str, color: str) -> CategoryModel:
        ...

    async def delete_category(self, model: CategoryModel) -> None:
        ...
