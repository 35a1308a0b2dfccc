"""SQLAlchemy implementation of the category repository."""

from __future__ import annotations

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from fintrackr.db.models import Category


class SqlCategoryRepository:
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def get_category(self, owner_id: str, category_id: str) -> Category | None:
        stmt = select(Category).where(Category.id == category_id, Category.user_id == owner_id)
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_by_name(self, owner_id: str, name: str) -> Category | None:
        stmt = select(Category).where(Category.user_id == owner_id, func.lower(Category.name) == name.lower())
        result = await self._session.execute(stmt)
        return result.scalars().first()

    async def list_categories(self, owner_id: str) -> list[Category]:
        stmt = select(Category).where(Category.user_id == owner_id).order_by(Category.name)
        result = await self._session.execute(stmt)
        return list(result.scalars().all())

    async def create_category(self, owner_id: str, *, name: str, color: str) -> Category:
        model = Category(user_id=owner_id, name=name, color=color)
        self._session.add(model)
        await self._session.flush()
        return model

    async def update_category(self, model: Category, *, name: str, color: str) -> Category:
        model.name = name
        model.color = color
        await self._session.flush()
        return model

    async def delete_category(self, model: Category) -> None:
        await self._session.delete(model)
        await self._session.flush()
