"""Category endpoints."""
from __future__ import annotations

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from fintrackr.interfaces.http.deps import commit, get_current_owner, get_db_session
from fintrackr.interfaces.http.errors import domain_errors
from fintrackr.modules.categories import CategoryCreateInput, CategoryService, CategoryUpdateInput
from fintrackr.modules.common import UNSET
from fintrackr.schemas import (
    CategoryCreate,
    CategoryListResponse,
    CategoryResponse,
    CategoryUpdate,
    SuccessResponse,
)

router = APIRouter()


@router.get("", response_model=CategoryListResponse, summary="List categories")
async def list_categories(
    owner_id: str = Depends(get_current_owner),
    db: AsyncSession = Depends(get_db_session),
) -> CategoryListResponse:
    with domain_errors():
        categories = await CategoryService.with_session(db).list_categories(owner_id)
    return CategoryListResponse(categories=[CategoryResponse.model_validate(item) for item in categories])


@router.post("", response_model=CategoryResponse, status_code=status.HTTP_201_CREATED, summary="Create a category")
async def create_category(
    payload: CategoryCreate,
    owner_id: str = Depends(get_current_owner),
    db: AsyncSession = Depends(get_db_session),
) -> CategoryResponse:
    with domain_errors():
        category = await CategoryService.with_session(db).create_category(
            owner_id, CategoryCreateInput(name=payload.name, color=payload.color)
        )
        await commit(db)
    return CategoryResponse.model_validate(category)


@router.get("/{category_id}", response_model=CategoryResponse, summary="Get a category")
async def get_category(
    category_id: str,
    owner_id: str = Depends(get_current_owner),
    db: AsyncSession = Depends(get_db_session),
) -> CategoryResponse:
    with domain_errors():
        category = await CategoryService.with_session(db).get_category(owner_id, category_id)
    return CategoryResponse.model_validate(category)


@router.patch("/{category_id}", response_model=CategoryResponse, summary="Rename or recolour a category")
async def update_category(
    category_id: str,
    payload: CategoryUpdate,
    owner_id: str = Depends(get_current_owner),
    db: AsyncSession = Depends(get_db_session),
) -> CategoryResponse:
    changes = payload.model_dump(exclude_unset=True)
    with domain_errors():
        category = await CategoryService.with_session(db).update_category(
            owner_id,
            category_id,
            CategoryUpdateInput(name=changes.get("name", UNSET), color=changes.get("color", UNSET)),
        )
        await commit(db)
    return CategoryResponse.model_validate(category)


@router.delete("/{category_id}", response_model=SuccessResponse, summary="Delete a category")
async def delete_category(
    category_id: str,
    owner_id: str = Depends(get_current_owner),
    db: AsyncSession = Depends(get_db_session),
) -> SuccessResponse:
    """Transactions in the category are kept and become uncategorized."""
    with domain_errors():
        await CategoryService.with_session(db).delete_category(owner_id, category_id)
        await commit(db)
    return SuccessResponse(message="Category deleted")
