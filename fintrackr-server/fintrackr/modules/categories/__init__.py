"""Exports for transaction categories"""

from .exceptions import CategoryAlreadyExistsError, CategoryError, CategoryNotFoundError
from .models import DEFAULT_COLOR, Category, CategoryCreateInput, CategoryUpdateInput
from .service import CategoryService

__all__ = [
    "DEFAULT_COLOR",
    "Category",
    "CategoryAlreadyExistsError",
    "CategoryCreateInput",
    "CategoryError",
    "CategoryNotFoundError",
    "CategoryService",
    "CategoryUpdateInput",
]
