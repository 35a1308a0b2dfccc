"""Category domain specific exceptions."""

from fintrackr.modules.common import DomainError


class CategoryError(DomainError):
    """Base class for category errors."""


class CategoryAlreadyExistsError(CategoryError):
    """Raised when the owner already has a category with the same name."""


class CategoryNotFoundError(CategoryError):
    """Raised when the category does not exist or is not visible to the owner."""
