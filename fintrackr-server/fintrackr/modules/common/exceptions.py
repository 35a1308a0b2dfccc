"""Errors shared across finance modules."""

from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Iterator

from sqlalchemy.exc import SQLAlchemyError

logger = logging.getLogger(__name__)


class DomainError(Exception):
    """Base class for domain-layer errors."""


class ValidationError(DomainError):
    """Raised when input violates a domain invariant; nothing has been written."""


class BackendError(DomainError):
    """Raised when a read or write against the store fails."""


@contextmanager
def backend_errors(operation: str) -> Iterator[None]:
    """Re-raise store failures inside the block as :class:`BackendError`."""
    try:
        yield
    except SQLAlchemyError as exc:
        logger.error("%s failed: %s", operation, exc)
        raise BackendError(f"{operation} failed") from exc
