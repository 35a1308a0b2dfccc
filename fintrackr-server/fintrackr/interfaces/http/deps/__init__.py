"""Reusable FastAPI dependencies."""

from fintrackr.core.security import get_current_owner

from .database import commit, get_db_session

__all__ = [
    "commit",
    "get_current_owner",
    "get_db_session",
]
