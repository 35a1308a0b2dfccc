"""Database infrastructure helpers (engine, sessions, migrations)."""

from .base import Base
from .session import build_engine, get_engine, get_session, init_db
from .types import Money

__all__ = ["Base", "Money", "build_engine", "get_engine", "get_session", "init_db"]
