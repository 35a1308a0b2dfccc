"""Database session dependency."""

from sqlalchemy.ext.asyncio import AsyncSession

from fintrackr.infrastructure.database.session import get_session as get_db_session
from fintrackr.modules.common import backend_errors


async def commit(db: AsyncSession) -> None:
    """Commit the request's unit of work."""
    with backend_errors("commit"):
        await db.commit()


__all__ = ["commit", "get_db_session"]
