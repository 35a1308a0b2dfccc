"""Process-wide wiring: logging and the database engine."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from functools import lru_cache
from typing import Optional

from sqlalchemy.ext.asyncio import AsyncEngine

from fintrackr.core.config import Settings, get_settings
from fintrackr.core.logging_config import configure_logging
from fintrackr.infrastructure.database.session import dispose_engine, get_engine

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class ApplicationContainer:
    settings: Settings
    engine: Optional[AsyncEngine] = None

    def init_infrastructure(self) -> None:
        configure_logging(self.settings)
        self.engine = get_engine()
        logger.info("Database: %s", self.engine.url.render_as_string(hide_password=True))

    async def shutdown(self) -> None:
        await dispose_engine()
        self.engine = None


@lru_cache()
def get_container() -> ApplicationContainer:
    container = ApplicationContainer(settings=get_settings())
    container.init_infrastructure()
    return container


__all__ = ["ApplicationContainer", "get_container"]
