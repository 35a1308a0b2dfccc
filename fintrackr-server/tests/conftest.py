from collections.abc import AsyncGenerator
from decimal import Decimal

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from fintrackr.core.security import create_access_token
from fintrackr.db import models  # noqa: F401
from fintrackr.infrastructure.database import Base, build_engine
from fintrackr.interfaces.http.deps import get_db_session
from fintrackr.main import app
from fintrackr.modules.wallets import WalletCreateInput, WalletService

OWNER = "owner-1"
OTHER_OWNER = "owner-2"


@pytest.fixture
async def engine(tmp_path):
    engine = build_engine(f"sqlite+aiosqlite:///{tmp_path / 'fintrackr.db'}")
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(engine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(bind=engine, class_=AsyncSession, expire_on_commit=False)


@pytest.fixture
async def session(session_factory) -> AsyncGenerator[AsyncSession, None]:
    async with session_factory() as session:
        yield session


@pytest.fixture
def make_wallet(session):
    async def _make(name: str, balance: str = "0", owner_id: str = OWNER, currency: str | None = None):
        service = WalletService.with_session(session)
        return await service.create_wallet(
            owner_id, WalletCreateInput(name=name, balance=Decimal(balance), currency=currency)
        )

    return _make


@pytest.fixture
async def client(session_factory) -> AsyncGenerator[AsyncClient, None]:
    async def _override() -> AsyncGenerator[AsyncSession, None]:
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    app.dependency_overrides[get_db_session] = _override
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://testserver") as http:
        http.headers["Authorization"] = f"Bearer {create_access_token(OWNER)}"
        yield http
    app.dependency_overrides.clear()
