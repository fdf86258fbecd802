"""
Acme Stores Backend: Test Configuration (conftest.py)
======================================================

What:  Shared pytest fixtures for the entire test suite.
How:   Environment overrides are applied before any `app` import, so the
       settings singleton and the module-level engine are built for an
       in-memory SQLite database.

Fixture Hierarchy (all function-scoped):
    ├── mock_db_session: AsyncMock session for service unit tests
    ├── db_engine: fresh in-memory SQLite schema per test
    ├── db_session_factory / db_session: sessions bound to db_engine
    ├── seed_stores: commits a known set of Stores
    └── test_client: httpx AsyncClient wired to the app, DB overridden
"""

import os

os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///:memory:"
os.environ["LOG_LEVEL"] = "WARNING"
os.environ["RATE_LIMIT_ENABLED"] = "false"

from typing import AsyncGenerator, Dict
from unittest.mock import AsyncMock, MagicMock

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

import app.models  # noqa: F401  (registers tables on Base.metadata)
from app.database import Base, get_db_session
from app.models.store import Store


# ══════════════════════════════════════════════════════════════════════════
# Unit-test fixtures
# ══════════════════════════════════════════════════════════════════════════

@pytest.fixture
def mock_db_session():
    """
    A mock AsyncSession for tests that patch the repository.

    Usage:
        async def test_get(mock_db_session):
            with patch("app.services.store_service.store_repository") as repo:
                repo.find_by_id = AsyncMock(return_value=store)
                await StoreService().get_store(mock_db_session, str(store.id))
    """
    session = AsyncMock()
    session.execute = AsyncMock()
    session.flush = AsyncMock()
    session.commit = AsyncMock()
    session.rollback = AsyncMock()
    session.close = AsyncMock()
    session.get = AsyncMock()
    session.add = MagicMock()
    return session


# ══════════════════════════════════════════════════════════════════════════
# Database fixtures
# ══════════════════════════════════════════════════════════════════════════

@pytest_asyncio.fixture
async def db_engine():
    """
    An in-memory SQLite engine with every table created.

    StaticPool keeps a single connection, so each session sees the same
    in-memory database.
    """
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest_asyncio.fixture
async def db_session_factory(db_engine):
    return async_sessionmaker(db_engine, class_=AsyncSession, expire_on_commit=False)


@pytest_asyncio.fixture
async def db_session(db_session_factory) -> AsyncGenerator[AsyncSession, None]:
    async with db_session_factory() as session:
        yield session


@pytest_asyncio.fixture
async def seed_stores(db_session_factory) -> Dict[str, Store]:
    """
    Commits three Stores and returns them keyed by city.

    Names and addresses are chosen so that substring searches can hit the
    name of one store and the address of another.
    """
    stores = {
        "aracaju": Store(name="Aracaju", address="Rua Laranjeiras, Centro, Aracaju/SE"),
        "vitoria": Store(name="Vitoria", address="Avenida Beira Mar, Vitoria/ES"),
        "recife": Store(name="Recife Antigo", address="Rua do Bom Jesus, Recife/PE"),
    }
    async with db_session_factory() as session:
        session.add_all(list(stores.values()))
        await session.commit()
    return stores


@pytest_asyncio.fixture
async def test_client(db_session_factory) -> AsyncGenerator[AsyncClient, None]:
    """
    HTTPX AsyncClient talking to the FastAPI app through ASGITransport.

    get_db_session is overridden with a session from the test engine that
    keeps the same commit/rollback contract as the real dependency.
    """
    from app.main import app

    async def override_get_db_session() -> AsyncGenerator[AsyncSession, None]:
        async with db_session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    app.dependency_overrides[get_db_session] = override_get_db_session
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
    app.dependency_overrides.clear()
