"""Root conftest — shared test configuration and in-memory database fixtures.

Invariants:
    - Environment defaults set before products_api.main is imported (settings are cached)
    - Every test gets a fresh in-memory SQLite database

Design Decisions:
    - SQLite in-memory with StaticPool: one shared connection, so every session in a
      test sees the same database (PostgreSQL-specific features not exercised here)
"""

import os

import pytest
from sqlalchemy.ext.asyncio import (
    AsyncSession, create_async_engine, async_sessionmaker,
)
from sqlalchemy.pool import StaticPool

os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("FRONTEND_URL", "http://localhost:5173")
os.environ.setdefault("LOG_FORMAT", "text")

from products_api.db.base import Base  # noqa: E402
import products_api.models  # noqa: E402,F401


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:", echo=False, poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
async def test_session_factory(test_engine):
    return async_sessionmaker(
        test_engine, class_=AsyncSession, expire_on_commit=False,
    )


@pytest.fixture
async def test_db(test_session_factory):
    async with test_session_factory() as session:
        yield session
