"""Database Session Manager — async connection pool with automatic rollback and health checks.

Invariants:
    - Every session auto-rolls-back on exception (no partial commits leak)
    - Server databases use pool_pre_ping for stale connection detection
    - All SQLAlchemy exceptions escaping a session mapped to PersistenceError (core/errors.py)
    - connect_db never raises: a failed startup connection is logged, the process keeps serving

Design Decisions:
    - Singleton db_manager initialized on startup: FastAPI lifespan manages lifecycle
      (ADR: no global import side effects)
    - expire_on_commit=False: prevents lazy-load issues in async context
    - SQLite skips pool sizing: its dialect picks its own pool class
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from sqlalchemy.ext.asyncio import (
    AsyncSession, create_async_engine, async_sessionmaker,
)
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy import text

import products_api.models  # noqa: F401
from products_api.core.errors import PersistenceError
from products_api.db.base import Base

logger = logging.getLogger(__name__)


def describe_fault(exc: Exception) -> str:
    """Driver-level message when SQLAlchemy wraps one, else the exception text."""
    orig = getattr(exc, "orig", None)
    return str(orig) if orig is not None else str(exc)


class DatabaseSessionManager:
    """Manages async database sessions with pooling, rollback, and health checks."""

    def __init__(
        self, database_url: str, pool_size: int = 20, max_overflow: int = 10,
    ):
        engine_kwargs: dict = {}
        if not database_url.startswith("sqlite"):
            engine_kwargs = {
                "pool_size": pool_size,
                "max_overflow": max_overflow,
                "pool_pre_ping": True,
                "pool_recycle": 3600,
            }
        self.engine = create_async_engine(database_url, **engine_kwargs)
        self._session_factory = async_sessionmaker(
            self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )

    @asynccontextmanager
    async def session(self) -> AsyncGenerator[AsyncSession, None]:
        """Provide session with auto-rollback on exception."""
        session = self._session_factory()
        try:
            yield session
        except SQLAlchemyError as e:
            await session.rollback()
            logger.error(f"Database error: {e}")
            raise PersistenceError(describe_fault(e), "session")
        finally:
            await session.close()

    async def create_schema(self) -> None:
        """Create missing tables (no-op for tables that already exist)."""
        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

    async def health_check(self) -> bool:
        """Check database connectivity (for readiness probes)."""
        try:
            async with self.session() as db:
                await db.execute(text("SELECT 1"))
            return True
        except Exception as e:
            logger.error(f"DB health check failed: {e}")
            return False

    async def dispose(self) -> None:
        await self.engine.dispose()


# Singleton (initialized on startup)
db_manager: DatabaseSessionManager | None = None


def init_db(database_url: str, **kwargs) -> DatabaseSessionManager:
    global db_manager
    db_manager = DatabaseSessionManager(database_url, **kwargs)
    return db_manager


async def connect_db(auto_create: bool = True) -> bool:
    """Verify connectivity and optionally sync the schema. Logs failures, never raises."""
    if not db_manager:
        raise RuntimeError("Database not initialized")
    try:
        if auto_create:
            await db_manager.create_schema()
        else:
            async with db_manager.engine.connect() as conn:
                await conn.execute(text("SELECT 1"))
    except (SQLAlchemyError, OSError) as e:
        logger.error(f"Error connecting to the database: {describe_fault(e)}")
        return False
    logger.info("Connected to the database")
    return True


async def close_db() -> None:
    if db_manager:
        await db_manager.dispose()


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """FastAPI dependency for database sessions."""
    if not db_manager:
        raise RuntimeError("Database not initialized")
    async with db_manager.session() as session:
        yield session
