"""Database Session Manager: async engine, sessions with automatic rollback, startup checks.

Invariants:
    - Every session auto-rolls-back on a SQLAlchemy exception (no partial commits leak)
    - All SQLAlchemy exceptions raised inside a session are mapped to StorageError
    - connect() failures raise StartupError; the lifespan lets it abort the process
    - The manager lives on app.state, never in a module-level global

Design Decisions:
    - Constructed in the FastAPI lifespan and disposed on shutdown
    - expire_on_commit=False: inserted rows stay readable after commit in async context
    - Pool sizing only applies to server databases; SQLite uses the dialect's default pool
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import Request
from sqlalchemy import text
from sqlalchemy.exc import (
    IntegrityError, OperationalError, DBAPIError, SQLAlchemyError,
)
from sqlalchemy.ext.asyncio import (
    AsyncSession, create_async_engine, async_sessionmaker,
)

from catalog.core.errors import StartupError, StorageError, ErrorContext
from catalog.db.base import Base
import catalog.models  # noqa: F401  registers all tables on Base.metadata

logger = logging.getLogger(__name__)


class DatabaseSessionManager:
    """Manages the async engine and hands out sessions with rollback + error mapping."""

    def __init__(
        self, database_url: str, pool_size: int = 20, max_overflow: int = 10,
    ):
        engine_kwargs = {"pool_pre_ping": True}
        if not database_url.startswith("sqlite"):
            engine_kwargs.update(
                pool_size=pool_size,
                max_overflow=max_overflow,
                pool_recycle=3600,
            )
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
        except IntegrityError as e:
            await session.rollback()
            logger.error(f"DB integrity error: {e}")
            raise _storage_error("Integrity constraint violated", "commit", e)
        except OperationalError as e:
            await session.rollback()
            logger.error(f"DB operational error: {e}")
            raise _storage_error("Connection or operational error", "execute", e)
        except DBAPIError as e:
            await session.rollback()
            logger.error(f"DB driver error: {e}")
            raise _storage_error("Database driver error", "query", e)
        except SQLAlchemyError as e:
            await session.rollback()
            logger.error(f"SQLAlchemy error: {e}")
            raise _storage_error("Database operation failed", "unknown", e)
        finally:
            await session.close()

    async def connect(self) -> None:
        """Verify connectivity and create missing tables. Raises StartupError."""
        try:
            async with self.engine.begin() as conn:
                await conn.execute(text("SELECT 1"))
                await conn.run_sync(Base.metadata.create_all)
        except (SQLAlchemyError, OSError) as e:
            logger.critical(f"Database connection failed: {e}")
            raise StartupError(
                "Database connection failed",
                ErrorContext(operation="connect", debug_info={"cause": str(e)}),
            ) from e

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


def _storage_error(message: str, operation: str, cause: Exception) -> StorageError:
    return StorageError(
        message, operation,
        ErrorContext(debug_info={"cause": str(cause)}),
    )


async def get_db(request: Request) -> AsyncGenerator[AsyncSession, None]:
    """FastAPI dependency for database sessions."""
    db_manager: DatabaseSessionManager | None = getattr(
        request.app.state, "db_manager", None,
    )
    if db_manager is None:
        raise RuntimeError("Database not initialized")
    async with db_manager.session() as session:
        yield session
