"""DatabaseSessionManager: startup checks and SQLAlchemy error mapping."""

import pytest
from sqlalchemy import text

from catalog.core.errors import StartupError, StorageError
from catalog.infrastructure.database import DatabaseSessionManager


async def test_connect_creates_tables(tmp_path):
    manager = DatabaseSessionManager(f"sqlite+aiosqlite:///{tmp_path}/catalog.db")
    await manager.connect()
    async with manager.session() as db:
        result = await db.execute(text("SELECT COUNT(*) FROM partners"))
        assert result.scalar_one() == 0
    await manager.dispose()


async def test_connect_failure_raises_startup_error(tmp_path):
    missing = tmp_path / "missing" / "nested" / "catalog.db"
    manager = DatabaseSessionManager(f"sqlite+aiosqlite:///{missing}")
    with pytest.raises(StartupError, match="Database connection failed"):
        await manager.connect()
    await manager.dispose()


async def test_session_maps_sqlalchemy_errors(tmp_path):
    manager = DatabaseSessionManager(f"sqlite+aiosqlite:///{tmp_path}/catalog.db")
    with pytest.raises(StorageError) as exc_info:
        async with manager.session() as db:
            await db.execute(text("SELECT * FROM no_such_table"))
    assert exc_info.value.http_status == 500
    assert "no_such_table" in exc_info.value.context.debug_info["cause"]
    await manager.dispose()


async def test_health_check_reports_connectivity(tmp_path):
    manager = DatabaseSessionManager(f"sqlite+aiosqlite:///{tmp_path}/catalog.db")
    assert await manager.health_check() is True
    await manager.dispose()
