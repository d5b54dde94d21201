"""API test fixtures: FastAPI apps per storage layout + httpx test clients.

Invariants:
    - app.state.db_manager is replaced by a manager bound to the test engine
    - The lifespan never runs (ASGITransport skips it), so no real DB is contacted

Design Decisions:
    - Manager built with __new__: skips engine creation, reuses the test engine + factory
"""

import pytest
from httpx import ASGITransport, AsyncClient

from catalog.config import Settings
from catalog.infrastructure.database import DatabaseSessionManager
from catalog.main import create_app


def _settings(**overrides) -> Settings:
    return Settings(
        database_url="sqlite+aiosqlite:///:memory:",
        log_format="text",
        **overrides,
    )


def _bind_test_manager(app, test_engine, test_session_factory):
    fake_manager = DatabaseSessionManager.__new__(DatabaseSessionManager)
    fake_manager.engine = test_engine
    fake_manager._session_factory = test_session_factory
    app.state.db_manager = fake_manager
    return fake_manager


@pytest.fixture
def records_app():
    return create_app(_settings(storage_layout="records"))


@pytest.fixture
def blob_app():
    return create_app(_settings(storage_layout="blob"))


@pytest.fixture
async def client(records_app, test_engine, test_session_factory):
    """Client for the records layout."""
    _bind_test_manager(records_app, test_engine, test_session_factory)
    async with AsyncClient(
        transport=ASGITransport(app=records_app), base_url="http://test",
    ) as c:
        yield c


@pytest.fixture
async def blob_client(blob_app, test_engine, test_session_factory):
    """Client for the blob layout."""
    _bind_test_manager(blob_app, test_engine, test_session_factory)
    async with AsyncClient(
        transport=ASGITransport(app=blob_app), base_url="http://test",
    ) as c:
        yield c


@pytest.fixture
async def dev_client(test_engine, test_session_factory):
    """Records-layout client with error details exposed."""
    app = create_app(_settings(environment="development"))
    _bind_test_manager(app, test_engine, test_session_factory)
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c
