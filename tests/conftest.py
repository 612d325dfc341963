"""
Shared test fixtures and configuration for entire test suite.

Provides: in-memory SQLite engine and sessions, sample settings, and a
TestClient bound to an app running against a fresh database.
Dependencies: pytest, pytest-asyncio, sqlalchemy, aiosqlite, fastapi
System role: Test infrastructure and fixture management
"""

import pytest
from fastapi.testclient import TestClient

from admin_panel.configs import DatabaseSettings, Settings

SQLITE_MEMORY_URL = "sqlite+aiosqlite:///:memory:"


@pytest.fixture
def test_settings() -> Settings:
    """Settings pointing the app at a private in-memory SQLite database."""
    return Settings(
        environment="production",
        database=DatabaseSettings(url=SQLITE_MEMORY_URL),
    )


@pytest.fixture
async def test_engine():
    """
    Create in-memory SQLite async engine with the resource tables.

    Yields:
        AsyncEngine: Engine with tables created (lazy imported to avoid settings issues)
    """
    from admin_panel.boundary.db.connection import create_async_engine_from_settings
    from admin_panel.boundary.db.create_tables import create_all_tables

    engine = create_async_engine_from_settings(DatabaseSettings(url=SQLITE_MEMORY_URL))
    await create_all_tables(engine)

    yield engine

    await engine.dispose()


@pytest.fixture
async def test_async_db(test_engine):
    """
    Open a session on the in-memory test database.

    Yields:
        AsyncSession: Test database session with cleanup
    """
    from admin_panel.boundary.db.connection import create_session_factory

    session_factory = create_session_factory(test_engine)
    async with session_factory() as session:
        yield session
        await session.rollback()


@pytest.fixture
def client(test_settings):
    """
    TestClient for an app whose lifespan has run against a fresh database.

    Server exceptions are rendered as responses so 500 handling is testable.

    Yields:
        TestClient: Client with lifespan entered
    """
    from admin_panel.api.main import create_app

    app = create_app(test_settings, configure_logs=False)
    with TestClient(app, raise_server_exceptions=False) as test_client:
        yield test_client
    app.dependency_overrides.clear()
