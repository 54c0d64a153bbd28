"""
Announcer Backend — Test Configuration (conftest.py)
=====================================================

What:  Shared pytest fixtures for the test suite.
How:   Every test gets its own SQLite file (aiosqlite) standing in for MySQL
       and its own static assets directory, so tests never touch a real
       store and never share rows.

Fixture Hierarchy (all function-scoped):
    ├── unreachable_engine: Mock AsyncEngine whose connect/begin raise
    ├── test_settings: Settings pointing at a per-test SQLite file and static dir
    ├── service: AnnouncementService over an empty store (no table)
    ├── seeded_service: AnnouncementService over an initialized store
    ├── app: FastAPI app built from test_settings (store not initialized)
    ├── seeded_app: Same app with the store initialized and seeded
    └── test_client / seeded_client: HTTPX AsyncClient for endpoint testing
"""

import os
import tempfile
from unittest.mock import AsyncMock, MagicMock

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport

# Override settings BEFORE any announcer import: announcer.main builds a
# module-level app from the environment.
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///" + os.path.join(
    tempfile.mkdtemp(prefix="announcer_test_"), "module.db"
)
os.environ["LOG_LEVEL"] = "WARNING"

from announcer.config import Settings  # noqa: E402
from announcer.main import create_app  # noqa: E402
from announcer.services.announcement_service import AnnouncementService  # noqa: E402

INDEX_HTML = b"<!DOCTYPE html><html><body><div id=\"announcements\"></div></body></html>"


@pytest.fixture
def unreachable_engine():
    """
    Stand-in AsyncEngine whose connect() fails the way an unreachable
    MySQL host does. Avoids opening a real driver connection that never
    completes.
    """
    engine = MagicMock()
    engine.connect.side_effect = ConnectionRefusedError("Can't connect to MySQL server")
    engine.begin.side_effect = ConnectionRefusedError("Can't connect to MySQL server")
    engine.dispose = AsyncMock()
    return engine


@pytest.fixture
def static_dir(tmp_path):
    """A static assets directory holding a minimal index.html."""
    public = tmp_path / "public"
    public.mkdir()
    (public / "index.html").write_bytes(INDEX_HTML)
    return public


@pytest.fixture
def test_settings(tmp_path, static_dir):
    """Settings for an isolated SQLite store under tmp_path."""
    return Settings(
        database_url=f"sqlite+aiosqlite:///{tmp_path / 'announcements.db'}",
        static_dir=str(static_dir),
        log_level="WARNING",
    )


@pytest_asyncio.fixture
async def service(test_settings):
    """Service over a store whose announcements table does not exist yet."""
    svc = AnnouncementService(test_settings)
    yield svc
    await svc.dispose()


@pytest_asyncio.fixture
async def seeded_service(service):
    """Service over a store initialized with the three seed rows."""
    await service.initialize()
    return service


@pytest_asyncio.fixture
async def app(test_settings):
    """
    Application built from test_settings.

    ASGITransport does not run the lifespan, so no startup connection
    check happens here; tests that need it call the lifespan directly.
    """
    application = create_app(test_settings)
    yield application
    await application.state.announcement_service.dispose()


@pytest_asyncio.fixture
async def seeded_app(app):
    await app.state.announcement_service.initialize()
    return app


@pytest_asyncio.fixture
async def test_client(app):
    """
    HTTPX AsyncClient routed straight into the app.

    Usage:
        async def test_missing_table(test_client):
            response = await test_client.get("/api/announcements")
            assert response.status_code == 500
    """
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


@pytest_asyncio.fixture
async def seeded_client(seeded_app):
    transport = ASGITransport(app=seeded_app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
