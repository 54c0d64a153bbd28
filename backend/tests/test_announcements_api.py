"""
Announcer Backend — HTTP API Tests
===================================

What:  End-to-end tests of GET /api/announcements and static asset serving.
How:   HTTPX AsyncClient over ASGITransport against create_app(), with a
       per-test SQLite store.
"""

from unittest.mock import AsyncMock, MagicMock

import pytest

from announcer.exceptions import DatabaseError
from announcer.main import create_app, lifespan
from announcer.store import SEED_MESSAGES


class TestListAnnouncementsEndpoint:
    """GET /api/announcements"""

    @pytest.mark.asyncio
    async def test_seeded_store_returns_three_announcements(self, seeded_client):
        response = await seeded_client.get("/api/announcements")

        assert response.status_code == 200
        assert response.headers["content-type"].startswith("application/json")
        assert response.json() == [
            {"id": 1, "message": "Welcome to the sample web application!"},
            {"id": 2, "message": "This is your first announcement!"},
            {"id": 3, "message": "Enjoy working on this project!"},
        ]

    @pytest.mark.asyncio
    async def test_objects_carry_only_id_and_message(self, seeded_client):
        response = await seeded_client.get("/api/announcements")

        for item in response.json():
            assert set(item) == {"id", "message"}
            assert isinstance(item["id"], int)
            assert isinstance(item["message"], str)

    @pytest.mark.asyncio
    async def test_missing_table_returns_database_error(self, test_client):
        """The store has no announcements table: 500, never an empty 200."""
        response = await test_client.get("/api/announcements")

        assert response.status_code == 500
        assert response.json() == {"error": "Database error"}

    @pytest.mark.asyncio
    async def test_store_failure_hides_cause(self, app, test_client):
        app.state.announcement_service.list_announcements = AsyncMock(
            side_effect=DatabaseError(context={"error_type": "OperationalError"})
        )

        response = await test_client.get("/api/announcements")

        assert response.status_code == 500
        assert response.json() == {"error": "Database error"}
        assert "OperationalError" not in response.text

    @pytest.mark.asyncio
    async def test_unreachable_store_returns_database_error(self, app, test_client):
        app.state.announcement_service.session_factory = MagicMock(
            side_effect=ConnectionRefusedError("Can't connect to MySQL server")
        )

        response = await test_client.get("/api/announcements")

        assert response.status_code == 500
        assert response.json() == {"error": "Database error"}

    @pytest.mark.asyncio
    async def test_response_carries_request_id(self, seeded_client):
        response = await seeded_client.get(
            "/api/announcements", headers={"X-Request-ID": "abc12345"}
        )

        assert response.headers["X-Request-ID"] == "abc12345"

    @pytest.mark.asyncio
    async def test_request_id_generated_when_absent(self, seeded_client):
        response = await seeded_client.get("/api/announcements")

        assert len(response.headers["X-Request-ID"]) == 8


class TestStaticAssets:
    """Everything outside /api is served from the static directory."""

    @pytest.mark.asyncio
    async def test_existing_file_returned_verbatim(self, static_dir, test_client):
        content = b"plain text asset\n"
        (static_dir / "notes.txt").write_bytes(content)

        response = await test_client.get("/notes.txt")

        assert response.status_code == 200
        assert response.content == content
        assert response.headers["content-type"].startswith("text/plain")

    @pytest.mark.asyncio
    async def test_root_serves_index_html(self, static_dir, test_client):
        response = await test_client.get("/")

        assert response.status_code == 200
        assert response.content == (static_dir / "index.html").read_bytes()
        assert response.headers["content-type"].startswith("text/html")

    @pytest.mark.asyncio
    async def test_missing_file_returns_404(self, test_client):
        response = await test_client.get("/does-not-exist.js")

        assert response.status_code == 404

    @pytest.mark.asyncio
    async def test_api_route_takes_precedence(self, static_dir, seeded_client):
        (static_dir / "api").mkdir()
        (static_dir / "api" / "announcements").write_text("shadowed")

        response = await seeded_client.get("/api/announcements")

        assert response.status_code == 200
        assert len(response.json()) == len(SEED_MESSAGES)


class TestLifespan:
    """Startup and shutdown behavior."""

    @pytest.mark.asyncio
    async def test_startup_continues_when_store_unreachable(self, test_settings, unreachable_engine):
        application = create_app(test_settings)
        application.state.announcement_service.engine = unreachable_engine

        # Must not raise
        async with lifespan(application):
            pass

        unreachable_engine.dispose.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_startup_fails_fast_when_connection_required(self, test_settings, unreachable_engine):
        settings = test_settings.model_copy(update={"db_connect_required": True})
        application = create_app(settings)
        application.state.announcement_service.engine = unreachable_engine

        with pytest.raises(DatabaseError):
            async with lifespan(application):
                pass

    @pytest.mark.asyncio
    async def test_startup_initializes_store_when_enabled(self, test_settings):
        settings = test_settings.model_copy(update={"db_init_on_startup": True})
        application = create_app(settings)
        service = application.state.announcement_service

        async with lifespan(application):
            announcements = await service.list_announcements()

        assert [a.message for a in announcements] == list(SEED_MESSAGES)
