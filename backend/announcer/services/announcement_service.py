"""
Announcer Backend — Announcement Service
=========================================

What:  Bridges the announcement store and the HTTP layer.
How:   Owns the async engine (connection pool) and session factory built
       from Settings; exposes the startup connection check, the list query,
       store initialization, and shutdown disposal.
Who:   Created by create_app() and stored on `app.state.announcement_service`;
       route handlers reach it through the `get_announcement_service`
       dependency.

Request Flow (GET /api/announcements):
    ┌──────────┐    ┌─────────────────────┐    ┌──────────────┐
    │  Route   │───▶│  list_announcements │───▶│  Store       │
    │          │◀───│  (serialize rows)   │◀───│  SELECT *    │
    └──────────┘    └─────────────────────┘    └──────────────┘

    On query failure: cause is logged, DatabaseError propagates to the
    global handler, client receives 500 {"error": "Database error"}.
"""

import logging
from typing import List

from sqlalchemy import select, text
from starlette.requests import Request

from announcer.config import Settings
from announcer.database import create_engine, create_session_factory
from announcer.exceptions import DatabaseError
from announcer.models.announcement import Announcement
from announcer.schemas.announcement import AnnouncementResponse
from announcer.store import initialize_store

logger = logging.getLogger(__name__)


class AnnouncementService:
    """
    Read-only access to the announcements table.

    Responsibilities:
        - connect(): Startup connectivity check (non-fatal unless configured)
        - list_announcements(): GetAnnouncements, every row in store order
        - initialize(): Idempotent table creation and seeding
        - dispose(): Close pooled connections on shutdown

    Concurrency:
        Each call checks a connection out of the engine's pool, so
        concurrent requests run on separate connections, bounded by
        db_pool_size + db_max_overflow.
    """

    def __init__(self, settings: Settings):
        self.settings = settings
        self.engine = create_engine(settings)
        self.session_factory = create_session_factory(self.engine)

    async def connect(self) -> bool:
        """
        Verify the store is reachable by running `SELECT 1`.

        Returns:
            True when connected, False when the check failed and
            db_connect_required is off.

        Raises:
            DatabaseError: The check failed and db_connect_required is set.
        """
        try:
            async with self.engine.connect() as conn:
                await conn.execute(text("SELECT 1"))
        except Exception as e:
            logger.error("Error connecting to MySQL: %s", str(e))
            if self.settings.db_connect_required:
                raise DatabaseError(
                    message="Could not connect to the announcement store",
                    context={"error_type": type(e).__name__},
                ) from e
            logger.warning(
                "Continuing without a store connection; "
                "requests will fail until it becomes reachable"
            )
            return False

        logger.info("Connected to MySQL database")
        return True

    async def list_announcements(self) -> List[AnnouncementResponse]:
        """
        Return every announcement in the store's natural retrieval order.

        Query plan:
            SELECT announcements.id, announcements.message FROM announcements
            (no ORDER BY; order is whatever the store returns)

        Raises:
            DatabaseError: The query failed for any reason. No partial
            results are returned and nothing is retried.
        """
        try:
            async with self.session_factory() as session:
                result = await session.execute(select(Announcement))
                rows = result.scalars().all()
        except Exception as e:
            logger.error("Error querying database: %s", str(e), exc_info=True)
            raise DatabaseError(
                context={"operation": "list_announcements", "error_type": type(e).__name__},
            ) from e

        return [AnnouncementResponse.model_validate(row) for row in rows]

    async def initialize(self) -> int:
        """Create and seed the announcements table; see initialize_store()."""
        return await initialize_store(self.engine)

    async def dispose(self) -> None:
        """Close all pooled connections."""
        await self.engine.dispose()


# ── FastAPI Dependency ────────────────────────────────────────────────────
def get_announcement_service(request: Request) -> AnnouncementService:
    """Return the service instance owned by the running application."""
    return request.app.state.announcement_service
