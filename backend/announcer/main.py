"""
Announcer Backend — FastAPI Application Factory
================================================

What:  Creates and configures the FastAPI application instance.
How:   Factory pattern: create_app(settings) returns a configured FastAPI
       instance that owns one AnnouncementService (and so one engine).
Who:   uvicorn imports `announcer.main:app`; `run()` is the console entry.

Application Architecture:
    Middleware:  Request ID → Logging
    Routes:      GET /api/announcements
    Static:      /  → announcer/public/ (index.html, app.js)
    Handlers:    DatabaseError → 500 {"error": "Database error"}
                 Exception     → 500 generic

Lifecycle:
    Startup:
    1. Configure logging
    2. Check the store connection (logged; fatal only with DB_CONNECT_REQUIRED)
    3. Initialize the store when DB_INIT_ON_STARTUP is set
    4. Log the listening address

    Shutdown:
    1. Dispose the engine (close pooled connections)
"""

import logging
import sys
from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

import uvicorn
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles

from announcer import __version__
from announcer.config import Settings, get_settings
from announcer.exceptions import DatabaseError
from announcer.middleware.logging import RequestLoggingMiddleware
from announcer.middleware.request_id import RequestIDMiddleware, request_id_var
from announcer.routes import announcements
from announcer.services.announcement_service import AnnouncementService

logger = logging.getLogger(__name__)


# ══════════════════════════════════════════════════════════════════════════
# Logging Configuration
# ══════════════════════════════════════════════════════════════════════════

def setup_logging(log_level: str = "INFO") -> None:
    """
    Configure process-wide logging.

    Format: 2024-01-15T12:00:00 [INFO] announcer.main: message
    Output goes to stdout, which the container runtime collects.
    """
    logging.basicConfig(
        level=getattr(logging, log_level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
        handlers=[logging.StreamHandler(sys.stdout)],
        force=True,
    )

    # Third-party libraries are chatty at INFO
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)


# ══════════════════════════════════════════════════════════════════════════
# Application Lifespan (Startup & Shutdown)
# ══════════════════════════════════════════════════════════════════════════

@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Check the store on startup and release its connections on shutdown."""
    settings: Settings = app.state.settings
    service: AnnouncementService = app.state.announcement_service

    # ── Startup ───────────────────────────────────────────────────────────
    setup_logging(settings.log_level)
    logger.info("Announcer %s starting up...", __version__)

    connected = await service.connect()
    if settings.db_init_on_startup:
        if connected:
            await service.initialize()
        else:
            logger.warning("Skipping store initialization: store unreachable")

    logger.info("Serving static assets from %s", settings.static_dir)
    logger.info("Server running at http://localhost:%d", settings.port)

    yield

    # ── Shutdown ──────────────────────────────────────────────────────────
    logger.info("Announcer shutting down...")
    await service.dispose()
    logger.info("Shutdown complete.")


# ══════════════════════════════════════════════════════════════════════════
# Exception Handlers
# ══════════════════════════════════════════════════════════════════════════

def register_exception_handlers(app: FastAPI) -> None:
    """
    Map application exceptions to HTTP responses.

    Handler hierarchy:
        DatabaseError  → 500 {"error": "Database error"}
        Exception      → 500 {"error": "Internal server error"}

    Neither response carries driver messages, SQL or stack traces; those
    are logged server-side with the request id.
    """

    @app.exception_handler(DatabaseError)
    async def handle_database_error(request: Request, exc: DatabaseError):
        rid = request_id_var.get("")
        logger.error("[%s] Database error: %s | Context: %s", rid, exc.message, exc.context)
        return JSONResponse(
            status_code=500,
            content={"error": "Database error"},
        )

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception):
        rid = request_id_var.get("")
        logger.error("[%s] Unexpected error: %s", rid, str(exc), exc_info=True)
        return JSONResponse(
            status_code=500,
            content={"error": "Internal server error"},
        )


# ══════════════════════════════════════════════════════════════════════════
# Application Factory
# ══════════════════════════════════════════════════════════════════════════

def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        settings: Explicit configuration; read from the environment when omitted.

    Returns:
        A FastAPI instance whose `state` holds the settings and the
        AnnouncementService that owns the store connection pool.
    """
    settings = settings or get_settings()

    app = FastAPI(
        title="Announcer API",
        description="Serves the announcement board page and its announcements.",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.announcement_service = AnnouncementService(settings)

    # ── Register Middleware ───────────────────────────────────────────────
    # Last added runs first: RequestID wraps Logging
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(RequestIDMiddleware)

    # ── Register Exception Handlers ───────────────────────────────────────
    register_exception_handlers(app)

    # ── Register Routes ───────────────────────────────────────────────────
    app.include_router(announcements.router)

    # Mounted last so /api routes match first; html=True serves index.html at /
    app.mount(
        "/",
        StaticFiles(directory=settings.static_dir, html=True),
        name="static",
    )

    return app


def run() -> None:
    """Console entry point: serve the app with uvicorn until terminated."""
    settings = get_settings()
    uvicorn.run(
        "announcer.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


# ── Application Instance ─────────────────────────────────────────────────
app = create_app()
