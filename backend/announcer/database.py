"""
Announcer Backend — Database Engine & Session Factory
======================================================

What:  Async SQLAlchemy engine construction, session factory, and ORM base.
How:   `create_engine()` turns a `Settings` object into an `AsyncEngine` with a
       bounded connection pool; `create_session_factory()` wraps it in an
       `async_sessionmaker`.
Who:   Called by AnnouncementService, which owns the resulting engine.
       `Base` is shared by the models and the Alembic environment.

Connection Pooling Strategy:
    pool_size:      Persistent connections kept open to the store
    max_overflow:   Temporary connections for bursts (total max = size + overflow)
    pool_timeout:   Seconds a request waits for a free connection before failing
    pool_pre_ping:  Validates connections before use (catches a restarted MySQL)
    pool_recycle:   Recycles connections every hour (MySQL wait_timeout defaults to 8h)

    SQLite URLs (used by the test suite) keep the dialect's own pool class,
    which does not accept the sizing arguments.
"""

from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase

from announcer.config import Settings


class Base(DeclarativeBase):
    """
    Base class for all SQLAlchemy ORM models.

    Models inherit from this to register with the shared metadata, which
    `initialize_store()` and Alembic both read.
    """
    pass


# ── Engine Configuration ──────────────────────────────────────────────────
def create_engine(settings: Settings) -> AsyncEngine:
    """
    Build the async engine for the configured store.

    Args:
        settings: Application settings; only the db_* fields and the URL are read.

    Returns:
        An AsyncEngine. No connection is opened until first use.
    """
    url = make_url(settings.sqlalchemy_url)
    options = {
        # Echo SQL only when debugging; it is noisy otherwise
        "echo": settings.log_level == "DEBUG",
        "pool_pre_ping": settings.db_pool_pre_ping,
    }
    if url.get_backend_name() != "sqlite":
        options.update(
            pool_size=settings.db_pool_size,
            max_overflow=settings.db_max_overflow,
            pool_timeout=settings.db_pool_timeout,
            pool_recycle=3600,
        )
    return create_async_engine(url, **options)


# ── Session Factory ───────────────────────────────────────────────────────
# expire_on_commit=False: ORM rows stay readable after the session closes,
# which is when the service serializes them.
def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )
