"""
Announcer Backend — Store Initialization
=========================================

What:  Creates the `announcements` table and seeds the sample rows.
How:   CREATE TABLE only if missing (metadata.create_all with checkfirst),
       then INSERT the seed messages only when the table is empty, all in
       one transaction.
Who:   AnnouncementService.initialize() (DB_INIT_ON_STARTUP=true), the
       `announcer-init-db` console script, and the test suite.

Running it again against an initialized store is a no-op: the table
already exists and is not empty, so nothing is created or inserted.

Usage:
    announcer-init-db
    MYSQL_HOST=db python -m announcer.store
"""

import asyncio
import logging

from sqlalchemy import func, insert, select
from sqlalchemy.ext.asyncio import AsyncEngine

from announcer.config import get_settings
from announcer.database import Base, create_engine
from announcer.models.announcement import Announcement

logger = logging.getLogger(__name__)

# Inserted in this order, so ids 1..3 on a fresh table
SEED_MESSAGES = (
    "Welcome to the sample web application!",
    "This is your first announcement!",
    "Enjoy working on this project!",
)


async def initialize_store(engine: AsyncEngine) -> int:
    """
    Create the announcements table if needed and seed it when empty.

    Args:
        engine: Engine bound to the target store.

    Returns:
        Number of seed rows inserted (0 when the store was already seeded).
    """
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all, checkfirst=True)

        existing = await conn.scalar(
            select(func.count()).select_from(Announcement)
        )
        if existing:
            logger.info("Store already initialized (%d announcements)", existing)
            return 0

        await conn.execute(
            insert(Announcement),
            [{"message": message} for message in SEED_MESSAGES],
        )

    logger.info("Seeded %d announcements", len(SEED_MESSAGES))
    return len(SEED_MESSAGES)


async def _run() -> None:
    settings = get_settings()
    engine = create_engine(settings)
    try:
        await initialize_store(engine)
    finally:
        await engine.dispose()


def main() -> None:
    """Console entry point: initialize the store named by the environment."""
    from announcer.main import setup_logging

    setup_logging(get_settings().log_level)
    asyncio.run(_run())


if __name__ == "__main__":
    main()
