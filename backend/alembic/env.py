"""
Alembic Migration Environment
===============================

What:  Runs Alembic migrations against the configured announcement store.
How:   Takes the URL from announcer Settings (MYSQL_HOST / DATABASE_URL) and
       runs the migration steps through an async engine.
Who:   The `alembic` CLI (upgrade, downgrade, revision), run from backend/.
"""

import asyncio
from logging.config import fileConfig

from sqlalchemy import pool
from sqlalchemy.ext.asyncio import async_engine_from_config
from alembic import context

from announcer.config import get_settings
from announcer.database import Base

# Registers the table on Base.metadata for --autogenerate
from announcer.models.announcement import Announcement  # noqa: F401

config = context.config

if config.config_file_name is not None:
    fileConfig(config.config_file_name)

target_metadata = Base.metadata

# Settings are the single source of the connection URL, not alembic.ini
config.set_main_option(
    "sqlalchemy.url",
    get_settings().sqlalchemy_url.replace("%", "%%"),
)


def run_migrations_offline() -> None:
    """Emit the migration SQL to stdout without connecting."""
    url = config.get_main_option("sqlalchemy.url")
    context.configure(
        url=url,
        target_metadata=target_metadata,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
    )

    with context.begin_transaction():
        context.run_migrations()


def do_run_migrations(connection):
    context.configure(
        connection=connection,
        target_metadata=target_metadata,
    )

    with context.begin_transaction():
        context.run_migrations()


async def run_async_migrations() -> None:
    """Connect with a throwaway (unpooled) async engine and apply migrations."""
    connectable = async_engine_from_config(
        config.get_section(config.config_ini_section, {}),
        prefix="sqlalchemy.",
        poolclass=pool.NullPool,
    )

    async with connectable.connect() as connection:
        await connection.run_sync(do_run_migrations)

    await connectable.dispose()


def run_migrations_online() -> None:
    asyncio.run(run_async_migrations())


if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()
