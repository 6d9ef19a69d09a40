"""Alembic environment for the TalentFlow store file.

The store creates missing tables itself on open; these revisions exist for
shape changes to a store file that already holds data.

Invariants:
    - Target metadata is talentflow.models, the same tables LocalStore opens
    - The URL resolves exactly like Settings.database_url (TALENTFLOW_DATABASE_URL,
      plain sqlite:// upgraded to the aiosqlite driver)
    - Every revision runs in batch mode: SQLite alters tables by copy-and-move
"""

import asyncio
import os
from logging.config import fileConfig

from sqlalchemy import pool
from sqlalchemy.engine import Connection
from sqlalchemy.ext.asyncio import async_engine_from_config

from alembic import context

from talentflow.db.base import Base
import talentflow.models  # noqa: F401  registers every table on Base.metadata

config = context.config
if config.config_file_name is not None:
    fileConfig(config.config_file_name)

target_metadata = Base.metadata

SQLITE_PREFIX = "sqlite://"
ASYNC_SQLITE_PREFIX = "sqlite+aiosqlite://"


def store_url() -> str:
    """TALENTFLOW_DATABASE_URL when set, else sqlalchemy.url from alembic.ini."""
    url = os.environ.get("TALENTFLOW_DATABASE_URL") or config.get_main_option("sqlalchemy.url")
    if url.startswith(SQLITE_PREFIX):
        url = ASYNC_SQLITE_PREFIX + url[len(SQLITE_PREFIX):]
    return url


def _configure(**kwargs) -> None:
    context.configure(target_metadata=target_metadata, render_as_batch=True, **kwargs)
    with context.begin_transaction():
        context.run_migrations()


def migrate_offline() -> None:
    """Emit SQL for the store without connecting."""
    _configure(url=store_url(), literal_binds=True, dialect_opts={"paramstyle": "named"})


def _migrate_connection(connection: Connection) -> None:
    _configure(connection=connection)


async def migrate_store() -> None:
    section = config.get_section(config.config_ini_section, {})
    section["sqlalchemy.url"] = store_url()
    engine = async_engine_from_config(section, prefix="sqlalchemy.", poolclass=pool.NullPool)
    try:
        async with engine.connect() as connection:
            await connection.run_sync(_migrate_connection)
    finally:
        await engine.dispose()


if context.is_offline_mode():
    migrate_offline()
else:
    asyncio.run(migrate_store())
