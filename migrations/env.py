"""Alembic environment bound to the storefront database settings."""

from __future__ import annotations

import asyncio
from logging.config import fileConfig

from alembic import context
from sqlalchemy.engine import make_url

from storefront.core.config import get_settings
from storefront.db import models  # noqa: F401
from storefront.infrastructure.database.base import Base
from storefront.infrastructure.database.session import dispose_engine, get_engine

if context.config.config_file_name is not None:
    fileConfig(context.config.config_file_name)


def _migrate(connection=None) -> None:
    if connection is None:
        # offline SQL is rendered with the sync dialect of the configured backend
        url = make_url(get_settings().database_url)
        url = url.set(drivername=url.get_backend_name())
        context.configure(url=url, target_metadata=Base.metadata, literal_binds=True)
    else:
        context.configure(connection=connection, target_metadata=Base.metadata, render_as_batch=True)
    with context.begin_transaction():
        context.run_migrations()


async def _migrate_online() -> None:
    async with get_engine().connect() as connection:
        await connection.run_sync(_migrate)
    await dispose_engine()


if context.is_offline_mode():
    _migrate()
else:
    asyncio.run(_migrate_online())
