import asyncio
from logging.config import fileConfig

from sqlalchemy import pool
from sqlalchemy.engine import Connection
from sqlalchemy.ext.asyncio import create_async_engine

from alembic import context

import sys
from pathlib import Path
# Make 'inventory_api' importable when alembic runs from backend/ without an install
PROJECT_ROOT = Path(__file__).resolve().parent.parent
if str(PROJECT_ROOT) not in sys.path: # Avoid adding duplicate paths
    sys.path.append(str(PROJECT_ROOT))

from inventory_api.db.base_class import Base
from inventory_api.core.config import settings
# Import the models so they are registered with Base.metadata for autogenerate
from inventory_api import models  # noqa: F401

# this is the Alembic Config object, which provides
# access to the values within the .ini file in use.
config = context.config

# Interpret the config file for Python logging.
if config.config_file_name is not None:
    fileConfig(config.config_file_name)

target_metadata = Base.metadata


def run_migrations_offline() -> None:
    """Run migrations in 'offline' mode.

    This configures the context with just a URL and not an Engine.
    Calls to context.execute() here emit the given string to the
    script output.
    """
    if not settings.DATABASE_URL:
        raise ValueError("DATABASE_URL is not set in application settings and is required for offline mode.")

    context.configure(
        url=str(settings.DATABASE_URL),
        target_metadata=target_metadata,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
    )

    with context.begin_transaction():
        context.run_migrations()


def do_run_migrations(connection: Connection) -> None:
    context.configure(
        connection=connection,
        target_metadata=target_metadata,
        render_as_batch=connection.dialect.name == "sqlite",
    )

    with context.begin_transaction():
        context.run_migrations()


async def run_migrations_online() -> None:
    """Run migrations in 'online' mode against an AsyncEngine."""
    if not settings.DATABASE_URL:
        raise ValueError("DATABASE_URL is not set in the application settings (inventory_api.core.config.settings).")

    connectable = create_async_engine(
        str(settings.DATABASE_URL),
        poolclass=pool.NullPool,    # Recommended for Alembic operations
    )

    async with connectable.connect() as connection:
        await connection.run_sync(do_run_migrations)

    await connectable.dispose()

# Main Alembic entry point
if context.is_offline_mode():
    run_migrations_offline()
else:
    asyncio.run(run_migrations_online())
