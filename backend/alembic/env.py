import asyncio
import sys
from logging.config import fileConfig
from pathlib import Path

from alembic import context
from sqlalchemy import pool
from sqlalchemy.engine import Connection
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine

# ensure backend/src is on sys.path so we can import the app metadata
backend_root = Path(__file__).resolve().parents[1]  # backend directory
src_path = str(backend_root / "src")
if src_path not in sys.path:
    sys.path.insert(0, src_path)

from notekeeper.config import get_settings  # noqa: E402
from notekeeper.core.models import BaseModel  # noqa: E402  (registers every table)

config = context.config
if config.config_file_name is not None:
    fileConfig(config.config_file_name, disable_existing_loggers=False)

target_metadata = BaseModel.metadata


def get_url() -> str:
    """Explicit ``sqlalchemy.url`` wins; otherwise the app's DATABASE_URL setting."""
    return config.get_main_option("sqlalchemy.url") or get_settings().database_url


def run_migrations_offline() -> None:
    """Emit SQL without a database connection."""
    context.configure(
        url=get_url(),
        target_metadata=target_metadata,
        literal_binds=True,
        compare_type=True,
        compare_server_default=True,
    )

    with context.begin_transaction():
        context.run_migrations()


def do_run_migrations(connection: Connection) -> None:
    """Run migrations with a bound connection (sync)."""
    context.configure(connection=connection, target_metadata=target_metadata, compare_type=True)
    with context.begin_transaction():
        context.run_migrations()


async def run_async_migrations(url: str) -> None:
    """Run migrations for an async engine."""
    connectable: AsyncEngine = create_async_engine(url, poolclass=pool.NullPool)

    async with connectable.connect() as connection:
        await connection.run_sync(do_run_migrations)
    await connectable.dispose()


def run_migrations_online() -> None:
    """Entry point used by alembic (asyncpg or aiosqlite URLs)."""
    asyncio.run(run_async_migrations(get_url()))


if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()
