"""
Database connection and session management for the durable session record.
Uses SQLAlchemy 2.0 async pattern.

Collections live in memory (see kernel.store); only the authenticated
session survives a restart, so the schema is a single key/value table.
"""

from typing import Optional

from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, create_async_engine, async_sessionmaker
from sqlalchemy.pool import NullPool

from museum_archive.config import Settings, get_settings


def build_engine(database_url: str, echo: bool = False) -> AsyncEngine:
    """Create an async engine with per-backend options."""
    if database_url.startswith("sqlite"):
        # NullPool: every session gets its own connection to the file
        engine = create_async_engine(
            database_url,
            echo=echo,
            connect_args={"check_same_thread": False},
            poolclass=NullPool,
        )

        @event.listens_for(engine.sync_engine, "connect")
        def _set_sqlite_pragma(dbapi_conn, connection_record):
            """Enable WAL mode on every new SQLite connection."""
            cursor = dbapi_conn.cursor()
            cursor.execute("PRAGMA journal_mode=WAL")
            cursor.execute("PRAGMA busy_timeout=5000")
            cursor.close()

        return engine

    return create_async_engine(
        database_url,
        echo=echo,
        pool_pre_ping=True,
        pool_size=5,
        max_overflow=10,
    )


def build_session_maker(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )


def engine_from_settings(settings: Optional[Settings] = None) -> AsyncEngine:
    """Build the engine for the configured session database."""
    settings = settings or get_settings()
    return build_engine(settings.database_url, echo=settings.debug)


async def init_db(target: AsyncEngine) -> None:
    """Initialize database tables."""
    from museum_archive.kernel.models.base import Base
    from museum_archive.kernel.models import session_record  # noqa: F401  registers the table

    async with target.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def close_db(target: AsyncEngine) -> None:
    """Close database connections."""
    await target.dispose()
