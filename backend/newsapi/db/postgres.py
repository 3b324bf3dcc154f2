"""PostgreSQL engine, connection pool and session management."""

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlmodel import SQLModel

from newsapi.config import Settings

# Registers the articles table on SQLModel.metadata
import newsapi.models  # noqa: F401


def create_engine(settings: Settings) -> AsyncEngine:
    """
    Create the async engine.

    The engine owns a bounded connection pool: every request checks out a
    connection through its session and hands it back when the session closes.
    """
    if settings.is_sqlite:
        return create_async_engine(settings.async_database_url, echo=settings.debug)

    return create_async_engine(
        settings.async_database_url,
        echo=settings.debug,
        pool_size=settings.db_pool_size,
        max_overflow=settings.db_max_overflow,
        pool_timeout=settings.db_pool_timeout,
        pool_pre_ping=True,
    )


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Create the async session factory bound to an engine."""
    return async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )


async def init_db(engine: AsyncEngine) -> None:
    """Create the articles table if it does not exist yet."""
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)
