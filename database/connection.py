"""
Database connection module - engine, session scope and schema helpers for the seed scripts.

The seed scripts open one session for the whole run through get_async_session()
and dispose the engine with close_db() on every exit path.
"""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from shared.config import get_settings


def build_engine(url: str, *, echo: bool = False) -> AsyncEngine:
    """
    Create an async engine for the restaurants database.

    Pool sizing only applies to server databases; SQLite (used by the tests)
    gets SQLAlchemy's default pool for its dialect.
    """
    if url.startswith("sqlite"):
        return create_async_engine(url, echo=echo)
    return create_async_engine(
        url,
        echo=echo,
        pool_size=2,  # A seed run holds a single connection
        max_overflow=0,
        pool_pre_ping=True,
    )


def build_session_factory(bind: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Sessions keep loaded rows usable after each per-record commit."""
    return async_sessionmaker(
        bind,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )


settings = get_settings()

# No connection is opened until the first query
engine: AsyncEngine = build_engine(settings.DATABASE_URL, echo=settings.DATABASE_ECHO)
AsyncSessionLocal = build_session_factory(engine)


@asynccontextmanager
async def get_async_session() -> AsyncGenerator[AsyncSession, None]:
    """
    Session scoped to one seed run.

    Usage:
        async with get_async_session() as session:
            report = await RestaurantSeeder(session).seed(raw_records)

    Anything still uncommitted is rolled back if the body raises.
    """
    async with AsyncSessionLocal() as session:
        try:
            yield session
        except Exception:
            await session.rollback()
            raise


async def init_db(bind: AsyncEngine | None = None) -> None:
    """
    Create the restaurants schema directly from the ORM metadata.

    Deployed databases are migrated with Alembic; this is for throwaway
    databases such as the test suite's.
    """
    from database.models import Base

    async with (bind or engine).begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def close_db() -> None:
    """Dispose the engine and its pooled connections."""
    await engine.dispose()
