"""
Pytest configuration and shared fixtures for all tests.

This file is automatically loaded by pytest and provides:
- A throwaway SQLite database (aiosqlite) with the schema created
- Session fixtures
- Raw restaurant record factories
"""

import logging
from typing import Any, AsyncGenerator

import pytest
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from database.connection import build_engine, build_session_factory, init_db
from database.models import Restaurant


# =============================================================================
# LOGGING CONFIGURATION
# =============================================================================

@pytest.fixture(scope="session", autouse=True)
def setup_logging():
    """Reduce noise from third-party loggers."""
    logging.getLogger("sqlalchemy").setLevel(logging.WARNING)
    logging.getLogger("aiosqlite").setLevel(logging.WARNING)


# =============================================================================
# DATABASE FIXTURES
# =============================================================================

@pytest.fixture
async def db_engine(tmp_path):
    """Create a file-backed SQLite engine with all tables."""
    engine = build_engine(f"sqlite+aiosqlite:///{tmp_path / 'seed_test.db'}")
    await init_db(engine)

    yield engine

    await engine.dispose()


@pytest.fixture
def session_factory(db_engine) -> async_sessionmaker[AsyncSession]:
    """Session factory built the same way as database.connection.AsyncSessionLocal."""
    return build_session_factory(db_engine)


@pytest.fixture
async def db_session(session_factory) -> AsyncGenerator[AsyncSession, None]:
    """Provide a test database session."""
    async with session_factory() as session:
        yield session


@pytest.fixture
def fetch_restaurant(session_factory):
    """Load a restaurant by place ID in a fresh session (bypasses identity map)."""

    async def _fetch(google_place_id: str) -> Restaurant | None:
        async with session_factory() as session:
            result = await session.execute(
                select(Restaurant).where(Restaurant.google_place_id == google_place_id)
            )
            return result.scalar_one_or_none()

    return _fetch


@pytest.fixture
def insert_restaurant(session_factory):
    """Insert a restaurant row directly, outside the seeder."""

    async def _insert(**fields: Any) -> None:
        async with session_factory() as session:
            session.add(Restaurant(**fields))
            await session.commit()

    return _insert


# =============================================================================
# TEST DATA FIXTURES
# =============================================================================

@pytest.fixture
def make_raw_restaurant():
    """Build a raw restaurant dict as written by the fetch step (camelCase keys)."""

    def _make(
        google_place_id: str = "place-a",
        name: str = "Joe's Diner",
        slug: str = "joes-diner",
        **overrides: Any,
    ) -> dict[str, Any]:
        raw = {
            "name": name,
            "slug": slug,
            "coverImage": "https://images.example.com/joes-diner.jpg",
            "address": "1200 Robson St",
            "city": "Vancouver",
            "state": "BC",
            "zipCode": "V6E 1C1",
            "latitude": 49.2857,
            "longitude": -123.1285,
            "phone": "+1 604-555-0100",
            "website": "https://joesdiner.example.com",
            "googlePlaceId": google_place_id,
            "cuisineTypes": ["American", "Breakfast"],
            "priceLevel": 2,
            "hours": {"monday": "7:00 AM – 3:00 PM", "tuesday": "7:00 AM – 3:00 PM"},
        }
        raw.update(overrides)
        return raw

    return _make
