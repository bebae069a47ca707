"""
Restaurant Seed - Validation script for seeded restaurants.

Verifies that the restaurants table is populated and consistent after a seed.

Run with: python -m database.seeds.validate_restaurants_seed
"""

import asyncio
import logging
import sys

from sqlalchemy import func, or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from database.connection import close_db, get_async_session
from database.models import Restaurant
from shared.logging_config import configure_logging

logger = logging.getLogger(__name__)


async def _duplicates(session: AsyncSession, column) -> list[tuple[str, int]]:
    result = await session.execute(
        select(column, func.count())
        .group_by(column)
        .having(func.count() > 1)
        .order_by(column)
    )
    return [(value, count) for value, count in result.all()]


async def find_seed_problems(session: AsyncSession) -> list[str]:
    """
    Check the restaurants table.

    Returns:
        Human-readable problems; empty when everything checks out
    """
    problems: list[str] = []

    # [CHECK 1] Table populated
    total = (await session.execute(select(func.count()).select_from(Restaurant))).scalar_one()
    if total == 0:
        problems.append("No restaurants found")
        return problems

    # [CHECK 2] Unique slugs
    for slug, count in await _duplicates(session, Restaurant.slug):
        problems.append(f"Slug '{slug}' used by {count} restaurants")

    # [CHECK 3] Unique place IDs
    for place_id, count in await _duplicates(session, Restaurant.google_place_id):
        problems.append(f"Google place ID '{place_id}' used by {count} restaurants")

    # [CHECK 4] Application-managed counters in range
    result = await session.execute(
        select(Restaurant.slug)
        .where(
            or_(
                Restaurant.post_count < 0,
                Restaurant.meals_donated < 0,
                Restaurant.average_rating < 0,
                Restaurant.average_rating > 5,
            )
        )
        .order_by(Restaurant.slug)
    )
    for slug in result.scalars():
        problems.append(f"Restaurant '{slug}' has out-of-range counters")

    return problems


async def validate_seed() -> bool:
    """Validate seeded restaurants and log the outcome."""
    logger.info("=" * 70)
    logger.info("VALIDATING RESTAURANT SEED DATA")
    logger.info("=" * 70)

    async with get_async_session() as session:
        problems = await find_seed_problems(session)
        total = (await session.execute(select(func.count()).select_from(Restaurant))).scalar_one()

    if problems:
        for problem in problems:
            logger.error(f"✗ {problem}")
        return False

    logger.info(f"✓ {total} restaurants, slugs and place IDs unique")
    return True


async def main() -> int:
    try:
        return 0 if await validate_seed() else 1
    except Exception as e:
        logger.error(f"Validation failed: {e}", exc_info=True)
        return 1
    finally:
        await close_db()


if __name__ == "__main__":
    configure_logging()
    sys.exit(asyncio.run(main()))
