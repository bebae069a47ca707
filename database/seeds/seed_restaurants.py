"""
Restaurant Seed - Load restaurants-raw.json into the database.

Reads the file produced by the restaurant fetch step and upserts every
restaurant by Google place ID. Re-running is safe: restaurants seeded
before are updated, never duplicated.

Run with: python -m database.seeds.seed_restaurants

Exit codes:
    0: Run completed (individual records may still have failed, see summary)
    1: Input file missing or malformed, database unreachable, or other fatal error
"""

import asyncio
import logging
import sys
from collections.abc import Sequence
from pathlib import Path
from typing import Any

from sqlalchemy.ext.asyncio import AsyncSession

from database.connection import close_db, get_async_session
from database.seeds.data.loader import DEFAULT_DATA_FILE, load_restaurant_file
from database.seeds.seeders import RestaurantSeeder, SeedReport
from shared.config import get_settings
from shared.errors import ErrorCategory, SeedDataError, get_error_logger
from shared.logging_config import configure_logging

logger = logging.getLogger(__name__)


def resolve_data_path(data_path: Path | str | None = None) -> Path:
    """Explicit path, else RESTAURANTS_DATA_FILE, else the bundled default."""
    if data_path is not None:
        return Path(data_path)
    configured = get_settings().RESTAURANTS_DATA_FILE
    if configured:
        return Path(configured)
    return DEFAULT_DATA_FILE


async def seed_restaurants(session: AsyncSession, raw_records: Sequence[Any]) -> SeedReport:
    """Seed `raw_records` through `session`."""
    seeder = RestaurantSeeder(session)
    return await seeder.seed(raw_records)


def log_report(report: SeedReport) -> None:
    logger.info("=== Seed complete ===")
    logger.info(f"  Created: {report.created}")
    logger.info(f"  Updated: {report.updated}")
    logger.info(f"  Errors: {report.error_count}")
    for error in report.errors:
        logger.info(f"    - {error.name}: {error.message} ({error.log_ref})")
    logger.info(f"  Total in DB: {report.total_in_db}")


async def main(data_path: Path | str | None = None) -> int:
    """
    Run the seed.

    The input file is checked before any database connection is opened.

    Returns:
        Process exit code
    """
    path = resolve_data_path(data_path)

    try:
        raw_records = load_restaurant_file(path)
    except SeedDataError as e:
        get_error_logger().log_error(
            e,
            ErrorCategory.CONFIGURATION_ERROR,
            subject="Cannot load restaurant data",
            context={"data_file": str(e.path)},
        )
        if e.guidance:
            logger.error(e.guidance)
        return 1

    try:
        async with get_async_session() as session:
            report = await seed_restaurants(session, raw_records)
    except Exception as e:
        logger.error(f"Fatal error: {e}", exc_info=True)
        return 1
    finally:
        await close_db()

    log_report(report)
    return 0


if __name__ == "__main__":
    configure_logging()
    sys.exit(asyncio.run(main()))
