"""
Restaurant Seed - Restaurant Seeder.

Upserts restaurants keyed by Google place ID:
- Existing place: overwrite the fetched fields, keep application-managed ones
- New place: insert with a slug that no other restaurant holds

Every record is committed on its own, so one bad record only loses itself.
"""

import logging
from collections.abc import Sequence
from typing import Any

from pydantic import BaseModel, Field
from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from database.models import Restaurant
from database.seeds.data.common import SYSTEM_DEFAULTS, RestaurantRecord
from database.seeds.data.loader import record_label, record_place_id
from database.seeds.seed_utils import deterministic_restaurant_uuid
from database.seeds.seeders.base import BaseSeeder
from shared.config import get_settings
from shared.errors import RecordError, categorize_exception, describe_exception
from shared.text_utils import suffixed_slug

logger = logging.getLogger(__name__)


class SeedReport(BaseModel):
    """Totals for one seeding run."""

    created: int = 0
    updated: int = 0
    errors: list[RecordError] = Field(default_factory=list)
    total_in_db: int = 0

    @property
    def error_count(self) -> int:
        return len(self.errors)


class RestaurantSeeder(BaseSeeder):
    """
    Seeder for restaurants loaded from restaurants-raw.json.

    The session is passed in and owned by the caller; the seeder commits
    or rolls back once per record but never closes it.
    """

    def __init__(self, session: AsyncSession, progress_interval: int | None = None):
        super().__init__(session, entity_type="Restaurant")
        self.progress_interval = progress_interval or get_settings().SEED_PROGRESS_INTERVAL

    async def count(self) -> int:
        """Number of restaurants currently stored."""
        result = await self.session.execute(
            select(func.count()).select_from(Restaurant)
        )
        return result.scalar_one()

    async def resolve_unique_slug(self, proposed: str) -> str:
        """
        First free slug among proposed, proposed-2, proposed-3, ...

        Not atomic with the insert that follows; a concurrent writer taking
        the same slug makes that insert fail on the unique index.
        """
        candidate = proposed
        suffix = 1
        while await self.exists(Restaurant, slug=candidate):
            suffix += 1
            candidate = suffixed_slug(proposed, suffix)
        return candidate

    async def seed_record(self, record: RestaurantRecord) -> tuple[Restaurant, str]:
        """
        Create or update one restaurant (flushed, not committed).

        Returns:
            Tuple of (instance, action) where action is "created" or "updated"
        """
        existing = await self.find_one(Restaurant, google_place_id=record.google_place_id)

        if existing is not None:
            self.apply_fields(existing, record.updatable_fields())
            await self.session.flush()
            return existing, "updated"

        slug = await self.resolve_unique_slug(record.slug)
        if slug != record.slug:
            logger.info(
                f"  Slug '{record.slug}' taken, using '{slug}' for {record.name}",
                extra={"slug": slug, "google_place_id": record.google_place_id},
            )

        restaurant = Restaurant(
            id=deterministic_restaurant_uuid(record.google_place_id),
            slug=slug,
            google_place_id=record.google_place_id,
            **record.updatable_fields(),
            **SYSTEM_DEFAULTS,
        )
        self.session.add(restaurant)
        await self.session.flush()
        return restaurant, "created"

    async def seed(self, raw_records: Sequence[Any]) -> SeedReport:
        """
        Seed every raw record in order.

        Per-record failures (validation, constraint violations, transient
        database errors) are collected in the report. Anything raised
        outside the per-record block, such as the initial count against an
        unreachable database, propagates to the caller.
        """
        self.reset_stats()
        total = len(raw_records)
        errors: list[RecordError] = []

        logger.info(f"=== Seeding {total} restaurants into database ===")
        existing_count = await self.count()
        logger.info(f"  {existing_count} restaurants already in database")

        for index, raw in enumerate(raw_records):
            try:
                record = RestaurantRecord.model_validate(raw)
                restaurant, action = await self.seed_record(record)
                slug = restaurant.slug
                await self.session.commit()
            except Exception as e:
                await self.session.rollback()
                errors.append(self._record_error(index, raw, e))
                continue

            if action == "created":
                self.log_created(slug)
            else:
                self.log_updated(slug)

            if self.processed % self.progress_interval == 0:
                logger.info(
                    f"  Progress: {self.processed}/{total} "
                    f"({self.stats['created']} created, {self.stats['updated']} updated)"
                )

        self.log_summary()
        return SeedReport(
            created=self.stats["created"],
            updated=self.stats["updated"],
            errors=errors,
            total_in_db=await self.count(),
        )

    def _record_error(self, index: int, raw: Any, error: Exception) -> RecordError:
        name = record_label(raw, index)
        place_id = record_place_id(raw)
        log_ref = self.log_error(
            name,
            error,
            context={"restaurant_name": name, "google_place_id": place_id},
        )
        return RecordError(
            index=index,
            name=name,
            google_place_id=place_id,
            category=categorize_exception(error),
            message=describe_exception(error),
            log_ref=log_ref,
        )
