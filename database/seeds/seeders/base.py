"""
Restaurant Seed - Base Seeder.

Provides common functionality for all seeders:
- Uniform logging format
- Lookup helpers by natural key
- Statistics tracking
"""

import logging
from typing import Any

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from shared.errors import categorize_exception, get_error_logger

logger = logging.getLogger(__name__)


class BaseSeeder:
    """
    Base class for all seeders with common functionality.

    Provides:
    - Consistent logging format
    - Statistics tracking (created, updated, errors)
    - Single-row lookups and in-place field updates
    """

    def __init__(self, session: AsyncSession, entity_type: str = "Entity"):
        """
        Initialize the seeder.

        Args:
            session: The async database session, owned by the caller
            entity_type: Name used in log lines (e.g., "Restaurant")
        """
        self.session = session
        self.entity_type = entity_type
        self.error_logger = get_error_logger()
        self.stats = {
            "created": 0,
            "updated": 0,
            "errors": 0,
        }

    def reset_stats(self) -> None:
        """Reset statistics counters."""
        self.stats = {"created": 0, "updated": 0, "errors": 0}

    @property
    def processed(self) -> int:
        """Entities successfully created or updated so far."""
        return self.stats["created"] + self.stats["updated"]

    def log_created(self, code: str) -> None:
        """Log a created entity."""
        self.stats["created"] += 1
        logger.info(f"  + {self.entity_type} {code}: Created")

    def log_updated(self, code: str) -> None:
        """Log an updated entity."""
        self.stats["updated"] += 1
        logger.info(f"  ~ {self.entity_type} {code}: Updated")

    def log_error(
        self,
        code: str,
        error: Exception,
        context: dict[str, Any] | None = None,
    ) -> str:
        """
        Log an entity that could not be seeded.

        Returns:
            log_ref for correlating the summary with the log line
        """
        self.stats["errors"] += 1
        return self.error_logger.log_error(
            error,
            categorize_exception(error),
            subject=f'Error seeding {self.entity_type.lower()} "{code}"',
            context=context,
        )

    def log_summary(self) -> None:
        """Log a summary of operations."""
        logger.info(
            f"  {self.entity_type}: {self.stats['created']} created, "
            f"{self.stats['updated']} updated, {self.stats['errors']} errors"
        )

    async def find_one(self, model_class: type, **filters: Any) -> Any | None:
        """Return the single row matching `filters`, or None."""
        result = await self.session.execute(
            select(model_class).filter_by(**filters)
        )
        return result.scalar_one_or_none()

    async def exists(self, model_class: type, **filters: Any) -> bool:
        """True if any row matches `filters`."""
        result = await self.session.execute(
            select(model_class.id).filter_by(**filters).limit(1)
        )
        return result.scalar() is not None

    @staticmethod
    def apply_fields(instance: Any, data: dict[str, Any]) -> None:
        """Overwrite the given attributes in place; everything else is left alone."""
        for key, value in data.items():
            setattr(instance, key, value)
