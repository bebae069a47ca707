"""
Error handling for the restaurant seed.

Two tiers:
- Fatal errors abort the whole run (missing or malformed input file,
  unreachable database). They are raised as exceptions.
- Per-record errors are captured as RecordError results, logged with a
  reference ID, and the run continues with the next record.

Usage:
    from shared.errors import ErrorCategory, ErrorLogger

    logger = ErrorLogger()
    log_ref = logger.log_error(
        error=exc,
        category=ErrorCategory.DATABASE_ERROR,
        context={"google_place_id": "ChIJ..."}
    )
"""

import logging
import uuid
from datetime import datetime, UTC
from enum import Enum
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field, ValidationError
from sqlalchemy.exc import SQLAlchemyError

from shared.logging_config import truncate_message


logger = logging.getLogger(__name__)


class ErrorCategory(str, Enum):
    """Categories of errors for proper handling and logging.

    - VALIDATION_ERROR: Input record is missing fields or has bad values
    - DATABASE_ERROR: PostgreSQL/SQLAlchemy errors (constraints, transient failures)
    - CONFIGURATION_ERROR: Missing or invalid configuration / input file
    - UNEXPECTED_ERROR: Unknown/unhandled exceptions
    """
    VALIDATION_ERROR = "validation_error"
    DATABASE_ERROR = "database_error"
    CONFIGURATION_ERROR = "configuration_error"
    UNEXPECTED_ERROR = "unexpected_error"


class SeedDataError(Exception):
    """Base class for fatal problems with the seed input file."""

    def __init__(self, path: Path, message: str, guidance: str | None = None):
        super().__init__(message)
        self.path = path
        self.guidance = guidance


class SeedDataNotFoundError(SeedDataError):
    """The input file does not exist."""

    def __init__(self, path: Path):
        super().__init__(
            path,
            f"{path} not found.",
            guidance="Run the restaurant fetch step first to produce it.",
        )


class SeedDataFormatError(SeedDataError):
    """The input file is not a JSON array of restaurant objects."""


class RecordError(BaseModel):
    """Outcome of a single record that could not be seeded."""

    index: int = Field(description="Zero-based position in the input file")
    name: str = Field(description="Restaurant name, or a placeholder if absent")
    google_place_id: str | None = Field(default=None, description="External ID, if present")
    category: ErrorCategory
    message: str = Field(description="Human-readable cause")
    log_ref: str | None = Field(default=None, description="Reference ID for log correlation")


def categorize_exception(error: Exception) -> ErrorCategory:
    """Map an exception raised while seeding a record to an ErrorCategory."""
    if isinstance(error, ValidationError):
        return ErrorCategory.VALIDATION_ERROR
    if isinstance(error, SQLAlchemyError):
        return ErrorCategory.DATABASE_ERROR
    return ErrorCategory.UNEXPECTED_ERROR


def describe_exception(error: Exception) -> str:
    """Short one-line cause suitable for a summary line."""
    if isinstance(error, ValidationError):
        parts = []
        for err in error.errors():
            location = ".".join(str(loc) for loc in err["loc"]) or "record"
            parts.append(f"{location}: {err['msg']}")
        return "; ".join(parts)
    if isinstance(error, SQLAlchemyError) and getattr(error, "orig", None) is not None:
        return truncate_message(str(error.orig))
    return str(error) or type(error).__name__


class ErrorLogger:
    """Centralized error logging with structured context."""

    def __init__(self):
        self.logger = logging.getLogger(f"{__name__}.ErrorLogger")

    def _generate_log_ref(self) -> str:
        """Generate unique reference ID for error correlation."""
        return f"err_{datetime.now(UTC).strftime('%Y%m%d_%H%M%S')}_{uuid.uuid4().hex[:8]}"

    def log_error(
        self,
        error: Exception,
        category: ErrorCategory,
        *,
        subject: str | None = None,
        context: dict[str, Any] | None = None,
        exc_info: bool = False,
    ) -> str:
        """Log error with structured context.

        Args:
            error: The exception that occurred
            category: Error category for classification
            subject: What failed, e.g. 'Error seeding "Blue Door Cafe"'
                (defaults to the category name)
            context: Additional context data (restaurant_name, google_place_id, ...)
            exc_info: Whether to include stack trace

        Returns:
            log_ref: Unique reference ID for this error instance
        """
        log_ref = self._generate_log_ref()

        extra = {
            "log_ref": log_ref,
            "error_category": category.value,
            **(context or {}),
        }
        message = f"[{log_ref}] {subject or category.value}: {describe_exception(error)}"

        # Bad input is the caller's problem; database and unknown errors are ours
        if category == ErrorCategory.VALIDATION_ERROR:
            self.logger.warning(message, extra=extra, exc_info=exc_info)
        else:
            self.logger.error(message, extra=extra, exc_info=exc_info)

        return log_ref


# Global error logger instance
_error_logger = ErrorLogger()


def get_error_logger() -> ErrorLogger:
    """Get the global error logger instance."""
    return _error_logger
