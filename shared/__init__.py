"""
Restaurant Seed - Shared module.

This module contains configuration, logging, error types and text helpers
used across the database and seed packages.
"""

from shared.config import Settings, get_settings
from shared.logging_config import configure_logging
from shared.errors import (
    ErrorCategory,
    ErrorLogger,
    RecordError,
    SeedDataError,
    SeedDataFormatError,
    SeedDataNotFoundError,
    categorize_exception,
    get_error_logger,
)
from shared.text_utils import generate_slug

__all__ = [
    # Core utilities
    "Settings",
    "get_settings",
    "configure_logging",
    # Error handling
    "ErrorCategory",
    "ErrorLogger",
    "RecordError",
    "SeedDataError",
    "SeedDataFormatError",
    "SeedDataNotFoundError",
    "categorize_exception",
    "get_error_logger",
    # Text
    "generate_slug",
]
