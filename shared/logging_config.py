"""Console logging configuration (plain text or structured JSON)."""

import json
import logging
import sys
from datetime import UTC, datetime
from typing import Any

from shared.config import get_settings

TEXT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# Extra fields copied into JSON output when passed via `extra=`
CONTEXT_FIELDS = ("restaurant_name", "google_place_id", "slug", "data_file", "log_ref", "error_category")


def truncate_message(message: str, max_length: int = 200) -> str:
    """
    Truncate message content for logs with length indicator.

    Args:
        message: Full message text
        max_length: Maximum characters to show (default: 200)

    Returns:
        Truncated message with total length indicator
    """
    if not message:
        return ""
    if len(message) <= max_length:
        return message
    return f"{message[:max_length]}... (truncated, total: {len(message)} chars)"


class JSONFormatter(logging.Formatter):
    """
    Custom JSON formatter for structured logging.

    Outputs logs as JSON with consistent fields:
    - timestamp (ISO 8601)
    - level (INFO, ERROR, etc.)
    - logger (module name)
    - message
    - restaurant_name / google_place_id / slug (if available in extra)
    - log_ref / error_category (for per-record errors)
    """

    def format(self, record: logging.LogRecord) -> str:
        log_data: dict[str, Any] = {
            "timestamp": datetime.now(UTC).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        for field in CONTEXT_FIELDS:
            if hasattr(record, field):
                log_data[field] = getattr(record, field)

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_data)


def configure_logging() -> None:
    """
    Configure application logging.

    Reads LOG_LEVEL and LOG_FORMAT from settings.
    Outputs to stderr.
    """
    settings = get_settings()

    log_level = getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO)

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)
    root_logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(log_level)

    if settings.LOG_FORMAT == "json":
        console_handler.setFormatter(JSONFormatter())
    else:
        console_handler.setFormatter(logging.Formatter(TEXT_FORMAT))

    root_logger.addHandler(console_handler)

    # SQL echo is controlled by DATABASE_ECHO, not by the root level
    logging.getLogger("sqlalchemy").setLevel(logging.WARNING)

    root_logger.debug(
        f"Logging configured: level={settings.LOG_LEVEL}, format={settings.LOG_FORMAT}"
    )
