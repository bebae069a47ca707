"""Reading restaurants-raw.json from disk."""

import json
import logging
from pathlib import Path
from typing import Any

from shared.errors import SeedDataFormatError, SeedDataNotFoundError

logger = logging.getLogger(__name__)

DEFAULT_DATA_FILE = Path(__file__).resolve().parent / "restaurants-raw.json"


def load_restaurant_file(path: Path) -> list[Any]:
    """
    Load the raw restaurant list.

    Items are returned unvalidated; each one is validated individually
    while seeding so a bad record does not sink the whole file.

    Raises:
        SeedDataNotFoundError: The file does not exist
        SeedDataFormatError: The file is unreadable, not UTF-8 JSON, or not a JSON array
    """
    if not path.is_file():
        raise SeedDataNotFoundError(path)

    try:
        with path.open(encoding="utf-8") as f:
            data = json.load(f)
    except (UnicodeDecodeError, json.JSONDecodeError) as e:
        raise SeedDataFormatError(path, f"{path} is not valid UTF-8 JSON: {e}") from e
    except OSError as e:
        raise SeedDataFormatError(path, f"{path} could not be read: {e}") from e

    if not isinstance(data, list):
        raise SeedDataFormatError(
            path,
            f"{path} must contain a JSON array of restaurants, got {type(data).__name__}",
        )

    logger.debug(f"Loaded {len(data)} raw restaurants from {path}")
    return data


def record_label(raw: Any, index: int) -> str:
    """Name to show in logs for a raw record, even one that fails validation."""
    if isinstance(raw, dict):
        name = raw.get("name")
        if isinstance(name, str) and name.strip():
            return name.strip()
    return f"record #{index + 1}"


def record_place_id(raw: Any) -> str | None:
    """googlePlaceId of a raw record, if it has a usable one."""
    if isinstance(raw, dict):
        place_id = raw.get("googlePlaceId", raw.get("google_place_id"))
        if isinstance(place_id, str) and place_id:
            return place_id
    return None
