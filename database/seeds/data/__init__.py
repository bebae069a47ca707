"""
Restaurant Seed Data Module.

Input record types and the loader for restaurants-raw.json, kept apart
from the seeding logic in seeders/.
"""

from database.seeds.data.common import (
    SYSTEM_DEFAULTS,
    UPDATABLE_FIELDS,
    RestaurantRecord,
)
from database.seeds.data.loader import (
    DEFAULT_DATA_FILE,
    load_restaurant_file,
    record_label,
    record_place_id,
)

__all__ = [
    # Type definitions
    "RestaurantRecord",
    "UPDATABLE_FIELDS",
    "SYSTEM_DEFAULTS",
    # Loading
    "DEFAULT_DATA_FILE",
    "load_restaurant_file",
    "record_label",
    "record_place_id",
]
