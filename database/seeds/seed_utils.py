"""
Utilities for idempotent seeds with deterministic UUIDs.

The same Google place always maps to the same primary key, so a database
seeded in staging and one seeded in production agree on restaurant IDs.
"""

import uuid

# Fixed project namespace for deterministic UUIDs (UUID v5)
SEED_NAMESPACE = uuid.UUID("5f0c9a42-3b1e-4d6a-9c57-2e8d41b7a9f3")


def deterministic_uuid(entity_type: str, code: str) -> uuid.UUID:
    """
    Build a deterministic UUID from an entity type and its natural key.

    Args:
        entity_type: Kind of entity (e.g. "restaurant")
        code: Natural key of the entity (e.g. a Google place ID)

    Returns:
        Deterministic UUID v5

    Examples:
        >>> deterministic_uuid("restaurant", "ChIJN1t_tDeuEmsRUsoyG83frY4")
        UUID('...')  # Always the same value
    """
    seed_string = f"{entity_type}:{code}"
    return uuid.uuid5(SEED_NAMESPACE, seed_string)


def deterministic_restaurant_uuid(google_place_id: str) -> uuid.UUID:
    """Shortcut for Restaurant IDs."""
    return deterministic_uuid("restaurant", google_place_id)
