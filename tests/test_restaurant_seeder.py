"""
Tests for RestaurantSeeder - upsert by Google place ID and slug collision resolution.

Run with: pytest tests/test_restaurant_seeder.py -v
"""

import logging

import pytest

from database.seeds.seed_utils import deterministic_restaurant_uuid
from database.seeds.seeders import RestaurantSeeder
from shared.errors import ErrorCategory


def stored_row(google_place_id: str, slug: str, **overrides) -> dict:
    """Column values for a restaurant inserted behind the seeder's back."""
    row = {
        "id": deterministic_restaurant_uuid(google_place_id),
        "name": "Existing Place",
        "slug": slug,
        "cover_image": "https://images.example.com/old.jpg",
        "address": "1 Old Rd",
        "city": "Burnaby",
        "state": "BC",
        "zip_code": "V5H 0A1",
        "latitude": 49.0,
        "longitude": -123.0,
        "google_place_id": google_place_id,
        "cuisine_types": ["Cafe"],
    }
    row.update(overrides)
    return row


# =============================================================================
# TEST SUITE 1: Create vs update
# =============================================================================

@pytest.mark.asyncio
async def test_new_place_is_created_with_defaults(db_session, make_raw_restaurant, fetch_restaurant):
    """An unseen place ID becomes exactly one row with system fields at defaults."""
    seeder = RestaurantSeeder(db_session)

    report = await seeder.seed([make_raw_restaurant()])

    assert report.created == 1
    assert report.updated == 0
    assert report.error_count == 0
    assert report.total_in_db == 1

    restaurant = await fetch_restaurant("place-a")
    assert restaurant is not None
    assert restaurant.id == deterministic_restaurant_uuid("place-a")
    assert restaurant.name == "Joe's Diner"
    assert restaurant.slug == "joes-diner"
    assert restaurant.cover_image == "https://images.example.com/joes-diner.jpg"
    assert restaurant.zip_code == "V6E 1C1"
    assert restaurant.latitude == pytest.approx(49.2857)
    assert restaurant.cuisine_types == ["American", "Breakfast"]
    assert restaurant.price_level == 2
    assert restaurant.hours["monday"] == "7:00 AM – 3:00 PM"
    assert restaurant.post_count == 0
    assert restaurant.average_rating == 0
    assert restaurant.meals_donated == 0
    assert restaurant.is_claimed is False


@pytest.mark.asyncio
async def test_existing_place_updates_fetched_fields_only(
    db_session, make_raw_restaurant, insert_restaurant, fetch_restaurant
):
    """Re-seeding overwrites fetched fields and keeps counters, claim flag and slug."""
    await insert_restaurant(**stored_row(
        "place-a",
        "joes-original",
        post_count=5,
        average_rating=4.5,
        meals_donated=12,
        is_claimed=True,
    ))

    raw = make_raw_restaurant(
        name="Joe's Diner & Grill",
        cuisineTypes=["American"],
        priceLevel=3,
        phone=None,
    )
    report = await RestaurantSeeder(db_session).seed([raw])

    assert report.created == 0
    assert report.updated == 1

    restaurant = await fetch_restaurant("place-a")
    assert restaurant.name == "Joe's Diner & Grill"
    assert restaurant.city == "Vancouver"
    assert restaurant.cuisine_types == ["American"]
    assert restaurant.price_level == 3
    assert restaurant.phone is None
    # Application-managed fields untouched
    assert restaurant.post_count == 5
    assert restaurant.average_rating == pytest.approx(4.5)
    assert restaurant.meals_donated == 12
    assert restaurant.is_claimed is True
    # Slug is only assigned at creation
    assert restaurant.slug == "joes-original"


@pytest.mark.asyncio
async def test_second_identical_run_only_updates(db_session, make_raw_restaurant, fetch_restaurant):
    """Running twice with the same input gives the same state, all updated the second time."""
    records = [
        make_raw_restaurant("place-a", "Joe's Diner", "joes-diner"),
        make_raw_restaurant("place-b", "Blue Door Cafe", "blue-door-cafe"),
        make_raw_restaurant("place-c", "Joe's Diner", "joes-diner"),
    ]

    first = await RestaurantSeeder(db_session).seed(records)
    snapshot = {}
    for place_id in ("place-a", "place-b", "place-c"):
        r = await fetch_restaurant(place_id)
        snapshot[place_id] = (r.slug, r.name, r.post_count)
    assert snapshot["place-c"][0] == "joes-diner-2"

    second = await RestaurantSeeder(db_session).seed(records)

    assert (first.created, first.updated) == (3, 0)
    assert (second.created, second.updated) == (0, 3)
    assert second.total_in_db == 3
    for place_id, expected in snapshot.items():
        r = await fetch_restaurant(place_id)
        assert (r.slug, r.name, r.post_count) == expected


@pytest.mark.asyncio
async def test_duplicate_place_id_in_same_file_updates(db_session, make_raw_restaurant, fetch_restaurant):
    """The second occurrence of a place ID in one file updates the first."""
    report = await RestaurantSeeder(db_session).seed([
        make_raw_restaurant("place-a", name="Joe's Diner"),
        make_raw_restaurant("place-a", name="Joe's Diner (Robson)"),
    ])

    assert (report.created, report.updated) == (1, 1)
    assert report.total_in_db == 1
    assert (await fetch_restaurant("place-a")).name == "Joe's Diner (Robson)"



@pytest.mark.asyncio
async def test_supplied_values_are_stored_verbatim(db_session, make_raw_restaurant, fetch_restaurant):
    """Surrounding whitespace in fetched values is not rewritten on create."""
    await RestaurantSeeder(db_session).seed([
        make_raw_restaurant("place-a", name="Joe's Diner ", address=" 1200 Robson St"),
    ])

    restaurant = await fetch_restaurant("place-a")
    assert restaurant.name == "Joe's Diner "
    assert restaurant.address == " 1200 Robson St"
    assert restaurant.slug == "joes-diner"

# =============================================================================
# TEST SUITE 2: Slug resolution
# =============================================================================

@pytest.mark.asyncio
async def test_slug_collision_gets_numeric_suffix(db_session, make_raw_restaurant, fetch_restaurant):
    """Two places proposing the same slug: first keeps it, second gets -2."""
    await RestaurantSeeder(db_session).seed([
        make_raw_restaurant("place-a", slug="joes-diner"),
        make_raw_restaurant("place-b", slug="joes-diner"),
    ])

    assert (await fetch_restaurant("place-a")).slug == "joes-diner"
    assert (await fetch_restaurant("place-b")).slug == "joes-diner-2"


@pytest.mark.asyncio
async def test_slug_collision_skips_taken_suffixes(
    db_session, make_raw_restaurant, insert_restaurant, fetch_restaurant
):
    """With joes-diner and joes-diner-2 taken, the next one is joes-diner-3."""
    await insert_restaurant(**stored_row("place-x", "joes-diner"))
    await insert_restaurant(**stored_row("place-y", "joes-diner-2"))

    await RestaurantSeeder(db_session).seed([make_raw_restaurant("place-c", slug="joes-diner")])

    assert (await fetch_restaurant("place-c")).slug == "joes-diner-3"


@pytest.mark.asyncio
async def test_resolve_unique_slug_free_slug_is_used_as_is(db_session):
    seeder = RestaurantSeeder(db_session)

    assert await seeder.resolve_unique_slug("blue-door-cafe") == "blue-door-cafe"


@pytest.mark.asyncio
async def test_missing_slug_is_derived_from_name(db_session, make_raw_restaurant, fetch_restaurant):
    raw = make_raw_restaurant("place-a", name="Café Olé", slug="")

    await RestaurantSeeder(db_session).seed([raw])

    assert (await fetch_restaurant("place-a")).slug == "cafe-ole"


# =============================================================================
# TEST SUITE 3: Per-record failures
# =============================================================================

@pytest.mark.asyncio
async def test_write_failure_is_isolated_to_its_record(
    db_session, make_raw_restaurant, insert_restaurant, fetch_restaurant
):
    """The second record fails on insert; the first and third still land."""
    # Row already holding place-b's primary key under another place ID
    await insert_restaurant(**stored_row(
        "legacy-b",
        "legacy-b",
        id=deterministic_restaurant_uuid("place-b"),
    ))

    report = await RestaurantSeeder(db_session).seed([
        make_raw_restaurant("place-a", "Joe's Diner", "joes-diner"),
        make_raw_restaurant("place-b", "Blue Door Cafe", "blue-door-cafe"),
        make_raw_restaurant("place-c", "Sushi Bar", "sushi-bar"),
    ])

    assert report.created == 2
    assert report.error_count == 1
    error = report.errors[0]
    assert error.index == 1
    assert error.name == "Blue Door Cafe"
    assert error.google_place_id == "place-b"
    assert error.category == ErrorCategory.DATABASE_ERROR
    assert error.log_ref.startswith("err_")

    assert await fetch_restaurant("place-a") is not None
    assert await fetch_restaurant("place-b") is None
    assert await fetch_restaurant("place-c") is not None
    assert report.total_in_db == 3


@pytest.mark.asyncio
async def test_invalid_records_are_reported_not_written(db_session, make_raw_restaurant):
    """Records missing required fields or with bad values become validation errors."""
    missing_place_id = make_raw_restaurant()
    del missing_place_id["googlePlaceId"]

    report = await RestaurantSeeder(db_session).seed([
        missing_place_id,
        make_raw_restaurant("place-b", name="Pricey", priceLevel=7),
        "not an object",
        make_raw_restaurant("place-d", name="Good Place", slug="good-place"),
    ])

    assert report.created == 1
    assert [e.index for e in report.errors] == [0, 1, 2]
    assert all(e.category == ErrorCategory.VALIDATION_ERROR for e in report.errors)
    assert report.errors[0].name == "Joe's Diner"
    assert report.errors[0].google_place_id is None
    assert "googlePlaceId" in report.errors[0].message
    assert report.errors[2].name == "record #3"
    assert report.total_in_db == 1


# =============================================================================
# TEST SUITE 4: Progress reporting
# =============================================================================

@pytest.mark.asyncio
async def test_progress_logged_every_interval(db_session, make_raw_restaurant, caplog):
    records = [
        make_raw_restaurant(f"place-{i}", name=f"Place {i}", slug=f"place-{i}")
        for i in range(5)
    ]

    with caplog.at_level(logging.INFO, logger="database.seeds.seeders.restaurant"):
        await RestaurantSeeder(db_session, progress_interval=2).seed(records)

    progress = [r.getMessage() for r in caplog.records if "Progress:" in r.getMessage()]
    assert progress == [
        "  Progress: 2/5 (2 created, 0 updated)",
        "  Progress: 4/5 (4 created, 0 updated)",
    ]


@pytest.mark.asyncio
async def test_each_record_outcome_logged_at_info(db_session, make_raw_restaurant, caplog):
    records = [make_raw_restaurant("place-a"), make_raw_restaurant("place-a")]

    with caplog.at_level(logging.INFO, logger="database.seeds.seeders.base"):
        await RestaurantSeeder(db_session).seed(records)

    outcomes = [r.getMessage() for r in caplog.records if r.levelno == logging.INFO and ": " in r.getMessage()]
    assert any("+ Restaurant" in m and m.endswith("Created") for m in outcomes)
    assert any("~ Restaurant" in m and m.endswith("Updated") for m in outcomes)
