"""
Restaurant Seed - Database Seed Scripts.

- data/: Input record types and the restaurants-raw.json loader
- seeders/: Reusable seeding logic

Seed restaurants (after the fetch step has written restaurants-raw.json):
    python -m database.seeds.seed_restaurants

Validate seeded restaurants:
    python -m database.seeds.validate_restaurants_seed
"""
