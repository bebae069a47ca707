"""
Restaurant Seeders Module.

Reusable seeding logic separated from data definitions.
"""

from database.seeds.seeders.base import BaseSeeder
from database.seeds.seeders.restaurant import RestaurantSeeder, SeedReport

__all__ = [
    "BaseSeeder",
    "RestaurantSeeder",
    "SeedReport",
]
