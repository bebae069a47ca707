"""
Restaurant Seed - Database models.

This module defines SQLAlchemy ORM models for the application.
All models use UUIDs as primary keys and include timestamps.
"""

import uuid
from datetime import datetime, UTC
from typing import Any

from sqlalchemy import (
    JSON,
    Boolean,
    DateTime,
    Float,
    Integer,
    String,
    Text,
    Uuid,
)
from sqlalchemy.dialects.postgresql import ARRAY, JSONB
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column

# PostgreSQL gets native types; other dialects (SQLite in tests) fall back to JSON
StringList = JSON().with_variant(ARRAY(String(50)), "postgresql")
JSONDocument = JSON().with_variant(JSONB, "postgresql")


class Base(DeclarativeBase):
    """Base class for all SQLAlchemy models."""

    pass


class Restaurant(Base):
    """
    Restaurant model - Places loaded from the restaurant fetch step.

    Matched across runs by google_place_id. The slug is a unique,
    human-readable alternate key assigned once at creation.

    post_count, average_rating, meals_donated and is_claimed are owned by
    the application and only initialised by the seed.
    """

    __tablename__ = "restaurants"

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        primary_key=True,
        default=uuid.uuid4,
    )
    name: Mapped[str] = mapped_column(String(200), nullable=False)
    slug: Mapped[str] = mapped_column(
        String(220),
        unique=True,
        nullable=False,
        index=True,
        comment="URL slug, unique across all restaurants",
    )
    cover_image: Mapped[str] = mapped_column(Text, nullable=False)
    address: Mapped[str] = mapped_column(String(300), nullable=False)
    city: Mapped[str] = mapped_column(String(100), nullable=False, index=True)
    state: Mapped[str] = mapped_column(String(50), nullable=False)
    zip_code: Mapped[str] = mapped_column(String(20), nullable=False)
    latitude: Mapped[float] = mapped_column(Float, nullable=False)
    longitude: Mapped[float] = mapped_column(Float, nullable=False)
    phone: Mapped[str | None] = mapped_column(String(50), nullable=True)
    website: Mapped[str | None] = mapped_column(Text, nullable=True)
    google_place_id: Mapped[str] = mapped_column(
        String(255),
        unique=True,
        nullable=False,
        index=True,
        comment="Google Places ID, the match key for re-seeding",
    )
    cuisine_types: Mapped[list[str]] = mapped_column(
        StringList,
        nullable=False,
        default=list,
    )
    price_level: Mapped[int | None] = mapped_column(
        Integer,
        nullable=True,
        comment="1 (inexpensive) to 4 (very expensive)",
    )
    hours: Mapped[dict[str, Any] | None] = mapped_column(
        JSONDocument,
        nullable=True,
        comment="Opening hours keyed by lowercase weekday",
    )

    # Application-managed, set only on creation
    post_count: Mapped[int] = mapped_column(Integer, default=0, nullable=False)
    average_rating: Mapped[float] = mapped_column(Float, default=0.0, nullable=False)
    meals_donated: Mapped[int] = mapped_column(Integer, default=0, nullable=False)
    is_claimed: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(UTC),
        nullable=False,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(UTC),
        onupdate=lambda: datetime.now(UTC),
        nullable=False,
    )

    def __repr__(self) -> str:
        return f"<Restaurant(id={self.id}, slug={self.slug}, place_id={self.google_place_id})>"
