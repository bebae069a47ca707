"""
Restaurant Seed Data - Input record types.

The fetch step writes restaurants-raw.json with camelCase keys
(googlePlaceId, coverImage, ...). Each object is validated into a
RestaurantRecord before it touches the database.
"""

from typing import Annotated, Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from pydantic.alias_generators import to_camel

from shared.text_utils import generate_slug


# Fields copied from the input on both create and update
UPDATABLE_FIELDS: tuple[str, ...] = (
    "name",
    "cover_image",
    "address",
    "city",
    "state",
    "zip_code",
    "latitude",
    "longitude",
    "phone",
    "website",
    "cuisine_types",
    "price_level",
    "hours",
)

# Application-managed fields, only written when a restaurant is created
SYSTEM_DEFAULTS: dict[str, Any] = {
    "post_count": 0,
    "average_rating": 0.0,
    "meals_donated": 0,
    "is_claimed": False,
}


# Column widths in database.models.Restaurant; slug leaves room for "-N" suffixes
SLUG_MAX_LENGTH = 200
CuisineType = Annotated[str, Field(max_length=50)]


class RestaurantRecord(BaseModel):
    """
    One restaurant as produced by the fetch step.

    Values are stored exactly as supplied; lengths match the columns they
    are written to so an oversized value fails validation, not the INSERT.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )

    name: str = Field(min_length=1, max_length=200)
    slug: str = Field(
        default="",
        max_length=SLUG_MAX_LENGTH,
        description="Proposed slug; derived from name if blank",
    )
    cover_image: str
    address: str = Field(max_length=300)
    city: str = Field(max_length=100)
    state: str = Field(max_length=50)
    zip_code: str = Field(max_length=20)
    latitude: float = Field(ge=-90, le=90)
    longitude: float = Field(ge=-180, le=180)
    phone: str | None = Field(default=None, max_length=50)
    website: str | None = None
    google_place_id: str = Field(min_length=1, max_length=255)
    cuisine_types: list[CuisineType] = Field(default_factory=list)
    price_level: int | None = Field(default=None, ge=1, le=4)
    hours: dict[str, str] | None = None

    @field_validator("name", "google_place_id")
    @classmethod
    def _not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("must not be blank")
        return value

    @model_validator(mode="after")
    def _fill_slug(self) -> "RestaurantRecord":
        if not self.slug.strip():
            self.slug = generate_slug(self.name)[:SLUG_MAX_LENGTH].rstrip("-")
        if not self.slug:
            raise ValueError(f"cannot derive a slug from name {self.name!r}")
        return self

    def updatable_fields(self) -> dict[str, Any]:
        """Values for every externally supplied column."""
        return {field: getattr(self, field) for field in UPDATABLE_FIELDS}
