"""Restaurants table

Revision ID: 001_restaurants
Revises:
Create Date: 2026-10-17 00:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql

# revision identifiers, used by Alembic.
revision: str = "001_restaurants"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "restaurants",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("name", sa.String(200), nullable=False),
        sa.Column("slug", sa.String(220), nullable=False, comment="URL slug, unique across all restaurants"),
        sa.Column("cover_image", sa.Text(), nullable=False),
        sa.Column("address", sa.String(300), nullable=False),
        sa.Column("city", sa.String(100), nullable=False),
        sa.Column("state", sa.String(50), nullable=False),
        sa.Column("zip_code", sa.String(20), nullable=False),
        sa.Column("latitude", sa.Float(), nullable=False),
        sa.Column("longitude", sa.Float(), nullable=False),
        sa.Column("phone", sa.String(50), nullable=True),
        sa.Column("website", sa.Text(), nullable=True),
        sa.Column("google_place_id", sa.String(255), nullable=False, comment="Google Places ID, the match key for re-seeding"),
        sa.Column("cuisine_types", postgresql.ARRAY(sa.String(50)), nullable=False, server_default="{}"),
        sa.Column("price_level", sa.Integer(), nullable=True, comment="1 (inexpensive) to 4 (very expensive)"),
        sa.Column("hours", postgresql.JSONB(astext_type=sa.Text()), nullable=True, comment="Opening hours keyed by lowercase weekday"),
        sa.Column("post_count", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("average_rating", sa.Float(), nullable=False, server_default="0"),
        sa.Column("meals_donated", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("is_claimed", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_restaurants_slug", "restaurants", ["slug"], unique=True)
    op.create_index("ix_restaurants_google_place_id", "restaurants", ["google_place_id"], unique=True)
    op.create_index("ix_restaurants_city", "restaurants", ["city"])


def downgrade() -> None:
    op.drop_index("ix_restaurants_city", table_name="restaurants")
    op.drop_index("ix_restaurants_google_place_id", table_name="restaurants")
    op.drop_index("ix_restaurants_slug", table_name="restaurants")
    op.drop_table("restaurants")
