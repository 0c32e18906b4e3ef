"""initial_schema

Revision ID: 0001
Revises:
Create Date: 2026-10-19

Creates the users and emergency_requests tables.
"""
from typing import Sequence, Union
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "0001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    # --- users ---
    op.create_table(
        "users",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("username", sa.String(100), nullable=False, unique=True),
        sa.Column("password", sa.String(255), nullable=False),
        sqlite_autoincrement=True,
    )

    # --- emergency_requests ---
    op.create_table(
        "emergency_requests",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("user_id", sa.Integer, nullable=True),
        sa.Column("emergency_type", sa.Integer, nullable=False),
        sa.Column("latitude", sa.String(32), nullable=True),
        sa.Column("longitude", sa.String(32), nullable=True),
        sa.Column("location_description", sa.Text, nullable=True),
        sa.Column("symptoms", sa.Text, nullable=True),
        sa.Column("details", sa.JSON, nullable=False),
        sa.Column("status", sa.String(20), nullable=False, server_default="pending"),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sqlite_autoincrement=True,
    )
    op.create_index("ix_emergency_requests_user_id", "emergency_requests", ["user_id"])


def downgrade() -> None:
    op.drop_index("ix_emergency_requests_user_id", table_name="emergency_requests")
    op.drop_table("emergency_requests")
    op.drop_table("users")
