"""Create patients table for vaccine reminders.

Revision ID: 001_create_patients
Revises:
Create Date: 2026-10-18

This migration creates:
- pet_type enum
- patients: patient aggregate with JSON columns for nested vaccine,
  consent, interaction and preference data
"""

from typing import Sequence, Union

import sqlalchemy as sa

from alembic import op

# revision identifiers, used by Alembic.
revision: str = "001_create_patients"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

PET_TYPES = ("DOG", "CAT", "BIRD", "RODENT", "REPTILE", "OTHER")


def upgrade() -> None:
    op.create_table(
        "patients",
        sa.Column("id", sa.String(length=36), primary_key=True),
        sa.Column("full_name", sa.String(length=200), nullable=False),
        sa.Column("phone", sa.String(length=32), nullable=False),
        sa.Column("email", sa.String(length=255), nullable=True),
        sa.Column("pet_name", sa.String(length=100), nullable=False),
        sa.Column("pet_type", sa.Enum(*PET_TYPES, name="pet_type"), nullable=False),
        sa.Column("pet_breed", sa.String(length=100), nullable=True),
        sa.Column("pet_age", sa.Integer(), nullable=True),
        sa.Column("pet_weight", sa.Float(), nullable=True),
        sa.Column("next_vaccine", sa.JSON(), nullable=True),
        sa.Column("next_vaccine_date", sa.Date(), nullable=True),
        sa.Column("vaccine_history", sa.JSON(), nullable=False),
        sa.Column("consent", sa.JSON(), nullable=True),
        sa.Column("interactions", sa.JSON(), nullable=False),
        sa.Column("last_interaction", sa.DateTime(timezone=True), nullable=True),
        sa.Column("preferences", sa.JSON(), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False),
    )
    op.create_index("ix_patients_phone", "patients", ["phone"], unique=True)
    op.create_index("ix_patients_next_vaccine_date", "patients", ["next_vaccine_date"])
    op.create_index("ix_patients_last_interaction", "patients", ["last_interaction"])
    op.create_index("ix_patients_created_at", "patients", ["created_at"])


def downgrade() -> None:
    op.drop_index("ix_patients_created_at", table_name="patients")
    op.drop_index("ix_patients_last_interaction", table_name="patients")
    op.drop_index("ix_patients_next_vaccine_date", table_name="patients")
    op.drop_index("ix_patients_phone", table_name="patients")
    op.drop_table("patients")
    sa.Enum(name="pet_type").drop(op.get_bind(), checkfirst=True)
