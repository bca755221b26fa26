"""Create cars table.

Revision ID: 001_create_cars
Revises: None
Create Date: 2026-10-18

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "001_create_cars"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "cars",
        sa.Column("registration", sa.String(32), primary_key=True),
        sa.Column("model", sa.Text, nullable=False),
        sa.Column("mileage", sa.Integer, nullable=False, server_default="0"),
        sa.Column("rented", sa.Boolean, nullable=False, server_default=sa.false()),
        sa.CheckConstraint("mileage >= 0", name="ck_cars_mileage_non_negative"),
    )


def downgrade() -> None:
    op.drop_table("cars")
