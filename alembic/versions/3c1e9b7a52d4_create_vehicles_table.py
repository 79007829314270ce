"""Create vehicles table

Revision ID: 3c1e9b7a52d4
Revises:
Create Date: 2026-10-19 09:12:40.418302

"""

from typing import Sequence, Union

import sqlalchemy as sa
from alembic import op


# revision identifiers, used by Alembic.
revision: str = "3c1e9b7a52d4"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table(
        "vehicles",
        sa.Column("full_model_code", sa.String(length=64), nullable=False),
        sa.Column("model_name", sa.String(length=100), nullable=False),
        sa.Column("body_label", sa.String(length=100), nullable=False),
        sa.Column("grade_label", sa.String(length=100), nullable=False),
        sa.Column("year", sa.Integer(), nullable=False),
        sa.Column("price", sa.Numeric(precision=12, scale=2), nullable=False),
        sa.Column("engine_label", sa.String(length=100), nullable=False),
        sa.Column("transmission", sa.String(length=50), nullable=False),
        sa.Column("fuel_type", sa.String(length=50), nullable=False),
        sa.Column("photo_link", sa.Text(), nullable=False),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
        sa.PrimaryKeyConstraint("full_model_code"),
    )
    op.create_index("ix_vehicles_model_name", "vehicles", ["model_name"])


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_index("ix_vehicles_model_name", table_name="vehicles")
    op.drop_table("vehicles")
