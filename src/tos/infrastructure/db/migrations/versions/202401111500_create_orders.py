"""create orders

Revision ID: 202401111500
Revises:
Create Date: 2024-01-11 15:00:00
"""

from __future__ import annotations

import sqlalchemy as sa
from alembic import op

# revision identifiers, used by Alembic.
revision = "202401111500"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "orders",
        sa.Column("order_id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("table_id", sa.SmallInteger(), nullable=False),
        sa.Column("item_name", sa.String(length=255), nullable=False),
        sa.Column("note", sa.Text(), nullable=True),
        sa.Column("creation_time", sa.DateTime(timezone=True), nullable=False),
        sa.Column("estimated_arrival_time", sa.DateTime(timezone=True), nullable=False),
        sa.CheckConstraint(
            "length(item_name) BETWEEN 1 AND 255",
            name="ck_orders_item_name_length",
        ),
        sa.CheckConstraint(
            "estimated_arrival_time > creation_time",
            name="ck_orders_arrival_after_creation",
        ),
        sa.PrimaryKeyConstraint("order_id"),
    )
    op.create_index(
        "ix_orders_table_id_order_id",
        "orders",
        ["table_id", "order_id"],
        unique=False,
    )


def downgrade() -> None:
    op.drop_index("ix_orders_table_id_order_id", table_name="orders")
    op.drop_table("orders")
