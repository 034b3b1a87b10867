from __future__ import annotations

from datetime import datetime

from sqlalchemy import CheckConstraint, DateTime, Index, Integer, SmallInteger, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from tos.infrastructure.db.models.base import Base

ITEM_NAME_MAX_LENGTH = 255


class OrderModel(Base):
    __tablename__ = "orders"

    order_id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    table_id: Mapped[int] = mapped_column(SmallInteger, nullable=False)
    item_name: Mapped[str] = mapped_column(String(ITEM_NAME_MAX_LENGTH), nullable=False)
    note: Mapped[str | None] = mapped_column(Text, nullable=True)
    creation_time: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    estimated_arrival_time: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
    )

    __table_args__ = (
        CheckConstraint(
            f"length(item_name) BETWEEN 1 AND {ITEM_NAME_MAX_LENGTH}",
            name="ck_orders_item_name_length",
        ),
        CheckConstraint(
            "estimated_arrival_time > creation_time",
            name="ck_orders_arrival_after_creation",
        ),
        Index("ix_orders_table_id_order_id", "table_id", "order_id"),
    )
