from __future__ import annotations

import logging
from collections.abc import Sequence
from datetime import timezone

from sqlalchemy import Engine, delete, insert, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from tos.application.errors import OrderNotFoundError, StorageError
from tos.application.ports.repositories import TableOrderRepository
from tos.domain.common.ids import OrderId, TableId
from tos.domain.order.entities import OrderItem
from tos.infrastructure.db.models.order import OrderModel
from tos.infrastructure.db.session import get_engine

logger = logging.getLogger(__name__)


class SqlAlchemyTableOrderRepository(TableOrderRepository):
    def __init__(self, engine: Engine | None = None) -> None:
        self._engine = engine or get_engine()

    def add_table_orders(self, items: Sequence[OrderItem]) -> None:
        if not items:
            return

        # order_id is assigned by the database; the in-memory placeholder is never written.
        rows = [self._to_row(item) for item in items]
        try:
            with Session(self._engine) as session, session.begin():
                session.execute(insert(OrderModel), rows)
        except SQLAlchemyError as exc:
            logger.exception("add_table_orders_failed", extra={"count": len(rows)})
            raise StorageError("could not insert orders") from exc

    def get_table_orders(self, table_id: TableId) -> list[OrderItem]:
        statement = (
            select(OrderModel)
            .where(OrderModel.table_id == table_id)
            .order_by(OrderModel.order_id.asc())
        )
        try:
            with Session(self._engine) as session:
                models = list(session.execute(statement).scalars().all())
        except SQLAlchemyError as exc:
            logger.exception("get_table_orders_failed", extra={"table_id": table_id})
            raise StorageError("could not query table orders") from exc

        return [self._to_domain(model) for model in models]

    def get_specific_order(self, table_id: TableId, order_id: OrderId) -> list[OrderItem]:
        statement = (
            select(OrderModel)
            .where(
                OrderModel.table_id == table_id,
                OrderModel.order_id == order_id,
            )
            .limit(1)
        )
        try:
            with Session(self._engine) as session:
                model = session.execute(statement).scalar_one_or_none()
        except SQLAlchemyError as exc:
            logger.exception(
                "get_specific_order_failed",
                extra={"table_id": table_id, "order_id": order_id},
            )
            raise StorageError("could not query table order") from exc

        if model is None:
            raise OrderNotFoundError(f"order {order_id} not found for table {table_id}")
        return [self._to_domain(model)]

    def remove_order(self, table_id: TableId, order_id: OrderId) -> None:
        statement = (
            delete(OrderModel)
            .where(
                OrderModel.table_id == table_id,
                OrderModel.order_id == order_id,
            )
            .execution_options(synchronize_session=False)
        )
        try:
            with Session(self._engine) as session, session.begin():
                result = session.execute(statement)
                removed = result.rowcount
        except SQLAlchemyError as exc:
            logger.exception(
                "remove_order_failed",
                extra={"table_id": table_id, "order_id": order_id},
            )
            raise StorageError("could not delete order") from exc

        if removed != 1:
            raise OrderNotFoundError(f"order {order_id} not found for table {table_id}")

    def _to_row(self, item: OrderItem) -> dict[str, object]:
        return {
            "table_id": int(item.table_id),
            "item_name": item.item_name,
            "note": item.note,
            "creation_time": item.creation_time.astimezone(timezone.utc),
            "estimated_arrival_time": item.estimated_arrival_time.astimezone(timezone.utc),
        }

    def _to_domain(self, model: OrderModel) -> OrderItem:
        creation_time = model.creation_time
        if creation_time.tzinfo is None:
            creation_time = creation_time.replace(tzinfo=timezone.utc)
        estimated_arrival_time = model.estimated_arrival_time
        if estimated_arrival_time.tzinfo is None:
            estimated_arrival_time = estimated_arrival_time.replace(tzinfo=timezone.utc)

        return OrderItem(
            order_id=OrderId(model.order_id),
            table_id=TableId(model.table_id),
            item_name=model.item_name,
            note=model.note,
            creation_time=creation_time.astimezone(timezone.utc),
            estimated_arrival_time=estimated_arrival_time.astimezone(timezone.utc),
        )
