from __future__ import annotations

import logging
import random
from collections.abc import Callable
from datetime import datetime, timezone

from tos.application.dto.requests import TableOrdersRequest
from tos.application.dto.responses import TableOrdersResponse
from tos.application.mappers.order_mapper import to_table_orders_response
from tos.application.metrics.order_lifecycle import record_orders_added
from tos.application.ports.repositories import TableOrderRepository
from tos.application.use_cases.validation import check_table_id, validate_table_ids
from tos.domain.common.ids import TableId
from tos.domain.order.entities import OrderItem, create_pending_order

logger = logging.getLogger(__name__)


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


def build_order_items(
    request_dto: TableOrdersRequest,
    now: datetime,
    rng: random.Random | None = None,
) -> list[OrderItem]:
    # One creation time per envelope; arrival offsets are drawn per item.
    return [
        create_pending_order(
            table_id=TableId(item.table_id),
            item_name=item.item_name,
            note=item.note,
            now=now,
            rng=rng,
        )
        for item in request_dto.take_orders()
    ]


class AddTableOrders:
    def __init__(
        self,
        order_repository: TableOrderRepository,
        max_tables: int,
        clock: Callable[[], datetime] = _utc_now,
        rng: random.Random | None = None,
    ) -> None:
        self._order_repository = order_repository
        self._max_tables = max_tables
        self._clock = clock
        self._rng = rng

    def execute(self, table_id: int, request_dto: TableOrdersRequest) -> TableOrdersResponse:
        logger.info(
            "add_table_orders",
            extra={"table_id": table_id, "max_tables": self._max_tables},
        )
        checked_table_id = check_table_id(table_id, self._max_tables)
        validate_table_ids(request_dto.orders, checked_table_id)

        orders = build_order_items(request_dto, now=self._clock(), rng=self._rng)
        logger.info("adding_orders", extra={"table_id": table_id, "count": len(orders)})
        self._order_repository.add_table_orders(orders)
        record_orders_added(orders)

        current = self._order_repository.get_table_orders(checked_table_id)
        return to_table_orders_response(checked_table_id, current)
