from __future__ import annotations

import logging

from tos.application.dto.responses import TableOrdersResponse
from tos.application.mappers.order_mapper import to_table_orders_response
from tos.application.ports.repositories import TableOrderRepository
from tos.application.use_cases.validation import check_order_id, check_table_id

logger = logging.getLogger(__name__)


class GetTableOrder:
    def __init__(self, order_repository: TableOrderRepository, max_tables: int) -> None:
        self._order_repository = order_repository
        self._max_tables = max_tables

    def execute(self, table_id: int, order_id: int) -> TableOrdersResponse:
        logger.info("get_table_order", extra={"table_id": table_id, "order_id": order_id})
        checked_table_id = check_table_id(table_id, self._max_tables)
        checked_order_id = check_order_id(order_id)
        orders = self._order_repository.get_specific_order(checked_table_id, checked_order_id)
        return to_table_orders_response(checked_table_id, orders)
