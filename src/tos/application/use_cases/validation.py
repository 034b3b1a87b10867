"""Checks applied to request identifiers before any store call."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from tos.application.dto.requests import OrderItemRequest
from tos.application.errors import BadRequestError, OrderNotFoundError, TableNotFoundError
from tos.domain.common.ids import INT32_MAX, OrderId, TableId

logger = logging.getLogger(__name__)

TABLE_ID_MISMATCH = "table id in json request (or path) is incorrect"


def check_table_id(table_id: int, max_tables: int) -> TableId:
    if not 1 <= table_id <= max_tables:
        logger.error(
            "table_id_out_of_range",
            extra={"table_id": table_id, "max_tables": max_tables},
        )
        raise TableNotFoundError()
    return TableId(table_id)


def check_order_id(order_id: int) -> OrderId:
    if not 1 <= order_id <= INT32_MAX:
        logger.error("order_id_out_of_range", extra={"order_id": order_id})
        raise OrderNotFoundError()
    return OrderId(order_id)


def table_ids_match(orders: Sequence[OrderItemRequest], table_id_from_path: int) -> bool:
    if not orders:
        return False
    head, *tail = orders
    if any(item.table_id != head.table_id for item in tail):
        return False
    return head.table_id == table_id_from_path


def validate_table_ids(orders: Sequence[OrderItemRequest], table_id_from_path: int) -> None:
    if not table_ids_match(orders, table_id_from_path):
        raise BadRequestError(TABLE_ID_MISMATCH)
