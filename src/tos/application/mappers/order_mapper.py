from __future__ import annotations

from collections.abc import Sequence

from tos.application.dto.responses import OrderItemResponse, TableOrdersResponse
from tos.domain.common.ids import TableId
from tos.domain.order.entities import OrderItem


def to_order_item_response(order: OrderItem) -> OrderItemResponse:
    return OrderItemResponse(
        order_id=int(order.order_id),
        table_id=int(order.table_id),
        item_name=order.item_name,
        note=order.note,
        creation_time=order.creation_time,
        estimated_arrival_time=order.estimated_arrival_time,
    )


def to_table_orders_response(
    table_id: TableId,
    orders: Sequence[OrderItem],
    status_code: int = 200,
) -> TableOrdersResponse:
    return TableOrdersResponse(
        status_code=status_code,
        table_id=int(table_id),
        orders=[to_order_item_response(order) for order in orders],
    )
