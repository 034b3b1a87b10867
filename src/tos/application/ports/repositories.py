from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol

from tos.domain.common.ids import OrderId, TableId
from tos.domain.order.entities import OrderItem


class TableOrderRepository(Protocol):
    """Durable order storage scoped per table.

    Implementations raise ``StorageError`` for any backing-store failure and
    ``OrderNotFoundError`` when a point lookup or delete matches no row.
    """

    def add_table_orders(self, items: Sequence[OrderItem]) -> None: ...

    def get_table_orders(self, table_id: TableId) -> list[OrderItem]: ...

    def get_specific_order(self, table_id: TableId, order_id: OrderId) -> list[OrderItem]: ...

    def remove_order(self, table_id: TableId, order_id: OrderId) -> None: ...
