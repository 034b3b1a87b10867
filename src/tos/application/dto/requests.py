from __future__ import annotations

from typing import Annotated

from pydantic import BaseModel, Field

from tos.domain.common.ids import INT16_MAX, INT16_MIN

Int16 = Annotated[int, Field(ge=INT16_MIN, le=INT16_MAX)]


class OrderItemRequest(BaseModel):
    table_id: Int16
    item_name: str
    note: str | None = None

    @classmethod
    def with_note(cls, table_id: int, item_name: str, note: str) -> OrderItemRequest:
        return cls(table_id=table_id, item_name=item_name, note=note)

    @classmethod
    def without_note(cls, table_id: int, item_name: str) -> OrderItemRequest:
        return cls(table_id=table_id, item_name=item_name, note=None)


class TableOrdersRequest(BaseModel):
    table_id: Int16
    orders: list[OrderItemRequest] = Field(default_factory=list)

    @classmethod
    def empty(cls, table_id: int) -> TableOrdersRequest:
        return cls(table_id=table_id, orders=[])

    def add_order(self, item_name: str, note: str) -> None:
        self.orders.append(OrderItemRequest.with_note(self.table_id, item_name, note))

    def add_order_without_note(self, item_name: str) -> None:
        self.orders.append(OrderItemRequest.without_note(self.table_id, item_name))

    def take_orders(self) -> list[OrderItemRequest]:
        return list(self.orders)

    def to_json(self) -> str:
        return self.model_dump_json(indent=2)
