from __future__ import annotations

from datetime import datetime, timezone
from typing import Annotated

from pydantic import BaseModel, Field, PlainSerializer


def _rfc3339_micros(value: datetime) -> str:
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc).strftime("%Y-%m-%dT%H:%M:%S.%fZ")


UtcTimestamp = Annotated[datetime, PlainSerializer(_rfc3339_micros, return_type=str)]


class OrderItemResponse(BaseModel):
    order_id: int
    table_id: int
    item_name: str
    note: str | None = None
    creation_time: UtcTimestamp
    estimated_arrival_time: UtcTimestamp


class TableOrdersResponse(BaseModel):
    status_code: int
    table_id: int
    orders: list[OrderItemResponse] = Field(default_factory=list)


class ErrorResponse(BaseModel):
    status_code: int
    error_cause: str
