from __future__ import annotations

import random
from dataclasses import dataclass
from datetime import datetime, timedelta

from tos.domain.common.ids import OrderId, TableId

UNASSIGNED_ORDER_ID = OrderId(-1)

MIN_ARRIVAL_MINUTES = 5
MAX_ARRIVAL_MINUTES = 15


@dataclass(frozen=True)
class OrderItem:
    order_id: OrderId
    table_id: TableId
    item_name: str
    note: str | None
    creation_time: datetime
    estimated_arrival_time: datetime

    def __post_init__(self) -> None:
        if self.estimated_arrival_time <= self.creation_time:
            raise ValueError("estimated_arrival_time must be after creation_time")

    @property
    def is_persisted(self) -> bool:
        return self.order_id != UNASSIGNED_ORDER_ID


def estimate_arrival_time(creation_time: datetime, rng: random.Random | None = None) -> datetime:
    source = rng or random
    minutes = source.randint(MIN_ARRIVAL_MINUTES, MAX_ARRIVAL_MINUTES)
    return creation_time + timedelta(minutes=minutes)


def create_pending_order(
    table_id: TableId,
    item_name: str,
    note: str | None,
    now: datetime,
    rng: random.Random | None = None,
) -> OrderItem:
    return OrderItem(
        order_id=UNASSIGNED_ORDER_ID,
        table_id=table_id,
        item_name=item_name,
        note=note,
        creation_time=now,
        estimated_arrival_time=estimate_arrival_time(now, rng),
    )
