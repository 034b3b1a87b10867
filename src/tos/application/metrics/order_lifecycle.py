from __future__ import annotations

from collections.abc import Sequence

from prometheus_client import Counter, Histogram

from tos.domain.order.entities import OrderItem

ORDERS_ADDED_TOTAL = Counter(
    "tos_orders_added_total",
    "Total number of orders persisted.",
)

ORDERS_REMOVED_TOTAL = Counter(
    "tos_orders_removed_total",
    "Total number of orders removed.",
)

ORDER_ESTIMATED_WAIT_MINUTES = Histogram(
    "tos_order_estimated_wait_minutes",
    "Estimated minutes between order creation and arrival.",
    buckets=(5, 7, 9, 11, 13, 15),
)


def record_orders_added(orders: Sequence[OrderItem]) -> None:
    ORDERS_ADDED_TOTAL.inc(len(orders))
    for order in orders:
        wait = order.estimated_arrival_time - order.creation_time
        ORDER_ESTIMATED_WAIT_MINUTES.observe(wait.total_seconds() / 60)


def record_order_removed() -> None:
    ORDERS_REMOVED_TOTAL.inc()
