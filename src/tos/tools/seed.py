from __future__ import annotations

from datetime import datetime, timezone

from sqlalchemy import Engine, func, inspect, insert, select
from sqlalchemy.orm import Session

from tos.infrastructure.db.models.order import OrderModel
from tos.infrastructure.db.session import get_engine

DEMO_TABLE_ID = 11

DEMO_ORDERS = [
    {
        "table_id": DEMO_TABLE_ID,
        "item_name": "Kapao",
        "note": "With fried egg",
        "creation_time": datetime(2024, 1, 11, 15, 26, 0, 281247, tzinfo=timezone.utc),
        "estimated_arrival_time": datetime(2024, 1, 11, 15, 30, 0, tzinfo=timezone.utc),
    },
    {
        "table_id": DEMO_TABLE_ID,
        "item_name": "Ramen",
        "note": None,
        "creation_time": datetime(2024, 1, 11, 15, 25, 0, 281247, tzinfo=timezone.utc),
        "estimated_arrival_time": datetime(2024, 1, 11, 15, 40, 0, tzinfo=timezone.utc),
    },
]


def seed_demo_orders(engine: Engine) -> bool:
    count_statement = (
        select(func.count()).select_from(OrderModel).where(OrderModel.table_id == DEMO_TABLE_ID)
    )
    with Session(engine) as session, session.begin():
        if session.execute(count_statement).scalar_one() > 0:
            return False
        # Inserted one by one so Kapao receives the lower order_id.
        for row in DEMO_ORDERS:
            session.execute(insert(OrderModel).values(**row))
    return True


def main() -> None:
    engine = get_engine()
    if "orders" not in inspect(engine).get_table_names():
        print("no schema yet")
        return

    if seed_demo_orders(engine):
        print("seed complete")
    else:
        print("seed skipped")


if __name__ == "__main__":
    main()
