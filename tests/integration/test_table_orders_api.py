from __future__ import annotations

import sys
from datetime import datetime
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).resolve().parents[2] / "src"))

MALFORMED_PATH = {
    "status_code": 400,
    "error_cause": "Bad request -> parameters in path are incorrect",
}
TABLE_ID_MISMATCH = {
    "status_code": 400,
    "error_cause": "Bad request -> table id in json request (or path) is incorrect",
}


def _parse(value: str) -> datetime:
    return datetime.fromisoformat(value.replace("Z", "+00:00"))


def test_health(client) -> None:
    response = client.get("/api/v1/health")

    assert response.status_code == 200
    assert response.json() == {"status": "healthy!"}


def test_get_all_valid_orders(client) -> None:
    response = client.get("/api/v1/tables/11/orders")

    assert response.status_code == 200
    body = response.json()
    assert list(body) == ["status_code", "table_id", "orders"]
    assert body["status_code"] == 200
    assert body["table_id"] == 11
    assert len(body["orders"]) == 2

    kapao, ramen = body["orders"]
    assert list(kapao) == [
        "order_id",
        "table_id",
        "item_name",
        "note",
        "creation_time",
        "estimated_arrival_time",
    ]
    assert kapao["item_name"] == "Kapao"
    assert kapao["note"] == "With fried egg"
    assert kapao["creation_time"] == "2024-01-11T15:26:00.281247Z"
    assert kapao["estimated_arrival_time"] == "2024-01-11T15:30:00.000000Z"
    assert ramen["item_name"] == "Ramen"
    assert ramen["note"] is None
    assert ramen["creation_time"] == "2024-01-11T15:25:00.281247Z"
    assert ramen["estimated_arrival_time"] == "2024-01-11T15:40:00.000000Z"


def test_get_all_orders_from_incorrect_table(client) -> None:
    response = client.get("/api/v1/tables/-1/orders")

    assert response.status_code == 404
    assert response.json() == {"status_code": 404, "error_cause": "Table not found"}


def test_get_all_orders_from_empty_table(client) -> None:
    response = client.get("/api/v1/tables/100/orders")

    assert response.status_code == 200
    assert response.json() == {"status_code": 200, "table_id": 100, "orders": []}


def test_get_specific_order(client) -> None:
    listed = client.get("/api/v1/tables/11/orders").json()
    last_known_order = listed["orders"][1]

    response = client.get(f"/api/v1/tables/11/orders/{last_known_order['order_id']}")

    assert response.status_code == 200
    body = response.json()
    assert body["table_id"] == 11
    assert body["orders"] == [last_known_order]


def test_get_specific_non_existence_order(client) -> None:
    response = client.get("/api/v1/tables/11/orders/99999")

    assert response.status_code == 404
    assert response.json() == {"status_code": 404, "error_cause": "Order not found"}


def test_get_specific_order_of_other_table_is_not_found(client) -> None:
    kapao = client.get("/api/v1/tables/11/orders").json()["orders"][0]

    response = client.get(f"/api/v1/tables/12/orders/{kapao['order_id']}")

    assert response.status_code == 404
    assert response.json()["error_cause"] == "Order not found"


def test_add_orders(client) -> None:
    response = client.post(
        "/api/v1/tables/44/orders",
        json={
            "table_id": 44,
            "orders": [
                {"table_id": 44, "item_name": "A", "note": "Some note"},
                {"table_id": 44, "item_name": "C"},
            ],
        },
    )

    assert response.status_code == 200
    body = response.json()
    assert body["status_code"] == 200
    assert body["table_id"] == 44
    assert len(body["orders"]) == 2
    first, second = body["orders"]
    assert first["table_id"] == 44
    assert first["item_name"] == "A"
    assert first["note"] == "Some note"
    assert second["table_id"] == 44
    assert second["item_name"] == "C"
    assert second["note"] is None

    assert first["creation_time"] == second["creation_time"]
    for order in body["orders"]:
        wait = _parse(order["estimated_arrival_time"]) - _parse(order["creation_time"])
        assert 5 * 60 <= wait.total_seconds() <= 15 * 60


def test_add_orders_returns_full_table_state(client) -> None:
    response = client.post(
        "/api/v1/tables/11/orders",
        json={"table_id": 11, "orders": [{"table_id": 11, "item_name": "Som Tam"}]},
    )

    assert response.status_code == 200
    names = [order["item_name"] for order in response.json()["orders"]]
    assert names == ["Kapao", "Ramen", "Som Tam"]


def test_add_orders_with_mismatch_table_id_in_payload(client) -> None:
    response = client.post(
        "/api/v1/tables/44/orders",
        json={
            "table_id": 44,
            "orders": [
                {"table_id": 44, "item_name": "A", "note": "Some note"},
                {"table_id": 45, "item_name": "C"},
            ],
        },
    )

    assert response.status_code == 400
    assert response.json() == TABLE_ID_MISMATCH
    assert client.get("/api/v1/tables/44/orders").json()["orders"] == []


def test_add_orders_with_mismatch_table_id_in_path(client) -> None:
    response = client.post(
        "/api/v1/tables/43/orders",
        json={
            "table_id": 44,
            "orders": [
                {"table_id": 44, "item_name": "A"},
                {"table_id": 44, "item_name": "C"},
            ],
        },
    )

    assert response.status_code == 400
    assert response.json() == TABLE_ID_MISMATCH


def test_add_orders_with_empty_list(client) -> None:
    response = client.post("/api/v1/tables/44/orders", json={"table_id": 44, "orders": []})

    assert response.status_code == 400
    assert response.json() == TABLE_ID_MISMATCH


def test_add_orders_with_oversized_item_name(client) -> None:
    response = client.post(
        "/api/v1/tables/44/orders",
        json={"table_id": 44, "orders": [{"table_id": 44, "item_name": "k" * 256}]},
    )

    assert response.status_code == 500
    assert response.json() == {
        "status_code": 500,
        "error_cause": "Database error -> could not insert orders",
    }


def test_add_orders_with_malformed_json(client) -> None:
    response = client.post(
        "/api/v1/tables/44/orders",
        content=b"{not json",
        headers={"Content-Type": "application/json"},
    )

    assert response.status_code == 400
    assert response.json() == {
        "status_code": 400,
        "error_cause": "Bad request -> Json request payload is incorrect",
    }


def test_add_orders_with_missing_item_table_id(client) -> None:
    response = client.post(
        "/api/v1/tables/44/orders",
        json={"table_id": 44, "orders": [{"item_name": "A"}]},
    )

    assert response.status_code == 400
    assert response.json()["error_cause"] == "Bad request -> Json request payload is incorrect"


def test_add_orders_with_out_of_range_path_table_id(client) -> None:
    response = client.post(
        "/api/v1/tables/70000/orders",
        json={
            "table_id": 70000,
            "orders": [
                {"table_id": 70000, "item_name": "A", "note": "Some note"},
                {"table_id": 70000, "item_name": "C"},
            ],
        },
    )

    assert response.status_code == 400
    assert response.json() == MALFORMED_PATH


def test_add_orders_beyond_max_tables(client) -> None:
    response = client.post(
        "/api/v1/tables/101/orders",
        json={"table_id": 101, "orders": [{"table_id": 101, "item_name": "A"}]},
    )

    assert response.status_code == 404
    assert response.json() == {"status_code": 404, "error_cause": "Table not found"}


@pytest.mark.parametrize(
    ("method", "path"),
    [
        ("GET", "/api/v1/tables/70000/orders"),
        ("GET", "/api/v1/tables/70000/orders/1"),
        ("GET", "/api/v1/tables/1/orders/2147483650"),
        ("GET", "/api/v1/tables/70000/orders/2147483650"),
        ("GET", "/api/v1/tables/eleven/orders"),
        ("DELETE", "/api/v1/tables/70000/orders/1"),
        ("DELETE", "/api/v1/tables/1/orders/2147483650"),
        ("DELETE", "/api/v1/tables/70000/orders/2147483650"),
    ],
)
def test_out_of_range_path_ids(client, method: str, path: str) -> None:
    response = client.request(method, path)

    assert response.status_code == 400
    assert response.json() == MALFORMED_PATH


@pytest.mark.parametrize("method", ["GET", "DELETE"])
def test_non_positive_order_id_is_not_found(client, method: str) -> None:
    response = client.request(method, "/api/v1/tables/11/orders/0")

    assert response.status_code == 404
    assert response.json() == {"status_code": 404, "error_cause": "Order not found"}


def test_remove_order(client) -> None:
    kapao = client.get("/api/v1/tables/11/orders").json()["orders"][0]

    response = client.delete(f"/api/v1/tables/11/orders/{kapao['order_id']}")

    assert response.status_code == 200
    body = response.json()
    assert body["table_id"] == 11
    assert [order["item_name"] for order in body["orders"]] == ["Ramen"]
    assert kapao["order_id"] not in [order["order_id"] for order in body["orders"]]

    repeated = client.delete(f"/api/v1/tables/11/orders/{kapao['order_id']}")
    assert repeated.status_code == 404
    assert repeated.json() == {"status_code": 404, "error_cause": "Order not found"}


def test_unknown_route_uses_error_envelope(client) -> None:
    response = client.get("/api/v1/chairs")

    assert response.status_code == 404
    assert response.json() == {"status_code": 404, "error_cause": "Not Found"}


def test_request_id_is_echoed(client) -> None:
    response = client.get("/api/v1/tables/11/orders", headers={"X-Request-Id": "req-123"})

    assert response.headers["X-Request-Id"] == "req-123"
