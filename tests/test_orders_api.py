"""Order API flow tests."""

from decimal import Decimal

from fastapi.testclient import TestClient

ORDER_PAYLOAD = {
    "customer_name": "Lin",
    "customer_phone": "0912-345-678",
    "customer_office": "7F",
    "order_date": "2099-01-05",
    "items": [
        {"menu_item_id": "x", "quantity": 2, "name": "Beef noodles", "price": "50"},
        {"menu_item_id": "y", "quantity": 1, "name": "Dumplings", "price": "30"},
    ],
    "total_price": "130",
}


def test_order_checkout_scan_and_pickup(client: TestClient) -> None:
    created = client.post("/api/v1/orders", json=ORDER_PAYLOAD)
    assert created.status_code == 201
    body = created.json()
    assert Decimal(body["total_price"]) == Decimal("130")
    assert body["picked_up"] is False
    assert [item["menu_item_id"] for item in body["items"]] == ["x", "y"]

    scanned = client.post("/api/v1/orders/scan", json={"code": f" {body['id']} "})
    assert scanned.status_code == 200
    assert scanned.json()["id"] == body["id"]

    picked = client.put(f"/api/v1/orders/{body['id']}", json={"picked_up": True})
    assert picked.status_code == 200
    assert picked.json()["picked_up"] is True

    fetched = client.get(f"/api/v1/orders/{body['id']}").json()
    assert fetched["picked_up"] is True
    assert fetched["customer_name"] == "Lin"


def test_order_total_mismatch_is_rejected(client: TestClient) -> None:
    response = client.post("/api/v1/orders", json={**ORDER_PAYLOAD, "total_price": "120"})

    assert response.status_code == 400
    assert response.json()["error"] == "ValidationError"
    assert response.json()["details"]["expected"] == "130.00"


def test_order_without_lines_is_rejected(client: TestClient) -> None:
    response = client.post("/api/v1/orders", json={**ORDER_PAYLOAD, "items": [], "total_price": None})

    assert response.status_code == 400


def test_unknown_order_returns_404(client: TestClient) -> None:
    assert client.get("/api/v1/orders/missing").status_code == 404
    assert client.put("/api/v1/orders/missing", json={"picked_up": True}).status_code == 404
    assert client.post("/api/v1/orders/scan", json={"code": "missing"}).status_code == 404


def test_list_orders_by_date(client: TestClient) -> None:
    client.post("/api/v1/orders", json=ORDER_PAYLOAD)
    client.post("/api/v1/orders", json={**ORDER_PAYLOAD, "order_date": "2099-01-06"})

    assert len(client.get("/api/v1/orders").json()) == 2
    same_day = client.get("/api/v1/orders", params={"date": "2099-01-06"}).json()
    assert [order["order_date"] for order in same_day] == ["2099-01-06"]
