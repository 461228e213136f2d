"""Catalog, daily menu, calendar and customer API flow tests."""

from decimal import Decimal

from fastapi.testclient import TestClient


def _seed_catalog(client: TestClient) -> dict[str, str]:
    restaurant = client.post("/api/v1/restaurants", json={"name": "Noodle Bar", "address": "1 Main St"})
    assert restaurant.status_code == 201
    restaurant_id: str = restaurant.json()["id"]

    ids: dict[str, str] = {"restaurant": restaurant_id}
    for key, name, price in (("beef", "Beef noodles", "150"), ("dumpling", "Dumplings", "80")):
        response = client.post(
            "/api/v1/menu-items",
            json={"restaurant_id": restaurant_id, "name": name, "price": price},
        )
        assert response.status_code == 201
        ids[key] = response.json()["id"]
    return ids


def test_health(client: TestClient) -> None:
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_catalog_create_and_list(client: TestClient) -> None:
    ids = _seed_catalog(client)

    restaurants = client.get("/api/v1/restaurants").json()
    assert [restaurant["name"] for restaurant in restaurants] == ["Noodle Bar"]

    items = client.get(f"/api/v1/menu-items/{ids['restaurant']}").json()
    assert [item["name"] for item in items] == ["Beef noodles", "Dumplings"]
    assert Decimal(items[0]["price"]) == Decimal("150")

    assert client.get("/api/v1/menu-items/999").json() == []
    assert client.get("/api/v1/menu-items/abc").status_code == 404


def test_menu_item_for_unknown_restaurant_is_rejected(client: TestClient) -> None:
    response = client.post("/api/v1/menu-items", json={"restaurant_id": "42", "name": "Soup", "price": "10"})

    assert response.status_code == 404
    assert response.json()["error"] == "NotFound"


def test_daily_menu_save_and_reload(client: TestClient) -> None:
    empty = client.get("/api/v1/daily-menu/2026-03-10")
    assert empty.status_code == 200
    assert empty.json()["menu_item_ids"] == []

    saved = client.post("/api/v1/daily-menu/2026-03-10", json={"menu_item_ids": ["2", "1", "1"]})
    assert saved.status_code == 200
    assert saved.json()["menu_item_ids"] == ["1", "2"]

    reloaded = client.get("/api/v1/daily-menu/2026-03-10").json()
    assert reloaded["menu_item_ids"] == ["1", "2"]
    assert reloaded["updated_at"] is not None


def test_daily_menu_rejects_malformed_date(client: TestClient) -> None:
    response = client.get("/api/v1/daily-menu/2026-02-30")

    assert response.status_code == 400
    assert response.json()["error"] == "InvalidDate"


def test_weekly_menu_batch_save_and_range(client: TestClient) -> None:
    payload = {
        "menus": [
            {"date": "2020-03-09", "menu_item_ids": ["1"]},
            {"date": "2020-03-10", "menu_item_ids": []},
            {"date": "2020-03-11", "menu_item_ids": ["1", "2"]},
        ]
    }

    saved = client.post("/api/v1/weekly-menu", json=payload)
    assert saved.status_code == 200
    assert saved.json() == {"success": True, "count": 3}

    weekly = client.get("/api/v1/weekly-menu", params={"startDate": "2020-03-10", "endDate": "2020-03-11"}).json()
    assert [menu["date"] for menu in weekly["weekly_menus"]] == ["2020-03-10", "2020-03-11"]

    history = client.get("/api/v1/menu-history").json()["history_menus"]
    assert [menu["date"] for menu in history] == ["2020-03-11", "2020-03-09"]


def test_weekend_override_requires_reason_and_weekend(client: TestClient) -> None:
    blank = client.put("/api/v1/weekend-overrides/2026-03-14", json={"reason": "  "})
    assert blank.status_code == 400
    assert blank.json()["error"] == "ValidationError"

    weekday = client.put("/api/v1/weekend-overrides/2026-03-10", json={"reason": "staff event"})
    assert weekday.status_code == 400
    assert weekday.json()["error"] == "InvalidOperation"


def test_weekend_override_opens_and_closes_the_calendar(client: TestClient) -> None:
    opened = client.put("/api/v1/weekend-overrides/2026-03-14", json={"reason": " staff event "})
    assert opened.status_code == 200
    assert opened.json() == {"date": "2026-03-14", "enabled": True, "reason": "staff event", "ordering_open": True}

    week = client.get("/api/v1/calendar/week/2026-03-10").json()
    by_date = {day["date"]: day for day in week["days"]}
    assert week["start_date"] == "2026-03-09"
    assert week["end_date"] == "2026-03-15"
    assert by_date["2026-03-14"]["ordering_open"] is True
    assert by_date["2026-03-14"]["override_reason"] == "staff event"
    assert by_date["2026-03-15"]["ordering_open"] is False

    closed = client.delete("/api/v1/weekend-overrides/2026-03-14").json()
    assert closed["ordering_open"] is False
    week = client.get("/api/v1/calendar/week/2026-03-14").json()
    assert {day["date"]: day for day in week["days"]}["2026-03-14"]["ordering_open"] is False


def test_weekend_daily_menu_save_records_reason(client: TestClient) -> None:
    saved = client.post(
        "/api/v1/daily-menu/2026-03-14",
        json={"menu_item_ids": ["1"], "weekend_reason": "inventory day"},
    ).json()

    assert saved["weekend_reason"] == "inventory day"
    week = client.get("/api/v1/calendar/week/2026-03-14").json()
    saturday = {day["date"]: day for day in week["days"]}["2026-03-14"]
    assert saturday["ordering_open"] is True
    assert saturday["selected_count"] == 1


def test_month_view_marks_holidays(client: TestClient) -> None:
    month = client.get("/api/v1/calendar/month/2026-02").json()

    assert month["year_month"] == "2026-02"
    assert month["first_weekday_index"] == 0
    assert len(month["days"]) == 28
    new_year = {day["date"]: day for day in month["days"]}["2026-02-17"]
    assert new_year["holiday_name"] is not None
    assert new_year["ordering_open"] is False

    assert client.get("/api/v1/calendar/month/2026-13").status_code == 400


def test_selection_view_reports_restaurant_state(client: TestClient) -> None:
    ids = _seed_catalog(client)
    client.post("/api/v1/daily-menu/2026-03-10", json={"menu_item_ids": [ids["beef"]]})

    view = client.get("/api/v1/calendar/selection/2026-03-10").json()
    assert view["selected_count"] == 1
    assert view["ordering_open"] is True
    (restaurant,) = view["restaurants"]
    assert restaurant["restaurant_name"] == "Noodle Bar"
    assert restaurant["state"] == "partial"
    assert {item["id"]: item["selected"] for item in restaurant["items"]} == {ids["beef"]: True, ids["dumpling"]: False}

    filtered = client.get("/api/v1/calendar/selection/2026-03-10", params={"search": "pizza"}).json()
    assert filtered["restaurants"] == []


def test_customer_menu_publishes_selected_items_only(client: TestClient) -> None:
    ids = _seed_catalog(client)
    client.post("/api/v1/daily-menu/2099-01-05", json={"menu_item_ids": [ids["dumpling"]]})
    client.post("/api/v1/daily-menu/2020-01-06", json={"menu_item_ids": [ids["dumpling"]]})

    future = client.get("/api/v1/customer/menu/2099-01-05").json()
    assert future["can_order"] is True
    assert [item["name"] for item in future["items"]] == ["Dumplings"]

    past = client.get("/api/v1/customer/menu/2020-01-06").json()
    assert past["can_order"] is False
    assert [item["name"] for item in past["items"]] == ["Dumplings"]

    unpublished = client.get("/api/v1/customer/menu/2099-01-06").json()
    assert unpublished["items"] == []


def test_customer_dates_strip(client: TestClient) -> None:
    body = client.get("/api/v1/customer/dates").json()

    assert len(body["dates"]) == 7
    assert body["dates"][0]["date"] == body["today"]
    assert body["dates"][0]["selectable"] is False
    assert body["dates"][1]["date"] == body["default_date"]
    assert body["dates"][1]["selectable"] is True


def test_override_endpoints_keep_daily_menu_reason_in_step(client: TestClient) -> None:
    client.post("/api/v1/daily-menu/2026-03-14", json={"menu_item_ids": ["1"], "weekend_reason": "staff event"})

    client.delete("/api/v1/weekend-overrides/2026-03-14")
    closed = client.get("/api/v1/daily-menu/2026-03-14").json()
    assert closed["weekend_reason"] is None
    assert closed["menu_item_ids"] == ["1"]

    client.put("/api/v1/weekend-overrides/2026-03-14", json={"reason": "inventory day"})
    reopened = client.get("/api/v1/daily-menu/2026-03-14").json()
    assert reopened["weekend_reason"] == "inventory day"
