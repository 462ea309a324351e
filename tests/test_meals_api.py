"""End-to-end tests for the /api/meals routes."""
import pytest


def test_create_returns_201_with_generated_id(client, monday):
    resp = client.post("/api/meals", json=monday)
    assert resp.status_code == 201
    body = resp.json()
    assert isinstance(body["id"], int)
    assert body["day"] == "Monday"
    assert body["breakfast"] == "Oats"
    assert body["notes"] is None


def test_create_rejects_purely_numeric_meal(client, monday):
    resp = client.post("/api/meals", json={**monday, "breakfast": "123"})
    assert resp.status_code == 400
    body = resp.json()
    assert "breakfast cannot be purely numeric" in body["error"]
    assert body["details"]["validation_errors"][0]["field"] == "breakfast"


@pytest.mark.parametrize("payload", [
    {"day": "Funday", "breakfast": "Oats", "lunch": "Salad", "dinner": "Rice", "snacks": "Nuts"},
    {"day": "Monday", "breakfast": "Oats", "lunch": "Salad", "dinner": "Rice"},
    {"day": "Monday", "breakfast": "", "lunch": "Salad", "dinner": "Rice", "snacks": "Nuts"},
    {"day": "Monday", "breakfast": ["Oats"], "lunch": "Salad", "dinner": "Rice", "snacks": "Nuts"},
])
def test_create_schema_violations_are_400(client, payload):
    resp = client.post("/api/meals", json=payload)
    assert resp.status_code == 400
    assert resp.json()["error"].startswith("Meal validation failed")


def test_create_duplicate_day_is_400(client, monday):
    assert client.post("/api/meals", json=monday).status_code == 201
    resp = client.post("/api/meals", json={**monday, "lunch": "Different lunch"})
    assert resp.status_code == 400
    assert resp.json()["error"] == "Meal plan for Monday already exists"


def test_list_is_ordered_monday_to_sunday(client, make_plan):
    for day in ("Wednesday", "Monday", "Friday"):
        assert client.post("/api/meals", json=make_plan(day)).status_code == 201
    resp = client.get("/api/meals")
    assert resp.status_code == 200
    assert [m["day"] for m in resp.json()] == ["Monday", "Wednesday", "Friday"]


def test_list_empty_store(client):
    resp = client.get("/api/meals")
    assert resp.status_code == 200
    assert resp.json() == []


def test_get_by_day(client, monday):
    client.post("/api/meals", json=monday)
    resp = client.get("/api/meals/day/Monday")
    assert resp.status_code == 200
    assert resp.json()["dinner"] == "Rice"


def test_get_by_day_missing_is_404(client):
    resp = client.get("/api/meals/day/Tuesday")
    assert resp.status_code == 404
    assert resp.json()["error"] == "Meal not found for this day"


@pytest.mark.parametrize("day", ["Funday", "monday", "Mon"])
def test_get_by_unknown_day_is_400(client, day):
    resp = client.get(f"/api/meals/day/{day}")
    assert resp.status_code == 400
    assert resp.json()["error"] == "Invalid day name"


def test_update_with_malformed_id_is_400(client):
    resp = client.put("/api/meals/abc", json={"lunch": "Soup"})
    assert resp.status_code == 400
    assert resp.json()["error"] == "Invalid meal ID format"


def test_update_with_unassigned_id_is_404(client):
    resp = client.put("/api/meals/424242", json={"lunch": "Soup"})
    assert resp.status_code == 404
    assert resp.json()["error"] == "Meal not found"


def test_update_returns_updated_record(client, monday):
    created = client.post("/api/meals", json=monday).json()
    payload = {**created, "lunch": "Grilled chicken salad", "notes": "Leftovers"}
    resp = client.put(f"/api/meals/{created['id']}", json=payload)
    assert resp.status_code == 200
    body = resp.json()
    assert body["id"] == created["id"]
    assert body["lunch"] == "Grilled chicken salad"
    assert body["notes"] == "Leftovers"
    assert client.get("/api/meals/day/Monday").json()["lunch"] == "Grilled chicken salad"


def test_partial_update_keeps_other_fields(client, monday):
    created = client.post("/api/meals", json=monday).json()
    resp = client.put(f"/api/meals/{created['id']}", json={"snacks": "Yogurt"})
    assert resp.status_code == 200
    assert resp.json()["breakfast"] == "Oats"
    assert resp.json()["snacks"] == "Yogurt"


@pytest.mark.parametrize("payload", [{"dinner": "7"}, {"dinner": ""}, {"dinner": None}, {"day": "Someday"}])
def test_update_validation_failures_are_400(client, monday, payload):
    created = client.post("/api/meals", json=monday).json()
    resp = client.put(f"/api/meals/{created['id']}", json=payload)
    assert resp.status_code == 400
    assert client.get("/api/meals/day/Monday").json()["dinner"] == "Rice"


def test_update_onto_occupied_day_is_400(client, monday, make_plan):
    client.post("/api/meals", json=monday)
    tuesday = client.post("/api/meals", json=make_plan("Tuesday")).json()
    resp = client.put(f"/api/meals/{tuesday['id']}", json={"day": "Monday"})
    assert resp.status_code == 400
    assert resp.json()["error"] == "Meal plan for Monday already exists"


def test_delete_one(client, monday):
    created = client.post("/api/meals", json=monday).json()
    resp = client.delete(f"/api/meals/{created['id']}")
    assert resp.status_code == 200
    assert resp.json() == {"success": True}
    assert client.get("/api/meals").json() == []


def test_delete_malformed_and_missing(client):
    assert client.delete("/api/meals/not-an-id").status_code == 400
    assert client.delete("/api/meals/99").status_code == 404


def test_clear_week(client, make_plan):
    for day in ("Monday", "Tuesday", "Saturday"):
        client.post("/api/meals", json=make_plan(day))
    resp = client.delete("/api/meals")
    assert resp.status_code == 200
    assert resp.json() == {"success": True}
    assert client.get("/api/meals").json() == []


def test_clear_week_on_empty_store(client):
    resp = client.delete("/api/meals")
    assert resp.status_code == 200
    assert resp.json() == {"success": True}


def test_health(client):
    resp = client.get("/api/health")
    assert resp.status_code == 200
    assert resp.json()["status"] == "ok"


def test_unknown_route_uses_error_envelope(client):
    resp = client.get("/api/nothing-here")
    assert resp.status_code == 404
    assert resp.json()["error"] == "Not Found"


def test_day_order_puts_unknown_names_last():
    from schemas import day_index

    assert day_index("Monday") == 0
    assert day_index("Sunday") == 6
    assert sorted(["Funday", "Friday", "Monday"], key=day_index) == ["Monday", "Friday", "Funday"]
