"""Tests for the HTTP client, driven against the in-process API."""
import httpx
import pytest

from client.api import ApiError, MealPlannerClient


@pytest.fixture
def api(client):
    return MealPlannerClient("http://testserver/api", http=client)


def test_round_trip_through_every_endpoint(api, monday, make_plan):
    created = api.create_meal(monday)
    api.create_meal(make_plan("Thursday"))
    assert [m["day"] for m in api.fetch_meals()] == ["Monday", "Thursday"]
    assert api.fetch_meal_for_day("Monday")["id"] == created["id"]

    updated = api.update_meal(created["id"], {"dinner": "Stir fry"})
    assert updated["dinner"] == "Stir fry"

    assert api.delete_meal(created["id"]) == {"success": True}
    assert api.clear_week() == {"success": True}
    assert api.fetch_meals() == []


def test_server_message_is_passed_through(api, monday):
    api.create_meal(monday)
    with pytest.raises(ApiError) as exc_info:
        api.create_meal(monday)
    assert exc_info.value.message == "Meal plan for Monday already exists"
    assert exc_info.value.status_code == 400


def test_not_found_message(api):
    with pytest.raises(ApiError) as exc_info:
        api.update_meal(31337, {"lunch": "Soup"})
    assert exc_info.value.status_code == 404
    assert exc_info.value.message == "Meal not found"


def test_update_without_id_never_calls_server():
    transport = httpx.MockTransport(lambda request: pytest.fail("request should not be sent"))
    api = MealPlannerClient("http://example.test/api", http=httpx.Client(transport=transport))
    with pytest.raises(ApiError, match="Meal ID is required"):
        api.update_meal(None, {"lunch": "Soup"})


def test_non_json_error_body_uses_fallback():
    transport = httpx.MockTransport(lambda request: httpx.Response(502, text="Bad gateway"))
    api = MealPlannerClient("http://example.test/api", http=httpx.Client(transport=transport))
    with pytest.raises(ApiError) as exc_info:
        api.fetch_meals()
    assert exc_info.value.message == "Failed to load meals"
    assert exc_info.value.status_code == 502


def test_unreachable_server():
    def refuse(request):
        raise httpx.ConnectError("connection refused", request=request)

    api = MealPlannerClient("http://example.test/api", http=httpx.Client(transport=httpx.MockTransport(refuse)))
    with pytest.raises(ApiError) as exc_info:
        api.clear_week()
    assert exc_info.value.status_code is None
    assert "Could not reach" in exc_info.value.message


def test_success_status_with_non_json_body_raises_api_error():
    transport = httpx.MockTransport(
        lambda request: httpx.Response(200, text="<html>proxy</html>", headers={"content-type": "text/html"})
    )
    api = MealPlannerClient("http://example.test/api", http=httpx.Client(transport=transport))
    with pytest.raises(ApiError) as exc_info:
        api.fetch_meals()
    assert exc_info.value.message == "Failed to load meals"
    assert exc_info.value.status_code == 200
