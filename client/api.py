"""HTTP client for the meal planner API.

`MealPlannerClient` wraps an `httpx.Client` and exposes one method per
endpoint. Failed calls raise `ApiError` carrying the server's ``error``
message verbatim, falling back to an operation-specific message when the
response body is not the expected JSON envelope.
"""

from typing import Any, Dict, List, Optional

import httpx

from core.config import API_BASE_URL
from core.logger import get_logger

logger = get_logger("client.api")


class ApiError(Exception):
    """A request to the meal planner API failed.

    Attributes:
        message: Text suitable for showing to the user.
        status_code: HTTP status, or None when the server was unreachable.
    """

    def __init__(self, message: str, status_code: Optional[int] = None):
        self.message = message
        self.status_code = status_code
        super().__init__(message)


class MealPlannerClient:
    """Client for the `/meals` endpoints.

    Args:
        base_url: API root, e.g. ``http://localhost:4000/api``.
        http: Optional preconfigured `httpx.Client` (a FastAPI `TestClient`
            works too). One is created when omitted.
    """

    def __init__(self, base_url: str = API_BASE_URL, http: Optional[httpx.Client] = None):
        self.base_url = base_url.rstrip("/")
        self.http = http or httpx.Client()

    def close(self) -> None:
        self.http.close()

    def __enter__(self) -> "MealPlannerClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def _request(self, method: str, path: str, fallback: str, json: Any = None) -> Any:
        url = f"{self.base_url}{path}"
        logger.debug("%s %s", method, url)
        try:
            response = self.http.request(method, url, json=json)
        except httpx.HTTPError as exc:
            logger.error("%s %s failed: %s", method, url, exc)
            raise ApiError("Could not reach the meal planner API") from exc

        if response.is_success:
            try:
                return response.json()
            except ValueError as exc:
                logger.error("%s %s returned a non-JSON body", method, url)
                raise ApiError(fallback, status_code=response.status_code) from exc

        try:
            body = response.json()
        except ValueError:
            body = None
        message = (body.get("error") if isinstance(body, dict) else None) or fallback
        logger.warning("%s %s -> %s: %s", method, url, response.status_code, message)
        raise ApiError(str(message), status_code=response.status_code)

    def health(self) -> Dict[str, Any]:
        return self._request("GET", "/health", "Health check failed")

    def fetch_meals(self) -> List[Dict[str, Any]]:
        """Return every stored plan, Monday first."""
        return self._request("GET", "/meals", "Failed to load meals")

    def fetch_meal_for_day(self, day: str) -> Dict[str, Any]:
        return self._request("GET", f"/meals/day/{day}", "Failed to load meal")

    def create_meal(self, payload: Dict[str, Any]) -> Dict[str, Any]:
        return self._request("POST", "/meals", "Create failed", json=payload)

    def update_meal(self, meal_id: Any, payload: Dict[str, Any]) -> Dict[str, Any]:
        """Send a (partial) update for ``meal_id``.

        Raises:
            ApiError: Without contacting the server if ``meal_id`` is empty.
        """
        if meal_id is None or meal_id == "":
            raise ApiError("Meal ID is required for update")
        return self._request("PUT", f"/meals/{meal_id}", "Update failed", json=payload)

    def delete_meal(self, meal_id: Any) -> Dict[str, Any]:
        return self._request("DELETE", f"/meals/{meal_id}", "Delete failed")

    def clear_week(self) -> Dict[str, Any]:
        return self._request("DELETE", "/meals", "Clear failed")
