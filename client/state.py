"""Client-side state for the meal planner form.

All UI state lives in one `PlannerState`. `PlannerController` is the only
thing that changes it: each action updates the state, talks to the API
when needed and then hands the new state to the render callback. After
any mutation the list is reloaded from the API, never patched locally.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Dict, List, Optional

from client.api import ApiError, MealPlannerClient
from client.validation import MEAL_FIELDS, is_purely_numeric, missing_required_fields, validate_meal_fields
from core.logger import get_logger

logger = get_logger("client.state")

DAYS = ["Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday"]
ALL_DAYS = "All"
FORM_FIELDS = ("day",) + MEAL_FIELDS + ("notes",)


class Mode(str, Enum):
    BROWSING = "browsing"
    COMPOSING = "composing"
    EDITING = "editing"
    CONFIRMING = "confirming"


class PendingAction(str, Enum):
    DELETE_MEAL = "delete_meal"
    CLEAR_WEEK = "clear_week"


def empty_form() -> Dict[str, str]:
    return {name: "" for name in FORM_FIELDS}


@dataclass
class ConfirmDialog:
    """A destructive action waiting for a yes/no answer."""

    title: str
    message: str
    action: PendingAction
    meal_id: Optional[Any] = None
    return_mode: Mode = Mode.BROWSING


@dataclass
class PlannerState:
    meals: List[Dict[str, Any]] = field(default_factory=list)
    form: Dict[str, str] = field(default_factory=empty_form)
    editing_id: Optional[Any] = None
    filter_day: str = ALL_DAYS
    error: str = ""
    loading: bool = False
    confirm: Optional[ConfirmDialog] = None
    mode: Mode = Mode.BROWSING

    @property
    def visible_meals(self) -> List[Dict[str, Any]]:
        """Meals in Monday..Sunday order, narrowed to ``filter_day``."""
        ordered = sorted(self.meals, key=lambda m: DAYS.index(m["day"]) if m.get("day") in DAYS else len(DAYS))
        if self.filter_day == ALL_DAYS:
            return ordered
        return [m for m in ordered if m.get("day") == self.filter_day]

    @property
    def field_hints(self) -> Dict[str, str]:
        """Inline hints for meal inputs that currently hold a bare number."""
        return {
            name: "Cannot be purely numeric"
            for name in MEAL_FIELDS
            if is_purely_numeric(self.form.get(name))
        }

    @property
    def can_clear_week(self) -> bool:
        return bool(self.meals) and not self.loading


class PlannerController:
    """Applies user actions to a `PlannerState`.

    Args:
        api: Client used for every request.
        state: Initial state; a fresh one is created when omitted.
        on_change: Called with the state after every action.
    """

    def __init__(
        self,
        api: MealPlannerClient,
        state: Optional[PlannerState] = None,
        on_change: Optional[Callable[[PlannerState], None]] = None,
    ):
        self.api = api
        self.state = state or PlannerState()
        self.on_change = on_change

    def _emit(self) -> None:
        if self.on_change is not None:
            self.on_change(self.state)

    def _reset_form(self) -> None:
        self.state.form = empty_form()
        self.state.editing_id = None

    def _reload(self) -> None:
        try:
            self.state.meals = self.api.fetch_meals()
            self.state.error = ""
        except ApiError as exc:
            self.state.error = exc.message

    def load(self) -> None:
        """Fetch the list from the API."""
        self.state.loading = True
        self._emit()
        self._reload()
        self.state.loading = False
        self._emit()

    def change_field(self, name: str, value: str) -> None:
        """Update one form input; typing into an idle form starts composing."""
        if name not in FORM_FIELDS:
            raise ValueError(f"Unknown form field: {name}")
        if self.state.mode == Mode.CONFIRMING:
            return
        if name == "day" and self.state.mode == Mode.EDITING:
            return
        self.state.form[name] = value
        if self.state.mode == Mode.BROWSING:
            self.state.mode = Mode.COMPOSING
        self.state.error = ""
        self._emit()

    def submit(self) -> bool:
        """Create or update from the form.

        Returns:
            True when the record was saved and the list reloaded.
        """
        if self.state.mode == Mode.CONFIRMING:
            return False

        problems = missing_required_fields(self.state.form) + validate_meal_fields(self.state.form)
        if problems:
            self.state.error = " ".join(problems)
            self._emit()
            return False

        payload = {name: self.state.form[name] for name in FORM_FIELDS}
        self.state.loading = True
        self.state.error = ""
        self._emit()
        try:
            if self.state.mode == Mode.EDITING:
                payload.pop("day")
                self.api.update_meal(self.state.editing_id, payload)
            else:
                self.api.create_meal(payload)
        except ApiError as exc:
            logger.info("Save rejected: %s", exc.message)
            self.state.error = exc.message
            return False
        else:
            self._reload()
            self._reset_form()
            self.state.mode = Mode.BROWSING
            return True
        finally:
            self.state.loading = False
            self._emit()

    def start_edit(self, meal: Dict[str, Any]) -> None:
        """Load ``meal`` into the form with its day locked."""
        if self.state.mode == Mode.CONFIRMING:
            return
        if not meal.get("id"):
            self.state.error = "Cannot edit: Meal ID is missing"
            self._emit()
            return
        self.state.form = {name: meal.get(name) or "" for name in FORM_FIELDS}
        self.state.editing_id = meal["id"]
        self.state.mode = Mode.EDITING
        self._emit()

    def cancel(self) -> None:
        """Abandon the form, or the pending confirmation when one is open."""
        if self.state.mode == Mode.CONFIRMING:
            self.dismiss_confirm()
            return
        self._reset_form()
        self.state.error = ""
        self.state.mode = Mode.BROWSING
        self._emit()

    def request_delete(self, meal: Dict[str, Any]) -> None:
        if self.state.mode == Mode.CONFIRMING:
            return
        self.state.confirm = ConfirmDialog(
            title="Delete Meal Plan",
            message=(
                f"Are you sure you want to delete the meal plan for {meal.get('day')}? "
                "This action cannot be undone."
            ),
            action=PendingAction.DELETE_MEAL,
            meal_id=meal.get("id"),
            return_mode=self.state.mode,
        )
        self.state.mode = Mode.CONFIRMING
        self._emit()

    def request_clear_week(self) -> None:
        if self.state.mode == Mode.CONFIRMING:
            return
        self.state.confirm = ConfirmDialog(
            title="Clear Entire Week",
            message=(
                "Are you sure you want to clear the entire week? This will delete all meal plans. "
                "This action cannot be undone."
            ),
            action=PendingAction.CLEAR_WEEK,
            return_mode=self.state.mode,
        )
        self.state.mode = Mode.CONFIRMING
        self._emit()

    def confirm(self) -> bool:
        """Run the pending destructive action ("yes").

        The dialog closes whether or not the request succeeded. The form is
        reset and the controller returns to browsing when the action removed
        the record being edited (or the whole week); otherwise, and on any
        failure, the mode the dialog was opened from is restored with the
        form untouched.

        Returns:
            True when the action succeeded.
        """
        dialog = self.state.confirm
        if dialog is None:
            return False

        self.state.loading = True
        self.state.error = ""
        self._emit()
        try:
            if dialog.action == PendingAction.DELETE_MEAL:
                self.api.delete_meal(dialog.meal_id)
            else:
                self.api.clear_week()
        except ApiError as exc:
            logger.info("%s failed: %s", dialog.action.value, exc.message)
            self.state.error = exc.message
            self.state.mode = dialog.return_mode
            return False
        else:
            self._reload()
            if self._removes_form_target(dialog):
                self._reset_form()
                self.state.mode = Mode.BROWSING
            else:
                self.state.mode = dialog.return_mode
            return True
        finally:
            self.state.loading = False
            self.state.confirm = None
            self._emit()

    def _removes_form_target(self, dialog: ConfirmDialog) -> bool:
        if dialog.return_mode == Mode.BROWSING:
            return True
        if dialog.action == PendingAction.CLEAR_WEEK:
            return dialog.return_mode == Mode.EDITING
        return self.state.editing_id is not None and self.state.editing_id == dialog.meal_id

    def dismiss_confirm(self) -> None:
        """Close the dialog without acting ("no")."""
        dialog = self.state.confirm
        if dialog is None:
            return
        self.state.confirm = None
        self.state.mode = dialog.return_mode
        self._emit()

    def set_filter(self, day: str) -> None:
        if day != ALL_DAYS and day not in DAYS:
            raise ValueError(f"Unknown day filter: {day}")
        self.state.filter_day = day
        self._emit()

    def dismiss_error(self) -> None:
        self.state.error = ""
        self._emit()
