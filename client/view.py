"""Plain-text rendering of a `PlannerState`."""

from typing import List

from client.state import ALL_DAYS, DAYS, Mode, PlannerState

_LABELS = {
    "day": "Day of the Week",
    "breakfast": "Breakfast",
    "lunch": "Lunch",
    "dinner": "Dinner",
    "snacks": "Snacks",
    "notes": "Notes (Optional)",
}


def render_banner(state: PlannerState) -> List[str]:
    return [f"! {state.error}  (type 'dismiss' to hide)"] if state.error else []


def render_form(state: PlannerState) -> List[str]:
    title = "Edit Meal Plan" if state.mode == Mode.EDITING else "Add New Meal Plan"
    hints = state.field_hints
    lines = [f"== {title} =="]
    for name, label in _LABELS.items():
        value = state.form.get(name) or ""
        suffix = ""
        if name == "day" and state.mode == Mode.EDITING:
            suffix = "  (locked)"
        elif name in hints:
            suffix = f"  <- {hints[name]}"
        lines.append(f"  {label:<18} {value}{suffix}")
    return lines


def render_filter(state: PlannerState) -> List[str]:
    options = [ALL_DAYS] + [d[:3] for d in DAYS]
    current = ALL_DAYS if state.filter_day == ALL_DAYS else state.filter_day[:3]
    return ["Filter: " + " ".join(f"[{o}]" if o == current else o for o in options)]


def render_meals(state: PlannerState) -> List[str]:
    if state.loading:
        return ["Loading meals..."]
    meals = state.visible_meals
    if not meals:
        if state.filter_day == ALL_DAYS:
            return ["No meals added yet. Start planning your week by adding your first meal!"]
        return [f"No meal plan found for {state.filter_day}. Add one using the form above!"]

    lines = []
    for meal in meals:
        lines.append(f"-- {meal['day']} (id {meal.get('id')}) --")
        lines.append(f"  Breakfast: {meal.get('breakfast')}")
        lines.append(f"  Lunch:     {meal.get('lunch')}")
        lines.append(f"  Dinner:    {meal.get('dinner')}")
        lines.append(f"  Snacks:    {meal.get('snacks') or 'Not specified'}")
        if meal.get("notes"):
            lines.append(f"  Notes:     {meal['notes']}")
    return lines


def render_dialog(state: PlannerState) -> List[str]:
    if state.confirm is None:
        return []
    return [
        f"*** {state.confirm.title} ***",
        state.confirm.message,
        "Type 'yes' to confirm or 'no' to cancel.",
    ]


def render(state: PlannerState) -> str:
    """Whole screen: banner, form, filter, list and any open dialog."""
    sections = [
        ["Weekly Meal Planner", "Plan your meals for the entire week"],
        render_banner(state),
        render_form(state),
        render_filter(state),
        render_meals(state),
    ]
    if state.can_clear_week:
        sections.append(["(type 'clear' to clear the entire week)"])
    sections.append(render_dialog(state))
    return "\n\n".join("\n".join(s) for s in sections if s)
