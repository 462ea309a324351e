"""Pre-submit checks run by the client before calling the API.

The purely-numeric predicate here is deliberately independent of the
server's copy; both follow the same contract so that the form rejects
exactly what the store would reject.
"""

import re
from typing import List, Mapping

MEAL_FIELDS = ("breakfast", "lunch", "dinner", "snacks")
REQUIRED_FIELDS = ("day",) + MEAL_FIELDS

_NUMERIC_ONLY = re.compile(r"[0-9\s,.\-]+")


def is_purely_numeric(value) -> bool:
    """True when the trimmed value is non-empty and holds only digits, spaces, commas, dots or hyphens."""
    if not value or not isinstance(value, str):
        return False
    trimmed = value.strip()
    return bool(trimmed) and _NUMERIC_ONLY.fullmatch(trimmed) is not None


def missing_required_fields(form: Mapping[str, str]) -> List[str]:
    """Messages for required form fields left empty."""
    return [
        f"{name.capitalize()} is required."
        for name in REQUIRED_FIELDS
        if not form.get(name)
    ]


def validate_meal_fields(form: Mapping[str, str]) -> List[str]:
    """Messages for meal fields that are purely numeric, in form order."""
    return [
        f"{name.capitalize()} cannot be purely numeric. Please include text with your meal description."
        for name in MEAL_FIELDS
        if is_purely_numeric(form.get(name))
    ]
