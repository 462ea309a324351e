"""Field rules enforced by the record store.

A meal slot holding only a number ("123", "2,000") is treated as a
mis-entry such as a calorie count rather than a meal description.
"""

import re
from typing import Any

MEAL_FIELDS = ("breakfast", "lunch", "dinner", "snacks")
WEEKDAYS = ("Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday")

# Any character outside this class makes the text "not purely numeric".
_NON_NUMERIC = re.compile(r"[^0-9\s,.\-]")


def is_purely_numeric(value: Any) -> bool:
    """Return True when trimmed text is non-empty and only digits, spaces, commas, dots or hyphens."""
    if not isinstance(value, str):
        return False
    trimmed = value.strip()
    return len(trimmed) > 0 and _NON_NUMERIC.search(trimmed) is None


def purely_numeric_message(field: str) -> str:
    return f"{field} cannot be purely numeric. Please include text with your meal description."
