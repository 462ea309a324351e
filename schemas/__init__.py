"""Pydantic schema package for request and response models."""

from .meal_schema import (
    DAY_ORDER,
    MealPlanCreate,
    MealPlanResponse,
    MealPlanUpdate,
    SuccessResponse,
    Weekday,
    day_index,
)

__all__ = [
    "DAY_ORDER",
    "MealPlanCreate",
    "MealPlanResponse",
    "MealPlanUpdate",
    "SuccessResponse",
    "Weekday",
    "day_index",
]
