"""Schemas for meal plan requests and responses."""

from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator
from pydantic_core import PydanticCustomError

from core.validators import is_purely_numeric, purely_numeric_message


class Weekday(str, Enum):
    """Weekday names in display order, Monday first."""

    MONDAY = "Monday"
    TUESDAY = "Tuesday"
    WEDNESDAY = "Wednesday"
    THURSDAY = "Thursday"
    FRIDAY = "Friday"
    SATURDAY = "Saturday"
    SUNDAY = "Sunday"


DAY_ORDER: List[str] = [d.value for d in Weekday]


def day_index(day: str) -> int:
    """Position of ``day`` in the Monday..Sunday order; unknown names sort last."""
    return DAY_ORDER.index(day) if day in DAY_ORDER else len(DAY_ORDER)


def _check_meal(value: Optional[str], info: ValidationInfo) -> Optional[str]:
    if is_purely_numeric(value):
        raise PydanticCustomError(
            "purely_numeric",
            purely_numeric_message(info.field_name),
        )
    return value


class MealPlanCreate(BaseModel):
    """Request payload for creating the plan of one weekday."""

    model_config = ConfigDict(extra="ignore")

    day: Weekday = Field(..., examples=["Monday"])
    breakfast: str = Field(..., min_length=1, examples=["Oatmeal with fruits"])
    lunch: str = Field(..., min_length=1, examples=["Grilled chicken salad"])
    dinner: str = Field(..., min_length=1, examples=["Salmon with vegetables"])
    snacks: str = Field(..., min_length=1, examples=["Apple, nuts"])
    notes: Optional[str] = Field(default=None, examples=["Prep lunch the night before"])

    @field_validator("breakfast", "lunch", "dinner", "snacks")
    @classmethod
    def meals_not_purely_numeric(cls, v, info: ValidationInfo):
        return _check_meal(v, info)


class MealPlanUpdate(BaseModel):
    """Partial update payload; only supplied fields are replaced."""

    model_config = ConfigDict(extra="ignore")

    day: Optional[Weekday] = None
    breakfast: Optional[str] = Field(default=None, min_length=1)
    lunch: Optional[str] = Field(default=None, min_length=1)
    dinner: Optional[str] = Field(default=None, min_length=1)
    snacks: Optional[str] = Field(default=None, min_length=1)
    notes: Optional[str] = None

    @field_validator("breakfast", "lunch", "dinner", "snacks")
    @classmethod
    def meals_not_purely_numeric(cls, v, info: ValidationInfo):
        return _check_meal(v, info)

    @field_validator("day", "breakfast", "lunch", "dinner", "snacks", mode="before")
    @classmethod
    def reject_null(cls, v, info: ValidationInfo):
        """Required columns may be omitted from an update but never cleared."""
        if v is None:
            raise PydanticCustomError("missing", "{field} is required", {"field": info.field_name})
        return v


class MealPlanResponse(BaseModel):
    """Representation of a stored meal plan in responses."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    day: Weekday
    breakfast: str
    lunch: str
    dinner: str
    snacks: str
    notes: Optional[str] = None


class SuccessResponse(BaseModel):
    """Marker returned by delete endpoints."""

    success: bool = True
