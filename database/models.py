"""SQLAlchemy ORM models for the meal planner.

A single `MealPlan` table holds at most one row per weekday. The unique
constraint on `day` is the only guard against two plans for the same day.
Every assignment is checked: `day` must be a weekday name and the meal
slots must be non-empty and not purely numeric, so no write path can store
a row the API would reject.
"""

from sqlalchemy import Column, Integer, String, Text
from sqlalchemy.orm import declarative_base, validates

from core.exceptions import ValidationError
from core.validators import MEAL_FIELDS, WEEKDAYS, is_purely_numeric, purely_numeric_message

Base = declarative_base()


class MealPlan(Base):
    """ORM model holding the meals planned for one weekday."""

    __tablename__ = "meal_plans"
    id = Column(Integer, primary_key=True, index=True)
    day = Column(String(9), nullable=False, unique=True)
    breakfast = Column(Text, nullable=False)
    lunch = Column(Text, nullable=False)
    dinner = Column(Text, nullable=False)
    snacks = Column(Text, nullable=False)
    notes = Column(Text, nullable=True)

    @validates("day")
    def _validate_day(self, key, value):
        if value not in WEEKDAYS:
            raise ValidationError(f"`{value}` is not a valid weekday", field=key)
        return value

    @validates(*MEAL_FIELDS)
    def _validate_meal(self, key, value):
        if not isinstance(value, str) or not value:
            raise ValidationError(f"{key} is required", field=key)
        if is_purely_numeric(value):
            raise ValidationError(purely_numeric_message(key), field=key)
        return value

    def __repr__(self) -> str:
        return f"<MealPlan id={self.id} day={self.day}>"
