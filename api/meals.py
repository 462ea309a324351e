"""Meals API router.

Thin translation layer between HTTP and the meal plan store. Every route
maps store outcomes onto status codes through the application exceptions
raised by `MealPlanRepository`; the registered exception handlers render
them as `{"error": ...}` bodies.
"""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from typing import List

from core.exceptions import ValidationError
from core.logger import get_logger
from core.repository import MealPlanRepository
from database.deps import get_db_read, get_db_write
from schemas import (
    DAY_ORDER,
    MealPlanCreate,
    MealPlanResponse,
    MealPlanUpdate,
    SuccessResponse,
    day_index,
)

logger = get_logger("api.meals")
router = APIRouter(prefix="/api", tags=["meals"])


@router.post("/meals", response_model=MealPlanResponse, status_code=201)
def create_meal(payload: MealPlanCreate, db: Session = Depends(get_db_write)):
    """Create the plan for one weekday.

    Args:
        payload: Validated `MealPlanCreate` body.
        db: Write session injected by dependency.

    Returns:
        The stored plan including its generated id.

    Raises:
        DuplicateKeyError: If the weekday already has a plan.
    """
    plan = MealPlanRepository(db).create_plan(payload.model_dump(mode="json"))
    logger.info("Created meal plan id=%s for %s", plan.id, plan.day)
    return plan


@router.get("/meals", response_model=List[MealPlanResponse])
def list_meals(db: Session = Depends(get_db_read)):
    """Return every plan ordered Monday to Sunday, whatever the store order."""
    plans = MealPlanRepository(db).get_all()
    return sorted(plans, key=lambda p: day_index(p.day))


# Declared before the `/meals/{meal_id}` routes so the literal segment wins.
@router.get("/meals/day/{day}", response_model=MealPlanResponse)
def get_meal_for_day(day: str, db: Session = Depends(get_db_read)):
    """Return the plan for a weekday name.

    Raises:
        ValidationError: If ``day`` is not a weekday name.
        NotFoundError: If the weekday has no plan.
    """
    if day not in DAY_ORDER:
        raise ValidationError("Invalid day name", field="day")
    return MealPlanRepository(db).get_by_day(day)


@router.put("/meals/{meal_id}", response_model=MealPlanResponse)
def update_meal(meal_id: str, payload: MealPlanUpdate, db: Session = Depends(get_db_write)):
    """Replace the supplied fields of a stored plan.

    Raises:
        InvalidIdentifierError: If ``meal_id`` is malformed.
        NotFoundError: If no plan has that id.
        DuplicateKeyError: If ``day`` changes to a weekday that already has a plan.
    """
    fields = payload.model_dump(mode="json", exclude_unset=True)
    logger.info("Updating meal plan id=%s fields=%s", meal_id, sorted(fields))
    plan = MealPlanRepository(db).update_plan(meal_id, fields)
    logger.info("Meal plan id=%s updated", plan.id)
    return plan


@router.delete("/meals/{meal_id}", response_model=SuccessResponse)
def delete_meal(meal_id: str, db: Session = Depends(get_db_write)):
    """Delete one plan.

    Raises:
        InvalidIdentifierError: If ``meal_id`` is malformed.
        NotFoundError: If no plan has that id.
    """
    MealPlanRepository(db).delete_plan(meal_id)
    logger.info("Deleted meal plan id=%s", meal_id)
    return SuccessResponse()


@router.delete("/meals", response_model=SuccessResponse)
def clear_week(db: Session = Depends(get_db_write)):
    """Delete every plan. Succeeds on an empty store too."""
    removed = MealPlanRepository(db).delete_all()
    logger.info("Cleared week (%s plans removed)", removed)
    return SuccessResponse()
