"""Repository pattern classes for database operations.

`BaseRepository` holds the generic CRUD plumbing; `MealPlanRepository`
adds the meal plan store semantics: day lookups, identifier parsing and
translation of constraint violations into application exceptions.
"""

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
from typing import TypeVar, Generic, Type, Optional, List, Any, Dict

from core.exceptions import DatabaseError, DuplicateKeyError, InvalidIdentifierError, NotFoundError, ValidationError
from core.logger import get_logger
from core.validators import MEAL_FIELDS
from database.models import Base, MealPlan

T = TypeVar('T', bound=Base)

logger = get_logger("core.repository")

# Largest value a signed 64-bit integer primary key can hold.
MAX_IDENTIFIER = 2 ** 63 - 1


class BaseRepository(Generic[T]):
    """Generic repository for common database operations.

    Attributes:
        model: SQLAlchemy model class to operate on.
        session: Database session for executing queries.
    """

    def __init__(self, model: Type[T], session: Session):
        """Initialize repository with model and session.

        Args:
            model: SQLAlchemy model class.
            session: Database session.
        """
        self.model = model
        self.session = session

    def create(self, obj: T) -> T:
        """Add, commit and refresh a new object.

        Args:
            obj: Model instance to persist.

        Returns:
            The persisted object with refreshed attributes.
        """
        self.session.add(obj)
        self.session.commit()
        self.session.refresh(obj)
        return obj

    def get_by_id(self, id: Any) -> Optional[T]:
        """Retrieve an object by its primary key.

        Returns:
            Model instance or None if not found.
        """
        return self.session.get(self.model, id)

    def get_all(self) -> List[T]:
        """Retrieve all objects in store order."""
        return self.session.query(self.model).all()

    def update(self, obj: T) -> T:
        """Commit changes to an existing object and refresh."""
        self.session.commit()
        self.session.refresh(obj)
        return obj

    def delete(self, obj: T) -> None:
        """Delete an object and commit."""
        self.session.delete(obj)
        self.session.commit()

    def delete_all(self) -> int:
        """Delete every row of the model's table.

        Returns:
            Number of rows removed.
        """
        removed = self.session.query(self.model).delete()
        self.session.commit()
        return removed

    def count(self) -> int:
        """Count total number of records."""
        return self.session.query(self.model).count()


def parse_identifier(identifier: Any) -> int:
    """Convert a path identifier into a primary key value.

    Only unsigned decimal strings (or ints) in ``1 .. 2**63 - 1`` are
    well-formed keys.

    Raises:
        InvalidIdentifierError: If the identifier is malformed.
    """
    if isinstance(identifier, bool):
        raise InvalidIdentifierError(identifier)
    if isinstance(identifier, int):
        value = identifier
    elif isinstance(identifier, str) and identifier.isascii() and identifier.isdigit():
        value = int(identifier)
    else:
        raise InvalidIdentifierError(identifier)
    if not 1 <= value <= MAX_IDENTIFIER:
        raise InvalidIdentifierError(identifier)
    return value


class MealPlanRepository(BaseRepository[MealPlan]):
    """Record store for weekday meal plans."""

    def __init__(self, session: Session):
        super().__init__(MealPlan, session)

    def create_plan(self, values: Dict[str, Any]) -> MealPlan:
        """Insert a new plan.

        Raises:
            ValidationError: If a required field is missing or invalid.
            DuplicateKeyError: If a plan for ``values["day"]`` already exists.
        """
        for name in ("day",) + MEAL_FIELDS:
            if name not in values:
                raise ValidationError(f"{name} is required", field=name)
        plan = MealPlan(**values)
        try:
            return self.create(plan)
        except IntegrityError as exc:
            self.session.rollback()
            raise self._constraint_error(values.get("day"), "create") from exc

    def get_by_day(self, day: str) -> MealPlan:
        """Return the plan for ``day``.

        Raises:
            NotFoundError: If no plan exists for that day.
        """
        plan = self.session.query(MealPlan).filter(MealPlan.day == day).first()
        if plan is None:
            raise NotFoundError("Meal not found for this day", day=day)
        return plan

    def get_plan(self, identifier: Any) -> MealPlan:
        """Return the plan with the given identifier.

        Raises:
            InvalidIdentifierError: If the identifier is malformed.
            NotFoundError: If no plan has that identifier.
        """
        key = parse_identifier(identifier)
        plan = self.get_by_id(key)
        if plan is None:
            raise NotFoundError("Meal not found", id=key)
        return plan

    def update_plan(self, identifier: Any, fields: Dict[str, Any]) -> MealPlan:
        """Replace the supplied fields of an existing plan.

        Raises:
            InvalidIdentifierError: If the identifier is malformed.
            NotFoundError: If no plan has that identifier.
            ValidationError: If a supplied value breaks a field rule.
            DuplicateKeyError: If ``day`` moves onto an occupied weekday.
        """
        plan = self.get_plan(identifier)
        try:
            for name, value in fields.items():
                setattr(plan, name, value)
            return self.update(plan)
        except IntegrityError as exc:
            self.session.rollback()
            raise self._constraint_error(fields.get("day"), "update") from exc
        except Exception:
            self.session.rollback()
            raise

    def delete_plan(self, identifier: Any) -> None:
        """Remove one plan.

        Raises:
            InvalidIdentifierError: If the identifier is malformed.
            NotFoundError: If no plan has that identifier.
        """
        self.delete(self.get_plan(identifier))

    def _constraint_error(self, day: Optional[str], operation: str) -> Exception:
        # The unique index on `day` is the only constraint a validated body can hit.
        if day is not None and self.session.query(MealPlan.id).filter(MealPlan.day == day).first():
            logger.info("Duplicate %s rejected for %s", operation, day)
            return DuplicateKeyError(day)
        return DatabaseError("Meal plan violates a store constraint", operation=operation)
