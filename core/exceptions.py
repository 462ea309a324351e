"""Custom exception classes for the application.

Defines domain-specific exceptions that can be raised by the record store
and the API layer and handled consistently by the exception handlers.
"""

from typing import Optional, Any, Dict


class AppException(Exception):
    """Base exception class for all application exceptions.

    Attributes:
        message: Human-readable error message.
        status_code: HTTP status code to return.
        details: Optional additional error details.
    """

    def __init__(
        self,
        message: str,
        status_code: int = 500,
        details: Optional[Dict[str, Any]] = None
    ):
        """Initialize application exception.

        Args:
            message: Error message.
            status_code: HTTP status code (default: 500).
            details: Optional dictionary with additional error context.
        """
        self.message = message
        self.status_code = status_code
        self.details = details or {}
        super().__init__(self.message)


class NotFoundError(AppException):
    """Exception raised when a requested resource is not found."""

    def __init__(self, message: str, **details: Any):
        """Initialize not found error.

        Args:
            message: Error message shown to the caller.
            details: Lookup keys that matched nothing (e.g. ``id``, ``day``).
        """
        super().__init__(message, status_code=404, details=details)


class ValidationError(AppException):
    """Exception raised when input validation fails."""

    def __init__(self, message: str, field: Optional[str] = None):
        """Initialize validation error.

        Args:
            message: Validation error message.
            field: Optional field name that failed validation.
        """
        details = {"field": field} if field else {}
        super().__init__(message, status_code=400, details=details)


class DuplicateKeyError(AppException):
    """Exception raised when a meal plan already exists for a weekday."""

    def __init__(self, day: str):
        self.day = day
        super().__init__(
            f"Meal plan for {day} already exists",
            status_code=400,
            details={"day": day},
        )


class InvalidIdentifierError(AppException):
    """Exception raised when a record identifier is not a well-formed store key."""

    def __init__(self, identifier: Any):
        super().__init__(
            "Invalid meal ID format",
            status_code=400,
            details={"id": str(identifier)},
        )


class DatabaseError(AppException):
    """Exception raised when database operations fail."""

    def __init__(self, message: str, operation: Optional[str] = None):
        """Initialize database error.

        Args:
            message: Database error message.
            operation: Optional operation that failed (e.g., 'create', 'update').
        """
        details = {"operation": operation} if operation else {}
        super().__init__(message, status_code=500, details=details)
