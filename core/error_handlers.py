"""Error handlers for FastAPI application.

Provides consistent error response formatting and exception handling
across all API endpoints. Every failure is rendered as
``{"error": <message>, "status_code": <int>}`` plus optional ``details``,
so clients can show ``error`` verbatim.
"""

from fastapi import Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException
from core.exceptions import AppException
from core.logger import get_logger

logger = get_logger("core.error_handlers")


def create_error_response(
    message: str,
    status_code: int = 500,
    details: dict = None,
) -> JSONResponse:
    """Create a standardized error response.

    Args:
        message: Error message.
        status_code: HTTP status code.
        details: Optional error details dictionary.

    Returns:
        JSONResponse with error details.
    """
    error_body = {
        "error": message,
        "status_code": status_code,
    }

    if details:
        error_body["details"] = details

    return JSONResponse(
        status_code=status_code,
        content=error_body
    )


async def app_exception_handler(request: Request, exc: AppException) -> JSONResponse:
    """Handle custom application exceptions.

    Args:
        request: FastAPI request object.
        exc: Application exception instance.

    Returns:
        JSONResponse with error details.
    """
    logger.warning(
        "Application error: %s [%s %s]",
        exc.message,
        request.method,
        request.url.path
    )

    return create_error_response(
        message=exc.message,
        status_code=exc.status_code,
        details=exc.details
    )


def _field_name(loc) -> str:
    parts = [str(p) for p in loc if p != "body"]
    return ".".join(parts) or "body"


async def validation_exception_handler(
    request: Request,
    exc: RequestValidationError
) -> JSONResponse:
    """Handle Pydantic validation errors as 400 Bad Request.

    The message lists each failing field the way the store reports schema
    violations, e.g. ``Meal validation failed: lunch: lunch cannot be
    purely numeric. ...``.
    """
    errors = []
    for error in exc.errors():
        errors.append({
            "field": _field_name(error["loc"]),
            "message": error["msg"],
            "type": error["type"]
        })

    logger.warning(
        "Validation error on %s %s: %s",
        request.method,
        request.url.path,
        errors
    )

    summary = ", ".join(f"{e['field']}: {e['message']}" for e in errors)
    return create_error_response(
        message=f"Meal validation failed: {summary}",
        status_code=status.HTTP_400_BAD_REQUEST,
        details={"validation_errors": errors}
    )


async def http_exception_handler(
    request: Request,
    exc: StarletteHTTPException
) -> JSONResponse:
    """Render routing errors (unknown path, wrong method) in the same envelope."""
    logger.warning(
        "HTTP %s on %s %s: %s",
        exc.status_code,
        request.method,
        request.url.path,
        exc.detail
    )
    return create_error_response(message=str(exc.detail), status_code=exc.status_code)


async def internal_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """Turn store failures and unexpected exceptions into an opaque 500.

    The traceback goes to the log only; clients learn the failure kind.
    """
    kind = "database_error" if isinstance(exc, SQLAlchemyError) else "internal_error"
    logger.error(
        "%s on %s %s: %s",
        kind,
        request.method,
        request.url.path,
        exc,
        exc_info=exc
    )
    message = "A database error occurred" if kind == "database_error" else "An internal server error occurred"
    return create_error_response(
        message=message,
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        details={"type": kind}
    )


def register_exception_handlers(app):
    """Register all exception handlers with the FastAPI app.

    Args:
        app: FastAPI application instance.
    """
    app.add_exception_handler(AppException, app_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(SQLAlchemyError, internal_error_handler)
    app.add_exception_handler(Exception, internal_error_handler)

    logger.info("Exception handlers registered")
