"""Domain errors and their HTTP translation.

Services raise these; the handlers registered here turn them into the
``{"message": ..., "field": ...}`` body the API speaks.
"""

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from app.core.logging import get_logger

logger = get_logger(__name__)


class AppError(Exception):
    """Base class for errors that map onto an HTTP response."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message: str = "Internal server error"

    def __init__(self, message: str | None = None, *, field: str | None = None) -> None:
        self.message = message or self.default_message
        self.field = field
        super().__init__(self.message)


class InvalidInputError(AppError):
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Invalid input"


class AuthenticationError(AppError):
    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = "Unauthorized"


class ForbiddenError(AppError):
    status_code = status.HTTP_403_FORBIDDEN
    default_message = "Forbidden"


class NotFoundError(AppError):
    status_code = status.HTTP_404_NOT_FOUND
    default_message = "Not found"


class GenerationError(AppError):
    """The external generation call failed before anything was persisted."""

    default_message = "Failed to generate roadmap"


class StorageError(AppError):
    default_message = "Storage failure"


def _error_body(message: str, field: str | None = None) -> dict:
    return {"message": message, "field": field}


async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error("Request failed", path=request.url.path, error=exc.message)
    return JSONResponse(status_code=exc.status_code, content=_error_body(exc.message, exc.field))


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Report request-shape failures as 400 with the first offending field."""
    errors = exc.errors()
    if not errors:
        return JSONResponse(status_code=400, content=_error_body("Invalid input"))

    first = errors[0]
    # Skip the "body"/"path" location prefix
    field = ".".join(str(loc) for loc in first.get("loc", ())[1:]) or None
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=_error_body(first.get("msg", "Invalid input"), field),
    )


async def storage_error_handler(request: Request, exc: SQLAlchemyError) -> JSONResponse:
    """Storage faults not already translated by a service."""
    logger.error("Storage failure", path=request.url.path, error=str(exc), exc_info=exc)
    return JSONResponse(
        status_code=StorageError.status_code,
        content=_error_body(StorageError.default_message),
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(AppError, app_error_handler)  # type: ignore[arg-type]
    app.add_exception_handler(RequestValidationError, validation_error_handler)  # type: ignore[arg-type]
    app.add_exception_handler(SQLAlchemyError, storage_error_handler)  # type: ignore[arg-type]
