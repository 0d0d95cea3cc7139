"""Failure kinds and their translation into HTTP error responses.

Business failures are returned by the service as values, never raised. The
router passes them to ``failure_response``; validation violations go through
``validation_error_response``. Framework-raised errors (malformed bodies,
unknown routes) and unexpected exceptions reach the handlers registered by
``register_exception_handlers``. All of them render the same body::

    {"timestamp": ..., "status": 400, "error": "...", "message": "...", "errors": {...}}

where ``errors`` is present only for validation failures.
"""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from http import HTTPStatus
from typing import Any

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from src.models.mixins import local_now
from src.schemas.error import ErrorResponse

logger = logging.getLogger(__name__)

VALIDATION_ERROR = "Validation Failed"
VALIDATION_MESSAGE = "Invalid data provided"
INTERNAL_ERROR_MESSAGE = "Internal server error"


class ViolationKind(str, Enum):
    """Kinds of field-level validation failures."""

    REQUIRED = "FieldRequired"
    FORMAT = "FieldFormat"
    LENGTH = "FieldLength"


@dataclass(frozen=True)
class FieldViolation:
    """A single validation failure tied to one input field."""

    field: str
    kind: ViolationKind
    message: str


class ServiceFailure(ABC):
    """Base for failures returned by service operations."""

    status_code: int = status.HTTP_400_BAD_REQUEST

    @property
    @abstractmethod
    def message(self) -> str:
        """Human-readable description for the error body."""


@dataclass(frozen=True)
class NotFound(ServiceFailure):
    """No user exists with the requested id."""

    user_id: int
    status_code = status.HTTP_404_NOT_FOUND

    @property
    def message(self) -> str:
        return f"User not found with id: {self.user_id}"


@dataclass(frozen=True)
class DuplicateEmail(ServiceFailure):
    """The email already belongs to a different user."""

    email: str
    status_code = status.HTTP_400_BAD_REQUEST

    @property
    def message(self) -> str:
        return f"Email already in use: {self.email}"


def error_body(
    status_code: int,
    error: str,
    message: str,
    errors: dict[str, str] | None = None,
) -> dict[str, Any]:
    """Build the JSON-ready error body."""
    body = ErrorResponse(
        timestamp=local_now(),
        status=status_code,
        error=error,
        message=message,
        errors=errors,
    )
    return body.model_dump(mode="json", exclude_none=True)


def error_response(
    status_code: int,
    message: str,
    error: str | None = None,
    errors: dict[str, str] | None = None,
) -> JSONResponse:
    """Render an error body with its HTTP status."""
    if error is None:
        error = HTTPStatus(status_code).phrase
    return JSONResponse(
        status_code=status_code,
        content=error_body(status_code, error, message, errors),
    )


def violations_to_errors(violations: list[FieldViolation]) -> dict[str, str]:
    """Map each field to the message of its first violation."""
    errors: dict[str, str] = {}
    for violation in violations:
        errors.setdefault(violation.field, violation.message)
    return errors


def validation_error_response(violations: list[FieldViolation]) -> JSONResponse:
    """400 response listing every invalid field."""
    return error_response(
        status.HTTP_400_BAD_REQUEST,
        VALIDATION_MESSAGE,
        error=VALIDATION_ERROR,
        errors=violations_to_errors(violations),
    )


def failure_response(failure: ServiceFailure) -> JSONResponse:
    """Translate a service failure into its HTTP response."""
    match failure:
        case NotFound():
            logger.info(failure.message)
        case DuplicateEmail():
            logger.warning(failure.message)
    return error_response(failure.status_code, failure.message)


def unhandled_error_response() -> JSONResponse:
    """500 response that never carries internal detail."""
    return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, INTERNAL_ERROR_MESSAGE)


def _field_name(loc: tuple[Any, ...]) -> str:
    """Turn a pydantic error location like ("body", "age") into a field name."""
    parts = [str(part) for part in loc]
    if len(parts) > 1 and parts[0] in {"body", "query", "path", "header"}:
        parts = parts[1:]
    return ".".join(parts) if parts else "body"


async def request_validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Malformed JSON or wrongly typed values, rejected before the router runs."""
    errors: dict[str, str] = {}
    for err in exc.errors():
        errors.setdefault(_field_name(tuple(err.get("loc", ()))), err.get("msg", "Invalid value"))
    logger.warning(f"Request validation failed for {request.method} {request.url.path}: {errors}")
    return error_response(
        status.HTTP_400_BAD_REQUEST,
        VALIDATION_MESSAGE,
        error=VALIDATION_ERROR,
        errors=errors,
    )


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Framework HTTP errors (unknown route, wrong method) in the common shape."""
    message = exc.detail if isinstance(exc.detail, str) else HTTPStatus(exc.status_code).phrase
    response = error_response(exc.status_code, message)
    if exc.headers:
        response.headers.update(exc.headers)
    return response


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Log the real cause and answer with a generic 500."""
    logger.exception(f"Unexpected error on {request.method} {request.url.path}: {exc}")
    return unhandled_error_response()


def register_exception_handlers(app: FastAPI) -> None:
    """Attach the error handlers to the application."""
    app.add_exception_handler(RequestValidationError, request_validation_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
