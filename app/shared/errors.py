"""
Standardized errors for the journaling service.

Two halves live here:

- Domain exceptions raised by services and repositories
  (``NotFoundError``, ``StorageError``, ``AuthenticationError``,
  ``InvalidRequestError``).
- Response helpers that render every error in one JSON shape, with the
  request correlation ID attached for debugging.

Usage:
    from app.shared.errors import NotFoundError, register_exception_handlers

    # In a service:
    raise NotFoundError("entry", entry_id)

    # In main.py:
    register_exception_handlers(app)

Error body:
    {"error": {"code": "NOT_FOUND", "message": "Entry not found", "correlation_id": "ab12cd34"}}
"""

import logging
from enum import Enum
from typing import Any, Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import BaseModel

logger = logging.getLogger("MindJournal.Errors")


class ErrorCode(str, Enum):
    """Standard error codes returned by the API."""

    # Client errors (4xx)
    VALIDATION_ERROR = "VALIDATION_ERROR"
    NOT_FOUND = "NOT_FOUND"
    UNAUTHORIZED = "UNAUTHORIZED"

    # Server errors (5xx)
    INTERNAL_ERROR = "INTERNAL_ERROR"
    DATABASE_ERROR = "DATABASE_ERROR"


class ErrorDetail(BaseModel):
    """Structured error detail model."""
    code: str
    message: str
    details: Optional[dict[str, Any]] = None
    correlation_id: Optional[str] = None


class ErrorResponse(BaseModel):
    """Standard error response wrapper."""
    error: ErrorDetail


# =============================================================================
# DOMAIN EXCEPTIONS
# =============================================================================

class ServiceError(Exception):
    """Base class for errors the API knows how to render."""


class InvalidRequestError(ServiceError):
    """The caller sent something we cannot act on."""

    def __init__(self, message: str, details: Optional[dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = details


class NotFoundError(ServiceError):
    """
    A resource does not exist for the calling user.

    Raised both for unknown ids and for ids owned by someone else, so the
    response never reveals whether another user's record exists.
    """

    def __init__(self, resource_type: str, resource_id: Optional[str] = None):
        super().__init__(f"{resource_type.capitalize()} not found")
        self.resource_type = resource_type
        self.resource_id = resource_id


class AuthenticationError(ServiceError):
    """The request carries no valid identity."""

    def __init__(self, message: str = "Authentication required"):
        super().__init__(message)
        self.message = message


class StorageError(ServiceError):
    """A persistence call failed. Never retried."""

    def __init__(self, operation: str, cause: Optional[BaseException] = None):
        super().__init__(f"Storage operation failed: {operation}")
        self.operation = operation
        self.cause = cause


# =============================================================================
# RESPONSE HELPERS
# =============================================================================

def get_correlation_id(request: Optional[Request] = None) -> Optional[str]:
    """Correlation ID that ``CorrelationMiddleware`` stored on the request."""
    if request is None:
        return None
    return getattr(request.state, "correlation_id", None)


def error_response(
    code: ErrorCode,
    message: str,
    status_code: int,
    details: Optional[dict[str, Any]] = None,
    correlation_id: Optional[str] = None,
) -> JSONResponse:
    """Render ``{"error": {...}}``; empty fields are left out of the body."""
    body = ErrorResponse(
        error=ErrorDetail(
            code=code.value,
            message=message,
            details=details,
            correlation_id=correlation_id,
        )
    )
    return JSONResponse(status_code=status_code, content=body.model_dump(exclude_none=True))


def validation_error(
    message: str,
    details: Optional[dict[str, Any]] = None,
    correlation_id: Optional[str] = None,
) -> JSONResponse:
    return error_response(ErrorCode.VALIDATION_ERROR, message, 400, details, correlation_id)


def not_found_error(
    message: str,
    resource_type: Optional[str] = None,
    correlation_id: Optional[str] = None,
) -> JSONResponse:
    """404 naming the kind of record only, never its id."""
    details = {"resource_type": resource_type} if resource_type else None
    return error_response(ErrorCode.NOT_FOUND, message, 404, details, correlation_id)


def unauthorized_error(
    message: str = "Authentication required",
    correlation_id: Optional[str] = None,
) -> JSONResponse:
    return error_response(ErrorCode.UNAUTHORIZED, message, 401, correlation_id=correlation_id)


def internal_error(
    message: str = "Internal server error",
    correlation_id: Optional[str] = None,
) -> JSONResponse:
    """Generic 500. The cause goes to the log, not to the client."""
    return error_response(ErrorCode.INTERNAL_ERROR, message, 500, correlation_id=correlation_id)


def database_error(
    message: str = "Database operation failed",
    operation: Optional[str] = None,
    correlation_id: Optional[str] = None,
) -> JSONResponse:
    details = {"operation": operation} if operation else None
    return error_response(ErrorCode.DATABASE_ERROR, message, 500, details, correlation_id)


def _field_errors(exc: RequestValidationError) -> list[dict[str, Any]]:
    fields = []
    for err in exc.errors():
        # Drop the leading "body"/"query" marker from the location
        loc = [str(part) for part in err.get("loc", ())]
        if loc and loc[0] in ("body", "query", "path"):
            loc = loc[1:]
        fields.append({
            "field": ".".join(loc) or None,
            "message": err.get("msg", "Invalid value"),
            "type": err.get("type"),
        })
    return fields


def register_exception_handlers(app: FastAPI) -> None:
    """Map domain exceptions onto the standard error responses."""

    @app.exception_handler(RequestValidationError)
    async def _request_validation_handler(request: Request, exc: RequestValidationError):
        return validation_error(
            "Invalid request data",
            details={"fields": _field_errors(exc)},
            correlation_id=get_correlation_id(request),
        )

    @app.exception_handler(InvalidRequestError)
    async def _invalid_request_handler(request: Request, exc: InvalidRequestError):
        return validation_error(
            exc.message,
            details=exc.details,
            correlation_id=get_correlation_id(request),
        )

    @app.exception_handler(NotFoundError)
    async def _not_found_handler(request: Request, exc: NotFoundError):
        return not_found_error(
            str(exc),
            resource_type=exc.resource_type,
            correlation_id=get_correlation_id(request),
        )

    @app.exception_handler(AuthenticationError)
    async def _auth_handler(request: Request, exc: AuthenticationError):
        return unauthorized_error(exc.message, correlation_id=get_correlation_id(request))

    @app.exception_handler(StorageError)
    async def _storage_handler(request: Request, exc: StorageError):
        logger.error(
            "Storage failure during %s %s",
            request.method,
            request.url.path,
            exc_info=exc.cause or exc,
            extra={"operation": exc.operation},
        )
        return database_error(
            operation=exc.operation,
            correlation_id=get_correlation_id(request),
        )

    @app.exception_handler(Exception)
    async def _unhandled_handler(request: Request, exc: Exception):
        logger.exception("Unhandled error during %s %s", request.method, request.url.path)
        return internal_error(correlation_id=get_correlation_id(request))
