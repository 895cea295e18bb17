"""
Request correlation IDs.

Each API call gets an ID: the caller's own (``X-Correlation-ID`` or
``X-Request-ID``) or a freshly minted one. It is visible to the log filter
through a context variable, to the error handlers through
``request.state.correlation_id``, and to the client in the response header.

Usage:
    app.add_middleware(CorrelationMiddleware)

    with CorrelationContext("backfill-42"):
        logger.info("Re-enriching entries")
"""

import contextvars
import uuid
from typing import Callable, Optional

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

INCOMING_HEADERS = ("X-Correlation-ID", "X-Request-ID")
RESPONSE_HEADER = "X-Correlation-ID"

_current_id: contextvars.ContextVar[Optional[str]] = contextvars.ContextVar(
    "mindjournal_correlation_id", default=None
)


def get_correlation_id() -> Optional[str]:
    return _current_id.get()


def generate_correlation_id() -> str:
    """Eight hex characters of a UUID4."""
    return uuid.uuid4().hex[:8]


def _incoming_id(request: Request) -> Optional[str]:
    for header in INCOMING_HEADERS:
        value = request.headers.get(header, "").strip()
        if value:
            return value
    return None


class CorrelationMiddleware(BaseHTTPMiddleware):
    """Tag the request, its log records and its response with one ID."""

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        correlation_id = _incoming_id(request) or generate_correlation_id()
        request.state.correlation_id = correlation_id

        token = _current_id.set(correlation_id)
        try:
            response = await call_next(request)
        finally:
            _current_id.reset(token)

        response.headers[RESPONSE_HEADER] = correlation_id
        return response


class CorrelationContext:
    """Bind a correlation ID outside a request, e.g. in a maintenance script."""

    def __init__(self, correlation_id: Optional[str] = None):
        self.correlation_id = correlation_id or generate_correlation_id()
        self._token: Optional[contextvars.Token] = None

    def __enter__(self) -> str:
        self._token = _current_id.set(self.correlation_id)
        return self.correlation_id

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        if self._token is not None:
            _current_id.reset(self._token)
            self._token = None
