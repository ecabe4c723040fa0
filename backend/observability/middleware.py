"""
FastAPI middleware for observability.

CorrelationMiddleware binds a correlation ID to each request (taken from
X-Correlation-ID or generated) and echoes it back. RequestLoggingMiddleware
logs every request with status and latency. Register RequestLoggingMiddleware
first so it runs inside the correlation scope.

Dependencies: starlette, backend.observability
System role: Request/response observability injection
"""

import logging
import time

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint

from backend.observability.correlation import clear_correlation_id, set_correlation_id
from backend.observability.log_utils import log_exception_with_context, log_with_context

logger = logging.getLogger(__name__)

CORRELATION_HEADER = "X-Correlation-ID"


def _elapsed_ms(start: float) -> float:
    return round((time.perf_counter() - start) * 1000, 2)


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Log method, path, status code and latency of every request."""

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        start = time.perf_counter()
        route = f"{request.method} {request.url.path}"

        try:
            response = await call_next(request)
        except Exception as e:
            log_exception_with_context(
                logger,
                f"{route} - unhandled {type(e).__name__}",
                e,
                method=request.method,
                path=request.url.path,
                process_time_ms=_elapsed_ms(start),
            )
            raise

        level = logging.WARNING if response.status_code >= 500 else logging.INFO
        log_with_context(
            logger,
            level,
            f"{route} - {response.status_code}",
            method=request.method,
            path=request.url.path,
            status_code=response.status_code,
            process_time_ms=_elapsed_ms(start),
            client_host=request.client.host if request.client else None,
        )
        return response


class CorrelationMiddleware(BaseHTTPMiddleware):
    """Scope a correlation ID to the request and return it in the response headers."""

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        correlation_id = set_correlation_id(request.headers.get(CORRELATION_HEADER))
        try:
            response = await call_next(request)
        finally:
            clear_correlation_id()
        response.headers[CORRELATION_HEADER] = correlation_id
        return response
