"""
HTTP observability middleware.

CorrelationMiddleware binds an X-Correlation-ID to the request context and
echoes it on the response. RequestLoggingMiddleware writes one access line
per request with status and latency; health checks are logged at DEBUG.

Dependencies: starlette, mindmenu.observability.correlation
System role: Request tracing for the FastAPI app
"""

import logging
import time

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from mindmenu.observability.correlation import clear_correlation_id, set_correlation_id

logger = logging.getLogger(__name__)

CORRELATION_HEADER = "X-Correlation-ID"
QUIET_PATH_SUFFIXES = ("/health",)


class CorrelationMiddleware(BaseHTTPMiddleware):
    """Reuse the caller's correlation ID or mint one, and return it in the response headers."""

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        correlation_id = set_correlation_id(request.headers.get(CORRELATION_HEADER))
        try:
            response = await call_next(request)
        finally:
            clear_correlation_id()
        response.headers[CORRELATION_HEADER] = correlation_id
        return response


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Access log with latency."""

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        started = time.perf_counter()
        path = request.url.path
        context = {"method": request.method, "path": path}

        try:
            response = await call_next(request)
        except Exception as e:
            logger.exception(
                f"{request.method} {path} raised {type(e).__name__}",
                extra={**context, "duration_ms": _elapsed_ms(started)},
            )
            raise

        level = logging.DEBUG if path.endswith(QUIET_PATH_SUFFIXES) else logging.INFO
        logger.log(
            level,
            f"{request.method} {path} {response.status_code}",
            extra={**context, "status_code": response.status_code, "duration_ms": _elapsed_ms(started)},
        )
        return response


def _elapsed_ms(started: float) -> float:
    return round((time.perf_counter() - started) * 1000, 2)
