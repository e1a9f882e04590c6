"""
Request middleware: correlation ids and access logging.

Dependencies: starlette, sitechat.observability.correlation
System role: Request/response observability injection
"""

import logging
import time

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

from sitechat.observability.correlation import clear_correlation_id, set_correlation_id

logger = logging.getLogger(__name__)

CORRELATION_HEADER = "X-Correlation-ID"


def _elapsed_ms(start: float) -> float:
    return round((time.perf_counter() - start) * 1000, 2)


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Log one line when a request arrives and one when it completes."""

    async def dispatch(self, request: Request, call_next):
        start = time.perf_counter()
        route = f"{request.method} {request.url.path}"
        logger.info(route, extra={"client_host": request.client.host if request.client else None})

        try:
            response: Response = await call_next(request)
        except Exception as e:
            logger.exception(
                f"{route} - Unhandled {type(e).__name__}",
                extra={"process_time_ms": _elapsed_ms(start)},
            )
            raise

        logger.info(
            f"{route} - {response.status_code}",
            extra={"status_code": response.status_code, "process_time_ms": _elapsed_ms(start)},
        )
        return response


class CorrelationMiddleware(BaseHTTPMiddleware):
    """
    Bind a correlation id to the request context.

    The client's ``X-Correlation-ID`` is reused when present, otherwise a new
    one is generated; either way it is echoed on the response.
    """

    async def dispatch(self, request: Request, call_next):
        correlation_id = set_correlation_id(request.headers.get(CORRELATION_HEADER))
        try:
            response: Response = await call_next(request)
        finally:
            clear_correlation_id()
        response.headers[CORRELATION_HEADER] = correlation_id
        return response
