"""
Correlation ID and timing for every request
"""

import time
import uuid

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import Response

from transfer_inquiry.utils.logger import logger

CORRELATION_HEADER = "X-Correlation-ID"


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """
    Tags each request with a correlation ID (taken from the caller or
    generated) so the inquiry and bank gateway log lines can be joined.
    """

    async def dispatch(self, request: Request, call_next) -> Response:
        correlation_id = request.headers.get(CORRELATION_HEADER) or uuid.uuid4().hex
        request.state.correlation_id = correlation_id
        started = time.perf_counter()

        logger.info(f"[{correlation_id}] {request.method} {request.url.path}")

        response = await call_next(request)

        elapsed_ms = (time.perf_counter() - started) * 1000
        response.headers[CORRELATION_HEADER] = correlation_id
        response.headers["X-Process-Time"] = f"{elapsed_ms:.1f}ms"

        log = logger.warning if response.status_code >= 400 else logger.info
        log(f"[{correlation_id}] {request.method} {request.url.path} -> {response.status_code} in {elapsed_ms:.1f}ms")

        return response
