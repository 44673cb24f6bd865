"""
Request logging with a per-request id.
"""

import logging
import time
import uuid
from contextvars import ContextVar
from typing import Callable, Optional

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

logger = logging.getLogger(__name__)

request_id_var: ContextVar[Optional[str]] = ContextVar("request_id", default=None)

REQUEST_ID_HEADER = "X-Request-Id"
SKIPPED_PATHS = ("/health",)


class RequestIdFilter(logging.Filter):
    """Expose the current request id to log records as `request_id`."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.request_id = request_id_var.get() or "-"
        return True


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        request_id = request.headers.get(REQUEST_ID_HEADER) or str(uuid.uuid4())
        token = request_id_var.set(request_id)
        request.state.request_id = request_id

        skip = request.url.path.endswith(SKIPPED_PATHS)
        start = time.perf_counter()
        if not skip:
            logger.info(f"Incoming request {request.method} {request.url.path}")
        try:
            response = await call_next(request)
            elapsed_ms = (time.perf_counter() - start) * 1000
            if not skip:
                logger.info(
                    f"Outgoing response {request.method} {request.url.path} "
                    f"{response.status_code} {elapsed_ms:.1f}ms"
                )
            response.headers[REQUEST_ID_HEADER] = request_id
            return response
        finally:
            request_id_var.reset(token)


request_id_filter = RequestIdFilter()
