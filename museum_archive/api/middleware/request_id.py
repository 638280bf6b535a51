"""
Request ID middleware for request correlation.

- Generates or accepts X-Request-ID header
- Stores in request.state and response headers
- Sets context vars so request_id (and, once the bearer token resolves,
  the session user) are available in logs throughout the request
"""

import time
import uuid
from typing import Callable

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

from museum_archive.logging_config import get_logger, request_id_var, session_user_var

logger = get_logger(__name__)

REQUEST_ID_HEADER = "X-Request-ID"

# Requests slower than this are logged; login alone sleeps for its simulated delay
SLOW_REQUEST_MS = 2500


class RequestIdMiddleware(BaseHTTPMiddleware):
    """Assign a request ID to each request and echo it back in the response."""

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        request_id = request.headers.get(REQUEST_ID_HEADER) or str(uuid.uuid4())
        request.state.request_id = request_id
        token = request_id_var.set(request_id)
        user_token = session_user_var.set(None)

        try:
            start = time.perf_counter()
            response = await call_next(request)
            duration_ms = (time.perf_counter() - start) * 1000

            response.headers[REQUEST_ID_HEADER] = request_id

            if duration_ms > SLOW_REQUEST_MS:
                logger.warning(
                    "Slow request",
                    extra={
                        "path": request.url.path,
                        "method": request.method,
                        "duration_ms": round(duration_ms, 1),
                    },
                )

            return response
        finally:
            session_user_var.reset(user_token)
            request_id_var.reset(token)
