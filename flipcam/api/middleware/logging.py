"""
Request logging middleware.

Each request gets a short id bound into structlog's context, so every event
logged while handling it (store writes, KPI reads, auth failures) carries the
same ``request_id``. The acting user is bound by the auth dependency once the
session resolves.
"""

import time
import uuid
from collections.abc import Awaitable, Callable

import structlog
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

from flipcam.config import get_logger

logger = get_logger(__name__)

# Reads are frequent and uninteresting at INFO
_QUIET_METHODS = {"GET", "HEAD", "OPTIONS"}


class LoggingMiddleware(BaseHTTPMiddleware):
    """Bind request context and log one completion event per request."""

    async def dispatch(
        self,
        request: Request,
        call_next: Callable[[Request], Awaitable[Response]],
    ) -> Response:
        request_id = uuid.uuid4().hex[:8]
        request.state.request_id = request_id

        structlog.contextvars.clear_contextvars()
        structlog.contextvars.bind_contextvars(
            request_id=request_id,
            method=request.method,
            path=request.url.path,
        )

        start = time.perf_counter()
        try:
            response = await call_next(request)
        except Exception as e:
            logger.error(
                "request_failed",
                error=str(e),
                duration_ms=round((time.perf_counter() - start) * 1000, 2),
            )
            raise
        duration_ms = (time.perf_counter() - start) * 1000

        # user_id is set on request.state by the auth dependency; the app runs
        # in a child task, so its contextvars do not flow back here
        user_id = getattr(request.state, "user_id", None)
        log = logger.info
        if response.status_code >= 500:
            log = logger.error
        elif response.status_code >= 400:
            log = logger.warning
        elif request.method in _QUIET_METHODS:
            log = logger.debug

        log(
            "request_completed",
            status=response.status_code,
            user_id=user_id,
            duration_ms=round(duration_ms, 2),
        )

        response.headers["X-Request-ID"] = request_id
        response.headers["X-Response-Time"] = f"{duration_ms:.2f}ms"
        structlog.contextvars.clear_contextvars()
        return response
