"""
VenueMaps Backend — Request Logging Middleware
===============================================

What:  One access-log line per HTTP request with status and duration.
Why:   Upstream latency of the mapping backend shows up here first; the
       duration is the number to watch when /api routes slow down.
How:   Times the downstream call and logs method, path, status, duration,
       request ID and client IP. Level follows the status class:
       5xx → ERROR, 4xx → WARNING, everything else → INFO.
When:  After RequestIDMiddleware (uses request ID for correlation).

Typical durations:
    - GET /api/pois on a warm handle: one backend round trip
    - first /api request after startup: adds the venue load of handle construction

Not logged: query strings (search text may be user input) and headers.
"""

import logging
import time

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from venuemaps.middleware.request_id import request_id_var

logger = logging.getLogger("venuemaps.access")

# Probes hit these every few seconds
QUIET_PATHS = {"/health"}


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Logs method, path, status and duration of each request."""

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        path = request.url.path
        if path in QUIET_PATHS:
            return await call_next(request)

        # Why perf_counter: monotonic, unaffected by wall-clock adjustments
        start_time = time.perf_counter()
        client_ip = request.client.host if request.client else "unknown"
        method = request.method
        rid = request_id_var.get("")

        response = await call_next(request)

        duration_ms = (time.perf_counter() - start_time) * 1000
        # Why level by status: 5xx means the SDK or this process failed,
        # 4xx means a bad id or missing q from the client
        status = response.status_code
        if status >= 500:
            log_level = logging.ERROR
        elif status >= 400:
            log_level = logging.WARNING
        else:
            log_level = logging.INFO

        logger.log(
            log_level,
            "%s %s %d %.1fms [%s] from %s",
            method,
            path,
            status,
            duration_ms,
            rid,
            client_ip,
            extra={
                "request_id": rid,
                "method": method,
                "path": path,
                "status": status,
                "duration_ms": round(duration_ms, 2),
                "client_ip": client_ip,
            },
        )

        return response
