"""
VenueMaps Backend — Request ID Middleware
==========================================

What:  Assigns a short correlation ID to each request and echoes it back.
Why:   One /api request can log in three places (access log, VenueService,
       the SDK client); the shared ID ties those lines together.
How:   Reuses the client's X-Request-ID header when present, otherwise
       generates one; stores it in a ContextVar and on request.state, and
       sets X-Request-ID on the response.
When:  Runs before the logging middleware so access-log lines carry the ID.
"""

import uuid
from contextvars import ContextVar

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

# Coroutine-local: concurrent requests on one event loop each see their own ID
request_id_var: ContextVar[str] = ContextVar("request_id", default="")


class RequestIDMiddleware(BaseHTTPMiddleware):
    """Tags every request/response pair with X-Request-ID."""

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        # Why reuse the header: a proxy in front may already have assigned one
        # Why 8 hex chars: enough to tell concurrent requests apart in the log
        rid = request.headers.get("X-Request-ID") or uuid.uuid4().hex[:8]

        token = request_id_var.set(rid)
        request.state.request_id = rid
        # Why reset: the ContextVar must not leak into the next request
        # handled by this task
        try:
            response = await call_next(request)
        finally:
            request_id_var.reset(token)

        response.headers["X-Request-ID"] = rid
        return response
