"""
VenueMaps Backend — Custom Exception Hierarchy
===============================================

What:  Defines application-specific exceptions for the proxy's error scenarios.
How:   Each exception class carries a message, an optional context dict and
       the HTTP status it maps to. The venue service turns them into failure
       envelopes; the global handlers in main.py catch anything that escapes.
Who:   Raised by the SDK client, the handle cache and the venue service.

Exception Hierarchy:
    VenueMapsError (base)
    ├── ValidationError          → 400 Bad Request (client can fix)
    ├── InitializationError      → 500 (SDK handle could not be constructed)
    ├── BackendError             → 500 (an SDK call failed)
    └── RateLimitExceededError   → 429 Too Many Requests

    Transient and permanent backend failures are not distinguished; both
    surface to the caller the same way and nothing is retried.
"""

from typing import Any, Dict, Optional


class VenueMapsError(Exception):
    """
    Base exception for all VenueMaps application errors.

    Attributes:
        message:     Error description returned in the envelope
        context:     Additional debug info (logged but NOT returned to client)
        status_code: HTTP status the error maps to
    """

    status_code: int = 500

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class ValidationError(VenueMapsError):
    """
    Raised when client input fails validation.

    When:    Non-integer POI id, missing search query.
    HTTP:    400 Bad Request

    The message is a fixed human-readable string, e.g.
        {"success": false, "error": "Invalid POI ID - must be a number"}
    """

    status_code = 400

    def __init__(
        self,
        message: str = "Validation failed",
        field: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        if field:
            ctx["field"] = field
        super().__init__(message=message, context=ctx)
        self.field = field


class InitializationError(VenueMapsError):
    """
    Raised when the SDK handle cannot be constructed.

    When:    Missing account/venue id, rejected credentials, or the mapping
             backend is unreachable during the first handle construction.
    HTTP:    500 Internal Server Error

    The handle cache does not remember this failure: the next request
    attempts construction again.
    """

    def __init__(
        self,
        message: str = "Failed to initialize the mapping SDK",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)


class BackendError(VenueMapsError):
    """
    Raised when an SDK call against an initialized handle fails.

    When:    HTTP error status, network failure, or an unreadable payload
             from the mapping backend.
    HTTP:    500 Internal Server Error

    The message carries the underlying error text; it is returned to the
    client verbatim in the failure envelope.
    """

    def __init__(
        self,
        message: str = "Mapping backend request failed",
        status: Optional[int] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        if status is not None:
            ctx["upstream_status"] = status
        super().__init__(message=message, context=ctx)
        self.status = status


class RateLimitExceededError(VenueMapsError):
    """
    Raised when a client exceeds the per-IP request rate limit.

    HTTP:    429 Too Many Requests (with a Retry-After header)
    """

    status_code = 429

    def __init__(
        self,
        retry_after: int = 60,
        context: Optional[Dict[str, Any]] = None,
    ):
        message = (
            f"Too many requests. Please wait {retry_after} seconds before retrying."
        )
        ctx = context or {}
        ctx["retry_after"] = retry_after
        super().__init__(message=message, context=ctx)
        self.retry_after = retry_after
