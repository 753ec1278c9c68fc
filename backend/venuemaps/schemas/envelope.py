"""
VenueMaps Backend — Response Envelope Schemas
==============================================

What:  Pydantic models for the uniform JSON envelope every /api route returns,
       plus the HandlerOutcome that carries an envelope and its HTTP status
       from the service layer to the route boundary.
How:   The envelope validates its own success/error invariant; absent
       fields are omitted from the serialized body.

Envelope shapes:
    success: {"success": true,  "data": [...], "count": 3, "query": "cafe"}
    failure: {"success": false, "error": "...", "message": "..."}

Invariants:
    success=true  ⇒ error is absent, data is always present (may be null)
    success=false ⇒ data is absent
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional

from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field, model_validator


class Envelope(BaseModel):
    """Uniform wrapper returned by every /api route."""

    success: bool = Field(description="Whether the SDK call succeeded")
    data: Optional[Any] = Field(
        default=None,
        description="Normalized list, or the raw SDK object for detail routes",
    )
    count: Optional[int] = Field(default=None, ge=0, description="len(data) for list routes")
    query: Optional[str] = Field(default=None, description="Echo of the search query")
    error: Optional[str] = Field(default=None, description="Error text (failures only)")
    message: Optional[str] = Field(default=None, description="Underlying error message")

    @model_validator(mode="after")
    def check_success_invariant(self) -> "Envelope":
        if self.success and self.error is not None:
            raise ValueError("a successful envelope cannot carry an error")
        if not self.success and self.data is not None:
            raise ValueError("a failed envelope cannot carry data")
        return self

    def to_content(self) -> Dict[str, Any]:
        """
        JSON body for this envelope.

        Unset top-level fields are dropped, except `data` on a success
        envelope: a detail call the SDK answered with nothing still reads
        {"success": true, "data": null}. `data` itself is passed through
        verbatim, nested nulls included.
        """
        content: Dict[str, Any] = {"success": self.success}
        if self.success:
            content["data"] = self.data
        for name in ("count", "query", "error", "message"):
            value = getattr(self, name)
            if value is not None:
                content[name] = value
        return content


@dataclass(frozen=True)
class HandlerOutcome:
    """
    Result of one route's core logic: an envelope and the status to send it with.

    Created by VenueService; turned into a JSONResponse at the route boundary.
    """

    status_code: int
    envelope: Envelope

    @property
    def ok(self) -> bool:
        return self.envelope.success

    @classmethod
    def success(cls, data: Any = None, **fields: Any) -> "HandlerOutcome":
        return cls(status_code=200, envelope=Envelope(success=True, data=data, **fields))

    @classmethod
    def failure(
        cls,
        status_code: int,
        error: str,
        message: Optional[str] = None,
    ) -> "HandlerOutcome":
        return cls(
            status_code=status_code,
            envelope=Envelope(success=False, error=error, message=message),
        )

    def to_response(self) -> JSONResponse:
        return JSONResponse(status_code=self.status_code, content=self.envelope.to_content())


class HealthResponse(BaseModel):
    """
    Health check response.

    `sdk` reports whether a handle is cached (`ready`) or not yet
    constructed (`not_initialized`); the check never constructs one.
    """

    status: str = Field(description="Overall service status: healthy, degraded")
    version: str = Field(description="Application version")
    sdk: str = Field(description="SDK handle state: ready, not_initialized")
    sdk_version: str = Field(description="Mapping SDK client version")
    uptime_seconds: float = Field(description="Seconds since service started")
