"""
VenueMaps Backend — Venue Service (Route Core Logic)
=====================================================

What:  The five read-only operations behind the /api routes.
Why:   Keeping the logic out of the route functions lets it be tested as
       plain coroutines returning outcomes, without an HTTP client.
How:   Each operation validates its input, obtains the cached SDK handle,
       invokes exactly one SDK capability, normalizes the result and returns
       a HandlerOutcome. Errors never escape as exceptions: they become
       failure outcomes with the matching status code.
Who:   Called by routes/venue.py; tested directly without HTTP.

Flow (every operation):
    validate input ──▶ get_handle() ──▶ SDK call ──▶ normalize ──▶ HandlerOutcome
         │                  │               │
         └─ 400 ◀───────────┴── 500 ◀───────┘

    Validation failures are returned before any SDK call is made.
"""

import logging
import re
from typing import Any, Awaitable, Callable, Optional

from venuemaps.exceptions import ValidationError, VenueMapsError
from venuemaps.schemas.envelope import HandlerOutcome
from venuemaps.services.map_service import MapHandleCache, map_handle_cache
from venuemaps.services.normalizer import normalize
from venuemaps.services.sdk_base import MapSDK

logger = logging.getLogger(__name__)

INVALID_POI_ID_MESSAGE = "Invalid POI ID - must be a number"
MISSING_QUERY_MESSAGE = 'Query parameter "q" is required'

# Leading base-10 integer; whatever follows it is ignored
_LEADING_INTEGER = re.compile(r"[+-]?[0-9]+")


def parse_poi_id(raw: str) -> int:
    """
    Parse a path id the way parseInt(id, 10) does.

    Leading whitespace is skipped, then the longest signed run of ASCII
    digits is taken: "12abc" → 12, "1.5" → 1, " 7" → 7, "0x1f" → 0.
    An id with no leading digits ("abc", "", "-") is rejected.

    Raises:
        ValidationError: `raw` does not start with a base-10 integer.
    """
    match = _LEADING_INTEGER.match((raw or "").lstrip())
    if match is None:
        raise ValidationError(message=INVALID_POI_ID_MESSAGE, field="id")
    return int(match.group(), 10)


def require_query(q: Optional[str]) -> str:
    """Return the search text, rejecting a missing or empty `q`."""
    if not q:
        raise ValidationError(message=MISSING_QUERY_MESSAGE, field="q")
    return q


class VenueService:
    """
    Core logic for the venue routes.

    Args:
        cache: Handle cache the operations draw their SDK handle from.
    """

    def __init__(self, cache: MapHandleCache):
        self.cache = cache

    async def list_pois(self) -> HandlerOutcome:
        """All points of interest: data (normalized) + count."""
        return await self._call_list(
            "fetch POIs",
            lambda sdk: sdk.get_all_pois(),
            failure_label="Failed to fetch POIs",
        )

    async def get_poi(self, raw_id: str) -> HandlerOutcome:
        """One POI by numeric id: data (raw SDK object)."""
        # Why parse before get_handle: a bad id never costs a backend call
        try:
            poi_id = parse_poi_id(raw_id)
        except ValidationError as e:
            return self._rejected(e)
        return await self._call_raw("fetch POI details", lambda sdk: sdk.get_poi_details(poi_id))

    async def search(self, q: Optional[str]) -> HandlerOutcome:
        """Search hits for `q`: data (normalized) + count + query."""
        try:
            query = require_query(q)
        except ValidationError as e:
            return self._rejected(e)
        return await self._call_list("search", lambda sdk: sdk.search(query), query=query)

    async def list_structures(self) -> HandlerOutcome:
        """Venue structures: data (normalized) + count."""
        return await self._call_list("fetch structures", lambda sdk: sdk.get_structures())

    async def get_venue(self) -> HandlerOutcome:
        """Venue metadata: data (raw SDK object)."""
        return await self._call_raw("fetch venue data", lambda sdk: sdk.get_venue_data())

    # ── Internals ─────────────────────────────────────────────────────────

    async def _call_list(
        self,
        action: str,
        call: Callable[[MapSDK], Awaitable[Any]],
        failure_label: Optional[str] = None,
        query: Optional[str] = None,
    ) -> HandlerOutcome:
        try:
            sdk = await self.cache.get_handle()
            raw = await call(sdk)
        except Exception as e:
            return self._failed(action, e, failure_label)

        items = normalize(raw)
        logger.debug(
            "%s returned %s, normalized to %d items", action, type(raw).__name__, len(items)
        )
        if query is not None:
            return HandlerOutcome.success(data=items, count=len(items), query=query)
        return HandlerOutcome.success(data=items, count=len(items))

    async def _call_raw(
        self,
        action: str,
        call: Callable[[MapSDK], Awaitable[Any]],
    ) -> HandlerOutcome:
        try:
            sdk = await self.cache.get_handle()
            data = await call(sdk)
        except Exception as e:
            return self._failed(action, e)
        return HandlerOutcome.success(data=data)

    @staticmethod
    def _rejected(exc: ValidationError) -> HandlerOutcome:
        logger.warning("Rejected request: %s", exc.message)
        return HandlerOutcome.failure(exc.status_code, error=exc.message)

    @staticmethod
    def _failed(
        action: str,
        exc: Exception,
        failure_label: Optional[str] = None,
    ) -> HandlerOutcome:
        """
        Log a failed SDK interaction and build its 500 outcome.

        With a `failure_label` the envelope reads
        {"error": label, "message": <underlying text>}; otherwise
        {"error": <underlying text>}.
        """
        if isinstance(exc, VenueMapsError):
            text = exc.message
            context = exc.context
        else:
            text = str(exc) or type(exc).__name__
            context = {"error_type": type(exc).__name__}

        logger.error("Error while trying to %s: %s | Context: %s", action, text, context, exc_info=exc)

        if failure_label:
            return HandlerOutcome.failure(500, error=failure_label, message=text)
        return HandlerOutcome.failure(500, error=text)


# ── Singleton Instance ────────────────────────────────────────────────────
venue_service = VenueService(map_handle_cache)
