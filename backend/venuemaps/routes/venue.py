"""
VenueMaps Backend — Venue Route Handlers
=========================================

What:  The five read-only /api routes proxying the mapping SDK.
How:   Each handler delegates to VenueService and converts the returned
       HandlerOutcome into a JSONResponse. No SDK access happens here.
Who:   Called by the client page and any API consumer.

Routes:
    GET /api/pois              → {success, data: [...], count}
    GET /api/poi/{id}          → {success, data: {...}}        (400 on non-integer id)
    GET /api/search?q=<text>   → {success, data: [...], count, query}  (400 without q)
    GET /api/structures        → {success, data: [...], count}
    GET /api/venue             → {success, data: {...}}

    Failures: 500 {success: false, error[, message]}
"""

import logging
from typing import Optional

from fastapi import APIRouter, Query
from fastapi.responses import JSONResponse

from venuemaps.services.venue_service import venue_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["Venue"])

_ERROR_RESPONSES = {
    500: {"description": "SDK initialization or backend call failed"},
}


@router.get(
    "/pois",
    summary="List all points of interest",
    responses=_ERROR_RESPONSES,
)
async def list_pois() -> JSONResponse:
    """Every POI of the configured venue, normalized to a list."""
    logger.info("Fetching POIs")
    outcome = await venue_service.list_pois()
    return outcome.to_response()


@router.get(
    "/poi/{poi_id}",
    summary="Get point of interest details",
    responses={400: {"description": "POI id is not a number"}, **_ERROR_RESPONSES},
)
async def get_poi(poi_id: str) -> JSONResponse:
    """
    Details of one POI.

    The id is taken as a string and parsed by the service so that a
    non-numeric id gets the envelope-shaped 400 rather than FastAPI's 422.
    """
    outcome = await venue_service.get_poi(poi_id)
    return outcome.to_response()


@router.get(
    "/search",
    summary="Search the venue",
    responses={400: {"description": 'Query parameter "q" is missing'}, **_ERROR_RESPONSES},
)
async def search(
    q: Optional[str] = Query(default=None, description="Free-text search query"),
) -> JSONResponse:
    outcome = await venue_service.search(q)
    return outcome.to_response()


@router.get(
    "/structures",
    summary="List venue structures",
    responses=_ERROR_RESPONSES,
)
async def list_structures() -> JSONResponse:
    outcome = await venue_service.list_structures()
    return outcome.to_response()


@router.get(
    "/venue",
    summary="Get venue metadata",
    responses=_ERROR_RESPONSES,
)
async def get_venue() -> JSONResponse:
    outcome = await venue_service.get_venue()
    return outcome.to_response()
