"""
VenueMaps Backend — Health Check Route
=======================================

What:  Health check endpoint for monitoring and load balancer probes.
How:   Reports configuration completeness and whether an SDK handle is cached.
Who:   Called by Docker health checks, load balancers and monitoring systems.

The check is passive: it never constructs an SDK handle and never calls
the mapping backend.

Status levels:
    - healthy:   Mapping credentials configured
    - degraded:  ATRIUSMAPS_ACCOUNT_ID or ATRIUSMAPS_VENUE_ID missing
                 (every /api route will answer 500 until fixed)
"""

import logging
import time

from fastapi import APIRouter

from venuemaps import __version__
from venuemaps.config import settings
from venuemaps.schemas.envelope import HealthResponse
from venuemaps.services.map_service import map_handle_cache, sdk_version

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Health"])

# Track when the service started for uptime reporting
_start_time = time.time()


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Service health check",
)
async def health_check() -> HealthResponse:
    overall = "healthy"
    try:
        settings.validate_required_for_production()
    except ValueError as e:
        overall = "degraded"
        logger.warning("Health check: %s", str(e))

    return HealthResponse(
        status=overall,
        version=__version__,
        sdk="ready" if map_handle_cache.is_ready else "not_initialized",
        sdk_version=sdk_version(),
        uptime_seconds=round(time.time() - _start_time, 2),
    )
