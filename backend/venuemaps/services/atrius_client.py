"""
VenueMaps Backend — Atrius Maps SDK Client
===========================================

What:  Concrete MapSDK implementation talking to the Atrius Maps backend over HTTP.
Why:   Atrius publishes its SDK for JavaScript only; its REST backend is
       what a Python process can reach.
How:   One httpx.AsyncClient per handle, bound to the configured account.
       `connect()` loads the venue document once to prove the credentials
       and the venue id are valid before the handle is handed out.
Who:   Constructed by the handle cache on the first request that needs it.

Backend layout (relative to MAP_API_BASE_URL):
    GET /accounts/{account}/venues/{venue}              → venue metadata
    GET /accounts/{account}/venues/{venue}/pois         → all POIs
    GET /accounts/{account}/venues/{venue}/pois/{id}    → POI details
    GET /accounts/{account}/venues/{venue}/search?q=    → search hits
    GET /accounts/{account}/venues/{venue}/structures   → structures

Error mapping:
    HTTP status >= 400   → BackendError(status=...)
    transport failures   → BackendError (connect/read timeouts included)
    unparseable body     → BackendError
    any of the above during connect() → InitializationError

No call is retried; the caller sees the first failure.
"""

import logging
import time
from typing import Any, Dict, Optional
from urllib.parse import quote

import httpx

from venuemaps import __version__
from venuemaps.config import MapConfig
from venuemaps.exceptions import BackendError, InitializationError
from venuemaps.services.sdk_base import MapSDK

logger = logging.getLogger(__name__)

USER_AGENT = f"venuemaps-backend/{__version__}"


def get_sdk_version() -> str:
    """Version string of the SDK client, reported by /health."""
    return f"atriusmaps-http/{__version__} (httpx {httpx.__version__})"


class AtriusMapsClient(MapSDK):
    """
    Authenticated handle for one Atrius Maps account/venue pair.

    Do not instantiate directly; use `await AtriusMapsClient.connect(config)`.
    """

    def __init__(self, client: httpx.AsyncClient, config: MapConfig):
        self._client = client
        self.config = config
        self._venue_path = f"venues/{quote(config.venue_id, safe='')}"

    @classmethod
    async def connect(
        cls,
        config: MapConfig,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> "AtriusMapsClient":
        """
        Build a handle and verify it against the backend.

        Args:
            config:    Account/venue identifiers and transport settings.
            transport: Optional httpx transport (tests pass a MockTransport).

        Raises:
            InitializationError: Configuration incomplete or venue not loadable.
        """
        # Why first: a missing id must fail before any network traffic
        config.require_complete()

        base_url = f"{config.base_url.rstrip('/')}/accounts/{quote(config.account_id, safe='')}"
        client = httpx.AsyncClient(
            base_url=base_url,
            timeout=config.timeout,
            headers={"Accept": "application/json", "User-Agent": USER_AGENT},
            transport=transport,
        )
        instance = cls(client, config)

        # Why load the venue here: a handle only leaves connect() once the
        # backend has accepted the account and venue ids
        try:
            await instance.get_venue_data()
        except BackendError as e:
            await client.aclose()
            logger.error(
                "Failed to initialize Atrius Maps SDK for venue %s: %s",
                config.venue_id,
                e.message,
            )
            raise InitializationError(
                message=e.message,
                context={"venue_id": config.venue_id, **e.context},
            ) from e

        logger.info(
            "Atrius Maps SDK initialized successfully (account=%s, venue=%s)",
            config.account_id,
            config.venue_id,
        )
        return instance

    # ── Capabilities ──────────────────────────────────────────────────────

    async def get_all_pois(self) -> Any:
        return await self._get(f"{self._venue_path}/pois")

    async def get_poi_details(self, poi_id: int) -> Any:
        return await self._get(f"{self._venue_path}/pois/{int(poi_id)}")

    async def search(self, query: str) -> Any:
        return await self._get(f"{self._venue_path}/search", params={"q": query})

    async def get_structures(self) -> Any:
        return await self._get(f"{self._venue_path}/structures")

    async def get_venue_data(self) -> Any:
        return await self._get(self._venue_path)

    async def close(self) -> None:
        await self._client.aclose()

    # ── Transport ─────────────────────────────────────────────────────────

    async def _get(self, path: str, params: Optional[Dict[str, str]] = None) -> Any:
        """
        GET a backend resource and decode its JSON body.

        Returns None for an empty body (e.g. 204 No Content).
        """
        start_time = time.perf_counter()
        try:
            response = await self._client.get(path, params=params)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            status = e.response.status_code
            raise BackendError(
                message=_describe_error_response(e.response),
                status=status,
                context={"path": path},
            ) from e
        except httpx.HTTPError as e:
            # str() of some httpx timeouts is empty; fall back to the class name
            raise BackendError(
                message=str(e) or type(e).__name__,
                context={"path": path, "error_type": type(e).__name__},
            ) from e

        duration_ms = (time.perf_counter() - start_time) * 1000
        logger.debug("GET %s → %d in %.0fms", path, response.status_code, duration_ms)

        # Why None: a detail endpoint may answer 204; the route then emits
        # "data": null
        if not response.content:
            return None
        try:
            return response.json()
        except ValueError as e:
            raise BackendError(
                message="Mapping backend returned a response that is not valid JSON",
                status=response.status_code,
                context={"path": path},
            ) from e


def _describe_error_response(response: httpx.Response) -> str:
    """Best human-readable message for a failed backend response."""
    try:
        body = response.json()
    except ValueError:
        body = None
    if isinstance(body, dict):
        for key in ("message", "error", "detail"):
            value = body.get(key)
            if isinstance(value, str) and value.strip():
                return value
    return f"Mapping backend responded with HTTP {response.status_code}"
