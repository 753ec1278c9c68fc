"""
VenueMaps Backend — SDK Handle Cache
=====================================

What:  Process-wide lazy singleton holding at most one initialized SDK handle.
Why:   Constructing a handle costs a venue load against the backend; doing
       it once per process keeps every later request to a single SDK call.
How:   The first `get_handle()` call constructs the handle through the
       configured factory; every later call returns the same instance.
       Construction runs under an asyncio.Lock with a second check inside
       the lock, so concurrent first requests share a single construction.
Who:   VenueService calls `get_handle()` once per request.
When:  First construction happens on the first /api request, not at startup.

Lifecycle:
    empty ──get_handle()──▶ constructing ──ok──▶ ready (until shutdown)
                                 │
                                 └─InitializationError─▶ empty (next call retries)

    There is no expiry, refresh or health probing of a cached handle.
    `close()` is only called from the application lifespan at shutdown.
"""

import asyncio
import logging
from typing import Awaitable, Callable, Optional

from venuemaps.config import MapConfig, settings
from venuemaps.exceptions import InitializationError, VenueMapsError
from venuemaps.services.atrius_client import AtriusMapsClient, get_sdk_version
from venuemaps.services.sdk_base import MapSDK

logger = logging.getLogger(__name__)

HandleFactory = Callable[[MapConfig], Awaitable[MapSDK]]


class MapHandleCache:
    """
    Lazily constructs and caches one MapSDK handle.

    Args:
        config:  Account/venue configuration used for construction.
        factory: Async callable building a handle from the config.
                 Defaults to AtriusMapsClient.connect.
    """

    def __init__(self, config: MapConfig, factory: Optional[HandleFactory] = None):
        self.config = config
        self.factory: HandleFactory = factory or AtriusMapsClient.connect
        self._handle: Optional[MapSDK] = None
        self._lock = asyncio.Lock()

    @property
    def is_ready(self) -> bool:
        """True once a handle has been constructed successfully."""
        return self._handle is not None

    async def get_handle(self) -> MapSDK:
        """
        Return the cached handle, constructing it on first use.

        Raises:
            InitializationError: Construction failed. Nothing is cached, so
                the next call attempts construction again.
        """
        if self._handle is not None:
            return self._handle

        async with self._lock:
            # Another coroutine may have finished construction while we waited
            if self._handle is not None:
                return self._handle

            logger.info(
                "Initializing mapping SDK handle (venue=%s)", self.config.venue_id
            )
            # Why wrap: callers only ever handle InitializationError from here
            try:
                handle = await self.factory(self.config)
            except InitializationError:
                raise
            except VenueMapsError as e:
                raise InitializationError(message=e.message, context=e.context) from e
            except Exception as e:
                logger.error("Failed to initialize mapping SDK: %s", e, exc_info=True)
                raise InitializationError(
                    message=str(e) or type(e).__name__,
                    context={"error_type": type(e).__name__},
                ) from e

            self._handle = handle
            return handle

    async def close(self) -> None:
        """Release the cached handle. Only used at process shutdown."""
        handle, self._handle = self._handle, None
        if handle is not None:
            await handle.close()
            logger.info("Mapping SDK handle released")

    def reset(self) -> None:
        """Forget the cached handle without closing it (tests only)."""
        self._handle = None


def sdk_version() -> str:
    """Version of the SDK client in use."""
    return get_sdk_version()


# ── Singleton Instance ────────────────────────────────────────────────────
# Shared by every request; the configuration snapshot is taken at import
map_handle_cache = MapHandleCache(settings.map_config())
