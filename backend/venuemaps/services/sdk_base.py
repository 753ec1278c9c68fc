"""
VenueMaps Backend — Abstract Mapping SDK Interface
===================================================

What:  Abstract base class for the mapping SDK capabilities this backend uses.
Why:   The handle cache and VenueService depend only on this interface, so
       tests swap in an AsyncMock-backed fake and no test talks to Atrius.
How:   Concrete clients inherit from MapSDK and implement the five read
       capabilities plus `connect()`, which builds an authenticated handle.
Who:   The handle cache constructs one; VenueService calls its methods.

Contract:
    - Every capability is async and returns SDK-defined JSON (lists, keyed
      mappings, plain objects or None). No schema is enforced here.
    - Every failure is raised as BackendError carrying the underlying
      message; construction failures are raised as InitializationError.
"""

from abc import ABC, abstractmethod
from typing import Any

from venuemaps.config import MapConfig


class MapSDK(ABC):
    """
    Abstract interface for an initialized mapping SDK handle.

    Implementations:
        - AtriusMapsClient: HTTP client for the Atrius Maps backend
        - Test doubles: AsyncMock-backed fakes in tests/conftest.py
    """

    @classmethod
    @abstractmethod
    async def connect(cls, config: MapConfig) -> "MapSDK":
        """
        Construct an authenticated handle for the configured account/venue.

        Raises:
            InitializationError: Missing configuration, rejected credentials
                or an unreachable backend.
        """
        ...

    @abstractmethod
    async def get_all_pois(self) -> Any:
        """Fetch every point of interest of the venue (list or keyed mapping)."""
        ...

    @abstractmethod
    async def get_poi_details(self, poi_id: int) -> Any:
        """Fetch one point of interest by its numeric identifier."""
        ...

    @abstractmethod
    async def search(self, query: str) -> Any:
        """Free-text search across the venue (list or keyed mapping)."""
        ...

    @abstractmethod
    async def get_structures(self) -> Any:
        """Fetch the venue's structures (buildings, terminals)."""
        ...

    @abstractmethod
    async def get_venue_data(self) -> Any:
        """Fetch the venue metadata document."""
        ...

    async def close(self) -> None:
        """Release transport resources. Called once, at process shutdown."""
        return None
