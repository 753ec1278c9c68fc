"""
VenueMaps Backend — Test Configuration (conftest.py)
=====================================================

What:  Shared pytest fixtures for the entire test suite.
How:   pytest auto-discovers conftest.py and makes fixtures available to all tests.

Fixture Hierarchy (all function-scoped):
    ├── map_config: Complete MapConfig for a fake account/venue
    ├── fake_sdk: MapSDK double whose capabilities are AsyncMocks
    ├── sdk_factory: AsyncMock factory returning fake_sdk
    ├── handle_cache: Fresh MapHandleCache wired to sdk_factory and
    │                 patched into the venue service singleton
    └── test_client: HTTPX AsyncClient talking to the FastAPI app
"""

import os

# Override settings for testing BEFORE any venuemaps imports
os.environ["ATRIUSMAPS_ACCOUNT_ID"] = "test-account"
os.environ["ATRIUSMAPS_VENUE_ID"] = "test-venue"
os.environ["MAP_API_BASE_URL"] = "https://maps.test/v1"
os.environ["RATE_LIMIT_REQUESTS"] = "10000"
os.environ["LOG_LEVEL"] = "WARNING"  # Reduce noise during tests

from unittest.mock import AsyncMock, patch

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from venuemaps.config import MapConfig
from venuemaps.services.map_service import MapHandleCache
from venuemaps.services.sdk_base import MapSDK
from venuemaps.services.venue_service import venue_service


class FakeMapSDK(MapSDK):
    """
    In-memory MapSDK double.

    Each capability is an AsyncMock so tests can set return values or
    side effects and assert on the calls made.
    """

    def __init__(self):
        self.get_all_pois = AsyncMock(return_value=[])
        self.get_poi_details = AsyncMock(return_value={})
        self.search = AsyncMock(return_value=[])
        self.get_structures = AsyncMock(return_value=[])
        self.get_venue_data = AsyncMock(return_value={})
        self.close = AsyncMock()

    @classmethod
    async def connect(cls, config: MapConfig) -> "FakeMapSDK":
        return cls()

    # Abstract method stubs; replaced per instance by the AsyncMocks above
    async def get_all_pois(self):  # pragma: no cover
        ...

    async def get_poi_details(self, poi_id):  # pragma: no cover
        ...

    async def search(self, query):  # pragma: no cover
        ...

    async def get_structures(self):  # pragma: no cover
        ...

    async def get_venue_data(self):  # pragma: no cover
        ...


@pytest.fixture
def map_config() -> MapConfig:
    return MapConfig(
        account_id="test-account",
        venue_id="test-venue",
        base_url="https://maps.test/v1",
        timeout=5.0,
    )


@pytest.fixture
def fake_sdk() -> FakeMapSDK:
    return FakeMapSDK()


@pytest.fixture
def sdk_factory(fake_sdk):
    """Handle factory that always yields `fake_sdk`; call count is inspectable."""
    return AsyncMock(return_value=fake_sdk)


@pytest.fixture
def handle_cache(map_config, sdk_factory):
    """
    Fresh handle cache installed into the venue service for one test.

    Usage:
        async def test_x(handle_cache, fake_sdk, test_client):
            fake_sdk.get_all_pois.return_value = [...]
            response = await test_client.get("/api/pois")
    """
    cache = MapHandleCache(map_config, factory=sdk_factory)
    with patch.object(venue_service, "cache", cache):
        yield cache


@pytest_asyncio.fixture
async def test_client():
    """
    HTTPX AsyncClient routed straight into the FastAPI app.

    Usage:
        async def test_health(test_client):
            response = await test_client.get("/health")
            assert response.status_code == 200
    """
    from venuemaps.main import app
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
