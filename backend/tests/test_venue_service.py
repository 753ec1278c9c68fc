"""
VenueMaps Backend — Venue Service Unit Tests
=============================================

What:  Tests for VenueService core logic, without HTTP.
How:   A FakeMapSDK behind a fresh MapHandleCache (see conftest.py).

What we test:
    ✅ Input validation happens before any SDK call
    ✅ List routes normalize and count; detail routes pass data through
    ✅ Initialization and backend failures become 500 outcomes
    ✅ Envelope success/error invariant
"""

from unittest.mock import AsyncMock

import pytest

from venuemaps.exceptions import BackendError, InitializationError, ValidationError
from venuemaps.schemas.envelope import Envelope, HandlerOutcome
from venuemaps.services.map_service import MapHandleCache
from venuemaps.services.venue_service import (
    INVALID_POI_ID_MESSAGE,
    MISSING_QUERY_MESSAGE,
    VenueService,
    parse_poi_id,
    require_query,
)


class TestParsePoiId:

    @pytest.mark.parametrize("raw,expected", [
        ("42", 42),
        ("0", 0),
        ("-3", -3),
        ("+8", 8),
        (" 17 ", 17),
        ("007", 7),
        ("12abc", 12),
        ("1.5", 1),
        ("0x1f", 0),
        ("1e3", 1),
        ("\t\n9", 9),
    ])
    def test_takes_leading_integer(self, raw, expected):
        assert parse_poi_id(raw) == expected

    @pytest.mark.parametrize("raw", ["abc", "", " ", "-", "--1", "+-1", ".5", "١٢", "x12"])
    def test_rejects_ids_without_leading_digits(self, raw):
        with pytest.raises(ValidationError, match="must be a number"):
            parse_poi_id(raw)


class TestRequireQuery:

    def test_returns_query(self):
        assert require_query("cafe") == "cafe"

    @pytest.mark.parametrize("q", [None, ""])
    def test_rejects_missing(self, q):
        with pytest.raises(ValidationError) as exc_info:
            require_query(q)
        assert exc_info.value.message == MISSING_QUERY_MESSAGE


class TestVenueServiceSuccess:

    @pytest.fixture(autouse=True)
    def _service(self, handle_cache):
        self.service = VenueService(handle_cache)

    @pytest.mark.asyncio
    async def test_list_pois_normalizes_mapping(self, fake_sdk):
        fake_sdk.get_all_pois.return_value = {"0": {"id": 1}, "1": {"id": 2}}

        outcome = await self.service.list_pois()

        assert outcome.status_code == 200
        assert outcome.envelope.to_content() == {
            "success": True,
            "data": [{"id": 1}, {"id": 2}],
            "count": 2,
        }

    @pytest.mark.asyncio
    async def test_list_pois_with_no_result(self, fake_sdk):
        fake_sdk.get_all_pois.return_value = None

        outcome = await self.service.list_pois()

        assert outcome.envelope.to_content() == {"success": True, "data": [], "count": 0}

    @pytest.mark.asyncio
    async def test_get_poi_passes_raw_object(self, fake_sdk):
        poi = {"id": 12, "name": "Starbucks", "category": "eat.coffee", "floor": None}
        fake_sdk.get_poi_details.return_value = poi

        outcome = await self.service.get_poi("12")

        fake_sdk.get_poi_details.assert_awaited_once_with(12)
        assert outcome.envelope.to_content() == {"success": True, "data": poi}

    @pytest.mark.asyncio
    async def test_search_echoes_query(self, fake_sdk):
        fake_sdk.search.return_value = [{"id": 3, "name": "Cafe"}]

        outcome = await self.service.search("cafe")

        fake_sdk.search.assert_awaited_once_with("cafe")
        assert outcome.envelope.to_content() == {
            "success": True,
            "data": [{"id": 3, "name": "Cafe"}],
            "count": 1,
            "query": "cafe",
        }

    @pytest.mark.asyncio
    async def test_list_structures(self, fake_sdk):
        fake_sdk.get_structures.return_value = {"t1": {"id": "t1"}}

        outcome = await self.service.list_structures()

        assert outcome.envelope.data == [{"id": "t1"}]
        assert outcome.envelope.count == 1

    @pytest.mark.asyncio
    async def test_get_venue(self, fake_sdk):
        fake_sdk.get_venue_data.return_value = {"id": "test-venue", "name": "Test Airport"}

        outcome = await self.service.get_venue()

        assert outcome.ok
        assert outcome.envelope.data == {"id": "test-venue", "name": "Test Airport"}
        assert outcome.envelope.count is None


class TestVenueServiceValidation:

    @pytest.mark.asyncio
    async def test_invalid_poi_id_skips_sdk(self, handle_cache, sdk_factory, fake_sdk):
        service = VenueService(handle_cache)

        outcome = await service.get_poi("not-a-number")

        assert outcome.status_code == 400
        assert outcome.envelope.to_content() == {
            "success": False,
            "error": INVALID_POI_ID_MESSAGE,
        }
        sdk_factory.assert_not_awaited()
        fake_sdk.get_poi_details.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_missing_query_skips_sdk(self, handle_cache, sdk_factory):
        service = VenueService(handle_cache)

        outcome = await service.search(None)

        assert outcome.status_code == 400
        assert outcome.envelope.error == MISSING_QUERY_MESSAGE
        sdk_factory.assert_not_awaited()


class TestVenueServiceFailures:

    @pytest.mark.asyncio
    async def test_initialization_failure_on_list_pois(self, map_config):
        factory = AsyncMock(side_effect=InitializationError("Invalid account"))
        service = VenueService(MapHandleCache(map_config, factory=factory))

        outcome = await service.list_pois()

        assert outcome.status_code == 500
        assert outcome.envelope.to_content() == {
            "success": False,
            "error": "Failed to fetch POIs",
            "message": "Invalid account",
        }

    @pytest.mark.asyncio
    async def test_backend_failure_on_detail_route(self, handle_cache, fake_sdk):
        fake_sdk.get_venue_data.side_effect = BackendError("upstream timeout")
        service = VenueService(handle_cache)

        outcome = await service.get_venue()

        assert outcome.status_code == 500
        assert outcome.envelope.to_content() == {"success": False, "error": "upstream timeout"}

    @pytest.mark.asyncio
    async def test_unexpected_sdk_exception_is_contained(self, handle_cache, fake_sdk):
        fake_sdk.search.side_effect = KeyError("results")
        service = VenueService(handle_cache)

        outcome = await service.search("gate")

        assert outcome.status_code == 500
        assert outcome.envelope.success is False
        assert outcome.envelope.error

    @pytest.mark.asyncio
    async def test_retry_after_failed_initialization(self, map_config, fake_sdk):
        fake_sdk.get_structures.return_value = [{"id": "s1"}]
        factory = AsyncMock(side_effect=[InitializationError("network down"), fake_sdk])
        service = VenueService(MapHandleCache(map_config, factory=factory))

        first = await service.list_structures()
        second = await service.list_structures()

        assert first.status_code == 500
        assert second.status_code == 200
        assert second.envelope.count == 1


class TestEnvelope:

    def test_success_cannot_carry_error(self):
        with pytest.raises(ValueError):
            Envelope(success=True, error="boom")

    def test_failure_cannot_carry_data(self):
        with pytest.raises(ValueError):
            Envelope(success=False, data=[1], error="boom")

    def test_absent_fields_are_omitted(self):
        outcome = HandlerOutcome.failure(500, error="boom")
        assert outcome.envelope.to_content() == {"success": False, "error": "boom"}

    def test_success_keeps_null_data(self):
        outcome = HandlerOutcome.success(data=None)
        assert outcome.envelope.to_content() == {"success": True, "data": None}
