"""Tests for shared/data/: errors, base, source selection and the GBIF repository."""

from __future__ import annotations

import httpx
import pytest
import respx

from geotrack import IpLocationService, ReplayLocationService
from shared.data import get_repository
from shared.data.base import OverlayRepository
from shared.data.errors import OverlayDataError
from shared.data.source import LocationSource, build_location_service
from tests.conftest import GBIF_URL, SAMPLE_OCCURRENCE, make_occurrence_page


class TestOverlayDataError:
    def test_is_exception(self):
        assert issubclass(OverlayDataError, Exception)

    def test_message(self):
        assert str(OverlayDataError("test message")) == "test message"


class TestOverlayRepository:
    def test_cannot_instantiate_abc(self):
        with pytest.raises(TypeError):
            OverlayRepository()

    def test_concrete_implementation(self):
        class ConcreteRepo(OverlayRepository):
            def get_occurrences(self, genus, species, limit): return []

        assert ConcreteRepo().get_occurrences("Heliomeris", "", 10) == []


class TestLocationSource:
    def test_values(self):
        assert LocationSource("IP lookup") is LocationSource.IP_LOOKUP
        assert LocationSource("Replay track") is LocationSource.REPLAY

    def test_build_replay_uses_sample_track(self):
        service = build_location_service(LocationSource.REPLAY)
        assert isinstance(service, ReplayLocationService)
        assert len(service.track) == 12
        assert service.track.count(None) == 2

    def test_build_replay_from_custom_csv(self, tmp_path):
        path = tmp_path / "walk.csv"
        path.write_text("latitude,longitude,accuracy\n1.0,2.0,3.0\n")
        service = build_location_service(LocationSource.REPLAY, track_csv=path)
        assert len(service.track) == 1

    @pytest.mark.asyncio
    async def test_build_ip_lookup(self):
        service = build_location_service(LocationSource.IP_LOOKUP)
        assert isinstance(service, IpLocationService)
        await service.close()


class TestGbifRepository:
    @pytest.fixture(autouse=True)
    def _clear_cache(self):
        from shared.data.gbif_repo import _fetch_occurrences

        _fetch_occurrences.clear()
        yield
        _fetch_occurrences.clear()

    @respx.mock
    def test_returns_clean_points(self):
        incomplete = {**SAMPLE_OCCURRENCE, "key": 2, "institutionCode": None}
        respx.get(f"{GBIF_URL}/occurrence/search").mock(
            return_value=httpx.Response(200, json=make_occurrence_page([SAMPLE_OCCURRENCE, incomplete]))
        )
        points = get_repository().get_occurrences("Heliomeris", "multiflora", 10)
        assert points == [{
            "latitude": 35.1983,
            "longitude": -111.6513,
            "year": 2017,
            "institution_code": "ASU",
            "scientific_name": "Heliomeris multiflora (Nutt.) Nutt.",
        }]

    @respx.mock
    def test_wraps_errors(self):
        respx.get(f"{GBIF_URL}/occurrence/search").mock(side_effect=httpx.ConnectError("offline"))
        with pytest.raises(OverlayDataError, match="Heliomeris"):
            get_repository().get_occurrences("Heliomeris", "multiflora", 10)
