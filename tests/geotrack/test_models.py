"""Tests for Pydantic model validation."""

from __future__ import annotations

from datetime import datetime, timezone

import pytest
from pydantic import ValidationError

from geotrack.config import LoopTiming
from geotrack.models import Fix, IpLocation, Occurrence, OccurrencePage, PositionOptions, PositionSample
from tests.conftest import SAMPLE_IP_ERROR, SAMPLE_IP_LOCATION, SAMPLE_OCCURRENCE, T0, make_occurrence_page


class TestPositionSample:
    def test_success(self) -> None:
        s = PositionSample(success=True, timestamp=T0, latitude=40.0, longitude=-105.0, accuracy=10.0)
        assert s.success
        assert s.error is None

    def test_success_requires_coordinates(self) -> None:
        with pytest.raises(ValidationError):
            PositionSample(success=True, timestamp=T0, latitude=40.0)

    def test_failure_rejects_coordinates(self) -> None:
        with pytest.raises(ValidationError):
            PositionSample(success=False, timestamp=T0, latitude=40.0, longitude=-105.0, accuracy=1.0)

    def test_failure_factory(self) -> None:
        s = PositionSample.failure(T0, "timeout")
        assert not s.success
        assert s.latitude is None and s.longitude is None and s.accuracy is None
        assert s.error == "timeout"

    def test_from_fix_prefers_platform_timestamp(self) -> None:
        captured = datetime(2024, 6, 1, 11, 59, 58, tzinfo=timezone.utc)
        fix = Fix(latitude=40.0, longitude=-105.0, accuracy=10.0, timestamp=captured)
        s = PositionSample.from_fix(fix, captured_at=T0)
        assert s.timestamp == captured

    def test_from_fix_falls_back_to_capture_time(self) -> None:
        fix = Fix(latitude=40.0, longitude=-105.0, accuracy=10.0)
        s = PositionSample.from_fix(fix, captured_at=T0)
        assert s.timestamp == T0
        assert (s.latitude, s.longitude, s.accuracy) == (40.0, -105.0, 10.0)

    def test_frozen(self) -> None:
        s = PositionSample.failure(T0)
        with pytest.raises(Exception):
            s.success = True  # type: ignore[misc]

    def test_equality_is_by_value(self) -> None:
        a = PositionSample.failure(T0, "x")
        b = PositionSample.failure(T0, "x")
        assert a == b


class TestFix:
    def test_rejects_out_of_range_latitude(self) -> None:
        with pytest.raises(ValidationError):
            Fix(latitude=91.0, longitude=0.0, accuracy=1.0)

    def test_rejects_negative_accuracy(self) -> None:
        with pytest.raises(ValidationError):
            Fix(latitude=0.0, longitude=0.0, accuracy=-1.0)


class TestPositionOptions:
    def test_defaults(self) -> None:
        opts = PositionOptions()
        assert opts.high_accuracy is True
        assert opts.timeout == 5.0
        assert opts.maximum_age == 0.0

    def test_timeout_must_be_positive(self) -> None:
        with pytest.raises(ValidationError):
            PositionOptions(timeout=0)


class TestLoopTiming:
    def test_defaults(self) -> None:
        timing = LoopTiming()
        assert timing.settle_delay == 1.1
        assert timing.retry_delay == 2.0
        assert timing.options == PositionOptions()

    def test_negative_delay_rejected(self) -> None:
        with pytest.raises(ValidationError):
            LoopTiming(retry_delay=-1)


class TestIpLocation:
    def test_parse(self) -> None:
        loc = IpLocation.model_validate(SAMPLE_IP_LOCATION)
        assert loc.city == "Boulder"
        assert loc.latitude == 40.0149
        assert not loc.error

    def test_error_payload(self) -> None:
        loc = IpLocation.model_validate(SAMPLE_IP_ERROR)
        assert loc.error
        assert loc.reason == "RateLimited"
        assert loc.latitude is None


class TestOccurrence:
    def test_parse_aliases(self) -> None:
        occ = Occurrence.model_validate(SAMPLE_OCCURRENCE)
        assert occ.latitude == 35.1983
        assert occ.longitude == -111.6513
        assert occ.institution_code == "ASU"
        assert occ.year == 2017

    def test_optional_fields(self) -> None:
        occ = Occurrence.model_validate({"key": 1})
        assert occ.latitude is None
        assert occ.institution_code is None

    def test_page(self) -> None:
        page = OccurrencePage.model_validate(make_occurrence_page([SAMPLE_OCCURRENCE], end=False, count=40))
        assert len(page.results) == 1
        assert page.end_of_records is False
        assert page.count == 40
