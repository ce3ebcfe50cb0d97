"""Shared test fixtures and sample API responses."""

from __future__ import annotations

import asyncio
from datetime import datetime, timezone

import pytest

from geotrack import Fix, LocationService, PositionOptions, PositionSample

IPAPI_URL = "https://ipapi.co"
GBIF_URL = "https://api.gbif.org/v1"

T0 = datetime(2024, 6, 1, 12, 0, 0, tzinfo=timezone.utc)


SAMPLE_IP_LOCATION = {
    "ip": "203.0.113.7",
    "city": "Boulder",
    "region": "Colorado",
    "country_name": "United States",
    "latitude": 40.0149,
    "longitude": -105.2705,
    "timezone": "America/Denver",
    "org": "Example ISP",
}

SAMPLE_IP_ERROR = {
    "ip": "203.0.113.7",
    "error": True,
    "reason": "RateLimited",
}

SAMPLE_OCCURRENCE = {
    "key": 1929380124,
    "scientificName": "Heliomeris multiflora (Nutt.) Nutt.",
    "decimalLatitude": 35.1983,
    "decimalLongitude": -111.6513,
    "year": 2017,
    "institutionCode": "ASU",
    "country": "United States of America",
    "basisOfRecord": "PRESERVED_SPECIMEN",
}


def make_occurrence_page(results: list[dict], offset: int = 0, end: bool = True, count: int | None = None) -> dict:
    return {
        "offset": offset,
        "limit": len(results),
        "endOfRecords": end,
        "count": count if count is not None else len(results),
        "results": results,
    }


def success_sample(lat: float = 40.0, lon: float = -105.0, acc: float = 10.0, ts: datetime = T0) -> PositionSample:
    return PositionSample(success=True, timestamp=ts, latitude=lat, longitude=lon, accuracy=acc)


def failure_sample(ts: datetime = T0, error: str | None = "denied") -> PositionSample:
    return PositionSample.failure(ts, error)


class ScriptedLocationService(LocationService):
    """Returns each scripted outcome in turn: a Fix, an exception to raise, or HANG."""

    HANG = object()

    def __init__(self, outcomes: list, events: list | None = None) -> None:
        self.outcomes = list(outcomes)
        self.events = events if events is not None else []
        self.options_seen: list[PositionOptions] = []
        self.closed = False

    async def get_current_position(self, options: PositionOptions) -> Fix:
        self.options_seen.append(options)
        self.events.append(("request",))
        outcome = self.outcomes.pop(0)
        if outcome is self.HANG:
            await asyncio.Event().wait()
        if isinstance(outcome, BaseException):
            raise outcome
        return outcome

    async def close(self) -> None:
        self.closed = True


class RecordingSleep:
    """Stand-in for asyncio.sleep that records the requested delays."""

    def __init__(self, events: list | None = None) -> None:
        self.delays: list[float] = []
        self.events = events if events is not None else []

    async def __call__(self, delay: float) -> None:
        self.delays.append(delay)
        self.events.append(("sleep", delay))
        await asyncio.sleep(0)


@pytest.fixture
def events() -> list:
    return []


@pytest.fixture
def recording_sleep(events) -> RecordingSleep:
    return RecordingSleep(events)


@pytest.fixture
def fixed_clock():
    return lambda: T0
