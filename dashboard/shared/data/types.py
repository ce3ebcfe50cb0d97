"""Data contracts for the geotrack dashboard data layer."""

from __future__ import annotations

from typing import TypedDict


class OccurrencePoint(TypedDict):
    latitude: float
    longitude: float
    year: int
    institution_code: str
    scientific_name: str | None
