"""Occurrence overlay walkthrough: builds the point overlay map."""

from __future__ import annotations

from dataclasses import dataclass

from geotrack import FoliumCanvas, build_base_map

from ..api_logging import log_service_call
from ..constants import OCCURRENCES_GROUP
from ..data.base import OverlayRepository
from ..data.types import OccurrencePoint


@dataclass(frozen=True)
class OverlaySummary:
    count: int
    first_year: int | None
    last_year: int | None
    institutions: int
    bounds: tuple[tuple[float, float], tuple[float, float]] | None


def summarise_occurrences(points: list[OccurrencePoint]) -> OverlaySummary:
    """Counts, year span and bounding box of *points*."""
    if not points:
        return OverlaySummary(0, None, None, 0, None)
    lats = [p["latitude"] for p in points]
    lons = [p["longitude"] for p in points]
    years = [p["year"] for p in points]
    return OverlaySummary(
        count=len(points),
        first_year=min(years),
        last_year=max(years),
        institutions=len({p["institution_code"] for p in points}),
        bounds=((min(lats), min(lons)), (max(lats), max(lons))),
    )


class OccurrenceOverlayService:
    """Fetches occurrence points and draws them as a toggleable overlay group."""

    def __init__(self, repo: OverlayRepository) -> None:
        self._repo = repo

    @log_service_call
    def fetch(self, genus: str, species: str, limit: int) -> list[OccurrencePoint]:
        return self._repo.get_occurrences(genus, species, limit)

    @log_service_call
    def build_map(self, points: list[OccurrencePoint]) -> FoliumCanvas:
        """Base layers plus one marker per point, popup showing the collecting institution."""
        canvas = build_base_map(overlay_groups=(OCCURRENCES_GROUP,))
        for p in points:
            canvas.add_marker(p["latitude"], p["longitude"], p["institution_code"], OCCURRENCES_GROUP)
        summary = summarise_occurrences(points)
        if summary.bounds is not None:
            canvas.map.fit_bounds([list(summary.bounds[0]), list(summary.bounds[1])])
        return canvas
