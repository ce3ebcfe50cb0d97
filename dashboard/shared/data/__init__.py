"""Data layer: overlay repository factory and re-exports."""

from __future__ import annotations

from .base import OverlayRepository
from .errors import OverlayDataError
from .source import LocationSource, build_location_service, get_active_source
from .types import OccurrencePoint


def get_repository() -> OverlayRepository:
    """Return the overlay data repository."""
    from .gbif_repo import GbifRepository

    return GbifRepository()


__all__ = [
    "LocationSource",
    "OccurrencePoint",
    "OverlayDataError",
    "OverlayRepository",
    "build_location_service",
    "get_active_source",
    "get_repository",
]
