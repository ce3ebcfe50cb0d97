"""Location source selection for the geotrack dashboard."""

from __future__ import annotations

from enum import Enum
from pathlib import Path

import streamlit as st

from geotrack import IpLocationService, LocationService, ReplayLocationService

from ..constants import SAMPLE_TRACK_CSV

_DASHBOARD_DIR = Path(__file__).resolve().parent.parent.parent


class LocationSource(str, Enum):
    """Supported location backends."""

    IP_LOOKUP = "IP lookup"
    REPLAY = "Replay track"


def get_active_source() -> LocationSource:
    """Return the currently selected location source from session state."""
    value = st.session_state.get("location_source", LocationSource.REPLAY.value)
    try:
        return LocationSource(value)
    except ValueError:
        return LocationSource.REPLAY


def build_location_service(source: LocationSource, track_csv: str | Path | None = None) -> LocationService:
    """Create a fresh location service for *source*."""
    if source == LocationSource.IP_LOOKUP:
        return IpLocationService()
    path = Path(track_csv) if track_csv else _DASHBOARD_DIR / SAMPLE_TRACK_CSV
    return ReplayLocationService.from_csv(path)
