"""Shared dashboard utilities."""

# --- Constants & formatting ---
from .constants import (
    DEFAULT_CENTER,
    DEFAULT_GENUS,
    DEFAULT_OCCURRENCE_LIMIT,
    DEFAULT_SPECIES,
    DEFAULT_ZOOM,
    FOLLOW_ZOOM,
    MAP_HEIGHT,
    OCCURRENCES_GROUP,
    PLOTLY_LAYOUT_DEFAULTS,
    POSITION_GROUP,
    REFRESH_INTERVAL,
)
from .formatters import format_accuracy, format_age, format_coordinate

# --- Data layer ---
from .data import LocationSource, OverlayDataError, build_location_service, get_active_source, get_repository

# --- Service layer ---
from .services import (
    LiveView,
    OccurrenceOverlayService,
    SampleTrail,
    TrackingSession,
    accuracy_figure,
    summarise_occurrences,
)

# --- UI components ---
from .sidebar import TrackingSelection, render_tracking_sidebar

__all__ = [
    "DEFAULT_CENTER",
    "DEFAULT_GENUS",
    "DEFAULT_OCCURRENCE_LIMIT",
    "DEFAULT_SPECIES",
    "DEFAULT_ZOOM",
    "FOLLOW_ZOOM",
    "LiveView",
    "LocationSource",
    "MAP_HEIGHT",
    "OCCURRENCES_GROUP",
    "OccurrenceOverlayService",
    "OverlayDataError",
    "PLOTLY_LAYOUT_DEFAULTS",
    "POSITION_GROUP",
    "REFRESH_INTERVAL",
    "SampleTrail",
    "TrackingSelection",
    "TrackingSession",
    "accuracy_figure",
    "build_location_service",
    "format_accuracy",
    "format_age",
    "format_coordinate",
    "get_active_source",
    "get_repository",
    "render_tracking_sidebar",
    "summarise_occurrences",
]
