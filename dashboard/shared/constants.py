"""Shared constants for the geotrack dashboard."""

from __future__ import annotations

ACCENT_BLUE = "#2A81CB"

POSITION_GROUP = "pos"
OCCURRENCES_GROUP = "Occurrences"

# Live map view
DEFAULT_CENTER = (39.5, -98.35)
DEFAULT_ZOOM = 4
FOLLOW_ZOOM = 15
MAP_HEIGHT = 520

# How often the live map fragment re-reads the position cell (seconds)
REFRESH_INTERVAL = 1.0

# Samples kept for the accuracy chart
TRAIL_LENGTH = 120

SAMPLE_TRACK_CSV = "data/sample_track.csv"

# Overlay walkthrough defaults: a native sunflower
DEFAULT_GENUS = "Heliomeris"
DEFAULT_SPECIES = "multiflora"
DEFAULT_OCCURRENCE_LIMIT = 300

PLOTLY_LAYOUT_DEFAULTS = dict(
    paper_bgcolor="rgba(0,0,0,0)",
    plot_bgcolor="rgba(0,0,0,0)",
    font_color="#F0F0F0",
    margin=dict(l=40, r=20, t=40, b=40),
)
