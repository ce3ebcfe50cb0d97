"""Shared sidebar rendering for location source and timing selection."""

from __future__ import annotations

from dataclasses import dataclass

import streamlit as st

from geotrack import LoopTiming, PositionOptions
from geotrack.config import DEFAULT_RETRY_DELAY, DEFAULT_SETTLE_DELAY

from .data.source import LocationSource, get_active_source


@dataclass(frozen=True)
class TrackingSelection:
    """Result of the tracking sidebar."""

    source: LocationSource
    timing: LoopTiming
    follow: bool

    @property
    def config_key(self) -> tuple:
        """Changes whenever the running loop has to be rebuilt."""
        return (self.source.value, self.timing.model_dump_json())


def render_tracking_sidebar() -> TrackingSelection:
    """Render source picker and loop timing controls in the sidebar."""
    sources = [s.value for s in LocationSource]
    st.sidebar.radio(
        "Location source",
        sources,
        index=sources.index(get_active_source().value),
        key="location_source",
        help="IP lookup locates this server; replay plays back a recorded track.",
    )
    source = get_active_source()

    follow = st.sidebar.toggle("Follow position", value=True)

    with st.sidebar.expander("Timing"):
        settle = st.number_input(
            "Settle delay (s)", min_value=0.0, max_value=30.0,
            value=DEFAULT_SETTLE_DELAY, step=0.1,
        )
        retry = st.number_input(
            "Retry delay (s)", min_value=0.0, max_value=120.0,
            value=DEFAULT_RETRY_DELAY, step=0.5,
        )
        timeout = st.number_input(
            "Request timeout (s)", min_value=0.5, max_value=60.0,
            value=5.0, step=0.5,
        )

    timing = LoopTiming(
        settle_delay=settle,
        retry_delay=retry,
        options=PositionOptions(timeout=timeout),
    )
    return TrackingSelection(source=source, timing=timing, follow=follow)
