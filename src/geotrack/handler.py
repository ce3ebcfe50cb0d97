"""Keeps the "current position" annotation on a map in sync with the latest sample."""

from __future__ import annotations

import logging

from geotrack.canvas import MapCanvas
from geotrack.models.position import PositionSample

logger = logging.getLogger(__name__)

POSITION_GROUP = "pos"


def format_number(value: float) -> str:
    """Print a coordinate or radius without trailing zeros (40.0 -> '40')."""
    text = f"{value:.6f}".rstrip("0").rstrip(".")
    return "0" if text == "-0" else text


def format_popup(sample: PositionSample) -> str:
    """HTML popup text describing a successful sample."""
    return (
        "My location is:<br>"
        f"{format_number(sample.longitude)}, Longitude<br>"
        f"{format_number(sample.latitude)}, Latitude<br>"
        "My accuracy is:<br>"
        f"{format_number(sample.accuracy)}, meters"
    )


class MapUpdateHandler:
    """Redraws one marker and one accuracy circle per successful sample.

    Failed samples leave the map untouched. A sample identical to the last one
    handled is ignored, so a rerun that re-reads the same cell value is free.
    """

    def __init__(self, canvas: MapCanvas, group: str = POSITION_GROUP) -> None:
        self.canvas = canvas
        self.group = group
        self._last: PositionSample | None = None

    @property
    def last_drawn(self) -> PositionSample | None:
        """The sample currently shown on the map, if any."""
        return self._last

    def __call__(self, sample: PositionSample) -> None:
        self.handle(sample)

    def handle(self, sample: PositionSample | None) -> bool:
        """Apply *sample* to the canvas. Returns True if the map was redrawn."""
        if sample is None or not sample.success:
            return False
        if sample == self._last:
            return False

        self.canvas.clear_group(self.group)
        self.canvas.add_marker(
            sample.latitude, sample.longitude, format_popup(sample), self.group,
        )
        self.canvas.add_circle(
            sample.latitude, sample.longitude, sample.accuracy, self.group,
        )
        self._last = sample
        logger.debug(
            "redrew %s at %.6f, %.6f (±%.1f m)",
            self.group, sample.latitude, sample.longitude, sample.accuracy,
        )
        return True
