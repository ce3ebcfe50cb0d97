"""Service layer: business logic for the geotrack dashboard."""

from .overlay import OccurrenceOverlayService, OverlaySummary, summarise_occurrences
from .runner import LoopRunner
from .tracking import LiveView, TrackingSession
from .trail import SampleTrail, accuracy_figure

__all__ = [
    "LiveView",
    "LoopRunner",
    "OccurrenceOverlayService",
    "OverlaySummary",
    "SampleTrail",
    "TrackingSession",
    "accuracy_figure",
    "summarise_occurrences",
]
