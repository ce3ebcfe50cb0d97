"""Source-agnostic overlay data error."""

from __future__ import annotations


class OverlayDataError(Exception):
    """Overlay data fetch error. UI catches only this."""
