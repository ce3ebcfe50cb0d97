"""Formatting helpers for the geotrack dashboard."""

from __future__ import annotations

from datetime import datetime, timezone


def format_coordinate(latitude: float | None, longitude: float | None) -> str:
    """Format as '40.00000° N, 105.00000° W' or '—' if unknown."""
    if latitude is None or longitude is None:
        return "—"
    ns = "N" if latitude >= 0 else "S"
    ew = "E" if longitude >= 0 else "W"
    return f"{abs(latitude):.5f}° {ns}, {abs(longitude):.5f}° {ew}"


def format_accuracy(meters: float | None) -> str:
    """Format an accuracy radius as '12 m' or '5.0 km'."""
    if meters is None:
        return "—"
    if meters >= 1000:
        return f"{meters / 1000:.1f} km"
    return f"{meters:.0f} m"


def format_age(timestamp: datetime | None, now: datetime | None = None) -> str:
    """Format how long ago *timestamp* was, e.g. '3s ago' or '2m 05s ago'."""
    if timestamp is None:
        return "—"
    now = now or datetime.now(timezone.utc)
    seconds = max(0, int((now - timestamp).total_seconds()))
    if seconds < 60:
        return f"{seconds}s ago"
    mins, secs = divmod(seconds, 60)
    return f"{mins}m {secs:02d}s ago"
