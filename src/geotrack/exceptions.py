"""Custom exceptions for the geotrack library."""

from __future__ import annotations


class GeotrackError(Exception):
    """Base exception for all geotrack errors."""


class GeotrackConnectionError(GeotrackError):
    """Raised when the client cannot connect to a remote API."""


class GeotrackTimeoutError(GeotrackError):
    """Raised when a request to a remote API times out."""


class GeotrackAPIError(GeotrackError):
    """Raised when a remote API returns an error response (4xx/5xx)."""

    def __init__(self, status_code: int, message: str) -> None:
        self.status_code = status_code
        self.message = message
        super().__init__(f"HTTP {status_code}: {message}")


class GeotrackValidationError(GeotrackError):
    """Raised when response data fails model validation."""


# ── Location acquisition ────────────────────────────────────────────────────


class LocationError(GeotrackError):
    """A location service could not produce a fix."""


class LocationPermissionDenied(LocationError):
    """The location service refused to share a position."""


class LocationUnavailable(LocationError):
    """The location service could not determine a position."""


class LocationTimeout(LocationError):
    """The position request did not complete within the timeout."""
