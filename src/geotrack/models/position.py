"""Position fixes and the samples published by the acquisition loop."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, model_validator


class PositionOptions(BaseModel):
    """Options sent with every position request."""

    model_config = ConfigDict(frozen=True)

    high_accuracy: bool = True
    timeout: float = Field(default=5.0, gt=0)  # seconds
    maximum_age: float = Field(default=0.0, ge=0)  # 0 never accepts a cached fix


class Fix(BaseModel):
    """A position reported by a location service."""

    model_config = ConfigDict(frozen=True)

    latitude: float = Field(ge=-90, le=90)
    longitude: float = Field(ge=-180, le=180)
    accuracy: float = Field(ge=0)  # meters
    timestamp: datetime | None = None


class PositionSample(BaseModel):
    """Outcome of one acquisition attempt.

    Coordinates are only present on success; a failed attempt carries
    ``success=False`` and optionally a short reason in ``error``.
    """

    model_config = ConfigDict(frozen=True)

    success: bool
    timestamp: datetime
    latitude: float | None = None
    longitude: float | None = None
    accuracy: float | None = None
    error: str | None = None

    @model_validator(mode="after")
    def _check_coordinates(self) -> PositionSample:
        coords = (self.latitude, self.longitude, self.accuracy)
        if self.success and any(c is None for c in coords):
            raise ValueError("a successful sample needs latitude, longitude and accuracy")
        if not self.success and any(c is not None for c in coords):
            raise ValueError("a failed sample carries no coordinates")
        return self

    @classmethod
    def from_fix(cls, fix: Fix, captured_at: datetime) -> PositionSample:
        """Build a success sample, preferring the platform's own capture time."""
        return cls(
            success=True,
            timestamp=fix.timestamp or captured_at,
            latitude=fix.latitude,
            longitude=fix.longitude,
            accuracy=fix.accuracy,
        )

    @classmethod
    def failure(cls, timestamp: datetime, error: str | None = None) -> PositionSample:
        return cls(success=False, timestamp=timestamp, error=error)
