"""Timing configuration for the acquisition loop."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from geotrack.models.position import PositionOptions

DEFAULT_SETTLE_DELAY = 1.1  # seconds between a successful fix and its publication
DEFAULT_RETRY_DELAY = 2.0  # seconds between the end of one attempt and the next


class LoopTiming(BaseModel):
    """Delays and request options used by :class:`~geotrack.acquisition.AcquisitionLoop`."""

    model_config = ConfigDict(frozen=True)

    settle_delay: float = Field(default=DEFAULT_SETTLE_DELAY, ge=0)
    retry_delay: float = Field(default=DEFAULT_RETRY_DELAY, ge=0)
    options: PositionOptions = Field(default_factory=PositionOptions)
