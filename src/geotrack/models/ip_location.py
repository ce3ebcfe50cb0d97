"""IP geolocation lookup response model."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class IpLocation(BaseModel):
    """Approximate location of the caller's public IP address."""

    model_config = ConfigDict(frozen=True)

    ip: str | None = None
    city: str | None = None
    region: str | None = None
    country_name: str | None = None
    latitude: float | None = None
    longitude: float | None = None
    error: bool = False
    reason: str | None = None
