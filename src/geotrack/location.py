"""Location services the acquisition loop can poll."""

from __future__ import annotations

import itertools
from abc import ABC, abstractmethod
from collections.abc import Iterable
from pathlib import Path

import pandas as pd
from pydantic import ValidationError

from geotrack._http import AsyncTransport
from geotrack.exceptions import (
    GeotrackAPIError,
    GeotrackConnectionError,
    GeotrackTimeoutError,
    GeotrackValidationError,
    LocationPermissionDenied,
    LocationTimeout,
    LocationUnavailable,
)
from geotrack.models.ip_location import IpLocation
from geotrack.models.position import Fix, PositionOptions

IPAPI_BASE_URL = "https://ipapi.co"
IP_ACCURACY_M = 5000.0  # IP geolocation is city-level at best


class LocationService(ABC):
    """Source of the device's current position."""

    @abstractmethod
    async def get_current_position(self, options: PositionOptions) -> Fix:
        """Return a fix or raise a :class:`~geotrack.exceptions.LocationError`."""

    async def close(self) -> None:
        """Release any held resources."""


class IpLocationService(LocationService):
    """Approximate position of this host from an IP geolocation API.

    ``high_accuracy`` has no effect here; the reported accuracy is the fixed
    ``accuracy_m`` radius.
    """

    def __init__(
        self,
        base_url: str = IPAPI_BASE_URL,
        accuracy_m: float = IP_ACCURACY_M,
        transport: AsyncTransport | None = None,
    ) -> None:
        self._transport = transport or AsyncTransport(base_url=base_url)
        self.accuracy_m = accuracy_m

    async def get_current_position(self, options: PositionOptions) -> Fix:
        headers = {"Cache-Control": "no-cache"} if options.maximum_age == 0 else None
        try:
            data = await self._transport.get("/json/", headers=headers, timeout=options.timeout)
        except GeotrackTimeoutError as exc:
            raise LocationTimeout(str(exc)) from exc
        except GeotrackConnectionError as exc:
            raise LocationUnavailable(str(exc)) from exc
        except GeotrackValidationError as exc:
            raise LocationUnavailable(f"unexpected lookup response: {exc}") from exc
        except GeotrackAPIError as exc:
            if exc.status_code == 403:
                raise LocationPermissionDenied(exc.message) from exc
            raise LocationUnavailable(str(exc)) from exc

        try:
            located = IpLocation.model_validate(data)
        except ValidationError as exc:
            raise LocationUnavailable(f"unexpected lookup response: {exc}") from exc
        if located.error or located.latitude is None or located.longitude is None:
            raise LocationUnavailable(located.reason or "lookup returned no coordinates")
        return Fix(
            latitude=located.latitude,
            longitude=located.longitude,
            accuracy=self.accuracy_m,
        )

    async def close(self) -> None:
        await self._transport.close()


class ReplayLocationService(LocationService):
    """Replays a recorded track, one entry per request, cycling forever.

    ``None`` entries replay as a position the service could not determine.
    """

    def __init__(self, track: Iterable[Fix | None]) -> None:
        self.track = list(track)
        if not self.track:
            raise ValueError("replay track is empty")
        self._cursor = itertools.cycle(self.track)

    @classmethod
    def from_csv(cls, path: str | Path, default_accuracy: float = 10.0) -> ReplayLocationService:
        """Load ``latitude,longitude[,accuracy]`` rows. Rows with blank coordinates replay as failures."""
        frame = pd.read_csv(path)
        missing = {"latitude", "longitude"} - set(frame.columns)
        if missing:
            raise ValueError(f"{path}: missing column(s) {sorted(missing)}")
        if "accuracy" not in frame.columns:
            frame["accuracy"] = default_accuracy

        track: list[Fix | None] = []
        for row in frame.itertuples(index=False):
            if pd.isna(row.latitude) or pd.isna(row.longitude):
                track.append(None)
                continue
            accuracy = default_accuracy if pd.isna(row.accuracy) else float(row.accuracy)
            track.append(Fix(latitude=float(row.latitude), longitude=float(row.longitude), accuracy=accuracy))
        return cls(track)

    async def get_current_position(self, options: PositionOptions) -> Fix:
        entry = next(self._cursor)
        if entry is None:
            raise LocationUnavailable("no fix in recorded track")
        return entry
