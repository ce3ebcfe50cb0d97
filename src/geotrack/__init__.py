"""geotrack: live device position on a web map."""

from geotrack.acquisition import AcquisitionLoop, LoopState
from geotrack.canvas import FoliumCanvas, MapCanvas, build_base_map
from geotrack.cell import PositionCell
from geotrack.config import LoopTiming
from geotrack.exceptions import (
    GeotrackAPIError,
    GeotrackConnectionError,
    GeotrackError,
    GeotrackTimeoutError,
    GeotrackValidationError,
    LocationError,
    LocationPermissionDenied,
    LocationTimeout,
    LocationUnavailable,
)
from geotrack.handler import POSITION_GROUP, MapUpdateHandler
from geotrack.location import IpLocationService, LocationService, ReplayLocationService
from geotrack.models import Fix, Occurrence, PositionOptions, PositionSample
from geotrack.occurrences import OccurrenceClient, clean_occurrences

__all__ = [
    "AcquisitionLoop",
    "Fix",
    "FoliumCanvas",
    "GeotrackAPIError",
    "GeotrackConnectionError",
    "GeotrackError",
    "GeotrackTimeoutError",
    "GeotrackValidationError",
    "IpLocationService",
    "LocationError",
    "LocationPermissionDenied",
    "LocationService",
    "LocationTimeout",
    "LocationUnavailable",
    "LoopState",
    "LoopTiming",
    "MapCanvas",
    "MapUpdateHandler",
    "Occurrence",
    "OccurrenceClient",
    "POSITION_GROUP",
    "PositionCell",
    "PositionOptions",
    "PositionSample",
    "ReplayLocationService",
    "build_base_map",
    "clean_occurrences",
]

__version__ = "0.1.0"
