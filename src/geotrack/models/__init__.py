"""geotrack data models."""

from geotrack.models.ip_location import IpLocation
from geotrack.models.occurrence import Occurrence, OccurrencePage
from geotrack.models.position import Fix, PositionOptions, PositionSample

__all__ = [
    "Fix",
    "IpLocation",
    "Occurrence",
    "OccurrencePage",
    "PositionOptions",
    "PositionSample",
]
