"""Geographic coordinates and great-circle distances."""

from __future__ import annotations

import math
from dataclasses import dataclass

EARTH_RADIUS_M = 6371000
_DEGREES_TO_RADIANS = 3.1415926535 / 180.0


@dataclass(frozen=True)
class Coordinates:
    """A point on the Earth's surface in degrees."""

    lat: float
    lng: float


def compute_distance(origin: Coordinates, destination: Coordinates) -> float:
    """Return the great-circle distance in metres between two points."""
    if origin == destination:
        return 0.0
    dr = _DEGREES_TO_RADIANS
    cosine = math.sin(origin.lat * dr) * math.sin(destination.lat * dr) + math.cos(
        origin.lat * dr
    ) * math.cos(destination.lat * dr) * math.cos(abs(origin.lng - destination.lng) * dr)
    try:
        return math.acos(cosine) * EARTH_RADIUS_M
    except ValueError:
        return math.nan