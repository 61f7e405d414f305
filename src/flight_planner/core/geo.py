"""Great-circle geometry between two coordinates."""
from __future__ import annotations

from math import atan2, cos, degrees, radians, sin, sqrt

from flight_planner.core.models import Coordinate

EARTH_RADIUS_NM = 3440.065


def great_circle_nm(a: Coordinate, b: Coordinate) -> float:
    """Haversine distance in nautical miles.

    Inputs are not range-checked; out-of-range coordinates give a
    mathematically defined but meaningless result.
    """
    lat1r, lon1r, lat2r, lon2r = map(radians, [a.lat, a.lon, b.lat, b.lon])
    dlat = lat2r - lat1r
    dlon = lon2r - lon1r
    h = sin(dlat / 2) ** 2 + cos(lat1r) * cos(lat2r) * sin(dlon / 2) ** 2
    return EARTH_RADIUS_NM * 2 * atan2(sqrt(h), sqrt(1 - h))


def initial_bearing_deg(a: Coordinate, b: Coordinate) -> float:
    """Initial bearing (degrees clockwise from true north) in [0, 360)."""
    lat1r, lon1r, lat2r, lon2r = map(radians, [a.lat, a.lon, b.lat, b.lon])
    dlon = lon2r - lon1r
    y = sin(dlon) * cos(lat2r)
    x = cos(lat1r) * sin(lat2r) - sin(lat1r) * cos(lat2r) * cos(dlon)
    deg = ((degrees(atan2(y, x)) % 360.0) + 360.0) % 360.0
    # -1e-15 % 360 rounds to 360.0
    return 0.0 if deg >= 360.0 else deg


def interpolate(a: Coordinate, b: Coordinate, frac: float) -> Coordinate:
    """Linear interpolation in lat/lon space (frac in [0,1])."""
    return Coordinate(
        lat=a.lat + (b.lat - a.lat) * frac,
        lon=a.lon + (b.lon - a.lon) * frac,
    )
