"""Waypoint generation: named airway chains or interpolated fixes."""
from __future__ import annotations

from math import floor
from typing import Dict, List, Optional, Tuple

from flight_planner.contracts.route_contract import NamingPolicy, RoutePolicy
from flight_planner.core.geo import interpolate
from flight_planner.core.models import Coordinate, Waypoint


# ---------------------------------------------------------------------------
# Known city-pair chains (approximate fix positions)
# ---------------------------------------------------------------------------

NAMED_ROUTES: Dict[str, List[Tuple[str, float, float]]] = {
    "KJFK-EGLL": [
        ("MERIT", 41.3819, -73.1369),
        ("PUT", 41.9561, -71.8136),
        ("TUSKY", 43.5633, -67.0000),
        ("49N050W", 49.0000, -50.0000),
        ("51N040W", 51.0000, -40.0000),
        ("52N030W", 52.0000, -30.0000),
        ("52N020W", 52.0000, -20.0000),
        ("MALOT", 53.0000, -15.0000),
        ("STU", 51.9933, -4.9906),
    ],
    "EGLL-LFPG": [
        ("DET", 51.3042, 0.5972),
        ("DVR", 51.1622, 1.3597),
        ("ABB", 50.1353, 1.8547),
    ],
    "LTFM-OMDB": [
        ("KUMRU", 40.1800, 33.4000),
        ("ERZ", 39.9600, 41.1700),
        ("TBZ", 38.1200, 46.2400),
        ("ISN", 32.6200, 51.6900),
        ("SYZ", 29.5400, 52.5900),
    ],
}

_CONSONANTS = "BCDFGHJKLMNPQRSTVWXYZ"
_VOWELS = "AEIOU"


def route_key(dep_code: str, arr_code: str) -> str:
    return f"{dep_code.strip().upper()}-{arr_code.strip().upper()}"


def waypoint_count(distance_nm: float, policy: Optional[RoutePolicy] = None) -> int:
    """One waypoint per ``nm_per_waypoint``, clamped to the policy floor/ceiling."""
    policy = policy or RoutePolicy()
    n = int(floor(distance_nm / policy.nm_per_waypoint))
    return max(policy.min_waypoints, min(n, policy.max_waypoints))


def named_route(key: str) -> Optional[List[Waypoint]]:
    """Look up ``key`` (or its reverse) in the named chain table.

    A reverse hit returns the chain reversed so it still runs
    departure -> arrival.
    """
    chain = NAMED_ROUTES.get(key)
    if chain is None:
        dep, _, arr = key.partition("-")
        rev = NAMED_ROUTES.get(f"{arr}-{dep}")
        if rev is None:
            return None
        chain = list(reversed(rev))
    return [Waypoint(name=n, lat=lat, lon=lon, source="named") for n, lat, lon in chain]


# ---------------------------------------------------------------------------
# Naming strategies
# ---------------------------------------------------------------------------

def pattern_name(lat: float, lon: float, index: int) -> str:
    """Five letters, consonant/vowel alternating, seeded by position and index."""
    lat_i = abs(floor(lat * 10))
    lon_i = abs(floor(lon * 10))
    seed = (lat_i + lon_i + index * 17) % len(_CONSONANTS)

    letters = []
    for i in range(5):
        if i % 2 == 0:
            letters.append(_CONSONANTS[(seed + i * 7) % len(_CONSONANTS)])
        else:
            letters.append(_VOWELS[(seed + i * 3) % len(_VOWELS)])
    return "".join(letters)


def grid_name(lat: float, lon: float) -> str:
    """Whole-degree grid label, e.g. ``52N030W``."""
    lat_d = int(round(lat))
    lon_d = int(round(lon))
    ns = "N" if lat_d >= 0 else "S"
    ew = "E" if lon_d >= 0 else "W"
    return f"{abs(lat_d):02d}{ns}{abs(lon_d):03d}{ew}"


def sequential_name(index: int) -> str:
    return f"WP{index:02d}"


def _name_for(naming: NamingPolicy, c: Coordinate, index: int) -> Tuple[str, str]:
    if naming == "grid":
        return grid_name(c.lat, c.lon), "synthetic"
    if naming == "sequential":
        return sequential_name(index), "interpolated"
    if naming == "pattern":
        return pattern_name(c.lat, c.lon, index), "synthetic"
    raise ValueError(f"Unknown waypoint naming policy: '{naming}' (supported: pattern, grid, sequential)")


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def generate_waypoints(
    start: Coordinate,
    end: Coordinate,
    key: str,
    count: int,
    naming: NamingPolicy = "pattern",
) -> List[Waypoint]:
    """
    Ordered waypoints from ``start`` to ``end``.

    A named chain for ``key`` (either direction) wins over interpolation.
    Otherwise ``count`` points sit at ``i / (count + 1)`` along the straight
    lat/lon line. Identical endpoints collapse every point onto the start.
    """
    named = named_route(key)
    if named is not None:
        return named

    out: List[Waypoint] = []
    for i in range(1, count + 1):
        c = interpolate(start, end, i / (count + 1))
        name, source = _name_for(naming, c, i)
        out.append(Waypoint(name=name, lat=c.lat, lon=c.lon, source=source))
    return out
