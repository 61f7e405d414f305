"""Redis key naming conventions for the flight-planner cache layer."""
from __future__ import annotations

import hashlib

_PREFIX = "fp"


# ── Airports ─────────────────────────────────────────────────────────────

def airports_csv(url: str) -> str:
    """Key for the raw OurAirports CSV (URL-based)."""
    h = hashlib.sha256(url.encode()).hexdigest()[:16]
    return f"{_PREFIX}:airports:csv:{h}"


# ── Weather ──────────────────────────────────────────────────────────────

def metar(icao: str) -> str:
    return f"{_PREFIX}:wx:metar:{icao.upper()}"


def taf(icao: str) -> str:
    return f"{_PREFIX}:wx:taf:{icao.upper()}"
