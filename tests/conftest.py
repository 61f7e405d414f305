from __future__ import annotations

from typing import Any, Dict, List, Optional

import pytest

from flight_planner.core.models import Aircraft, Airport
from flight_planner.providers.airports import BuiltinAirportDirectory


class FakeHTTP:
    """Stands in for HTTPClient: canned responses per URL, or an error to raise."""

    def __init__(self, text: Optional[str] = None, json_data: Any = None, error: Optional[Exception] = None):
        self.text = text
        self.json_data = json_data
        self.error = error
        self.calls: List[Dict[str, Any]] = []

    def get_text(self, url, params=None, timeout_s=None):
        self.calls.append({"url": url, "params": params})
        if self.error:
            raise self.error
        return self.text

    def get_json(self, url, params=None, timeout_s=None):
        self.calls.append({"url": url, "params": params})
        if self.error:
            raise self.error
        return self.json_data


class FakeRedis:
    def __init__(self):
        self.store: Dict[str, str] = {}
        self.ttls: Dict[str, int] = {}

    def get(self, key):
        return self.store.get(key)

    def set(self, key, value, ex=None):
        self.store[key] = value
        self.ttls[key] = ex

    def ping(self):
        return True


@pytest.fixture
def directory() -> BuiltinAirportDirectory:
    return BuiltinAirportDirectory()


@pytest.fixture
def jfk(directory) -> Airport:
    return directory.lookup("KJFK")


@pytest.fixture
def lhr(directory) -> Airport:
    return directory.lookup("EGLL")


@pytest.fixture
def b738() -> Aircraft:
    return Aircraft(icao="B738", name="Boeing 737-800", cruise_speed_kt=450, fuel_burn_lbs_hr=5000, max_altitude_ft=41000)


def make_airport(icao: str, lat: float, lon: float, **kw) -> Airport:
    return Airport(icao=icao, name=kw.pop("name", icao), lat=lat, lon=lon, **kw)
