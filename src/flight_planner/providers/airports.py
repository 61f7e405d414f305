"""Airport directories: built-in table, OurAirports CSV, and a fallback chain."""
from __future__ import annotations

import csv
import io
import logging
import threading
import time
from typing import Callable, Dict, Iterable, List, Optional

from requests.exceptions import RequestException

from flight_planner.cache import keys
from flight_planner.cache.redis_client import RedisCache
from flight_planner.core.models import Airport
from flight_planner.providers.base import AirportDirectory
from flight_planner.providers.http import HTTPClient

log = logging.getLogger(__name__)

_KEEP_TYPES = ("large_airport", "medium_airport", "small_airport")


def _matches(apt: Airport, q: str) -> bool:
    haystack = " ".join(x for x in (apt.icao, apt.iata, apt.name, apt.city) if x).upper()
    return q in haystack


def _search(airports: Iterable[Airport], query: str, limit: int) -> List[Airport]:
    q = (query or "").strip().upper()
    if len(q) < 2:
        return []
    out: List[Airport] = []
    for apt in airports:
        if _matches(apt, q):
            out.append(apt)
            if len(out) >= limit:
                break
    return out


def _index(airports: Iterable[Airport]) -> Dict[str, Airport]:
    """Index by IATA and ICAO code; ICAO wins on collision."""
    idx: Dict[str, Airport] = {}
    for apt in airports:
        if apt.iata:
            idx.setdefault(apt.iata.upper(), apt)
    for apt in airports:
        idx[apt.icao.upper()] = apt
    return idx


# ---------------------------------------------------------------------------
# Built-in table
# ---------------------------------------------------------------------------

BUILTIN_AIRPORTS: List[Airport] = [
    Airport(icao="KJFK", iata="JFK", name="John F Kennedy Intl", city="New York", country="US",
            lat=40.6398, lon=-73.7789, elevation_ft=13, type="large_airport"),
    Airport(icao="EGLL", iata="LHR", name="London Heathrow", city="London", country="GB",
            lat=51.4706, lon=-0.4619, elevation_ft=83, type="large_airport"),
    Airport(icao="LFPG", iata="CDG", name="Paris Charles de Gaulle", city="Paris", country="FR",
            lat=49.0097, lon=2.5479, elevation_ft=392, type="large_airport"),
    Airport(icao="EDDF", iata="FRA", name="Frankfurt am Main", city="Frankfurt", country="DE",
            lat=50.0333, lon=8.5706, elevation_ft=364, type="large_airport"),
    Airport(icao="LTFM", iata="IST", name="Istanbul Airport", city="Istanbul", country="TR",
            lat=41.2619, lon=28.7414, elevation_ft=325, type="large_airport"),
    Airport(icao="LTBA", iata="ISL", name="Istanbul Ataturk", city="Istanbul", country="TR",
            lat=40.9769, lon=28.8146, elevation_ft=163, type="large_airport"),
    Airport(icao="OMDB", iata="DXB", name="Dubai Intl", city="Dubai", country="AE",
            lat=25.2528, lon=55.3644, elevation_ft=62, type="large_airport"),
    Airport(icao="KLAX", iata="LAX", name="Los Angeles Intl", city="Los Angeles", country="US",
            lat=33.9425, lon=-118.408, elevation_ft=125, type="large_airport"),
]


class BuiltinAirportDirectory(AirportDirectory):
    """Small static table so planning works offline."""

    def __init__(self, airports: Optional[List[Airport]] = None):
        self.airports = list(airports if airports is not None else BUILTIN_AIRPORTS)
        self._idx = _index(self.airports)

    def lookup(self, code: str) -> Optional[Airport]:
        return self._idx.get((code or "").strip().upper())

    def search(self, query: str, limit: int = 50) -> List[Airport]:
        return _search(self.airports, query, limit)


# ---------------------------------------------------------------------------
# OurAirports CSV
# ---------------------------------------------------------------------------

def _float(v: Optional[str], default: float = 0.0) -> float:
    try:
        return float(v) if v not in (None, "") else default
    except ValueError:
        return default


def parse_ourairports_csv(text: str) -> List[Airport]:
    """Parse the OurAirports ``airports.csv`` dump, keeping airfields with a code."""
    out: List[Airport] = []
    for row in csv.DictReader(io.StringIO(text)):
        if row.get("type") not in _KEEP_TYPES:
            continue
        icao = (row.get("ident") or row.get("gps_code") or "").strip()
        if len(icao) < 3:
            continue
        if row.get("latitude_deg") in (None, "") or row.get("longitude_deg") in (None, ""):
            continue
        out.append(
            Airport(
                icao=icao,
                iata=(row.get("iata_code") or "").strip() or None,
                name=row.get("name") or "",
                city=row.get("municipality") or None,
                country=row.get("iso_country") or None,
                lat=_float(row.get("latitude_deg")),
                lon=_float(row.get("longitude_deg")),
                elevation_ft=_float(row.get("elevation_ft")),
                type=row.get("type"),
            )
        )
    return out


class OurAirportsDirectory(AirportDirectory):
    """
    Worldwide directory backed by the OurAirports CSV.

    The parsed list lives on the instance and is refreshed after ``ttl_s``.
    After a failed download the directory waits ``retry_s`` before trying
    again, serving the stale list (or nothing) meanwhile.
    The raw CSV is also mirrored in Redis (when configured) so restarts
    don't re-download it.
    """

    def __init__(
        self,
        url: str,
        http: Optional[HTTPClient] = None,
        cache: Optional[RedisCache] = None,
        ttl_s: int = 3600,
        retry_s: int = 300,
        clock: Callable[[], float] = time.time,
    ):
        self.url = url
        self.http = http or HTTPClient()
        self.cache = cache or RedisCache(None)
        self.ttl_s = ttl_s
        self.retry_s = retry_s
        self.clock = clock

        self._airports: Optional[List[Airport]] = None
        self._idx: Dict[str, Airport] = {}
        self._loaded_at: Optional[float] = None
        self._failed_at: Optional[float] = None
        self._lock = threading.Lock()

    def _fresh(self) -> bool:
        return self._loaded_at is not None and (self.clock() - self._loaded_at) < self.ttl_s

    def _backing_off(self) -> bool:
        return self._failed_at is not None and (self.clock() - self._failed_at) < self.retry_s

    def _fetch_csv(self) -> Optional[str]:
        ck = keys.airports_csv(self.url)
        text = self.cache.get_text(ck)
        if text:
            return text
        try:
            log.info("Downloading airports database: %s", self.url)
            text = self.http.get_text(self.url)
        except (RequestException, RuntimeError) as exc:
            log.warning("Airport database download failed: %s", exc)
            return None
        self.cache.set_text(ck, text, self.ttl_s)
        return text

    def load(self) -> List[Airport]:
        with self._lock:
            if self._airports is not None and self._fresh():
                return self._airports
            if self._backing_off():
                return self._airports or []

            text = self._fetch_csv()
            if text is None:
                self._failed_at = self.clock()
                return self._airports or []

            self._airports = parse_ourairports_csv(text)
            self._idx = _index(self._airports)
            self._loaded_at = self.clock()
            self._failed_at = None
            log.info("Loaded %d airports into directory", len(self._airports))
            return self._airports

    def lookup(self, code: str) -> Optional[Airport]:
        self.load()
        return self._idx.get((code or "").strip().upper())

    def search(self, query: str, limit: int = 50) -> List[Airport]:
        return _search(self.load(), query, limit)


# ---------------------------------------------------------------------------
# Chain
# ---------------------------------------------------------------------------

class ChainDirectory(AirportDirectory):
    """First hit wins for lookups; searches are merged, de-duplicated by ICAO."""

    def __init__(self, directories: List[AirportDirectory]):
        self.directories = directories

    def lookup(self, code: str) -> Optional[Airport]:
        for d in self.directories:
            apt = d.lookup(code)
            if apt is not None:
                return apt
        return None

    def search(self, query: str, limit: int = 50) -> List[Airport]:
        seen = set()
        out: List[Airport] = []
        for d in self.directories:
            for apt in d.search(query, limit):
                if apt.icao in seen:
                    continue
                seen.add(apt.icao)
                out.append(apt)
                if len(out) >= limit:
                    return out
        return out


def build_directory(sources: str, settings=None, cache: Optional[RedisCache] = None) -> ChainDirectory:
    """
    Build a directory chain from a string like:
      "ourairports+builtin"
      "builtin"
    """
    if settings is None:
        from flight_planner.config import settings

    tokens = [t.strip().lower() for t in sources.split("+") if t.strip()]
    if not tokens:
        tokens = ["builtin"]

    directories: List[AirportDirectory] = []
    for t in tokens:
        if t == "ourairports":
            directories.append(
                OurAirportsDirectory(
                    settings.airports_csv_url,
                    http=HTTPClient.from_settings(settings),
                    cache=cache,
                    ttl_s=settings.ttl_airports,
                    retry_s=settings.airports_retry_s,
                )
            )
        elif t == "builtin":
            directories.append(BuiltinAirportDirectory())
        else:
            raise ValueError(f"Unknown airport source: '{t}' (supported: ourairports, builtin)")

    return ChainDirectory(directories)
