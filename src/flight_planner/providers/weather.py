"""METAR/TAF passthrough from aviationweather.gov. Raw text is never parsed."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, List, Optional

from requests.exceptions import RequestException

from flight_planner.cache import keys
from flight_planner.cache.redis_client import RedisCache
from flight_planner.providers.http import HTTPClient

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class WeatherBriefing:
    departure_metar: Optional[str] = None
    arrival_metar: Optional[str] = None


def _no_metar(icao: str) -> List[dict]:
    return [{"rawOb": f"No METAR available for {icao}"}]


class WeatherService:
    def __init__(
        self,
        base_url: str = "https://aviationweather.gov/api/data",
        http: Optional[HTTPClient] = None,
        cache: Optional[RedisCache] = None,
        ttl_metar: int = 600,
        ttl_taf: int = 1800,
    ):
        self.base_url = base_url.rstrip("/")
        self.http = http or HTTPClient()
        self.cache = cache or RedisCache(None)
        self.ttl_metar = ttl_metar
        self.ttl_taf = ttl_taf

    @classmethod
    def from_settings(cls, settings=None, cache: Optional[RedisCache] = None) -> "WeatherService":
        if settings is None:
            from flight_planner.config import settings
        return cls(
            base_url=settings.weather_api_base,
            http=HTTPClient.from_settings(settings),
            cache=cache,
            ttl_metar=settings.ttl_metar,
            ttl_taf=settings.ttl_taf,
        )

    def _fetch(self, product: str, icao: str, cache_key: str, ttl: int) -> Optional[List[Any]]:
        cached = self.cache.get_json(cache_key)
        if cached is not None:
            return cached
        try:
            data = self.http.get_json(f"{self.base_url}/{product}", params={"ids": icao, "format": "json"})
        except (RequestException, RuntimeError, ValueError) as exc:
            log.warning("%s fetch failed for %s: %s", product.upper(), icao, exc)
            return None
        if isinstance(data, dict):
            data = [data]
        if not isinstance(data, list):
            return None
        if data:
            self.cache.set_json(cache_key, data, ttl)
        return data

    def metar(self, icao: str) -> List[Any]:
        icao = icao.strip().upper()
        data = self._fetch("metar", icao, keys.metar(icao), self.ttl_metar)
        return data if data else _no_metar(icao)

    def taf(self, icao: str) -> List[Any]:
        icao = icao.strip().upper()
        return self._fetch("taf", icao, keys.taf(icao), self.ttl_taf) or []

    def raw_metar(self, icao: str) -> str:
        first = self.metar(icao)[0]
        if isinstance(first, dict):
            return str(first.get("rawOb") or f"No METAR available for {icao.upper()}")
        return str(first)

    def briefing(self, departure: str, arrival: str) -> WeatherBriefing:
        return WeatherBriefing(
            departure_metar=self.raw_metar(departure),
            arrival_metar=self.raw_metar(arrival),
        )
