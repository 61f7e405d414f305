"""Shared collaborators for the HTTP layer (FastAPI dependencies).

Each collaborator is built once per process and owned here, not by the
engine; tests swap them through ``app.dependency_overrides``.
"""
from __future__ import annotations

import threading
from typing import Any, Dict

from flight_planner.cache.redis_client import RedisCache
from flight_planner.config import settings
from flight_planner.contracts.route_contract import RoutePolicy
from flight_planner.providers.aircraft import AircraftCatalog
from flight_planner.providers.airports import build_directory
from flight_planner.providers.base import AirportDirectory
from flight_planner.providers.weather import WeatherService

_instances: Dict[str, Any] = {}
_lock = threading.RLock()


def _once(name: str, factory):
    # reentrant: get_directory and get_weather build the cache under the lock
    with _lock:
        if name not in _instances:
            _instances[name] = factory()
        return _instances[name]


def get_cache() -> RedisCache:
    return _once("cache", lambda: RedisCache.from_url(settings.redis_url))


def get_directory() -> AirportDirectory:
    return _once("directory", lambda: build_directory(settings.airport_sources, settings, cache=get_cache()))


def get_catalog() -> AircraftCatalog:
    return _once("catalog", AircraftCatalog)


def get_weather() -> WeatherService:
    return _once("weather", lambda: WeatherService.from_settings(settings, cache=get_cache()))


def get_policy() -> RoutePolicy:
    return RoutePolicy.from_settings(settings)
