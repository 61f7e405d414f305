"""Centralized settings for the flight planner."""
from __future__ import annotations

from typing import Literal

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    model_config = {"env_prefix": "FLIGHT_PLANNER_"}

    # Redis: empty string means disabled
    redis_url: str = ""

    # Upstream data sources
    airports_csv_url: str = "https://davidmegginson.github.io/ourairports-data/airports.csv"
    airport_sources: str = "ourairports+builtin"
    weather_api_base: str = "https://aviationweather.gov/api/data"
    http_timeout_s: int = 10
    http_tries: int = 3

    # TTL values in seconds for each cached data type
    ttl_airports: int = 3600          # 1 h, OurAirports CSV
    ttl_metar: int = 600              # 10 min
    ttl_taf: int = 1800               # 30 min
    airports_retry_s: int = 300       # wait after a failed CSV download

    # Route policy
    waypoint_naming: Literal["pattern", "grid", "sequential"] = "pattern"
    nm_per_waypoint: float = Field(default=200.0, gt=0)
    min_waypoints: int = Field(default=3, ge=0)
    max_waypoints: int = Field(default=10, ge=0)
    reserve_factor: float = Field(default=1.15, ge=1.10, le=1.20)

    # Fallbacks used when aircraft data is missing or non-positive
    default_cruise_speed_kt: float = Field(default=450.0, gt=0)
    default_fuel_burn_lbs_hr: float = Field(default=5000.0, gt=0)
    default_cruise_altitude_ft: int = Field(default=35000, gt=0)

    # Exporters
    xplane_airac_cycle: str = "2401"

    # API
    cors_origins: str = "*"

    @model_validator(mode="after")
    def _check_waypoint_bounds(self) -> "Settings":
        if self.min_waypoints > self.max_waypoints:
            raise ValueError("min_waypoints must not exceed max_waypoints")
        return self


settings = Settings()
