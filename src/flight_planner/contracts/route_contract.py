# path: flight-planner/src/flight_planner/contracts/route_contract.py

from __future__ import annotations
from dataclasses import dataclass
from typing import Literal

NamingPolicy = Literal["pattern", "grid", "sequential"]


@dataclass(frozen=True)
class RoutePolicy:
    naming: NamingPolicy = "pattern"
    reserve_factor: float = 1.15  # 15% reserve
    nm_per_waypoint: float = 200.0
    min_waypoints: int = 3
    max_waypoints: int = 10
    default_cruise_speed_kt: float = 450.0
    default_fuel_burn_lbs_hr: float = 5000.0
    default_cruise_altitude_ft: int = 35000

    def __post_init__(self) -> None:
        for name in ("nm_per_waypoint", "default_cruise_speed_kt", "default_fuel_burn_lbs_hr", "default_cruise_altitude_ft"):
            if getattr(self, name) <= 0:
                raise ValueError(f"{name} must be positive, got {getattr(self, name)}")
        if not 0 <= self.min_waypoints <= self.max_waypoints:
            raise ValueError("waypoint bounds must satisfy 0 <= min_waypoints <= max_waypoints")

    @classmethod
    def from_settings(cls, settings=None) -> "RoutePolicy":
        if settings is None:
            from flight_planner.config import settings
        return cls(
            naming=settings.waypoint_naming,
            reserve_factor=settings.reserve_factor,
            nm_per_waypoint=settings.nm_per_waypoint,
            min_waypoints=settings.min_waypoints,
            max_waypoints=settings.max_waypoints,
            default_cruise_speed_kt=settings.default_cruise_speed_kt,
            default_fuel_burn_lbs_hr=settings.default_fuel_burn_lbs_hr,
            default_cruise_altitude_ft=settings.default_cruise_altitude_ft,
        )
