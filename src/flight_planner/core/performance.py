from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from flight_planner.contracts.route_contract import RoutePolicy
from flight_planner.core.models import Aircraft


def _positive(v: Optional[float]) -> Optional[float]:
    try:
        f = float(v) if v is not None else None
    except (TypeError, ValueError):
        return None
    if f is None or f <= 0:
        return None
    return f


@dataclass(frozen=True)
class Performance:
    cruise_speed_kt: float
    fuel_burn_lbs_hr: float


def resolve_performance(
    aircraft: Optional[Aircraft],
    cruise_speed: Optional[float] = None,
    policy: Optional[RoutePolicy] = None,
) -> Performance:
    """
    Pick speed/burn for the estimate. Never fails:
      speed = explicit cruise_speed > aircraft cruise speed > policy default
      burn  = aircraft fuel burn > policy default
    Zero, negative and missing values count as absent.
    """
    policy = policy or RoutePolicy()
    ac_speed = aircraft.cruise_speed_kt if aircraft else None
    ac_burn = aircraft.fuel_burn_lbs_hr if aircraft else None

    speed = _positive(cruise_speed) or _positive(ac_speed) or policy.default_cruise_speed_kt
    burn = _positive(ac_burn) or policy.default_fuel_burn_lbs_hr
    return Performance(cruise_speed_kt=speed, fuel_burn_lbs_hr=burn)


def flight_time_hours(distance_nm: float, cruise_speed_kt: float) -> float:
    return distance_nm / cruise_speed_kt


def fuel_required_lbs(fuel_burn_lbs_hr: float, hours: float, reserve_factor: float = 1.15) -> float:
    return fuel_burn_lbs_hr * hours * reserve_factor
