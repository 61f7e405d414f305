from __future__ import annotations

import logging
from typing import Optional

from flight_planner.contracts.route_contract import RoutePolicy
from flight_planner.core.geo import great_circle_nm, initial_bearing_deg
from flight_planner.core.models import Aircraft, Airport, RouteResult
from flight_planner.core.performance import flight_time_hours, fuel_required_lbs, resolve_performance
from flight_planner.core.waypoints import generate_waypoints, route_key, waypoint_count

log = logging.getLogger(__name__)


def _resolve_altitude(
    cruise_altitude: Optional[float],
    aircraft: Optional[Aircraft],
    policy: RoutePolicy,
) -> int:
    alt = cruise_altitude if cruise_altitude and cruise_altitude > 0 else policy.default_cruise_altitude_ft
    ceiling = aircraft.max_altitude_ft if aircraft else None
    if ceiling and ceiling > 0 and alt > ceiling:
        alt = ceiling
    return int(alt)


def compute_route(
    departure: Airport,
    arrival: Airport,
    aircraft: Optional[Aircraft] = None,
    cruise_altitude: Optional[float] = None,
    cruise_speed: Optional[float] = None,
    policy: Optional[RoutePolicy] = None,
) -> RouteResult:
    policy = policy or RoutePolicy()

    start, end = departure.coord, arrival.coord
    key = route_key(departure.icao, arrival.icao)

    distance = great_circle_nm(start, end)
    bearing = initial_bearing_deg(start, end)
    waypoints = generate_waypoints(start, end, key, waypoint_count(distance, policy), policy.naming)

    perf = resolve_performance(aircraft, cruise_speed, policy)
    hours = flight_time_hours(distance, perf.cruise_speed_kt)
    fuel = fuel_required_lbs(perf.fuel_burn_lbs_hr, hours, policy.reserve_factor)

    log.info(
        "Route %s: %.1f nm, brg %.1f, %d waypoints, %.2f h, %.0f lbs",
        key, distance, bearing, len(waypoints), hours, fuel,
    )

    return RouteResult(
        departure=departure,
        arrival=arrival,
        aircraft=aircraft,
        route_key=key,
        distance_nm=distance,
        bearing_deg=bearing,
        waypoints=tuple(waypoints),
        naming=policy.naming,
        cruise_altitude_ft=_resolve_altitude(cruise_altitude, aircraft, policy),
        cruise_speed_kt=perf.cruise_speed_kt,
        fuel_burn_lbs_hr=perf.fuel_burn_lbs_hr,
        flight_time_min=hours * 60.0,
        fuel_required_lbs=fuel,
        reserve_factor=policy.reserve_factor,
    )
