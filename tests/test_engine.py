from __future__ import annotations

import math

import pytest
from pydantic import ValidationError

from conftest import make_airport
from flight_planner.contracts.route_contract import RoutePolicy
from flight_planner.core.engine import compute_route
from flight_planner.core.models import Aircraft, Waypoint
from flight_planner.providers.airports import BuiltinAirportDirectory


def test_jfk_lhr(jfk, lhr, b738):
    r = compute_route(jfk, lhr, b738, 35000)
    assert r.route_key == "KJFK-EGLL"
    assert r.distance_nm == pytest.approx(2991, abs=5)
    assert r.bearing_deg == pytest.approx(51, abs=1)
    assert r.flight_time_min == pytest.approx(r.distance_nm / 450 * 60)
    assert r.fuel_required_lbs == pytest.approx(5000 * r.distance_nm / 450 * 1.15)
    assert r.reserve_factor == 1.15
    assert r.waypoints[0].name == "MERIT"
    assert r.route_string.startswith("KJFK MERIT ")
    assert r.route_string.endswith(" STU EGLL")
    assert r.flight_level == "FL350"


def test_reverse_route_uses_reversed_named_chain(jfk, lhr, b738):
    out = compute_route(jfk, lhr, b738)
    back = compute_route(lhr, jfk, b738)
    assert back.waypoints == tuple(reversed(out.waypoints))
    assert back.distance_nm == pytest.approx(out.distance_nm)


def test_same_inputs_same_result(jfk, lhr, b738):
    assert compute_route(jfk, lhr, b738, 35000) == compute_route(jfk, lhr, b738, 35000)


def test_identical_endpoints_degenerate(directory):
    lax = directory.lookup("KLAX")
    r = compute_route(lax, lax, Aircraft(icao="B738", cruise_speed_kt=450, fuel_burn_lbs_hr=5000))
    assert r.distance_nm == 0.0
    assert r.flight_time_min == 0.0
    assert r.fuel_required_lbs == 0.0
    assert len(r.waypoints) == 3
    assert all((w.lat, w.lon) == (lax.lat, lax.lon) for w in r.waypoints)


def test_zero_cruise_speed_substitutes_default(directory):
    dep, arr = directory.lookup("EDDF"), directory.lookup("OMDB")
    r = compute_route(dep, arr, Aircraft(icao="XXXX", cruise_speed_kt=0, fuel_burn_lbs_hr=0), cruise_speed=0)
    assert r.cruise_speed_kt == 450
    assert r.fuel_burn_lbs_hr == 5000
    assert math.isfinite(r.flight_time_min) and r.flight_time_min > 0
    assert math.isfinite(r.fuel_required_lbs) and r.fuel_required_lbs > 0


def test_interpolated_count_follows_distance(directory):
    dep, arr = directory.lookup("EDDF"), directory.lookup("OMDB")
    r = compute_route(dep, arr, policy=RoutePolicy(naming="sequential"))
    assert len(r.waypoints) == min(10, max(3, int(r.distance_nm // 200)))
    assert r.waypoints[0].name == "WP01"
    assert r.naming == "sequential"


def test_fuel_scales_linearly_with_distance():
    o = make_airport("AAAA", 0.0, 0.0)
    near = make_airport("BBBB", 0.0, 10.0)
    far = make_airport("CCCC", 0.0, 20.0)
    ac = Aircraft(icao="B738", cruise_speed_kt=450, fuel_burn_lbs_hr=5000)
    r1 = compute_route(o, near, ac)
    r2 = compute_route(o, far, ac)
    assert r2.distance_nm == pytest.approx(2 * r1.distance_nm)
    assert r2.fuel_required_lbs == pytest.approx(2 * r1.fuel_required_lbs)


def test_altitude_default_and_ceiling(jfk, lhr):
    assert compute_route(jfk, lhr).cruise_altitude_ft == 35000
    c172 = Aircraft(icao="C172", cruise_speed_kt=120, fuel_burn_lbs_hr=30, max_altitude_ft=14000)
    assert compute_route(jfk, lhr, c172, 35000).cruise_altitude_ft == 14000


def test_reserve_factor_policy(jfk, lhr, b738):
    r10 = compute_route(jfk, lhr, b738, policy=RoutePolicy(reserve_factor=1.10))
    r20 = compute_route(jfk, lhr, b738, policy=RoutePolicy(reserve_factor=1.20))
    assert r20.fuel_required_lbs / r10.fuel_required_lbs == pytest.approx(1.20 / 1.10)


def test_result_is_frozen(jfk, lhr, b738):
    r = compute_route(jfk, lhr, b738)
    with pytest.raises(ValidationError):
        r.distance_nm = 1.0
    with pytest.raises(ValidationError):
        r.departure.icao = "ZZZZ"
    with pytest.raises(ValidationError):
        r.aircraft.cruise_speed_kt = 1.0
    with pytest.raises(ValidationError):
        r.waypoints[0].name = "HACK"
    with pytest.raises(AttributeError):
        r.waypoints.append(Waypoint(name="HACK", lat=0.0, lon=0.0))
    assert r.route_string.startswith("KJFK MERIT ")


def test_result_cannot_alter_builtin_airports(jfk, lhr):
    r = compute_route(jfk, lhr)
    with pytest.raises(ValidationError):
        r.departure.icao = "ZZZZ"
    assert BuiltinAirportDirectory().lookup("KJFK").icao == "KJFK"


def test_ete_format(jfk, lhr, b738):
    r = compute_route(jfk, lhr, b738)
    h, m = r.ete_hhmm.split(":")
    assert int(h) * 60 + int(m) == round(r.flight_time_min)
