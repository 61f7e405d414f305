from __future__ import annotations

import pytest
from pydantic import ValidationError

from flight_planner.cache.redis_client import RedisCache
from flight_planner.config import Settings
from flight_planner.contracts.route_contract import RoutePolicy


def test_policy_from_env(monkeypatch):
    monkeypatch.setenv("FLIGHT_PLANNER_RESERVE_FACTOR", "1.2")
    monkeypatch.setenv("FLIGHT_PLANNER_WAYPOINT_NAMING", "grid")
    monkeypatch.setenv("FLIGHT_PLANNER_MAX_WAYPOINTS", "20")
    policy = RoutePolicy.from_settings(Settings())
    assert policy.reserve_factor == 1.2
    assert policy.naming == "grid"
    assert policy.max_waypoints == 20


@pytest.mark.parametrize("value", ["1.05", "1.25"])
def test_reserve_factor_bounds(monkeypatch, value):
    monkeypatch.setenv("FLIGHT_PLANNER_RESERVE_FACTOR", value)
    with pytest.raises(ValidationError):
        Settings()


@pytest.mark.parametrize(
    "name",
    ["FLIGHT_PLANNER_DEFAULT_CRUISE_SPEED_KT", "FLIGHT_PLANNER_DEFAULT_FUEL_BURN_LBS_HR", "FLIGHT_PLANNER_NM_PER_WAYPOINT"],
)
def test_fallback_performance_must_be_positive(monkeypatch, name):
    monkeypatch.setenv(name, "0")
    with pytest.raises(ValidationError):
        Settings()


def test_waypoint_bounds_must_be_ordered(monkeypatch):
    monkeypatch.setenv("FLIGHT_PLANNER_MIN_WAYPOINTS", "8")
    monkeypatch.setenv("FLIGHT_PLANNER_MAX_WAYPOINTS", "4")
    with pytest.raises(ValidationError):
        Settings()


@pytest.mark.parametrize(
    "kwargs",
    [
        {"default_cruise_speed_kt": 0},
        {"default_fuel_burn_lbs_hr": -1},
        {"nm_per_waypoint": 0},
        {"min_waypoints": 6, "max_waypoints": 2},
    ],
)
def test_policy_rejects_invalid_values(kwargs):
    with pytest.raises(ValueError):
        RoutePolicy(**kwargs)


def test_defaults_match_policy_defaults():
    assert RoutePolicy.from_settings(Settings()) == RoutePolicy()


def test_empty_redis_url_disables_cache():
    cache = RedisCache.from_url("")
    assert not cache.enabled
    assert cache.get_json("anything") is None
    cache.set_json("anything", {"a": 1}, 10)
    assert cache.ping() is False
