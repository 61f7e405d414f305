from __future__ import annotations

from requests.exceptions import ReadTimeout

from conftest import FakeHTTP, FakeRedis
from flight_planner.cache import keys
from flight_planner.cache.redis_client import RedisCache
from flight_planner.providers.weather import WeatherService

METAR = [{"icaoId": "KJFK", "rawOb": "KJFK 191251Z 31012KT 10SM FEW250 12/M03 A3012"}]


def test_metar_passthrough():
    http = FakeHTTP(json_data=METAR)
    wx = WeatherService(base_url="https://wx.test/api/data/", http=http)
    assert wx.metar("kjfk") == METAR
    assert http.calls[0] == {"url": "https://wx.test/api/data/metar", "params": {"ids": "KJFK", "format": "json"}}


def test_metar_failure_placeholder():
    wx = WeatherService(http=FakeHTTP(error=ReadTimeout("slow")))
    assert wx.metar("EGLL") == [{"rawOb": "No METAR available for EGLL"}]


def test_metar_empty_placeholder():
    wx = WeatherService(http=FakeHTTP(json_data=[]))
    assert wx.raw_metar("EGLL") == "No METAR available for EGLL"


def test_taf_failure_is_empty():
    wx = WeatherService(http=FakeHTTP(error=ReadTimeout("slow")))
    assert wx.taf("EGLL") == []


def test_single_object_is_wrapped():
    wx = WeatherService(http=FakeHTTP(json_data={"rawTAF": "TAF EGLL ..."}))
    assert wx.taf("EGLL") == [{"rawTAF": "TAF EGLL ..."}]


def test_cached_in_redis():
    fake = FakeRedis()
    http = FakeHTTP(json_data=METAR)
    wx = WeatherService(http=http, cache=RedisCache(fake), ttl_metar=300)
    wx.metar("KJFK")
    wx.metar("KJFK")
    assert len(http.calls) == 1
    assert fake.ttls[keys.metar("KJFK")] == 300


def test_failures_are_not_cached():
    fake = FakeRedis()
    wx = WeatherService(http=FakeHTTP(error=ReadTimeout("slow")), cache=RedisCache(fake))
    wx.metar("KJFK")
    assert fake.store == {}


def test_briefing():
    wx = WeatherService(http=FakeHTTP(json_data=METAR))
    b = wx.briefing("KJFK", "EGLL")
    assert b.departure_metar == METAR[0]["rawOb"]
    assert b.arrival_metar == METAR[0]["rawOb"]


def test_broken_redis_is_a_miss():
    class Broken(FakeRedis):
        def get(self, key):
            raise OSError("redis gone")

        def set(self, key, value, ex=None):
            raise OSError("redis gone")

    wx = WeatherService(http=FakeHTTP(json_data=METAR), cache=RedisCache(Broken()))
    assert wx.metar("KJFK") == METAR


def test_empty_responses_are_not_cached():
    fake = FakeRedis()
    http = FakeHTTP(json_data=[])
    wx = WeatherService(http=http, cache=RedisCache(fake))
    assert wx.taf("KJFK") == []
    assert wx.metar("KJFK") == [{"rawOb": "No METAR available for KJFK"}]
    assert fake.store == {}

    http.json_data = METAR
    assert wx.metar("KJFK") == METAR
    assert fake.store[keys.metar("KJFK")]
