"""METAR / TAF passthrough."""
from __future__ import annotations

from typing import Any, List

from fastapi import APIRouter, Depends

from flight_planner.deps import get_weather
from flight_planner.providers.weather import WeatherService

router = APIRouter(prefix="/weather", tags=["weather"])


@router.get("/metar/{icao}")
def get_metar(icao: str, weather: WeatherService = Depends(get_weather)) -> List[Any]:
    return weather.metar(icao)


@router.get("/taf/{icao}")
def get_taf(icao: str, weather: WeatherService = Depends(get_weather)) -> List[Any]:
    return weather.taf(icao)
