from __future__ import annotations

from typing import Literal, Optional, Tuple

from pydantic import BaseModel, ConfigDict


class Coordinate(BaseModel):
    """Latitude/longitude in degrees (lat -90..90, lon -180..180)."""

    model_config = ConfigDict(frozen=True)

    lat: float
    lon: float


class Airport(BaseModel):
    model_config = ConfigDict(frozen=True)

    icao: str
    iata: Optional[str] = None
    name: str = ""
    city: Optional[str] = None
    country: Optional[str] = None
    lat: float
    lon: float
    elevation_ft: float = 0
    type: Optional[str] = None

    @property
    def coord(self) -> Coordinate:
        return Coordinate(lat=self.lat, lon=self.lon)

    @property
    def label(self) -> str:
        iata = f" / {self.iata}" if self.iata else ""
        return f"{self.icao}{iata} - {self.name}"


class Aircraft(BaseModel):
    model_config = ConfigDict(frozen=True)

    icao: str
    name: str = ""
    category: Optional[str] = None

    # Missing / non-positive values fall back to RoutePolicy defaults
    cruise_speed_kt: Optional[float] = None
    fuel_burn_lbs_hr: Optional[float] = None
    max_altitude_ft: Optional[float] = None

    simulators: Tuple[str, ...] = ()


class Waypoint(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    lat: float
    lon: float

    # "named" = fixed table fix, "synthetic" = derived from lat/lon,
    # "interpolated" = plain sequential label
    source: Literal["named", "synthetic", "interpolated"] = "interpolated"

    @property
    def coord(self) -> Coordinate:
        return Coordinate(lat=self.lat, lon=self.lon)


class RouteResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    departure: Airport
    arrival: Airport
    aircraft: Optional[Aircraft] = None

    route_key: str
    distance_nm: float
    bearing_deg: float
    waypoints: Tuple[Waypoint, ...]
    naming: str = "pattern"

    cruise_altitude_ft: int
    cruise_speed_kt: float
    fuel_burn_lbs_hr: float

    flight_time_min: float
    fuel_required_lbs: float
    reserve_factor: float

    @property
    def flight_level(self) -> str:
        return f"FL{int(self.cruise_altitude_ft // 100):03d}"

    @property
    def ete_hhmm(self) -> str:
        total = int(round(self.flight_time_min))
        return f"{total // 60}:{total % 60:02d}"

    @property
    def route_string(self) -> str:
        parts = [self.departure.icao, *(w.name for w in self.waypoints), self.arrival.icao]
        return " ".join(parts)
