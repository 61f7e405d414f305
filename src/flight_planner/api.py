"""FastAPI REST backend for the flight planner."""
from __future__ import annotations

import logging
from typing import Optional, Union

from fastapi import Depends, FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field

from flight_planner.cache.redis_client import RedisCache
from flight_planner.config import settings
from flight_planner.contracts.route_contract import RoutePolicy
from flight_planner.core.engine import compute_route
from flight_planner.core.models import Aircraft, RouteResult
from flight_planner.deps import get_cache, get_catalog, get_directory, get_policy
from flight_planner.providers.aircraft import AircraftCatalog
from flight_planner.providers.base import AirportDirectory
from flight_planner.routers import aircraft, airports, export, weather

log = logging.getLogger(__name__)

app = FastAPI(title="Flight Planner", version="0.1.0")

app.add_middleware(
    CORSMiddleware,
    allow_origins=[o.strip() for o in settings.cors_origins.split(",") if o.strip()],
    allow_methods=["*"],
    allow_headers=["*"],
)

# ---------------------------------------------------------------------------
# Include routers
# ---------------------------------------------------------------------------
app.include_router(airports.router)
app.include_router(aircraft.router)
app.include_router(weather.router)
app.include_router(export.router)


# ---------------------------------------------------------------------------
# Request models
# ---------------------------------------------------------------------------

class RouteRequest(BaseModel):
    departure: str = Field(..., min_length=3, description="ICAO or IATA code")
    arrival: str = Field(..., min_length=3, description="ICAO or IATA code")
    # catalog ICAO type code, or a full aircraft record
    aircraft: Optional[Union[Aircraft, str]] = None
    cruise_altitude: Optional[float] = None
    cruise_speed: Optional[float] = None


# ---------------------------------------------------------------------------
# Endpoints
# ---------------------------------------------------------------------------

@app.get("/health")
def health(cache: RedisCache = Depends(get_cache)):
    return {"status": "ok", "redis": cache.ping()}


def _resolve_aircraft(value, catalog: AircraftCatalog) -> Optional[Aircraft]:
    if value is None or isinstance(value, Aircraft):
        return value
    ac = catalog.lookup(value)
    if ac is None:
        # unknown type: plan with default performance rather than fail
        log.info("Unknown aircraft type %s, using default performance", value)
        return Aircraft(icao=value.strip().upper())
    return ac


@app.post("/route/calculate", response_model=RouteResult)
def calculate_route(
    req: RouteRequest,
    directory: AirportDirectory = Depends(get_directory),
    catalog: AircraftCatalog = Depends(get_catalog),
    policy: RoutePolicy = Depends(get_policy),
):
    dep = directory.lookup(req.departure)
    arr = directory.lookup(req.arrival)
    missing = [code for code, apt in ((req.departure, dep), (req.arrival, arr)) if apt is None]
    if missing:
        raise HTTPException(status_code=400, detail=f"Airport not found: {', '.join(c.upper() for c in missing)}")

    return compute_route(
        dep,
        arr,
        aircraft=_resolve_aircraft(req.aircraft, catalog),
        cruise_altitude=req.cruise_altitude,
        cruise_speed=req.cruise_speed,
        policy=policy,
    )
