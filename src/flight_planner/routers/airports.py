"""Airport search + details."""
from __future__ import annotations

from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from pydantic import BaseModel

from flight_planner.core.models import Airport
from flight_planner.deps import get_directory
from flight_planner.providers.base import AirportDirectory

router = APIRouter(prefix="/airports", tags=["airports"])


class AirportHit(BaseModel):
    icao: str
    iata: Optional[str] = None
    name: str
    city: Optional[str] = None
    country: Optional[str] = None
    lat: float
    lon: float
    elevation_ft: float
    label: str
    sublabel: str


@router.get("/search", response_model=List[AirportHit])
def search_airports(
    q: str = Query(default=""),
    limit: int = Query(default=50, ge=1, le=100),
    directory: AirportDirectory = Depends(get_directory),
):
    return [
        AirportHit(
            **apt.model_dump(include={"icao", "iata", "name", "city", "country", "lat", "lon", "elevation_ft"}),
            label=apt.label,
            sublabel=", ".join(x for x in (apt.city, apt.country) if x),
        )
        for apt in directory.search(q, limit)
    ]


@router.get("/{code}", response_model=Airport)
def get_airport(code: str, directory: AirportDirectory = Depends(get_directory)):
    apt = directory.lookup(code)
    if apt is None:
        raise HTTPException(status_code=404, detail=f"Airport not found: {code.upper()}")
    return apt
