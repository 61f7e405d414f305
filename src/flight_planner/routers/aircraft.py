"""Aircraft catalog."""
from __future__ import annotations

from typing import Dict, List

from fastapi import APIRouter, Depends, HTTPException

from flight_planner.core.models import Aircraft
from flight_planner.deps import get_catalog
from flight_planner.providers.aircraft import AircraftCatalog

router = APIRouter(prefix="/aircraft", tags=["aircraft"])


@router.get("", response_model=Dict[str, List[Aircraft]])
def list_aircraft(catalog: AircraftCatalog = Depends(get_catalog)):
    return catalog.by_category()


@router.get("/{icao}", response_model=Aircraft)
def get_aircraft(icao: str, catalog: AircraftCatalog = Depends(get_catalog)):
    ac = catalog.lookup(icao)
    if ac is None:
        raise HTTPException(status_code=404, detail=f"Aircraft not found: {icao.upper()}")
    return ac
