"""Route file + PDF downloads for a computed flight plan."""
from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import Response
from pydantic import BaseModel

from flight_planner.config import settings
from flight_planner.core.models import RouteResult
from flight_planner.deps import get_weather
from flight_planner.exporters.formats import ExportFile, export
from flight_planner.exporters.pdf import export_pdf
from flight_planner.providers.weather import WeatherService

router = APIRouter(prefix="/export", tags=["export"])


class ExportRequest(BaseModel):
    flight_plan: RouteResult
    include_weather: bool = False


def _download(f: ExportFile) -> Response:
    return Response(
        content=f.content,
        media_type=f.media_type,
        headers={"Content-Disposition": f"attachment; filename={f.filename}"},
    )


@router.post("/pdf")
def export_pdf_plan(body: ExportRequest, weather: WeatherService = Depends(get_weather)):
    plan = body.flight_plan
    briefing = None
    if body.include_weather:
        briefing = weather.briefing(plan.departure.icao, plan.arrival.icao)
    return _download(export_pdf(plan, briefing))


@router.post("/{fmt}")
def export_plan(fmt: str, body: ExportRequest):
    opts = {"airac_cycle": settings.xplane_airac_cycle} if fmt.lower() == "xplane" else {}
    try:
        f = export(body.flight_plan, fmt, **opts)
    except ValueError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return _download(f)
