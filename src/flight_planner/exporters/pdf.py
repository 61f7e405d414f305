"""Operational flight plan briefing as PDF (reportlab platypus)."""
from __future__ import annotations

import io
from datetime import datetime, timezone
from typing import List, Optional
from xml.sax.saxutils import escape

from reportlab.lib import colors
from reportlab.lib.pagesizes import A4
from reportlab.lib.styles import ParagraphStyle, getSampleStyleSheet
from reportlab.platypus import Paragraph, SimpleDocTemplate, Spacer, Table, TableStyle

from flight_planner.core.models import RouteResult
from flight_planner.exporters.formats import ExportFile
from flight_planner.providers.weather import WeatherBriefing


def _styles():
    ss = getSampleStyleSheet()
    return {
        "title": ParagraphStyle("fp-title", parent=ss["Title"], fontName="Helvetica-Bold", fontSize=20),
        "sub": ParagraphStyle("fp-sub", parent=ss["Normal"], fontSize=10, alignment=1),
        "h": ParagraphStyle("fp-h", parent=ss["Heading2"], fontName="Helvetica-Bold", fontSize=14),
        "body": ParagraphStyle("fp-body", parent=ss["Normal"], fontSize=10),
        "mono": ParagraphStyle("fp-mono", parent=ss["Code"], fontName="Courier", fontSize=9),
        "foot": ParagraphStyle("fp-foot", parent=ss["Normal"], fontSize=8, alignment=1),
    }


def _p(text: str, style) -> Paragraph:
    return Paragraph(escape(text), style)


def render_pdf(
    result: RouteResult,
    weather: Optional[WeatherBriefing] = None,
    generated_at: Optional[datetime] = None,
) -> bytes:
    generated_at = generated_at or datetime.now(timezone.utc)
    st = _styles()
    dep, arr, ac = result.departure, result.arrival, result.aircraft

    story: List = [
        _p("OPERATIONAL FLIGHT PLAN", st["title"]),
        _p(f"Flight Planner - {generated_at.strftime('%a, %d %b %Y %H:%M:%S UTC')}", st["sub"]),
        Spacer(1, 18),
        _p("FLIGHT INFORMATION", st["h"]),
    ]

    info = [
        f"From: {dep.icao} - {dep.name}",
        f"To: {arr.icao} - {arr.name}",
        f"Aircraft: {ac.name} ({ac.icao})" if ac else "Aircraft: not specified",
        f"Distance: {round(result.distance_nm)} NM",
        f"Initial course: {round(result.bearing_deg) % 360:03d}°",
        f"Cruise: {result.flight_level} / {result.cruise_speed_kt:g} kts",
        f"ETE: {result.ete_hhmm}",
        f"Fuel: {round(result.fuel_required_lbs)} lbs (incl. {round((result.reserve_factor - 1) * 100)}% reserve)",
    ]
    story += [_p(line, st["body"]) for line in info]
    story.append(Spacer(1, 12))

    if result.waypoints:
        story.append(_p("WAYPOINTS", st["h"]))
        rows = [["#", "Name", "Lat", "Lon"]]
        for i, w in enumerate(result.waypoints, start=1):
            rows.append([str(i), w.name, f"{w.lat:.4f}", f"{w.lon:.4f}"])
        table = Table(rows, hAlign="LEFT")
        table.setStyle(
            TableStyle(
                [
                    ("FONTNAME", (0, 0), (-1, 0), "Helvetica-Bold"),
                    ("FONTSIZE", (0, 0), (-1, -1), 9),
                    ("LINEBELOW", (0, 0), (-1, 0), 0.5, colors.black),
                    ("ALIGN", (2, 1), (-1, -1), "RIGHT"),
                ]
            )
        )
        story += [table, Spacer(1, 12)]

    if weather is not None:
        story.append(_p("WEATHER", st["h"]))
        story.append(_p(f"DEP: {weather.departure_metar or 'N/A'}", st["mono"]))
        story.append(_p(f"ARR: {weather.arrival_metar or 'N/A'}", st["mono"]))
        story.append(Spacer(1, 12))

    story += [
        _p("ROUTE", st["h"]),
        _p(result.route_string, st["body"]),
        Spacer(1, 24),
        _p("Generated by Flight Planner", st["foot"]),
        _p("For flight simulation use only", st["foot"]),
    ]

    buf = io.BytesIO()
    doc = SimpleDocTemplate(
        buf,
        pagesize=A4,
        leftMargin=50,
        rightMargin=50,
        topMargin=50,
        bottomMargin=50,
        title=f"OFP {dep.icao}-{arr.icao}",
    )
    doc.build(story)
    return buf.getvalue()


def export_pdf(result: RouteResult, weather: Optional[WeatherBriefing] = None) -> ExportFile:
    return ExportFile(
        f"OFP-{result.departure.icao}{result.arrival.icao}.pdf",
        "application/pdf",
        render_pdf(result, weather),
    )
