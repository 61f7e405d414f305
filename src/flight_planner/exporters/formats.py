"""Flight-sim route file exporters (PMDG .rte, MSFS/FSX .pln, X-Plane .fms, JSON)."""
from __future__ import annotations

import xml.etree.ElementTree as ET
from dataclasses import dataclass
from typing import Callable, Dict, Union

from flight_planner.core.models import RouteResult


@dataclass(frozen=True)
class ExportFile:
    filename: str
    media_type: str
    content: Union[str, bytes]


def _stem(result: RouteResult) -> str:
    return f"{result.departure.icao}{result.arrival.icao}"


def _lla(lat: float, lon: float, alt_ft: float) -> str:
    ns = "N" if lat >= 0 else "S"
    ew = "E" if lon >= 0 else "W"
    return f"{ns}{abs(lat):.6f}°,{ew}{abs(lon):.6f}°,+{float(alt_ft):.2f}"


def _xml(root: ET.Element) -> str:
    ET.indent(root, space="  ")
    return '<?xml version="1.0" encoding="UTF-8"?>\n' + ET.tostring(root, encoding="unicode") + "\n"


def _sub(parent: ET.Element, tag: str, text=None, **attrib) -> ET.Element:
    el = ET.SubElement(parent, tag, attrib)
    if text is not None:
        el.text = str(text)
    return el


# ---------------------------------------------------------------------------
# PMDG
# ---------------------------------------------------------------------------

def export_pmdg(result: RouteResult) -> ExportFile:
    ac_type = result.aircraft.icao if result.aircraft else ""
    content = f"{result.route_string}\n{result.flight_level} {ac_type}".rstrip() + "\n"
    return ExportFile(f"{_stem(result)}.rte", "text/plain", content)


# ---------------------------------------------------------------------------
# AceXML (.pln)
# ---------------------------------------------------------------------------

def _ace_document(result: RouteResult) -> tuple[ET.Element, ET.Element]:
    doc = ET.Element("SimBase.Document", {"Type": "AceXML", "version": "1,0"})
    _sub(doc, "Descr", "AceXML Document")
    fp = _sub(doc, "FlightPlan.FlightPlan")
    _sub(fp, "Title", f"{result.departure.icao} to {result.arrival.icao}")
    _sub(fp, "FPType", "IFR")
    return doc, fp


def export_msfs(result: RouteResult) -> ExportFile:
    dep, arr = result.departure, result.arrival
    ac_name = result.aircraft.name if result.aircraft else "Unknown aircraft"

    doc, fp = _ace_document(result)
    _sub(fp, "RouteType", "HighAlt")
    _sub(fp, "CruisingAlt", result.cruise_altitude_ft)
    _sub(fp, "DepartureID", dep.icao)
    _sub(fp, "DepartureLLA", _lla(dep.lat, dep.lon, dep.elevation_ft))
    _sub(fp, "DestinationID", arr.icao)
    _sub(fp, "DestinationLLA", _lla(arr.lat, arr.lon, arr.elevation_ft))
    _sub(fp, "Descr", f"Generated by Flight Planner - {ac_name}")
    _sub(fp, "DeparturePosition", dep.icao)
    _sub(fp, "DepartureName", dep.name)
    _sub(fp, "DestinationName", arr.name)
    app = _sub(fp, "AppVersion")
    _sub(app, "AppVersionMajor", 11)
    _sub(app, "AppVersionBuild", 282174)

    def airport_wp(apt):
        wp = _sub(fp, "ATCWaypoint", id=apt.icao)
        _sub(wp, "ATCWaypointType", "Airport")
        _sub(wp, "WorldPosition", _lla(apt.lat, apt.lon, apt.elevation_ft))
        icao = _sub(wp, "ICAO")
        _sub(icao, "ICAOIdent", apt.icao)

    airport_wp(dep)
    for w in result.waypoints:
        wp = _sub(fp, "ATCWaypoint", id=w.name)
        _sub(wp, "ATCWaypointType", "User")
        _sub(wp, "WorldPosition", _lla(w.lat, w.lon, result.cruise_altitude_ft))
    airport_wp(arr)

    return ExportFile(f"{_stem(result)}.pln", "application/xml", _xml(doc))


def export_fsx(result: RouteResult) -> ExportFile:
    dep, arr = result.departure, result.arrival

    doc, fp = _ace_document(result)
    _sub(fp, "CruisingAlt", result.cruise_altitude_ft)
    _sub(fp, "DepartureID", dep.icao)
    _sub(fp, "DepartureName", dep.name)
    _sub(fp, "DestinationID", arr.icao)
    _sub(fp, "DestinationName", arr.name)
    _sub(fp, "Descr", result.aircraft.name if result.aircraft else "")
    for w in result.waypoints:
        wp = _sub(fp, "ATCWaypoint", id=w.name)
        _sub(wp, "ATCWaypointType", "Intersection")
        _sub(wp, "WorldPosition", _lla(w.lat, w.lon, result.cruise_altitude_ft))
        icao = _sub(wp, "ICAO")
        _sub(icao, "ICAOIdent", w.name)

    return ExportFile(f"{_stem(result)}.pln", "application/xml", _xml(doc))


# ---------------------------------------------------------------------------
# X-Plane .fms (v1100)
# ---------------------------------------------------------------------------

def export_xplane(result: RouteResult, airac_cycle: str = "2401", include_altitude: bool = True) -> ExportFile:
    dep, arr = result.departure, result.arrival
    enroute_alt = float(result.cruise_altitude_ft) if include_altitude else 0.0

    lines = [
        "I",
        "1100 Version",
        f"CYCLE {airac_cycle}",
        f"ADEP {dep.icao}",
        f"ADES {arr.icao}",
        f"NUMENR {len(result.waypoints) + 2}",
        f"1 {dep.icao} ADEP 0.000000 {dep.lat:.6f} {dep.lon:.6f}",
    ]
    for w in result.waypoints:
        lines.append(f"11 {w.name} DRCT {enroute_alt:.6f} {w.lat:.6f} {w.lon:.6f}")
    lines.append(f"1 {arr.icao} ADES 0.000000 {arr.lat:.6f} {arr.lon:.6f}")

    return ExportFile(f"{_stem(result)}.fms", "text/plain", "\n".join(lines) + "\n")


# ---------------------------------------------------------------------------
# JSON
# ---------------------------------------------------------------------------

def export_json(result: RouteResult) -> ExportFile:
    return ExportFile(
        f"FlightPlan_{result.departure.icao}_{result.arrival.icao}.json",
        "application/json",
        result.model_dump_json(indent=2),
    )


EXPORTERS: Dict[str, Callable[..., ExportFile]] = {
    "pmdg": export_pmdg,
    "msfs": export_msfs,
    "fsx": export_fsx,
    "xplane": export_xplane,
    "json": export_json,
}


def export(result: RouteResult, fmt: str, **opts) -> ExportFile:
    fn = EXPORTERS.get(fmt.strip().lower())
    if fn is None:
        raise ValueError(f"Unknown export format: '{fmt}' (supported: {', '.join(EXPORTERS)})")
    return fn(result, **opts)
