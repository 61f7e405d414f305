from __future__ import annotations

import argparse
import logging
from dataclasses import replace
from pathlib import Path
from typing import List, Optional

from rich.console import Console
from rich.table import Table

from flight_planner.cache.redis_client import RedisCache
from flight_planner.config import settings
from flight_planner.contracts.route_contract import RoutePolicy
from flight_planner.core.engine import compute_route
from flight_planner.core.models import Aircraft, RouteResult
from flight_planner.exporters.formats import EXPORTERS, ExportFile, export
from flight_planner.exporters.pdf import export_pdf
from flight_planner.providers.aircraft import AircraftCatalog
from flight_planner.providers.airports import build_directory
from flight_planner.providers.weather import WeatherService

log = logging.getLogger(__name__)


def _save(out_dir: Path, f: ExportFile) -> Path:
    out_dir.mkdir(parents=True, exist_ok=True)
    path = out_dir / f.filename
    if isinstance(f.content, bytes):
        path.write_bytes(f.content)
    else:
        path.write_text(f.content, encoding="utf-8")
    return path


def _summary_table(result: RouteResult) -> Table:
    table = Table(title=f"Flight Plan — {result.departure.icao} → {result.arrival.icao}")
    table.add_column("Item")
    table.add_column("Value")

    ac = result.aircraft
    table.add_row("Departure", result.departure.label)
    table.add_row("Arrival", result.arrival.label)
    table.add_row("Aircraft", f"{ac.name or ac.icao} ({ac.icao})" if ac else "—")
    table.add_row("Distance", f"{result.distance_nm:.0f} NM")
    table.add_row("Initial course", f"{result.bearing_deg:05.1f}°")
    table.add_row("Cruise", f"{result.flight_level} / {result.cruise_speed_kt:g} kt")
    table.add_row("ETE", result.ete_hhmm)
    table.add_row("Fuel", f"{result.fuel_required_lbs:,.0f} lbs (x{result.reserve_factor:.2f})")
    table.add_row("Route", result.route_string)
    return table


def _waypoint_table(result: RouteResult) -> Table:
    table = Table(title=f"Waypoints ({result.naming})")
    table.add_column("#")
    table.add_column("Name")
    table.add_column("Lat")
    table.add_column("Lon")
    table.add_column("Source")
    for i, w in enumerate(result.waypoints, start=1):
        table.add_row(str(i), w.name, f"{w.lat:.4f}", f"{w.lon:.4f}", w.source)
    return table


def main(argv: Optional[List[str]] = None) -> int:
    ap = argparse.ArgumentParser(prog="flight-planner")
    ap.add_argument("departure", help="Departure ICAO/IATA code, e.g. KJFK")
    ap.add_argument("arrival", help="Arrival ICAO/IATA code, e.g. EGLL")
    ap.add_argument("--aircraft", default="B738", help="Aircraft type from the catalog, e.g. B738")
    ap.add_argument("--altitude", type=float, default=None, help="Cruise altitude in feet")
    ap.add_argument("--speed", type=float, default=None, help="Cruise speed override in knots")
    ap.add_argument("--naming", choices=["pattern", "grid", "sequential"], default=None)
    ap.add_argument("--sources", default=settings.airport_sources, help="e.g. ourairports+builtin")
    ap.add_argument(
        "--export",
        default="",
        help=f"Comma list of formats to write: {', '.join([*EXPORTERS, 'pdf'])}",
    )
    ap.add_argument("--weather", action="store_true", help="Include departure/arrival METAR in the PDF")
    ap.add_argument("--out", default="plans", help="Output directory for exports")
    ap.add_argument("--debug", action="store_true")
    args = ap.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.WARNING,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    console = Console()
    cache = RedisCache.from_url(settings.redis_url)
    directory = build_directory(args.sources, settings, cache=cache)

    dep = directory.lookup(args.departure)
    arr = directory.lookup(args.arrival)
    for code, apt in ((args.departure, dep), (args.arrival, arr)):
        if apt is None:
            console.print(f"[red]Airport not found:[/red] {code.upper()}")
    if dep is None or arr is None:
        return 2

    catalog = AircraftCatalog()
    aircraft = catalog.lookup(args.aircraft)
    if aircraft is None:
        console.print(f"[yellow]Unknown aircraft {args.aircraft.upper()}, using default performance[/yellow]")
        aircraft = Aircraft(icao=args.aircraft.upper())

    policy = RoutePolicy.from_settings(settings)
    if args.naming:
        policy = replace(policy, naming=args.naming)

    result = compute_route(dep, arr, aircraft, args.altitude, args.speed, policy=policy)

    console.print(_summary_table(result))
    console.print(_waypoint_table(result))

    out_dir = Path(args.out)
    for fmt in [t.strip().lower() for t in args.export.split(",") if t.strip()]:
        if fmt == "pdf":
            briefing = None
            if args.weather:
                briefing = WeatherService.from_settings(settings, cache=cache).briefing(dep.icao, arr.icao)
            f = export_pdf(result, briefing)
        elif fmt == "xplane":
            f = export(result, fmt, airac_cycle=settings.xplane_airac_cycle)
        elif fmt in EXPORTERS:
            f = export(result, fmt)
        else:
            console.print(f"[red]Unknown export format:[/red] {fmt}")
            continue
        console.print(f"Saved: {_save(out_dir, f).resolve()}")

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
