"""Static aircraft catalog (cruise speed kt, fuel burn lbs/hr, ceiling ft)."""
from __future__ import annotations

from typing import Dict, List, Optional, Tuple

from flight_planner.core.models import Aircraft

_MSFS = "MSFS2020"
_XP = "X-Plane 12"
_P3D = "Prepar3D"

# category -> [(icao, name, cruise_kt, burn_lbs_hr, ceiling_ft, simulators)]
_CATALOG: Dict[str, List[Tuple[str, str, float, float, float, List[str]]]] = {
    "boeing": [
        ("B738", "Boeing 737-800", 450, 5000, 41000, [_MSFS, _XP, _P3D, "FSX", "PMDG"]),
        ("B739", "Boeing 737-900", 450, 5200, 41000, [_MSFS, _XP, "PMDG"]),
        ("B37M", "Boeing 737 MAX 8", 453, 4500, 41000, [_MSFS, _XP, "PMDG"]),
        ("B748", "Boeing 747-8", 490, 12000, 43000, [_MSFS, _XP, _P3D, "PMDG"]),
        ("B77W", "Boeing 777-300ER", 490, 10000, 43000, [_MSFS, _XP, _P3D, "PMDG"]),
        ("B77L", "Boeing 777F", 490, 10500, 43000, [_MSFS, _XP, "PMDG"]),
        ("B788", "Boeing 787-8 Dreamliner", 490, 8000, 43000, [_MSFS, _XP, _P3D, "PMDG"]),
        ("B789", "Boeing 787-9 Dreamliner", 490, 8500, 43000, [_MSFS, _XP, "PMDG"]),
        ("B78X", "Boeing 787-10 Dreamliner", 490, 9000, 43000, [_MSFS, "PMDG"]),
    ],
    "airbus": [
        ("A20N", "Airbus A320neo", 450, 4300, 39800, [_MSFS, _XP, _P3D, "FlyByWire A32NX"]),
        ("A321", "Airbus A321", 450, 5000, 39800, [_MSFS, _XP, _P3D, "FSX"]),
        ("A21N", "Airbus A321neo", 450, 4500, 39800, [_MSFS, _XP, "FlyByWire"]),
        ("A319", "Airbus A319", 450, 4500, 39800, [_MSFS, _XP, _P3D, "FSX"]),
        ("A320", "Airbus A320", 450, 4800, 39800, [_MSFS, _XP, _P3D, "FSX"]),
        ("A332", "Airbus A330-200", 470, 8000, 41000, [_MSFS, _XP, _P3D]),
        ("A333", "Airbus A330-300", 470, 8500, 41000, [_MSFS, _XP, _P3D]),
        ("A339", "Airbus A330-900neo", 470, 7500, 41000, [_MSFS, _XP]),
        ("A359", "Airbus A350-900", 490, 8500, 43000, [_MSFS, _XP, _P3D]),
        ("A35K", "Airbus A350-1000", 490, 9000, 43000, [_MSFS, _XP]),
        ("A388", "Airbus A380-800", 490, 14000, 43000, [_MSFS, _XP, _P3D]),
    ],
    "regional": [
        ("CRJ9", "Bombardier CRJ-900", 430, 2500, 41000, [_MSFS, _XP, _P3D]),
        ("E170", "Embraer E170", 440, 2800, 41000, [_MSFS, _XP]),
        ("E190", "Embraer E190", 440, 3200, 41000, [_MSFS, _XP]),
        ("E195", "Embraer E195", 440, 3400, 41000, [_MSFS, _XP]),
        ("DH8D", "Bombardier Dash 8 Q400", 360, 1800, 27000, [_MSFS, _XP, _P3D]),
    ],
    "cargo": [
        ("B74F", "Boeing 747-400F", 490, 13000, 43000, [_MSFS, _XP, _P3D]),
        ("MD11", "McDonnell Douglas MD-11F", 470, 11000, 42000, [_XP, _P3D]),
        ("B763", "Boeing 767-300F", 470, 8500, 43000, [_MSFS, _XP]),
    ],
    "general": [
        ("C172", "Cessna 172 Skyhawk", 120, 30, 14000, [_MSFS, _XP, _P3D, "FSX"]),
        ("C208", "Cessna 208 Caravan", 180, 200, 25000, [_MSFS, _XP]),
        ("PC12", "Pilatus PC-12", 280, 300, 30000, [_MSFS, _XP]),
        ("TBM9", "TBM 930", 330, 280, 31000, [_MSFS, _XP]),
    ],
}


class AircraftCatalog:
    def __init__(self, catalog: Optional[Dict[str, List[Aircraft]]] = None):
        if catalog is None:
            catalog = {
                cat: [
                    Aircraft(
                        icao=icao,
                        name=name,
                        category=cat,
                        cruise_speed_kt=speed,
                        fuel_burn_lbs_hr=burn,
                        max_altitude_ft=ceiling,
                        simulators=sims,
                    )
                    for icao, name, speed, burn, ceiling, sims in rows
                ]
                for cat, rows in _CATALOG.items()
            }
        self._by_category = catalog
        self._by_icao = {ac.icao.upper(): ac for rows in catalog.values() for ac in rows}

    def lookup(self, icao: str) -> Optional[Aircraft]:
        return self._by_icao.get((icao or "").strip().upper())

    def all(self) -> List[Aircraft]:
        return list(self._by_icao.values())

    def by_category(self) -> Dict[str, List[Aircraft]]:
        return {cat: list(rows) for cat, rows in self._by_category.items()}
