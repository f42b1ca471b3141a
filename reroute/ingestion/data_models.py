# reroute/ingestion/data_models.py
from dataclasses import dataclass
from typing import Optional

@dataclass
class FlightRecord:
    """
    Canonical aircraft record produced by a provider adapter. Any field may
    be missing until the defaulting pass fills it.
    """
    id: str
    callsign: str
    origin: str = "UNKNOWN"
    destination: str = "UNKNOWN"
    origin_name: Optional[str] = None
    destination_name: Optional[str] = None
    status: str = "enroute"
    latitude: Optional[float] = None
    longitude: Optional[float] = None
    altitude: Optional[float] = None
    speed_kts: Optional[float] = None
    route: Optional[str] = None
    source: str = "unknown"
