# reroute/airplane/data_models.py
"""
Defines the Flight record, the single mutable object the engine animates,
scores and reroutes. External collaborators only ever see `to_dict()`
snapshots of it.
"""
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from ..path_planner.data_models import GeoPoint
from .constants import FlightPlanDefaults, FlightStatus, FlightPhase

def default_route(origin: str, destination: str) -> str:
    """Direct routing between two airports, e.g. 'KLAX DCT KJFK'."""
    return f"{origin} {FlightPlanDefaults.DIRECT_MARKER} {destination}"

@dataclass
class Flight:
    """One simulated flight."""
    id: str
    callsign: str
    origin: str
    destination: str
    latitude: float
    longitude: float
    altitude: float
    speed_kts: float
    origin_name: Optional[str] = None
    destination_name: Optional[str] = None
    status: str = FlightStatus.ENROUTE
    phase: str = FlightPhase.CRUISE
    risk_score: float = 0.0
    is_emergency: bool = False
    frozen: bool = False
    path: List[GeoPoint] = field(default_factory=list)
    progress: float = 0.0
    route: Optional[str] = None

    # Altitude the synthetic oscillation is applied around
    base_altitude: Optional[float] = None

    def __post_init__(self):
        if self.base_altitude is None:
            self.base_altitude = self.altitude

    @property
    def has_path(self) -> bool:
        return len(self.path) >= 2

    def current_route(self) -> str:
        return self.route or default_route(self.origin, self.destination)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "callsign": self.callsign,
            "origin": self.origin,
            "originName": self.origin_name,
            "destination": self.destination,
            "destinationName": self.destination_name,
            "status": self.status,
            "phase": self.phase,
            "altitude": self.altitude,
            "speedKts": self.speed_kts,
            "latitude": self.latitude,
            "longitude": self.longitude,
            "riskScore": self.risk_score,
            "isEmergency": self.is_emergency,
            "frozen": self.frozen,
            "path": [p.to_dict() for p in self.path],
            "progress": self.progress,
            "route": self.route,
        }
