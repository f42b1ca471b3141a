# reroute/proposals/data_models.py
from dataclasses import dataclass
from typing import Any, Dict

@dataclass
class RerouteProposal:
    """A candidate reroute for one flight, not yet applied."""
    id: str
    flight_id: str
    callsign: str
    current_route: str
    proposed_route: str
    icao_before: str
    icao_after: str
    risk_before: float
    risk_after: float
    reason: str
    created_at: str
    applied: bool = False

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "flightId": self.flight_id,
            "callsign": self.callsign,
            "currentRoute": self.current_route,
            "proposedRoute": self.proposed_route,
            "icaoBefore": self.icao_before,
            "icaoAfter": self.icao_after,
            "riskBefore": self.risk_before,
            "riskAfter": self.risk_after,
            "reason": self.reason,
            "createdAt": self.created_at,
            "applied": self.applied,
        }
