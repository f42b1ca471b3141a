# reroute/emergency/conditions.py
"""
Condition list and fleet statistics shown alongside the active scenario.
Conditions are rebuilt wholesale from the scenario and never edited.
"""
from typing import Any, Dict, List, Sequence

from ..airplane.data_models import Flight
from .constants import Scenario
from .data_models import Condition

_CONDITION_TEMPLATES = {
    Scenario.WEATHER: [
        ("Convective SIGMET", "high",
         "Thunderstorm line across central sector corridor."),
        ("Moderate turbulence", "medium",
         "PIREPs of moderate turbulence FL250-FL350 on the storm flanks."),
    ],
    Scenario.RUNWAY: [
        ("Runway closure", "high",
         "Primary arrival runways closed at KORD, KJFK and KATL."),
        ("Arrival delays", "medium",
         "Ground delay program in effect for affected hubs."),
    ],
    Scenario.STAFFING: [
        ("Reduced staffing", "medium",
         "Sector staffed with 2 of 3 controllers."),
        ("Flow restrictions", "low",
         "Miles-in-trail restrictions on eastbound departures."),
    ],
}

def build_conditions(scenario: Scenario) -> List[Condition]:
    """Returns the full condition list for `scenario`."""
    condition_type = scenario.profile.condition_type
    return [
        Condition(
            id=f"{scenario.value}-{i + 1}",
            type=condition_type,
            label=label,
            severity=severity,
            description=description,
            active=True
        )
        for i, (label, severity, description) in enumerate(_CONDITION_TEMPLATES[scenario])
    ]

def summarize_fleet(flights: Sequence[Flight]) -> Dict[str, Any]:
    """Tracked-flight count and average/peak risk for the console tiles."""
    if not flights:
        return {
            "total_flights": 0,
            "average_risk": 0.0,
            "max_risk": 0.0,
            "emergency_count": 0,
            "frozen_count": 0
        }
    scores = [f.risk_score for f in flights]
    return {
        "total_flights": len(flights),
        "average_risk": round(sum(scores) / len(scores), 2),
        "max_risk": max(scores),
        "emergency_count": sum(1 for f in flights if f.is_emergency),
        "frozen_count": sum(1 for f in flights if f.frozen)
    }
