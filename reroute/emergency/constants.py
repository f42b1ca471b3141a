# reroute/emergency/constants.py
"""
Emergency scenario catalog and risk model constants.
"""
from dataclasses import dataclass
from enum import Enum
from typing import FrozenSet, Optional, Tuple

from .exceptions import UnknownScenarioError

class Scenario(Enum):
    """Mutually exclusive emergency conditions. Only one is active at a time."""
    WEATHER = "wx"
    RUNWAY = "runway"
    STAFFING = "staffing"

    @classmethod
    def parse(cls, value) -> "Scenario":
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            raise UnknownScenarioError(value) from None

    @property
    def profile(self) -> "ScenarioProfile":
        return SCENARIO_PROFILES[self]

@dataclass(frozen=True)
class ScenarioProfile:
    """Display identity and risk-model parameters of one scenario."""
    name: str
    description: str
    condition_type: str
    reason: str
    waypoint: str
    bend_factor: float
    # Score at or above which a predicate match raises the emergency flag
    emergency_trigger: float
    longitude_band: Optional[Tuple[float, float]] = None
    destinations: FrozenSet[str] = frozenset()
    east_of_longitude: Optional[float] = None

# ====================== RISK MODEL ======================
class RiskThresholds:
    BASE = 0.20

    SPEED = {
        'FLOOR_KTS': 350.0,
        'CEILING_KTS': 450.0,
        'WEIGHT': 0.30
    }

    ALTITUDE = {
        'LOW_FT': 20000.0,
        'INCREMENT': 0.15
    }

    SCENARIO_BONUS = 0.35

    DECIMALS = 2

# ====================== SCENARIO CATALOG ======================
# All three scenarios currently share the 0.7 emergency trigger.
SCENARIO_PROFILES = {
    Scenario.WEATHER: ScenarioProfile(
        name="Convective weather",
        description="Line of thunderstorms across the central sector corridor.",
        condition_type="weather",
        reason="Avoids convective activity in the corridor.",
        waypoint="WXAVD",
        bend_factor=1.0,
        emergency_trigger=0.7,
        longitude_band=(-105.0, -90.0)
    ),
    Scenario.RUNWAY: ScenarioProfile(
        name="Runway closure",
        description="Primary arrival runways closed at major hubs.",
        condition_type="runway",
        reason="Diverts arrival flow around closed runways at destination.",
        waypoint="RWYALT",
        bend_factor=-1.0,
        emergency_trigger=0.7,
        destinations=frozenset({"KORD", "KJFK", "KATL"})
    ),
    Scenario.STAFFING: ScenarioProfile(
        name="Reduced staffing",
        description="Eastern sectors operating with reduced controller staffing.",
        condition_type="staffing",
        reason="Shifts traffic away from the short-staffed eastern sector.",
        waypoint="FLOW1",
        bend_factor=0.75,
        emergency_trigger=0.7,
        east_of_longitude=-95.0
    ),
}

DEFAULT_SCENARIO = Scenario.WEATHER
