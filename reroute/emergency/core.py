# reroute/emergency/core.py
"""
Risk model: maps a flight's kinematic state and the active scenario to a
clamped, rounded score in [0, 1].

Frozen flights short-circuit to their existing score. The model never
mutates the flight; the console controller applies the result.
"""
import logging
from typing import Iterable

from ..airplane.data_models import Flight
from .constants import RiskThresholds, Scenario, ScenarioProfile
from .data_models import RiskAssessment

logger = logging.getLogger(__name__)

def _clamp_unit(value: float) -> float:
    return max(0.0, min(1.0, value))

class RiskModel:
    """Pure scoring of flights under a scenario."""

    def __init__(self, thresholds=RiskThresholds):
        self.t = thresholds

    def speed_component(self, speed_kts: float) -> float:
        """Linear between floor and ceiling, zero below, saturated above."""
        floor = self.t.SPEED['FLOOR_KTS']
        ceiling = self.t.SPEED['CEILING_KTS']
        if speed_kts <= floor:
            return 0.0
        fraction = min(1.0, (speed_kts - floor) / (ceiling - floor))
        return fraction * self.t.SPEED['WEIGHT']

    def altitude_component(self, altitude_ft: float) -> float:
        if altitude_ft < self.t.ALTITUDE['LOW_FT']:
            return self.t.ALTITUDE['INCREMENT']
        return 0.0

    @staticmethod
    def matches_scenario(flight: Flight, profile: ScenarioProfile) -> bool:
        """Spatial or categorical predicate defined by the scenario."""
        if profile.longitude_band is not None:
            west, east = profile.longitude_band
            if west <= flight.longitude <= east:
                return True
        if profile.destinations and flight.destination.upper() in profile.destinations:
            return True
        if profile.east_of_longitude is not None and flight.longitude > profile.east_of_longitude:
            return True
        return False

    def assess(self, flight: Flight, scenario: Scenario) -> RiskAssessment:
        if flight.frozen:
            return RiskAssessment(score=flight.risk_score, is_emergency=flight.is_emergency)

        profile = scenario.profile
        raw = (self.t.BASE
               + self.speed_component(flight.speed_kts)
               + self.altitude_component(flight.altitude))

        matched = self.matches_scenario(flight, profile)
        if matched:
            raw += self.t.SCENARIO_BONUS

        score = round(_clamp_unit(raw), self.t.DECIMALS)
        return RiskAssessment(
            score=score,
            predicate_matched=matched,
            is_emergency=matched and score >= profile.emergency_trigger
        )

    def apply(self, flights: Iterable[Flight], scenario: Scenario) -> int:
        """
        Scores every non-frozen flight in place. The emergency flag is only
        ever raised here; clearing it belongs to a new scenario epoch.

        Returns:
            Number of flights flagged as emergencies after scoring.
        """
        flagged = 0
        for flight in flights:
            if not flight.frozen:
                result = self.assess(flight, scenario)
                flight.risk_score = result.score
                if result.is_emergency and not flight.is_emergency:
                    logger.info(f"{flight.callsign} flagged as emergency under '{scenario.value}' (risk {result.score:.2f})")
                    flight.is_emergency = True
            if flight.is_emergency:
                flagged += 1
        return flagged

# --- Public Interface ---
RISK_MODEL = RiskModel()

def assess_risk(flight: Flight, scenario: Scenario) -> RiskAssessment:
    return RISK_MODEL.assess(flight, scenario)

def risk_score(flight: Flight, scenario: Scenario) -> float:
    """Public-facing risk function; returns the clamped, rounded score."""
    return RISK_MODEL.assess(flight, scenario).score
