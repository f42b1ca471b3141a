# reroute/proposals/core.py
"""
Derives reroute proposals for risky, non-frozen flights.

Output depends only on the flights, the scenario and the lock flag; the
`created_at` timestamp is the one field allowed to differ between two
otherwise identical calls.
"""
import logging
from datetime import datetime, timezone
from typing import Collection, List, Optional, Sequence

from ..airplane.constants import FlightPlanDefaults
from ..airplane.data_models import Flight
from ..emergency.constants import Scenario
from .data_models import RerouteProposal
from .icao import format_flight_plan, reroute_level

logger = logging.getLogger(__name__)

DEFAULT_RISK_THRESHOLD = 0.6
DEFAULT_REDUCTION_FACTOR = 0.4

def insert_waypoint(route: str, waypoint: str) -> str:
    """
    Splices a waypoint into a route at its first direct-routing marker:
    'KLAX DCT KJFK' -> 'KLAX DCT WXAVD DCT KJFK'. Routes without a marker
    get the detour inserted before the final token.
    """
    marker = FlightPlanDefaults.DIRECT_MARKER
    tokens = route.split()
    if marker in tokens:
        i = tokens.index(marker)
        return " ".join(tokens[:i + 1] + [waypoint, marker] + tokens[i + 1:])
    if len(tokens) < 2:
        return " ".join(tokens + [marker, waypoint])
    return " ".join(tokens[:-1] + [marker, waypoint, marker, tokens[-1]])

class ProposalGenerator:
    """Builds reroute proposals under a configurable risk policy."""

    def __init__(self, threshold: float = DEFAULT_RISK_THRESHOLD,
                 reduction_factor: float = DEFAULT_REDUCTION_FACTOR):
        self.threshold = threshold
        self.reduction_factor = reduction_factor

    def is_eligible(self, flight: Flight) -> bool:
        return not flight.frozen and flight.risk_score >= self.threshold

    def build_proposals(self, flights: Sequence[Flight], scenario: Scenario, locked: bool,
                        now: Optional[datetime] = None,
                        excluded_ids: Collection[str] = ()) -> List[RerouteProposal]:
        """
        Args:
            flights: The current aircraft collection.
            scenario: Active scenario; supplies reason and detour waypoint.
            locked: Global freeze; when set no proposals are produced.
            now: Creation time, defaults to the current UTC time.
            excluded_ids: Flight ids whose proposals the operator rejected.
        """
        if locked:
            return []

        now = now or datetime.now(timezone.utc)
        profile = scenario.profile
        proposals = []
        for flight in flights:
            if not self.is_eligible(flight) or flight.id in excluded_ids:
                continue
            current = flight.current_route()
            proposed = insert_waypoint(current, profile.waypoint)
            proposals.append(RerouteProposal(
                id=f"prop-{flight.id}",
                flight_id=flight.id,
                callsign=flight.callsign,
                current_route=current,
                proposed_route=proposed,
                icao_before=format_flight_plan(flight, current, now.date()),
                icao_after=format_flight_plan(flight, proposed, now.date(), level=reroute_level(flight)),
                risk_before=flight.risk_score,
                risk_after=round(flight.risk_score * self.reduction_factor, 2),
                reason=profile.reason,
                created_at=now.isoformat(),
                applied=False
            ))
        logger.debug(f"Built {len(proposals)} proposals for scenario '{scenario.value}'")
        return proposals
