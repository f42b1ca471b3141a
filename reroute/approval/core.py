# reroute/approval/core.py
"""
Approval workflow state machine.

    OPEN --approve_all--> LOCKED (terminal for the session)

Approving freezes every flight with an open proposal: its route and risk
take the proposed values, a bent path replaces the old one and progress
restarts at zero. After that, no proposals are produced again.
"""
import logging
import time
from enum import Enum
from typing import Dict, List, Optional, Tuple

from ..airplane.data_models import Flight
from ..airports.catalog import AirportCatalog, AIRPORT_CATALOG
from ..path_planner.core import PathGenerator
from ..proposals.data_models import RerouteProposal
from .exceptions import InvalidTransitionError, ProposalNotFoundError

logger = logging.getLogger(__name__)

class WorkflowState(Enum):
    OPEN = "OPEN"
    LOCKED = "LOCKED"

class ApprovalWorkflow:
    """Owns the transition from mutable aircraft to frozen, rerouted aircraft."""

    def __init__(self, path_generator: PathGenerator,
                 catalog: Optional[AirportCatalog] = None):
        self.path_generator = path_generator
        self.catalog = catalog or AIRPORT_CATALOG
        self.state = WorkflowState.OPEN
        self.history: List[Tuple[float, str, str]] = []

    @property
    def locked(self) -> bool:
        return self.state is WorkflowState.LOCKED

    def _record(self, action: str, detail: str):
        self.history.append((time.time(), action, detail))
        logger.info(f"Approval workflow: {action} ({detail})")

    def approve_all(self, flights: List[Flight], proposals: List[RerouteProposal],
                    bend_factor: float) -> List[Flight]:
        """
        Applies every open proposal atomically and locks the workflow.

        Args:
            flights: The live aircraft collection, mutated in place.
            proposals: The open proposal set; emptied on success.
            bend_factor: Lateral bend for the rerouted paths.

        Returns:
            The flights that were frozen.

        Raises:
            InvalidTransitionError: Already locked, or nothing to approve.
        """
        if self.locked:
            raise InvalidTransitionError("approve_all", self.state.value)
        if not proposals:
            raise InvalidTransitionError("approve_all", self.state.value,
                                         message="No open proposals to approve")

        by_flight: Dict[str, RerouteProposal] = {p.flight_id: p for p in proposals}
        frozen = []
        for flight in flights:
            proposal = by_flight.get(flight.id)
            if proposal is None or flight.frozen:
                continue
            self._apply(flight, proposal, bend_factor)
            frozen.append(flight)

        for proposal in proposals:
            proposal.applied = True
        proposals.clear()
        self.state = WorkflowState.LOCKED
        self._record("approve_all", f"{len(frozen)} flights frozen: {', '.join(f.callsign for f in frozen)}")
        return frozen

    def _apply(self, flight: Flight, proposal: RerouteProposal, bend_factor: float):
        flight.route = proposal.proposed_route
        flight.risk_score = proposal.risk_after
        flight.frozen = True
        # Flights with endpoints outside the catalog stay at their reported position
        if not (self.catalog.contains(flight.origin) and self.catalog.contains(flight.destination)):
            return
        origin = self.catalog.get(flight.origin)
        destination = self.catalog.get(flight.destination)
        flight.path = self.path_generator.build_rerouted_path(origin, destination, bend_factor)
        flight.progress = 0.0
        flight.latitude = flight.path[0].lat
        flight.longitude = flight.path[0].lon
        flight.altitude = flight.base_altitude

    def reject(self, proposals: List[RerouteProposal], proposal_id: str) -> RerouteProposal:
        """Drops one proposal from the open set. Aircraft are not touched."""
        if self.locked:
            raise InvalidTransitionError("reject", self.state.value)
        for i, proposal in enumerate(proposals):
            if proposal.id == proposal_id:
                removed = proposals.pop(i)
                self._record("reject", f"{removed.id} for {removed.callsign}")
                return removed
        raise ProposalNotFoundError(proposal_id)
