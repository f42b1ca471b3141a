# reroute/simulation/core.py
"""
The console controller: sole owner of the aircraft collection and the
ordered update pipeline.

    on_tick            -> animate -> risk -> conditions -> proposals
    on_scenario_change -> new emergency epoch -> risk -> conditions -> proposals
    on_approve_all     -> approval transition -> risk -> conditions -> proposals
    on_reject          -> drop one proposal
    on_ingest          -> normalize -> replace fleet -> risk -> conditions -> proposals

Triggers are serialized by a single lock, so the background ticker and
operator requests never observe a half-finished recomputation.
Collaborators receive deep-copied snapshots, never live flights.
"""
import copy
import logging
import random
import threading
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional, Set

from ..airplane.data_models import Flight
from ..approval.core import ApprovalWorkflow
from ..approval.exceptions import InvalidTransitionError
from ..airports.catalog import AirportCatalog, AIRPORT_CATALOG
from ..emergency.conditions import build_conditions, summarize_fleet
from ..emergency.constants import Scenario
from ..emergency.core import RiskModel
from ..emergency.data_models import Condition
from ..ingestion.core import FlightNormalizer
from ..path_planner.core import PathGenerator
from ..proposals.core import ProposalGenerator
from ..proposals.data_models import RerouteProposal
from ..random_flight.core import RandomFleet
from .config import ConsoleConfig
from .scheduler import AnimationScheduler

logger = logging.getLogger(__name__)

@dataclass
class ConsoleState:
    """Everything one console session knows."""
    flights: List[Flight] = field(default_factory=list)
    scenario: Scenario = Scenario.WEATHER
    conditions: List[Condition] = field(default_factory=list)
    proposals: List[RerouteProposal] = field(default_factory=list)
    rejected_ids: Set[str] = field(default_factory=set)
    tick_count: int = 0
    updated_at: Optional[str] = None

class ConsoleController:
    def __init__(self, config: Optional[ConsoleConfig] = None,
                 rng: Optional[random.Random] = None,
                 catalog: Optional[AirportCatalog] = None,
                 flights: Optional[List[Flight]] = None):
        self.config = config or ConsoleConfig()
        self.rng = rng or random.Random(self.config.seed)
        self.catalog = catalog or AIRPORT_CATALOG
        self.path_generator = PathGenerator(self.rng)
        self.scheduler = AnimationScheduler(self.config.progress_delta, self.config.altitude_amplitude_ft)
        self.risk_model = RiskModel()
        self.proposal_generator = ProposalGenerator(self.config.risk_threshold, self.config.risk_reduction_factor)
        self.workflow = ApprovalWorkflow(self.path_generator, self.catalog)
        self.normalizer = FlightNormalizer(self.rng, catalog=self.catalog, fleet_size=self.config.fleet_size)
        self._lock = threading.Lock()

        if flights is None:
            flights = RandomFleet(self.rng, self.catalog, self.path_generator).generate(self.config.fleet_size)
        self.state = ConsoleState(flights=flights, scenario=Scenario.parse(self.config.initial_scenario))
        self._recompute()
        logger.info(f"Console ready: {len(self.state.flights)} flights, scenario '{self.state.scenario.value}'")

    @property
    def locked(self) -> bool:
        return self.workflow.locked

    def _recompute(self):
        """risk -> conditions -> proposals, always from the live collection."""
        s = self.state
        self.risk_model.apply(s.flights, s.scenario)
        s.conditions = build_conditions(s.scenario)
        s.proposals = self.proposal_generator.build_proposals(
            s.flights, s.scenario, self.locked, excluded_ids=s.rejected_ids)
        s.updated_at = datetime.now(timezone.utc).isoformat()

    # --- Triggers ---

    def on_tick(self) -> int:
        with self._lock:
            moved = self.scheduler.step(self.state.flights)
            self.state.tick_count += 1
            self._recompute()
            return moved

    def on_scenario_change(self, scenario) -> Scenario:
        scenario = Scenario.parse(scenario)
        with self._lock:
            s = self.state
            previous = s.scenario
            s.scenario = scenario
            s.rejected_ids.clear()
            for flight in s.flights:
                if not flight.frozen:
                    flight.is_emergency = False
            self._recompute()
            logger.info(f"Scenario changed '{previous.value}' -> '{scenario.value}'; {len(s.proposals)} proposals open")
            return scenario

    def on_approve_all(self) -> List[str]:
        """Returns the ids of the flights frozen by the approval."""
        with self._lock:
            s = self.state
            frozen = self.workflow.approve_all(s.flights, s.proposals, s.scenario.profile.bend_factor)
            self._recompute()
            return [f.id for f in frozen]

    def on_reject(self, proposal_id: str) -> RerouteProposal:
        with self._lock:
            removed = self.workflow.reject(self.state.proposals, proposal_id)
            self.state.rejected_ids.add(removed.flight_id)
            return removed

    def on_ingest(self, payload: Any) -> int:
        """
        Replaces the fleet with normalized provider data. Only allowed
        while proposals are still open; a locked session keeps its frozen
        aircraft.
        """
        with self._lock:
            if self.locked:
                raise InvalidTransitionError("ingest", self.workflow.state.value)
            records = self.normalizer.normalize(payload)
            self.state.flights = self.normalizer.build_flights(records, self.path_generator)
            self.state.rejected_ids.clear()
            self._recompute()
            logger.info(f"Ingested fleet of {len(self.state.flights)} flights")
            return len(self.state.flights)

    # --- Read side ---

    def flights(self) -> List[Flight]:
        """Deep copies of the current flights."""
        with self._lock:
            return copy.deepcopy(self.state.flights)

    def snapshot(self) -> Dict[str, Any]:
        with self._lock:
            s = self.state
            return {
                "scenario": s.scenario.value,
                "workflowState": self.workflow.state.value,
                "locked": self.locked,
                "tick": s.tick_count,
                "updatedAt": s.updated_at,
                "summary": summarize_fleet(s.flights),
                "flights": [f.to_dict() for f in s.flights],
                "conditions": [c.to_dict() for c in s.conditions],
                "proposals": [p.to_dict() for p in s.proposals],
            }
