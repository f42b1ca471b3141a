# reroute/random_flight/core.py

import logging
import random
from typing import List, Optional

from ..airplane.constants import FlightPhase
from ..airplane.data_models import Flight, default_route
from ..airports.catalog import AirportCatalog, AIRPORT_CATALOG
from ..path_planner.core import PathGenerator
from ..path_planner.utils.interpolation import position_at
from .config import RandomFleetConfig
from .exceptions import InvalidFleetSizeError
from .generators.flight import FlightParameterGenerator

logger = logging.getLogger(__name__)

class RandomFleet:
    """Generates the synthetic initial fleet between catalog airports."""

    def __init__(self, rng: Optional[random.Random] = None,
                 catalog: Optional[AirportCatalog] = None,
                 path_generator: Optional[PathGenerator] = None):
        self.rng = rng or random.Random()
        self.catalog = catalog or AIRPORT_CATALOG
        self.path_generator = path_generator or PathGenerator(self.rng)
        self.params = FlightParameterGenerator(self.rng)
        self.config = RandomFleetConfig()

    def _phase_for(self, altitude_ft: float) -> str:
        if altitude_ft < self.config.CLIMB_CEILING_FT:
            return FlightPhase.CLIMB
        return FlightPhase.CRUISE

    def generate(self, size: int = RandomFleetConfig.DEFAULT_FLEET_SIZE) -> List[Flight]:
        """Generate `size` flights, each with a jittered path and a position on it."""
        if size <= 0:
            raise InvalidFleetSizeError(f"Fleet size must be positive, got {size}")

        flights = []
        for i in range(size):
            origin_code, destination_code = self.params.endpoints(self.catalog.codes())
            origin = self.catalog.get(origin_code)
            destination = self.catalog.get(destination_code)
            params = self.params.generate()
            path = self.path_generator.generate_initial_path(origin, destination)
            position = position_at(path, params["progress"])

            flights.append(Flight(
                id=f"FL{i + 1}",
                callsign=params["callsign"],
                origin=origin.code,
                destination=destination.code,
                origin_name=origin.name,
                destination_name=destination.name,
                phase=self._phase_for(params["altitude_ft"]),
                latitude=position.lat,
                longitude=position.lon,
                altitude=params["altitude_ft"],
                speed_kts=params["speed_kts"],
                path=path,
                progress=params["progress"],
                route=default_route(origin.code, destination.code)
            ))
        logger.info(f"Generated synthetic fleet of {len(flights)} flights")
        return flights
