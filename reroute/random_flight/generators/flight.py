# reroute/random_flight/generators/flight.py

import random
from typing import Dict, Optional, Tuple

from ..config import RandomFleetConfig

class FlightParameterGenerator:
    """Draws callsign, endpoints and kinematic state for one synthetic flight."""

    def __init__(self, rng: Optional[random.Random] = None):
        self.rng = rng or random.Random()
        self.config = RandomFleetConfig()

    def endpoints(self, codes) -> Tuple[str, str]:
        origin, destination = self.rng.sample(list(codes), 2)
        return origin, destination

    def generate(self) -> Dict[str, float]:
        altitude = self.rng.randint(self.config.MIN_ALTITUDE_FT, self.config.MAX_ALTITUDE_FT)
        return {
            "callsign": f"{self.rng.choice(self.config.AIRLINE_PREFIXES)}"
                        f"{self.rng.randint(self.config.MIN_FLIGHT_NUMBER, self.config.MAX_FLIGHT_NUMBER)}",
            "altitude_ft": float(round(altitude, -2)),
            "speed_kts": float(self.rng.randint(self.config.MIN_SPEED_KTS, self.config.MAX_SPEED_KTS)),
            "progress": self.rng.uniform(0.0, 0.95)
        }
