# reroute/simulation/scheduler.py
"""
Advances every flight along its path by a fixed progress delta per tick.

Altitude oscillates around the flight's baseline and is recomputed from it
each tick, so the synthetic motion never drifts. Frozen flights keep
moving; only their route and risk are fixed.
"""
import math
from typing import List

from ..airplane.data_models import Flight
from ..path_planner.utils.interpolation import position_at

def advance_progress(progress: float, delta: float) -> float:
    """(progress + delta) wrapped into [0, 1)."""
    return round((progress + delta) % 1.0, 10) % 1.0

class AnimationScheduler:
    def __init__(self, progress_delta: float = 0.02, altitude_amplitude_ft: float = 200.0):
        self.progress_delta = progress_delta
        self.altitude_amplitude_ft = altitude_amplitude_ft

    def step_flight(self, flight: Flight) -> bool:
        """Moves one flight in place. Returns False if it has no usable path."""
        if not flight.has_path:
            return False
        flight.progress = advance_progress(flight.progress, self.progress_delta)
        position = position_at(flight.path, flight.progress)
        flight.latitude = position.lat
        flight.longitude = position.lon
        flight.altitude = flight.base_altitude + self.altitude_amplitude_ft * math.sin(2 * math.pi * flight.progress)
        return True

    def step(self, flights: List[Flight]) -> int:
        """Moves every flight; returns how many were animated."""
        return sum(1 for flight in flights if self.step_flight(flight))
