# reroute/path_planner/core.py
"""
Builds the 3-point polylines that represent a flight's travelled route.

Initial paths use a bounded random midpoint jitter drawn from the injected
random source, so fleets are reproducible under a fixed seed. Rerouted
paths bend the midpoint deterministically.
"""
import random
from typing import List, Optional

from ..airports.data_models import Airport
from .constants import PathConstants
from .data_models import GeoPoint

class PathGenerator:
    """Generates initial and rerouted flight paths between two airports."""

    def __init__(self, rng: Optional[random.Random] = None,
                 jitter_deg: float = PathConstants.INITIAL_JITTER_DEG,
                 bend_scale_deg: float = PathConstants.REROUTE_BEND_SCALE_DEG):
        self.rng = rng or random.Random()
        self.jitter_deg = jitter_deg
        self.bend_scale_deg = bend_scale_deg

    @staticmethod
    def _midpoint(origin: Airport, destination: Airport) -> GeoPoint:
        return GeoPoint(
            lat=(origin.lat + destination.lat) / 2,
            lon=(origin.lon + destination.lon) / 2
        )

    def generate_initial_path(self, origin: Airport, destination: Airport) -> List[GeoPoint]:
        """Origin, jittered midpoint, destination."""
        mid = self._midpoint(origin, destination)
        mid_lat = mid.lat + self.rng.uniform(-1.0, 1.0) * self.jitter_deg
        mid_lon = mid.lon + self.rng.uniform(-1.0, 1.0) * self.jitter_deg
        return [
            GeoPoint(origin.lat, origin.lon),
            GeoPoint(mid_lat, mid_lon),
            GeoPoint(destination.lat, destination.lon)
        ]

    @staticmethod
    def build_anchored_path(origin: Airport, destination: Airport,
                            through: GeoPoint) -> List[GeoPoint]:
        """
        Origin, a known in-flight position, destination. The position sits
        at progress 0.5 under uniform-per-segment interpolation.
        """
        return [
            GeoPoint(origin.lat, origin.lon),
            GeoPoint(through.lat, through.lon),
            GeoPoint(destination.lat, destination.lon)
        ]

    def build_rerouted_path(self, origin: Airport, destination: Airport,
                            bend_factor: float) -> List[GeoPoint]:
        """
        Origin, laterally bent midpoint, destination.

        A positive bend pushes the midpoint north-west, a negative one
        south-east. No randomness is involved.
        """
        mid = self._midpoint(origin, destination)
        offset = bend_factor * self.bend_scale_deg
        return [
            GeoPoint(origin.lat, origin.lon),
            GeoPoint(mid.lat + offset, mid.lon - offset),
            GeoPoint(destination.lat, destination.lon)
        ]
