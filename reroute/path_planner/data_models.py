# reroute/path_planner/data_models.py
from dataclasses import dataclass
from typing import Dict

@dataclass(frozen=True)
class GeoPoint:
    """A single point of a flight path, in decimal degrees."""
    lat: float
    lon: float

    def to_dict(self) -> Dict[str, float]:
        return {"lat": self.lat, "lon": self.lon}
