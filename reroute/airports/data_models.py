# reroute/airports/data_models.py
from dataclasses import dataclass

@dataclass(frozen=True)
class Airport:
    """A named location looked up by its ICAO code."""
    code: str
    name: str
    lat: float
    lon: float
