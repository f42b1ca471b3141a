# reroute/airports/__init__.py
"""
Static catalog of named airports used to anchor simulated flight paths.
"""
from .catalog import AirportCatalog, AIRPORT_CATALOG, AIRPORTS, DEFAULT_AIRPORT_CODE
from .data_models import Airport

__all__ = [
    'Airport',
    'AirportCatalog',
    'AIRPORT_CATALOG',
    'AIRPORTS',
    'DEFAULT_AIRPORT_CODE'
]
