# reroute/airplane/__init__.py
"""
airplane - The simulated flight record shared by every engine component
"""
from .data_models import Flight, default_route
from .constants import FlightPlanDefaults, FlightStatus, FlightPhase

__all__ = [
    'Flight',
    'default_route',
    'FlightPlanDefaults',
    'FlightStatus',
    'FlightPhase'
]
