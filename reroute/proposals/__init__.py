# reroute/proposals/__init__.py
"""
proposals - Reroute proposals and their ICAO flight-plan text
"""
from .core import ProposalGenerator, insert_waypoint, DEFAULT_RISK_THRESHOLD, DEFAULT_REDUCTION_FACTOR
from .data_models import RerouteProposal
from .icao import format_flight_plan, encode_speed, encode_level, estimated_elapsed_time

__all__ = [
    'ProposalGenerator',
    'RerouteProposal',
    'insert_waypoint',
    'format_flight_plan',
    'encode_speed',
    'encode_level',
    'estimated_elapsed_time',
    'DEFAULT_RISK_THRESHOLD',
    'DEFAULT_REDUCTION_FACTOR'
]
