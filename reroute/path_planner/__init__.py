# reroute/path_planner/__init__.py
"""
Initializes the path_planner module, defining its public API.

Paths are short polylines (origin, perturbed midpoint, destination) used
purely for visualization; positions along them come from a single
uniform-per-segment interpolator.
"""
from .core import PathGenerator
from .data_models import GeoPoint
from .utils.interpolation import position_at, path_length_deg

__all__ = [
    'PathGenerator',
    'GeoPoint',
    'position_at',
    'path_length_deg'
]
