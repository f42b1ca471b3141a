# reroute/path_planner/utils/interpolation.py
"""
Uniform-per-segment path interpolation. Every segment gets an equal share
of [0, 1] regardless of its geographic length; this is the only strategy
used by the engine so generator and stepper always agree on speed.
Logging is omitted here as these are high-frequency, low-level functions.
"""
from typing import Optional, Sequence

import numpy as np

from ..data_models import GeoPoint

def _as_array(path: Sequence[GeoPoint]) -> np.ndarray:
    return np.array([(p.lat, p.lon) for p in path], dtype=float)

def path_length_deg(path: Sequence[GeoPoint]) -> float:
    """Total Euclidean length of the polyline, in degrees."""
    if len(path) < 2:
        return 0.0
    coords = _as_array(path)
    return float(np.sum(np.linalg.norm(np.diff(coords, axis=0), axis=1)))

def position_at(path: Sequence[GeoPoint], t: float) -> Optional[GeoPoint]:
    """
    Returns the position at normalized progress `t` along `path`.

    Args:
        path: Ordered path points.
        t: Progress; values outside [0, 1] are clamped.

    Returns:
        The interpolated point, the single point of a one-point path, the
        first point of a zero-length path, or None for an empty path.
    """
    if not path:
        return None
    if len(path) == 1:
        return path[0]

    coords = _as_array(path)
    if not np.any(np.diff(coords, axis=0)):
        return path[0]

    t = min(max(float(t), 0.0), 1.0)
    knots = np.linspace(0.0, 1.0, len(path))
    lat = float(np.interp(t, knots, coords[:, 0]))
    lon = float(np.interp(t, knots, coords[:, 1]))
    return GeoPoint(lat, lon)
