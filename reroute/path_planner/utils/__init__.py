from .interpolation import position_at, path_length_deg

__all__ = [
    "position_at",
    "path_length_deg"
]
