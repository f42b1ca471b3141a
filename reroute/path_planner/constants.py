# reroute/path_planner/constants.py

class PathConstants:
    # Max midpoint jitter for initial paths, degrees per axis
    INITIAL_JITTER_DEG = 0.8

    # Reroute midpoint offset = bend_factor * scale (lat +, lon -)
    REROUTE_BEND_SCALE_DEG = 1.2

    NM_PER_DEGREE = 60.0

    # Progress of the anchor point on an origin/position/destination path
    ANCHOR_PROGRESS = 0.5
