# reroute/random_flight/config.py

class RandomFleetConfig:
    """Configuration for synthetic fleet generation."""

    DEFAULT_FLEET_SIZE = 10
    AIRLINE_PREFIXES = ["AAL", "DAL", "UAL", "SWA", "JBU", "ASA", "FFT", "NKS"]
    MIN_FLIGHT_NUMBER = 100
    MAX_FLIGHT_NUMBER = 2999
    MIN_ALTITUDE_FT = 12000
    MAX_ALTITUDE_FT = 39000
    MIN_SPEED_KTS = 380
    MAX_SPEED_KTS = 520

    # Phase by altitude band
    CLIMB_CEILING_FT = 18000
