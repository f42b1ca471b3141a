# reroute/random_flight/exceptions.py

class RandomFleetError(Exception):
    """Base exception for synthetic fleet generation errors."""
    pass

class InvalidFleetSizeError(RandomFleetError):
    """Raised when a non-positive fleet size is requested."""
    pass
