# reroute/random_flight/__init__.py

"""
random_flight - Module for generating the synthetic initial fleet
"""

# Local Imports
from .core import RandomFleet
from .exceptions import RandomFleetError, InvalidFleetSizeError
from .config import RandomFleetConfig

__all__ = [
    'RandomFleet',
    'RandomFleetError',
    'InvalidFleetSizeError',
    'RandomFleetConfig'
]
