# reroute/simulation/__init__.py
"""
simulation - Animation scheduling and the console controller pipeline
"""
from .config import ConsoleConfig
from .core import ConsoleController, ConsoleState
from .scheduler import AnimationScheduler, advance_progress

__all__ = [
    'ConsoleConfig',
    'ConsoleController',
    'ConsoleState',
    'AnimationScheduler',
    'advance_progress'
]
