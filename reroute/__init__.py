# reroute/__init__.py
"""
reroute - Flight-state simulation, risk scoring and reroute approval engine
for the ReRoute Mission Console.
"""

__version__ = "0.1.0"
