# reroute/proposals/icao.py
"""
ICAO-style flight-plan text for the before/after views of a reroute.

    FPL-{callsign}-IS
    -C/{type}/{wake}-{equipment}
    -{origin}{deptime}
    -{speed}{level} {route}
    -{destination}{eet}
    -DOF/{yymmdd}
"""
from datetime import date
from typing import Optional

from ..airplane.constants import FlightPlanDefaults
from ..airplane.data_models import Flight
from ..path_planner.constants import PathConstants
from ..path_planner.utils.interpolation import path_length_deg

def _round_to_tens(value: float) -> int:
    return int(round(value / 10.0)) * 10

def encode_speed(speed_kts: float) -> str:
    """True airspeed in knots, e.g. 447 kt -> 'N0450'."""
    return f"N{max(0, _round_to_tens(speed_kts)):04d}"

def encode_level(altitude_ft: float) -> str:
    """Cruise flight level in hundreds of feet, e.g. 33 400 ft -> 'F330'."""
    level = max(0, _round_to_tens(altitude_ft / 100.0))
    return f"F{level:03d}"

def estimated_elapsed_time(flight: Flight) -> str:
    """HHMM from the path's degree length at the flight's speed."""
    distance_nm = path_length_deg(flight.path) * PathConstants.NM_PER_DEGREE
    if flight.speed_kts <= 0 or distance_nm <= 0:
        return "0000"
    minutes = int(round(distance_nm / flight.speed_kts * 60))
    hours, minutes = divmod(minutes, 60)
    return f"{min(hours, 99):02d}{minutes:02d}"

def format_flight_plan(flight: Flight, route: str, flight_date: date,
                       level: Optional[str] = None) -> str:
    lines = [
        f"FPL-{flight.callsign}-IS",
        f"-C/{FlightPlanDefaults.AIRCRAFT_TYPE}/{FlightPlanDefaults.WAKE_CATEGORY}-{FlightPlanDefaults.EQUIPMENT}",
        f"-{flight.origin}{FlightPlanDefaults.DEPARTURE_TIME}",
        f"-{encode_speed(flight.speed_kts)}{level or encode_level(flight.base_altitude)} {route}",
        f"-{flight.destination}{estimated_elapsed_time(flight)}",
        f"-DOF/{flight_date.strftime('%y%m%d')}",
    ]
    return "\n".join(lines)

def reroute_level(flight: Flight) -> str:
    """Cruise level literal issued with the reroute clearance."""
    if encode_level(flight.base_altitude) == FlightPlanDefaults.REROUTE_LEVEL:
        return FlightPlanDefaults.REROUTE_LEVEL_ALTERNATE
    return FlightPlanDefaults.REROUTE_LEVEL
