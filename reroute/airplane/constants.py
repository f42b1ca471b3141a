# reroute/airplane/constants.py

class FlightStatus:
    SCHEDULED = "scheduled"
    ENROUTE = "enroute"
    LANDED = "landed"
    DELAYED = "delayed"
    CANCELLED = "cancelled"

class FlightPhase:
    CLIMB = "climb"
    CRUISE = "cruise"
    DESCENT = "descent"

class FlightPlanDefaults:
    """Equipment and timing fields for the ICAO flight-plan text."""

    AIRCRAFT_TYPE = "B738"
    WAKE_CATEGORY = "M"
    EQUIPMENT = "SDFGIRWY/S"
    DEPARTURE_TIME = "0800"

    # Cruise level issued with a reroute clearance
    REROUTE_LEVEL = "F310"
    REROUTE_LEVEL_ALTERNATE = "F290"

    DIRECT_MARKER = "DCT"
