# reroute/ingestion/adapters.py
"""
One adapter per known provider shape. Each recognizes its own records and
turns them into a FlightRecord, converting units where the provider does
not report feet and knots. Missing values stay None for the defaulting pass.
"""
from typing import Any, Dict, List, Optional

from ..airplane.constants import FlightStatus
from .data_models import FlightRecord

METERS_TO_FEET = 3.28084
KMH_TO_KNOTS = 0.539957
MPS_TO_KNOTS = 1.943844

def to_float(value: Any) -> Optional[float]:
    """Lenient numeric coercion for provider and upload values."""
    if value is None or isinstance(value, bool):
        return None
    try:
        result = float(str(value).strip()) if isinstance(value, str) else float(value)
    except (TypeError, ValueError):
        return None
    if result != result:  # NaN
        return None
    return result

def positive(value: Optional[float], factor: float = 1.0) -> Optional[float]:
    """Scaled value, or None when missing or not positive."""
    if value is None or value <= 0:
        return None
    return value * factor

def _first(record: Dict[str, Any], keys: List[str]) -> Any:
    for key in keys:
        value = record.get(key)
        if value not in (None, ""):
            return value
    return None

def map_status(status: Optional[str]) -> str:
    s = (status or "").lower()
    if s == "active":
        return FlightStatus.ENROUTE
    if s == "landed":
        return FlightStatus.LANDED
    if s == "scheduled":
        return FlightStatus.SCHEDULED
    if s == "cancelled":
        return FlightStatus.CANCELLED
    if s in ("incident", "diverted"):
        return FlightStatus.DELAYED
    return FlightStatus.ENROUTE

class AviationStackAdapter:
    """Nested `departure` / `arrival` / `live` / `flight` records."""
    name = "aviationstack"

    def matches(self, record: Any) -> bool:
        return isinstance(record, dict) and any(
            isinstance(record.get(k), dict) for k in ("live", "departure", "arrival"))

    def parse(self, record: Dict[str, Any], index: int) -> FlightRecord:
        dep = record.get("departure") or {}
        arr = record.get("arrival") or {}
        live = record.get("live") or {}
        flt = record.get("flight") or {}

        callsign = _first(flt, ["iata", "icao", "number"]) or f"FL{index + 1}"
        return FlightRecord(
            id=f"{record.get('flight_date') or 'LIVE'}-{callsign}-{index}",
            callsign=str(callsign),
            origin=str(_first(dep, ["icao", "iata"]) or "UNKNOWN").upper(),
            destination=str(_first(arr, ["icao", "iata"]) or "UNKNOWN").upper(),
            origin_name=dep.get("airport"),
            destination_name=arr.get("airport"),
            status=map_status(record.get("flight_status")),
            latitude=to_float(live.get("latitude")),
            longitude=to_float(live.get("longitude")),
            altitude=positive(to_float(live.get("altitude")), METERS_TO_FEET),
            speed_kts=positive(to_float(live.get("speed_horizontal")), KMH_TO_KNOTS),
            source=self.name
        )

class OpenSkyStateAdapter:
    """
    OpenSky-style state vectors:
    [icao24, callsign, origin_country, time_position, last_contact,
     longitude, latitude, baro_altitude, on_ground, velocity, ...]
    """
    name = "opensky"
    MIN_FIELDS = 10

    def matches(self, record: Any) -> bool:
        return (isinstance(record, (list, tuple)) and len(record) >= self.MIN_FIELDS
                and isinstance(record[0], str))

    def parse(self, record: List[Any], index: int) -> FlightRecord:
        callsign = (record[1] or "").strip() if isinstance(record[1], str) else ""
        callsign = callsign or record[0].upper()
        return FlightRecord(
            id=f"OSK-{record[0]}-{index}",
            callsign=callsign,
            status=FlightStatus.LANDED if record[8] is True else FlightStatus.ENROUTE,
            latitude=to_float(record[6]),
            longitude=to_float(record[5]),
            altitude=positive(to_float(record[7]), METERS_TO_FEET),
            speed_kts=positive(to_float(record[9]), MPS_TO_KNOTS),
            source=self.name
        )

class FlatRecordAdapter:
    """Flat rows from uploaded CSV/JSON files, with common column aliases."""
    name = "flat"

    CALLSIGN = ["callsign", "call_sign", "flight", "ident"]
    ORIGIN = ["origin", "dep", "from", "departure", "departure_icao", "origin_icao"]
    DESTINATION = ["destination", "dest", "arr", "to", "arrival", "arrival_icao", "destination_icao"]
    LATITUDE = ["latitude", "lat"]
    LONGITUDE = ["longitude", "lon", "lng", "long"]
    ALTITUDE = ["altitude", "alt", "altitude_ft", "alt_baro", "alt_ft"]
    SPEED = ["speedKts", "speed_kts", "speed", "groundspeed", "gs"]

    def matches(self, record: Any) -> bool:
        if not isinstance(record, dict):
            return False
        known = self.CALLSIGN + self.ORIGIN + self.DESTINATION + self.LATITUDE + self.LONGITUDE
        return any(k in record for k in known)

    def parse(self, record: Dict[str, Any], index: int) -> FlightRecord:
        callsign = _first(record, self.CALLSIGN) or f"FL{index + 1}"
        return FlightRecord(
            id=str(record.get("id") or f"UPL-{callsign}-{index}"),
            callsign=str(callsign).strip(),
            origin=str(_first(record, self.ORIGIN) or "UNKNOWN").strip().upper(),
            destination=str(_first(record, self.DESTINATION) or "UNKNOWN").strip().upper(),
            origin_name=record.get("originName") or record.get("origin_name"),
            destination_name=record.get("destinationName") or record.get("destination_name"),
            status=map_status(record.get("status")),
            latitude=to_float(_first(record, self.LATITUDE)),
            longitude=to_float(_first(record, self.LONGITUDE)),
            altitude=positive(to_float(_first(record, self.ALTITUDE))),
            speed_kts=positive(to_float(_first(record, self.SPEED))),
            route=record.get("route") or None,
            source=self.name
        )

# Order matters: the nested provider shape is checked before flat rows.
DEFAULT_ADAPTERS = [AviationStackAdapter(), OpenSkyStateAdapter(), FlatRecordAdapter()]
