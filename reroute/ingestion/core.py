# reroute/ingestion/core.py
"""
Normalizes provider payloads into a fixed-size list of complete flight
records, then into Flight objects at their reported positions.

    payload -> extract_items -> adapter.parse -> defaulting pass
            -> ensure_fleet_size -> build_flights

Nothing in this pipeline raises on malformed data: unknown shapes are
skipped and missing values are drawn from bounded random bands.
"""
import logging
import random
from dataclasses import replace
from typing import Any, Iterable, List, Optional

from ..airplane.data_models import Flight
from ..airports.catalog import AirportCatalog, AIRPORT_CATALOG
from ..path_planner.constants import PathConstants
from ..path_planner.core import PathGenerator
from ..path_planner.data_models import GeoPoint
from .adapters import DEFAULT_ADAPTERS
from .data_models import FlightRecord

logger = logging.getLogger(__name__)

class IngestionDefaults:
    """Fallback bands applied when a provider omits a field."""
    LAT_BASE, LAT_SPAN = 37.0, 4.0
    LON_BASE, LON_SPAN = -122.0, 6.0
    ALT_BASE_FT, ALT_SPAN_FT = 30000.0, 8000.0
    SPEED_BASE_KTS, SPEED_SPAN_KTS = 420.0, 80.0

    FLEET_SIZE = 10
    PAD_LAT_STEP = 0.4
    PAD_LON_STEP = 1.3

    TEMPLATE = FlightRecord(
        id="SIM-1",
        callsign="SIM1",
        origin="KLAX",
        destination="KJFK",
        origin_name="Los Angeles Intl",
        destination_name="John F. Kennedy Intl",
        latitude=36.0,
        longitude=-115.0,
        altitude=32000.0,
        speed_kts=430.0,
        source="template"
    )

def extract_items(payload: Any) -> List[Any]:
    """Accepts `{"data": [...]}`, `{"states": [...]}` or a bare list."""
    if isinstance(payload, list):
        return payload
    if isinstance(payload, dict):
        for key in ("data", "states", "flights"):
            if isinstance(payload.get(key), list):
                return payload[key]
    return []

class FlightNormalizer:
    """Tagged-variant parser with a final validation and defaulting pass."""

    def __init__(self, rng: Optional[random.Random] = None, adapters=None,
                 catalog: Optional[AirportCatalog] = None,
                 fleet_size: int = IngestionDefaults.FLEET_SIZE):
        self.rng = rng or random.Random()
        self.adapters = adapters or DEFAULT_ADAPTERS
        self.catalog = catalog or AIRPORT_CATALOG
        self.fleet_size = fleet_size

    def parse(self, items: Iterable[Any]) -> List[FlightRecord]:
        records = []
        for index, item in enumerate(items):
            adapter = next((a for a in self.adapters if a.matches(item)), None)
            if adapter is None:
                logger.warning(f"Skipping record {index}: unrecognized provider shape ({type(item).__name__})")
                continue
            records.append(adapter.parse(item, len(records)))
        return records

    def apply_defaults(self, record: FlightRecord) -> FlightRecord:
        d = IngestionDefaults
        filled = replace(record)
        if filled.latitude is None or not -90.0 <= filled.latitude <= 90.0:
            filled.latitude = d.LAT_BASE + self.rng.random() * d.LAT_SPAN
        if filled.longitude is None or not -180.0 <= filled.longitude <= 180.0:
            filled.longitude = d.LON_BASE + self.rng.random() * d.LON_SPAN
        if filled.altitude is None:
            filled.altitude = d.ALT_BASE_FT + self.rng.random() * d.ALT_SPAN_FT
        if filled.speed_kts is None:
            filled.speed_kts = d.SPEED_BASE_KTS + self.rng.random() * d.SPEED_SPAN_KTS
        if filled.origin_name is None and self.catalog.contains(filled.origin):
            filled.origin_name = self.catalog.get(filled.origin).name
        if filled.destination_name is None and self.catalog.contains(filled.destination):
            filled.destination_name = self.catalog.get(filled.destination).name
        return filled

    def ensure_fleet_size(self, records: List[FlightRecord]) -> List[FlightRecord]:
        """Pads with offset SIM clones, or truncates, to exactly `fleet_size`."""
        d = IngestionDefaults
        if len(records) >= self.fleet_size:
            return records[:self.fleet_size]

        template = records[0] if records else d.TEMPLATE
        result = list(records)
        start = len(records)
        if not records:
            logger.info("No usable flight records; filling fleet from the simulation template")
        for i in range(start, self.fleet_size):
            result.append(replace(
                template,
                id=f"SIM-{i + 1}",
                callsign=f"SIM{i + 1}",
                latitude=template.latitude + (i - 5) * d.PAD_LAT_STEP,
                longitude=template.longitude + (i - 5) * d.PAD_LON_STEP,
                source="padding"
            ))
        return result

    def normalize(self, payload: Any) -> List[FlightRecord]:
        records = [self.apply_defaults(r) for r in self.parse(extract_items(payload))]
        logger.info(f"Normalized {len(records)} flight records")
        return self.ensure_fleet_size(records)

    def build_flights(self, records: List[FlightRecord], path_generator: PathGenerator) -> List[Flight]:
        """
        Turns complete records into Flights at their reported positions.

        A record whose endpoints both resolve in the catalog gets an
        origin/position/destination path with progress on the reported
        point. Any other record keeps an empty path, so the scheduler
        leaves it where the provider put it.
        """
        flights = []
        for record in records:
            position = GeoPoint(record.latitude, record.longitude)
            path, progress = [], 0.0
            if self.catalog.contains(record.origin) and self.catalog.contains(record.destination):
                path = path_generator.build_anchored_path(
                    self.catalog.get(record.origin), self.catalog.get(record.destination), position)
                progress = PathConstants.ANCHOR_PROGRESS
            else:
                logger.debug(f"{record.callsign}: endpoints {record.origin}/{record.destination} not in catalog, not animated")
            flights.append(Flight(
                id=record.id,
                callsign=record.callsign,
                origin=record.origin,
                destination=record.destination,
                origin_name=record.origin_name,
                destination_name=record.destination_name,
                status=record.status,
                latitude=position.lat,
                longitude=position.lon,
                altitude=record.altitude,
                speed_kts=record.speed_kts,
                path=path,
                progress=progress,
                route=record.route
            ))
        return flights
