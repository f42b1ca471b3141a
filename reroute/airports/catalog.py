# reroute/airports/catalog.py
"""
In-memory airport lookup. Unknown codes resolve to the default entry so
that path generation never fails on bad ingestion data.
"""
import logging
from typing import Dict, List, Optional

from .data_models import Airport

logger = logging.getLogger(__name__)

DEFAULT_AIRPORT_CODE = "KLAX"

AIRPORTS: Dict[str, Airport] = {
    airport.code: airport for airport in (
        Airport("KLAX", "Los Angeles Intl", 33.9425, -118.4081),
        Airport("KJFK", "John F. Kennedy Intl", 40.6398, -73.7789),
        Airport("KSFO", "San Francisco Intl", 37.6189, -122.3750),
        Airport("KORD", "Chicago O'Hare Intl", 41.9786, -87.9048),
        Airport("KDEN", "Denver Intl", 39.8617, -104.6731),
        Airport("KATL", "Hartsfield-Jackson Atlanta Intl", 33.6367, -84.4281),
        Airport("KDFW", "Dallas/Fort Worth Intl", 32.8968, -97.0380),
        Airport("KSEA", "Seattle-Tacoma Intl", 47.4490, -122.3093),
        Airport("KBOS", "Boston Logan Intl", 42.3643, -71.0052),
        Airport("KMIA", "Miami Intl", 25.7932, -80.2906),
        Airport("KPHX", "Phoenix Sky Harbor Intl", 33.4343, -112.0116),
        Airport("KLAS", "Harry Reid Intl", 36.0801, -115.1522),
    )
}

class AirportCatalog:
    """Read-only airport lookup with a default fallback entry."""

    def __init__(self, airports: Optional[Dict[str, Airport]] = None,
                 default_code: str = DEFAULT_AIRPORT_CODE):
        self._airports = dict(airports if airports is not None else AIRPORTS)
        if default_code not in self._airports:
            raise ValueError(f"Default airport {default_code} is not in the catalog")
        self.default_code = default_code

    def get(self, code: Optional[str]) -> Airport:
        """Return the airport for `code`, or the default entry if unknown."""
        key = (code or "").strip().upper()
        airport = self._airports.get(key)
        if airport is None:
            logger.debug(f"Unknown airport code {code!r}; falling back to {self.default_code}")
            return self._airports[self.default_code]
        return airport

    def contains(self, code: Optional[str]) -> bool:
        return (code or "").strip().upper() in self._airports

    def codes(self) -> List[str]:
        return list(self._airports.keys())

    def __len__(self) -> int:
        return len(self._airports)

# --- Public Interface ---
AIRPORT_CATALOG = AirportCatalog()
