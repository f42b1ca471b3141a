# reroute/ingestion/feed_client.py
"""
Fetches raw flight items from an AviationStack-compatible live feed.

Any transport or decoding failure is logged and yields an empty list, so
the console falls back to its padded "no data" fleet.
"""
import logging
from typing import Any, Dict, List, Optional

import requests
import requests_cache

from .core import extract_items
from .exceptions import FeedConfigurationError

class FlightFeedClient:
    """
    A dedicated handler for fetching and optionally caching live flights.
    """

    def __init__(self, base_url: Optional[str], api_key: Optional[str],
                 timeout: float = 10.0, cache_enabled: bool = False,
                 cache_expire_sec: int = 60):
        """
        Args:
            base_url: Provider base URL; `/flights` is appended.
            api_key: Provider access key, sent as `access_key`.
            timeout: Request timeout in seconds.
            cache_enabled: If True, responses are cached to a local sqlite
                           file for `cache_expire_sec` seconds.
        """
        if not base_url:
            raise FeedConfigurationError("base_url")
        if not api_key:
            raise FeedConfigurationError("api_key")
        self.base_url = base_url.rstrip("/")
        self.api_key = api_key
        self.timeout = timeout
        if cache_enabled:
            self.session = requests_cache.CachedSession(
                'flight_feed_cache',
                backend='sqlite',
                expire_after=cache_expire_sec
            )
        else:
            self.session = requests.Session()
        logging.info(f"FlightFeedClient initialized for {self.base_url}. Cache enabled: {cache_enabled}")

    def fetch(self, params: Optional[Dict[str, str]] = None) -> List[Any]:
        """
        Returns the provider's raw flight items, or an empty list if the
        request fails.
        """
        query = {"access_key": self.api_key}
        query.update(params or {})
        try:
            response = self.session.get(f"{self.base_url}/flights", params=query, timeout=self.timeout)
            response.raise_for_status()
            items = extract_items(response.json())
            logging.info(f"Received {len(items)} items from the live flight feed.")
            return items
        except requests.exceptions.RequestException as e:
            logging.error(f"Failed to fetch live flights: {e}")
            return []
        except ValueError as e:
            logging.error(f"Live flight feed returned malformed JSON: {e}")
            return []
