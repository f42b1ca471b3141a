# reroute/ingestion/__init__.py
"""
ingestion - Normalizes provider flight data into engine flights
"""
from .adapters import AviationStackAdapter, OpenSkyStateAdapter, FlatRecordAdapter, DEFAULT_ADAPTERS
from .core import FlightNormalizer, IngestionDefaults, extract_items
from .data_models import FlightRecord
from .exceptions import IngestionError, FeedConfigurationError
from .feed_client import FlightFeedClient

__all__ = [
    'AviationStackAdapter',
    'OpenSkyStateAdapter',
    'FlatRecordAdapter',
    'DEFAULT_ADAPTERS',
    'FlightNormalizer',
    'IngestionDefaults',
    'extract_items',
    'FlightRecord',
    'IngestionError',
    'FeedConfigurationError',
    'FlightFeedClient'
]
