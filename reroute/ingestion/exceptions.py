# reroute/ingestion/exceptions.py
"""
Ingestion exceptions. Malformed records never raise; these cover
misconfiguration of the live feed only.
"""

class IngestionError(Exception):
    """Base class for ingestion errors"""
    pass

class FeedConfigurationError(IngestionError):
    """Live feed URL or credentials are missing"""
    def __init__(self, setting, message="Live flight feed is not configured"):
        self.setting = setting
        super().__init__(f"{message}: {setting} not set")
