# reroute/simulation/config.py
import os
from dataclasses import dataclass, fields
from typing import Optional

@dataclass
class ConsoleConfig:
    """Tunable policy and timing for one console session."""
    tick_interval_sec: float = 1.0
    progress_delta: float = 0.02
    altitude_amplitude_ft: float = 200.0
    risk_threshold: float = 0.6
    risk_reduction_factor: float = 0.4
    fleet_size: int = 10
    seed: Optional[int] = None
    initial_scenario: str = "wx"
    feed_base_url: Optional[str] = None
    feed_api_key: Optional[str] = None
    feed_timeout_sec: float = 10.0
    feed_cache_enabled: bool = False

    ENV_PREFIX = "REROUTE_"

    @classmethod
    def from_env(cls, environ=None) -> "ConsoleConfig":
        """Reads REROUTE_<FIELD> overrides, e.g. REROUTE_TICK_INTERVAL_SEC=2."""
        environ = os.environ if environ is None else environ
        config = cls()
        for f in fields(cls):
            raw = environ.get(f"{cls.ENV_PREFIX}{f.name.upper()}")
            if raw is None or raw == "":
                continue
            current = getattr(config, f.name)
            if isinstance(current, bool):
                value = raw.strip().lower() in ("1", "true", "yes", "on")
            elif isinstance(current, int) or f.name == "seed":
                value = int(raw)
            elif isinstance(current, float):
                value = float(raw)
            else:
                value = raw
            setattr(config, f.name, value)
        return config
