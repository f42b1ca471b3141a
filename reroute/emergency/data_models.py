# reroute/emergency/data_models.py
from dataclasses import dataclass, asdict
from typing import Any, Dict

@dataclass(frozen=True)
class Condition:
    """Read-only display record derived from the active scenario."""
    id: str
    type: str
    label: str
    severity: str
    description: str
    active: bool = True

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

@dataclass(frozen=True)
class RiskAssessment:
    """Outcome of scoring one flight against the active scenario."""
    score: float
    predicate_matched: bool = False
    is_emergency: bool = False
