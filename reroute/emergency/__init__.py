# reroute/emergency/__init__.py
"""
Emergency scenarios, the risk model and the condition list
"""
from .constants import Scenario, ScenarioProfile, RiskThresholds, SCENARIO_PROFILES, DEFAULT_SCENARIO
from .core import RiskModel, RISK_MODEL, assess_risk, risk_score
from .conditions import build_conditions, summarize_fleet
from .data_models import Condition, RiskAssessment
from .exceptions import ScenarioError, UnknownScenarioError

# Public API
__all__ = [
    'Scenario',
    'ScenarioProfile',
    'RiskThresholds',
    'SCENARIO_PROFILES',
    'DEFAULT_SCENARIO',
    'RiskModel',
    'RISK_MODEL',
    'assess_risk',
    'risk_score',
    'build_conditions',
    'summarize_fleet',
    'Condition',
    'RiskAssessment',
    'ScenarioError',
    'UnknownScenarioError'
]
