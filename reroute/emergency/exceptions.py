# reroute/emergency/exceptions.py
"""
Emergency scenario exceptions
"""

class ScenarioError(Exception):
    """Base class for all scenario errors"""
    pass

class UnknownScenarioError(ScenarioError):
    """Requested scenario id is not part of the scenario catalog"""
    def __init__(self, scenario_id, message="Unknown scenario"):
        self.scenario_id = scenario_id
        super().__init__(f"{message}: {scenario_id!r}")
