# reroute/simulation/tests/test_controller.py
import random
import unittest

from reroute.airplane import Flight
from reroute.airports import AIRPORT_CATALOG
from reroute.approval import InvalidTransitionError, WorkflowState
from reroute.emergency import Scenario, UnknownScenarioError
from reroute.path_planner import GeoPoint, PathGenerator, position_at
from reroute.simulation import ConsoleConfig, ConsoleController

# (callsign, origin, destination, longitude, speed, altitude)
FLEET = [
    ("HOT1", "KLAX", "KJFK", -97.0, 460, 15000),   # weather band, fast, low -> 1.0
    ("HOT2", "KSFO", "KORD", -100.0, 450, 33000),  # weather band, fast -> 0.85
    ("WARM", "KSEA", "KDEN", -98.0, 380, 35000),   # weather band -> 0.64
    ("COOL1", "KLAX", "KORD", -118.0, 450, 33000), # 0.5, runway candidate
    ("COOL2", "KBOS", "KMIA", -80.0, 400, 36000),  # 0.35, staffing candidate
    ("COOL3", "KPHX", "KLAS", -113.0, 360, 37000),
    ("COOL4", "KDFW", "KATL", -110.0, 300, 25000),
    ("COOL5", "KATL", "KSEA", -115.0, 420, 31000),
    ("COOL6", "KMIA", "KPHX", -112.0, 390, 34000),
    ("COOL7", "KDEN", "KSFO", -108.0, 410, 38000),
]

def build_fleet():
    paths = PathGenerator(random.Random(21))
    flights = []
    for i, (callsign, origin, destination, lon, speed, altitude) in enumerate(FLEET):
        flight = Flight(id=f"FL{i + 1}", callsign=callsign, origin=origin, destination=destination,
                        latitude=38.0, longitude=lon, altitude=altitude, speed_kts=speed)
        flight.path = paths.generate_initial_path(AIRPORT_CATALOG.get(origin), AIRPORT_CATALOG.get(destination))
        flights.append(flight)
    return flights

class TestConsoleController(unittest.TestCase):
    def setUp(self):
        self.config = ConsoleConfig(seed=4)
        self.controller = ConsoleController(self.config, flights=build_fleet())

    def by_callsign(self, callsign):
        return next(f for f in self.controller.state.flights if f.callsign == callsign)

    def test_initial_pipeline_scores_and_proposes(self):
        self.assertEqual(self.by_callsign("HOT1").risk_score, 1.0)
        self.assertEqual(self.by_callsign("HOT2").risk_score, 0.85)
        self.assertEqual(self.by_callsign("WARM").risk_score, 0.64)
        self.assertEqual(self.by_callsign("COOL1").risk_score, 0.5)
        proposed = {p.callsign for p in self.controller.state.proposals}
        self.assertEqual(proposed, {"HOT1", "HOT2", "WARM"})
        self.assertEqual(self.controller.state.conditions[0].type, "weather")
        self.assertTrue(self.by_callsign("HOT1").is_emergency)
        self.assertFalse(self.by_callsign("WARM").is_emergency)

    def test_end_to_end_approval(self):
        qualifying = {f.id for f in self.controller.state.flights if f.risk_score >= 0.6}
        old_paths = {f.id: list(f.path) for f in self.controller.state.flights}

        frozen_ids = self.controller.on_approve_all()

        self.assertEqual(set(frozen_ids), qualifying)
        for flight in self.controller.state.flights:
            if flight.id in qualifying:
                self.assertTrue(flight.frozen)
                self.assertNotEqual(flight.path, old_paths[flight.id])
                self.assertIn("WXAVD", flight.route)
            else:
                self.assertFalse(flight.frozen)
        self.assertEqual(self.controller.state.proposals, [])
        self.assertEqual(self.controller.proposal_generator.build_proposals(
            self.controller.state.flights, Scenario.WEATHER, self.controller.locked), [])

        frozen_before = {f.id: (f.risk_score, f.route) for f in self.controller.state.flights if f.frozen}
        self.controller.on_scenario_change("runway")
        self.controller.on_tick()
        self.controller.on_scenario_change("staffing")

        for flight in self.controller.state.flights:
            if flight.frozen:
                self.assertEqual((flight.risk_score, flight.route), frozen_before[flight.id])
        self.assertEqual(self.by_callsign("COOL2").risk_score, 0.7)
        self.assertEqual(self.controller.state.proposals, [])

    def test_non_frozen_flights_rescore_on_scenario_change(self):
        self.controller.on_scenario_change(Scenario.RUNWAY)
        self.assertEqual(self.by_callsign("COOL1").risk_score, 0.85)
        self.assertEqual(self.by_callsign("WARM").risk_score, 0.29)
        self.assertEqual(self.controller.state.conditions[0].type, "runway")
        self.assertIn("COOL1", {p.callsign for p in self.controller.state.proposals})

    def test_scenario_change_starts_new_emergency_epoch(self):
        self.assertTrue(self.by_callsign("HOT2").is_emergency)
        self.controller.on_scenario_change("staffing")
        self.assertFalse(self.by_callsign("HOT2").is_emergency)

    def test_frozen_flights_keep_animating(self):
        self.controller.on_approve_all()
        hot = self.by_callsign("HOT1")
        start = (hot.progress, hot.latitude, hot.longitude)
        self.controller.on_tick()
        self.assertNotEqual((hot.progress, hot.latitude, hot.longitude), start)
        self.assertEqual(hot.progress, self.config.progress_delta)

    def test_approve_without_proposals_is_rejected(self):
        self.controller.on_scenario_change("staffing")
        for proposal in list(self.controller.state.proposals):
            self.controller.on_reject(proposal.id)
        with self.assertRaises(InvalidTransitionError):
            self.controller.on_approve_all()
        self.assertEqual(self.controller.workflow.state, WorkflowState.OPEN)

    def test_rejected_proposal_stays_rejected_until_scenario_changes(self):
        target = self.controller.state.proposals[0]
        self.controller.on_reject(target.id)
        self.controller.on_tick()
        self.assertNotIn(target.id, [p.id for p in self.controller.state.proposals])
        self.controller.on_scenario_change("wx")
        self.assertIn(target.id, [p.id for p in self.controller.state.proposals])

    def test_unknown_scenario(self):
        with self.assertRaises(UnknownScenarioError):
            self.controller.on_scenario_change("volcano")
        self.assertEqual(self.controller.state.scenario, Scenario.WEATHER)

    def test_ingest_replaces_fleet_and_refuses_when_locked(self):
        count = self.controller.on_ingest({"data": []})
        self.assertEqual(count, 10)
        self.assertTrue(all(f.id.startswith("SIM-") for f in self.controller.state.flights))
        self.controller.on_ingest([{"callsign": "N1", "origin": "KDEN", "destination": "KORD",
                                    "lat": 39.0, "lon": -97.0, "speed": 460, "altitude": 15000}])
        self.controller.on_approve_all()
        with self.assertRaises(InvalidTransitionError):
            self.controller.on_ingest({"data": []})

    def test_ingested_position_survives_tick(self):
        item = {
            "flight_status": "active",
            "departure": {"iata": "ORD"},
            "arrival": {"iata": "BOS"},
            "flight": {"iata": "UA9"},
            "live": {"latitude": 41.9, "longitude": -87.9, "altitude": 10000, "speed_horizontal": 800},
        }
        self.controller.on_ingest({"data": [item]})
        before = [(f.latitude, f.longitude) for f in self.controller.state.flights]
        self.assertEqual(before[0], (41.9, -87.9))
        self.assertEqual(self.controller.on_tick(), 0)
        after = [(f.latitude, f.longitude) for f in self.controller.state.flights]
        self.assertEqual(after, before)
        self.assertEqual(len(set(after)), 10)

    def test_ingested_catalog_flight_animates_from_reported_position(self):
        self.controller.on_ingest([{"callsign": "N2", "origin": "KDEN", "destination": "KORD",
                                    "lat": 40.5, "lon": -95.0, "speed": 430, "altitude": 33000}])
        flight = self.controller.state.flights[0]
        self.assertEqual(flight.path[1], GeoPoint(40.5, -95.0))
        self.assertEqual((flight.latitude, flight.longitude), (40.5, -95.0))
        self.controller.on_tick()
        self.assertAlmostEqual(flight.progress, 0.5 + self.config.progress_delta)
        expected = position_at(flight.path, flight.progress)
        self.assertAlmostEqual(flight.latitude, expected.lat)
        self.assertAlmostEqual(flight.longitude, expected.lon)
        self.assertLess(abs(flight.longitude + 95.0), 1.0)

    def test_snapshot_is_detached(self):
        snapshot = self.controller.snapshot()
        snapshot["flights"][0]["riskScore"] = 0.0
        snapshot["flights"][0]["path"].clear()
        self.assertEqual(self.controller.state.flights[0].risk_score, 1.0)
        self.assertEqual(len(self.controller.state.flights[0].path), 3)
        copies = self.controller.flights()
        copies[0].frozen = True
        self.assertFalse(self.controller.state.flights[0].frozen)
        self.assertEqual(snapshot["summary"]["total_flights"], 10)
        self.assertEqual(snapshot["workflowState"], "OPEN")

class TestDefaultFleet(unittest.TestCase):
    def test_seeded_console_is_reproducible(self):
        a = ConsoleController(ConsoleConfig(seed=99)).snapshot()
        b = ConsoleController(ConsoleConfig(seed=99)).snapshot()
        self.assertEqual(a["flights"], b["flights"])
        self.assertEqual(len(a["flights"]), 10)

    def test_empty_fleet_is_stable(self):
        controller = ConsoleController(ConsoleConfig(seed=1), flights=[])
        self.assertEqual(controller.on_tick(), 0)
        snapshot = controller.snapshot()
        self.assertEqual(snapshot["flights"], [])
        self.assertEqual(snapshot["proposals"], [])
        self.assertEqual(snapshot["summary"]["total_flights"], 0)

class TestConsoleConfig(unittest.TestCase):
    def test_from_env(self):
        config = ConsoleConfig.from_env({
            "REROUTE_TICK_INTERVAL_SEC": "2",
            "REROUTE_RISK_THRESHOLD": "0.5",
            "REROUTE_SEED": "12",
            "REROUTE_FLEET_SIZE": "12",
            "REROUTE_FEED_CACHE_ENABLED": "true",
            "REROUTE_FEED_BASE_URL": "https://feed.example.com",
        })
        self.assertEqual(config.tick_interval_sec, 2.0)
        self.assertEqual(config.risk_threshold, 0.5)
        self.assertEqual(config.seed, 12)
        self.assertEqual(config.fleet_size, 12)
        self.assertTrue(config.feed_cache_enabled)
        self.assertEqual(config.feed_base_url, "https://feed.example.com")
        self.assertEqual(config.risk_reduction_factor, 0.4)
