# reroute/ingestion/tests/test_normalizer.py
import random

import pytest

from reroute.airports import AIRPORT_CATALOG
from reroute.ingestion import (
    AviationStackAdapter,
    OpenSkyStateAdapter,
    FlatRecordAdapter,
    FlightNormalizer,
    FlightRecord,
    extract_items
)
from reroute.path_planner import PathGenerator, GeoPoint, position_at

AVIATIONSTACK_ITEM = {
    "flight_date": "2025-01-15",
    "flight_status": "active",
    "departure": {"airport": "San Francisco International", "icao": "KSFO", "iata": "SFO"},
    "arrival": {"airport": "O'Hare", "iata": "ORD"},
    "flight": {"number": "456", "iata": "DL456"},
    "live": {"latitude": 39.5, "longitude": -105.2, "altitude": 10000, "speed_horizontal": 800},
}

OPENSKY_STATE = ["a1b2c3", "UAL123  ", "United States", 1700000000, 1700000001,
                 -97.5, 36.2, 11000.0, False, 230.0, 85.0, 0.0]

@pytest.fixture
def normalizer():
    return FlightNormalizer(random.Random(5))

def test_aviationstack_adapter():
    adapter = AviationStackAdapter()
    assert adapter.matches(AVIATIONSTACK_ITEM)
    record = adapter.parse(AVIATIONSTACK_ITEM, 0)
    assert record.id == "2025-01-15-DL456-0"
    assert record.callsign == "DL456"
    assert record.origin == "KSFO"
    assert record.destination == "ORD"
    assert record.status == "enroute"
    assert record.altitude == pytest.approx(32808.4)
    assert record.speed_kts == pytest.approx(431.9656)

def test_aviationstack_missing_live_block():
    record = AviationStackAdapter().parse({"departure": {}, "flight_status": "diverted"}, 3)
    assert record.callsign == "FL4"
    assert record.origin == "UNKNOWN"
    assert record.status == "delayed"
    assert record.latitude is None and record.altitude is None

def test_opensky_adapter():
    adapter = OpenSkyStateAdapter()
    assert adapter.matches(OPENSKY_STATE)
    record = adapter.parse(OPENSKY_STATE, 0)
    assert record.callsign == "UAL123"
    assert record.latitude == 36.2
    assert record.longitude == -97.5
    assert record.altitude == pytest.approx(36089.24)
    assert record.speed_kts == pytest.approx(447.08412)

def test_flat_adapter_aliases():
    adapter = FlatRecordAdapter()
    row = {"ident": "N123AB", "dep": "klas", "arr": "KPHX", "lat": "36.1",
           "lng": "-115.1", "alt": "0", "gs": "250"}
    assert adapter.matches(row)
    record = adapter.parse(row, 0)
    assert record.callsign == "N123AB"
    assert record.origin == "KLAS"
    assert record.latitude == 36.1
    assert record.altitude is None
    assert record.speed_kts == 250.0

def test_unrecognized_shapes_are_skipped(normalizer):
    records = normalizer.parse([42, "junk", {"unrelated": True}, AVIATIONSTACK_ITEM])
    assert len(records) == 1
    assert records[0].source == "aviationstack"

def test_defaults_stay_in_bounds(normalizer):
    for _ in range(50):
        filled = normalizer.apply_defaults(FlightRecord(id="x", callsign="X"))
        assert 37.0 <= filled.latitude <= 41.0
        assert -122.0 <= filled.longitude <= -116.0
        assert 30000.0 <= filled.altitude <= 38000.0
        assert 420.0 <= filled.speed_kts <= 500.0

def test_defaults_keep_provided_values(normalizer):
    record = FlightRecord(id="x", callsign="X", origin="KJFK", latitude=10.0,
                          longitude=20.0, altitude=5000.0, speed_kts=200.0)
    filled = normalizer.apply_defaults(record)
    assert (filled.latitude, filled.longitude, filled.altitude, filled.speed_kts) == (10.0, 20.0, 5000.0, 200.0)
    assert filled.origin_name == "John F. Kennedy Intl"
    assert record.origin_name is None

def test_empty_payload_pads_from_template(normalizer):
    records = normalizer.normalize({"error": "upstream down"})
    assert len(records) == 10
    assert [r.id for r in records][:2] == ["SIM-1", "SIM-2"]
    assert records[0].latitude == pytest.approx(36.0 - 5 * 0.4)
    assert records[9].longitude == pytest.approx(-115.0 + 4 * 1.3)

def test_partial_payload_pads_from_first_record(normalizer):
    records = normalizer.normalize({"data": [AVIATIONSTACK_ITEM]})
    assert len(records) == 10
    assert records[0].callsign == "DL456"
    assert records[1].callsign == "SIM2"
    assert records[1].origin == "KSFO"
    assert records[1].latitude == pytest.approx(39.5 - 4 * 0.4)

def test_large_payload_is_truncated(normalizer):
    records = normalizer.normalize([dict(AVIATIONSTACK_ITEM) for _ in range(14)])
    assert len(records) == 10

def test_extract_items_variants():
    assert extract_items([1, 2]) == [1, 2]
    assert extract_items({"data": [1]}) == [1]
    assert extract_items({"states": [2]}) == [2]
    assert extract_items({"data": "nope"}) == []
    assert extract_items(None) == []

def test_build_flights_leaves_unresolved_endpoints_unanimated(normalizer):
    records = normalizer.normalize({"data": [AVIATIONSTACK_ITEM]})
    flights = normalizer.build_flights(records, PathGenerator(random.Random(1)))
    assert len(flights) == 10
    first = flights[0]
    # ORD is an IATA code and has no catalog entry
    assert first.destination == "ORD"
    assert first.path == []
    assert (first.latitude, first.longitude) == (39.5, -105.2)

def test_build_flights_anchors_path_on_reported_position(normalizer):
    records = normalizer.normalize({"error": "upstream down"})
    flights = normalizer.build_flights(records, PathGenerator(random.Random(1)))
    lax, jfk = AIRPORT_CATALOG.get("KLAX"), AIRPORT_CATALOG.get("KJFK")
    for record, flight in zip(records, flights):
        assert flight.path == [GeoPoint(lax.lat, lax.lon),
                               GeoPoint(record.latitude, record.longitude),
                               GeoPoint(jfk.lat, jfk.lon)]
        assert flight.progress == 0.5
        assert position_at(flight.path, flight.progress) == GeoPoint(record.latitude, record.longitude)
    # padded clones stay spread out
    assert len({(f.latitude, f.longitude) for f in flights}) == 10
