import threading

import pytest

from src.ingest.flight_data_service import FlightDataService
from src.mapping.indian_states import INDIAN_STATES
from src.serving.state_aggregator import (
    StateAggregator,
    make_route_key,
    normalize_city_name_for_mapping,
)
from tests.helpers import flight

SAMPLE_FLIGHTS = [
    flight("Mumbai", "Delhi", "IndiGo"),
    flight("Mumbai", "Delhi", "Air India"),
    flight("Banglore", "New Delhi", "IndiGo"),
    flight("Kolkata", "Banglore", "SpiceJet"),
    flight("Chennai", "Madras", "IndiGo"),
    flight("Delhi", "Cochin", "Vistara"),
    flight("Mumbai", "Atlantis", "GoAir"),
    flight("Nowhere", "Pune", "IndiGo"),
]


def test_single_flight_scenario(build_aggregator):
    aggregator = build_aggregator([flight("Mumbai", "Delhi", "IndiGo")])

    maharashtra, found = aggregator.get_aggregation_for_state("Maharashtra")
    assert found
    assert maharashtra.outgoing_flights == 1
    assert maharashtra.incoming_flights == 0
    assert maharashtra.unique_routes == 1
    assert maharashtra.airlines == {"IndiGo": 1}

    delhi, found = aggregator.get_aggregation_for_state("Delhi")
    assert found
    assert delhi.incoming_flights == 1
    assert delhi.outgoing_flights == 0
    assert delhi.unique_routes == 1
    assert delhi.airlines == {"IndiGo": 1}


def test_shared_route_is_deduplicated(build_aggregator):
    aggregator = build_aggregator([
        flight("Mumbai", "Delhi", "IndiGo"),
        flight("Mumbai", "Delhi", "Air India"),
    ])

    maharashtra, _ = aggregator.get_aggregation_for_state("Maharashtra")
    assert maharashtra.outgoing_flights == 2
    assert maharashtra.unique_routes == 1
    assert maharashtra.airlines == {"IndiGo": 1, "Air India": 1}
    assert maharashtra.route_details == {"mumbai->delhi": 2}


def test_same_state_flight_counts_both_ways(build_aggregator):
    aggregator = build_aggregator([flight("Mumbai", "Pune", "IndiGo")])

    maharashtra, _ = aggregator.get_aggregation_for_state("Maharashtra")
    assert maharashtra.incoming_flights == 1
    assert maharashtra.outgoing_flights == 1
    assert maharashtra.total_flights == 2
    assert maharashtra.unique_routes == 1
    assert maharashtra.airlines == {"IndiGo": 2}


def test_unresolvable_destination_counts_only_outgoing(build_aggregator):
    aggregator = build_aggregator([flight("Mumbai", "Atlantis", "IndiGo")])

    maharashtra, _ = aggregator.get_aggregation_for_state("Maharashtra")
    assert maharashtra.outgoing_flights == 1
    assert sum(a.incoming_flights for a in aggregator.get_all_aggregations().values()) == 0

    coverage = aggregator.get_coverage()
    assert coverage["unresolved_destinations"] == 1
    assert coverage["unresolved_sources"] == 0
    assert coverage["drop_rate"] == 0.5
    assert coverage["top_unresolved_cities"] == {"atlantis": 1}


def test_fully_unresolved_flight_contributes_nothing(build_aggregator):
    aggregator = build_aggregator([flight("Atlantis", "Narnia")])

    assert aggregator.get_all_aggregations() == {}
    assert aggregator.get_coverage()["fully_unresolved_flights"] == 1


def test_route_keys_are_case_insensitive(build_aggregator):
    aggregator = build_aggregator([
        flight("Mumbai", "Delhi"),
        flight("MUMBAI", "delhi"),
    ])

    maharashtra, _ = aggregator.get_aggregation_for_state("maharashtra")
    assert maharashtra.unique_routes == 1
    assert maharashtra.outgoing_flights == 2


def test_city_name_variants_land_in_the_same_state(build_aggregator):
    aggregator = build_aggregator([
        flight("Bombay", "Chennai"),
        flight("bombay", "Madras"),
        flight("BOMBAY", "Chennai"),
    ])

    maharashtra, _ = aggregator.get_aggregation_for_state("Maharashtra")
    tamil_nadu, _ = aggregator.get_aggregation_for_state("Tamil Nadu")
    assert maharashtra.outgoing_flights == 3
    assert tamil_nadu.incoming_flights == 3


def test_airport_code_suffix_is_retried(build_aggregator):
    aggregator = build_aggregator([flight("Mumbai (BOM)", "Delhi (DEL)")])

    assert aggregator.get_outgoing_flights_for_state("Maharashtra") == 1
    assert aggregator.get_incoming_flights_for_state("Delhi") == 1


def test_invariants_hold_for_every_state(build_aggregator):
    aggregator = build_aggregator(SAMPLE_FLIGHTS)

    aggregations = aggregator.get_all_aggregations()
    assert aggregations
    for agg in aggregations.values():
        assert agg.total_flights == agg.incoming_flights + agg.outgoing_flights
        assert sum(agg.airlines.values()) == agg.total_flights
        assert agg.unique_routes == len(agg.route_details)


def test_unique_routes_match_distinct_pairs(build_aggregator):
    aggregator = build_aggregator(SAMPLE_FLIGHTS)

    for agg in aggregator.get_all_aggregations().values():
        expected = set()
        for row in SAMPLE_FLIGHTS:
            touches = [
                aggregator._resolve(row["source"]),
                aggregator._resolve(row["destination"]),
            ]
            if any(found and state == agg.state_name.lower() for state, found in touches):
                expected.add(make_route_key(row["source"], row["destination"]))
        assert agg.unique_routes == len(expected)


@pytest.mark.parametrize("state", INDIAN_STATES)
def test_every_valid_state_is_found(build_aggregator, state):
    aggregator = build_aggregator([flight("Mumbai", "Delhi")])

    agg, found = aggregator.get_aggregation_for_state(state)
    assert found
    assert agg.state_name == state
    assert agg.total_flights == agg.incoming_flights + agg.outgoing_flights


def test_valid_state_without_data_is_zero_valued(build_aggregator):
    aggregator = build_aggregator([flight("Mumbai", "Delhi")])

    agg, found = aggregator.get_aggregation_for_state("andaman and nicobar islands")
    assert found
    assert agg.state_name == "Andaman and Nicobar Islands"
    assert (agg.total_flights, agg.incoming_flights, agg.outgoing_flights, agg.unique_routes) == (0, 0, 0, 0)
    assert agg.airlines == {}


@pytest.mark.parametrize("name", ["Atlantis", "", "California"])
def test_unknown_state_is_not_found(build_aggregator, name):
    aggregator = build_aggregator([flight("Mumbai", "Delhi")])

    assert aggregator.get_aggregation_for_state(name) == (None, False)
    assert aggregator.get_top_airlines_for_state(name) is None
    assert aggregator.get_total_flights_for_state(name) == 0


def test_lookup_accepts_slug_and_any_case(build_aggregator):
    aggregator = build_aggregator([flight("Chennai", "Kolkata")])

    for name in ["Tamil Nadu", "tamil nadu", "TAMIL NADU", "tamil-nadu", "  Tamil   Nadu "]:
        agg, found = aggregator.get_aggregation_for_state(name)
        assert found
        assert agg.outgoing_flights == 1


def test_recompute_is_idempotent(build_aggregator):
    aggregator = build_aggregator(SAMPLE_FLIGHTS)
    first = {k: v.to_dict() for k, v in aggregator.get_all_aggregations().items()}
    first_coverage = aggregator.get_coverage()

    aggregator.refresh_aggregations()
    aggregator.recompute()

    second = {k: v.to_dict() for k, v in aggregator.get_all_aggregations().items()}
    assert second == first
    assert list(second) == list(first)
    assert aggregator.get_coverage() == first_coverage
    assert aggregator.get_stats()["computations"] == 3


def test_recompute_replaces_previous_snapshot(write_csv, default_mapper):
    data_service = FlightDataService()
    data_service.load(write_csv([flight("Mumbai", "Delhi")], name="a.csv"))
    aggregator = StateAggregator(data_service, default_mapper)
    aggregator.compute_aggregations()

    data_service.load(write_csv([flight("Chennai", "Kolkata")], name="b.csv"))
    aggregator.refresh_aggregations()

    assert sorted(aggregator.get_states_list()) == ["Tamil Nadu", "West Bengal"]
    assert aggregator.get_total_flights_for_state("Maharashtra") == 0


def test_readers_get_copies(build_aggregator):
    aggregator = build_aggregator([flight("Mumbai", "Delhi", "IndiGo")])

    agg, _ = aggregator.get_aggregation_for_state("Maharashtra")
    agg.airlines["Fake Air"] = 99
    agg.outgoing_flights = 42
    aggregator.get_all_aggregations()["Maharashtra"].route_details.clear()

    fresh, _ = aggregator.get_aggregation_for_state("Maharashtra")
    assert fresh.airlines == {"IndiGo": 1}
    assert fresh.outgoing_flights == 1
    assert fresh.route_details == {"mumbai->delhi": 1}


def test_empty_dataset_yields_no_aggregations(default_mapper):
    aggregator = StateAggregator(FlightDataService(), default_mapper)

    assert aggregator.compute_aggregations() == 0
    assert aggregator.get_all_aggregations() == {}
    assert aggregator.get_coverage()["drop_rate"] == 0.0


def test_per_state_accessors(build_aggregator):
    aggregator = build_aggregator(SAMPLE_FLIGHTS)

    assert aggregator.get_outgoing_flights_for_state("Maharashtra") == 3
    assert aggregator.get_incoming_flights_for_state("Maharashtra") == 1
    assert aggregator.get_total_flights_for_state("Maharashtra") == 4
    assert aggregator.get_unique_routes_for_state("Maharashtra") == 3
    assert aggregator.get_top_airlines_for_state("Maharashtra") == {"IndiGo": 2, "Air India": 1, "GoAir": 1}


def test_normalize_city_name_for_mapping():
    assert normalize_city_name_for_mapping("  Mumbai (BOM) ") == "mumbai"
    assert normalize_city_name_for_mapping("Navi  Mumbai") == "navi mumbai"


def test_concurrent_reads_see_complete_snapshots(build_aggregator):
    aggregator = build_aggregator(SAMPLE_FLIGHTS * 20)
    expected = {k: v.to_dict() for k, v in aggregator.get_all_aggregations().items()}
    errors = []
    stop = threading.Event()

    def reader():
        while not stop.is_set():
            snapshot = {k: v.to_dict() for k, v in aggregator.get_all_aggregations().items()}
            if snapshot != expected:
                errors.append(snapshot)

    threads = [threading.Thread(target=reader) for _ in range(4)]
    for t in threads:
        t.start()
    for _ in range(10):
        aggregator.refresh_aggregations()
    stop.set()
    for t in threads:
        t.join(timeout=5)

    assert errors == []
