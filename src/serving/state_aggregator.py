"""
State Aggregator - state-wise flight statistics
- Resolves source/destination cities of every flight to states
- Accumulates outgoing/incoming counts, airlines and routes per state
- Publishes the whole mapping at once; readers get copies
"""
import re
from collections import Counter
from dataclasses import dataclass, field, asdict
from datetime import datetime, timezone
from typing import Dict, List, Optional, Tuple

from src.ingest.flight_data_service import FlightDataService
from src.mapping.city_state_mapper import CityStateMapper
from src.mapping.indian_states import (
    STATE_DISPLAY_NAMES,
    display_name_for_state,
    get_all_indian_states,
    state_key,
)
from src.serving.config import TOP_UNRESOLVED_CITIES
from src.utils.log_utils import log_progress
from src.utils.rwlock import ReadWriteLock


@dataclass
class StateAggregation:
    state_name: str
    total_flights: int = 0
    incoming_flights: int = 0
    outgoing_flights: int = 0
    unique_routes: int = 0
    airlines: Dict[str, int] = field(default_factory=dict)
    route_details: Dict[str, int] = field(default_factory=dict)

    def copy(self) -> "StateAggregation":
        return StateAggregation(
            state_name=self.state_name,
            total_flights=self.total_flights,
            incoming_flights=self.incoming_flights,
            outgoing_flights=self.outgoing_flights,
            unique_routes=self.unique_routes,
            airlines=dict(self.airlines),
            route_details=dict(self.route_details),
        )

    def to_dict(self) -> dict:
        return asdict(self)


def normalize_city_name_for_mapping(city: str) -> str:
    """Looser form used when the first lookup fails: 'Mumbai (BOM)' -> 'mumbai'."""
    city = re.sub(r"\([^)]*\)\s*$", "", city)
    return re.sub(r"\s+", " ", city).strip().lower()


def make_route_key(source: str, destination: str) -> str:
    return f"{source}->{destination}".lower()


class StateAggregator:
    """
    Precomputed state -> StateAggregation mapping.
    compute_aggregations() holds the write lock for the whole pass.
    """

    def __init__(self, data_service: FlightDataService, mapper: CityStateMapper):
        self.data_service = data_service
        self.mapper = mapper
        self.aggregations: Dict[str, StateAggregation] = {}
        self.coverage = self._empty_coverage()
        self.lock = ReadWriteLock()
        self.stats = {
            "computations": 0,
            "last_computed": None,
        }

    @staticmethod
    def _empty_coverage() -> dict:
        return {
            "flights_processed": 0,
            "resolved_sources": 0,
            "resolved_destinations": 0,
            "unresolved_sources": 0,
            "unresolved_destinations": 0,
            "fully_unresolved_flights": 0,
            "drop_rate": 0.0,
            "top_unresolved_cities": {},
        }

    def _resolve(self, city: str) -> Tuple[Optional[str], bool]:
        state, found = self.mapper.get_state_for_city(city)
        if not found and city:
            retry = normalize_city_name_for_mapping(city)
            if retry and retry != city.strip().lower():
                state, found = self.mapper.get_state_for_city(retry)
        return state, found

    @staticmethod
    def _ensure_aggregation(aggregations: Dict[str, StateAggregation], state: str) -> StateAggregation:
        key = state_key(state)
        if key not in aggregations:
            aggregations[key] = StateAggregation(state_name=display_name_for_state(key))
        return aggregations[key]

    def compute_aggregations(self) -> int:
        """
        Rebuild all state aggregations from the data service's current records.

        Returns:
            Number of states with at least one flight
        """
        with self.lock.write_locked():
            flights = self.data_service.get_all_flights()
            aggregations: Dict[str, StateAggregation] = {}
            coverage = self._empty_coverage()
            unresolved = Counter()

            for flight in flights:
                source_state, source_ok = self._resolve(flight.source)
                dest_state, dest_ok = self._resolve(flight.destination)
                route_key = make_route_key(flight.source, flight.destination)

                # Source state: outgoing
                if source_ok:
                    agg = self._ensure_aggregation(aggregations, source_state)
                    agg.outgoing_flights += 1
                    agg.total_flights += 1
                    agg.airlines[flight.airline] = agg.airlines.get(flight.airline, 0) + 1
                    agg.route_details[route_key] = agg.route_details.get(route_key, 0) + 1
                    coverage["resolved_sources"] += 1
                else:
                    coverage["unresolved_sources"] += 1
                    unresolved[flight.source.strip().lower()] += 1

                # Destination state: incoming
                if dest_ok:
                    agg = self._ensure_aggregation(aggregations, dest_state)
                    agg.incoming_flights += 1
                    agg.total_flights += 1
                    agg.airlines[flight.airline] = agg.airlines.get(flight.airline, 0) + 1
                    agg.route_details[route_key] = agg.route_details.get(route_key, 0) + 1
                    coverage["resolved_destinations"] += 1
                else:
                    coverage["unresolved_destinations"] += 1
                    unresolved[flight.destination.strip().lower()] += 1

                if not source_ok and not dest_ok:
                    coverage["fully_unresolved_flights"] += 1

            for agg in aggregations.values():
                agg.unique_routes = len(agg.route_details)

            coverage["flights_processed"] = len(flights)
            ends = 2 * len(flights)
            dropped = coverage["unresolved_sources"] + coverage["unresolved_destinations"]
            coverage["drop_rate"] = round(dropped / ends, 4) if ends else 0.0
            coverage["top_unresolved_cities"] = dict(unresolved.most_common(TOP_UNRESOLVED_CITIES))

            self.aggregations = aggregations
            self.coverage = coverage
            self.stats["computations"] += 1
            self.stats["last_computed"] = datetime.now(timezone.utc).isoformat()

        log_progress(
            f"Computed state-wise aggregations for {len(aggregations)} states from {len(flights):,} flights",
            "SUCCESS",
        )
        if dropped:
            log_progress(f"{dropped:,} of {ends:,} flight ends could not be mapped to a state", "WARNING")
        return len(aggregations)

    def refresh_aggregations(self) -> int:
        """Recompute from the current records; safe to call repeatedly."""
        log_progress("Refreshing state-wise aggregations...", "PROCESSING")
        return self.compute_aggregations()

    recompute = refresh_aggregations

    def get_aggregation_for_state(self, state_name: str) -> Tuple[Optional[StateAggregation], bool]:
        """
        Aggregation for one state.

        A valid state without flights yields a zero-valued aggregation (found);
        anything outside the state list yields (None, False).
        """
        key = state_key(state_name)
        if not key:
            return (None, False)

        with self.lock.read_locked():
            agg = self.aggregations.get(key)
            if agg is not None:
                return (agg.copy(), True)

        if key in STATE_DISPLAY_NAMES:
            return (StateAggregation(state_name=STATE_DISPLAY_NAMES[key]), True)

        return (None, False)

    def get_all_aggregations(self) -> Dict[str, StateAggregation]:
        """Display name -> copy of its aggregation, for states with data."""
        with self.lock.read_locked():
            return {agg.state_name: agg.copy() for agg in self.aggregations.values()}

    def get_states_list(self) -> List[str]:
        """Display names of the states that have flight data."""
        with self.lock.read_locked():
            return [agg.state_name for agg in self.aggregations.values()]

    def get_all_indian_states(self) -> List[str]:
        return get_all_indian_states()

    def get_top_airlines_for_state(self, state_name: str) -> Optional[Dict[str, int]]:
        """Airline -> flight count for a state, None when the state is unknown."""
        agg, exists = self.get_aggregation_for_state(state_name)
        if not exists:
            return None
        return dict(agg.airlines)

    def get_total_flights_for_state(self, state_name: str) -> int:
        agg, exists = self.get_aggregation_for_state(state_name)
        return agg.total_flights if exists else 0

    def get_incoming_flights_for_state(self, state_name: str) -> int:
        agg, exists = self.get_aggregation_for_state(state_name)
        return agg.incoming_flights if exists else 0

    def get_outgoing_flights_for_state(self, state_name: str) -> int:
        agg, exists = self.get_aggregation_for_state(state_name)
        return agg.outgoing_flights if exists else 0

    def get_unique_routes_for_state(self, state_name: str) -> int:
        agg, exists = self.get_aggregation_for_state(state_name)
        return agg.unique_routes if exists else 0

    def get_coverage(self) -> dict:
        with self.lock.read_locked():
            coverage = dict(self.coverage)
            coverage["top_unresolved_cities"] = dict(self.coverage["top_unresolved_cities"])
            return coverage

    def get_stats(self) -> dict:
        with self.lock.read_locked():
            return {**self.stats, "states_with_data": len(self.aggregations)}


if __name__ == "__main__":
    from src.ingest.config import FLIGHT_DATASET_PATH
    from src.utils.metrics_utils import show_aggregation_metrics

    mapper = CityStateMapper().load()
    data_service = FlightDataService()
    data_service.load(FLIGHT_DATASET_PATH)

    aggregator = StateAggregator(data_service, mapper)
    aggregator.compute_aggregations()
    show_aggregation_metrics(aggregator, data_service, mapper)
