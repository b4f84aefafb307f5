import csv

import pytest

from src.ingest.flight_data_service import FlightDataService
from src.mapping.city_state_mapper import CityStateMapper
from src.serving.state_aggregator import StateAggregator

HEADER = ["airline", "date_of_journey", "source", "destination", "duration", "stops", "price"]


@pytest.fixture
def write_csv(tmp_path):
    """Write flight rows (dicts keyed by HEADER names) to a CSV and return its path."""

    def _write(rows, name="flights.csv", header=HEADER):
        path = tmp_path / name
        with open(path, "w", newline="", encoding="utf-8") as f:
            writer = csv.writer(f)
            writer.writerow(header)
            for row in rows:
                writer.writerow([row.get(col, "") for col in header])
        return str(path)

    return _write


@pytest.fixture
def default_mapper(tmp_path):
    """Mapper on the built-in table (the reference file does not exist)."""
    return CityStateMapper(source=str(tmp_path / "no_such_map.json")).load()


@pytest.fixture
def build_aggregator(write_csv, default_mapper):
    """Load rows into a fresh data service and compute aggregations."""

    def _build(rows):
        data_service = FlightDataService()
        data_service.load(write_csv(rows))
        aggregator = StateAggregator(data_service, default_mapper)
        aggregator.compute_aggregations()
        return aggregator

    return _build
