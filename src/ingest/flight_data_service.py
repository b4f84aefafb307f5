"""
Flight Data Service - in-memory Flight Record Store
- Parses the flight CSV into FlightRecord values
- Skips malformed or undecodable rows with a recorded warning
- Serializes loads and reads through a read/write lock
"""
import codecs
import csv
from typing import Dict, Iterable, List, Optional, Tuple

from src.ingest.config import COLUMN_SYNONYMS, MAX_LOGGED_ROW_WARNINGS
from src.ingest.field_parsers import parse_duration, parse_price, parse_stops
from src.ingest.flight_model import FlightRecord
from src.utils.log_utils import log_progress
from src.utils.rwlock import ReadWriteLock


def map_header_columns(header: List[str]) -> Dict[str, int]:
    """Header name (lowercase, trimmed) -> column index. First occurrence wins."""
    column_indices = {}
    for i, col in enumerate(header):
        name = col.strip().lower()
        if name not in column_indices:
            column_indices[name] = i
    return column_indices


def parse_flight_record(record: List[str], indices: Dict[str, int]) -> FlightRecord:
    """Convert one CSV row to a FlightRecord, using the first non-empty synonym per field."""

    def get_field(field_name: str) -> str:
        for column in COLUMN_SYNONYMS[field_name]:
            idx = indices.get(column)
            if idx is not None and idx < len(record):
                value = record[idx].strip()
                if value:
                    return value
        return ""

    return FlightRecord(
        airline=get_field("airline"),
        flight_date=get_field("flight_date"),
        source=get_field("source"),
        destination=get_field("destination"),
        flight_class=get_field("flight_class"),
        duration=parse_duration(get_field("duration")),
        price=parse_price(get_field("price")),
        departure_time=get_field("departure_time"),
        arrival_time=get_field("arrival_time"),
        stops=parse_stops(get_field("stops")),
        additional_info=get_field("additional_info"),
    )


def decode_lines(raw_lines: Iterable[bytes]) -> Tuple[List[str], List[str]]:
    """
    Decode raw CSV lines as UTF-8 (BOM on the first line dropped).

    Lines that are not valid UTF-8 are left out and reported in the
    returned warnings.

    Raises:
        ValueError: when the header line cannot be decoded
    """
    lines = []
    warnings = []
    for line_num, raw in enumerate(raw_lines, start=1):
        if line_num == 1 and raw.startswith(codecs.BOM_UTF8):
            raw = raw[len(codecs.BOM_UTF8):]
        try:
            lines.append(raw.decode("utf-8"))
        except UnicodeDecodeError as e:
            if line_num == 1:
                raise ValueError(f"failed to read header: {e}")
            warnings.append(f"line {line_num}: invalid UTF-8 in record: {e}")
    return lines, warnings


def parse_flight_rows(lines: Iterable[str]) -> Tuple[List[FlightRecord], List[str]]:
    """
    Parse CSV text lines (header first) into flight records.

    Rows that the csv module rejects, or whose field count differs from the
    header, are skipped and reported in the returned warnings.

    Raises:
        ValueError: when the header row is missing or unreadable
    """
    reader = csv.reader(lines)

    try:
        header = next(reader)
    except StopIteration:
        raise ValueError("failed to read header: file is empty")
    except csv.Error as e:
        raise ValueError(f"failed to read header: {e}")

    indices = map_header_columns(header)
    flights = []
    warnings = []

    while True:
        try:
            record = next(reader)
        except StopIteration:
            break
        except csv.Error as e:
            warnings.append(f"line {reader.line_num}: error reading CSV record: {e}")
            continue

        if not record:
            continue
        if len(record) != len(header):
            warnings.append(
                f"line {reader.line_num}: expected {len(header)} fields, got {len(record)}: {record}"
            )
            continue

        flights.append(parse_flight_record(record, indices))

    return flights, warnings


class FlightDataService:
    """
    Holds the parsed flight records.
    load() replaces the whole set; readers always get a copy.
    """

    def __init__(self):
        self.flights: List[FlightRecord] = []
        self.load_warnings: List[str] = []
        self.source_path: Optional[str] = None
        self.lock = ReadWriteLock()

    def load(self, file_path: str) -> int:
        """
        Load flight data from a CSV file, replacing the current records.

        Returns:
            Number of records loaded

        Raises:
            OSError: the file cannot be opened
            ValueError: the header cannot be read
        """
        with self.lock.write_locked():
            with open(file_path, "rb") as f:
                lines, warnings = decode_lines(f)
            flights, row_warnings = parse_flight_rows(lines)
            warnings.extend(row_warnings)

            self.flights = flights
            self.load_warnings = warnings
            self.source_path = str(file_path)

        for warning in warnings[:MAX_LOGGED_ROW_WARNINGS]:
            log_progress(f"Skipping invalid record: {warning}", "WARNING")
        if len(warnings) > MAX_LOGGED_ROW_WARNINGS:
            log_progress(f"... and {len(warnings) - MAX_LOGGED_ROW_WARNINGS} more skipped records", "WARNING")

        log_progress(f"Successfully loaded {len(flights):,} flight records from {file_path}", "SUCCESS")
        return len(flights)

    load_flight_data_from_csv = load

    def get_all_flights(self) -> List[FlightRecord]:
        """Copy of all records; FlightRecord values are immutable."""
        with self.lock.read_locked():
            return list(self.flights)

    all = get_all_flights

    def get_flight_count(self) -> int:
        with self.lock.read_locked():
            return len(self.flights)

    count = get_flight_count

    def get_load_warnings(self) -> List[str]:
        with self.lock.read_locked():
            return list(self.load_warnings)

    def get_source_path(self) -> Optional[str]:
        with self.lock.read_locked():
            return self.source_path
