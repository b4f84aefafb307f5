"""
Flight Record model
- One immutable row of the flight dataset
- Numeric fields are already parsed; unparseable values are 0
"""
from dataclasses import dataclass, asdict


@dataclass(frozen=True)
class FlightRecord:
    airline: str = ""
    flight_date: str = ""
    source: str = ""
    destination: str = ""
    flight_class: str = ""
    duration: float = 0.0
    price: float = 0.0
    departure_time: str = ""
    arrival_time: str = ""
    stops: int = 0
    additional_info: str = ""

    def to_dict(self) -> dict:
        return asdict(self)
