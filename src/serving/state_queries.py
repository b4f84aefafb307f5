"""
Read-only queries over the aggregator's current snapshot.
Shapes the responses used by the dashboard (list, detail, airlines).
"""
from typing import Dict, List, Optional

from src.mapping.indian_states import state_name_from_slug
from src.serving.config import DEFAULT_AIRLINE_LIMIT
from src.serving.state_aggregator import StateAggregator


def parse_limit(limit, default: int = DEFAULT_AIRLINE_LIMIT) -> int:
    """Positive integer limit, or the default for anything else."""
    try:
        parsed = int(limit)
    except (TypeError, ValueError):
        return default
    return parsed if parsed > 0 else default


class StateQueryService:

    def __init__(self, aggregator: StateAggregator):
        self.aggregator = aggregator

    def list_all_states(self) -> List[dict]:
        """Every state in the fixed list, in order, with its total (0 without data)."""
        all_aggs = self.aggregator.get_all_aggregations()
        summaries = []
        for state_name in self.aggregator.get_all_indian_states():
            agg = all_aggs.get(state_name)
            summaries.append({
                "state": state_name,
                "totalFlights": agg.total_flights if agg else 0,
            })
        return summaries

    def get_state_detail(self, state: str) -> Optional[dict]:
        """
        Detail for a state given as a slug ('tamil-nadu') or display name.
        Returns None for names outside the state list.

        Example:
            {"state": "Karnataka", "totalFlights": 2100, "incomingFlights": 980,
             "outgoingFlights": 1120, "routes": 120, "airlines": ["IndiGo", "Vistara"]}
        """
        agg, exists = self.aggregator.get_aggregation_for_state(state_name_from_slug(state))
        if not exists:
            return None

        return {
            "state": agg.state_name,
            "totalFlights": agg.total_flights,
            "incomingFlights": agg.incoming_flights,
            "outgoingFlights": agg.outgoing_flights,
            "routes": agg.unique_routes,
            "airlines": list(agg.airlines),
        }

    def get_top_airlines(self, state: str, limit=DEFAULT_AIRLINE_LIMIT) -> Optional[Dict[str, int]]:
        """
        Busiest airlines for a state: sorted by flight count (desc, then name)
        and truncated to limit. None for unknown states.
        """
        airlines = self.aggregator.get_top_airlines_for_state(state_name_from_slug(state))
        if airlines is None:
            return None

        ranked = sorted(airlines.items(), key=lambda x: (-x[1], x[0]))
        return dict(ranked[:parse_limit(limit)])

    def get_state_wise_flights(self, state: Optional[str] = None) -> Optional[dict]:
        """Full aggregation for one state, or all states keyed by name."""
        if state:
            agg, exists = self.aggregator.get_aggregation_for_state(state)
            return agg.to_dict() if exists else None

        return {
            name: agg.to_dict()
            for name, agg in self.aggregator.get_all_aggregations().items()
        }
