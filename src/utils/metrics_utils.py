"""
State Aggregation Metrics and Reporting Utilities
"""
from datetime import datetime

from src.utils.log_utils import log_progress, print_banner


def show_aggregation_metrics(aggregator, data_service=None, mapper=None, top_n: int = 10) -> dict:
    """
    Show a metrics report for the current aggregation snapshot

    Args:
        aggregator: StateAggregator whose snapshot is reported
        data_service: FlightDataService the snapshot was computed from
        mapper: CityStateMapper used for resolution
        top_n: Number of busiest states to list

    Returns:
        Summary dict with the figures printed in the report
    """
    all_aggs = aggregator.get_all_aggregations()
    coverage = aggregator.get_coverage()
    stats = aggregator.get_stats()

    print("\n" + "=" * 80)
    print("📊 STATE AGGREGATION - METRICS REPORT")
    print("=" * 80)

    # Inputs
    print("\n📂 INPUTS")
    print("-" * 80)
    if data_service is not None:
        warnings = data_service.get_load_warnings()
        print(f"  Dataset:          {data_service.get_source_path() or 'not loaded'}")
        print(f"  Flight Records:   {data_service.get_flight_count():,}")
        print(f"  Skipped Rows:     {len(warnings):,}")
    if mapper is not None:
        print(f"  City-State Map:   {mapper.source_name} ({mapper.city_count():,} cities)")

    # Aggregation
    print("\n🗺️  AGGREGATION")
    print("-" * 80)
    print(f"  States With Data: {len(all_aggs)}/{len(aggregator.get_all_indian_states())}")
    print(f"  Computations:     {stats['computations']}")
    print(f"  Last Computed:    {stats['last_computed']}")

    busiest = sorted(all_aggs.values(), key=lambda a: (-a.total_flights, a.state_name))[:top_n]
    if busiest:
        print(f"\n  {'State':35s} | {'Total':>8s} | {'In':>8s} | {'Out':>8s} | {'Routes':>6s} | Airlines")
        for agg in busiest:
            print(
                f"  {agg.state_name:35s} | {agg.total_flights:8,d} | {agg.incoming_flights:8,d} | "
                f"{agg.outgoing_flights:8,d} | {agg.unique_routes:6d} | {len(agg.airlines)}"
            )
        if len(all_aggs) > top_n:
            print(f"  ... and {len(all_aggs) - top_n} more states")

    # Coverage
    print("\n🔎 RESOLUTION COVERAGE")
    print("-" * 80)
    print(f"  Flights Processed:        {coverage['flights_processed']:,}")
    print(f"  Unresolved Sources:       {coverage['unresolved_sources']:,}")
    print(f"  Unresolved Destinations:  {coverage['unresolved_destinations']:,}")
    print(f"  Fully Unresolved Flights: {coverage['fully_unresolved_flights']:,}")
    print(f"  Drop Rate:                {coverage['drop_rate'] * 100:.2f}%")
    if coverage["top_unresolved_cities"]:
        print("  Top Unresolved Cities:")
        for city, count in coverage["top_unresolved_cities"].items():
            print(f"    • {city or '<empty>'}: {count:,}")

    print("\n" + "=" * 80 + "\n")

    return {
        "states_with_data": len(all_aggs),
        "total_flight_ends": sum(a.total_flights for a in all_aggs.values()),
        "drop_rate": coverage["drop_rate"],
        "timestamp": datetime.now().isoformat(),
    }


def _print_fields(heading: str, fields: dict):
    if not fields:
        return
    print(f"  {heading}:")
    for key, value in fields.items():
        print(f"    • {key}: {value}")


def log_task_start(task_name: str, **inputs):
    """Banner for a service task such as the startup load or a dataset reload"""
    print()
    print_banner(f"▶ {task_name}", width=80)
    log_progress(f"Started at {datetime.now().isoformat(timespec='seconds')}", "PROCESSING")
    _print_fields("Inputs", inputs)


def log_task_end(task_name: str, **results):
    print("-" * 80)
    log_progress(f"{task_name} finished", "SUCCESS")
    _print_fields("Results", results)
    print("-" * 80 + "\n")
