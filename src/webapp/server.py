"""
State Flight Dashboard Server
- Loads the city-state reference table and the flight dataset on startup
- Precomputes state-wise aggregations in memory
- Serves read-only state queries for the map dashboard
- Exposes explicit refresh / reload operations
"""
from contextlib import asynccontextmanager
from datetime import datetime, timezone
from typing import Optional

from fastapi import APIRouter, FastAPI, HTTPException, Request
from fastapi.middleware.cors import CORSMiddleware

from src.ingest.config import FLIGHT_DATASET_PATH
from src.ingest.flight_data_service import FlightDataService
from src.mapping.city_state_mapper import CityStateMapper
from src.mapping.config import CITY_STATE_MAP_PATH
from src.serving.config import CORS_ORIGINS, SERVER_HOST, SERVER_PORT
from src.serving.state_aggregator import StateAggregator
from src.serving.state_queries import StateQueryService
from src.utils.log_utils import log_progress, print_banner
from src.utils.metrics_utils import log_task_end, log_task_start, show_aggregation_metrics


# =============================================================================
# SERVICE WIRING
# =============================================================================

def initialize_services(dataset_path: str, city_state_map_path: str) -> dict:
    """
    Build the services in dependency order: mapper -> data -> aggregator.
    A dataset that cannot be loaded leaves the service running with no flights.
    """
    log_task_start("initialize_services", dataset=dataset_path, city_state_map=city_state_map_path)

    mapper = CityStateMapper(source=city_state_map_path).load()

    data_service = FlightDataService()
    try:
        data_service.load(dataset_path)
    except (OSError, ValueError) as e:
        log_progress(f"Could not load flight data: {e}", "WARNING")
        log_progress("Please ensure the CSV file exists in the data directory", "WARNING")

    aggregator = StateAggregator(data_service, mapper)
    aggregator.compute_aggregations()
    show_aggregation_metrics(aggregator, data_service, mapper)

    log_task_end(
        "initialize_services",
        flights=data_service.get_flight_count(),
        states_with_data=len(aggregator.get_states_list()),
    )

    return {
        "mapper": mapper,
        "data_service": data_service,
        "aggregator": aggregator,
        "queries": StateQueryService(aggregator),
    }


# =============================================================================
# ROUTES
# =============================================================================

router = APIRouter()


@router.get("/")
def home():
    return {"message": "Welcome to Flight Dashboard Backend API"}


@router.get("/health")
def health(request: Request):
    """Health check endpoint."""
    return {
        "status": "healthy",
        "message": "Server is running",
        "flights": request.app.state.data_service.get_flight_count(),
    }


@router.get("/api/state-flights")
def get_state_wise_flights(request: Request, state: Optional[str] = None):
    """Full aggregation for ?state=..., or every state with data."""
    queries: StateQueryService = request.app.state.queries

    if state:
        data = queries.get_state_wise_flights(state)
        if data is None:
            raise HTTPException(status_code=404, detail=f"State not found: {state}")
        return {"success": True, "data": data}

    data = queries.get_state_wise_flights()
    return {"success": True, "data": data, "count": len(data)}


@router.get("/api/states")
def get_state_list(request: Request):
    """All states with their total flights, including states without data."""
    summaries = request.app.state.queries.list_all_states()
    return {"success": True, "data": summaries, "count": len(summaries)}


@router.get("/api/state/{state}")
def get_state_detail(request: Request, state: str):
    """Hover-tooltip detail for a state slug, e.g. /api/state/tamil-nadu"""
    detail = request.app.state.queries.get_state_detail(state)
    if detail is None:
        raise HTTPException(status_code=404, detail=f"State not found: {state}")
    return detail


@router.get("/api/states/{state}/airlines")
def get_top_airlines_for_state(request: Request, state: str, limit: Optional[str] = None):
    """Top airlines for a state; invalid or missing limit falls back to the default."""
    airlines = request.app.state.queries.get_top_airlines(state, limit)
    if airlines is None:
        raise HTTPException(status_code=404, detail=f"State not found: {state}")
    return {"success": True, "state": state, "data": airlines, "count": len(airlines)}


@router.get("/api/coverage")
def get_coverage(request: Request):
    """How many flight ends could not be mapped to a state."""
    return {
        "success": True,
        "data": request.app.state.aggregator.get_coverage(),
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }


@router.post("/api/aggregations/refresh")
def refresh_aggregations(request: Request):
    """Recompute aggregations from the records currently loaded."""
    states = request.app.state.aggregator.refresh_aggregations()
    return {
        "status": "refreshed",
        "states_with_data": states,
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }


@router.post("/api/dataset/reload")
def reload_dataset(request: Request):
    """Reload the flight CSV and recompute. The previous data stays on failure."""
    app_state = request.app.state
    log_task_start("reload_dataset", dataset=app_state.dataset_path)

    try:
        flights = app_state.data_service.load(app_state.dataset_path)
    except (OSError, ValueError) as e:
        log_progress(f"Dataset reload failed: {e}", "ERROR")
        raise HTTPException(status_code=503, detail=f"Could not load flight data: {e}")

    states = app_state.aggregator.refresh_aggregations()
    log_task_end("reload_dataset", flights=flights, states_with_data=states)

    return {
        "status": "reloaded",
        "flights": flights,
        "skipped_rows": len(app_state.data_service.get_load_warnings()),
        "states_with_data": states,
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }


# =============================================================================
# APP FACTORY
# =============================================================================

def create_app(
    dataset_path: str = FLIGHT_DATASET_PATH,
    city_state_map_path: str = CITY_STATE_MAP_PATH,
) -> FastAPI:

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Startup and shutdown events."""
        services = initialize_services(dataset_path, city_state_map_path)
        app.state.dataset_path = dataset_path
        for name, service in services.items():
            setattr(app.state, name, service)

        print_banner("✈️  FLIGHT DASHBOARD SERVER STARTED")
        print(f"  ✓ Flight records: {services['data_service'].get_flight_count():,}")
        print(f"  ✓ City-state map: {services['mapper'].source_name}")
        print(f"  ✓ States with data: {len(services['aggregator'].get_states_list())}")
        print("=" * 60)

        yield

        print("Server shutdown")

    app = FastAPI(
        title="Flight Dashboard Backend",
        description="State-wise flight statistics for India",
        lifespan=lifespan,
    )
    app.add_middleware(
        CORSMiddleware,
        allow_origins=CORS_ORIGINS,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.include_router(router)
    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host=SERVER_HOST, port=SERVER_PORT)
