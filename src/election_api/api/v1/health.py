"""Health endpoint reporting dataset load status."""

from fastapi import APIRouter

from election_api.schemas.health import HealthResponse
from election_api.services.dataset_service import DatasetUnavailableError, get_dataset

health_router = APIRouter(tags=["health"])


@health_router.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Report whether the results and boundary datasets loaded."""
    try:
        state = get_dataset()
    except DatasetUnavailableError as e:
        return HealthResponse(status="unavailable", results_error=str(e), boundaries_error=str(e))

    return HealthResponse(
        status=state.status,
        records=len(state.records),
        features=len(state.features),
        skipped_rows=state.report.skipped_rows if state.report is not None else 0,
        results_error=state.results_error,
        boundaries_error=state.boundaries_error,
        loaded_at=state.loaded_at,
    )
