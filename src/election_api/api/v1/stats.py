"""Aggregate statistics endpoint."""

from fastapi import APIRouter, Depends

from election_api.core.config import Settings, get_settings
from election_api.core.dependencies import get_dataset_state, get_filter_state
from election_api.lib.aggregator import AggregateStats
from election_api.models.filter_state import FilterState
from election_api.services.dataset_service import DatasetState
from election_api.services.query_service import aggregate_records

stats_router = APIRouter(prefix="/stats", tags=["stats"])


@stats_router.get("", response_model=AggregateStats)
async def get_stats(
    filters: FilterState = Depends(get_filter_state),
    state: DatasetState = Depends(get_dataset_state),
    settings: Settings = Depends(get_settings),
) -> AggregateStats:
    """Summary statistics for the filtered subset."""
    return aggregate_records(
        state,
        filters,
        total_seats=settings.total_seats,
        strike_rate_min_contested=settings.strike_rate_min_contested,
    )
