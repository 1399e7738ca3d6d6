"""Record listing and facet option endpoints."""

from fastapi import APIRouter, Depends, Query

from election_api.core.dependencies import get_dataset_state, get_filter_state
from election_api.models.filter_state import FilterState
from election_api.schemas.common import PaginationMeta
from election_api.schemas.records import FilterOptionsResponse, PaginatedRecordResponse
from election_api.services.dataset_service import DatasetState
from election_api.services.query_service import filter_options, query_records

records_router = APIRouter(prefix="/records", tags=["records"])


@records_router.get(
    "",
    response_model=PaginatedRecordResponse,
    response_model_by_alias=False,
)
async def list_records(
    filters: FilterState = Depends(get_filter_state),
    page: int = Query(1, ge=1),
    page_size: int = Query(50, ge=1, le=500),
    state: DatasetState = Depends(get_dataset_state),
) -> PaginatedRecordResponse:
    """Filter, sort and page through candidate results."""
    records, total = query_records(state, filters, page=page, page_size=page_size)
    return PaginatedRecordResponse(
        items=records,
        pagination=PaginationMeta.for_page(total, page, page_size),
    )


@records_router.get("/filters", response_model=FilterOptionsResponse)
async def get_filter_options(
    district: str | None = Query(None, description="Scope constituency options to one district"),
    state: DatasetState = Depends(get_dataset_state),
) -> FilterOptionsResponse:
    """List the values available to each facet."""
    return filter_options(state, district=district)
