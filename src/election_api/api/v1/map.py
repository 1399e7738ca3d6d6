"""Map endpoints: boundary features joined with constituency winners."""

from fastapi import APIRouter, Depends, Query

from election_api.core.dependencies import get_dataset_state, get_filter_state
from election_api.models.filter_state import FilterState
from election_api.schemas.map import CoverageResponse, MapFeatureCollection, ReconcileResponse
from election_api.services.dataset_service import DatasetState
from election_api.services.query_service import map_features, reconcile_feature, reconciliation_coverage

map_router = APIRouter(prefix="/map", tags=["map"])


@map_router.get("/features", response_model=MapFeatureCollection)
async def get_map_features(
    filters: FilterState = Depends(get_filter_state),
    state: DatasetState = Depends(get_dataset_state),
) -> MapFeatureCollection:
    """GeoJSON FeatureCollection of every constituency, with "no data" features kept."""
    return map_features(state, filters)


@map_router.get(
    "/reconcile",
    response_model=ReconcileResponse,
    response_model_by_alias=False,
)
async def get_reconciliation(
    name: str = Query(..., description="Boundary feature name, e.g. AC_NAME"),
    feature_id: int | None = Query(None, description="Boundary feature number, e.g. AC_NO"),
    filters: FilterState = Depends(get_filter_state),
    state: DatasetState = Depends(get_dataset_state),
) -> ReconcileResponse:
    """Resolve one boundary feature against the filtered results."""
    return reconcile_feature(state, filters, name, feature_id)


@map_router.get("/coverage", response_model=CoverageResponse)
async def get_coverage(
    filters: FilterState = Depends(get_filter_state),
    state: DatasetState = Depends(get_dataset_state),
) -> CoverageResponse:
    """Matched vs unmatched boundary features."""
    return reconciliation_coverage(state, filters)
