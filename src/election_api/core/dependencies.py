"""FastAPI dependencies for the loaded dataset and the facet query parameters."""

from fastapi import Query
from fastapi.exceptions import RequestValidationError
from pydantic import ValidationError

from election_api.models.filter_state import FilterState
from election_api.services.dataset_service import DatasetState, get_dataset


def get_dataset_state() -> DatasetState:
    """Return the dataset loaded at startup.

    Raises:
        DatasetUnavailableError: If startup loading has not completed.
    """
    return get_dataset()


def get_filter_state(
    search: str | None = Query(None, description="Free-text search over names and labels"),
    district: str | None = Query(None),
    constituency: str | None = Query(None),
    party: str | None = Query(None),
    alliance: str | None = Query(None),
    position: str | None = Query(None, description="Rank (1, 2, 3, ...) or DepositLost"),
    constituency_type: str | None = Query(None, description="GEN, SC or ST"),
    year: int | None = Query(None),
    age_range: str | None = Query(None),
    gender: str | None = Query(None),
    margin_range: str | None = Query(None),
    vote_share_range: str | None = Query(None),
    vote_count_range: str | None = Query(None),
    category: str | None = Query(None),
    education: str | None = Query(None),
    winners_only: bool = Query(False),
    sort_key: str | None = Query(None, description="Record field name or dataset column header"),
    sort_direction: str = Query("asc", description="asc or desc"),
) -> FilterState:
    """Build a FilterState from query parameters.

    Raises:
        RequestValidationError: If a facet value is not accepted (HTTP 422).
    """
    try:
        return FilterState(
            search=search,
            district=district,
            constituency=constituency,
            party=party,
            alliance=alliance,
            position=position,
            constituency_type=constituency_type,
            year=year,
            age_range=age_range,
            gender=gender,
            margin_range=margin_range,
            vote_share_range=vote_share_range,
            vote_count_range=vote_count_range,
            category=category,
            education=education,
            winners_only=winners_only,
            sort_key=sort_key,
            sort_direction=sort_direction,
        )
    except ValidationError as exc:
        raise RequestValidationError(exc.errors(include_url=False, include_context=False)) from exc
