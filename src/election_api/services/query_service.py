"""Query service — records, aggregates and map data for a FilterState.

Every entry point filters the full record set first and works on the
subset; the full set is passed along as the universe where runner-up
lookup and vote-share denominators need it.
"""

from loguru import logger
from shapely.geometry import mapping

from election_api.lib.aggregator import AggregateStats, aggregate
from election_api.lib.filters import apply_filters, collation_key
from election_api.lib.reconciler import (
    FeatureResult,
    ReconciliationEntry,
    build_index,
    coverage,
    normalize_feature_name,
    reconcile,
    reconcile_features,
)
from election_api.models.election_record import CONSTITUENCY_TYPES, ElectionRecord
from election_api.models.filter_state import Alliance, FilterState
from election_api.schemas.map import CoverageResponse, MapFeature, MapFeatureCollection, ReconcileResponse
from election_api.schemas.records import FilterOptionsResponse
from election_api.services.dataset_service import DatasetState


def query_records(
    state: DatasetState,
    filters: FilterState,
    page: int = 1,
    page_size: int = 50,
) -> tuple[list[ElectionRecord], int]:
    """Filter, sort and paginate the record set.

    Returns:
        Tuple of (records on the requested page, total matching records).
    """
    matched = apply_filters(state.require_records(), filters)
    offset = (page - 1) * page_size
    return matched[offset : offset + page_size], len(matched)


def aggregate_records(
    state: DatasetState,
    filters: FilterState,
    *,
    total_seats: int | None = None,
    strike_rate_min_contested: int = 10,
) -> AggregateStats:
    """Aggregate statistics for the filtered subset."""
    records = state.require_records()
    return aggregate(
        apply_filters(records, filters),
        records,
        total_seats=total_seats,
        strike_rate_min_contested=strike_rate_min_contested,
    )


def _entry_properties(entry: ReconciliationEntry | None) -> dict:
    if entry is None:
        return {}
    winner = entry.winner
    props = {
        "winner": winner.candidate,
        "party": winner.party,
        "party_label": winner.display_party,
        "constituency": winner.display_constituency,
        "district": winner.district_name_local or winner.district_name,
        "year": winner.year,
        "votes": winner.votes,
        "vote_share": winner.vote_share_percentage,
        "margin": winner.margin,
    }
    if entry.runner_up is not None:
        props["runner_up"] = entry.runner_up.candidate
        props["runner_up_party"] = entry.runner_up.display_party
    return props


def _map_feature(result: FeatureResult) -> MapFeature:
    feature = result.feature
    geometry = mapping(feature.geometry) if feature.geometry is not None else None
    properties = {
        "name": feature.name,
        "feature_id": feature.identifier,
        "key": result.key,
        "status": result.status,
        **_entry_properties(result.entry),
    }
    return MapFeature(geometry=geometry, properties=properties)


def map_features(state: DatasetState, filters: FilterState) -> MapFeatureCollection:
    """Join every boundary feature with the winner of its constituency.

    Features without a matching winner in the subset are emitted with
    ``status="no_data"``.
    """
    features = state.require_features()
    records = state.require_records()
    index = build_index(apply_filters(records, filters), universe=records)
    results = reconcile_features(features, index)

    report = coverage(results)
    if report.unmatched and filters.is_empty:
        logger.warning(f"{len(report.unmatched)} boundary features have no result: {report.unmatched[:10]}")

    return MapFeatureCollection(
        matched=report.matched,
        unmatched=len(report.unmatched),
        features=[_map_feature(result) for result in results],
    )


def reconcile_feature(
    state: DatasetState,
    filters: FilterState,
    name: str,
    feature_id: int | None = None,
) -> ReconcileResponse:
    """Resolve one boundary feature name (and identifier) against the subset."""
    records = state.require_records()
    index = build_index(apply_filters(records, filters), universe=records)
    entry = reconcile(index, name, feature_id)
    return ReconcileResponse(
        name=name,
        feature_id=feature_id,
        key=normalize_feature_name(name, feature_id),
        status="matched" if entry is not None else "no_data",
        winner=entry.winner if entry is not None else None,
        runner_up=entry.runner_up if entry is not None else None,
    )


def reconciliation_coverage(state: DatasetState, filters: FilterState | None = None) -> CoverageResponse:
    """Count boundary features that find a winner in the (filtered) record set."""
    records = state.require_records()
    subset = apply_filters(records, filters) if filters is not None else records
    report = coverage(reconcile_features(state.require_features(), build_index(subset, universe=records)))
    return CoverageResponse(total=report.total, matched=report.matched, unmatched=report.unmatched)


def _distinct(values) -> list[str]:
    return sorted({v for v in values if v}, key=collation_key)


def filter_options(state: DatasetState, district: str | None = None) -> FilterOptionsResponse:
    """Distinct facet values, with constituencies optionally scoped to one district."""
    records = state.require_records()
    in_district = [r for r in records if r.district_name == district] if district else records
    return FilterOptionsResponse(
        years=sorted({r.year for r in records}),
        districts=_distinct(r.district_name for r in records),
        constituencies=_distinct(r.constituency_name for r in in_district),
        parties=_distinct(r.party for r in records),
        education=_distinct(r.education for r in records),
        alliances=[str(a) for a in Alliance],
        constituency_types=list(CONSTITUENCY_TYPES),
    )
