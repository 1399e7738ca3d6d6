"""Filter library — the multi-facet query engine over election records.

Public API:
    - apply_filters: FilterState -> filtered, optionally sorted subset
    - facet_predicates: Predicates for the set facets of a FilterState
    - matches_search: Free-text search test
    - sort_records: Stable sort with missing values last
    - margin_bucket / vote_share_bucket / age_bucket: Bucket classification
    - is_deposit_lost / is_truthy / in_vote_count_range: Value tests
"""

from election_api.lib.filters.engine import apply_filters
from election_api.lib.filters.facets import (
    DEPOSIT_LOST_THRESHOLD,
    age_bucket,
    in_vote_count_range,
    is_deposit_lost,
    is_missing,
    is_truthy,
    margin_bucket,
    vote_share_bucket,
)
from election_api.lib.filters.predicates import facet_predicates, matches_search
from election_api.lib.filters.sorting import collation_key, sort_records

__all__ = [
    "DEPOSIT_LOST_THRESHOLD",
    "age_bucket",
    "apply_filters",
    "collation_key",
    "facet_predicates",
    "in_vote_count_range",
    "is_deposit_lost",
    "is_missing",
    "is_truthy",
    "margin_bucket",
    "matches_search",
    "sort_records",
    "vote_share_bucket",
]
