"""Reconciler library — joins boundary features to tabular results by name.

Public API:
    - normalize_feature_name: Boundary name + identifier to canonical key
    - normalize_result_name: Result constituency name to canonical key
    - build_index: Canonical key -> {winner, runner-up} for a record subset
    - reconcile: Single feature lookup ("no data" is None)
    - reconcile_features: Resolve all features, unmatched ones included
    - coverage: Matched/unmatched feature counts
    - NAME_ALIASES / SPLIT_CONSTITUENCIES: Versioned name tables
"""

from election_api.lib.reconciler.aliases import ALIASES_VERSION, NAME_ALIASES, SPLIT_CONSTITUENCIES
from election_api.lib.reconciler.index import (
    CoverageReport,
    FeatureResult,
    ReconciliationEntry,
    ReconciliationIndex,
    build_index,
    coverage,
    reconcile,
    reconcile_features,
)
from election_api.lib.reconciler.normalizer import (
    normalize_feature_name,
    normalize_result_name,
    split_constituency_key,
    strip_reservation,
)

__all__ = [
    "ALIASES_VERSION",
    "NAME_ALIASES",
    "SPLIT_CONSTITUENCIES",
    "CoverageReport",
    "FeatureResult",
    "ReconciliationEntry",
    "ReconciliationIndex",
    "build_index",
    "coverage",
    "normalize_feature_name",
    "normalize_result_name",
    "reconcile",
    "reconcile_features",
    "split_constituency_key",
    "strip_reservation",
]
