"""Reconciliation index — joins boundary features to constituency results.

The index is rebuilt from scratch whenever the record subset changes; it is
a plain dict, so each feature lookup at render time is O(1).
"""

from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from typing import Literal

from loguru import logger

from election_api.lib.reconciler.normalizer import normalize_feature_name, normalize_result_name
from election_api.models.election_record import ElectionRecord
from election_api.models.geographic_feature import GeographicFeature

MatchStatus = Literal["matched", "no_data"]


@dataclass(frozen=True)
class ReconciliationEntry:
    """The winner of one constituency and, when present, its runner-up."""

    winner: ElectionRecord
    runner_up: ElectionRecord | None = None


@dataclass(frozen=True)
class FeatureResult:
    """A boundary feature resolved against the index."""

    feature: GeographicFeature
    key: str
    entry: ReconciliationEntry | None = None

    @property
    def status(self) -> MatchStatus:
        return "matched" if self.entry is not None else "no_data"


@dataclass
class CoverageReport:
    """How many boundary features found a result."""

    matched: int = 0
    unmatched: list[str] = field(default_factory=list)

    @property
    def total(self) -> int:
        return self.matched + len(self.unmatched)


ReconciliationIndex = dict[str, ReconciliationEntry]


def build_index(
    records: Sequence[ElectionRecord],
    universe: Sequence[ElectionRecord] | None = None,
) -> ReconciliationIndex:
    """Build canonical key -> {winner, runner-up} for a record subset.

    One entry per winner (position 1) in ``records``, keyed by the winner's
    own constituency name.  The runner-up (position 2 in the same
    constituency and year) is looked up in ``universe`` so that narrowing
    the subset to winners does not lose runners-up.

    Args:
        records: The (possibly filtered) record subset.
        universe: Full record set for runner-up lookup; defaults to ``records``.

    Returns:
        A fresh index dict.
    """
    runners_up: dict[tuple[str, int], ElectionRecord] = {}
    for record in universe if universe is not None else records:
        if record.position == 2:
            runners_up.setdefault((record.constituency_name, record.year), record)

    index: ReconciliationIndex = {}
    for winner in records:
        if not winner.is_winner:
            continue
        key = normalize_result_name(winner.constituency_name)
        if key in index:
            # Several years in the subset: the later row in input order wins.
            logger.debug(f"Reconciliation key {key!r} appears for more than one winner")
        index[key] = ReconciliationEntry(
            winner=winner,
            runner_up=runners_up.get((winner.constituency_name, winner.year)),
        )
    return index


def reconcile(
    index: ReconciliationIndex,
    feature_name: str | None,
    feature_id: int | None = None,
) -> ReconciliationEntry | None:
    """Look up the result for one boundary feature; None means "no data"."""
    return index.get(normalize_feature_name(feature_name, feature_id))


def reconcile_features(
    features: Iterable[GeographicFeature],
    index: ReconciliationIndex,
) -> list[FeatureResult]:
    """Resolve every feature, keeping unmatched ones as "no data" results."""
    results = []
    for feature in features:
        key = normalize_feature_name(feature.name, feature.identifier)
        results.append(FeatureResult(feature=feature, key=key, entry=index.get(key)))
    return results


def coverage(results: Iterable[FeatureResult]) -> CoverageReport:
    """Summarize matched vs unmatched features."""
    report = CoverageReport()
    for result in results:
        if result.entry is not None:
            report.matched += 1
        else:
            report.unmatched.append(result.feature.name)
    return report
