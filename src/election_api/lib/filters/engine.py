"""Filter engine — applies a FilterState to the full record set.

Composition order is fixed: search, then facets, then the winners-only
override, then the sort.  The input sequence is never mutated and every
call returns a new list.
"""

from collections.abc import Sequence

from loguru import logger

from election_api.lib.filters.predicates import facet_predicates, matches_search
from election_api.lib.filters.sorting import sort_records
from election_api.models.election_record import ElectionRecord
from election_api.models.filter_state import FilterState


def apply_filters(records: Sequence[ElectionRecord], state: FilterState) -> list[ElectionRecord]:
    """Return the records matching ``state``, sorted when a sort key is set.

    Args:
        records: The full record set.
        state: Facet selection and sort order.

    Returns:
        A freshly allocated list; a subset of ``records``.

    Raises:
        ValueError: If the sort key names no record field.
    """
    result = list(records)

    if state.search:
        term = state.search
        result = [r for r in result if matches_search(r, term)]

    predicates = facet_predicates(state)
    if predicates:
        result = [r for r in result if all(predicate(r) for predicate in predicates)]

    if state.winners_only:
        result = [r for r in result if r.is_winner]

    if state.sort_key:
        result = sort_records(result, state.sort_key, state.sort_direction)

    logger.debug(f"Filter applied: {len(predicates)} facets, {len(records)} -> {len(result)} records")
    return result
