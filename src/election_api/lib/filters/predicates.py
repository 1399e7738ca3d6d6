"""Facet predicates — one pure test per FilterState facet.

``facet_predicates`` turns a FilterState into the ordered list of predicates
for its set facets.  Facets combine with logical AND, so the order only
matters for speed, never for the result.
"""

from collections.abc import Callable

from election_api.lib.alliances import is_member
from election_api.lib.filters.facets import (
    age_bucket,
    in_vote_count_range,
    is_deposit_lost,
    is_truthy,
    margin_bucket,
    vote_share_bucket,
)
from election_api.models.election_record import ElectionRecord
from election_api.models.filter_state import DEPOSIT_LOST, CandidateCategory, FilterState

Predicate = Callable[[ElectionRecord], bool]

_CATEGORY_FIELDS = {
    CandidateCategory.INCUMBENT: "incumbent",
    CandidateCategory.TURNCOAT: "turncoat",
    CandidateCategory.RECONTEST: "recontest",
}


def matches_search(record: ElectionRecord, term: str) -> bool:
    """Case-insensitive substring match on names, party and district, base or localized."""
    needle = term.casefold()
    haystack = (
        record.constituency_name,
        record.candidate,
        record.party,
        record.district_name,
        record.constituency_name_local,
        record.party_local,
        record.district_name_local,
    )
    return any(value and needle in value.casefold() for value in haystack)


def _label_equals(selected: str, base: str | None, local: str | None) -> bool:
    return selected == base or (local is not None and selected == local)


def facet_predicates(state: FilterState) -> list[Predicate]:
    """Build the predicates for every facet set on ``state``.

    Search and winners-only are not facets; the engine applies them
    before and after these predicates.
    """
    predicates: list[Predicate] = []

    if state.district is not None:
        district = state.district
        predicates.append(lambda r: _label_equals(district, r.district_name, r.district_name_local))

    if state.constituency is not None:
        constituency = state.constituency
        predicates.append(
            lambda r: _label_equals(constituency, r.constituency_name, r.constituency_name_local)
        )

    if state.party is not None:
        party = state.party
        predicates.append(lambda r: _label_equals(party, r.party, r.party_local))

    if state.position is not None:
        if state.position == DEPOSIT_LOST:
            predicates.append(lambda r: is_deposit_lost(r.vote_share_percentage))
        else:
            position = state.position
            predicates.append(lambda r: r.position == position)

    if state.constituency_type is not None:
        constituency_type = state.constituency_type
        predicates.append(lambda r: r.constituency_type == constituency_type)

    if state.year is not None:
        year = state.year
        predicates.append(lambda r: r.year == year)

    if state.age_range is not None:
        age_range = state.age_range
        predicates.append(lambda r: age_bucket(r.age) == age_range)

    if state.gender is not None:
        gender = state.gender
        predicates.append(lambda r: _label_equals(gender, r.sex, r.sex_local))

    if state.margin_range is not None:
        margin_range = state.margin_range
        predicates.append(lambda r: margin_bucket(r.margin) == margin_range)

    if state.vote_share_range is not None:
        vote_share_range = state.vote_share_range
        predicates.append(lambda r: vote_share_bucket(r.vote_share_percentage) == vote_share_range)

    if state.alliance is not None:
        alliance = state.alliance
        predicates.append(lambda r: is_member(r.party, alliance))

    if state.vote_count_range is not None:
        vote_count_range = state.vote_count_range
        predicates.append(lambda r: in_vote_count_range(r.votes, vote_count_range))

    if state.category is not None:
        flag_field = _CATEGORY_FIELDS[state.category]
        predicates.append(lambda r: is_truthy(getattr(r, flag_field)))

    if state.education is not None:
        education = state.education
        predicates.append(lambda r: _label_equals(education, r.education, r.education_local))

    return predicates
