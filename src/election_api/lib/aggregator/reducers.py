"""Pure reducers over a record subset.

Every reducer is total over the empty subset and returns freshly built
values.  Unless noted, the subset is both numerator and denominator.
Frequency tables are ordered by count descending with ties in order of
first appearance.
"""

from collections import Counter, defaultdict
from collections.abc import Sequence

from election_api.lib.aggregator.types import (
    CategoryWinRate,
    DistrictBreakdown,
    GenderSplit,
    KeyStats,
    LabelCount,
    MarginEntry,
    PartyAverageAge,
    PartyShare,
    StrikeRate,
    TurnoutMarginPoint,
    VoteSeatShare,
)
from election_api.lib.alliances import alliance_of
from election_api.lib.filters.facets import (
    DEPOSIT_LOST_THRESHOLD,
    is_deposit_lost,
    is_missing,
    is_truthy,
    margin_bucket,
)
from election_api.models.election_record import ElectionRecord
from election_api.models.filter_state import Alliance, CandidateCategory, RangeBucket

UNKNOWN = "Unknown"

EDUCATION_ORDER = (
    "Doctorate",
    "Post Graduate",
    "Graduate Professional",
    "Graduate",
    "12th Pass",
    "10th Pass",
    "8th Pass",
    "5th Pass",
    "Literate",
    "Others",
)

MIN_VALID_AGE = 20
PARTY_VOTE_SHARE_TOP = 8
DISTRICT_TOP = 15
PROFESSION_TOP = 5
EDUCATION_MIX_TOP = 5
TOP_MARGINS = 50
CLOSEST_FIGHTS = 6

VOTE_SHARE_DISTRIBUTION_LABELS = (">50%", "30-50%", "16-30%", "<16%")

_CATEGORY_FLAGS = {
    CandidateCategory.INCUMBENT: "incumbent",
    CandidateCategory.TURNCOAT: "turncoat",
    CandidateCategory.RECONTEST: "recontest",
}


def _percent(part: float, whole: float, digits: int = 2) -> float:
    return round(part / whole * 100, digits) if whole else 0.0


def _conversion(seats: int, total_seats: int, votes: int, total_votes: int) -> float:
    # Ratio of the unrounded fractions, rounded once.
    if not (seats and total_seats and votes and total_votes):
        return 0.0
    return round((seats / total_seats) / (votes / total_votes), 2)


def winners_of(records: Sequence[ElectionRecord]) -> list[ElectionRecord]:
    return [r for r in records if r.is_winner]


def _party_labels(records: Sequence[ElectionRecord]) -> dict[str, str]:
    labels: dict[str, str] = {}
    for r in records:
        if r.party and r.party not in labels:
            labels[r.party] = r.party_local or r.party
    return labels


def _ranked(counts: Counter, labels: dict[str, str] | None = None, top: int | None = None) -> list[LabelCount]:
    # Counter preserves first-insertion order and sorted() is stable.
    ranked = sorted(counts.items(), key=lambda item: item[1], reverse=True)
    if top is not None:
        ranked = ranked[:top]
    labels = labels or {}
    return [LabelCount(name=name, label=labels.get(name, name), value=value) for name, value in ranked]


def party_seat_counts(records: Sequence[ElectionRecord]) -> list[LabelCount]:
    """Seats (winners) per party."""
    winners = winners_of(records)
    counts = Counter(w.party or UNKNOWN for w in winners)
    return _ranked(counts, _party_labels(winners))


def alliance_seat_counts(records: Sequence[ElectionRecord]) -> list[LabelCount]:
    """Seats per alliance, always listing every alliance."""
    counts = Counter({alliance: 0 for alliance in Alliance})
    for w in winners_of(records):
        counts[alliance_of(w.party)] += 1
    return [LabelCount(name=str(a), label=str(a), value=counts[a]) for a in Alliance]


def party_vote_share(records: Sequence[ElectionRecord], top: int = PARTY_VOTE_SHARE_TOP) -> list[PartyShare]:
    """Each party's share of all votes in the subset, largest first."""
    votes: Counter = Counter()
    for r in records:
        if r.votes:
            votes[r.party or UNKNOWN] += r.votes
    total = sum(votes.values())
    labels = _party_labels(records)
    shares = [
        PartyShare(party=party, label=labels.get(party, party), votes=v, share=_percent(v, total))
        for party, v in votes.items()
    ]
    shares.sort(key=lambda s: s.share, reverse=True)
    return shares[:top]


def vote_vs_seat_share(
    subset: Sequence[ElectionRecord],
    universe: Sequence[ElectionRecord],
    total_seats: int | None = None,
) -> list[VoteSeatShare]:
    """Vote share vs seat share for every party winning a seat in ``subset``.

    Votes and the vote denominator come from the unfiltered ``universe``;
    seats come from the subset.  ``total_seats`` defaults to the number of
    winners in the universe.
    """
    winners = winners_of(subset)
    seats = Counter(w.party or UNKNOWN for w in winners)

    party_votes: Counter = Counter()
    total_votes = 0
    for r in universe:
        if not r.votes:
            continue
        total_votes += r.votes
        party = r.party or UNKNOWN
        if party in seats:
            party_votes[party] += r.votes

    if total_seats is None:
        total_seats = len(winners_of(universe))

    labels = _party_labels(winners)
    rows = []
    for party, won in seats.items():
        vote_share = _percent(party_votes[party], total_votes)
        seat_share = _percent(won, total_seats)
        rows.append(
            VoteSeatShare(
                party=party,
                label=labels.get(party, party),
                votes=party_votes[party],
                seats=won,
                vote_share=vote_share,
                seat_share=seat_share,
                conversion=_conversion(won, total_seats, party_votes[party], total_votes),
            )
        )
    rows.sort(key=lambda row: row.seat_share, reverse=True)
    return rows


def win_rate(records: Sequence[ElectionRecord], category: CandidateCategory) -> CategoryWinRate:
    """Wins over candidates flagged with ``category``; 0 when none are flagged."""
    flag = _CATEGORY_FLAGS[category]
    flagged = [r for r in records if is_truthy(getattr(r, flag))]
    wins = sum(1 for r in flagged if r.is_winner)
    return CategoryWinRate(
        category=str(category),
        total=len(flagged),
        wins=wins,
        rate=_percent(wins, len(flagged), digits=1),
    )


def category_win_rates(records: Sequence[ElectionRecord]) -> list[CategoryWinRate]:
    return [win_rate(records, category) for category in CandidateCategory]


def strike_rates(records: Sequence[ElectionRecord], min_contested: int = 10) -> list[StrikeRate]:
    """Won/contested per party, for parties contesting more than ``min_contested`` seats."""
    contested: Counter = Counter()
    won: Counter = Counter()
    for r in records:
        party = r.party or UNKNOWN
        contested[party] += 1
        if r.is_winner:
            won[party] += 1

    labels = _party_labels(records)
    rates = [
        StrikeRate(
            party=party,
            label=labels.get(party, party),
            contested=n,
            won=won[party],
            win_rate=_percent(won[party], n, digits=1),
        )
        for party, n in contested.items()
        if n > min_contested
    ]
    rates.sort(key=lambda s: s.win_rate, reverse=True)
    return rates


def average_winner_age(records: Sequence[ElectionRecord]) -> list[PartyAverageAge]:
    """Mean winner age per party; ages of 20 or below are treated as bad data."""
    ages: dict[str, list[int]] = defaultdict(list)
    winners = winners_of(records)
    for w in winners:
        if not is_missing(w.age) and w.age > MIN_VALID_AGE:
            ages[w.party or UNKNOWN].append(w.age)

    labels = _party_labels(winners)
    averages = [
        PartyAverageAge(
            party=party,
            label=labels.get(party, party),
            average_age=round(sum(values) / len(values), 1),
            winners=len(values),
        )
        for party, values in ages.items()
    ]
    averages.sort(key=lambda a: a.average_age, reverse=True)
    return averages


def district_breakdown(records: Sequence[ElectionRecord], top: int = DISTRICT_TOP) -> list[DistrictBreakdown]:
    """Winners per party within each district, districts with most seats first."""
    per_district: dict[str, Counter] = {}
    labels: dict[str, str] = {}
    for w in winners_of(records):
        district = w.district_name or UNKNOWN
        labels.setdefault(district, w.district_name_local or district)
        per_district.setdefault(district, Counter())[w.party or UNKNOWN] += 1

    rows = [
        DistrictBreakdown(district=d, label=labels[d], seats=sum(c.values()), parties=dict(c))
        for d, c in per_district.items()
    ]
    rows.sort(key=lambda row: row.seats, reverse=True)
    return rows[:top]


def education_levels(
    records: Sequence[ElectionRecord],
    order: Sequence[str] = EDUCATION_ORDER,
) -> list[LabelCount]:
    """Winners per education level in the fixed ``order``; unranked levels last."""
    counts: Counter = Counter()
    labels: dict[str, str] = {}
    for w in winners_of(records):
        level = w.education or UNKNOWN
        counts[level] += 1
        labels.setdefault(level, w.education_local or level)

    rank = {level: i for i, level in enumerate(order)}
    unranked = len(order)
    levels = sorted(counts, key=lambda level: rank.get(level, unranked))
    return [LabelCount(name=level, label=labels[level], value=counts[level]) for level in levels]


def education_mix(records: Sequence[ElectionRecord], top: int = EDUCATION_MIX_TOP) -> list[LabelCount]:
    """Most common education labels among winners, or all candidates when there are no winners."""
    pool = winners_of(records) or list(records)
    counts = Counter(r.education_local or r.education or UNKNOWN for r in pool)
    return _ranked(counts, top=top)


def profession_counts(records: Sequence[ElectionRecord], top: int = PROFESSION_TOP) -> list[LabelCount]:
    counts: Counter = Counter()
    labels: dict[str, str] = {}
    for w in winners_of(records):
        profession = w.profession or UNKNOWN
        counts[profession] += 1
        labels.setdefault(profession, w.profession_local or profession)
    return _ranked(counts, labels, top=top)


def gender_split(records: Sequence[ElectionRecord]) -> GenderSplit:
    counts = Counter(w.sex for w in winners_of(records))
    male, female = counts.pop("M", 0), counts.pop("F", 0)
    return GenderSplit(male=male, female=female, others=sum(counts.values()))


def reserved_seats(records: Sequence[ElectionRecord]) -> list[LabelCount]:
    """Seats per party in SC/ST reserved constituencies."""
    winners = [w for w in winners_of(records) if w.constituency_type in ("SC", "ST")]
    return _ranked(Counter(w.party or UNKNOWN for w in winners), _party_labels(winners))


def margin_bucket_counts(records: Sequence[ElectionRecord]) -> list[LabelCount]:
    """Winners per margin bucket; winners with a missing or zero margin are not counted."""
    counts = Counter({bucket: 0 for bucket in RangeBucket})
    for w in winners_of(records):
        bucket = margin_bucket(w.margin)
        if bucket is not None:
            counts[bucket] += 1
    return [LabelCount(name=str(b), label=str(b), value=counts[b]) for b in RangeBucket]


def vote_share_distribution(records: Sequence[ElectionRecord]) -> list[LabelCount]:
    """Candidates per vote-share band: >50%, 30-50%, 16.66-30%, below the deposit threshold."""
    counts = dict.fromkeys(VOTE_SHARE_DISTRIBUTION_LABELS, 0)
    for r in records:
        share = r.vote_share_percentage
        if is_missing(share):
            continue
        if share > 50:
            counts[">50%"] += 1
        elif share >= 30:
            counts["30-50%"] += 1
        elif share >= DEPOSIT_LOST_THRESHOLD:
            counts["16-30%"] += 1
        else:
            counts["<16%"] += 1
    return [LabelCount(name=label, label=label, value=value) for label, value in counts.items()]


def _margin_entry(w: ElectionRecord, margin: float) -> MarginEntry:
    return MarginEntry(constituency=w.display_constituency, party=w.display_party, margin=margin)


def top_margins(records: Sequence[ElectionRecord], top: int = TOP_MARGINS) -> list[MarginEntry]:
    winners = [w for w in winners_of(records) if not is_missing(w.margin)]
    winners.sort(key=lambda w: w.margin, reverse=True)
    return [_margin_entry(w, w.margin) for w in winners[:top]]


def closest_fights(records: Sequence[ElectionRecord], top: int = CLOSEST_FIGHTS) -> list[MarginEntry]:
    """Smallest winning margins; a missing margin counts as 0."""
    winners = sorted(winners_of(records), key=lambda w: 0 if is_missing(w.margin) else w.margin)
    return [_margin_entry(w, 0 if is_missing(w.margin) else w.margin) for w in winners[:top]]


def turnout_vs_margin(records: Sequence[ElectionRecord]) -> list[TurnoutMarginPoint]:
    return [
        TurnoutMarginPoint(
            constituency=w.display_constituency,
            party=w.display_party,
            turnout=w.turnout_percentage,
            margin=w.margin,
        )
        for w in winners_of(records)
        if w.turnout_percentage and w.margin and not is_missing(w.turnout_percentage) and not is_missing(w.margin)
    ]


def key_stats(records: Sequence[ElectionRecord]) -> KeyStats:
    winners = winners_of(records)
    margins = [w.margin for w in winners if not is_missing(w.margin)]
    return KeyStats(
        candidates=len(records),
        winners=len(winners),
        total_votes=sum(r.votes for r in records if r.votes),
        average_winning_margin=round(sum(margins) / max(1, len(winners)), 2),
        deposit_lost=sum(1 for r in records if is_deposit_lost(r.vote_share_percentage)),
    )
