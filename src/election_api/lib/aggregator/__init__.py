"""Aggregator library — summary statistics over a record subset.

Public API:
    - aggregate: Build AggregateStats for a subset
    - AggregateStats: The derived summary model
    - win_rate / party_seat_counts / vote_vs_seat_share / ...: Individual reducers
"""

from collections.abc import Sequence

from election_api.lib.aggregator.reducers import (
    EDUCATION_ORDER,
    alliance_seat_counts,
    average_winner_age,
    category_win_rates,
    closest_fights,
    district_breakdown,
    education_levels,
    education_mix,
    gender_split,
    key_stats,
    margin_bucket_counts,
    party_seat_counts,
    party_vote_share,
    profession_counts,
    reserved_seats,
    strike_rates,
    top_margins,
    turnout_vs_margin,
    vote_share_distribution,
    vote_vs_seat_share,
    win_rate,
    winners_of,
)
from election_api.lib.aggregator.types import AggregateStats
from election_api.models.election_record import ElectionRecord


def aggregate(
    subset: Sequence[ElectionRecord],
    universe: Sequence[ElectionRecord] | None = None,
    *,
    total_seats: int | None = None,
    strike_rate_min_contested: int = 10,
) -> AggregateStats:
    """Derive every summary for ``subset``.

    Args:
        subset: The filtered records.
        universe: The unfiltered record set, used only as the vote
            denominator of the vote-vs-seat comparison.  Defaults to ``subset``.
        total_seats: Seat denominator for seat share.
        strike_rate_min_contested: Contest threshold for the strike-rate table.

    Returns:
        A new AggregateStats; identical inputs give equal results.
    """
    universe = subset if universe is None else universe
    return AggregateStats(
        key_stats=key_stats(subset),
        party_seats=party_seat_counts(subset),
        alliance_seats=alliance_seat_counts(subset),
        party_vote_share=party_vote_share(subset),
        vote_vs_seat_share=vote_vs_seat_share(subset, universe, total_seats),
        category_win_rates=category_win_rates(subset),
        strike_rates=strike_rates(subset, strike_rate_min_contested),
        average_winner_age=average_winner_age(subset),
        district_breakdown=district_breakdown(subset),
        education_levels=education_levels(subset),
        education_mix=education_mix(subset),
        professions=profession_counts(subset),
        gender_split=gender_split(subset),
        reserved_seats=reserved_seats(subset),
        margin_buckets=margin_bucket_counts(subset),
        vote_share_distribution=vote_share_distribution(subset),
        top_margins=top_margins(subset),
        closest_fights=closest_fights(subset),
        turnout_vs_margin=turnout_vs_margin(subset),
    )


__all__ = [
    "EDUCATION_ORDER",
    "AggregateStats",
    "aggregate",
    "alliance_seat_counts",
    "average_winner_age",
    "category_win_rates",
    "closest_fights",
    "district_breakdown",
    "education_levels",
    "education_mix",
    "gender_split",
    "key_stats",
    "margin_bucket_counts",
    "party_seat_counts",
    "party_vote_share",
    "profession_counts",
    "reserved_seats",
    "strike_rates",
    "top_margins",
    "turnout_vs_margin",
    "vote_share_distribution",
    "vote_vs_seat_share",
    "win_rate",
    "winners_of",
]
