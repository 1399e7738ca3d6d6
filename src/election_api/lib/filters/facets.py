"""Bucket boundaries and value tests shared by the filter engine and the reducers.

Every test treats a missing value (``None`` or NaN) as "does not match".
The margin, vote-share and vote-count ranges also treat zero as unset, so
rows with a blank or zero figure never fall in a bucket.
"""

import math

from election_api.models.filter_state import AgeRange, RangeBucket, VoteCountRange

# Statutory one-sixth of valid votes.
DEPOSIT_LOST_THRESHOLD = 16.66

MARGIN_HIGH_ABOVE = 50_000
MARGIN_LOW_BELOW = 10_000

VOTE_SHARE_HIGH_ABOVE = 50.0
VOTE_SHARE_LOW_BELOW = 30.0

_TRUTHY_STRINGS = frozenset({"true", "1"})


def is_missing(value: float | int | None) -> bool:
    return value is None or (isinstance(value, float) and math.isnan(value))


def _is_unset(value: float | int | None) -> bool:
    return is_missing(value) or value == 0


def margin_bucket(margin: float | None) -> RangeBucket | None:
    """High > 50000, Medium 10000..50000 inclusive, Low < 10000.  Zero has no bucket."""
    if _is_unset(margin):
        return None
    if margin > MARGIN_HIGH_ABOVE:
        return RangeBucket.HIGH
    if margin >= MARGIN_LOW_BELOW:
        return RangeBucket.MEDIUM
    return RangeBucket.LOW


def vote_share_bucket(share: float | None) -> RangeBucket | None:
    """High > 50%, Medium 30..50% inclusive, Low < 30%.  Zero has no bucket."""
    if _is_unset(share):
        return None
    if share > VOTE_SHARE_HIGH_ABOVE:
        return RangeBucket.HIGH
    if share >= VOTE_SHARE_LOW_BELOW:
        return RangeBucket.MEDIUM
    return RangeBucket.LOW


def age_bucket(age: int | None) -> AgeRange | None:
    """25-40 and 41-60 inclusive, 61+ above 60; ages under 25 fall in no bucket."""
    if is_missing(age):
        return None
    if age > 60:
        return AgeRange.SENIOR
    if age >= 41:
        return AgeRange.MIDDLE
    if age >= 25:
        return AgeRange.YOUNG
    return None


def in_vote_count_range(votes: int | None, bucket: VoteCountRange) -> bool:
    """Vote-count ranges; 50000 sits in both 50k-1L and 10k-50k.  Zero votes match no range."""
    if _is_unset(votes):
        return False
    if bucket is VoteCountRange.OVER_1L:
        return votes > 100_000
    if bucket is VoteCountRange.FROM_50K_TO_1L:
        return 50_000 <= votes <= 100_000
    if bucket is VoteCountRange.FROM_10K_TO_50K:
        return 10_000 <= votes <= 50_000
    return votes < 10_000


def is_deposit_lost(share: float | None) -> bool:
    """Vote share strictly below the one-sixth threshold."""
    return not is_missing(share) and share < DEPOSIT_LOST_THRESHOLD


def is_truthy(value: object) -> bool:
    """Category flags: True, 1 and "true" (any case) count as set."""
    if isinstance(value, bool):
        return value
    if isinstance(value, int | float):
        return value == 1
    if isinstance(value, str):
        return value.strip().lower() in _TRUTHY_STRINGS
    return False
