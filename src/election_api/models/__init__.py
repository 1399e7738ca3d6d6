"""Domain models shared by the loaders, the query engine and the API."""

from election_api.models.election_record import CONSTITUENCY_TYPES, ElectionRecord
from election_api.models.filter_state import (
    DEPOSIT_LOST,
    AgeRange,
    Alliance,
    CandidateCategory,
    FilterState,
    RangeBucket,
    VoteCountRange,
)
from election_api.models.geographic_feature import GeographicFeature

__all__ = [
    "CONSTITUENCY_TYPES",
    "DEPOSIT_LOST",
    "AgeRange",
    "Alliance",
    "CandidateCategory",
    "ElectionRecord",
    "FilterState",
    "GeographicFeature",
    "RangeBucket",
    "VoteCountRange",
]
