"""FilterState — the facet selection driving one query over the record set.

Each facet is either unset (``None``) or narrows the result.  The UI
convention of sending ``"All"`` (or an empty string) for an unset facet is
normalized to ``None`` on validation.
"""

import enum
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, field_validator, model_validator

DEPOSIT_LOST = "DepositLost"


class Alliance(enum.StrEnum):
    """Pre-poll coalition groupings."""

    DMK_ALLIANCE = "DMK+"
    ADMK_ALLIANCE = "ADMK+"
    OTHERS = "Others"


class RangeBucket(enum.StrEnum):
    """High/Medium/Low buckets used by the margin and vote-share facets."""

    HIGH = "High"
    MEDIUM = "Medium"
    LOW = "Low"


class AgeRange(enum.StrEnum):
    YOUNG = "25-40"
    MIDDLE = "41-60"
    SENIOR = "61+"


class VoteCountRange(enum.StrEnum):
    OVER_1L = ">1L"
    FROM_50K_TO_1L = "50k-1L"
    FROM_10K_TO_50K = "10k-50k"
    UNDER_10K = "<10k"


class CandidateCategory(enum.StrEnum):
    INCUMBENT = "Incumbent"
    TURNCOAT = "Turncoat"
    RECONTEST = "Recontest"


class FilterState(BaseModel):
    """Immutable facet selection plus optional sort order."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    search: str | None = None
    district: str | None = None
    constituency: str | None = None
    party: str | None = None
    alliance: Alliance | None = None
    position: int | Literal["DepositLost"] | None = None
    constituency_type: Literal["GEN", "SC", "ST"] | None = None
    year: int | None = None
    age_range: AgeRange | None = None
    gender: str | None = None
    margin_range: RangeBucket | None = None
    vote_share_range: RangeBucket | None = None
    vote_count_range: VoteCountRange | None = None
    category: CandidateCategory | None = None
    education: str | None = None
    winners_only: bool = False
    sort_key: str | None = None
    sort_direction: Literal["asc", "desc"] = "asc"

    @model_validator(mode="before")
    @classmethod
    def _unset_all(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        # Dropping the key lets the field default apply.
        return {
            key: value
            for key, value in data.items()
            if not (isinstance(value, str) and value.strip() in ("", "All"))
        }

    @field_validator("position")
    @classmethod
    def _validate_position(cls, v: int | str | None) -> int | str | None:
        if isinstance(v, int) and v < 1:
            msg = "position must be a positive rank or 'DepositLost'"
            raise ValueError(msg)
        return v

    @property
    def is_empty(self) -> bool:
        """True when no facet narrows the record set."""
        return self == FilterState(sort_key=self.sort_key, sort_direction=self.sort_direction)
