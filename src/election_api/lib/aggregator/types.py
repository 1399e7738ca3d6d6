"""AggregateStats and its parts — derived, read-only summaries of a record subset."""

from pydantic import BaseModel, ConfigDict, Field


class _Frozen(BaseModel):
    model_config = ConfigDict(frozen=True)


class LabelCount(_Frozen):
    """A frequency-table row; ``label`` is the localized display name."""

    name: str
    label: str
    value: int


class PartyShare(_Frozen):
    party: str
    label: str
    votes: int
    share: float


class VoteSeatShare(_Frozen):
    """Vote share vs seat share for one seat-winning party."""

    party: str
    label: str
    votes: int
    seats: int
    vote_share: float
    seat_share: float
    conversion: float


class CategoryWinRate(_Frozen):
    category: str
    total: int
    wins: int
    rate: float


class StrikeRate(_Frozen):
    party: str
    label: str
    contested: int
    won: int
    win_rate: float


class PartyAverageAge(_Frozen):
    party: str
    label: str
    average_age: float
    winners: int


class DistrictBreakdown(_Frozen):
    district: str
    label: str
    seats: int
    parties: dict[str, int] = Field(default_factory=dict)


class GenderSplit(_Frozen):
    male: int = 0
    female: int = 0
    others: int = 0


class MarginEntry(_Frozen):
    constituency: str
    party: str | None
    margin: float


class TurnoutMarginPoint(_Frozen):
    constituency: str
    party: str | None
    turnout: float
    margin: float


class KeyStats(_Frozen):
    candidates: int = 0
    winners: int = 0
    total_votes: int = 0
    average_winning_margin: float = 0.0
    deposit_lost: int = 0


class AggregateStats(_Frozen):
    """Every summary derived from one record subset.

    Rebuilt from scratch on each query; never mutated.
    """

    key_stats: KeyStats = Field(default_factory=KeyStats)
    party_seats: list[LabelCount] = Field(default_factory=list)
    alliance_seats: list[LabelCount] = Field(default_factory=list)
    party_vote_share: list[PartyShare] = Field(default_factory=list)
    vote_vs_seat_share: list[VoteSeatShare] = Field(default_factory=list)
    category_win_rates: list[CategoryWinRate] = Field(default_factory=list)
    strike_rates: list[StrikeRate] = Field(default_factory=list)
    average_winner_age: list[PartyAverageAge] = Field(default_factory=list)
    district_breakdown: list[DistrictBreakdown] = Field(default_factory=list)
    education_levels: list[LabelCount] = Field(default_factory=list)
    education_mix: list[LabelCount] = Field(default_factory=list)
    professions: list[LabelCount] = Field(default_factory=list)
    gender_split: GenderSplit = Field(default_factory=GenderSplit)
    reserved_seats: list[LabelCount] = Field(default_factory=list)
    margin_buckets: list[LabelCount] = Field(default_factory=list)
    vote_share_distribution: list[LabelCount] = Field(default_factory=list)
    top_margins: list[MarginEntry] = Field(default_factory=list)
    closest_fights: list[MarginEntry] = Field(default_factory=list)
    turnout_vs_margin: list[TurnoutMarginPoint] = Field(default_factory=list)
