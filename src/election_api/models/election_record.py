"""ElectionRecord — one candidate's result in one constituency and year.

Field aliases match the column headers of the tabular results dataset so a
parsed CSV row validates directly.  Records are frozen: the localized label
fields are attached once by the enrichment step via ``model_copy``.
"""

import math
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

# Category flags accept True, 1 and "true" as truthy, so keep the raw value.
FlagValue = bool | int | float | str | None

CONSTITUENCY_TYPES = ("GEN", "SC", "ST")

_TEXT_FIELDS = (
    "state_name",
    "candidate",
    "sex",
    "party",
    "candidate_type",
    "constituency_name",
    "constituency_type",
    "district_name",
    "sub_region",
    "deposit_lost",
    "pid",
    "party_type",
    "last_party",
    "last_constituency_name",
    "education",
    "profession",
    "profession_desc",
    "profession_second",
    "profession_second_desc",
    "election_type",
)


class ElectionRecord(BaseModel):
    """A single candidate-year-constituency result row."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    # Identity
    state_name: str | None = Field(default=None, alias="State_Name")
    assembly_no: int | None = Field(default=None, alias="Assembly_No")
    constituency_no: int | None = Field(default=None, alias="Constituency_No")
    year: int = Field(alias="Year")
    month: int | None = Field(default=None, alias="month")
    delim_id: int | None = Field(default=None, alias="DelimID")
    poll_no: int | None = Field(default=None, alias="Poll_No")
    constituency_name: str = Field(alias="Constituency_Name")
    constituency_type: str | None = Field(default=None, alias="Constituency_Type")
    district_name: str | None = Field(default=None, alias="District_Name")
    sub_region: str | None = Field(default=None, alias="Sub_Region")
    election_type: str | None = Field(default=None, alias="Election_Type")

    # Candidate
    candidate: str = Field(alias="Candidate")
    sex: str | None = Field(default=None, alias="Sex")
    age: int | None = Field(default=None, alias="Age")
    party: str | None = Field(default=None, alias="Party")
    party_id: int | None = Field(default=None, alias="Party_ID")
    party_type: str | None = Field(default=None, alias="Party_Type_TCPD")
    candidate_type: str | None = Field(default=None, alias="Candidate_Type")
    pid: str | None = Field(default=None, alias="pid")
    education: str | None = Field(default=None, alias="MyNeta_education")
    profession: str | None = Field(default=None, alias="TCPD_Prof_Main")
    profession_desc: str | None = Field(default=None, alias="TCPD_Prof_Main_Desc")
    profession_second: str | None = Field(default=None, alias="TCPD_Prof_Second")
    profession_second_desc: str | None = Field(default=None, alias="TCPD_Prof_Second_Desc")

    # Outcome
    position: int = Field(alias="Position")
    votes: int | None = Field(default=None, alias="Votes")
    valid_votes: int | None = Field(default=None, alias="Valid_Votes")
    electors: int | None = Field(default=None, alias="Electors")
    n_cand: int | None = Field(default=None, alias="N_Cand")
    turnout_percentage: float | None = Field(default=None, alias="Turnout_Percentage")
    vote_share_percentage: float | None = Field(default=None, alias="Vote_Share_Percentage")
    deposit_lost: str | None = Field(default=None, alias="Deposit_Lost")
    margin: float | None = Field(default=None, alias="Margin")
    margin_percentage: float | None = Field(default=None, alias="Margin_Percentage")
    enop: float | None = Field(default=None, alias="ENOP")

    # History
    last_poll: bool | None = Field(default=None, alias="last_poll")
    contested: int | None = Field(default=None, alias="Contested")
    last_party: str | None = Field(default=None, alias="Last_Party")
    last_party_id: int | None = Field(default=None, alias="Last_Party_ID")
    last_constituency_name: str | None = Field(default=None, alias="Last_Constituency_Name")
    same_constituency: bool | None = Field(default=None, alias="Same_Constituency")
    same_party: bool | None = Field(default=None, alias="Same_Party")
    no_terms: int | None = Field(default=None, alias="No_Terms")
    turncoat: FlagValue = Field(default=None, alias="Turncoat")
    incumbent: FlagValue = Field(default=None, alias="Incumbent")
    recontest: FlagValue = Field(default=None, alias="Recontest")

    # Localized labels, attached by the enrichment step
    constituency_name_local: str | None = None
    district_name_local: str | None = None
    party_local: str | None = None
    education_local: str | None = None
    profession_local: str | None = None
    sex_local: str | None = None

    @model_validator(mode="before")
    @classmethod
    def _drop_missing(cls, data: Any) -> Any:
        """Treat NaN and blank strings from the CSV as absent values."""
        if not isinstance(data, dict):
            return data
        cleaned = {}
        for key, value in data.items():
            if isinstance(value, float) and math.isnan(value):
                continue
            if isinstance(value, str) and not value.strip():
                continue
            cleaned[key] = value
        return cleaned

    @field_validator(*_TEXT_FIELDS, mode="before")
    @classmethod
    def _coerce_text(cls, v: Any) -> Any:
        # Auto-typed columns can turn codes like "1" into numbers.
        if isinstance(v, bool) or v is None:
            return v
        if isinstance(v, int | float):
            return str(int(v)) if float(v).is_integer() else str(v)
        return v

    @property
    def is_winner(self) -> bool:
        """Whether this candidate won the constituency (position 1)."""
        return self.position == 1

    @property
    def display_constituency(self) -> str:
        return self.constituency_name_local or self.constituency_name

    @property
    def display_party(self) -> str | None:
        return self.party_local or self.party

    @classmethod
    def resolve_field(cls, key: str) -> str:
        """Map a field name or dataset column header to the model field name.

        Raises:
            ValueError: If the key names no field of the record.
        """
        if key in cls.model_fields:
            return key
        for name, info in cls.model_fields.items():
            if info.alias == key:
                return name
        msg = f"Unknown record field: {key}"
        raise ValueError(msg)
