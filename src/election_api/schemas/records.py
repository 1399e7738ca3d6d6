"""Record listing and facet option schemas."""

from pydantic import BaseModel, Field

from election_api.models.election_record import ElectionRecord
from election_api.schemas.common import PaginationMeta


class PaginatedRecordResponse(BaseModel):
    """One page of filtered, sorted records."""

    items: list[ElectionRecord]
    pagination: PaginationMeta


class FilterOptionsResponse(BaseModel):
    """Distinct values available to each categorical facet."""

    years: list[int] = Field(default_factory=list)
    districts: list[str] = Field(default_factory=list)
    constituencies: list[str] = Field(default_factory=list)
    parties: list[str] = Field(default_factory=list)
    education: list[str] = Field(default_factory=list)
    alliances: list[str] = Field(default_factory=list)
    constituency_types: list[str] = Field(default_factory=list)
