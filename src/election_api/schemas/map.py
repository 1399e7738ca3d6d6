"""GeoJSON map schemas: boundary features joined with constituency results."""

from typing import Any, Literal

from pydantic import BaseModel, Field

from election_api.models.election_record import ElectionRecord


class MapFeature(BaseModel):
    """GeoJSON Feature for one constituency boundary.

    ``properties.status`` is ``"matched"`` or ``"no_data"``; unmatched
    features are kept so they render distinctly.
    """

    type: Literal["Feature"] = "Feature"
    geometry: dict[str, Any] | None = None
    properties: dict[str, Any]


class MapFeatureCollection(BaseModel):
    """GeoJSON FeatureCollection with reconciliation counts."""

    type: Literal["FeatureCollection"] = "FeatureCollection"
    matched: int = 0
    unmatched: int = 0
    features: list[MapFeature] = Field(default_factory=list)


class ReconcileResponse(BaseModel):
    """Result of reconciling a single boundary feature name."""

    name: str
    feature_id: int | None = None
    key: str
    status: Literal["matched", "no_data"]
    winner: ElectionRecord | None = None
    runner_up: ElectionRecord | None = None


class CoverageResponse(BaseModel):
    """Matched vs unmatched boundary features for the full dataset."""

    total: int
    matched: int
    unmatched: list[str] = Field(default_factory=list)
