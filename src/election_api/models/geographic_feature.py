"""GeographicFeature — one constituency polygon from the boundary dataset."""

from dataclasses import dataclass, field

from shapely.geometry.base import BaseGeometry


@dataclass(frozen=True)
class GeographicFeature:
    """A boundary feature.  Only ``name`` and ``identifier`` take part in reconciliation."""

    name: str
    identifier: int | None
    geometry: BaseGeometry | None = None
    properties: dict = field(default_factory=dict, compare=False, hash=False)
