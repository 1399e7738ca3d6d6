"""GeoJSON reader — parses a constituency FeatureCollection into GeographicFeature objects."""

import json
from typing import Any

from loguru import logger
from shapely.geometry import MultiPolygon, Polygon, shape

from election_api.models.geographic_feature import GeographicFeature

NAME_PROPERTIES = ("AC_NAME", "ac_name", "NAME", "name")
IDENTIFIER_PROPERTIES = ("AC_NO", "ac_no", "ID", "id")


def _first_present(props: dict[str, Any], keys: tuple[str, ...]) -> Any:
    for key in keys:
        value = props.get(key)
        if value is not None and value != "":
            return value
    return None


def _as_identifier(value: Any) -> int | None:
    if value is None:
        return None
    try:
        return int(value)
    except (TypeError, ValueError):
        logger.debug(f"Ignoring non-numeric feature identifier: {value!r}")
        return None


def _as_multipolygon(geom_data: dict | None, index: int):
    if not geom_data:
        return None

    geom = shape(geom_data)
    if isinstance(geom, Polygon):
        geom = MultiPolygon([geom])
    elif not isinstance(geom, MultiPolygon):
        logger.warning(f"Feature {index} has unsupported geometry type: {geom.geom_type}")
        return geom

    if not geom.is_valid:
        logger.warning(f"Feature {index} has invalid geometry, attempting repair")
        geom = geom.buffer(0)
        if isinstance(geom, Polygon):
            geom = MultiPolygon([geom])
    return geom


def parse_geojson(content: bytes | str) -> list[GeographicFeature]:
    """Parse a GeoJSON FeatureCollection of constituency boundaries.

    Features without a name are kept with an empty name so they still
    surface as "no data" on the map instead of disappearing.

    Args:
        content: Raw GeoJSON text.

    Returns:
        List of GeographicFeature objects in file order.

    Raises:
        ValueError: If the content is not a non-empty FeatureCollection.
    """
    try:
        data = json.loads(content)
    except json.JSONDecodeError as exc:
        msg = f"Invalid GeoJSON: {exc}"
        raise ValueError(msg) from exc

    if not isinstance(data, dict) or data.get("type") != "FeatureCollection":
        found = data.get("type") if isinstance(data, dict) else type(data).__name__
        msg = f"Expected FeatureCollection, got {found}"
        raise ValueError(msg)

    raw_features = data.get("features") or []
    if not raw_features:
        msg = "GeoJSON has no features"
        raise ValueError(msg)

    features: list[GeographicFeature] = []
    for i, feature in enumerate(raw_features):
        props = feature.get("properties") or {}
        name = _first_present(props, NAME_PROPERTIES)
        features.append(
            GeographicFeature(
                name="" if name is None else str(name),
                identifier=_as_identifier(_first_present(props, IDENTIFIER_PROPERTIES)),
                geometry=_as_multipolygon(feature.get("geometry"), i),
                properties=props,
            )
        )

    logger.info(f"Parsed {len(features)} boundary features from GeoJSON")
    return features
