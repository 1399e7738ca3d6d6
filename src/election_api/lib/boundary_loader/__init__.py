"""Boundary loader library — reads constituency boundary GeoJSON.

Public API:
    - parse_geojson: Parse FeatureCollection text into GeographicFeature objects
"""

from election_api.lib.boundary_loader.geojson import IDENTIFIER_PROPERTIES, NAME_PROPERTIES, parse_geojson

__all__ = [
    "IDENTIFIER_PROPERTIES",
    "NAME_PROPERTIES",
    "parse_geojson",
]
