"""Loading of GeoJSON documents."""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any

_GEOMETRY_TYPES = frozenset(
    {"Point", "MultiPoint", "LineString", "MultiLineString", "Polygon", "MultiPolygon"}
)


def _check_geometry(value: Any) -> None:
    if not isinstance(value, dict):
        raise ValueError("geometry must be an object")
    kind = value.get("type")
    if kind == "GeometryCollection":
        geometries = value.get("geometries")
        if not isinstance(geometries, list):
            raise ValueError("GeometryCollection needs a list of geometries")
        for geometry in geometries:
            _check_geometry(geometry)
    elif kind in _GEOMETRY_TYPES:
        if not isinstance(value.get("coordinates"), list):
            raise ValueError(f"{kind} needs a list of coordinates")
    else:
        raise ValueError(f"unknown geometry type {kind!r}")


def _check_feature(value: Any) -> None:
    if not isinstance(value, dict) or value.get("type") != "Feature":
        raise ValueError("expected a Feature object")
    geometry = value.get("geometry")
    if geometry is not None:
        _check_geometry(geometry)
    properties = value.get("properties")
    if properties is not None and not isinstance(properties, dict):
        raise ValueError("Feature properties must be an object or null")


def _check_geojson(value: Any) -> None:
    if not isinstance(value, dict):
        raise ValueError("GeoJSON document must be an object")
    kind = value.get("type")
    if kind == "FeatureCollection":
        features = value.get("features")
        if not isinstance(features, list):
            raise ValueError("FeatureCollection needs a list of features")
        for feature in features:
            _check_feature(feature)
    elif kind == "Feature":
        _check_feature(value)
    else:
        _check_geometry(value)


@dataclass(frozen=True)
class GeoJsonService:
    """Holds a validated GeoJSON document."""

    geo_json: dict[str, Any]

    def __post_init__(self) -> None:
        _check_geojson(self.geo_json)

    @classmethod
    def from_file(cls, file_name: str) -> "GeoJsonService":
        """Read and validate a GeoJSON file."""
        with open(file_name, encoding="utf-8") as handle:
            data = json.load(handle)
        return cls(data)

    def to_string(self) -> str:
        """The document as compact JSON."""
        return json.dumps(self.geo_json, separators=(",", ":"))