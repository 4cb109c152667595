"""
Reading and writing GeoJSON documents.

Decoding validates the structure the walker relies on: every object carries
a known ``type`` and the members the walker descends into have the right
shape. Anything else is reported as a GeoJSONDecodeError before processing
starts.
"""

import json
import logging
import math
from pathlib import Path
from typing import Union

from .exceptions import GeoJSONDecodeError, GeoJSONIOError
from .walker import DOCUMENT_TYPES, GEOMETRY_TYPES

logger = logging.getLogger(__name__)


def _validate_geometry(geom, where):
    if not isinstance(geom, dict):
        raise GeoJSONDecodeError(f"{where} is not a JSON object")
    geom_type = geom.get("type")
    if geom_type not in GEOMETRY_TYPES:
        raise GeoJSONDecodeError(f"{where} has unknown geometry type {geom_type!r}")

    if geom_type == "GeometryCollection":
        members = geom.get("geometries")
        if not isinstance(members, list):
            raise GeoJSONDecodeError(f"{where} GeometryCollection has no 'geometries' array")
        for i, member in enumerate(members):
            _validate_geometry(member, f"{where}.geometries[{i}]")
        return

    coordinates = geom.get("coordinates")
    if not isinstance(coordinates, list):
        raise GeoJSONDecodeError(f"{where} {geom_type} has no 'coordinates' array")
    if geom_type == "Polygon":
        _validate_rings(coordinates, where)
    elif geom_type == "MultiPolygon":
        for i, polygon in enumerate(coordinates):
            if not isinstance(polygon, list):
                raise GeoJSONDecodeError(f"{where}.coordinates[{i}] is not a Polygon")
            _validate_rings(polygon, f"{where}.coordinates[{i}]")


def _is_coordinate(value):
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    try:
        return math.isfinite(float(value))
    except OverflowError:
        return False


def _is_position(position):
    return (
        isinstance(position, list)
        and len(position) >= 2
        and all(_is_coordinate(value) for value in position)
    )


def _validate_rings(rings, where):
    for ring in rings:
        if not isinstance(ring, list) or not all(_is_position(position) for position in ring):
            raise GeoJSONDecodeError(f"{where} contains a ring that is not a list of positions")


def _validate_feature(feature, where):
    if not isinstance(feature, dict) or feature.get("type") != "Feature":
        raise GeoJSONDecodeError(f"{where} is not a Feature")
    geometry = feature.get("geometry")
    if geometry is not None:
        _validate_geometry(geometry, f"{where}.geometry")


def validate(doc) -> dict:
    """Check that ``doc`` is a GeoJSON object the walker can process."""
    if not isinstance(doc, dict):
        raise GeoJSONDecodeError("top-level value is not a JSON object")
    doc_type = doc.get("type")
    if doc_type not in DOCUMENT_TYPES:
        raise GeoJSONDecodeError(f"unknown GeoJSON type {doc_type!r}")

    if doc_type == "FeatureCollection":
        features = doc.get("features")
        if not isinstance(features, list):
            raise GeoJSONDecodeError("FeatureCollection has no 'features' array")
        for i, feature in enumerate(features):
            _validate_feature(feature, f"features[{i}]")
    elif doc_type == "Feature":
        _validate_feature(doc, "Feature")
    else:
        _validate_geometry(doc, doc_type)
    return doc


def _reject_constant(name):
    raise GeoJSONDecodeError(f"{name} is not a valid JSON number")


def loads(text: str) -> dict:
    """Decode GeoJSON text."""
    try:
        doc = json.loads(text, parse_constant=_reject_constant)
    except json.JSONDecodeError as e:
        raise GeoJSONDecodeError(str(e)) from e
    return validate(doc)


def open_and_parse(filename: Union[str, Path]) -> dict:
    """Open a file, read it, and parse it into a GeoJSON document."""
    path = Path(filename)
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise GeoJSONIOError(path, e) from e
    logger.debug(f"Read {len(text)} characters from {path}")
    return loads(text)


def dumps(doc: dict, pretty: bool = False) -> str:
    """Encode a document, compact unless ``pretty`` is set."""
    if pretty:
        return json.dumps(doc, indent=2, ensure_ascii=False, allow_nan=False)
    return json.dumps(doc, separators=(",", ":"), ensure_ascii=False, allow_nan=False)
