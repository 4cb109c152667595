"""
Polygon winding normalization for GeoJSON documents.

This package rewinds the rings of every Polygon and MultiPolygon in a decoded
GeoJSON document, in place, to either the d3-geo convention (exteriors
clockwise) or the RFC 7946 convention (exteriors counter-clockwise).
"""

__version__ = "0.4.0"

from .exceptions import (
    GeoJSONWindError,
    GeoJSONIOError,
    GeoJSONDecodeError,
    WindingInvariantError,
)
from .winding import (
    Convention,
    Orientation,
    signed_area,
    ring_orientation,
    wind_ring,
    wind_polygon,
    is_wound,
)
from .walker import (
    PolygonCounter,
    WindingWalker,
    process_document,
    process_geometry,
    normalize,
)
from .geojson_io import open_and_parse, loads, dumps, validate

__all__ = [
    'GeoJSONWindError',
    'GeoJSONIOError',
    'GeoJSONDecodeError',
    'WindingInvariantError',
    'Convention',
    'Orientation',
    'signed_area',
    'ring_orientation',
    'wind_ring',
    'wind_polygon',
    'is_wound',
    'PolygonCounter',
    'WindingWalker',
    'process_document',
    'process_geometry',
    'normalize',
    'open_and_parse',
    'loads',
    'dumps',
    'validate',
]
