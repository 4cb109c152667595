"""Shared fixtures for the geojson_wind tests."""

import copy

import pytest

# Clockwise exterior and clockwise hole
EXTERIOR_CW = [[0.0, 0.0], [3.0, 6.0], [6.0, 1.0], [0.0, 0.0]]
HOLE_CW = [[2.0, 2.0], [3.0, 3.0], [4.0, 2.0], [2.0, 2.0]]
HOLE_CCW = [[2.0, 2.0], [4.0, 2.0], [3.0, 3.0], [2.0, 2.0]]

SQUARE_CCW = [[0.0, 0.0], [10.0, 0.0], [10.0, 10.0], [0.0, 10.0], [0.0, 0.0]]
SQUARE_CW = [[0.0, 0.0], [0.0, 10.0], [10.0, 10.0], [10.0, 0.0], [0.0, 0.0]]


def make_polygon(*rings):
    return {"type": "Polygon", "coordinates": [copy.deepcopy(ring) for ring in rings]}


def make_feature(geometry, **properties):
    return {"type": "Feature", "geometry": geometry, "properties": properties}


@pytest.fixture
def holed_polygon():
    return make_polygon(EXTERIOR_CW, HOLE_CW)


@pytest.fixture
def mixed_collection():
    """FeatureCollection exercising every geometry type."""
    return {
        "type": "FeatureCollection",
        "features": [
            make_feature(make_polygon(SQUARE_CCW), name="square"),
            make_feature(make_polygon(EXTERIOR_CW, HOLE_CW), name="holed"),
            make_feature({
                "type": "MultiPolygon",
                "coordinates": [[copy.deepcopy(SQUARE_CW)], [copy.deepcopy(SQUARE_CCW), copy.deepcopy(HOLE_CCW)]],
            }),
            make_feature({"type": "Point", "coordinates": [1.0, 2.0]}),
            make_feature({"type": "MultiPoint", "coordinates": [[1.0, 2.0], [3.0, 4.0]]}),
            make_feature({"type": "LineString", "coordinates": copy.deepcopy(SQUARE_CW)}),
            make_feature({"type": "MultiLineString", "coordinates": [copy.deepcopy(SQUARE_CW)]}),
            make_feature(None, name="no geometry"),
            make_feature({
                "type": "GeometryCollection",
                "geometries": [
                    make_polygon(SQUARE_CW, HOLE_CW),
                    {
                        "type": "GeometryCollection",
                        "geometries": [
                            make_polygon(EXTERIOR_CW),
                            {"type": "LineString", "coordinates": copy.deepcopy(SQUARE_CCW)},
                        ],
                    },
                ],
            }),
        ],
    }
