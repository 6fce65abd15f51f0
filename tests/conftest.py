"""
Shared fixtures for geodoc tests.
"""

from pathlib import Path
from typing import Any, Dict

import pytest

from geodoc import (
    Feature,
    FeatureCollection,
    Geometry,
    GeometryCollection,
    LineString,
    Point,
    Polygon,
)

FIXTURES_DIR = Path(__file__).parent / "fixtures"

# One minimal, valid body per geometry type
MINIMAL_GEOMETRIES: Dict[str, Dict[str, Any]] = {
    "Point": {"type": "Point", "coordinates": [1.0, 2.0]},
    "MultiPoint": {"type": "MultiPoint", "coordinates": [[1.0, 2.0], [3.0, 4.0]]},
    "LineString": {"type": "LineString", "coordinates": [[1.0, 2.0], [3.0, 4.0]]},
    "MultiLineString": {
        "type": "MultiLineString",
        "coordinates": [[[1.0, 2.0], [3.0, 4.0]]],
    },
    "Polygon": {
        "type": "Polygon",
        "coordinates": [[[0.0, 0.0], [1.0, 0.0], [1.0, 1.0], [0.0, 0.0]]],
    },
    "MultiPolygon": {
        "type": "MultiPolygon",
        "coordinates": [[[[0.0, 0.0], [1.0, 0.0], [1.0, 1.0], [0.0, 0.0]]]],
    },
    "GeometryCollection": {"type": "GeometryCollection", "geometries": []},
}


@pytest.fixture
def point_geometry() -> Geometry:
    return Geometry(value=Point(coordinates=(102.0, 0.5)))


@pytest.fixture
def polygon_geometry() -> Geometry:
    return Geometry(
        value=Polygon(
            coordinates=(
                ((100.0, 0.0), (101.0, 0.0), (101.0, 1.0), (100.0, 1.0), (100.0, 0.0)),
            )
        ),
        bbox=(100.0, 0.0, 101.0, 1.0),
    )


@pytest.fixture
def collection_geometry() -> Geometry:
    return Geometry(
        value=GeometryCollection(
            geometries=(
                Geometry(value=Point(coordinates=(100.0, 0.0))),
                Geometry(value=LineString(coordinates=((101.0, 0.0), (102.0, 1.0)))),
            )
        )
    )


@pytest.fixture
def sample_feature(point_geometry: Geometry) -> Feature:
    return Feature(
        geometry=point_geometry,
        id="well-12",
        properties={"name": "Test well", "depth_m": 40, "tags": ["water", "active"]},
    )


@pytest.fixture
def sample_feature_collection(
    sample_feature: Feature, polygon_geometry: Geometry
) -> FeatureCollection:
    return FeatureCollection(
        features=(
            sample_feature,
            Feature(geometry=polygon_geometry, id=7, properties=None),
            Feature(geometry=None, properties={"unlocated": True}),
        ),
        foreign_members={"title": "Sample"},
    )


@pytest.fixture
def feature_collection_text() -> str:
    return (FIXTURES_DIR / "feature_collection.geojson").read_text(encoding="utf-8")
