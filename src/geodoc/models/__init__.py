"""
GeoJSON object models.
"""

from .base import GenericObject, GeoJsonObject
from .feature import Feature, FeatureId
from .feature_collection import FeatureCollection
from .geometry import (
    Geometry,
    GeometryCollection,
    GeometryValue,
    LineString,
    MultiLineString,
    MultiPoint,
    MultiPolygon,
    Point,
    Polygon,
    Position,
)

__all__ = [
    # Base
    "GenericObject",
    "GeoJsonObject",
    # Geometry
    "Geometry",
    "GeometryValue",
    "Position",
    "Point",
    "MultiPoint",
    "LineString",
    "MultiLineString",
    "Polygon",
    "MultiPolygon",
    "GeometryCollection",
    # Feature
    "Feature",
    "FeatureId",
    "FeatureCollection",
]
