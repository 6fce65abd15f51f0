"""
geodoc - GeoJSON documents for Python.

This package reads GeoJSON text into typed documents (a Geometry, a Feature
or a FeatureCollection) and writes them back, rejecting objects whose
``"type"`` is not one of the GeoJSON object types.
"""

from geodoc.core.document import (
    FeatureCollectionDoc,
    FeatureDoc,
    GeoJson,
    GeometryDoc,
    from_object,
    parse_text,
    to_object,
    to_text,
    wrap,
)
from geodoc.core.errors import (
    ExpectedPropertyError,
    ExpectedTypeError,
    ExpectedValueError,
    FeatureError,
    GeoDocException,
    GeometryError,
    MalformedJsonError,
    SerializationError,
    UnknownTypeError,
)
from geodoc.core.tags import Tag
from geodoc.models import (
    Feature,
    FeatureCollection,
    Geometry,
    GeometryCollection,
    LineString,
    MultiLineString,
    MultiPoint,
    MultiPolygon,
    Point,
    Polygon,
)

__version__ = "0.1.0"

__all__ = [
    # Documents
    "GeoJson",
    "GeometryDoc",
    "FeatureDoc",
    "FeatureCollectionDoc",
    "from_object",
    "parse_text",
    "to_object",
    "to_text",
    "wrap",
    "Tag",
    # Models
    "Geometry",
    "Point",
    "MultiPoint",
    "LineString",
    "MultiLineString",
    "Polygon",
    "MultiPolygon",
    "GeometryCollection",
    "Feature",
    "FeatureCollection",
    # Errors
    "GeoDocException",
    "MalformedJsonError",
    "ExpectedPropertyError",
    "ExpectedValueError",
    "ExpectedTypeError",
    "UnknownTypeError",
    "GeometryError",
    "FeatureError",
    "SerializationError",
]
