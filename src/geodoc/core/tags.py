"""
GeoJSON object type tags.

Maps the textual ``"type"`` member of a GeoJSON object to one of the nine
object types defined by RFC 7946 and tells geometry types apart from
Feature and FeatureCollection.
"""

from enum import Enum
from typing import Any, Dict, FrozenSet, Optional


class Tag(str, Enum):
    """GeoJSON object types (RFC 7946 section 1.4)."""

    POINT = "Point"
    MULTI_POINT = "MultiPoint"
    LINE_STRING = "LineString"
    MULTI_LINE_STRING = "MultiLineString"
    POLYGON = "Polygon"
    MULTI_POLYGON = "MultiPolygon"
    GEOMETRY_COLLECTION = "GeometryCollection"
    FEATURE = "Feature"
    FEATURE_COLLECTION = "FeatureCollection"

    @classmethod
    def from_str(cls, value: Any) -> Optional["Tag"]:
        """
        Resolve a ``"type"`` value to its tag.

        Matching is exact: case-sensitive, no trimming, no aliases.

        Args:
            value: The raw ``"type"`` member

        Returns:
            The matching Tag, or None if nothing matches
        """
        if not isinstance(value, str):
            return None
        return _TAGS_BY_NAME.get(value)

    @property
    def is_geometry_type(self) -> bool:
        """Whether this tag names a geometry object."""
        return self in GEOMETRY_TAGS


_TAGS_BY_NAME: Dict[str, Tag] = {
    "Point": Tag.POINT,
    "MultiPoint": Tag.MULTI_POINT,
    "LineString": Tag.LINE_STRING,
    "MultiLineString": Tag.MULTI_LINE_STRING,
    "Polygon": Tag.POLYGON,
    "MultiPolygon": Tag.MULTI_POLYGON,
    "GeometryCollection": Tag.GEOMETRY_COLLECTION,
    "Feature": Tag.FEATURE,
    "FeatureCollection": Tag.FEATURE_COLLECTION,
}

GEOMETRY_TAGS: FrozenSet[Tag] = frozenset(
    [
        Tag.POINT,
        Tag.MULTI_POINT,
        Tag.LINE_STRING,
        Tag.MULTI_LINE_STRING,
        Tag.POLYGON,
        Tag.MULTI_POLYGON,
        Tag.GEOMETRY_COLLECTION,
    ]
)
