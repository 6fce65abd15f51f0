"""
GeoJSON FeatureCollection objects.
"""

from collections.abc import Mapping
from typing import Tuple

from pydantic import Field

from geodoc.core.errors import ExpectedValueError
from geodoc.core.tags import Tag

from .base import (
    ARRAY_TYPES,
    GenericObject,
    GeoJsonObject,
    expect_member,
    expect_type,
    get_bbox,
    get_foreign_members,
)
from .feature import Feature

_COLLECTION_MEMBERS = frozenset(["type", "bbox", "features"])


class FeatureCollection(GeoJsonObject):
    """
    An ordered collection of features.

    Attributes:
        features: Features in document order (may be empty)
        bbox: Optional bounding box
        foreign_members: Members not defined for feature collections
    """

    features: Tuple[Feature, ...] = Field(default=(), description="Member features")

    @classmethod
    def from_object(cls, obj: Mapping) -> "FeatureCollection":
        """
        Build a feature collection from a generic object.

        Raises:
            ExpectedPropertyError: If ``type`` or ``features`` is missing
            ExpectedTypeError: If ``type`` is not "FeatureCollection"
            ExpectedValueError: If ``features`` is not an array of objects
        """
        expect_type(obj, Tag.FEATURE_COLLECTION)

        raw_features = expect_member(obj, "features")
        if not isinstance(raw_features, ARRAY_TYPES):
            raise ExpectedValueError("features", "array", raw_features)

        features = []
        for item in raw_features:
            if not isinstance(item, Mapping):
                raise ExpectedValueError("features", "object", item)
            features.append(Feature.from_object(item))

        return cls(
            features=tuple(features),
            bbox=get_bbox(obj),
            foreign_members=get_foreign_members(obj, _COLLECTION_MEMBERS),
        )

    def to_object(self) -> GenericObject:
        obj: GenericObject = {
            "type": Tag.FEATURE_COLLECTION.value,
            "features": [feature.to_object() for feature in self.features],
        }
        return self._add_common_members(obj)
