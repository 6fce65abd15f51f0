"""
GeoJSON Feature objects.
"""

import copy
from collections.abc import Mapping
from typing import Any, Dict, Optional, Union

from pydantic import Field

from geodoc.core.errors import FeatureError, json_kind
from geodoc.core.tags import Tag

from .base import (
    GenericObject,
    GeoJsonObject,
    expect_member,
    expect_type,
    get_bbox,
    get_foreign_members,
    is_number,
)
from .geometry import Geometry

FeatureId = Union[str, int, float]

_FEATURE_MEMBERS = frozenset(["type", "bbox", "geometry", "id", "properties"])


class Feature(GeoJsonObject):
    """
    A spatially bounded thing: an optional geometry plus properties.

    Attributes:
        geometry: Feature geometry, None for unlocated features
        id: Optional identifier (string or number)
        properties: Arbitrary JSON object, or None
        bbox: Optional bounding box
        foreign_members: Members not defined for features
    """

    geometry: Optional[Geometry] = Field(default=None, description="Feature geometry")
    id: Optional[FeatureId] = Field(default=None, description="Feature identifier")
    properties: Optional[Dict[str, Any]] = Field(
        default=None, description="Feature properties"
    )

    @classmethod
    def from_object(cls, obj: Mapping) -> "Feature":
        """
        Build a feature from a generic object.

        The ``geometry`` member is required but may be null. ``properties``
        may be an object, null or absent.

        Raises:
            ExpectedPropertyError: If ``type`` or ``geometry`` is missing
            ExpectedTypeError: If ``type`` is not "Feature"
            FeatureError: If geometry, id or properties hold invalid values
        """
        expect_type(obj, Tag.FEATURE)

        raw_geometry = expect_member(obj, "geometry")
        if raw_geometry is None:
            geometry = None
        elif isinstance(raw_geometry, Mapping):
            geometry = Geometry.from_object(raw_geometry)
        else:
            raise FeatureError(
                f"Feature geometry must be an object or null, found {json_kind(raw_geometry)}",
                error_code="FEATURE_INVALID_GEOMETRY_VALUE",
                details={"actual": json_kind(raw_geometry)},
            )

        feature_id = obj.get("id")
        if feature_id is not None and not (isinstance(feature_id, str) or is_number(feature_id)):
            raise FeatureError(
                f"Feature id must be a string or number, found {json_kind(feature_id)}",
                error_code="FEATURE_INVALID_IDENTIFIER_TYPE",
                details={"actual": json_kind(feature_id)},
            )

        raw_properties = obj.get("properties")
        if raw_properties is not None and not isinstance(raw_properties, Mapping):
            raise FeatureError(
                f"Feature properties must be an object or null, found {json_kind(raw_properties)}",
                error_code="PROPERTIES_EXPECTED_OBJECT_OR_NULL",
                details={"actual": json_kind(raw_properties)},
            )
        properties = None if raw_properties is None else copy.deepcopy(dict(raw_properties))

        return cls(
            geometry=geometry,
            id=feature_id,
            properties=properties,
            bbox=get_bbox(obj),
            foreign_members=get_foreign_members(obj, _FEATURE_MEMBERS),
        )

    def to_object(self) -> GenericObject:
        obj: GenericObject = {"type": Tag.FEATURE.value}
        if self.id is not None:
            obj["id"] = self.id
        obj["geometry"] = self.geometry.to_object() if self.geometry is not None else None
        obj["properties"] = copy.deepcopy(self.properties)
        return self._add_common_members(obj)

    def property(self, key: str) -> Any:
        """Return a property value, or None if absent."""
        if self.properties is None:
            return None
        return self.properties.get(key)

    def contains_property(self, key: str) -> bool:
        """Whether the feature carries the given property."""
        return self.properties is not None and key in self.properties
