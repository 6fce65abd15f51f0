"""
Shared pieces of the GeoJSON object models.

Every GeoJSON object model converts to and from a generic object, the plain
``dict`` a JSON codec produces. Helpers here read the members every object
type shares: ``type``, ``bbox`` and foreign members.
"""

import copy
from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import Any, Dict, FrozenSet, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator

from geodoc.core.errors import (
    ExpectedPropertyError,
    ExpectedTypeError,
    ExpectedValueError,
)
from geodoc.core.tags import Tag

GenericObject = Dict[str, Any]

# JSON arrays may arrive as lists (from a codec) or tuples (from __geo_interface__)
ARRAY_TYPES = (list, tuple)


def is_number(value: Any) -> bool:
    """Whether a decoded JSON value is a number (booleans are not)."""
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def get_type_member(obj: Mapping) -> str:
    """
    Read the ``"type"`` member of a generic object.

    Raises:
        ExpectedPropertyError: If the member is missing
        ExpectedValueError: If the member is not a string
    """
    if "type" not in obj:
        raise ExpectedPropertyError("type")
    value = obj["type"]
    if not isinstance(value, str):
        raise ExpectedValueError(
            "type", "string", value, error_code="EXPECTED_STRING_VALUE"
        )
    return value


def expect_type(obj: Mapping, expected: Tag) -> None:
    """Check that a generic object's ``"type"`` names the expected tag."""
    actual = get_type_member(obj)
    if actual != expected.value:
        raise ExpectedTypeError(expected.value, actual)


def expect_member(obj: Mapping, name: str) -> Any:
    """Return a required member, raising ExpectedPropertyError if absent."""
    if name not in obj:
        raise ExpectedPropertyError(name)
    return obj[name]


def get_bbox(obj: Mapping) -> Optional[Tuple[float, ...]]:
    """
    Read the optional ``"bbox"`` member.

    A bounding box is an array of 2*n numbers, n >= 2. Its values are not
    interpreted.
    """
    value = obj.get("bbox")
    if value is None:
        return None
    if not isinstance(value, ARRAY_TYPES):
        raise ExpectedValueError("bbox", "array", value, error_code="BBOX_EXPECTED_ARRAY")

    bbox = []
    for item in value:
        if not is_number(item):
            raise ExpectedValueError(
                "bbox", "number", item, error_code="BBOX_EXPECTED_NUMERIC_VALUES"
            )
        try:
            bbox.append(float(item))
        except OverflowError as e:
            raise ExpectedValueError(
                "bbox",
                "number",
                item,
                error_code="BBOX_EXPECTED_NUMERIC_VALUES",
                message="Bounding box value is too large for a float",
            ) from e

    if len(bbox) < 4 or len(bbox) % 2:
        raise ExpectedValueError(
            "bbox",
            "array of 2*n numbers",
            value,
            error_code="BBOX_INVALID_LENGTH",
            message=f"Bounding box must hold 2*n numbers (n >= 2), found {len(bbox)}",
        )
    return tuple(bbox)


def get_foreign_members(obj: Mapping, known: FrozenSet[str]) -> Optional[GenericObject]:
    """Collect members not defined for the object type, copied by value."""
    foreign = {
        key: copy.deepcopy(value) for key, value in obj.items() if key not in known
    }
    return foreign or None


class GeoJsonObject(BaseModel, ABC):
    """
    Abstract base for GeoJSON object models.

    Attributes:
        bbox: Optional bounding box, copied through verbatim
        foreign_members: Members not defined by RFC 7946, kept for round trips
    """

    model_config = ConfigDict(frozen=True)

    bbox: Optional[Tuple[float, ...]] = Field(default=None, description="Bounding box")
    foreign_members: Optional[Dict[str, Any]] = Field(
        default=None, description="Members not defined for this object type"
    )

    @field_validator("bbox")
    @classmethod
    def validate_bbox(cls, v: Optional[Tuple[float, ...]]) -> Optional[Tuple[float, ...]]:
        """Validate bounding box length."""
        if v is not None and (len(v) < 4 or len(v) % 2):
            raise ValueError(f"Bounding box must hold 2*n numbers (n >= 2), got {len(v)}")
        return v

    @classmethod
    @abstractmethod
    def from_object(cls, obj: Mapping) -> "GeoJsonObject":
        """
        Build the model from a generic object.

        Raises:
            GeoDocException: If the object is not a valid instance of the type
        """

    @abstractmethod
    def to_object(self) -> GenericObject:
        """Convert the model to a generic object."""

    @property
    def __geo_interface__(self) -> GenericObject:
        return self.to_object()

    def _add_common_members(self, obj: GenericObject) -> GenericObject:
        if self.bbox is not None:
            obj["bbox"] = list(self.bbox)
        if self.foreign_members:
            for key, value in self.foreign_members.items():
                obj.setdefault(key, copy.deepcopy(value))
        return obj
