"""
Top-level GeoJSON documents.

A GeoJSON document is exactly one of a Geometry, a Feature or a
FeatureCollection. This module holds that root union, classifies generic
objects by their ``"type"`` member before handing them to the matching
model, and reads and writes documents as JSON text.

Errors raised by the Geometry, Feature and FeatureCollection models
propagate unchanged.
"""

from abc import ABC, abstractmethod
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional, Union

from geodoc.core import codec
from geodoc.core.config import settings
from geodoc.core.errors import (
    CodecError,
    ConfigurationError,
    MalformedJsonError,
    SerializationError,
    UnknownTypeError,
    json_kind,
)
from geodoc.core.logging_config import get_logger
from geodoc.core.tags import GEOMETRY_TAGS, Tag
from geodoc.models import Feature, FeatureCollection, GenericObject, Geometry
from geodoc.models.base import get_type_member

logger = get_logger(__name__)

ShapeValue = Union[Geometry, Feature, FeatureCollection]


class GeoJson(ABC):
    """
    Root of a GeoJSON document (RFC 7946 section 3).

    Concrete documents are GeometryDoc, FeatureDoc and FeatureCollectionDoc,
    each holding one value. Documents are immutable and compare by value.
    """

    __slots__ = ()

    value: ShapeValue

    @abstractmethod
    def to_object(self) -> GenericObject:
        """Convert the document to a generic object."""

    @property
    def __geo_interface__(self) -> GenericObject:
        return self.to_object()

    @staticmethod
    def from_object(obj: Mapping) -> "GeoJson":
        """Build a document from a generic object. See ``from_object``."""
        return from_object(obj)

    @staticmethod
    def from_text(text: Union[str, bytes, bytearray]) -> "GeoJson":
        """Build a document from JSON text. See ``parse_text``."""
        return parse_text(text)

    def to_text(self, indent: Optional[int] = None, sort_keys: Optional[bool] = None) -> str:
        """Write the document as JSON text. See ``to_text``."""
        return to_text(self, indent=indent, sort_keys=sort_keys)

    def __str__(self) -> str:
        return to_text(self)


@dataclass(frozen=True)
class GeometryDoc(GeoJson):
    """Document whose root is a geometry object."""

    value: Geometry

    def to_object(self) -> GenericObject:
        return self.value.to_object()


@dataclass(frozen=True)
class FeatureDoc(GeoJson):
    """Document whose root is a Feature."""

    value: Feature

    def to_object(self) -> GenericObject:
        return self.value.to_object()


@dataclass(frozen=True)
class FeatureCollectionDoc(GeoJson):
    """Document whose root is a FeatureCollection."""

    value: FeatureCollection

    def to_object(self) -> GenericObject:
        return self.value.to_object()


def wrap(value: Union[ShapeValue, GeoJson]) -> GeoJson:
    """
    Wrap a Geometry, Feature or FeatureCollection as a document.

    Args:
        value: Value to wrap (a document is returned as is)

    Returns:
        The matching GeoJson variant

    Raises:
        TypeError: If the value is not a GeoJSON object model
    """
    if isinstance(value, GeoJson):
        return value
    if isinstance(value, Geometry):
        return GeometryDoc(value)
    if isinstance(value, Feature):
        return FeatureDoc(value)
    if isinstance(value, FeatureCollection):
        return FeatureCollectionDoc(value)
    raise TypeError(f"Cannot wrap {type(value).__name__} as a GeoJSON document")


def to_object(document: GeoJson) -> GenericObject:
    """Convert a document to a generic object."""
    return document.to_object()


def _parse_geometry(obj: Mapping) -> GeoJson:
    return GeometryDoc(Geometry.from_object(obj))


def _parse_feature(obj: Mapping) -> GeoJson:
    return FeatureDoc(Feature.from_object(obj))


def _parse_feature_collection(obj: Mapping) -> GeoJson:
    return FeatureCollectionDoc(FeatureCollection.from_object(obj))


_PARSERS: Dict[Tag, Callable[[Mapping], GeoJson]] = {
    tag: _parse_geometry for tag in GEOMETRY_TAGS
}
_PARSERS[Tag.FEATURE] = _parse_feature
_PARSERS[Tag.FEATURE_COLLECTION] = _parse_feature_collection

# Adding a Tag without a document variant must fail at import, not at parse time
_unhandled = sorted(tag.value for tag in Tag if tag not in _PARSERS)
if _unhandled:
    raise ConfigurationError(
        f"No document parser for GeoJSON types: {', '.join(_unhandled)}",
        config_key="_PARSERS",
    )


def _expect_object(value: Any) -> Mapping:
    if not isinstance(value, Mapping):
        raise MalformedJsonError(
            f"Expected a JSON object, found {json_kind(value)}",
            details={"actual": json_kind(value)},
        )
    return value


def from_object(obj: Mapping) -> GeoJson:
    """
    Build a document from a generic object.

    The ``"type"`` member is resolved before any model parser runs, so an
    unrecognized type never reaches one.

    Args:
        obj: Generic object, typically decoded from JSON text

    Returns:
        GeometryDoc, FeatureDoc or FeatureCollectionDoc

    Raises:
        MalformedJsonError: If obj is not a mapping
        ExpectedPropertyError: If ``"type"`` is missing
        ExpectedValueError: If ``"type"`` is not a string
        UnknownTypeError: If ``"type"`` names no GeoJSON object type
        GeoDocException: Any error raised by the selected model, unchanged
    """
    obj = _expect_object(obj)
    type_name = get_type_member(obj)

    tag = Tag.from_str(type_name)
    if tag is None:
        raise UnknownTypeError(type_name)

    logger.debug(
        f"Parsing GeoJSON {tag.value} document", extra={"document_type": tag.value}
    )
    return _PARSERS[tag](obj)


def parse_text(text: Union[str, bytes, bytearray]) -> GeoJson:
    """
    Parse a document from JSON text.

    Args:
        text: JSON text

    Returns:
        Parsed document

    Raises:
        MalformedJsonError: If the text is not JSON or its top-level value
            is not an object
        GeoDocException: Any error raised by ``from_object``
    """
    try:
        decoded = codec.decode(text)
    except CodecError as e:
        raise MalformedJsonError(e.message, details=e.details) from e

    return from_object(_expect_object(decoded))


def to_text(
    document: GeoJson,
    indent: Optional[int] = None,
    sort_keys: Optional[bool] = None,
) -> str:
    """
    Write a document as JSON text.

    Args:
        document: Document to write
        indent: Indentation, defaults to ``settings.json_indent``
        sort_keys: Whether to sort keys, defaults to ``settings.json_sort_keys``

    Returns:
        JSON text

    Raises:
        SerializationError: If the document holds values JSON cannot encode,
            such as NaN or non-JSON objects in properties
    """
    if indent is None:
        indent = settings.json_indent
    if sort_keys is None:
        sort_keys = settings.json_sort_keys

    try:
        return codec.encode(
            document.to_object(),
            indent=indent,
            sort_keys=sort_keys,
            ensure_ascii=settings.json_ensure_ascii,
        )
    except CodecError as e:
        raise SerializationError(
            f"Cannot write {type(document).__name__} as JSON text: {e.message}",
            details=e.details,
        ) from e
