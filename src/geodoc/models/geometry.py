"""
GeoJSON geometry objects.

A ``Geometry`` wraps one of seven geometry values (RFC 7946 section 3.1).
Coordinates are checked for shape only: positions must be arrays of at least
two numbers nested to the depth the geometry type requires. Ring closure,
winding order and coordinate ranges are not checked.
"""

from collections.abc import Mapping
from typing import Annotated, Any, ClassVar, Dict, Literal, Tuple, Type, Union

from pydantic import BaseModel, ConfigDict, Field
from shapely.geometry import mapping, shape
from shapely.geometry.base import BaseGeometry

from geodoc.core.errors import (
    ExpectedTypeError,
    ExpectedValueError,
    GeometryError,
    UnknownTypeError,
)
from geodoc.core.logging_config import get_logger
from geodoc.core.tags import Tag

from .base import (
    ARRAY_TYPES,
    GenericObject,
    GeoJsonObject,
    expect_member,
    get_bbox,
    get_foreign_members,
    get_type_member,
    is_number,
)

logger = get_logger(__name__)

Position = Annotated[Tuple[float, ...], Field(min_length=2)]


class _CoordinateGeometry(BaseModel):
    """Geometry value carrying a ``coordinates`` member."""

    model_config = ConfigDict(frozen=True)

    # Array nesting between ``coordinates`` and a single position
    depth: ClassVar[int]


class Point(_CoordinateGeometry):
    type: Literal["Point"] = "Point"
    coordinates: Position

    depth: ClassVar[int] = 0


class MultiPoint(_CoordinateGeometry):
    type: Literal["MultiPoint"] = "MultiPoint"
    coordinates: Tuple[Position, ...]

    depth: ClassVar[int] = 1


class LineString(_CoordinateGeometry):
    type: Literal["LineString"] = "LineString"
    coordinates: Tuple[Position, ...]

    depth: ClassVar[int] = 1


class MultiLineString(_CoordinateGeometry):
    type: Literal["MultiLineString"] = "MultiLineString"
    coordinates: Tuple[Tuple[Position, ...], ...]

    depth: ClassVar[int] = 2


class Polygon(_CoordinateGeometry):
    type: Literal["Polygon"] = "Polygon"
    # Linear rings; closure and winding are not enforced
    coordinates: Tuple[Tuple[Position, ...], ...]

    depth: ClassVar[int] = 2


class MultiPolygon(_CoordinateGeometry):
    type: Literal["MultiPolygon"] = "MultiPolygon"
    coordinates: Tuple[Tuple[Tuple[Position, ...], ...], ...]

    depth: ClassVar[int] = 3


class GeometryCollection(BaseModel):
    model_config = ConfigDict(frozen=True)

    type: Literal["GeometryCollection"] = "GeometryCollection"
    geometries: Tuple["Geometry", ...] = ()


GeometryValue = Annotated[
    Union[
        Point,
        MultiPoint,
        LineString,
        MultiLineString,
        Polygon,
        MultiPolygon,
        GeometryCollection,
    ],
    Field(discriminator="type"),
]

_COORDINATE_GEOMETRIES: Dict[Tag, Type[_CoordinateGeometry]] = {
    Tag.POINT: Point,
    Tag.MULTI_POINT: MultiPoint,
    Tag.LINE_STRING: LineString,
    Tag.MULTI_LINE_STRING: MultiLineString,
    Tag.POLYGON: Polygon,
    Tag.MULTI_POLYGON: MultiPolygon,
}

_COORDINATE_MEMBERS = frozenset(["type", "bbox", "coordinates"])
_COLLECTION_MEMBERS = frozenset(["type", "bbox", "geometries"])


def parse_position(value: Any, geometry_type: str) -> Tuple[float, ...]:
    """
    Parse a single position.

    Args:
        value: Decoded JSON value expected to be an array of numbers
        geometry_type: Geometry type being parsed, for error details

    Returns:
        Position as a tuple of floats

    Raises:
        ExpectedValueError: If the value is not an array of numbers
        GeometryError: If the position has fewer than two elements
    """
    if not isinstance(value, ARRAY_TYPES):
        raise ExpectedValueError("coordinates", "array", value)
    if len(value) < 2:
        raise GeometryError(
            f"Position must have at least two elements, found {len(value)}",
            geometry_type=geometry_type,
            error_code="POSITION_TOO_SHORT",
            details={"length": len(value)},
        )

    position = []
    for item in value:
        if not is_number(item):
            raise ExpectedValueError(
                "coordinates", "number", item, error_code="EXPECTED_NUMBER_VALUE"
            )
        try:
            position.append(float(item))
        except OverflowError as e:
            raise ExpectedValueError(
                "coordinates",
                "number",
                item,
                error_code="EXPECTED_NUMBER_VALUE",
                message="Coordinate is too large for a float",
            ) from e
    return tuple(position)


def parse_coordinates(value: Any, depth: int, geometry_type: str) -> Any:
    """
    Parse a ``coordinates`` member nested ``depth`` arrays above its positions.
    """
    if depth == 0:
        return parse_position(value, geometry_type)
    if not isinstance(value, ARRAY_TYPES):
        raise ExpectedValueError("coordinates", "array", value)
    return tuple(parse_coordinates(item, depth - 1, geometry_type) for item in value)


def coordinates_to_lists(value: Any) -> Any:
    """Convert nested coordinate tuples to nested lists."""
    if isinstance(value, tuple):
        return [coordinates_to_lists(item) for item in value]
    return value


class Geometry(GeoJsonObject):
    """
    A GeoJSON geometry object.

    Attributes:
        value: The geometry value (Point, LineString, ..., GeometryCollection)
        bbox: Optional bounding box
        foreign_members: Members not defined for geometry objects

    Examples:
        >>> Geometry(value=Point(coordinates=(100.0, 0.0))).to_object()
        {'type': 'Point', 'coordinates': [100.0, 0.0]}
    """

    value: GeometryValue

    @property
    def geometry_type(self) -> Tag:
        """Tag naming the wrapped geometry value."""
        return Tag(self.value.type)

    @classmethod
    def from_object(cls, obj: Mapping) -> "Geometry":
        """
        Build a geometry from a generic object.

        Args:
            obj: Generic object whose ``"type"`` names a geometry type

        Returns:
            Parsed Geometry

        Raises:
            ExpectedPropertyError: If ``type`` or the body member is missing
            ExpectedValueError: If a member holds the wrong kind of value
            UnknownTypeError: If ``type`` names no GeoJSON type
            ExpectedTypeError: If ``type`` names Feature or FeatureCollection
            GeometryError: If a position is too short
        """
        type_name = get_type_member(obj)
        tag = Tag.from_str(type_name)
        if tag is None:
            raise UnknownTypeError(type_name)
        if not tag.is_geometry_type:
            raise ExpectedTypeError("Geometry", type_name)

        if tag is Tag.GEOMETRY_COLLECTION:
            raw_geometries = expect_member(obj, "geometries")
            if not isinstance(raw_geometries, ARRAY_TYPES):
                raise ExpectedValueError("geometries", "array", raw_geometries)
            geometries = []
            for item in raw_geometries:
                if not isinstance(item, Mapping):
                    raise ExpectedValueError("geometries", "object", item)
                geometries.append(cls.from_object(item))
            value: Any = GeometryCollection(geometries=tuple(geometries))
            known = _COLLECTION_MEMBERS
        else:
            value_class = _COORDINATE_GEOMETRIES[tag]
            coordinates = parse_coordinates(
                expect_member(obj, "coordinates"), value_class.depth, type_name
            )
            value = value_class(coordinates=coordinates)
            known = _COORDINATE_MEMBERS

        return cls(
            value=value,
            bbox=get_bbox(obj),
            foreign_members=get_foreign_members(obj, known),
        )

    def to_object(self) -> GenericObject:
        obj: GenericObject = {"type": self.value.type}
        if isinstance(self.value, GeometryCollection):
            obj["geometries"] = [geometry.to_object() for geometry in self.value.geometries]
        else:
            obj["coordinates"] = coordinates_to_lists(self.value.coordinates)
        return self._add_common_members(obj)

    def to_shapely(self) -> BaseGeometry:
        """
        Convert to a Shapely geometry.

        Foreign members and bbox are dropped. No validity repair is attempted.

        Returns:
            Shapely geometry object
        """
        return shape(self.to_object())

    @classmethod
    def from_shapely(cls, geometry: BaseGeometry) -> "Geometry":
        """
        Build a geometry from a Shapely geometry.

        Args:
            geometry: Shapely geometry (empty geometries are rejected)

        Returns:
            Geometry
        """
        logger.debug(f"Converting Shapely {geometry.geom_type} to GeoJSON geometry")
        return cls.from_object(mapping(geometry))


GeometryCollection.model_rebuild()
Geometry.model_rebuild()
