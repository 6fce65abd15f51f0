"""
Custom exception hierarchy for geodoc.

Every failure raised while reading or writing a GeoJSON document is one of
these exceptions. None of them are retriable: they describe malformed input,
never a transient condition.
"""

from typing import Any, Dict, List, Optional


class GeoDocException(Exception):
    """
    Base exception for all geodoc errors.

    Attributes:
        error_code: String identifier for the error type
        message: User-friendly error message
        details: Technical details for logging/debugging
        suggestions: Optional list of resolution suggestions
    """

    def __init__(
        self,
        message: str,
        error_code: str,
        details: Optional[Dict[str, Any]] = None,
        suggestions: Optional[List[str]] = None,
    ):
        """
        Initialize GeoDocException.

        Args:
            message: User-friendly error message
            error_code: String identifier for the error type
            details: Technical details for logging
            suggestions: List of suggestions for resolution
        """
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.details = details or {}
        self.suggestions = suggestions or []

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert exception to dictionary.

        Returns:
            Dictionary representation of the error
        """
        return {
            "error_code": self.error_code,
            "message": self.message,
            "details": self.details,
            "suggestions": self.suggestions,
        }

    def __str__(self) -> str:
        """String representation of the exception."""
        return f"{self.error_code}: {self.message}"

    def __repr__(self) -> str:
        """Detailed string representation for debugging."""
        return (
            f"{self.__class__.__name__}("
            f"error_code='{self.error_code}', "
            f"message='{self.message}')"
        )


def json_kind(value: Any) -> str:
    """Name the JSON kind of a decoded value, for error details."""
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, (list, tuple)):
        return "array"
    if isinstance(value, dict):
        return "object"
    return type(value).__name__


class MalformedJsonError(GeoDocException):
    """
    Raised when input text is not valid JSON, or when the decoded
    top-level value is not a JSON object.
    """

    def __init__(
        self,
        message: str = "Input is not a JSON object",
        details: Optional[Dict[str, Any]] = None,
        suggestions: Optional[List[str]] = None,
    ):
        default_suggestions = [
            "Verify the document is valid JSON",
            "A GeoJSON document must be a single JSON object",
        ]

        super().__init__(
            message=message,
            error_code="MALFORMED_JSON",
            details=details,
            suggestions=suggestions or default_suggestions,
        )


class ExpectedPropertyError(GeoDocException):
    """
    Raised when a required member is missing from a GeoJSON object.
    """

    def __init__(
        self,
        property_name: str,
        message: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        """
        Initialize ExpectedPropertyError.

        Args:
            property_name: Name of the missing member
            message: Optional override for the default message
            details: Technical details about the failure
        """
        error_details = dict(details or {})
        error_details["property"] = property_name

        super().__init__(
            message=message or f"Expected property '{property_name}' is missing",
            error_code="EXPECTED_PROPERTY",
            details=error_details,
            suggestions=[f"Add a '{property_name}' member to the object"],
        )
        self.property_name = property_name


class ExpectedValueError(GeoDocException):
    """
    Raised when a member holds the wrong kind of JSON value.

    For example a ``"type"`` that is a number instead of a string, or
    ``"coordinates"`` that is an object instead of an array.
    """

    def __init__(
        self,
        property_name: str,
        expected: str,
        actual: Any,
        error_code: str = "EXPECTED_VALUE",
        message: Optional[str] = None,
    ):
        """
        Initialize ExpectedValueError.

        Args:
            property_name: Name of the offending member
            expected: JSON kind that was expected (e.g. 'string', 'array')
            actual: The value actually found
            error_code: Specific error code
            message: Optional override for the default message
        """
        actual_kind = json_kind(actual)
        super().__init__(
            message=message
            or f"Expected {expected} value for '{property_name}', found {actual_kind}",
            error_code=error_code,
            details={
                "property": property_name,
                "expected": expected,
                "actual": actual_kind,
            },
        )
        self.property_name = property_name
        self.expected = expected
        self.actual = actual_kind


class ExpectedTypeError(GeoDocException):
    """
    Raised when an object's ``"type"`` does not match the shape asked
    to parse it.
    """

    def __init__(self, expected: str, actual: str):
        super().__init__(
            message=f"Expected GeoJSON type '{expected}', found '{actual}'",
            error_code="EXPECTED_TYPE",
            details={"expected": expected, "actual": actual},
        )
        self.expected = expected
        self.actual = actual


class UnknownTypeError(GeoDocException):
    """
    Raised when ``"type"`` is a string that names none of the GeoJSON
    object types.
    """

    def __init__(self, type_name: Any):
        super().__init__(
            message=f"Unknown GeoJSON type: {type_name!r}",
            error_code="GEOJSON_UNKNOWN_TYPE",
            details={"type": type_name},
            suggestions=[
                "Use one of Point, MultiPoint, LineString, MultiLineString, "
                "Polygon, MultiPolygon, GeometryCollection, Feature, "
                "FeatureCollection",
                "Type names are case-sensitive",
            ],
        )
        self.type_name = type_name


class GeometryError(GeoDocException):
    """
    Raised when a geometry object's body is malformed.
    """

    def __init__(
        self,
        message: str,
        geometry_type: Optional[str] = None,
        error_code: str = "GEOMETRY_ERROR",
        details: Optional[Dict[str, Any]] = None,
    ):
        error_details = dict(details or {})
        if geometry_type:
            error_details["geometry_type"] = geometry_type

        super().__init__(
            message=message,
            error_code=error_code,
            details=error_details,
            suggestions=["Check the nesting depth of the 'coordinates' member"],
        )


class FeatureError(GeoDocException):
    """
    Raised when a feature object holds an invalid member.
    """

    def __init__(
        self,
        message: str,
        error_code: str = "FEATURE_ERROR",
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(
            message=message,
            error_code=error_code,
            details=details,
        )


class SerializationError(GeoDocException):
    """
    Raised when a document cannot be encoded to JSON text.
    """

    def __init__(
        self,
        message: str,
        details: Optional[Dict[str, Any]] = None,
    ):
        default_suggestions = [
            "GeoJSON numbers must be finite",
            "Properties may only hold JSON-compatible values",
        ]

        super().__init__(
            message=message,
            error_code="SERIALIZATION_ERROR",
            details=details,
            suggestions=default_suggestions,
        )


class CodecError(GeoDocException):
    """
    Raised by the JSON codec when text cannot be decoded or a value
    cannot be encoded.
    """

    def __init__(
        self,
        message: str,
        operation: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        error_details = dict(details or {})
        if operation:
            error_details["operation"] = operation

        super().__init__(
            message=message,
            error_code="CODEC_ERROR",
            details=error_details,
        )


class ConfigurationError(GeoDocException):
    """
    Raised when library configuration is invalid.
    """

    def __init__(
        self,
        message: str,
        config_key: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
        suggestions: Optional[List[str]] = None,
    ):
        error_details = dict(details or {})
        if config_key:
            error_details["config_key"] = config_key

        default_suggestions = [
            "Check GEODOC_* environment variables are set correctly",
            "Verify .env file syntax",
        ]

        super().__init__(
            message=message,
            error_code="CONFIGURATION_ERROR",
            details=error_details,
            suggestions=suggestions or default_suggestions,
        )
