"""
JSON text codec.

Decodes text into generic JSON values and encodes generic values back to
text. Nothing here knows about GeoJSON.
"""

import json
import math
from typing import Any, NoReturn, Optional, Union

from geodoc.core.errors import CodecError


def _reject_constant(name: str) -> NoReturn:
    # json accepts NaN/Infinity by default; RFC 8259 does not
    raise ValueError(f"Non-standard JSON constant: {name}")


def _parse_finite_float(literal: str) -> float:
    value = float(literal)
    if math.isinf(value):
        raise ValueError(f"Number out of range: {literal}")
    return value


def decode(text: Union[str, bytes, bytearray]) -> Any:
    """
    Decode JSON text into a generic value.

    Args:
        text: JSON text, as str or UTF-8/16/32 encoded bytes

    Returns:
        The decoded value (dict, list, str, int, float, bool or None)

    Raises:
        CodecError: If the text is not strict JSON
    """
    try:
        return json.loads(
            text, parse_constant=_reject_constant, parse_float=_parse_finite_float
        )
    except json.JSONDecodeError as e:
        raise CodecError(
            f"Invalid JSON at line {e.lineno} column {e.colno}: {e.msg}",
            operation="decode",
            details={"line": e.lineno, "column": e.colno, "position": e.pos},
        ) from e
    except (ValueError, RecursionError) as e:
        raise CodecError(f"Invalid JSON: {e}", operation="decode") from e


def encode(
    value: Any,
    indent: Optional[int] = None,
    sort_keys: bool = False,
    ensure_ascii: bool = False,
) -> str:
    """
    Encode a generic value as JSON text.

    Args:
        value: Value made of dicts, lists, tuples, strings, numbers, bools and None
        indent: Indentation level (None for compact output)
        sort_keys: Whether to sort object keys
        ensure_ascii: Whether to escape non-ASCII characters

    Returns:
        JSON text

    Raises:
        CodecError: If the value holds non-finite floats or non-JSON objects
    """
    separators = (",", ":") if indent is None else (",", ": ")
    try:
        return json.dumps(
            value,
            indent=indent,
            sort_keys=sort_keys,
            ensure_ascii=ensure_ascii,
            allow_nan=False,
            separators=separators,
        )
    except (TypeError, ValueError, RecursionError) as e:
        raise CodecError(f"Cannot encode value as JSON: {e}", operation="encode") from e
