"""Tagged JSON value model and strict document parsing.

Rules classify parsed values through ``JsonKind`` instead of ad-hoc
``isinstance`` checks, so "is it an object" is a structural match and
``bool`` is never mistaken for a number.
"""

import json
from decimal import Decimal
from enum import Enum
from typing import Any


class DocumentParseError(ValueError):
    """Raised when raw bytes are not a valid JSON document."""


class JsonKind(str, Enum):
    """The six shapes a parsed JSON value can take."""
    NULL = "null"
    BOOL = "bool"
    NUMBER = "number"
    STRING = "string"
    ARRAY = "array"
    OBJECT = "object"


def kind_of(value: Any) -> JsonKind:
    """Classify a value produced by ``parse_document``.

    Raises:
        TypeError: If the value cannot come out of the JSON parser
    """
    if value is None:
        return JsonKind.NULL
    # bool subclasses int, check it first
    if isinstance(value, bool):
        return JsonKind.BOOL
    if isinstance(value, (int, float, Decimal)):
        return JsonKind.NUMBER
    if isinstance(value, str):
        return JsonKind.STRING
    if isinstance(value, list):
        return JsonKind.ARRAY
    if isinstance(value, dict):
        return JsonKind.OBJECT
    raise TypeError(f"Not a JSON value: {type(value).__name__}")


def is_composite(value: Any) -> bool:
    """Return True only for JSON objects (keyed mappings)."""
    return kind_of(value) is JsonKind.OBJECT


def _reject_constant(name: str) -> Any:
    raise ValueError(f"Unexpected token {name}")


def _parse_int(literal: str) -> int | Decimal:
    try:
        return int(literal)
    except ValueError:
        # Past the interpreter's int digit limit
        return Decimal(literal)


def parse_document(raw: bytes) -> Any:
    """Decode and parse raw file bytes as strict JSON.

    The bytes must be UTF-8 without a byte order mark. ``NaN``, ``Infinity``
    and ``-Infinity`` are rejected since they are not JSON. Integer literals too
    long for ``int`` are kept as ``Decimal``. Nesting deeper than the
    interpreter's recursion limit is reported as a parse error.

    Args:
        raw: File content as read from disk

    Returns:
        The parsed value (dict, list, str, int, float, Decimal, bool or None)

    Raises:
        DocumentParseError: With the decoder or parser message
    """
    try:
        text = raw.decode("utf-8")
    except UnicodeDecodeError as e:
        raise DocumentParseError(f"Invalid UTF-8 content: {e}") from e

    try:
        return json.loads(text, parse_constant=_reject_constant, parse_int=_parse_int)
    except RecursionError as e:
        raise DocumentParseError(f"Document nesting is too deep: {e}") from e
    except ValueError as e:
        # JSONDecodeError is a ValueError subclass
        raise DocumentParseError(str(e)) from e
