"""Plain JSON values: their types, compact serialisation and parsing.

A JSON value is held as ordinary Python data: ``dict`` for objects, ``list``
for arrays, ``str``, ``int``, ``float``, ``bool`` and ``None``.
"""

from __future__ import annotations

import enum
import json
import math
from collections.abc import Mapping
from typing import Any

from . import locale

_INT64_MIN = -(2**63)
_UINT64_MAX = 2**64 - 1


class DataError(Exception):
    """Base class of every error raised while handling JSON data."""


class DataParseError(DataError, ValueError):
    """Raised when a text is not valid JSON."""


class DataKeyError(DataError, LookupError):
    """Raised by an operation involving an unknown or unusable key."""


class DataIndexError(DataError, IndexError):
    """Raised by an operation involving an array index out of bounds."""


class DataTypeError(DataError, TypeError):
    """Raised when a value does not have the expected type."""


class DataType(enum.Enum):
    """The kinds of JSON value."""

    Object = 0
    Array = 1
    String = 2
    Int = 3
    Bool = 4
    Double = 5
    Null = 6


def value_type(value: Any) -> DataType:
    """Return the :class:`DataType` of a JSON value."""
    if value is None:
        return DataType.Null
    if isinstance(value, bool):
        return DataType.Bool
    if isinstance(value, int):
        return DataType.Int
    if isinstance(value, float):
        return DataType.Double
    if isinstance(value, str):
        return DataType.String
    if isinstance(value, Mapping):
        return DataType.Object
    if isinstance(value, (list, tuple)):
        return DataType.Array
    raise DataTypeError(locale.format("not a JSON value"))


def value_to_string(value: Any) -> str:
    """Serialise a JSON value compactly, without any whitespace."""
    try:
        return json.dumps(
            value, ensure_ascii=False, separators=(",", ":"), allow_nan=False
        )
    except TypeError as exc:
        raise DataTypeError(locale.format("not a JSON value")) from exc
    except ValueError as exc:
        raise DataError(locale.format("cannot serialise a non-finite number")) from exc


def _reject_constant(name: str) -> Any:
    raise ValueError(f"unsupported constant {name}")


def _parse_int(text: str) -> int | float:
    number = int(text)
    if _INT64_MIN <= number <= _UINT64_MAX:
        return number
    # Integers beyond 64 bits are kept as doubles.
    return float(number)


def _parse_float(text: str) -> float:
    number = float(text)
    if math.isinf(number):
        raise ValueError("number too big")
    return number


def parse_json(text: str) -> Any:
    """Parse a JSON text into Python data.

    Raises :class:`DataParseError` if the text is not a single valid JSON value.
    """
    try:
        return json.loads(
            text,
            parse_constant=_reject_constant,
            parse_int=_parse_int,
            parse_float=_parse_float,
        )
    except (ValueError, TypeError, RecursionError) as exc:
        raise DataParseError(locale.format("invalid json")) from exc