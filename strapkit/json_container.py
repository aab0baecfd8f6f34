"""A mutable JSON document addressed by key paths and array indexes."""

from __future__ import annotations

import copy
import math
from collections.abc import Iterable, Mapping
from typing import Any, get_args, get_origin

from . import locale
from .json_value import (
    DataIndexError,
    DataKeyError,
    DataType,
    DataTypeError,
    parse_json,
    value_to_string,
    value_type,
)

DEFAULT_LEFT_PADDING = 4
"""Indentation used by the pretty printers when none is given."""

LEFT_PADDING_INCREMENT = 2
"""Extra indentation for each nested object in :meth:`JsonContainer.to_pretty_string`."""

_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1

Keys = "str | Iterable[str] | None"


def _normalize_keys(keys: Any) -> list[str]:
    if keys is None:
        return []
    if isinstance(keys, str):
        return [keys]
    path = list(keys)
    for key in path:
        if not isinstance(key, str):
            raise TypeError(f"JSON keys must be strings, not {type(key).__name__}")
    return path


def _child(value: Any, key: str) -> Any:
    if not isinstance(value, dict):
        raise DataTypeError(locale.format("not an object"))
    if key not in value:
        raise DataKeyError(locale.format("unknown object entry with key: {1}", key))
    return value[key]


def _element(value: Any, index: int) -> Any:
    if not isinstance(value, list):
        raise DataTypeError(locale.format("not an array"))
    if index < 0 or index >= len(value):
        raise DataIndexError(locale.format("array index out of bounds"))
    return value[index]


def _to_json(value: Any) -> Any:
    """Return a fresh copy of ``value`` as plain JSON data."""
    if isinstance(value, JsonContainer):
        return copy.deepcopy(value._root)
    if value is None or isinstance(value, (bool, int, str)):
        return value
    if isinstance(value, float):
        if not math.isfinite(value):
            raise DataTypeError(locale.format("not a finite number"))
        return value
    if isinstance(value, Mapping):
        result = {}
        for key, item in value.items():
            if not isinstance(key, str):
                raise DataTypeError(locale.format("object keys must be strings"))
            result[key] = _to_json(item)
        return result
    if isinstance(value, (list, tuple)):
        return [_to_json(item) for item in value]
    raise DataTypeError(locale.format("not a JSON value"))


def _strict_equal(left: Any, right: Any) -> bool:
    if value_type(left) is not value_type(right):
        return False
    if isinstance(left, dict):
        return left.keys() == right.keys() and all(
            _strict_equal(item, right[key]) for key, item in left.items()
        )
    if isinstance(left, list):
        return len(left) == len(right) and all(
            _strict_equal(a, b) for a, b in zip(left, right)
        )
    return left == right


def _check_item(item: Any, kind: Any) -> Any:
    """Check a non-null value against a scalar ``kind`` and return it converted."""
    if kind is bool:
        if not isinstance(item, bool):
            raise DataTypeError(locale.format("not a boolean"))
        return item
    if kind is int:
        if (
            isinstance(item, bool)
            or not isinstance(item, int)
            or not _INT64_MIN <= item <= _INT64_MAX
        ):
            raise DataTypeError(locale.format("not an integer"))
        return item
    if kind is float:
        if not isinstance(item, float):
            raise DataTypeError(locale.format("not a double"))
        return item
    if kind is str:
        if not isinstance(item, str):
            raise DataTypeError(locale.format("not a string"))
        return item
    if kind is JsonContainer:
        return JsonContainer._wrap(item)
    raise TypeError(f"unsupported kind: {kind!r}")


_NULL_DEFAULTS = {bool: False, int: 0, float: 0.0, str: ""}


def _convert(value: Any, kind: Any) -> Any:
    if kind is None:
        return copy.deepcopy(value)
    if get_origin(kind) is list:
        (element_kind,) = get_args(kind) or (None,)
        if value is None:
            return []
        if not isinstance(value, list):
            raise DataTypeError(locale.format("not an array"))
        if element_kind is None:
            return copy.deepcopy(value)
        if element_kind is JsonContainer:
            for item in value:
                if not isinstance(item, dict):
                    raise DataTypeError(locale.format("not an object"))
        return [_check_item(item, element_kind) for item in value]
    if value is None:
        if kind is JsonContainer:
            return JsonContainer()
        if kind in _NULL_DEFAULTS:
            return _NULL_DEFAULTS[kind]
        raise TypeError(f"unsupported kind: {kind!r}")
    return _check_item(value, kind)


class JsonContainer:
    """A JSON document whose entries are reached by key paths.

    ``source`` may be ``None`` (an empty object), a JSON text, another
    container (copied) or plain JSON data (copied).
    """

    __hash__ = None  # type: ignore[assignment]

    def __init__(self, source: Any = None) -> None:
        if source is None:
            self._root: Any = {}
        elif isinstance(source, str):
            self._root = parse_json(source)
        else:
            self._root = _to_json(source)

    @classmethod
    def _wrap(cls, value: Any) -> JsonContainer:
        container = cls()
        container._root = copy.deepcopy(value)
        return container

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, JsonContainer):
            return NotImplemented
        return _strict_equal(self._root, other._root)

    def __repr__(self) -> str:
        return f"JsonContainer({self.to_string()!r})"

    def __str__(self) -> str:
        return self.to_string()

    def _lookup(self, keys: Any = None, index: int | None = None) -> Any:
        value = self._root
        for key in _normalize_keys(keys):
            value = _child(value, key)
        if index is not None:
            value = _element(value, index)
        return value

    def raw(self) -> Any:
        """Return a copy of the whole document as plain JSON data."""
        return copy.deepcopy(self._root)

    def to_string(self, keys: Any = None) -> str:
        """Serialise the root, or the entry at ``keys``, compactly."""
        return value_to_string(self._lookup(keys))

    def to_pretty_string(self, left_padding: int = DEFAULT_LEFT_PADDING) -> str:
        """Render an object as indented ``key : value`` lines."""
        if self.empty():
            return {DataType.Object: "{}", DataType.Array: "[]"}.get(self.type(), '""')
        if not isinstance(self._root, dict):
            return self.to_string()

        pad = " " * left_padding
        lines = []
        for key, value in self._root.items():
            kind = value_type(value)
            if kind is DataType.Object:
                rendered = "\n" + JsonContainer._wrap(value).to_pretty_string(
                    left_padding + LEFT_PADDING_INCREMENT
                )
            elif kind is DataType.Array:
                rendered = value_to_string(value)
            elif kind is DataType.String:
                rendered = value
            elif kind is DataType.Int:
                rendered = str(value)
            elif kind is DataType.Bool:
                rendered = "true" if value else "false"
            elif kind is DataType.Double:
                rendered = "%f" % value
            else:
                rendered = "NULL"
            lines.append(f"{pad}{key} : {rendered}\n")
        return "".join(lines)

    def to_pretty_json(self, left_padding: int = DEFAULT_LEFT_PADDING) -> str:
        """Serialise the document as indented JSON."""
        return _pretty_json(self._root, left_padding)

    def empty(self) -> bool:
        """Whether the root is an empty object or an empty array."""
        if isinstance(self._root, (dict, list)):
            return not self._root
        return False

    def size(self, keys: Any = None) -> int:
        """Number of entries of the root or of the entry at ``keys``; 0 for scalars."""
        value = self._lookup(keys)
        if isinstance(value, (dict, list)):
            return len(value)
        return 0

    def keys(self) -> list[str]:
        """Keys of the root object, or an empty list if the root is not an object."""
        if isinstance(self._root, dict):
            return list(self._root)
        return []

    def includes(self, keys: Any) -> bool:
        """Whether the entry at the key path exists."""
        value = self._root
        for key in _normalize_keys(keys):
            if not isinstance(value, dict) or key not in value:
                return False
            value = value[key]
        return True

    def type(self, keys: Any = None, index: int | None = None) -> DataType:
        """Type of the root, of the entry at ``keys``, or of an array element."""
        return value_type(self._lookup(keys, index))

    def get(self, keys: Any = None, index: int | None = None, kind: Any = None) -> Any:
        """Return the entry at ``keys`` (and ``index``) converted to ``kind``.

        ``kind`` is one of ``bool``, ``int``, ``float``, ``str``,
        :class:`JsonContainer` or ``list[...]`` of these; ``None`` returns a
        copy of the plain value. A null entry gives the kind's empty value.
        """
        return _convert(self._lookup(keys, index), kind)

    def get_with_default(self, keys: Any, default: Any, kind: Any = None) -> Any:
        """Like :meth:`get`, returning ``default`` if the last key is missing.

        The parent of the entry must exist and be an object. If ``kind`` is
        not given it is taken from the type of a scalar ``default``.
        """
        path = _normalize_keys(keys)
        if not path:
            raise ValueError("no key given")
        parent = self._lookup(path[:-1])
        if not isinstance(parent, dict):
            raise DataTypeError(locale.format("not an object"))
        if path[-1] not in parent:
            return default
        if kind is None and isinstance(default, (bool, int, float, str, JsonContainer)):
            kind = type(default)
        return _convert(parent[path[-1]], kind)

    def set(self, keys: Any, value: Any) -> None:
        """Set the entry at ``keys``, creating missing intermediate objects."""
        path = _normalize_keys(keys)
        new_value = _to_json(value)
        if not path:
            self._root = new_value
            return
        if not isinstance(self._root, dict):
            raise DataKeyError(locale.format("root is not a valid JSON object"))
        target = self._root
        for key in path[:-1]:
            if not isinstance(target, dict):
                raise DataKeyError(
                    locale.format("invalid key supplied; cannot navigate the provided path")
                )
            target = target.setdefault(key, {})
        if not isinstance(target, dict):
            raise DataKeyError(
                locale.format("invalid key supplied; cannot navigate the provided path")
            )
        target[path[-1]] = new_value


def _pretty_json(value: Any, indent: int, depth: int = 0) -> str:
    if isinstance(value, dict) and value:
        inner = " " * (indent * (depth + 1))
        items = ",\n".join(
            f"{inner}{value_to_string(key)}: {_pretty_json(item, indent, depth + 1)}"
            for key, item in value.items()
        )
        return "{\n" + items + "\n" + " " * (indent * depth) + "}"
    if isinstance(value, list) and value:
        inner = " " * (indent * (depth + 1))
        items = ",\n".join(
            f"{inner}{_pretty_json(item, indent, depth + 1)}" for item in value
        )
        return "[\n" + items + "\n" + " " * (indent * depth) + "]"
    return value_to_string(value)