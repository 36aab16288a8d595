"""
Structured values: the generic tree every provider emits.

A structured value is one of None, bool, int, float, str, a list of
structured values, or a dict mapping str to structured values. Arbitrary
Python objects are converted into this shape by `serialize()`, which uses
pydantic's serializer so that models, dataclasses, enums, datetimes, paths,
tuples and sets are all supported.
"""

from __future__ import annotations

import typing as _typing

import pydantic_core as _pydantic_core

import strata.constants as _constants
import strata.errors as errors

if _typing.TYPE_CHECKING:
    Value: _typing.TypeAlias = (
        None | bool | int | float | str | list["Value"] | dict[str, "Value"]
    )
else:
    # Runtime-safe fallback (mypy uses TYPE_CHECKING branch)
    Value: _typing.TypeAlias = _typing.Any

Dict: _typing.TypeAlias = dict[str, "Value"]
"""An ordered, string-keyed mapping of structured values."""


def serialize(obj: _typing.Any) -> Value:
    """
    Serialize an arbitrary object into a structured value.

    The object itself is never modified; the result is a freshly allocated
    tree on every call.

    Args:
        obj: Any value pydantic knows how to serialize.

    Returns:
        The structured value tree.

    Raises:
        SerializationError: If the object (or anything inside it) cannot be
            serialized. The underlying exception is chained.
    """
    try:
        return _pydantic_core.to_jsonable_python(obj)
    except (_pydantic_core.PydanticSerializationError, TypeError, ValueError) as e:
        raise errors.SerializationError(e) from e


def kind_of(value: Value) -> str:
    """
    Name the kind of a structured value, for diagnostics.

    Returns:
        One of "null", "bool", "integer", "float", "string", "array", "map".
    """
    # bool before int: bool is an int subclass
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "bool"
    if isinstance(value, int):
        return "integer"
    if isinstance(value, float):
        return "float"
    if isinstance(value, str):
        return "string"
    if isinstance(value, list):
        return "array"
    if isinstance(value, dict):
        return _constants.EXPECTED_MAP
    return type(value).__name__


def as_dict(value: Value) -> Dict | None:
    """Return `value` if it is dictionary-shaped, otherwise None."""
    return value if isinstance(value, dict) else None


def split_path(path: str, delimiter: str = _constants.KEY_DELIMITER) -> list[str]:
    """
    Split a key path into its non-empty segments.

    Empty segments (from leading, trailing or doubled delimiters) are
    dropped, so "a..b" yields ["a", "b"] and "" yields [].
    """
    return [segment for segment in path.split(delimiter) if segment]


def find(data: Dict, path: str) -> Value | None:
    """
    Look up a dotted key path in a dictionary.

    Example:
        >>> find({"a": {"b": 42}}, "a.b")
        42

    Args:
        data: The dictionary to search.
        path: Dotted key path; empty segments are ignored.

    Returns:
        The value at `path`, or None if any segment is missing or an
        intermediate value is not a dictionary. An empty path returns
        `data` itself.
    """
    current: Value = data
    for segment in split_path(path):
        if not isinstance(current, dict) or segment not in current:
            return None
        current = current[segment]
    return current
