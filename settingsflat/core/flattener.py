"""Flatten a JSON document into colon-delimited setting keys.

``{"Logging": {"Level": "Debug"}, "Hosts": ["a", "b"]}`` becomes::

    Logging:Level = Debug
    Hosts:0       = a
    Hosts:1       = b

Keys are property names and zero-based array indices joined with ``:``,
which is how .NET configuration providers address nested settings.
Only leaves are emitted; empty objects and arrays produce nothing.
"""
from __future__ import annotations
from typing import Any, Iterable, Iterator, Tuple

from .models import FlatMapping, FlattenError, JsonNumber, JsonObject

SEPARATOR = ":"


def stringify(value: Any) -> str:
    if value is None:
        return "null"
    # bool before int: True is an int in Python
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float, str)):
        return str(value)
    raise FlattenError(f"Unsupported JSON value type: {type(value)!r}")


def _members(value: Any) -> Iterable[Tuple[Any, Any]]:
    if isinstance(value, JsonObject):
        return value
    return value.items()


def _is_object(value: Any) -> bool:
    return isinstance(value, (dict, JsonObject))


def _join(prefix: str, name: Any) -> str:
    return f"{prefix}{SEPARATOR}{name}" if prefix else str(name)


def iter_leaves(value: Any, prefix: str = "") -> Iterator[Tuple[str, str]]:
    """Yield ``(key, text)`` for every scalar under ``value``, depth first."""
    if _is_object(value):
        for name, child in _members(value):
            yield from iter_leaves(child, _join(prefix, name))
    elif isinstance(value, list):
        for idx, item in enumerate(value):
            # indices always get the separator, even under a property named ""
            yield from iter_leaves(item, f"{prefix}{SEPARATOR}{idx}")
    else:
        yield prefix, stringify(value)


def flatten(document: Any) -> FlatMapping:
    """Flatten a top-level JSON object.

    Raises FlattenError when the document is not an object and
    DuplicateKeyError when two leaves map to the same key, e.g.
    ``{"a:b": 1, "a": {"b": 2}}`` or a property name repeated in one object.
    """
    if not _is_object(document):
        raise FlattenError(f"The top-level JSON value must be an object, not {_kind(document)}")
    mapping = FlatMapping()
    for key, text in iter_leaves(document):
        mapping.add(key, text)
    return mapping


def _kind(value: Any) -> str:
    if isinstance(value, list):
        return "an array"
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "a boolean"
    if isinstance(value, (int, float, JsonNumber)):
        return "a number"
    return "a string"
