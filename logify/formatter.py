"""formatter.py - Value rendering and structural type descriptions.

Every value that passes through an inspection wrapper is first classified into
one of three closed kinds, and each kind has exactly one rendering rule:

    SCALAR     None, booleans, numbers, bytes, callables -> ``str(value)``
    STRING     ``str``                                   -> ``"value"``
    COMPOSITE  everything else                           -> pretty-printed repr

Type descriptions follow the same split. Scalars and strings get a flat tag
(``number``, ``string``, ...); composites are described recursively, e.g.
``{ a: number, b: string }`` for ``{"a": 1, "b": "x"}``.
"""

import dataclasses
import numbers
from collections.abc import Mapping, Set
from enum import Enum
from typing import Any, List, Optional

from rich.pretty import pretty_repr

DEFAULT_MAX_DEPTH = 8


class ValueKind(Enum):
    SCALAR = "scalar"
    STRING = "string"
    COMPOSITE = "composite"


def classify(value: Any) -> ValueKind:
    """Return the ValueKind that decides how ``value`` is rendered and described."""
    if isinstance(value, str):
        return ValueKind.STRING
    if value is None or isinstance(value, (bool, numbers.Number, bytes, bytearray)):
        return ValueKind.SCALAR
    if callable(value) and not isinstance(value, type):
        return ValueKind.SCALAR
    return ValueKind.COMPOSITE


def primitive_tag(value: Any) -> str:
    """One-word type tag, the shallow description used by non-detailed wrappers."""
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, numbers.Number):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, (bytes, bytearray)):
        return "bytes"
    if callable(value) and not isinstance(value, type):
        return "function"
    return "object"


def render(value: Any) -> str:
    """Human-readable rendering of ``value`` according to its ValueKind."""
    kind = classify(value)
    if kind is ValueKind.COMPOSITE:
        return pretty_repr(value)
    if kind is ValueKind.STRING:
        return f'"{value}"'
    return str(value)


def describe_type(value: Any, max_depth: int = DEFAULT_MAX_DEPTH) -> str:
    """Structural type description of ``value``.

    Scalars and strings collapse to their primitive tag. Composites are walked
    recursively:

        >>> describe_type({"a": 1, "b": "x"})
        '{ a: number, b: string }'
        >>> describe_type([1, 2, "x"])
        '(number | string)[]'

    Self-referencing containers render the repeated node as ``[Circular]``;
    nesting deeper than ``max_depth`` collapses to ``object``.
    """
    return _describe(value, max_depth, set())


def _describe(value: Any, depth: int, seen: set) -> str:
    if classify(value) is not ValueKind.COMPOSITE:
        return primitive_tag(value)
    if id(value) in seen:
        return "[Circular]"
    if depth <= 0:
        return "object"

    seen.add(id(value))
    try:
        return _describe_composite(value, depth - 1, seen)
    finally:
        seen.discard(id(value))


def _describe_composite(value: Any, depth: int, seen: set) -> str:
    if isinstance(value, Mapping):
        return _describe_fields(((k, v) for k, v in value.items()), depth, seen)

    if isinstance(value, tuple) and not hasattr(value, "_fields"):
        return "[" + ", ".join(_describe(v, depth, seen) for v in value) + "]"

    if isinstance(value, (list, Set)):
        element = _union([_describe(v, depth, seen) for v in value])
        if isinstance(value, Set):
            return f"Set<{element}>"
        return f"{element}[]" if " | " not in element else f"({element})[]"

    name = type(value).__name__
    fields = _object_fields(value)
    if fields is None:
        return name
    return f"{name} " + _describe_fields(fields, depth, seen)


def _describe_fields(items, depth: int, seen: set) -> str:
    parts = [f"{key}: {_describe(v, depth, seen)}" for key, v in items]
    if not parts:
        return "{}"
    return "{ " + ", ".join(parts) + " }"


def _union(tags: List[str]) -> str:
    unique: List[str] = []
    for tag in tags:
        if tag not in unique:
            unique.append(tag)
    if not unique:
        return "unknown"
    return " | ".join(unique)


def _object_fields(value: Any) -> Optional[list]:
    # namedtuple
    if isinstance(value, tuple):
        return [(f, getattr(value, f)) for f in value._fields]
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return [(f.name, getattr(value, f.name)) for f in dataclasses.fields(value)]
    attrs = getattr(value, "__dict__", None)
    if isinstance(attrs, dict):
        return [(k, v) for k, v in attrs.items() if not k.startswith("_")]
    return None
