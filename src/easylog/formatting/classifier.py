"""
Value classification.

Every value falls into exactly one :class:`ValueKind`; unknown types never raise,
they fall through to ``OPAQUE`` and render as their type name.
"""

from __future__ import annotations

import array
import datetime as dt
import numbers
import uuid
from collections import deque
from collections.abc import Sequence, Set, ValuesView
from enum import Enum
from pathlib import PurePath
from typing import Any

from .introspection import has_fields
from .primitives import type_name


class ValueKind(Enum):
    NULL = "null"
    PRIMITIVE = "primitive"
    SEQUENCE = "sequence"
    STRUCTURED = "structured"
    OPAQUE = "opaque"


_SCALAR_TYPES: list[type] = [
    str,
    bool,
    numbers.Number,
    Enum,
    dt.date,
    dt.time,
    dt.timedelta,
    uuid.UUID,
    PurePath,
]

_SEQUENCE_TYPES = (Sequence, Set, ValuesView, deque, array.array)

_KIND_NAMES = {
    list: "List",
    tuple: "Tuple",
    set: "Set",
    frozenset: "FrozenSet",
    deque: "Deque",
    range: "Range",
    bytes: "Bytes",
    bytearray: "ByteArray",
}

_ARRAY_KIND_NAMES = {
    "b": "ByteArray",
    "B": "ByteArray",
    "h": "ShortArray",
    "H": "ShortArray",
    "i": "IntArray",
    "I": "IntArray",
    "l": "LongArray",
    "L": "LongArray",
    "q": "LongArray",
    "Q": "LongArray",
    "f": "FloatArray",
    "d": "DoubleArray",
    "u": "CharArray",
    "w": "CharArray",
}


def register_scalar(cls: type) -> type:
    """Treat instances of ``cls`` as primitives rendered with ``str()``."""
    if cls not in _SCALAR_TYPES:
        _SCALAR_TYPES.append(cls)
    return cls


def is_primitive(value: Any) -> bool:
    return isinstance(value, tuple(_SCALAR_TYPES))


def _is_named_tuple(value: Any) -> bool:
    return isinstance(value, tuple) and hasattr(type(value), "_fields")


def is_sequence(value: Any) -> bool:
    if isinstance(value, str) or _is_named_tuple(value):
        return False
    return isinstance(value, _SEQUENCE_TYPES)


def is_char_sequence(value: Any) -> bool:
    return isinstance(value, array.array) and value.typecode in ("u", "w")


def classify(value: Any) -> ValueKind:
    try:
        if value is None:
            return ValueKind.NULL
        if is_primitive(value):
            return ValueKind.PRIMITIVE
        if is_sequence(value):
            return ValueKind.SEQUENCE
        if has_fields(value):
            return ValueKind.STRUCTURED
    except Exception:
        return ValueKind.OPAQUE
    return ValueKind.OPAQUE


def kind_name(value: Any) -> str:
    """Label for a sequence kind, e.g. ``List`` or ``IntArray``."""
    if isinstance(value, array.array):
        return _ARRAY_KIND_NAMES.get(value.typecode, "Array")
    name = _KIND_NAMES.get(type(value))
    if name is not None:
        return name
    return type_name(value)
