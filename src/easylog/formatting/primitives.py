"""
Literal text for scalar values.
"""

from __future__ import annotations

from enum import Enum
from typing import Any

NULL_TEXT = "null"


def type_name(value: Any) -> str:
    """Short class name of ``value``."""
    try:
        return type(value).__name__
    except Exception:
        return "object"


def safe_str(value: Any) -> str:
    """``str(value)``, or a description of the failure when conversion raises."""
    try:
        return str(value)
    except Exception as exc:
        return f"<error converting {type_name(value)} to string: {exc}>"


def render_char(value: Any) -> str:
    return f"'{safe_str(value)}'"


def render_primitive(value: Any) -> str:
    """Render a scalar: quoted strings, enum names, canonical text otherwise.

    Primitives are never truncated.
    """
    if value is None:
        return NULL_TEXT
    if isinstance(value, Enum):
        name = value.name
        return name if name is not None else safe_str(value)
    if isinstance(value, str):
        return f'"{value}"'
    return safe_str(value)
