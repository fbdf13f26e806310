"""
Severity levels.

The ordering is fixed: VERBOSE < DEBUG < INFO < WARNING < ERROR < TERRIBLE_FAILURE.
Filtering compares ordinals, so the enum is an ``IntEnum``.
"""

from __future__ import annotations

import logging
from enum import IntEnum


class Severity(IntEnum):
    """Ordered log severity used for filtering and sink annotation."""

    VERBOSE = 0
    DEBUG = 1
    INFO = 2
    WARNING = 3
    ERROR = 4
    TERRIBLE_FAILURE = 5

    @property
    def marker(self) -> str:
        """Fixed symbol prefixed to every assembled message of this level."""
        return _MARKERS[self]

    @property
    def label(self) -> str:
        """Short upper-case label used in console columns."""
        return _LABELS[self]

    def to_python_level(self) -> int:
        """Return the stdlib ``logging`` level matching this severity."""
        return _PYTHON_LEVELS[self]

    @classmethod
    def from_name(cls, name: str) -> Severity:
        normalized = name.strip().upper().replace("-", "_")
        normalized = _ALIASES.get(normalized, normalized)
        try:
            return cls[normalized]
        except KeyError as exc:
            raise ValueError(f"Unknown severity: {name!r}") from exc

    @classmethod
    def coerce(cls, value: Severity | int | str) -> Severity:
        """Accept a member, an ordinal or a (case-insensitive) name."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            if value.strip().isdigit():
                return cls(int(value))
            return cls.from_name(value)
        return cls(value)


_MARKERS = {
    Severity.VERBOSE: "📝",
    Severity.DEBUG: "🔍",
    Severity.INFO: "ℹ️",
    Severity.WARNING: "⚠️",
    Severity.ERROR: "❌",
    Severity.TERRIBLE_FAILURE: "💥",
}

_LABELS = {
    Severity.VERBOSE: "VERBOSE",
    Severity.DEBUG: "DEBUG",
    Severity.INFO: "INFO",
    Severity.WARNING: "WARNING",
    Severity.ERROR: "ERROR",
    Severity.TERRIBLE_FAILURE: "WTF",
}

# VERBOSE sits below logging.DEBUG; stdlib has no name for it.
_PYTHON_LEVELS = {
    Severity.VERBOSE: 5,
    Severity.DEBUG: logging.DEBUG,
    Severity.INFO: logging.INFO,
    Severity.WARNING: logging.WARNING,
    Severity.ERROR: logging.ERROR,
    Severity.TERRIBLE_FAILURE: logging.CRITICAL,
}

_ALIASES = {
    "WTF": "TERRIBLE_FAILURE",
    "WARN": "WARNING",
    "CRITICAL": "TERRIBLE_FAILURE",
    "V": "VERBOSE",
    "D": "DEBUG",
    "I": "INFO",
    "W": "WARNING",
    "E": "ERROR",
}
