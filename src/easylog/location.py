"""
Call-site location capture.

Automatic capture walks the interpreter stack. It is unreliable inside
generators and coroutines resumed from another frame; callers in those
contexts should pass ``location=Location(...)`` explicitly.
"""

from __future__ import annotations

import inspect
import os
from dataclasses import dataclass
from typing import Callable

_PACKAGE = __name__.rpartition(".")[0]
_MAX_FRAMES = 50


@dataclass(frozen=True)
class Location:
    """Source position of a log call."""

    file: str | None
    line: int = 0

    def describe(self) -> str:
        return f"at {self.file or '<unknown>'}:{self.line}"

    def __str__(self) -> str:
        return self.describe()


UNKNOWN_LOCATION = Location(None, 0)

LocationSupplier = Callable[[], Location]


def _is_internal(module: str) -> bool:
    return module == _PACKAGE or module.startswith(_PACKAGE + ".")


def capture_location() -> Location:
    """Return the first frame outside the easylog package."""
    try:
        frame = inspect.currentframe()
    except Exception:
        return UNKNOWN_LOCATION
    if frame is None:
        return UNKNOWN_LOCATION

    try:
        frame = frame.f_back
        for _ in range(_MAX_FRAMES):
            if frame is None:
                break
            module = frame.f_globals.get("__name__", "")
            if not _is_internal(module):
                return Location(os.path.basename(frame.f_code.co_filename), frame.f_lineno)
            frame = frame.f_back
    finally:
        del frame

    return UNKNOWN_LOCATION
