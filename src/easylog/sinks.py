"""
Log sink abstraction and concrete implementations.
"""

from __future__ import annotations

import logging
import sys
import threading
from abc import ABC, abstractmethod
from datetime import datetime
from pathlib import Path
from typing import Any, Iterable

import structlog

from .formatters import ConsoleFormatter
from .location import Location
from .severity import Severity

DEFAULT_TAG = "EASY-LOG"

# =============================================================================
# Sink Abstraction (Strategy Pattern)
# =============================================================================


class Sink(ABC):
    """Receives assembled log messages.

    Implementations must tolerate arbitrary values and must not assume the
    value is serializable. Exceptions raised from ``log`` are caught by the
    dispatcher and never reach the caller.
    """

    @abstractmethod
    def log(self, message: str | None, value: Any, severity: Severity, location: Location) -> None:
        """Deliver one message."""
        ...

    def close(self) -> None:
        """Release resources held by the sink."""


class ConsoleSink(Sink):
    """Console sink with aligned, optionally colored columns.

    Args:
        stream: Output stream (default: stderr)
        tag: Tag column value
        use_color: Force colors on or off; defaults to the stream's TTY status
    """

    def __init__(self, stream: Any = None, tag: str | None = None, use_color: bool | None = None):
        self._stream = stream
        self._tag = tag or DEFAULT_TAG
        self._use_color = use_color

    @property
    def stream(self) -> Any:
        return self._stream or sys.stderr

    def log(self, message: str | None, value: Any, severity: Severity, location: Location) -> None:
        stream = self.stream
        use_color = self._use_color
        if use_color is None:
            use_color = bool(getattr(stream, "isatty", lambda: False)())
        output = ConsoleFormatter.format(message or "", severity=severity, tag=self._tag, use_color=use_color)
        stream.write(output + "\n")
        stream.flush()


class FileSink(Sink):
    """Local text file sink with size-based rotation."""

    TIMESTAMP_FORMAT = "%B %d, %Y %H:%M:%S"

    def __init__(self, path: str | Path, max_bytes: int = 10 * 1024 * 1024, backup_count: int = 5):
        self._path = Path(path)
        self._path.parent.mkdir(parents=True, exist_ok=True)
        self._max_bytes = max_bytes
        self._backup_count = backup_count
        self._lock = threading.Lock()
        self._file = open(self._path, "a", encoding="utf-8")

    @property
    def path(self) -> Path:
        return self._path

    @property
    def closed(self) -> bool:
        return self._file.closed

    def log(self, message: str | None, value: Any, severity: Severity, location: Location) -> None:
        stamp = datetime.now().strftime(self.TIMESTAMP_FORMAT)
        with self._lock:
            self._file.write(f"{stamp} [{severity.label}] {message or ''}\n")
            self._file.flush()
            self._maybe_rotate()

    def _backup(self, index: int) -> Path:
        return self._path.with_suffix(f".{index}{self._path.suffix}")

    def _maybe_rotate(self) -> None:
        if self._max_bytes <= 0 or self._path.stat().st_size <= self._max_bytes:
            return
        self._file.close()
        if self._backup_count > 0:
            for i in range(self._backup_count - 1, 0, -1):
                src = self._backup(i)
                if src.exists():
                    src.replace(self._backup(i + 1))
            self._path.replace(self._backup(1))
        else:
            self._path.unlink()
        self._file = open(self._path, "a", encoding="utf-8")

    def close(self) -> None:
        with self._lock:
            self._file.close()


class StdlibSink(Sink):
    """Forwards messages to a stdlib ``logging`` logger named after the tag."""

    def __init__(self, logger_name: str | None = None):
        self._logger = logging.getLogger(logger_name or DEFAULT_TAG)

    def log(self, message: str | None, value: Any, severity: Severity, location: Location) -> None:
        self._logger.log(severity.to_python_level(), message or "")


class StructlogSink(Sink):
    """Forwards messages to a structlog logger, binding the call site."""

    _METHODS = {
        Severity.VERBOSE: "debug",
        Severity.DEBUG: "debug",
        Severity.INFO: "info",
        Severity.WARNING: "warning",
        Severity.ERROR: "error",
        Severity.TERRIBLE_FAILURE: "critical",
    }

    def __init__(self, logger: Any = None, name: str | None = None):
        self._logger = logger if logger is not None else structlog.get_logger(name or DEFAULT_TAG)

    def log(self, message: str | None, value: Any, severity: Severity, location: Location) -> None:
        method = getattr(self._logger, self._METHODS[severity])
        method(message or "", severity=severity.name, file=location.file, line=location.line)


# =============================================================================
# Factory
# =============================================================================


def create_sinks(
    names: str | Iterable[str],
    *,
    tag: str | None = None,
    file_path: str | Path = "logs/easylog.log",
    file_max_bytes: int = 10 * 1024 * 1024,
    file_backup_count: int = 5,
    stream: Any = None,
) -> list[Sink]:
    """Build sinks from names (``console``, ``file``, ``stdlib``, ``structlog``)."""
    if isinstance(names, str):
        names = names.split(",")

    sinks: list[Sink] = []
    for raw in names:
        name = raw.strip().lower()
        if not name:
            continue
        if name == "console":
            sinks.append(ConsoleSink(stream=stream, tag=tag))
        elif name == "file":
            sinks.append(FileSink(file_path, max_bytes=file_max_bytes, backup_count=file_backup_count))
        elif name == "stdlib":
            sinks.append(StdlibSink(tag))
        elif name == "structlog":
            sinks.append(StructlogSink(name=tag))
        else:
            raise ValueError(f"Unknown sink: {raw!r}")
    return sinks
