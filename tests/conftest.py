from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

import pytest

from easylog import core
from easylog.core import EasyLogConfig, EasyLogger
from easylog.location import Location
from easylog.severity import Severity
from easylog.sinks import Sink

FIXED_LOCATION = Location("app.py", 42)


@dataclass
class Delivery:
    message: str | None
    value: Any
    severity: Severity
    location: Location


@dataclass(eq=False)
class RecordingSink(Sink):
    """Keeps every delivery in memory."""

    deliveries: list[Delivery] = field(default_factory=list)
    closed: bool = False

    def log(self, message: str | None, value: Any, severity: Severity, location: Location) -> None:
        self.deliveries.append(Delivery(message, value, severity, location))

    def close(self) -> None:
        self.closed = True

    @property
    def messages(self) -> list[str | None]:
        return [d.message for d in self.deliveries]


class FailingSink(Sink):
    """Raises on every delivery."""

    def __init__(self) -> None:
        self.calls = 0

    def log(self, message: str | None, value: Any, severity: Severity, location: Location) -> None:
        self.calls += 1
        raise RuntimeError("sink is down")


@pytest.fixture
def recording_sink() -> RecordingSink:
    return RecordingSink()


@pytest.fixture
def config(recording_sink: RecordingSink) -> EasyLogConfig:
    return EasyLogConfig(sinks=[recording_sink])


@pytest.fixture
def easy_logger(config: EasyLogConfig) -> EasyLogger:
    """Logger with a fixed call site so messages are deterministic."""
    return EasyLogger(config, location_supplier=lambda: FIXED_LOCATION)


@pytest.fixture
def default_logger(monkeypatch: pytest.MonkeyPatch, recording_sink: RecordingSink) -> EasyLogger:
    """Replaces the module-level default logger for the duration of a test."""
    logger = EasyLogger(EasyLogConfig(sinks=[recording_sink]))
    monkeypatch.setattr(core, "_default_logger", logger)
    return logger
