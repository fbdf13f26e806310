"""
easylog: tree-shaped value logging.

Renders any value (scalars, sequences, dataclasses, pydantic models, plain
objects) into a bounded tree and routes the message to pluggable sinks,
filtered by severity:

    import easylog

    easylog.log_d(user, "loaded user")
    easylog.log_many(order, items, total, header="checkout")

Design Pattern: Strategy Pattern for sinks, explicit configuration object.
Library: structlog for internal diagnostics, pydantic for options and settings.
"""

from typing import Any

from .core import (
    ConfigSnapshot,
    EasyLogConfig,
    EasyLogger,
    LogEvent,
    configure,
    configure_from_settings,
    get_default_logger,
)
from .formatting import FormatOptions, ValueFormatter, format_value, register_fields, register_scalar
from .location import Location, capture_location
from .severity import Severity
from .sinks import ConsoleSink, FileSink, Sink, StdlibSink, StructlogSink, create_sinks


def log(
    value: Any,
    message: str | None = None,
    severity: Severity | int | str = Severity.DEBUG,
    *,
    location: Location | None = None,
) -> None:
    get_default_logger().log(value, message, severity, location=location)


def log_v(value: Any, message: str | None = None, *, location: Location | None = None) -> None:
    get_default_logger().log(value, message, Severity.VERBOSE, location=location)


def log_d(value: Any, message: str | None = None, *, location: Location | None = None) -> None:
    get_default_logger().log(value, message, Severity.DEBUG, location=location)


def log_i(value: Any, message: str | None = None, *, location: Location | None = None) -> None:
    get_default_logger().log(value, message, Severity.INFO, location=location)


def log_w(value: Any, message: str | None = None, *, location: Location | None = None) -> None:
    get_default_logger().log(value, message, Severity.WARNING, location=location)


def log_e(value: Any, message: str | None = None, *, location: Location | None = None) -> None:
    get_default_logger().log(value, message, Severity.ERROR, location=location)


def log_wtf(value: Any, message: str | None = None, *, location: Location | None = None) -> None:
    get_default_logger().log(value, message, Severity.TERRIBLE_FAILURE, location=location)


def log_many(*items: Any, header: str | None = None, location: Location | None = None) -> None:
    get_default_logger().log_many(*items, header=header, location=location)


def set_minimum_severity(severity: Severity | int | str) -> None:
    get_default_logger().config.set_minimum_severity(severity)


def get_minimum_severity() -> Severity:
    return get_default_logger().config.minimum_severity


__all__ = [
    "ConfigSnapshot",
    "ConsoleSink",
    "EasyLogConfig",
    "EasyLogger",
    "FileSink",
    "FormatOptions",
    "Location",
    "LogEvent",
    "Severity",
    "Sink",
    "StdlibSink",
    "StructlogSink",
    "ValueFormatter",
    "capture_location",
    "configure",
    "configure_from_settings",
    "create_sinks",
    "format_value",
    "get_default_logger",
    "get_minimum_severity",
    "log",
    "log_d",
    "log_e",
    "log_i",
    "log_many",
    "log_v",
    "log_w",
    "log_wtf",
    "register_fields",
    "register_scalar",
    "set_minimum_severity",
]
