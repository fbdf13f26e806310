"""
Core dispatch: configuration state, level gate and sink fan-out.
"""

from __future__ import annotations

import threading
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Iterable

import structlog

from .formatting import FormatOptions, ValueFormatter
from .formatting.primitives import safe_str, type_name
from .location import UNKNOWN_LOCATION, Location, LocationSupplier, capture_location
from .message import assemble_group, assemble_message
from .severity import Severity
from .sinks import DEFAULT_TAG, ConsoleSink, Sink, create_sinks

if TYPE_CHECKING:
    from .config import Settings


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """Get the structured logger easylog uses for its own diagnostics."""
    return structlog.get_logger(_name=name or "easylog")


logger = get_logger("easylog.core")


def _sinks_from_settings(settings: Settings) -> list[Sink]:
    log_settings = settings.logging
    return create_sinks(
        log_settings.sinks,
        tag=log_settings.tag,
        file_path=log_settings.file_path,
        file_max_bytes=log_settings.file_max_bytes,
        file_backup_count=log_settings.file_backup_count,
    )


def _close_sinks(sinks: Iterable[Sink]) -> None:
    for sink in sinks:
        try:
            sink.close()
        except Exception as exc:
            logger.warning("sink_close_failed", sink=type(sink).__name__, error=safe_str(exc))


# =============================================================================
# Data
# =============================================================================


@dataclass(frozen=True)
class LogEvent:
    """One log call, consumed synchronously and never stored."""

    message: str | None
    value: Any
    severity: Severity
    location: Location


@dataclass(frozen=True)
class ConfigSnapshot:
    """Consistent view of :class:`EasyLogConfig` taken under its lock."""

    tag: str
    debug_enabled: bool
    minimum_severity: Severity
    sinks: tuple[Sink, ...]
    format_options: FormatOptions

    def accepts(self, severity: Severity) -> bool:
        return self.debug_enabled and severity >= self.minimum_severity


# =============================================================================
# Configuration
# =============================================================================


class EasyLogConfig:
    """Mutable logging configuration shared by loggers and threads.

    One lock guards every write and every read, so readers always see a
    complete configuration. Without registered sinks a console sink is used.
    """

    def __init__(
        self,
        *,
        tag: str = DEFAULT_TAG,
        debug_enabled: bool = True,
        minimum_severity: Severity | int | str = Severity.DEBUG,
        sinks: Iterable[Sink] = (),
        format_options: FormatOptions | None = None,
    ):
        self._lock = threading.Lock()
        self._tag = tag
        self._debug_enabled = debug_enabled
        self._minimum_severity = Severity.coerce(minimum_severity)
        self._sinks: list[Sink] = list(sinks)
        self._format_options = format_options or FormatOptions()
        self._fallback: ConsoleSink | None = None

    @classmethod
    def from_settings(cls, settings: Settings | None = None) -> EasyLogConfig:
        """Build a configuration from environment-backed settings."""
        if settings is None:
            from .config import settings

        log_settings = settings.logging
        return cls(
            tag=log_settings.tag,
            debug_enabled=log_settings.debug_enabled,
            minimum_severity=log_settings.minimum_severity,
            sinks=_sinks_from_settings(settings),
            format_options=settings.formatting.to_options(),
        )

    def update(
        self,
        *,
        tag: str | None = None,
        debug_enabled: bool | None = None,
        minimum_severity: Severity | int | str | None = None,
        sinks: Iterable[Sink] | None = None,
        format_options: FormatOptions | None = None,
    ) -> None:
        """Atomically replace the given options; ``None`` leaves one unchanged.

        Replaced sinks that are not part of the new list are closed.
        """
        severity = Severity.coerce(minimum_severity) if minimum_severity is not None else None
        new_sinks = list(sinks) if sinks is not None else None
        old_sinks: list[Sink] = []
        with self._lock:
            if tag is not None and tag != self._tag:
                self._tag = tag
                self._fallback = None
            if debug_enabled is not None:
                self._debug_enabled = debug_enabled
            if severity is not None:
                self._minimum_severity = severity
            if new_sinks is not None:
                old_sinks, self._sinks = self._sinks, new_sinks
            if format_options is not None:
                self._format_options = format_options
        _close_sinks(sink for sink in old_sinks if not any(sink is kept for kept in new_sinks or ()))

    def add_sink(self, sink: Sink) -> None:
        with self._lock:
            self._sinks.append(sink)

    def remove_sink(self, sink: Sink) -> None:
        with self._lock:
            self._sinks.remove(sink)

    def set_minimum_severity(self, severity: Severity | int | str) -> None:
        self.update(minimum_severity=severity)

    @property
    def minimum_severity(self) -> Severity:
        with self._lock:
            return self._minimum_severity

    @property
    def tag(self) -> str:
        with self._lock:
            return self._tag

    def snapshot(self) -> ConfigSnapshot:
        with self._lock:
            sinks: tuple[Sink, ...] = tuple(self._sinks)
            if not sinks:
                if self._fallback is None:
                    self._fallback = ConsoleSink(tag=self._tag)
                sinks = (self._fallback,)
            return ConfigSnapshot(
                tag=self._tag,
                debug_enabled=self._debug_enabled,
                minimum_severity=self._minimum_severity,
                sinks=sinks,
                format_options=self._format_options,
            )

    def close(self) -> None:
        """Close every registered sink."""
        with self._lock:
            sinks, self._sinks = self._sinks, []
        _close_sinks(sinks)


# =============================================================================
# Logger
# =============================================================================


class EasyLogger:
    """Formats values and fans the assembled message out to the configured sinks.

    Args:
        config: Shared configuration; a fresh default one when omitted
        location_supplier: Returns the call site when no location is passed
    """

    def __init__(
        self,
        config: EasyLogConfig | None = None,
        *,
        location_supplier: LocationSupplier = capture_location,
    ):
        self._config = config if config is not None else EasyLogConfig()
        self._location_supplier = location_supplier
        self._formatter = ValueFormatter()

    @property
    def config(self) -> EasyLogConfig:
        return self._config

    def log(
        self,
        value: Any,
        message: str | None = None,
        severity: Severity | int | str = Severity.DEBUG,
        *,
        location: Location | None = None,
    ) -> None:
        """Render ``value`` and deliver it when the gate passes."""
        severity = Severity.coerce(severity)
        snapshot = self._config.snapshot()
        if not snapshot.accepts(severity):
            return

        if message is not None and not isinstance(message, str):
            message = safe_str(message)
        event = LogEvent(message, value, severity, location or self._locate())
        formatter = self._formatter_for(snapshot.format_options)
        text = assemble_message(
            severity,
            formatter.format(value),
            message=message,
            label=self._label(formatter, value),
            location=event.location,
        )
        self._dispatch(snapshot, event, text)

    def verbose(self, value: Any, message: str | None = None, *, location: Location | None = None) -> None:
        self.log(value, message, Severity.VERBOSE, location=location)

    def debug(self, value: Any, message: str | None = None, *, location: Location | None = None) -> None:
        self.log(value, message, Severity.DEBUG, location=location)

    def info(self, value: Any, message: str | None = None, *, location: Location | None = None) -> None:
        self.log(value, message, Severity.INFO, location=location)

    def warning(self, value: Any, message: str | None = None, *, location: Location | None = None) -> None:
        self.log(value, message, Severity.WARNING, location=location)

    def error(self, value: Any, message: str | None = None, *, location: Location | None = None) -> None:
        self.log(value, message, Severity.ERROR, location=location)

    def wtf(self, value: Any, message: str | None = None, *, location: Location | None = None) -> None:
        self.log(value, message, Severity.TERRIBLE_FAILURE, location=location)

    def log_many(self, *items: Any, header: str | None = None, location: Location | None = None) -> None:
        """Render several values as one numbered group, always at DEBUG."""
        severity = Severity.DEBUG
        snapshot = self._config.snapshot()
        if not snapshot.accepts(severity):
            return

        event = LogEvent(header, items, severity, location or self._locate())
        formatter = self._formatter_for(snapshot.format_options)
        text = assemble_group(
            severity,
            [formatter.format(item) for item in items],
            header=header if header is None else safe_str(header),
            location=event.location,
            boxed_threshold=snapshot.format_options.boxed_threshold,
        )
        self._dispatch(snapshot, event, text)

    def _locate(self) -> Location:
        try:
            return self._location_supplier()
        except Exception:
            return UNKNOWN_LOCATION

    def _formatter_for(self, options: FormatOptions) -> ValueFormatter:
        formatter = self._formatter
        if formatter.options != options:
            formatter = ValueFormatter(options)
            self._formatter = formatter
        return formatter

    @staticmethod
    def _label(formatter: ValueFormatter, value: Any) -> str:
        try:
            return formatter.label(value)
        except Exception:
            return type_name(value)

    @staticmethod
    def _dispatch(snapshot: ConfigSnapshot, event: LogEvent, text: str) -> None:
        for sink in snapshot.sinks:
            try:
                sink.log(text, event.value, event.severity, event.location)
            except Exception as exc:
                logger.warning(
                    "sink_failed",
                    sink=type(sink).__name__,
                    severity=event.severity.name,
                    error=safe_str(exc),
                )


# =============================================================================
# Default logger
# =============================================================================

_default_logger: EasyLogger | None = None
_default_lock = threading.Lock()


def get_default_logger() -> EasyLogger:
    """Logger behind the module-level functions, seeded from settings on first use."""
    global _default_logger
    with _default_lock:
        if _default_logger is None:
            _default_logger = EasyLogger(EasyLogConfig.from_settings())
        return _default_logger


def configure(
    *,
    tag: str = DEFAULT_TAG,
    debug_enabled: bool = True,
    minimum_severity: Severity | int | str = Severity.DEBUG,
    sinks: Iterable[Sink] = (),
    format_options: FormatOptions | None = None,
) -> EasyLogConfig:
    """Rewrite the default configuration; omitted options return to defaults."""
    config = get_default_logger().config
    config.update(
        tag=tag,
        debug_enabled=debug_enabled,
        minimum_severity=minimum_severity,
        sinks=sinks,
        format_options=format_options or FormatOptions(),
    )
    return config


def configure_from_settings(settings: Settings | None = None) -> EasyLogConfig:
    """Apply environment-backed settings to the default configuration."""
    from .formatters import ConsoleFormatter

    if settings is None:
        from .config import settings

    log_settings = settings.logging
    ConsoleFormatter.configure(
        timestamp_format=log_settings.console_timestamp_format,
        level_width=log_settings.console_level_width,
        tag_width=log_settings.console_tag_width,
        separator=log_settings.console_separator,
    )
    config = get_default_logger().config
    config.update(
        tag=log_settings.tag,
        debug_enabled=log_settings.debug_enabled,
        minimum_severity=log_settings.minimum_severity,
        sinks=_sinks_from_settings(settings),
        format_options=settings.formatting.to_options(),
    )
    return config
