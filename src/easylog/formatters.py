"""
Console formatter and color utilities.
"""

from __future__ import annotations

from datetime import datetime

from .severity import Severity

# =============================================================================
# Console Formatter (Aligned Columns)
# =============================================================================

COLORS = {
    "reset": "\033[0m",
    "bold": "\033[1m",
    "dim": "\033[2m",
    "verbose": "\033[90m",
    "debug": "\033[36m",
    "info": "\033[32m",
    "warning": "\033[33m",
    "error": "\033[31m",
    "terrible_failure": "\033[1;31m",
    "timestamp": "\033[90m",
    "tag": "\033[35m",
}


def colorize(text: str, color: str) -> str:
    """Apply ANSI color to text."""
    return f"{COLORS.get(color, '')}{text}{COLORS['reset']}"


class ConsoleFormatter:
    """Renders assembled messages as ``timestamp | LEVEL | tag | message`` lines."""

    TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"
    TIMESTAMP_WIDTH = 19
    LEVEL_WIDTH = 7
    TAG_WIDTH = 16
    SEPARATOR = " | "

    @classmethod
    def configure(
        cls,
        *,
        timestamp_format: str | None = None,
        level_width: int | None = None,
        tag_width: int | None = None,
        separator: str | None = None,
    ) -> None:
        """Configure alignment and rendering parameters."""
        if timestamp_format:
            cls.TIMESTAMP_FORMAT = timestamp_format
            cls.TIMESTAMP_WIDTH = len(datetime.now().strftime(timestamp_format))
        if level_width:
            cls.LEVEL_WIDTH = level_width
        if tag_width:
            cls.TAG_WIDTH = tag_width
        if separator is not None:
            cls.SEPARATOR = separator

    @staticmethod
    def _fit_right(text: str, width: int) -> str:
        if width <= 0:
            return text
        if len(text) > width:
            if width <= 3:
                text = text[-width:]
            else:
                text = "..." + text[-(width - 3) :]
        return f"{text:>{width}}"

    @staticmethod
    def _maybe_color(text: str, color: str, use_color: bool) -> str:
        if not use_color:
            return text
        return colorize(text, color)

    @classmethod
    def format(
        cls,
        message: str,
        *,
        severity: Severity,
        tag: str,
        timestamp: datetime | None = None,
        use_color: bool = True,
    ) -> str:
        """Format an assembled message into an aligned string.

        Only the first line carries the columns; the rest of a multi-line
        message follows unchanged.
        """
        moment = timestamp or datetime.now()
        level_text = cls._fit_right(severity.label, cls.LEVEL_WIDTH)

        return "".join(
            [
                cls._maybe_color(
                    cls._fit_right(moment.strftime(cls.TIMESTAMP_FORMAT), cls.TIMESTAMP_WIDTH),
                    "timestamp",
                    use_color,
                ),
                cls.SEPARATOR,
                cls._maybe_color(level_text, severity.name.lower(), use_color),
                cls.SEPARATOR,
                cls._maybe_color(cls._fit_right(tag, cls.TAG_WIDTH), "tag", use_color),
                cls.SEPARATOR,
                message,
            ]
        )
