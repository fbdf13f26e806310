"""
Message assembly.

Single-line values:  ``🔍 SAVED USER at app.py:12 - "ada"``
Multi-line values:   ``🔍 SAVED USER: at app.py:12`` followed by the rendered tree.
"""

from __future__ import annotations

from typing import Sequence

from .formatting.layout import (
    DEFAULT_BOXED_THRESHOLD,
    FOOTER,
    INDENT_UNIT,
    HeaderStyle,
    choose_style,
    header_line,
    item_glyph,
)
from .location import Location
from .severity import Severity

DEFAULT_GROUP_HEADER = "LOG GROUP"
_LAST_CONTINUATION = " " * len(INDENT_UNIT)


def assemble_message(
    severity: Severity,
    rendered: str,
    *,
    message: str | None,
    label: str,
    location: Location,
) -> str:
    """Combine marker, message (or type label), location and rendered value."""
    heading = message.upper() if message is not None else label
    where = location.describe()
    if "\n" in rendered:
        return f"{severity.marker} {heading}: {where}\n{rendered}"
    return f"{severity.marker} {heading} {where} - {rendered}"


def assemble_group(
    severity: Severity,
    rendered_items: Sequence[str],
    *,
    header: str | None,
    location: Location,
    boxed_threshold: int = DEFAULT_BOXED_THRESHOLD,
) -> str:
    """Frame several rendered values as one numbered tree."""
    heading = (header or DEFAULT_GROUP_HEADER).upper()
    where = location.describe()
    if not rendered_items:
        return f"{severity.marker} {heading} (empty) {where}"

    count = len(rendered_items)
    style = choose_style(count, boxed_threshold)
    lines = [f"{severity.marker} {header_line(heading, style)} {where}"]
    for index, text in enumerate(rendered_items):
        glyph = item_glyph(index, count, False, style)
        number = f"[{index + 1}]"
        if "\n" not in text:
            lines.append(f"{glyph} {number} {text}")
            continue
        lines.append(f"{glyph} {number}")
        continuation = _LAST_CONTINUATION if index == count - 1 else INDENT_UNIT
        lines.extend(f"{continuation}{line}" for line in text.split("\n") if line.strip())
    if style is HeaderStyle.BOXED:
        lines.append(FOOTER)
    return "\n".join(lines)
