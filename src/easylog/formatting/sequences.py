"""
Sequence renderer.

Top-level sequences render one level deep: primitives inline, anything else as
its type name. Nested sequences inside structured values are expanded by the
object renderer, which owns recursion depth.
"""

from __future__ import annotations

from itertools import islice
from typing import Any

from .classifier import ValueKind, classify, is_char_sequence, kind_name
from .layout import FormattedNode, HeaderStyle, choose_style, render_tree
from .options import FormatOptions
from .primitives import NULL_TEXT, render_char, render_primitive, type_name


_UPPERCASE_KINDS = frozenset({"List", "Tuple"})


def head(value: Any, limit: int) -> tuple[int, list[Any]]:
    """Size of ``value`` and its first ``limit`` items in iteration order."""
    return len(value), list(islice(iter(value), limit))


def empty_text(value: Any) -> str:
    return f"{kind_name(value)}[0] (empty)"


def _shallow_item(item: Any, chars: bool) -> str:
    kind = classify(item)
    if kind is ValueKind.NULL:
        return NULL_TEXT
    if kind is ValueKind.PRIMITIVE:
        return render_char(item) if chars else render_primitive(item)
    return type_name(item)


def _boxed_kind(kind: str) -> str:
    """Boxed headers upper-case generic containers (``LIST``); typed kinds keep their name."""
    return kind.upper() if kind in _UPPERCASE_KINDS else kind


def build_sequence_tree(value: Any, options: FormatOptions) -> FormattedNode:
    size, items = head(value, options.max_items)
    style = choose_style(size, options.boxed_threshold)
    kind = kind_name(value)
    title = f"{_boxed_kind(kind) if style is HeaderStyle.BOXED else kind}[{size}]"
    chars = is_char_sequence(value)
    children = [FormattedNode(f"[{index}]", _shallow_item(item, chars)) for index, item in enumerate(items)]
    return FormattedNode(
        title,
        children=children,
        style=style,
        omitted=max(size - len(children), 0),
        unit="items",
    )


def render_sequence(value: Any, options: FormatOptions | None = None) -> str:
    options = options or FormatOptions()
    if len(value) == 0:
        return empty_text(value)
    return render_tree(build_sequence_tree(value, options))
