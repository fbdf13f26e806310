"""
Value formatter: classifies a value and dispatches to the matching renderer.
"""

from __future__ import annotations

from typing import Any

from .classifier import ValueKind, classify, kind_name
from .layout import FormattedNode
from .objects import ObjectRenderer
from .options import FormatOptions
from .primitives import NULL_TEXT, render_primitive, safe_str, type_name
from .sequences import build_sequence_tree, render_sequence


class ValueFormatter:
    """Renders any value into bounded, tree-shaped text.

    ``format`` never raises; a failure anywhere degrades to ``str(value)`` or,
    failing that, a description of the conversion error.
    """

    def __init__(self, options: FormatOptions | None = None):
        self._options = options or FormatOptions()
        self._objects = ObjectRenderer(self._options)

    @property
    def options(self) -> FormatOptions:
        return self._options

    def format(self, value: Any) -> str:
        try:
            kind = classify(value)
            if kind is ValueKind.NULL:
                return NULL_TEXT
            if kind is ValueKind.PRIMITIVE:
                return render_primitive(value)
            if kind is ValueKind.SEQUENCE:
                return render_sequence(value, self._options)
            if kind is ValueKind.STRUCTURED:
                return self._objects.render(value)
            return type_name(value)
        except Exception:
            return safe_str(value)

    def build_tree(self, value: Any) -> FormattedNode | None:
        """Root node for non-empty sequences and structured values, else None."""
        kind = classify(value)
        if kind is ValueKind.SEQUENCE and len(value) > 0:
            return build_sequence_tree(value, self._options)
        if kind is ValueKind.STRUCTURED:
            return self._objects.build_tree(value)
        return None

    def label(self, value: Any) -> str:
        """Type label used when a log call carries no message."""
        if classify(value) is ValueKind.SEQUENCE:
            return kind_name(value)
        return type_name(value)


def format_value(value: Any, options: FormatOptions | None = None) -> str:
    return ValueFormatter(options).format(value)
