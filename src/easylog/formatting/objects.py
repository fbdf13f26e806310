"""
Structured object renderer.

Fields come from :mod:`.introspection`, sorted by name. Nested structured values
and sequences are expanded while ``depth < max_depth``; deeper values collapse
to ``TypeName {...}``. Failures stay local: a field that cannot be read renders
as ``<inaccessible>``, and an object whose introspection raises falls back to
its plain string form.
"""

from __future__ import annotations

from typing import Any, Callable

from .classifier import ValueKind, classify, is_char_sequence, kind_name
from .introspection import introspect
from .layout import FormattedNode, choose_style, render_tree
from .options import FormatOptions
from .primitives import NULL_TEXT, render_char, render_primitive, safe_str, type_name
from .sequences import head

INACCESSIBLE_TEXT = "<inaccessible>"
NO_FIELDS_TEXT = "No accessible fields"
COLLAPSED_SUFFIX = "{...}"
CYCLE_SUFFIX = "(cycle)"


def object_title(value: Any) -> str:
    """``TypeName (module)``; the module is omitted for builtins."""
    name = type_name(value)
    module = getattr(type(value), "__module__", None)
    if module and module not in ("builtins", name):
        return f"{name} ({module})"
    return name


class ObjectRenderer:
    """Renders structured values as trees bounded by :class:`FormatOptions`."""

    def __init__(self, options: FormatOptions | None = None):
        self._options = options or FormatOptions()

    @property
    def options(self) -> FormatOptions:
        return self._options

    def render(self, value: Any) -> str:
        try:
            root = self.build_tree(value)
        except Exception:
            return safe_str(value)
        return render_tree(root)

    def build_tree(self, value: Any) -> FormattedNode:
        """Root node for ``value``; introspection errors propagate."""
        children, omitted, count = self._field_nodes(value, 0, (id(value),))
        return FormattedNode(
            object_title(value),
            children=children,
            style=choose_style(count, self._options.boxed_threshold),
            omitted=omitted,
            unit="fields",
        )

    def _field_nodes(
        self,
        value: Any,
        depth: int,
        ancestors: tuple[int, ...],
    ) -> tuple[list[FormattedNode], int, int]:
        """Field nodes, the number of truncated fields and the total field count."""
        accessors = introspect(value) or []
        if not accessors:
            return [FormattedNode(NO_FIELDS_TEXT, depth=depth)], 0, 0

        limit = self._options.max_items
        nodes = [self._field_node(name, accessor, depth, ancestors) for name, accessor in accessors[:limit]]
        return nodes, max(len(accessors) - limit, 0), len(accessors)

    def _field_node(
        self,
        name: str,
        accessor: Callable[[], Any],
        depth: int,
        ancestors: tuple[int, ...],
    ) -> FormattedNode:
        try:
            return self._entry(name, accessor(), depth, ancestors)
        except Exception:
            return FormattedNode(name, INACCESSIBLE_TEXT, depth=depth)

    def _entry(self, label: str, value: Any, depth: int, ancestors: tuple[int, ...]) -> FormattedNode:
        kind = classify(value)
        if kind is ValueKind.NULL:
            return FormattedNode(label, NULL_TEXT, depth=depth)
        if kind is ValueKind.PRIMITIVE:
            return FormattedNode(label, render_primitive(value), depth=depth)
        if kind is ValueKind.SEQUENCE:
            return self._sequence_entry(label, value, depth, ancestors)
        if kind is ValueKind.STRUCTURED:
            return self._structured_entry(label, value, depth, ancestors)
        return FormattedNode(label, type_name(value), depth=depth)

    def _sequence_entry(self, label: str, value: Any, depth: int, ancestors: tuple[int, ...]) -> FormattedNode:
        size, items = head(value, self._options.max_items)
        node = FormattedNode(label, f"{kind_name(value)}[{size}]", depth=depth, unit="items")
        if id(value) in ancestors:
            node.value = f"{node.value} {CYCLE_SUFFIX}"
            return node
        if size == 0 or depth >= self._options.max_depth:
            return node

        chars = is_char_sequence(value)
        nested = ancestors + (id(value),)
        for index, item in enumerate(items):
            item_label = f"[{index}]"
            if chars:
                node.children.append(FormattedNode(item_label, render_char(item), depth=depth + 1))
                continue
            try:
                node.children.append(self._entry(item_label, item, depth + 1, nested))
            except Exception:
                node.children.append(FormattedNode(item_label, INACCESSIBLE_TEXT, depth=depth + 1))
        node.omitted = max(size - len(node.children), 0)
        node.style = choose_style(size, self._options.boxed_threshold)
        return node

    def _structured_entry(self, label: str, value: Any, depth: int, ancestors: tuple[int, ...]) -> FormattedNode:
        name = type_name(value)
        if id(value) in ancestors:
            return FormattedNode(label, f"{name} {COLLAPSED_SUFFIX} {CYCLE_SUFFIX}", depth=depth)
        if depth >= self._options.max_depth:
            return FormattedNode(label, f"{name} {COLLAPSED_SUFFIX}", depth=depth)

        try:
            children, omitted, count = self._field_nodes(value, depth + 1, ancestors + (id(value),))
        except Exception:
            return FormattedNode(label, safe_str(value), depth=depth)

        return FormattedNode(
            label,
            name,
            children=children,
            depth=depth,
            style=choose_style(count, self._options.boxed_threshold),
            omitted=omitted,
            unit="fields",
        )


def render_object(value: Any, options: FormatOptions | None = None) -> str:
    return ObjectRenderer(options).render(value)
