"""
Tree layout engine.

Renderers build :class:`FormattedNode` trees; this module turns them into lines.
Prefixes are a pure function of (depth, position, truncation, style):

    ╭─ User (app.models)            branch header (root, <= 5 children)
    ├─ address: Address
    │  ├─ city: "Lagos"
    │  ╰─ street: "Broad St"
    ╰─ name: "Ada"

    ═══ LIST[12] ═══                boxed header (root, > 5 children)
    ├─ [0]: 1
    ...
    └─ [9]: 10
    └─ ... and 2 more items
    ═══════════════════════════════════
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

BRANCH_GLYPH = "├─"
BRANCH_TERMINAL = "╰─"
BOXED_TERMINAL = "└─"
BRANCH_HEADER = "╭─"
BOX_RULE = "═══"
FOOTER = "═" * 35
INDENT_UNIT = "│  "

DEFAULT_BOXED_THRESHOLD = 5


class HeaderStyle(Enum):
    BRANCH = "branch"
    BOXED = "boxed"


def choose_style(count: int, threshold: int = DEFAULT_BOXED_THRESHOLD) -> HeaderStyle:
    """Boxed iff ``count`` exceeds ``threshold``; independent of depth."""
    return HeaderStyle.BOXED if count > threshold else HeaderStyle.BRANCH


def indent(depth: int) -> str:
    return INDENT_UNIT * max(depth, 0)


def terminal_glyph(style: HeaderStyle) -> str:
    return BOXED_TERMINAL if style is HeaderStyle.BOXED else BRANCH_TERMINAL


def item_glyph(index: int, shown: int, truncated: bool, style: HeaderStyle) -> str:
    """Glyph for the ``index``-th of ``shown`` rendered children.

    The boxed style closes on the last item even when a truncation line follows;
    the branch style leaves the terminal glyph to the truncation line.
    """
    if index == shown - 1 and (style is HeaderStyle.BOXED or not truncated):
        return terminal_glyph(style)
    return BRANCH_GLYPH


def header_line(title: str, style: HeaderStyle) -> str:
    if style is HeaderStyle.BOXED:
        return f"{BOX_RULE} {title} {BOX_RULE}"
    return f"{BRANCH_HEADER} {title}"


def truncation_text(omitted: int, unit: str) -> str:
    return f"... and {omitted} more {unit}"


@dataclass
class FormattedNode:
    """One rendered tree element.

    ``value`` holds inline text; ``children`` the nested elements, of which
    ``omitted`` more were dropped by truncation. ``style`` is decided from this
    node's own child count.
    """

    label: str
    value: str | None = None
    children: list[FormattedNode] = field(default_factory=list)
    depth: int = 0
    style: HeaderStyle = HeaderStyle.BRANCH
    omitted: int = 0
    unit: str = "items"

    @property
    def has_children(self) -> bool:
        return bool(self.children)

    @property
    def text(self) -> str:
        if self.value is None:
            return self.label
        return f"{self.label}: {self.value}"


def render_block(parent: FormattedNode, depth: int) -> list[str]:
    """Lines for ``parent``'s children, indented to ``depth``."""
    lines: list[str] = []
    shown = len(parent.children)
    truncated = parent.omitted > 0
    prefix = indent(depth)
    for index, child in enumerate(parent.children):
        glyph = item_glyph(index, shown, truncated, parent.style)
        lines.append(f"{prefix}{glyph} {child.text}")
        if child.children or child.omitted:
            lines.extend(render_block(child, depth + 1))
    if truncated:
        lines.append(f"{prefix}{terminal_glyph(parent.style)} {truncation_text(parent.omitted, parent.unit)}")
    return lines


def render_tree(root: FormattedNode) -> str:
    """Header, body and (boxed only) footer for a root node."""
    lines = [header_line(root.label, root.style)]
    lines.extend(render_block(root, 0))
    if root.style is HeaderStyle.BOXED:
        lines.append(FOOTER)
    return "\n".join(lines)
