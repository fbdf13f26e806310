"""
Structural formatting engine.

Renders arbitrary values into bounded, tree-shaped text:

- classifier: primitive / sequence / structured / opaque
- primitives, sequences, objects: the renderers
- layout: FormattedNode and tree glyphs
- introspection: the field capability registry
"""

from .classifier import ValueKind, classify, kind_name, register_scalar
from .formatter import ValueFormatter, format_value
from .introspection import register_fields
from .layout import FormattedNode, HeaderStyle, choose_style
from .options import FormatOptions

__all__ = [
    "FormatOptions",
    "FormattedNode",
    "HeaderStyle",
    "ValueFormatter",
    "ValueKind",
    "choose_style",
    "classify",
    "format_value",
    "kind_name",
    "register_fields",
    "register_scalar",
]
