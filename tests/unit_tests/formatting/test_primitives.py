"""
Primitive rendering tests.
"""

from __future__ import annotations

from decimal import Decimal
from enum import Enum, IntEnum

import pytest

from easylog.formatting.primitives import render_char, render_primitive, safe_str, type_name


class Color(Enum):
    RED = 1
    GREEN = 2


class Priority(IntEnum):
    LOW = 1
    HIGH = 9


class Unprintable:
    def __str__(self) -> str:
        raise ValueError("boom")


class TestRenderPrimitive:
    def test_strings_are_double_quoted(self) -> None:
        assert render_primitive("hello") == '"hello"'

    def test_empty_string_is_still_quoted(self) -> None:
        assert render_primitive("") == '""'

    def test_numbers_use_canonical_text(self) -> None:
        assert render_primitive(42) == "42"
        assert render_primitive(3.5) == "3.5"
        assert render_primitive(Decimal("1.10")) == "1.10"

    def test_booleans_use_canonical_text(self) -> None:
        assert render_primitive(True) == "True"
        assert render_primitive(False) == "False"

    def test_enums_render_by_name_not_value(self) -> None:
        assert render_primitive(Color.GREEN) == "GREEN"
        assert render_primitive(Priority.HIGH) == "HIGH"

    def test_none_renders_null(self) -> None:
        assert render_primitive(None) == "null"

    def test_long_strings_are_not_truncated(self) -> None:
        text = "x" * 10_000
        assert render_primitive(text) == f'"{text}"'

    @pytest.mark.parametrize("value", ["abc", 7, 2.25, True, Color.RED, None])
    def test_rendering_is_idempotent(self, value: object) -> None:
        assert render_primitive(value) == render_primitive(value)

    def test_chars_are_single_quoted(self) -> None:
        assert render_char("a") == "'a'"


class TestSafeStr:
    def test_plain_values(self) -> None:
        assert safe_str(12) == "12"

    def test_conversion_failure_is_described(self) -> None:
        assert safe_str(Unprintable()) == "<error converting Unprintable to string: boom>"

    def test_type_name(self) -> None:
        assert type_name([]) == "list"
        assert type_name(Unprintable()) == "Unprintable"
