"""
Severity ordering and parsing tests.
"""

from __future__ import annotations

import logging

import pytest

from easylog.severity import Severity


class TestOrdering:
    def test_total_order(self) -> None:
        assert sorted(Severity) == [
            Severity.VERBOSE,
            Severity.DEBUG,
            Severity.INFO,
            Severity.WARNING,
            Severity.ERROR,
            Severity.TERRIBLE_FAILURE,
        ]

    def test_markers_are_distinct(self) -> None:
        assert len({s.marker for s in Severity}) == len(Severity)
        assert Severity.TERRIBLE_FAILURE.marker == "💥"

    def test_python_levels_preserve_order(self) -> None:
        levels = [s.to_python_level() for s in Severity]
        assert levels == sorted(levels)
        assert Severity.VERBOSE.to_python_level() < logging.DEBUG
        assert Severity.TERRIBLE_FAILURE.to_python_level() == logging.CRITICAL


class TestParsing:
    @pytest.mark.parametrize(
        ("name", "expected"),
        [
            ("debug", Severity.DEBUG),
            (" Info ", Severity.INFO),
            ("warn", Severity.WARNING),
            ("WTF", Severity.TERRIBLE_FAILURE),
            ("terrible-failure", Severity.TERRIBLE_FAILURE),
            ("critical", Severity.TERRIBLE_FAILURE),
            ("v", Severity.VERBOSE),
            ("e", Severity.ERROR),
        ],
    )
    def test_from_name(self, name: str, expected: Severity) -> None:
        assert Severity.from_name(name) is expected

    def test_unknown_name(self) -> None:
        with pytest.raises(ValueError, match="Unknown severity"):
            Severity.from_name("loud")

    def test_coerce(self) -> None:
        assert Severity.coerce(Severity.INFO) is Severity.INFO
        assert Severity.coerce(4) is Severity.ERROR
        assert Severity.coerce("error") is Severity.ERROR
        with pytest.raises(ValueError):
            Severity.coerce(9)
