"""Tests for result models (core/models.py).

All models are frozen dataclasses — these tests verify immutability,
equality semantics, and rendering.
"""

from __future__ import annotations

import pytest

from filemanipulator.core.models import EditSummary, LineResult


# ---------------------------------------------------------------------------
# LineResult
# ---------------------------------------------------------------------------

class TestLineResult:
    def test_render_joins_with_single_tab(self) -> None:
        result = LineResult(fields=(b"a", b"b", b"c"), changed=True)
        assert result.render() == b"a\tb\tc\n"

    def test_render_single_field(self) -> None:
        assert LineResult(fields=(b"only",), changed=True).render() == b"only\n"

    def test_equality(self) -> None:
        assert LineResult(fields=(b"a",), changed=False) == LineResult(
            fields=(b"a",), changed=False,
        )

    def test_frozen(self) -> None:
        result = LineResult(fields=(), changed=False)
        with pytest.raises(AttributeError):
            result.changed = True  # type: ignore[misc]


# ---------------------------------------------------------------------------
# EditSummary
# ---------------------------------------------------------------------------

class TestEditSummary:
    def test_suppressed_is_documented(self) -> None:
        assert EditSummary.lines_suppressed.__doc__

    def test_suppressed_is_derived(self) -> None:
        assert EditSummary(lines_read=10, lines_emitted=3).lines_suppressed == 7

    def test_frozen(self) -> None:
        summary = EditSummary(lines_read=0, lines_emitted=0)
        with pytest.raises(AttributeError):
            summary.lines_read = 1  # type: ignore[misc]
