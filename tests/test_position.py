"""Tests for offset -> line/column helpers."""

from __future__ import annotations

import pytest

from sinkagent.syntax.cursor import Position
from sinkagent.syntax.position import format_position, get_error_context, locate


class TestLocate:
    """Test line and column derivation."""

    def test_start_of_input(self) -> None:
        assert locate("abc", 0) == Position(0, 0, 0)

    def test_rows_follow_newlines(self) -> None:
        source = "line1\nline2\nline3"

        assert locate(source, 6) == Position(1, 0, 6)
        assert locate(source, 14) == Position(2, 2, 14)

    def test_offset_just_after_newline(self) -> None:
        assert locate("a\n", 2) == Position(1, 0, 2)

    def test_clamps_past_end(self) -> None:
        assert locate("ab", 99) == Position(0, 2, 2)

    def test_negative_offset_rejected(self) -> None:
        with pytest.raises(ValueError, match="must be >= 0"):
            locate("ab", -1)


class TestFormatting:
    """Test rendered locations."""

    def test_format_position(self) -> None:
        source = "hello\nworld\ntest"

        assert format_position(source, 6) == "1:0"
        assert format_position(source, 6, zero_based=False) == "2:1"

    def test_error_context_on_second_line(self) -> None:
        assert get_error_context("ab\ncd", 4) == "cd\n ^"

    def test_error_context_at_end_of_input(self) -> None:
        """The caret may sit one past the last symbol."""
        assert get_error_context("ab", 2) == "ab\n  ^"
