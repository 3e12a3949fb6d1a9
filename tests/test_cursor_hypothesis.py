"""Hypothesis property-based tests for Cursor.

Complements test_cursor.py with checkpoint and bookkeeping invariants.
"""

from __future__ import annotations

from hypothesis import given, settings
from hypothesis import strategies as st

from sinkagent.syntax.cursor import Cursor
from sinkagent.syntax.position import locate

source_text = st.text(max_size=200)


class TestCursorProperties:
    """Invariants over arbitrary input."""

    @given(source=source_text)
    @settings(max_examples=200)
    def test_advance_reproduces_source(self, source: str) -> None:
        """PROPERTY: advancing to EOF yields the source symbol by symbol."""
        cursor = Cursor(source)
        consumed = []
        while (symbol := cursor.advance()) is not None:
            consumed.append(symbol)

        assert "".join(consumed) == source
        assert cursor.tail() == ""

    @given(source=source_text, steps=st.integers(min_value=0, max_value=50))
    def test_rollback_is_exact_undo(self, source: str, steps: int) -> None:
        """PROPERTY: commit + advances + rollback leaves position unchanged."""
        cursor = Cursor(source)
        cursor.advance()
        before = cursor.position
        cursor.commit()
        for _ in range(steps):
            cursor.advance()
        cursor.rollback()

        assert cursor.position == before
        assert cursor.depth == 0

    @given(source=source_text, steps=st.integers(min_value=0, max_value=250))
    def test_row_column_agree_with_offset(self, source: str, steps: int) -> None:
        """PROPERTY: incremental row/column match the newlines before the offset."""
        cursor = Cursor(source)
        for _ in range(steps):
            cursor.advance()
        position = cursor.position
        consumed = source[: position.offset]

        assert position.row == consumed.count("\n")
        assert position.column == len(consumed) - (consumed.rfind("\n") + 1)

    @given(source=source_text, offset=st.integers(min_value=0, max_value=250))
    def test_locate_matches_cursor(self, source: str, offset: int) -> None:
        """PROPERTY: locate() agrees with a cursor advanced to the same offset."""
        cursor = Cursor(source)
        for _ in range(offset):
            cursor.advance()

        assert locate(source, offset) == cursor.position

    @given(source=source_text, steps=st.integers(min_value=0, max_value=250))
    def test_offset_is_monotonic_without_rollback(self, source: str, steps: int) -> None:
        """PROPERTY: offset never decreases during forward progress."""
        cursor = Cursor(source)
        previous = cursor.offset
        for _ in range(steps):
            cursor.advance()
            assert cursor.offset >= previous
            previous = cursor.offset
