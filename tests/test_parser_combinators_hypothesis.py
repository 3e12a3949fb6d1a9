"""Hypothesis property-based tests for combinators."""

from __future__ import annotations

from hypothesis import given
from hypothesis import strategies as st

from sinkagent.syntax.cursor import Cursor
from sinkagent.syntax.parser import literal, many, optional, unordered
from sinkagent.syntax.result import Success

# Distinct single letters so no literal is a prefix of another.
letters = st.lists(
    st.sampled_from("abcdefghij"), min_size=1, max_size=8, unique=True
)


class TestCombinatorProperties:
    """Invariants over arbitrary input."""

    @given(source=st.text(max_size=100))
    def test_empty_literal_always_succeeds(self, source: str) -> None:
        """PROPERTY: literal("") succeeds on any input and consumes nothing."""
        cursor = Cursor(source)

        assert literal("")(cursor) == Success("")
        assert cursor.offset == 0

    @given(source=st.text(max_size=100))
    def test_many_never_fails(self, source: str) -> None:
        """PROPERTY: many() and optional() never fail and leave the stack balanced."""
        cursor = Cursor(source)

        assert isinstance(many("ab")(cursor), Success)
        assert isinstance(optional("zz")(cursor), Success)
        assert cursor.depth == 0

    @given(data=st.data(), names=letters)
    def test_unordered_accepts_every_permutation(self, data: st.DataObject, names: list[str]) -> None:
        """PROPERTY: unordered returns declaration-indexed results for any input order."""
        order = data.draw(st.permutations(names))
        grammar = unordered(*names)

        assert grammar.parse("".join(order)) == Success(tuple(names))
