"""Checkpointed cursor infrastructure for backtracking parsing.

Implements the cursor every combinator reads from.
Python 3.13+. Zero external dependencies.

Design Philosophy:
    - Input text is immutable; only the Position moves
    - Backtracking uses an explicit stack of saved positions (checkpoints)
    - EOF is a state (is_eof); advance() returns None only at EOF
    - Row and column are kept for diagnostics, offset is authoritative

Checkpoint Contract:
    Every commit() is matched by exactly one finish() (keep progress) or
    rollback() (undo progress). Nested checkpoints resolve innermost-first.
    After a top-level parse the stack is empty again.

Pattern Reference:
    - Haskell Parsec (try)
    - Rust nom parser combinator library
"""

from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass

from sinkagent.constants import WHITESPACE
from sinkagent.diagnostics import CheckpointError, ErrorTemplate

__all__ = ["Cursor", "Position"]


@dataclass(frozen=True, slots=True)
class Position:
    """Location in the input.

    Attributes:
        row: 0-based line number (diagnostics only)
        column: 0-based column within the row (diagnostics only)
        offset: 0-based index into the input (authoritative)
    """

    row: int = 0
    column: int = 0
    offset: int = 0


class Cursor:
    """Mutable read position over an immutable input string.

    A cursor is created fresh for every parse attempt and owned by that
    attempt alone. Parsers hold no per-parse state; everything that
    changes during a parse lives here.

    Example:
        >>> cursor = Cursor("abc")
        >>> cursor.advance()
        'a'
        >>> cursor.commit()
        >>> cursor.advance()
        'b'
        >>> cursor.rollback()
        >>> cursor.advance()
        'b'
        >>> cursor.tail()
        'c'
    """

    __slots__ = ("_history", "_position", "_source", "_verbatim_depth")

    def __init__(self, source: str) -> None:
        self._source = source
        self._position = Position()
        self._history: list[Position] = []
        self._verbatim_depth = 0

    def __repr__(self) -> str:
        return f"Cursor(offset={self._position.offset}, tail={self.tail()!r})"

    @property
    def source(self) -> str:
        """The complete input text."""
        return self._source

    @property
    def position(self) -> Position:
        """Current position (immutable snapshot)."""
        return self._position

    @property
    def offset(self) -> int:
        """Current index into the input."""
        return self._position.offset

    @property
    def is_eof(self) -> bool:
        """Check if every symbol has been consumed."""
        return self._position.offset >= len(self._source)

    @property
    def depth(self) -> int:
        """Number of open checkpoints."""
        return len(self._history)

    @property
    def is_verbatim(self) -> bool:
        """True while automatic whitespace skipping is suspended."""
        return self._verbatim_depth > 0

    def peek(self) -> str | None:
        """Return the next symbol without consuming it, or None at EOF."""
        if self.is_eof:
            return None
        return self._source[self._position.offset]

    def advance(self) -> str | None:
        """Consume and return the next symbol.

        Returns:
            The consumed symbol, or None if input is exhausted (position unchanged)
        """
        if self.is_eof:
            return None
        row, column, offset = self._position.row, self._position.column, self._position.offset
        symbol = self._source[offset]
        if symbol == "\n":
            self._position = Position(row + 1, 0, offset + 1)
        else:
            self._position = Position(row, column + 1, offset + 1)
        return symbol

    def lookbehind(self, count: int) -> str | None:
        """Return the symbol ``count`` positions behind the current offset.

        Read-only: does not move the cursor or touch row/column bookkeeping.

        Example:
            >>> cursor = Cursor("abc")
            >>> _ = cursor.advance(), cursor.advance()
            >>> cursor.lookbehind(1), cursor.lookbehind(2), cursor.lookbehind(3)
            ('b', 'a', None)
        """
        index = self._position.offset - count
        if index < 0 or index >= len(self._source):
            return None
        return self._source[index]

    def commit(self) -> None:
        """Push a checkpoint at the current position."""
        self._history.append(self._position)

    def finish(self) -> None:
        """Pop the latest checkpoint, keeping everything consumed since it.

        Raises:
            CheckpointError: If no checkpoint is open
        """
        if not self._history:
            raise CheckpointError(ErrorTemplate.unbalanced_checkpoint("finish"))
        self._history.pop()

    def rollback(self) -> None:
        """Pop the latest checkpoint and return to it.

        Raises:
            CheckpointError: If no checkpoint is open
        """
        if not self._history:
            raise CheckpointError(ErrorTemplate.unbalanced_checkpoint("rollback"))
        self._position = self._history.pop()

    def tail(self) -> str:
        """Return the unconsumed remainder of the input."""
        return self._source[self._position.offset :]

    def skip_whitespace(self) -> None:
        """Consume contiguous whitespace (space, tab, CR, LF)."""
        while self.peek() in WHITESPACE:
            self.advance()

    @contextmanager
    def verbatim(self) -> Iterator["Cursor"]:
        """Suspend automatic whitespace skipping for the duration of the block.

        Reentrant: nested blocks keep skipping suspended until the
        outermost one exits.
        """
        self._verbatim_depth += 1
        try:
            yield self
        finally:
            self._verbatim_depth -= 1
