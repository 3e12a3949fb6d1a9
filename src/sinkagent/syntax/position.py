"""Position utilities for command text.

Converts character offsets to line/column positions for error reporting.
Chat messages are usually a single line, but multi-line messages
(code blocks, pasted text) are reported the same way.

Rows and columns come from replaying a :class:`Cursor` up to the offset,
so error locations always agree with the cursor's own bookkeeping.
"""

from sinkagent.syntax.cursor import Cursor, Position

__all__ = ["format_position", "get_error_context", "locate"]


def locate(source: str, offset: int) -> Position:
    """Get the position a cursor reaches after consuming ``offset`` symbols.

    Offsets past the end clamp to the end of ``source``.

    Raises:
        ValueError: If ``offset`` is negative

    Example:
        >>> locate("line1\\nline2", 8)
        Position(row=1, column=2, offset=8)
    """
    if offset < 0:
        msg = f"Position must be >= 0, got {offset}"
        raise ValueError(msg)
    cursor = Cursor(source[:offset])
    while cursor.advance() is not None:
        pass
    return cursor.position


def format_position(source: str, offset: int, zero_based: bool = True) -> str:
    """Format position as a ``line:column`` string.

    Example:
        >>> source = "hello\\nworld\\ntest"
        >>> format_position(source, 6, zero_based=True)
        '1:0'
        >>> format_position(source, 6, zero_based=False)
        '2:1'
    """
    position = locate(source, offset)
    base = 0 if zero_based else 1
    return f"{position.row + base}:{position.column + base}"


def get_error_context(source: str, offset: int, marker: str = "^") -> str:
    """Show the line containing ``offset`` with a marker under it.

    Example:
        >>> print(get_error_context("/ping -user", 6))
        /ping -user
              ^
    """
    position = locate(source, offset)
    line = source.split("\n")[position.row]
    return f"{line}\n{' ' * position.column}{marker}"
