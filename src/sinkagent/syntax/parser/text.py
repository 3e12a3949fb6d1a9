"""Text tokens for chat input.

Words, quoted strings, identifiers, and the greedy remainder. Each is a
single token: leading whitespace is skipped once, interiors are matched
verbatim.

Quoted strings:
    Delimited by ``"`` or ``'`` (the same character opens and closes).
    Supported escapes: ``\\"``, ``\\\\``, ``\\n``, ``\\t``, ``\\r``. Any other
    backslash is kept as a literal character.
"""

from sinkagent.constants import WHITESPACE
from sinkagent.syntax.cursor import Cursor
from sinkagent.syntax.parser.combinators import few, many, pick, sequence
from sinkagent.syntax.parser.core import Parser, literal, token, verbatim
from sinkagent.syntax.parser.primitives import alphanumeric
from sinkagent.syntax.result import ParsingResult, Success, unexpected_symbol

__all__ = [
    "escape",
    "greedy_string",
    "identifier",
    "quoted",
    "quoted_string",
    "skip",
    "string",
    "whitespace",
    "word",
]

_ESCAPES = {"n": "\n", "t": "\t", "r": "\r"}


def _join(_: Cursor, chars: list[str]) -> ParsingResult[str]:
    return Success("".join(chars))


whitespace = verbatim(pick(" ", "\t", "\r", "\n"), "whitespace")

skip = verbatim(many(whitespace), "skip")


def _non_whitespace(cursor: Cursor) -> ParsingResult[str]:
    symbol = cursor.advance()
    if symbol is None or symbol in WHITESPACE:
        return unexpected_symbol(cursor, "non-whitespace character")
    return Success(symbol)


word = token(sequence(_non_whitespace)).map("word", _join)

escape = few(literal("\\"), pick('"', "\\", "n", "t", "r")).map(
    "escape", lambda _, value: Success(_ESCAPES.get(value[1], value[1]))
)


def quoted(delimiter: str) -> Parser[str]:
    """Build a parser for a string enclosed in ``delimiter``."""

    def quoted_inner(cursor: Cursor) -> ParsingResult[str]:
        symbol = cursor.advance()
        if symbol is None or symbol == delimiter:
            return unexpected_symbol(cursor, "invalid sequence of characters")
        return Success(symbol)

    return token(
        few(literal(delimiter), many(pick(escape, quoted_inner)), literal(delimiter))
    ).map("quoted", lambda cursor, value: _join(cursor, value[1]))


quoted_string = pick(quoted('"'), quoted("'"))

string = pick(quoted_string, word)


def _consume_rest(cursor: Cursor) -> ParsingResult[str]:
    content = cursor.tail()
    for _ in content:
        cursor.advance()
    return Success(content)


greedy_string = verbatim(_consume_rest, "greedy_string")

identifier = token(sequence(pick(alphanumeric, "-", "_"))).map("identifier", _join)
