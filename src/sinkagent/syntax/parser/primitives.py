"""Primitive parsers.

Single-symbol and regular-expression parsers, plus the character
classes and numbers built from them.

Numbers:
    ``nat`` and ``integer`` are ASCII-only and matched as one token:
    ``"12 34"`` is the natural number 12 followed by unconsumed input,
    never 1234. Digit runs too long for int() fail with a custom error.
    Range checks belong in a ``map`` over the digit run (see
    :data:`sinkagent.command.mentions.snowflake`), not in the primitive.
"""

import re
from dataclasses import dataclass

from sinkagent.diagnostics import ErrorTemplate
from sinkagent.syntax.cursor import Cursor
from sinkagent.syntax.parser.combinators import few, optional, pick, sequence
from sinkagent.syntax.parser.core import Parser, literal, token
from sinkagent.syntax.result import ParsingResult, Success, custom, unexpected_symbol

__all__ = [
    "Capture",
    "alpha",
    "alphanumeric",
    "capture",
    "char_range",
    "digit",
    "integer",
    "literal",
    "lowercase",
    "nat",
    "pattern",
    "uppercase",
]


@dataclass(frozen=True, slots=True)
class Capture:
    """Result of :func:`capture`.

    Attributes:
        match: Full matched text
        groups: Capture groups in order; groups that did not participate are ""
    """

    match: str
    groups: tuple[str, ...]


def char_range(lo: str, hi: str) -> Parser[str]:
    """Match one symbol whose code point lies in ``[lo, hi]`` (inclusive).

    End of input counts as an out-of-range symbol.

    Raises:
        ValueError: If ``lo`` or ``hi`` is not a single character
    """
    if len(lo) != 1 or len(hi) != 1:
        msg = f"Range bounds must be single characters, got {lo!r} and {hi!r}"
        raise ValueError(msg)
    expected = f"[{lo}-{hi}]"

    def parse_range(cursor: Cursor) -> ParsingResult[str]:
        symbol = cursor.advance()
        if symbol is None or not lo <= symbol <= hi:
            return unexpected_symbol(cursor, expected)
        return Success(symbol)

    return Parser(parse_range, expected)


def _describe(compiled: re.Pattern[str], remaining: str) -> str:
    return f"pattern /{compiled.pattern}/, got {remaining}"


def pattern(regex: str | re.Pattern[str]) -> Parser[str]:
    """Match ``regex`` anchored at the cursor and return the matched text."""
    compiled = re.compile(regex)

    def parse_pattern(cursor: Cursor) -> ParsingResult[str]:
        remaining = cursor.tail()
        match = compiled.match(remaining)
        if match is None:
            return unexpected_symbol(cursor, _describe(compiled, remaining))
        for _ in match.group(0):
            cursor.advance()
        return Success(match.group(0))

    return Parser(parse_pattern, f"/{compiled.pattern}/")


def capture(regex: str | re.Pattern[str]) -> Parser[Capture]:
    """Like :func:`pattern`, but also return the capture groups."""
    compiled = re.compile(regex)

    def parse_capture(cursor: Cursor) -> ParsingResult[Capture]:
        remaining = cursor.tail()
        match = compiled.match(remaining)
        if match is None:
            return unexpected_symbol(cursor, _describe(compiled, remaining))
        for _ in match.group(0):
            cursor.advance()
        return Success(Capture(match.group(0), match.groups(default="")))

    return Parser(parse_capture, f"/{compiled.pattern}/")


digit = char_range("0", "9")
lowercase = char_range("a", "z")
uppercase = char_range("A", "Z")
alpha = pick(lowercase, uppercase)
alphanumeric = pick(alpha, digit)


def _to_nat(_: Cursor, digits: list[str]) -> ParsingResult[int]:
    try:
        return Success(int("".join(digits)))
    except ValueError:
        # Past sys.get_int_max_str_digits()
        return custom(ErrorTemplate.number_too_long(len(digits)))


nat = token(sequence(digit)).map("nat", _to_nat)

integer = token(few(optional(pick("+", "-")), nat)).map(
    "int", lambda _, value: Success(-value[1] if value[0] == "-" else value[1])
)
