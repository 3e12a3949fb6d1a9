"""Tagged parse results and the closed parse error taxonomy.

Every parser returns a ParsingResult: either ``Success`` carrying the
parsed value, or ``Failure`` carrying exactly one ParsingError variant.
Parse failures are values, never exceptions, so combinators can branch
on them cheaply while backtracking.

Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from typing import ClassVar, Literal

from sinkagent.constants import UNKNOWN_SYMBOL
from sinkagent.diagnostics import Diagnostic, ErrorKind, ErrorTemplate
from sinkagent.syntax.cursor import Cursor
from sinkagent.syntax.position import format_position, get_error_context

__all__ = [
    "CustomError",
    "ExpectedEndOfInput",
    "Failure",
    "ParsingError",
    "ParsingResult",
    "Success",
    "UnexpectedEndOfInput",
    "UnexpectedSymbol",
    "custom",
    "expected_eoi",
    "format_with_context",
    "is_failure",
    "is_success",
    "prettify",
    "success",
    "unexpected_eoi",
    "unexpected_symbol",
]


# ============================================================================
# ERROR VARIANTS
# ============================================================================


@dataclass(frozen=True, slots=True)
class ExpectedEndOfInput:
    """Input remained after a parse that required full consumption."""

    kind: ClassVar[ErrorKind] = ErrorKind.EXPECTED_EOI

    offset: int
    remaining: str

    @property
    def diagnostic(self) -> Diagnostic:
        return ErrorTemplate.expected_eoi(self.offset, self.remaining)


@dataclass(frozen=True, slots=True)
class UnexpectedEndOfInput:
    """Input ended where more was required."""

    kind: ClassVar[ErrorKind] = ErrorKind.UNEXPECTED_EOI

    offset: int
    expected: str

    @property
    def diagnostic(self) -> Diagnostic:
        return ErrorTemplate.unexpected_eoi(self.offset, self.expected)


@dataclass(frozen=True, slots=True)
class UnexpectedSymbol:
    """A concrete symbol did not match.

    Attributes:
        offset: Cursor offset when the mismatch was detected
        symbol: Last consumed symbol (the offending one for single-symbol parsers)
        expected: Description of what the parser wanted
    """

    kind: ClassVar[ErrorKind] = ErrorKind.UNEXPECTED_SYMBOL

    offset: int
    symbol: str
    expected: str

    @property
    def diagnostic(self) -> Diagnostic:
        return ErrorTemplate.unexpected_symbol(self.offset, self.symbol, self.expected)


@dataclass(frozen=True, slots=True)
class CustomError:
    """Semantic validation failure raised after a successful syntactic match."""

    kind: ClassVar[ErrorKind] = ErrorKind.CUSTOM

    message: str

    @property
    def diagnostic(self) -> Diagnostic:
        return ErrorTemplate.custom(self.message)


type ParsingError = ExpectedEndOfInput | UnexpectedEndOfInput | UnexpectedSymbol | CustomError


# ============================================================================
# RESULTS
# ============================================================================


@dataclass(frozen=True, slots=True)
class Success[T]:
    """Successful parse. ``data`` may legitimately be None (e.g. optional)."""

    tag: ClassVar[Literal["success"]] = "success"

    data: T

    @property
    def ok(self) -> bool:
        return True


@dataclass(frozen=True, slots=True)
class Failure:
    """Failed parse carrying exactly one ParsingError variant."""

    tag: ClassVar[Literal["error"]] = "error"

    data: ParsingError

    @property
    def ok(self) -> bool:
        return False


type ParsingResult[T] = Success[T] | Failure


def is_success[T](result: ParsingResult[T]) -> bool:
    """Discriminate a result without unwrapping it."""
    return isinstance(result, Success)


def is_failure[T](result: ParsingResult[T]) -> bool:
    """Inverse of :func:`is_success`."""
    return isinstance(result, Failure)


# ============================================================================
# CONSTRUCTION HELPERS
# ============================================================================


def success[T](data: T) -> Success[T]:
    return Success(data)


def expected_eoi(cursor: Cursor) -> Failure:
    """Fail because the cursor still has unconsumed input."""
    return Failure(ExpectedEndOfInput(cursor.offset, cursor.tail()))


def unexpected_eoi(cursor: Cursor, expected: str) -> Failure:
    """Fail because input ran out while ``expected`` was still required."""
    return Failure(UnexpectedEndOfInput(cursor.offset, expected))


def unexpected_symbol(cursor: Cursor, expected: str) -> Failure:
    """Fail on the last consumed symbol."""
    symbol = cursor.lookbehind(1)
    return Failure(
        UnexpectedSymbol(cursor.offset, UNKNOWN_SYMBOL if symbol is None else symbol, expected)
    )


def custom(message: str) -> Failure:
    """Fail a semantic check. ``message`` is shown to users verbatim."""
    return Failure(CustomError(message))


# ============================================================================
# RENDERING
# ============================================================================


def prettify(error: ParsingError) -> str:
    """Render an error with its fixed human-readable template.

    Example:
        >>> prettify(ExpectedEndOfInput(4, " :3"))
        'Expected end of input at index 4, got  :3'
        >>> prettify(UnexpectedSymbol(1, "x", "a (full string: a)"))
        "Unexpected symbol 'x' at index 1, expected a (full string: a)"
        >>> prettify(CustomError("Snowflake is out of bounds"))
        'Snowflake is out of bounds'
    """
    return error.diagnostic.message


def format_with_context(error: ParsingError, source: str) -> str:
    """Format error with 1-based ``line:column`` and a caret under the source.

    Errors without a position (custom) render as the bare message.

    Example:
        >>> error = UnexpectedSymbol(7, "x", "- (full string: -)")
        >>> print(format_with_context(error, "/ping  xuser"))
        1:8: Unexpected symbol 'x' at index 7, expected - (full string: -)
        /ping  xuser
               ^
    """
    offset = error.diagnostic.offset
    if offset is None:
        return prettify(error)
    location = format_position(source, offset, zero_based=False)
    return f"{location}: {prettify(error)}\n{get_error_context(source, offset)}"
