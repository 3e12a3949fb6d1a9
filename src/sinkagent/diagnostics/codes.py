"""Diagnostic kinds and data structures.

Defines the closed set of parse error kinds and the Diagnostic record
every error is rendered into.

Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import StrEnum

__all__ = ["Diagnostic", "ErrorKind"]


class ErrorKind(StrEnum):
    """Closed taxonomy of parse errors.

    Inherits from ``StrEnum`` so the kind compares equal to its tag string
    (``ErrorKind.CUSTOM == "custom"``) and serializes without ``.value``.

    Kinds:
        EXPECTED_EOI: Trailing input after a parse that required full consumption
        UNEXPECTED_EOI: Input ended where more was required
        UNEXPECTED_SYMBOL: A concrete symbol did not match
        CUSTOM: Semantic validation failure after a syntactic match
    """

    EXPECTED_EOI = "expected_eoi"
    UNEXPECTED_EOI = "unexpected_eoi"
    UNEXPECTED_SYMBOL = "unexpected_symbol"
    CUSTOM = "custom"


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Rendered, human-readable description of an error.

    Attributes:
        kind: Error kind
        message: Fixed-template message (see ErrorTemplate)
        offset: Index into the input where the error was detected, if known
        hint: Optional suggestion for the person who typed the command
    """

    kind: ErrorKind
    message: str
    offset: int | None = None
    hint: str | None = None

    def format_error(self) -> str:
        """Format the diagnostic as a single line.

        Example:
            >>> Diagnostic(ErrorKind.CUSTOM, "Snowflake is out of bounds").format_error()
            'Snowflake is out of bounds'
            >>> Diagnostic(ErrorKind.CUSTOM, "Bad value", hint="Use digits").format_error()
            'Bad value (hint: Use digits)'
        """
        if self.hint:
            return f"{self.message} (hint: {self.hint})"
        return self.message
