"""Syntax layer: cursor, parse results, and the combinator engine.

Exports:
    Cursor, Position: Checkpointed read position over the input
    Success, Failure, ParsingError variants: Tagged parse results
    prettify, format_with_context: Error rendering

Python 3.13+. Zero external dependencies.
"""

from .cursor import Cursor, Position
from .result import (
    CustomError,
    ExpectedEndOfInput,
    Failure,
    ParsingError,
    ParsingResult,
    Success,
    UnexpectedEndOfInput,
    UnexpectedSymbol,
    format_with_context,
    is_failure,
    is_success,
    prettify,
)

__all__ = [
    "Cursor",
    "CustomError",
    "ExpectedEndOfInput",
    "Failure",
    "ParsingError",
    "ParsingResult",
    "Position",
    "Success",
    "UnexpectedEndOfInput",
    "UnexpectedSymbol",
    "format_with_context",
    "is_failure",
    "is_success",
    "prettify",
]
