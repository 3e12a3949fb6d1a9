"""Parser-combinator engine.

Modules:
    core: Parser, lexer normalization, token/verbatim, literal
    combinators: few, many, optional, sequence, pick, only, unordered
    primitives: char_range, pattern, capture, character classes, numbers
    text: words, quoted strings, identifiers, greedy remainder
"""

from .combinators import attempt, few, many, only, optional, pick, sequence, unordered
from .core import Lexer, OptionalParser, Parser, literal, parser, to_parser, token, verbatim
from .primitives import (
    Capture,
    alpha,
    alphanumeric,
    capture,
    char_range,
    digit,
    integer,
    lowercase,
    nat,
    pattern,
    uppercase,
)
from .text import (
    escape,
    greedy_string,
    identifier,
    quoted,
    quoted_string,
    skip,
    string,
    whitespace,
    word,
)

__all__ = [
    "Capture",
    "Lexer",
    "OptionalParser",
    "Parser",
    "alpha",
    "alphanumeric",
    "attempt",
    "capture",
    "char_range",
    "digit",
    "escape",
    "few",
    "greedy_string",
    "identifier",
    "integer",
    "literal",
    "lowercase",
    "many",
    "nat",
    "only",
    "optional",
    "parser",
    "pattern",
    "pick",
    "quoted",
    "quoted_string",
    "sequence",
    "skip",
    "string",
    "to_parser",
    "token",
    "unordered",
    "uppercase",
    "verbatim",
    "whitespace",
    "word",
]
