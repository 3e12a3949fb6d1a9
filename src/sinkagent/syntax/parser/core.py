"""Combinator core.

A parser is a pure function ``Cursor -> ParsingResult[T]`` wrapped in a
:class:`Parser`, which adds a diagnostic tag, the ``map`` transform, an
optional reference to the parser it was built on, and automatic
whitespace skipping.

Architecture:
    Grammars are built once (usually at import time) and reused for every
    parse. All per-parse state lives in the :class:`~sinkagent.syntax.cursor.Cursor`,
    so a Parser is immutable and safe to share.

Whitespace:
    Every Parser skips contiguous whitespace before matching, which makes
    grammars whitespace-insensitive between tokens. :func:`token` and
    :func:`verbatim` suspend skipping for everything nested inside them,
    which is how character-level rules (words, quoted strings, numbers)
    keep their interiors intact.

Lexers:
    Anywhere a parser is accepted, a plain string (literal), a raw parse
    function, or an existing Parser may be given instead. Combinators
    normalize them with :func:`to_parser` when the grammar is built.
"""

from collections.abc import Callable
from typing import Any

from sinkagent.diagnostics import CommandSyntaxError, ErrorTemplate
from sinkagent.syntax.cursor import Cursor
from sinkagent.syntax.result import Failure, ParsingResult, Success, unexpected_symbol

__all__ = [
    "Lexer",
    "OptionalParser",
    "ParseFn",
    "Parser",
    "literal",
    "parser",
    "to_parser",
    "token",
    "verbatim",
]

type ParseFn[T] = Callable[[Cursor], ParsingResult[T]]


class Parser[T]:
    """Named, composable parse function.

    Attributes:
        parse_fn: Raw parse function
        tag: Diagnostic name (used in error descriptions and introspection)
        wrapped: Parser this one was built directly on top of, if any
        skips_whitespace: Skip leading whitespace before running parse_fn

    Example:
        >>> hello = literal("hello")
        >>> shout = hello.map("shout", lambda _, value: Success(value.upper()))
        >>> shout.parse("  hello")
        Success(data='HELLO')
        >>> shout.wrapped is hello
        True
    """

    __slots__ = ("parse_fn", "skips_whitespace", "tag", "wrapped")

    def __init__(
        self,
        parse_fn: ParseFn[T],
        tag: str = "",
        *,
        wrapped: "Parser[Any] | None" = None,
        skips_whitespace: bool = True,
    ) -> None:
        self.parse_fn = parse_fn
        self.tag = tag
        self.wrapped = wrapped
        self.skips_whitespace = skips_whitespace

    def __setattr__(self, name: str, value: object) -> None:
        if hasattr(self, name):
            msg = f"Parser is immutable, cannot reassign '{name}'"
            raise AttributeError(msg)
        object.__setattr__(self, name, value)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(tag={self.tag!r})"

    def __call__(self, cursor: Cursor) -> ParsingResult[T]:
        if self.skips_whitespace and not cursor.is_verbatim:
            cursor.skip_whitespace()
        return self.parse_fn(cursor)

    def map[U](self, tag: str, fn: Callable[[Cursor, T], ParsingResult[U]]) -> "Parser[U]":
        """Build a parser that transforms this parser's successful value.

        ``fn`` runs only on success and may itself fail (semantic
        validation); failures of this parser propagate untouched.

        Args:
            tag: Diagnostic name of the new parser
            fn: ``(cursor, value) -> ParsingResult[U]``

        Returns:
            New parser whose ``wrapped`` is this parser
        """
        inner = self

        def parse_mapped(cursor: Cursor) -> ParsingResult[U]:
            result = inner(cursor)
            if isinstance(result, Success):
                return fn(cursor, result.data)
            return result

        return Parser(parse_mapped, tag, wrapped=inner, skips_whitespace=False)

    def parse(self, text: str) -> ParsingResult[T]:
        """Run against a fresh cursor over ``text``."""
        return self(Cursor(text))

    def parse_or_raise(self, text: str) -> T:
        """Run against ``text`` and return the value.

        Raises:
            CommandSyntaxError: If the parse fails
        """
        result = self.parse(text)
        if isinstance(result, Failure):
            raise CommandSyntaxError(result.data)
        return result.data


class OptionalParser[T](Parser[T | None]):
    """Parser produced by ``optional``; remembers the parser it made optional."""

    __slots__ = ()

    @property
    def inner(self) -> Parser[T]:
        """The parser that was made optional."""
        return self.wrapped  # type: ignore[return-value]


type Lexer[T] = str | ParseFn[T] | Parser[T]


def parser[T](parse_fn: ParseFn[T], tag: str | None = None) -> Parser[T]:
    """Lift a raw parse function into a whitespace-skipping Parser."""
    return Parser(parse_fn, tag if tag is not None else getattr(parse_fn, "__name__", ""))


def to_parser[T](lexer: Lexer[T]) -> Parser[T]:
    """Normalize a lexer into a Parser.

    Raises:
        TypeError: If ``lexer`` is neither a string, a callable, nor a Parser
    """
    match lexer:
        case Parser():
            return lexer
        case str():
            return literal(lexer)  # type: ignore[return-value]
        case _ if callable(lexer):
            return parser(lexer)
    raise TypeError(ErrorTemplate.invalid_lexer(lexer))


def token[T](lexer: Lexer[T], tag: str | None = None) -> Parser[T]:
    """Match ``lexer`` as one token.

    Leading whitespace is skipped once; inside the token nothing skips.
    """
    inner = to_parser(lexer)

    def parse_token(cursor: Cursor) -> ParsingResult[T]:
        with cursor.verbatim():
            return inner(cursor)

    return Parser(parse_token, tag if tag is not None else inner.tag, wrapped=inner)


def verbatim[T](lexer: Lexer[T], tag: str | None = None) -> Parser[T]:
    """Match ``lexer`` exactly where the cursor stands, with no whitespace skipping."""
    inner = to_parser(lexer)

    def parse_verbatim(cursor: Cursor) -> ParsingResult[T]:
        with cursor.verbatim():
            return inner(cursor)

    return Parser(
        parse_verbatim,
        tag if tag is not None else inner.tag,
        wrapped=inner,
        skips_whitespace=False,
    )


def literal(text: str) -> Parser[str]:
    """Match ``text`` exactly, one symbol at a time.

    Any mismatch, running out of input included, is an unexpected symbol:
    the last symbol consumed is reported. The empty literal always
    succeeds without consuming anything.
    """
    if not text:
        return Parser(lambda _: Success(text), text, skips_whitespace=False)

    def parse_literal(cursor: Cursor) -> ParsingResult[str]:
        for char in text:
            if cursor.advance() != char:
                return unexpected_symbol(cursor, f"{char} (full string: {text})")
        return Success(text)

    return Parser(parse_literal, text)
