"""Composite combinators.

Builds new parsers out of existing ones:

- ``few``: heterogeneous sequence, fail-fast
- ``many``: zero or more, never fails
- ``optional``: zero or one, never fails
- ``sequence``: one or more
- ``pick``: ordered alternation, first match wins
- ``only``: require the whole input to be consumed
- ``unordered``: every parser exactly once, in any order

Backtracking:
    Speculative attempts run between ``cursor.commit()`` and either
    ``cursor.finish()`` (keep) or ``cursor.rollback()`` (undo). ``few``
    does not roll back: sub-results consumed before a failure stay
    consumed, and the enclosing combinator decides whether to undo them.
"""

from typing import Any

from sinkagent.syntax.cursor import Cursor
from sinkagent.syntax.parser.core import Lexer, OptionalParser, Parser, to_parser
from sinkagent.syntax.result import (
    ParsingResult,
    Success,
    expected_eoi,
    unexpected_eoi,
    unexpected_symbol,
)

__all__ = [
    "attempt",
    "few",
    "many",
    "only",
    "optional",
    "pick",
    "sequence",
    "unordered",
]


def _attempt[T](parser: Parser[T], cursor: Cursor) -> ParsingResult[T]:
    """Run ``parser`` under a checkpoint; undo everything it consumed on failure."""
    cursor.commit()
    result = parser(cursor)
    if isinstance(result, Success):
        cursor.finish()
    else:
        cursor.rollback()
    return result


def attempt[T](lexer: Lexer[T]) -> Parser[T]:
    """Parser form of a checkpointed attempt: fails without consuming input."""
    inner = to_parser(lexer)
    return Parser(lambda cursor: _attempt(inner, cursor), inner.tag, wrapped=inner)


def few(*lexers: Lexer[Any]) -> Parser[tuple[Any, ...]]:
    """Run each parser in order and collect their values into a tuple.

    The first failure is returned unchanged.
    """
    parsers = tuple(to_parser(lexer) for lexer in lexers)

    def parse_few(cursor: Cursor) -> ParsingResult[tuple[Any, ...]]:
        output: list[Any] = []
        for parser in parsers:
            result = parser(cursor)
            if not isinstance(result, Success):
                return result
            output.append(result.data)
        return Success(tuple(output))

    return Parser(parse_few, "few")


def many[T](lexer: Lexer[T]) -> Parser[list[T]]:
    """Match ``lexer`` as many times as possible (possibly zero)."""
    inner = to_parser(lexer)

    def parse_many(cursor: Cursor) -> ParsingResult[list[T]]:
        output: list[T] = []
        while True:
            start = cursor.offset
            result = _attempt(inner, cursor)
            if not isinstance(result, Success):
                break
            # A match that consumed nothing would match forever.
            if cursor.offset == start:
                break
            output.append(result.data)
        return Success(output)

    return Parser(parse_many, "many", wrapped=inner)


def optional[T](lexer: Lexer[T]) -> OptionalParser[T]:
    """Match ``lexer`` if possible, otherwise succeed with None without consuming."""
    inner = to_parser(lexer)

    def parse_optional(cursor: Cursor) -> ParsingResult[T | None]:
        result = _attempt(inner, cursor)
        if isinstance(result, Success):
            return result
        return Success(None)

    return OptionalParser(parse_optional, "optional", wrapped=inner)


def sequence[T](lexer: Lexer[T]) -> Parser[list[T]]:
    """Match ``lexer`` one or more times."""
    inner = to_parser(lexer)
    return few(inner, many(inner)).map(
        "sequence", lambda _, value: Success([value[0], *value[1]])
    )


def pick(*lexers: Lexer[Any]) -> Parser[Any]:
    """Try each alternative in declaration order; the first success wins.

    Order is the tie-break: ``pick("x", "xabc")`` never reaches ``"xabc"``
    on input ``"xabc"``.
    """
    parsers = tuple(to_parser(lexer) for lexer in lexers)
    expected = "one of " + ", ".join(repr(parser.tag) for parser in parsers)

    def parse_pick(cursor: Cursor) -> ParsingResult[Any]:
        for parser in parsers:
            result = _attempt(parser, cursor)
            if isinstance(result, Success):
                return result
        return unexpected_eoi(cursor, expected)

    return Parser(parse_pick, "pick")


def only[T](lexer: Lexer[T]) -> Parser[T]:
    """Match ``lexer`` and require that nothing is left afterwards."""
    inner = to_parser(lexer)

    def parse_only(cursor: Cursor) -> ParsingResult[T]:
        result = _attempt(inner, cursor)
        if not isinstance(result, Success):
            return result
        if cursor.tail():
            return expected_eoi(cursor)
        return result

    return Parser(parse_only, "only", wrapped=inner)


def unordered(*lexers: Lexer[Any]) -> Parser[tuple[Any, ...]]:
    """Match every parser exactly once, in any order.

    Returns the values indexed by declaration order, whatever order they
    appeared in the input.

    Algorithm:
        Scan the unresolved parsers in declaration order, each under its
        own checkpoint. The first one that matches is resolved and the
        scan restarts from the top of the (now smaller) unresolved set.
        A full scan that resolves nothing fails the whole combinator.
        At most n scans of at most n attempts: O(n^2) attempts.

    Ambiguity:
        When two unresolved parsers could match the same input, the one
        declared first wins.
    """
    parsers = tuple(to_parser(lexer) for lexer in lexers)

    def parse_unordered(cursor: Cursor) -> ParsingResult[tuple[Any, ...]]:
        output: list[Any] = [None] * len(parsers)
        unresolved = list(range(len(parsers)))
        while unresolved:
            for index in unresolved:
                result = _attempt(parsers[index], cursor)
                if isinstance(result, Success):
                    output[index] = result.data
                    unresolved.remove(index)
                    break
            else:
                return unexpected_symbol(cursor, "one of the remaining patterns")
        return Success(tuple(output))

    return Parser(parse_unordered, "unordered")
