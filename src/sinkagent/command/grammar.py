"""Command grammar.

Turns chat text such as::

    /ping -user hm -reason "heh" tailing content

into a :class:`Command`::

    Command(prefix="/", label="ping",
            args={"user": "hm", "reason": "heh"},
            remaining="tailing content")

Grammar:
    command    ::= prefix label argument*
    prefix     ::= "/" | "$" | mention " "?
    label      ::= first of the command's aliases that matches, in declaration order
    argument   ::= whitespace* "-" name whitespace+ value     (any order)
    remaining  ::= whitespace* (anything)*                   (after the arguments)

Named arguments may appear in any order; each is matched exactly once.
Arguments declared with ``optional(...)`` bind None when absent.
"""

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any

from sinkagent.constants import DEFAULT_BOT_MENTION, DOLLAR_PREFIX, SLASH_PREFIX
from sinkagent.syntax.cursor import Cursor
from sinkagent.syntax.parser import (
    Lexer,
    OptionalParser,
    Parser,
    few,
    greedy_string,
    literal,
    optional,
    pick,
    sequence,
    skip,
    to_parser,
    token,
    unordered,
    verbatim,
    whitespace,
)
from sinkagent.syntax.result import ParsingResult, Success

__all__ = ["PREFIX", "Command", "command", "flag", "positional", "prefix"]


@dataclass(frozen=True, slots=True)
class Command:
    """Parsed command invocation.

    Attributes:
        prefix: Matched prefix text, verbatim (includes the space after a mention)
        label: Alias the command was invoked with
        args: Argument name -> parsed value (None for absent optional arguments)
        remaining: Free text after the arguments, verbatim ("" when absent)
    """

    prefix: str
    label: str
    args: Mapping[str, Any]
    remaining: str

    def __post_init__(self) -> None:
        object.__setattr__(self, "args", MappingProxyType(dict(self.args)))


def prefix(mention: str = DEFAULT_BOT_MENTION) -> Parser[str]:
    """Build the prefix parser for a bot whose mention token is ``mention``."""
    mentioned = verbatim(few(literal(mention), optional(literal(" ")))).map(
        "mention", lambda _, value: Success(value[0] + (value[1] or ""))
    )
    return pick(literal(SLASH_PREFIX), literal(DOLLAR_PREFIX), mentioned)


PREFIX = prefix()


def _label(aliases: Sequence[str]) -> Parser[str]:
    return pick(*(literal(alias) for alias in aliases))


def flag(name: Lexer[str]) -> Parser[str]:
    """Match ``-name`` and return the name."""
    return token(few("-", to_parser(name))).map("flag", lambda _, value: Success(value[1]))


def positional[T](name: str, kind: Lexer[T]) -> Parser[T]:
    """Match ``-name value`` and return the value."""
    gap = verbatim(sequence(whitespace), "gap")
    return few(skip, flag(name), gap, to_parser(kind)).map(
        "positional", lambda _, value: Success(value[3])
    )


def _remainder() -> OptionalParser[str]:
    return optional(
        few(skip, greedy_string).map("ws_greedy_string", lambda _, value: Success(value[1]))
    )


def command(
    aliases: Sequence[str],
    arguments: Mapping[str, Lexer[Any]] | None = None,
    *,
    prefixes: Parser[str] = PREFIX,
) -> Parser[Command]:
    """Build the parser for one command.

    Args:
        aliases: Labels the command answers to, tried in declaration order;
            an alias that is a prefix of a later one shadows it
        arguments: Argument name -> value parser; wrap in ``optional`` for
            arguments that may be omitted
        prefixes: Prefix parser (see :func:`prefix`)

    Returns:
        Parser producing a :class:`Command`

    Raises:
        ValueError: If no aliases are given

    Example:
        >>> from sinkagent.syntax.parser import string
        >>> ping = command(["ping", "pong"], {"user": string, "reason": optional(string)})
        >>> cmd = ping.parse_or_raise("/ping -user john")
        >>> cmd.label, dict(cmd.args), cmd.remaining
        ('ping', {'user': 'john', 'reason': None}, '')
    """
    if not aliases:
        msg = "A command needs at least one alias"
        raise ValueError(msg)
    declared = dict(arguments or {})
    names = tuple(declared)

    candidates: list[Parser[Any]] = []
    for name, lexer in declared.items():
        kind = to_parser(lexer)
        if isinstance(kind, OptionalParser):
            candidates.append(optional(positional(name, kind.inner)))
        else:
            candidates.append(positional(name, kind))
    candidates.append(_remainder())

    def assemble(_: Cursor, value: tuple[Any, ...]) -> ParsingResult[Command]:
        matched_prefix, label, resolved = value
        return Success(
            Command(
                prefix=matched_prefix,
                label=label,
                args=dict(zip(names, resolved[:-1], strict=True)),
                remaining=resolved[-1] or "",
            )
        )

    return few(prefixes, _label(aliases), unordered(*candidates)).map("command", assemble)
