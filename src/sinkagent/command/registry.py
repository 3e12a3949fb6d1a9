"""Command registry and dispatch.

Holds the grammars of every known command, built once at registration,
and matches raw message text against them. This is the surface a chat
client integration calls for every incoming message.

Matching:
    1. Input larger than ``max_input_size`` is rejected before parsing.
    2. Text that does not start with a command prefix is not addressed
       to the bot: no command, no errors.
    3. Commands are tried in registration order; the first match wins.
    4. If nothing matches, every command's parse error is returned so the
       caller can render them (see :func:`sinkagent.syntax.result.prettify`).

Thread Safety:
    Registration is not synchronized; register everything before serving
    messages. Matching is safe from any number of threads because grammars
    are immutable and every parse uses its own cursor.
"""

import logging
from collections.abc import Callable, Iterator, Mapping, Sequence
from dataclasses import dataclass
from typing import Any

from sinkagent.command.grammar import Command, command, prefix
from sinkagent.constants import DEFAULT_BOT_MENTION, MAX_INPUT_SIZE
from sinkagent.diagnostics import ErrorTemplate
from sinkagent.syntax.parser import Lexer, Parser
from sinkagent.syntax.result import ParsingError, Success, prettify

__all__ = ["CommandEntry", "CommandRegistry", "Handler"]

logger = logging.getLogger(__name__)

type Handler = Callable[[Command], Any]


@dataclass(frozen=True, slots=True)
class CommandEntry:
    """A registered command.

    Attributes:
        name: Unique registry key
        aliases: Labels the command answers to
        grammar: Compiled command parser
        handler: Called with the parsed Command by ``dispatch`` (optional)
    """

    name: str
    aliases: tuple[str, ...]
    grammar: Parser[Command]
    handler: Handler | None = None


class CommandRegistry:
    """Registry of command grammars.

    Example:
        >>> from sinkagent.syntax.parser import optional, string
        >>> registry = CommandRegistry()
        >>> @registry.command("ping", "pong", user=string, reason=optional(string))
        ... def ping(cmd):
        ...     return f"pinging {cmd.args['user']}"
        >>> registry.dispatch("/pong -user hm")
        ('pinging hm', ())
        >>> registry.dispatch("just chatting")
        (None, ())

    Attributes:
        max_input_size: Longest accepted message (0 disables the limit)
    """

    __slots__ = ("_entries", "_max_input_size", "_prefix")

    def __init__(
        self,
        *,
        mention: str | None = None,
        max_input_size: int | None = None,
    ) -> None:
        """Initialize the registry.

        Args:
            mention: Bot mention token accepted as a prefix
                (default: DEFAULT_BOT_MENTION)
            max_input_size: Longest accepted message in characters
                (default: MAX_INPUT_SIZE). Set to 0 to disable the limit.
        """
        self._prefix = prefix(mention if mention is not None else DEFAULT_BOT_MENTION)
        self._max_input_size = (
            max_input_size if max_input_size is not None else MAX_INPUT_SIZE
        )
        self._entries: dict[str, CommandEntry] = {}

    @property
    def max_input_size(self) -> int:
        """Longest accepted message in characters."""
        return self._max_input_size

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, name: object) -> bool:
        return name in self._entries

    def __iter__(self) -> Iterator[CommandEntry]:
        return iter(self._entries.values())

    def register(
        self,
        name: str,
        aliases: Sequence[str] | None = None,
        arguments: Mapping[str, Lexer[Any]] | None = None,
        handler: Handler | None = None,
    ) -> CommandEntry:
        """Compile and store a command grammar.

        Args:
            name: Unique registry key
            aliases: Labels the command answers to (default: ``(name,)``)
            arguments: Argument name -> value parser
            handler: Callable invoked by ``dispatch``

        Returns:
            The stored CommandEntry

        Raises:
            ValueError: If ``name`` is already registered
        """
        if name in self._entries:
            raise ValueError(ErrorTemplate.duplicate_command(name))
        labels = tuple(aliases) if aliases else (name,)
        entry = CommandEntry(
            name=name,
            aliases=labels,
            grammar=command(labels, arguments, prefixes=self._prefix),
            handler=handler,
        )
        self._entries[name] = entry
        logger.debug("Registered command: %s (aliases: %s)", name, ", ".join(labels))
        return entry

    def command(self, *aliases: str, **arguments: Lexer[Any]) -> Callable[[Handler], Handler]:
        """Decorator form of :meth:`register`; the function name is the registry key."""

        def decorator(handler: Handler) -> Handler:
            name = getattr(handler, "__name__", aliases[0] if aliases else "")
            self.register(name, aliases or None, arguments, handler)
            return handler

        return decorator

    def _resolve(
        self, text: str
    ) -> tuple[CommandEntry | None, Command | None, tuple[ParsingError, ...]]:
        if self._max_input_size > 0 and len(text) > self._max_input_size:
            logger.warning(
                "Rejected message of %d characters (limit %d)", len(text), self._max_input_size
            )
            raise ValueError(ErrorTemplate.input_too_large(len(text), self._max_input_size))

        if not isinstance(self._prefix.parse(text), Success):
            logger.debug("Ignoring message without command prefix")
            return None, None, ()

        errors: list[ParsingError] = []
        for entry in self._entries.values():
            result = entry.grammar.parse(text)
            if isinstance(result, Success):
                logger.debug("Matched command '%s' as '%s'", entry.name, result.data.label)
                return entry, result.data, ()
            errors.append(result.data)

        if logger.isEnabledFor(logging.INFO):
            logger.info(
                "No command matched %r: %s", text, "; ".join(prettify(error) for error in errors)
            )
        return None, None, tuple(errors)

    def match(self, text: str) -> tuple[Command | None, tuple[ParsingError, ...]]:
        """Parse ``text`` against every registered command.

        Returns:
            ``(command, ())`` on a match, ``(None, errors)`` otherwise.
            Text without a command prefix yields ``(None, ())``.

        Raises:
            ValueError: If ``text`` exceeds max_input_size
        """
        _, parsed, errors = self._resolve(text)
        return parsed, errors

    def dispatch(self, text: str) -> tuple[Any, tuple[ParsingError, ...]]:
        """Match ``text`` and call the matched command's handler.

        Commands registered without a handler return the parsed Command.
        Exceptions raised by handlers propagate to the caller.

        Returns:
            ``(handler result, ())`` on a match, ``(None, errors)`` otherwise

        Raises:
            ValueError: If ``text`` exceeds max_input_size
        """
        entry, parsed, errors = self._resolve(text)
        if entry is None or parsed is None:
            return None, errors
        if entry.handler is None:
            return parsed, ()
        return entry.handler(parsed), ()
