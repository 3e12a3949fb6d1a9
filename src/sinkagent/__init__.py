"""sink-agent - chat command parsing.

A backtracking parser-combinator engine over a checkpointed cursor, and
a command layer built on it that turns chat messages into structured
command invocations (prefix, label, named arguments, free-text remainder).

Public API:
    command - Build the parser for one command
    Command - Parsed command invocation
    CommandRegistry - Match and dispatch message text against many commands
    prettify - Render a parse error with its fixed template

Exceptions:
    SinkAgentError - Base exception class
    CommandSyntaxError - Raised by Parser.parse_or_raise on parse failure

Submodules:
    sinkagent.syntax.parser - Combinators and primitive parsers
    sinkagent.syntax.cursor - Cursor and Position
    sinkagent.syntax.result - Tagged results and the parse error taxonomy
    sinkagent.command - Command grammar, mention tokens, registry
    sinkagent.diagnostics - Error kinds, templates, exceptions
"""

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

from .command import Command, CommandRegistry, command
from .diagnostics import CommandSyntaxError, SinkAgentError
from .syntax import prettify

try:
    __version__ = _get_version("sink-agent")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "Command",
    "CommandRegistry",
    "CommandSyntaxError",
    "SinkAgentError",
    "__version__",
    "command",
    "prettify",
]
