"""Command layer built on the combinator engine.

Exports:
    Command: Parsed command invocation
    command: Build the parser for one command
    prefix, flag, positional: Grammar building blocks
    snowflake, user_mention, channel_mention: Chat mention tokens
    CommandRegistry: Match and dispatch message text
"""

from .grammar import PREFIX, Command, command, flag, positional, prefix
from .mentions import channel_mention, snowflake, user_mention
from .registry import CommandEntry, CommandRegistry, Handler

__all__ = [
    "PREFIX",
    "Command",
    "CommandEntry",
    "CommandRegistry",
    "Handler",
    "channel_mention",
    "command",
    "flag",
    "positional",
    "prefix",
    "snowflake",
    "user_mention",
]
