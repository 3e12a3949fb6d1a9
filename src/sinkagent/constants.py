"""Shared constants for sink-agent.

Centralized configuration used across the syntax and command packages.
Every value here can be overridden per instance through keyword
arguments on the objects that consume it.

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Lexical
    "WHITESPACE",
    # Command prefixes
    "DEFAULT_BOT_MENTION",
    "SLASH_PREFIX",
    "DOLLAR_PREFIX",
    # Limits
    "MAX_INPUT_SIZE",
    "SNOWFLAKE_MAX",
    # Fallback strings
    "UNKNOWN_SYMBOL",
]

# ============================================================================
# LEXICAL
# ============================================================================

# Characters skipped automatically before every whitespace-insensitive parser.
WHITESPACE: frozenset[str] = frozenset(" \t\r\n")

# ============================================================================
# COMMAND PREFIXES
# ============================================================================

# Mention token of the bot account. A message starting with it (optionally
# followed by a single space) is addressed to the bot.
DEFAULT_BOT_MENTION: str = "<@1384657966061326406>"

SLASH_PREFIX: str = "/"
DOLLAR_PREFIX: str = "$"

# ============================================================================
# LIMITS
# ============================================================================

# Maximum message length accepted by CommandRegistry.
# Chat messages are capped at 4000 characters by the platform; anything larger
# did not come from a real message.
MAX_INPUT_SIZE: int = 4000

# Snowflake identifiers are signed 64-bit integers.
SNOWFLAKE_MAX: int = 2**63 - 1

# ============================================================================
# FALLBACK STRINGS
# ============================================================================

# Reported as the offending symbol when nothing has been consumed yet.
UNKNOWN_SYMBOL: str = "<unknown>"
