"""Chat mention tokens.

Snowflakes are the platform's 64-bit numeric identifiers. Mentions embed
them in message text as ``<@123>`` (user) or ``<#123>`` (channel).

The bound check is a semantic validation layered on a successful digit
run, so an oversized number is reported as a custom error, not as a
syntax error. Digit runs are measured before conversion, so arbitrarily
long input is rejected the same way.
"""

from sinkagent.constants import SNOWFLAKE_MAX
from sinkagent.diagnostics import ErrorTemplate
from sinkagent.syntax.cursor import Cursor
from sinkagent.syntax.parser import digit, few, sequence, token
from sinkagent.syntax.result import ParsingResult, Success, custom

__all__ = ["channel_mention", "snowflake", "user_mention"]

_SNOWFLAKE_DIGITS = len(str(SNOWFLAKE_MAX))


def _check_snowflake(_: Cursor, digits: list[str]) -> ParsingResult[int]:
    significant = "".join(digits).lstrip("0") or "0"
    if len(significant) > _SNOWFLAKE_DIGITS or int(significant) > SNOWFLAKE_MAX:
        return custom(ErrorTemplate.snowflake_out_of_bounds())
    return Success(int(significant))


snowflake = token(sequence(digit)).map("snowflake", _check_snowflake)

user_mention = token(few("<@", snowflake, ">")).map(
    "user_mention", lambda _, value: Success(value[1])
)

channel_mention = token(few("<#", snowflake, ">")).map(
    "channel_mention", lambda _, value: Success(value[1])
)
