"""Error message templates.

Centralized error message templates for testable, consistent error messages.
The four parse templates are part of the output contract and must not change.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, ErrorKind


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    """

    @staticmethod
    def expected_eoi(offset: int, remaining: str) -> Diagnostic:
        """Trailing input left after a parse that required full consumption.

        Args:
            offset: Index of the first unconsumed symbol
            remaining: The unconsumed input

        Returns:
            Diagnostic for EXPECTED_EOI
        """
        msg = f"Expected end of input at index {offset}, got {remaining}"
        return Diagnostic(kind=ErrorKind.EXPECTED_EOI, message=msg, offset=offset)

    @staticmethod
    def unexpected_eoi(offset: int, expected: str) -> Diagnostic:
        """Input ended where more was required.

        Args:
            offset: Index where input ran out
            expected: Description of what was required

        Returns:
            Diagnostic for UNEXPECTED_EOI
        """
        msg = f"Unexpected end of input at index {offset}, expected {expected}"
        return Diagnostic(kind=ErrorKind.UNEXPECTED_EOI, message=msg, offset=offset)

    @staticmethod
    def unexpected_symbol(offset: int, symbol: str, expected: str) -> Diagnostic:
        """A concrete symbol did not match.

        Args:
            offset: Index just past the offending symbol
            symbol: The last consumed symbol
            expected: Description of what was required

        Returns:
            Diagnostic for UNEXPECTED_SYMBOL
        """
        msg = f"Unexpected symbol '{symbol}' at index {offset}, expected {expected}"
        return Diagnostic(kind=ErrorKind.UNEXPECTED_SYMBOL, message=msg, offset=offset)

    @staticmethod
    def custom(message: str) -> Diagnostic:
        """Semantic validation failure. The message passes through verbatim."""
        return Diagnostic(kind=ErrorKind.CUSTOM, message=message)

    @staticmethod
    def number_too_long(digits: int) -> str:
        """Message for a digit run too long to convert to an int."""
        return f"Number is too long ({digits:,} digits)"

    @staticmethod
    def snowflake_out_of_bounds() -> str:
        """Message for a snowflake identifier above the signed 64-bit maximum."""
        return "Snowflake is out of bounds"

    @staticmethod
    def unbalanced_checkpoint(operation: str) -> Diagnostic:
        """Cursor finish/rollback called with no open checkpoint.

        Args:
            operation: Name of the cursor method that was called

        Returns:
            Diagnostic for a cursor contract violation
        """
        msg = f"Cursor.{operation}() called without a matching commit()"
        return Diagnostic(
            kind=ErrorKind.CUSTOM,
            message=msg,
            hint="Every commit() must be paired with exactly one finish() or rollback()",
        )

    @staticmethod
    def input_too_large(size: int, limit: int) -> str:
        """Message for input rejected before parsing."""
        return (
            f"Input size ({size:,} characters) exceeds maximum ({limit:,} characters). "
            "Configure max_input_size in CommandRegistry constructor to increase limit."
        )

    @staticmethod
    def duplicate_command(name: str) -> str:
        """Message for a command name registered twice."""
        return f"Command '{name}' is already registered"

    @staticmethod
    def invalid_lexer(value: object) -> str:
        """Message for a value that cannot be turned into a parser."""
        return f"Cannot build a parser from {type(value).__name__}: {value!r}"
