"""sink-agent exception hierarchy.

The parsing engine never raises for ordinary parse failures; it returns
tagged results. Exceptions are reserved for programming errors and for
callers that explicitly ask for raise-on-failure semantics.

Python 3.13+. Zero external dependencies.
"""

from typing import Any

from .codes import Diagnostic


class SinkAgentError(Exception):
    """Base exception for all sink-agent errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize SinkAgentError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error())
        else:
            self.diagnostic = None
            super().__init__(message)


class CommandSyntaxError(SinkAgentError):
    """Command text did not match the grammar.

    Raised by ``Parser.parse_or_raise``. Carries the original parse error
    so callers can still inspect its kind and offset.

    Attributes:
        error: The ParsingError returned by the parser
    """

    def __init__(self, error: Any) -> None:
        """Initialize CommandSyntaxError.

        Args:
            error: ParsingError variant produced by the failing parser
        """
        super().__init__(error.diagnostic)
        self.error = error


class CheckpointError(SinkAgentError):
    """Cursor checkpoint stack used out of balance.

    Indicates a bug in a combinator, never bad user input.
    """
