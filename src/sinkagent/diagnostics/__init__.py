"""Diagnostic system for sink-agent errors.

Provides the closed error taxonomy, fixed message templates, and the
exception hierarchy used outside the parsing engine.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, ErrorKind
from .errors import CheckpointError, CommandSyntaxError, SinkAgentError
from .templates import ErrorTemplate

__all__ = [
    "CheckpointError",
    "CommandSyntaxError",
    "Diagnostic",
    "ErrorKind",
    "ErrorTemplate",
    "SinkAgentError",
]
