"""Tests for error kinds, templates, and the exception hierarchy."""

from __future__ import annotations

import pytest

from sinkagent.diagnostics import (
    CheckpointError,
    CommandSyntaxError,
    Diagnostic,
    ErrorKind,
    ErrorTemplate,
    SinkAgentError,
)
from sinkagent.syntax.parser import literal
from sinkagent.syntax.result import UnexpectedSymbol


class TestErrorKind:
    """Test the closed error taxonomy."""

    def test_kinds_compare_equal_to_tags(self) -> None:
        assert ErrorKind.EXPECTED_EOI == "expected_eoi"
        assert ErrorKind.CUSTOM == "custom"

    def test_exactly_four_kinds(self) -> None:
        assert len(ErrorKind) == 4


class TestTemplates:
    """Test the fixed message templates."""

    def test_expected_eoi(self) -> None:
        diagnostic = ErrorTemplate.expected_eoi(3, "abc")

        assert diagnostic.message == "Expected end of input at index 3, got abc"
        assert diagnostic.offset == 3

    def test_unexpected_eoi(self) -> None:
        assert (
            ErrorTemplate.unexpected_eoi(5, "digit").message
            == "Unexpected end of input at index 5, expected digit"
        )

    def test_unexpected_symbol(self) -> None:
        assert (
            ErrorTemplate.unexpected_symbol(1, "x", "y").message
            == "Unexpected symbol 'x' at index 1, expected y"
        )

    def test_custom_passes_through(self) -> None:
        diagnostic = ErrorTemplate.custom("nope")

        assert diagnostic.message == "nope"
        assert diagnostic.offset is None

    def test_hint_rendered(self) -> None:
        diagnostic = Diagnostic(ErrorKind.CUSTOM, "Bad", hint="Try again")

        assert diagnostic.format_error() == "Bad (hint: Try again)"


class TestExceptions:
    """Test the exception hierarchy."""

    def test_plain_message(self) -> None:
        error = SinkAgentError("boom")

        assert str(error) == "boom"
        assert error.diagnostic is None

    def test_diagnostic_message(self) -> None:
        error = SinkAgentError(ErrorTemplate.custom("boom"))

        assert str(error) == "boom"
        assert error.diagnostic is not None

    def test_syntax_error_keeps_parse_error(self) -> None:
        with pytest.raises(CommandSyntaxError) as info:
            literal("ab").parse_or_raise("ax")

        assert isinstance(info.value.error, UnexpectedSymbol)
        assert str(info.value) == "Unexpected symbol 'x' at index 2, expected b (full string: ab)"

    def test_checkpoint_error_is_sink_agent_error(self) -> None:
        error = CheckpointError(ErrorTemplate.unbalanced_checkpoint("finish"))

        assert isinstance(error, SinkAgentError)
        assert "finish()" in str(error)
        assert "hint:" in str(error)
