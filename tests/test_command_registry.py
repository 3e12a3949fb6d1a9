"""Tests for the command registry."""

from __future__ import annotations

import importlib
import logging

import pytest

from sinkagent.command import Command, CommandRegistry, user_mention
from sinkagent.syntax.parser import optional, string
from sinkagent.syntax.result import prettify

# The package re-exports the ``command`` function, which shadows the submodule attribute.
registry_module = importlib.import_module("sinkagent.command.registry")


@pytest.fixture
def registry() -> CommandRegistry:
    registry = CommandRegistry(mention="<@1>")

    @registry.command("ping", "pong", user=string, reason=optional(string))
    def ping(cmd: Command) -> str:
        return f"pinging {cmd.args['user']}"

    registry.register("ban", arguments={"target": user_mention})
    return registry


# ============================================================================
# REGISTRATION
# ============================================================================


class TestRegistration:
    """Test registering commands."""

    def test_decorator_uses_function_name(self, registry: CommandRegistry) -> None:
        assert "ping" in registry
        assert len(registry) == 2

    def test_default_alias_is_name(self, registry: CommandRegistry) -> None:
        entry = next(entry for entry in registry if entry.name == "ban")

        assert entry.aliases == ("ban",)
        assert entry.handler is None

    def test_duplicate_rejected(self, registry: CommandRegistry) -> None:
        with pytest.raises(ValueError, match="already registered"):
            registry.register("ban")

    def test_registration_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG, logger="sinkagent.command.registry"):
            CommandRegistry().register("help")

        assert "Registered command: help" in caplog.text


# ============================================================================
# MATCHING
# ============================================================================


class TestMatch:
    """Test matching message text."""

    def test_match(self, registry: CommandRegistry) -> None:
        cmd, errors = registry.match("/ban -target <@99>")

        assert errors == ()
        assert cmd == Command("/", "ban", {"target": 99}, "")

    def test_configured_mention_prefix(self, registry: CommandRegistry) -> None:
        cmd, _ = registry.match("<@1> pong -user x")

        assert cmd is not None
        assert cmd.prefix == "<@1> "
        assert cmd.label == "pong"

    def test_text_without_prefix_ignored(self, registry: CommandRegistry) -> None:
        assert registry.match("hello everyone") == (None, ())

    def test_failures_collected(self, registry: CommandRegistry) -> None:
        cmd, errors = registry.match("/ping -reason x")

        assert cmd is None
        assert len(errors) == 2
        assert all(prettify(error) for error in errors)

    def test_failures_logged(
        self, registry: CommandRegistry, caplog: pytest.LogCaptureFixture
    ) -> None:
        with caplog.at_level(logging.INFO, logger="sinkagent.command.registry"):
            registry.match("/unknown")

        assert "No command matched" in caplog.text

    def test_failure_summary_rendered_only_when_logged(
        self,
        registry: CommandRegistry,
        caplog: pytest.LogCaptureFixture,
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        """Errors are only prettified for the log when INFO is enabled."""
        rendered: list[object] = []

        def record(error: object) -> str:
            rendered.append(error)
            return "error"

        monkeypatch.setattr(registry_module, "prettify", record)

        with caplog.at_level(logging.WARNING, logger="sinkagent.command.registry"):
            registry.match("/unknown")
        assert rendered == []

        with caplog.at_level(logging.INFO, logger="sinkagent.command.registry"):
            registry.match("/unknown")
        assert len(rendered) == 2

    def test_oversized_input_rejected(self, caplog: pytest.LogCaptureFixture) -> None:
        registry = CommandRegistry(max_input_size=10)

        with caplog.at_level(logging.WARNING, logger="sinkagent.command.registry"):
            with pytest.raises(ValueError, match="exceeds maximum"):
                registry.match("/" + "x" * 20)
        assert "Rejected message" in caplog.text

    def test_size_limit_disabled(self) -> None:
        registry = CommandRegistry(max_input_size=0)
        registry.register("echo")

        cmd, _ = registry.match("/echo " + "x" * 10_000)

        assert cmd is not None
        assert len(cmd.remaining) == 10_000

    def test_default_limit(self) -> None:
        assert CommandRegistry().max_input_size == 4000


# ============================================================================
# DISPATCH
# ============================================================================


class TestDispatch:
    """Test handler invocation."""

    def test_handler_called(self, registry: CommandRegistry) -> None:
        assert registry.dispatch("/pong -user hm") == ("pinging hm", ())

    def test_entry_without_handler_returns_command(self, registry: CommandRegistry) -> None:
        result, errors = registry.dispatch("/ban -target <@5>")

        assert errors == ()
        assert isinstance(result, Command)

    def test_no_match(self, registry: CommandRegistry) -> None:
        result, errors = registry.dispatch("/nothing")

        assert result is None
        assert len(errors) == 2

    def test_handler_exceptions_propagate(self) -> None:
        registry = CommandRegistry()

        @registry.command("boom")
        def boom(cmd: Command) -> None:
            raise RuntimeError("handler failed")

        with pytest.raises(RuntimeError, match="handler failed"):
            registry.dispatch("/boom")
