"""Tests for slash command text parsing."""

import pytest

from cmdslack.core.commands.errors import InvocationError, MalformedQuoteError
from cmdslack.core.commands.models import CommandOption
from cmdslack.core.commands.parser import parse_invocation, unescape_slack_text


@pytest.fixture
def options() -> list[CommandOption]:
    return [
        CommandOption(name="greeting", default="hello"),
        CommandOption(name="name"),
    ]


class TestParseInvocation:
    """Test suite for parse_invocation."""

    def test_empty_text(self, options: list[CommandOption]) -> None:
        """Test empty text supplies nothing."""
        assert parse_invocation("", options) == {}

    def test_positional_values(self, options: list[CommandOption]) -> None:
        """Test bare values fill options in declaration order."""
        assert parse_invocation("hi Ada", options) == {"greeting": "hi", "name": "Ada"}

    def test_partial_positional(self, options: list[CommandOption]) -> None:
        assert parse_invocation("hi", options) == {"greeting": "hi"}

    def test_quoted_value(self, options: list[CommandOption]) -> None:
        assert parse_invocation('hi "Ada Lovelace"', options) == {
            "greeting": "hi",
            "name": "Ada Lovelace",
        }

    def test_named_value(self, options: list[CommandOption]) -> None:
        assert parse_invocation("name=Bob", options) == {"name": "Bob"}

    def test_named_then_positional(self, options: list[CommandOption]) -> None:
        """Test positional values skip options already given by name."""
        assert parse_invocation("name=Bob hey", options) == {
            "name": "Bob",
            "greeting": "hey",
        }

    def test_quoted_named_value(self, options: list[CommandOption]) -> None:
        assert parse_invocation('"name=Ada Lovelace"', options) == {
            "name": "Ada Lovelace"
        }

    def test_named_empty_value(self, options: list[CommandOption]) -> None:
        assert parse_invocation("greeting=", options) == {"greeting": ""}

    def test_unknown_key_is_positional(self, options: list[CommandOption]) -> None:
        """Test key=value with an undeclared key is treated as a plain value."""
        assert parse_invocation("color=red", options) == {"greeting": "color=red"}

    def test_value_containing_equals(self, options: list[CommandOption]) -> None:
        assert parse_invocation("name=a=b", options) == {"name": "a=b"}

    def test_last_named_value_wins(self, options: list[CommandOption]) -> None:
        assert parse_invocation("name=a name=b", options) == {"name": "b"}

    def test_too_many_values(self, options: list[CommandOption]) -> None:
        with pytest.raises(InvocationError, match="Too many arguments"):
            parse_invocation("a b c", options)

    def test_no_options_rejects_values(self) -> None:
        with pytest.raises(InvocationError):
            parse_invocation("anything", [])

    def test_unmatched_quote(self, options: list[CommandOption]) -> None:
        with pytest.raises(MalformedQuoteError):
            parse_invocation('"Ada', options)

    def test_slack_escapes_undone(self, options: list[CommandOption]) -> None:
        assert parse_invocation("a&amp;b &lt;x&gt;", options) == {
            "greeting": "a&b",
            "name": "<x>",
        }


class TestUnescapeSlackText:
    """Test suite for unescape_slack_text."""

    def test_unescapes_entities(self) -> None:
        assert unescape_slack_text("&lt;a&gt; &amp; b") == "<a> & b"

    def test_escaped_entity_literal(self) -> None:
        """Test &amp;lt; becomes &lt; and not <."""
        assert unescape_slack_text("&amp;lt;") == "&lt;"
