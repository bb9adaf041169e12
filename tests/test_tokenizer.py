"""Tests for command template tokenization."""

import pytest

from cmdslack.core.commands.errors import MalformedQuoteError
from cmdslack.core.commands.formatter import render_args
from cmdslack.core.commands.tokenizer import tokenize


class TestTokenize:
    """Test suite for tokenize."""

    def test_simple_words(self) -> None:
        """Test whitespace-separated words become separate tokens."""
        assert tokenize("echo hello world") == ["echo", "hello", "world"]

    def test_quoted_token(self) -> None:
        """Test a double-quoted span is one token without its quotes."""
        assert tokenize('echo "hello world" foo') == ["echo", "hello world", "foo"]

    def test_escaped_space(self) -> None:
        """Test an escaped space stays inside an unquoted token."""
        assert tokenize(r"a\ b c") == ["a b", "c"]

    def test_multiple_escaped_spaces(self) -> None:
        """Test every escaped space in an unquoted token is unescaped."""
        assert tokenize(r"a\ b\ c d") == ["a b c", "d"]

    def test_empty_template(self) -> None:
        """Test empty template yields an empty vector."""
        assert tokenize("") == []

    def test_whitespace_only(self) -> None:
        """Test whitespace-only template yields an empty vector."""
        assert tokenize("   \t\n ") == []

    def test_collapses_repeated_whitespace(self) -> None:
        """Test runs of whitespace separate tokens without empty tokens."""
        assert tokenize("  ls   -la\t/tmp  ") == ["ls", "-la", "/tmp"]

    def test_empty_quoted_token(self) -> None:
        """Test empty quotes produce an empty argument."""
        assert tokenize('echo ""') == ["echo", ""]

    def test_escaped_quote_in_quoted_token(self) -> None:
        """Test an escaped quote inside quotes is unescaped."""
        assert tokenize(r'echo "say \"hi"') == ["echo", 'say "hi']

    def test_escaped_backslash_in_quoted_token(self) -> None:
        """Test an escaped backslash inside quotes is unescaped."""
        assert tokenize(r'"a\\b"') == ["a\\b"]

    def test_only_first_escape_unescaped(self) -> None:
        """Test only the first escape sequence of a quoted token is unescaped."""
        assert tokenize(r'"\"a\" b"') == ['"a\\" b']

    def test_unquoted_backslash_kept(self) -> None:
        """Test backslashes other than before a space are kept in unquoted tokens."""
        assert tokenize(r"C:\path\to") == [r"C:\path\to"]

    def test_placeholders_kept(self) -> None:
        """Test placeholders pass through tokenization untouched."""
        assert tokenize('echo {greeting} "to {name}"') == [
            "echo",
            "{greeting}",
            "to {name}",
        ]

    def test_quote_inside_unquoted_token(self) -> None:
        """Test a quote in the middle of a token does not start a quoted span."""
        assert tokenize('say"hi there') == ['say"hi', "there"]

    def test_trailing_quote_after_text(self) -> None:
        """Test key="value" is rejected since the token only ends with a quote."""
        with pytest.raises(MalformedQuoteError):
            tokenize('key="value"')

    def test_adjacent_quoted_spans(self) -> None:
        """Test adjacent quoted spans form one token stripped of its outer quotes."""
        assert tokenize('"a""b"') == ['a""b']

    def test_unterminated_quote(self) -> None:
        """Test an unterminated quote is a hard error."""
        with pytest.raises(MalformedQuoteError):
            tokenize('"unterminated')

    def test_quote_only_at_end(self) -> None:
        """Test a token ending with a quote it did not start with is an error."""
        with pytest.raises(MalformedQuoteError) as exc_info:
            tokenize('echo abc"')
        assert exc_info.value.token == 'abc"'

    def test_malformed_quote_is_value_error(self) -> None:
        """Test MalformedQuoteError can be caught as ValueError."""
        with pytest.raises(ValueError):
            tokenize('echo "oops')


class TestRoundTrip:
    """Test that rendering and re-tokenizing reproduces the vector."""

    @pytest.mark.parametrize(
        "argv",
        [
            ["echo", "hello"],
            ["echo", "hello world", "foo"],
            ["printf", "", "x"],
            ["grep", 'say "hi', "file.txt"],
            ["echo", "안녕 세상"],
            ["ls", "-la", "/tmp/some dir"],
        ],
    )
    def test_render_then_tokenize(self, argv: list[str]) -> None:
        """Test tokenize(render_args(argv)) == argv."""
        assert tokenize(render_args(argv)) == argv
