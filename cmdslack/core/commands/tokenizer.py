"""Pure function-based tokenizer that splits command templates into argv tokens."""

import re

from cmdslack.core.commands.errors import MalformedQuoteError

# A token is a run of double-quoted spans (with backslash escapes) and
# non-whitespace characters, where "\ " keeps a literal space in the token.
TOKEN_PATTERN = re.compile(r'(?:"(?:[^"\\]|\\.)*"|(?:\\ |[^\s])+)+')
ESCAPE_PATTERN = re.compile(r"\\(.)")


def _unquote(token: str) -> str:
    quote_begin = token.startswith('"')
    quote_end = token.endswith('"')
    if quote_begin != quote_end:
        raise MalformedQuoteError(token)

    if quote_begin and quote_end:
        # Only the first escape sequence is unescaped
        return ESCAPE_PATTERN.sub(r"\1", token[1:-1], count=1)

    return token.replace("\\ ", " ")


def tokenize(command: str) -> list[str]:
    """Split a command template into an argument vector.

    Double-quoted tokens have their quotes stripped and their first escape
    sequence unescaped. Unquoted tokens only have escaped spaces (``\\ ``)
    turned into literal spaces. The result is passed to process creation
    as-is and is never interpreted by a shell.

    Args:
        command: The command template, e.g. ``echo {greeting} to {name}``.

    Returns:
        List of argument tokens. Empty if the template has no tokens.

    Raises:
        MalformedQuoteError: If a token starts with a quote but does not end
            with one, or the other way around.

    Examples:
        >>> tokenize('echo "hello world" foo')
        ['echo', 'hello world', 'foo']

        >>> tokenize(r"a\\ b c")
        ['a b', 'c']

        >>> tokenize("")
        []
    """
    return [_unquote(token) for token in TOKEN_PATTERN.findall(command)]
