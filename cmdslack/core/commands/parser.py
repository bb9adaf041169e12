"""Pure function-based parser mapping slash command text onto declared options."""

from collections.abc import Sequence

from cmdslack.core.commands.errors import InvocationError
from cmdslack.core.commands.models import CommandOption
from cmdslack.core.commands.tokenizer import tokenize

# Slack escapes these three characters in slash command text
SLACK_ESCAPES = (("&lt;", "<"), ("&gt;", ">"), ("&amp;", "&"))


def unescape_slack_text(text: str) -> str:
    """Undo Slack's HTML escaping of ``<``, ``>`` and ``&``."""
    for escaped, char in SLACK_ESCAPES:
        text = text.replace(escaped, char)
    return text


def parse_invocation(
    text: str, options: Sequence[CommandOption]
) -> dict[str, str | None]:
    """Parse slash command text into supplied option values.

    The text is tokenized like a command template, so values with spaces can
    be quoted or escaped. Tokens of the form ``key=value`` whose key is a
    declared option are named values. All other tokens fill the remaining
    options in declaration order.

    Args:
        text: The text typed after the slash command.
        options: The command's declared options.

    Returns:
        Mapping of option name to supplied value. Options the user did not
        supply are absent.

    Raises:
        MalformedQuoteError: If the text has an unmatched quote.
        InvocationError: If there are more positional values than options.

    Examples:
        >>> opts = [CommandOption(name="greeting"), CommandOption(name="name")]
        >>> parse_invocation('hi "Ada Lovelace"', opts)
        {'greeting': 'hi', 'name': 'Ada Lovelace'}

        >>> parse_invocation("name=Bob", opts)
        {'name': 'Bob'}
    """
    names = [option.name for option in options]
    supplied: dict[str, str | None] = {}
    positional: list[str] = []

    for token in tokenize(unescape_slack_text(text)):
        key, sep, value = token.partition("=")
        if sep and key in names:
            supplied[key] = value
        else:
            positional.append(token)

    remaining = [name for name in names if name not in supplied]
    if len(positional) > len(remaining):
        raise InvocationError(
            f"Too many arguments: expected at most {len(remaining)}, "
            f"got {len(positional)}."
        )

    for name, value in zip(remaining, positional):
        supplied[name] = value

    return supplied
