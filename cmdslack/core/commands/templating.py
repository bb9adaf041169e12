# cmdslack/core/commands/templating.py
"""Placeholder substitution for command templates.

This module expands ``{key}`` placeholders using a lookup function, and
provides the load-time check that every placeholder names a declared option.
"""

import re
from collections.abc import Callable, Iterable, Mapping, Sequence

from cmdslack.core.commands.errors import UnknownOptionReferenceError
from cmdslack.core.commands.models import CommandOption

PLACEHOLDER_PATTERN = re.compile(r"{([^}]+)}")

ValueLookup = Callable[[str], str]


def substitute(text: str, lookup: ValueLookup) -> str:
    """Replace every ``{key}`` placeholder in text with ``lookup(key)``.

    Placeholders are not nested: the first ``}`` after a ``{`` closes it.
    A ``{`` without a closing ``}`` and an empty ``{}`` are left verbatim.

    Args:
        text: Text containing placeholders.
        lookup: Function returning the replacement for a key.

    Returns:
        Text with all placeholders replaced.

    Example:
        >>> substitute("echo {greeting}", lambda key: "hi")
        'echo hi'
    """
    return PLACEHOLDER_PATTERN.sub(lambda match: lookup(match.group(1)), text)


def referenced_keys(text: str) -> list[str]:
    """Return the placeholder keys referenced in text, in order of appearance."""
    return PLACEHOLDER_PATTERN.findall(text)


def validate_placeholders(
    command_name: str, tokens: Iterable[str], option_names: Iterable[str]
) -> None:
    """Check that every placeholder in the tokens names a declared option.

    Args:
        command_name: Command name used in the error message.
        tokens: Tokenized command template.
        option_names: Names of the command's options.

    Raises:
        UnknownOptionReferenceError: On the first placeholder with no option.
    """
    known = set(option_names)
    for token in tokens:
        for key in referenced_keys(token):
            if key not in known:
                raise UnknownOptionReferenceError(command_name, key)


def build_lookup(
    options: Sequence[CommandOption], supplied: Mapping[str, str | None]
) -> ValueLookup:
    """Build the value lookup for one invocation.

    A key resolves to the supplied value, then to the option's default, then
    to an empty string. ``None`` supplied values count as absent.

    Args:
        options: The command's declared options.
        supplied: Option values supplied by the user.

    Returns:
        Function mapping a placeholder key to its value. It never raises.
    """
    defaults = {option.name: option.default for option in options}

    def lookup(key: str) -> str:
        value = supplied.get(key)
        if value is not None:
            return value
        default = defaults.get(key)
        return default if default is not None else ""

    return lookup
