"""Error types raised while loading and running bridged commands.

Load-time errors (MalformedQuoteError, UnknownOptionReferenceError,
ConfigError) reject a command definition before the bot starts serving.
Invocation-time errors are converted into response text by the executor.
"""


class CommandError(Exception):
    """Base class for all cmdslack command errors."""


class ConfigError(CommandError):
    """The bridge config file is missing, unparsable, or invalid."""


class MalformedQuoteError(CommandError, ValueError):
    """A token starts with a double quote but does not end with one, or vice versa.

    Attributes:
        token: The offending raw token.
    """

    def __init__(self, token: str) -> None:
        self.token = token
        super().__init__(f"Unmatched quote in {token!r}.")


class UnknownOptionReferenceError(CommandError):
    """A command template references a placeholder with no matching option.

    Attributes:
        command: Name of the command definition.
        key: The placeholder key that has no option.
    """

    def __init__(self, command: str, key: str) -> None:
        self.command = command
        self.key = key
        super().__init__(f"Command {command} is missing option {key}.")


class InvocationError(CommandError):
    """Slash command arguments could not be mapped onto the command's options."""


class ProcessExecutionError(CommandError):
    """The external process could not be started, or it did not finish in time."""
