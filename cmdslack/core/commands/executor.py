# cmdslack/core/commands/executor.py
"""Command executor for bridged slash commands.

This module provides the CommandExecutor class which substitutes supplied
option values into a command's argument vector, runs it, and renders the
process output into response text.
"""

import logging
from collections.abc import Mapping

from cmdslack.config import settings
from cmdslack.core.commands.errors import CommandError
from cmdslack.core.commands.formatter import render_args, render_response
from cmdslack.core.commands.models import CommandDefinition
from cmdslack.core.commands.parser import parse_invocation
from cmdslack.core.commands.runner import ProcessRunner, run_process
from cmdslack.core.commands.templating import build_lookup, substitute

logger = logging.getLogger(__name__)


def build_argv(
    definition: CommandDefinition, supplied: Mapping[str, str | None]
) -> list[str]:
    """Substitute option values into a command's argument vector.

    Args:
        definition: Loaded command definition.
        supplied: Option values supplied by the user.

    Returns:
        The argument vector to execute.
    """
    lookup = build_lookup(definition.config.options, supplied)
    return [substitute(arg, lookup) for arg in definition.argv]


class CommandExecutor:
    """Executor for bridged slash commands.

    The CommandExecutor looks up command definitions in the command map,
    runs them through a process runner, and always returns response text
    for known commands. Errors are logged and turned into their message.

    Attributes:
        commands: Read-only command map built at startup.
        runner: Process runner used to execute argument vectors.
        timeout: Process timeout in seconds, or None.

    Example:
        >>> from cmdslack.core.commands.loader import build_command_map, load_config
        >>> executor = CommandExecutor(build_command_map(load_config()))
        >>> content = await executor.execute("greet", {"name": "Ada"})
    """

    def __init__(
        self,
        commands: Mapping[str, CommandDefinition],
        runner: ProcessRunner = run_process,
        timeout: float | None = settings.timeout,
    ) -> None:
        """Initialize the CommandExecutor.

        Args:
            commands: Read-only command map built at startup.
            runner: Process runner (default: run_process).
            timeout: Process timeout in seconds (default: from settings).
        """
        self.commands = commands
        self.runner = runner
        self.timeout = timeout

    async def execute(
        self, name: str, supplied: Mapping[str, str | None]
    ) -> str | None:
        """Execute a command with supplied option values.

        Args:
            name: Command name without the leading slash.
            supplied: Option values; None values count as absent.

        Returns:
            Response text, or None if the command does not exist. Failures
            to run the process are returned as their error message.
        """
        definition = self.commands.get(name)
        if definition is None:
            return None

        try:
            argv = build_argv(definition, supplied)
            command_line = render_args(argv)
            logger.info("Running /%s: %s", name, command_line)

            config = definition.config
            result = await self.runner(
                argv,
                cwd=config.working_directory,
                stdin=config.stdin,
                env=config.env,
                timeout=self.timeout,
            )

            logger.info("/%s exited with %d", name, result.returncode)
            return render_response(
                config.output_template,
                result.stdout,
                result.stderr,
                command_line,
                success=result.success,
            )
        except Exception as e:
            logger.exception("Error running /%s: %s", name, e)
            return str(e)

    async def invoke(self, name: str, text: str) -> str | None:
        """Parse slash command text and execute the command.

        Args:
            name: Command name without the leading slash.
            text: Free text typed after the slash command.

        Returns:
            Response text, or None if the command does not exist. Argument
            errors are returned as their message.
        """
        definition = self.commands.get(name)
        if definition is None:
            return None

        try:
            supplied = parse_invocation(text, definition.config.options)
        except CommandError as e:
            logger.warning("Invalid arguments for /%s: %s", name, e)
            return str(e)

        return await self.execute(name, supplied)
