# cmdslack/interfaces/slack/handlers.py
"""Slash command handlers for the Slack bot.

Uses lazy listener pattern to ack within 3s and run the command in the
background, then posts the rendered output through the command's
response_url.
"""

import asyncio
import logging
from collections.abc import Awaitable, Callable
from typing import Any

from cmdslack.core.commands.executor import CommandExecutor
from cmdslack.interfaces.slack.slack_api import _send_multipart_response
from cmdslack.utils.logging import set_request_id

logger = logging.getLogger(__name__)

NO_OUTPUT_TEXT = "(no output)"


def _muted_block(text: str) -> list[dict]:
    """Create a context block for muted (small gray) text in Slack.

    Args:
        text: Text to display in muted style.

    Returns:
        List containing a single context block with muted text.
    """
    return [{"type": "context", "elements": [{"type": "mrkdwn", "text": text}]}]


async def ack_command(ack: Callable, command: dict[str, Any]) -> None:
    """Acknowledge a slash command immediately with a progress note.

    Args:
        ack: Slack ack function to acknowledge receipt.
        command: Slash command payload.
    """
    text = f":hourglass: Running `{command.get('command', '')}`"
    await ack(text=text, blocks=_muted_block(text))


def make_command_listener(
    executor: CommandExecutor, response_type: str = "in_channel"
) -> Callable[..., Awaitable[None]]:
    """Create the lazy listener that runs slash commands.

    Args:
        executor: CommandExecutor holding the command map.
        response_type: Visibility of the response ("in_channel" or "ephemeral").

    Returns:
        Async listener taking the slash command payload and respond function.
    """

    async def process_command(command: dict[str, Any], respond: Callable) -> None:
        """Run a slash command and post its output."""
        set_request_id(command.get("trigger_id", ""))
        name = command.get("command", "").lstrip("/")
        text = command.get("text", "") or ""
        user_id = command.get("user_id", "unknown")

        logger.info("Processing /%s from %s: %s", name, user_id, text[:100])

        try:
            content = await executor.invoke(name, text)
            if content is None:
                logger.warning("Received unknown command /%s", name)
                return

            await _send_multipart_response(
                respond, content if content else NO_OUTPUT_TEXT, response_type
            )
        except Exception as e:
            logger.exception("Error responding to /%s: %s", name, e)
            error_text = f":x: Error: {str(e)[:200]}"
            try:
                await respond(text=error_text, response_type="ephemeral")
            except (TimeoutError, asyncio.CancelledError, RuntimeError):
                logger.warning("Failed to send error message to Slack")

    return process_command
