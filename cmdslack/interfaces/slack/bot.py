# cmdslack/interfaces/slack/bot.py
"""Slack bot implementation with AsyncApp and AsyncSocketModeHandler.

Registers one slash command listener per bridged command. Uses lazy
listener pattern to ack within 3s and run the process in background.
"""

import asyncio
import logging
from collections.abc import Mapping

from slack_bolt.adapter.socket_mode.async_handler import AsyncSocketModeHandler
from slack_bolt.async_app import AsyncApp

from cmdslack.config import settings
from cmdslack.core.commands.executor import CommandExecutor
from cmdslack.core.commands.models import CommandDefinition, SlackCredentials
from cmdslack.interfaces.slack.handlers import ack_command, make_command_listener

logger = logging.getLogger(__name__)


def register_commands(
    app: AsyncApp, executor: CommandExecutor, response_type: str | None = None
) -> None:
    """Register a lazy slash command listener for every bridged command.

    Args:
        app: Slack AsyncApp.
        executor: CommandExecutor holding the command map.
        response_type: Response visibility. Defaults to settings.response_type.
    """
    process_command = make_command_listener(
        executor, response_type or settings.response_type
    )
    for definition in executor.commands.values():
        app.command(definition.slash_command)(ack=ack_command, lazy=[process_command])
        logger.info("Registered slash command %s", definition.slash_command)


def create_bot(
    commands: Mapping[str, CommandDefinition], credentials: SlackCredentials
) -> tuple[AsyncApp, AsyncSocketModeHandler]:
    """Create and configure the Slack bot.

    Args:
        commands: Read-only command map built at startup.
        credentials: Slack bot (xoxb-*) and app (xapp-*) tokens.

    Returns:
        Tuple of (AsyncApp instance, AsyncSocketModeHandler instance).
    """
    app = AsyncApp(token=credentials.slack_bot_token)
    register_commands(app, CommandExecutor(commands))
    handler = AsyncSocketModeHandler(app, credentials.slack_app_token)
    return app, handler


async def start_bot(
    commands: Mapping[str, CommandDefinition], credentials: SlackCredentials
) -> None:
    """Start the Slack bot with Socket Mode and run until cancelled."""
    _, handler = create_bot(commands, credentials)

    logger.info("Starting Slack bot with Socket Mode...")
    try:
        await handler.start_async()
    except asyncio.CancelledError:
        logger.info("Received shutdown signal")
    finally:
        await handler.close_async()
        logger.info("Slack bot stopped")
