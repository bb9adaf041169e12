"""Slack app manifest generation for bridged commands.

Slack registers slash commands through the app manifest only, so the bot
cannot upsert them at startup. `cmdslack manifest` prints this fragment for
pasting into the app configuration.
"""

from collections.abc import Mapping
from typing import Any

from cmdslack.core.commands.models import BridgeConfig, CommandDefinition, CommandOption

# Slack manifest field limits
DESCRIPTION_LIMIT = 2000
USAGE_HINT_LIMIT = 1000
APP_NAME_LIMIT = 35


def _option_hint(option: CommandOption) -> str:
    if option.default is not None:
        return f"[{option.name}={option.default}]"
    return f"[{option.name}]"


def build_slash_command(definition: CommandDefinition) -> dict[str, Any]:
    """Build the manifest entry for one command.

    Args:
        definition: Loaded command definition.

    Returns:
        Manifest slash_commands entry. The description falls back to the
        command template.
    """
    config = definition.config
    entry: dict[str, Any] = {
        "command": definition.slash_command,
        "description": (config.description or config.command)[:DESCRIPTION_LIMIT],
        "should_escape": False,
    }
    if config.options:
        hint = " ".join(_option_hint(option) for option in config.options)
        entry["usage_hint"] = hint[:USAGE_HINT_LIMIT]
    return entry


def build_manifest(
    config: BridgeConfig, commands: Mapping[str, CommandDefinition]
) -> dict[str, Any]:
    """Build a Socket Mode Slack app manifest for the bridge.

    Args:
        config: Validated bridge config.
        commands: Read-only command map.

    Returns:
        Manifest dictionary ready for YAML or JSON serialization.
    """
    name = config.name[:APP_NAME_LIMIT]
    return {
        "display_information": {"name": name},
        "features": {
            "bot_user": {"display_name": name, "always_online": False},
            "slash_commands": [
                build_slash_command(definition) for definition in commands.values()
            ],
        },
        "oauth_config": {"scopes": {"bot": ["commands"]}},
        "settings": {
            "interactivity": {"is_enabled": True},
            "socket_mode_enabled": True,
        },
    }
