# cmdslack/core/commands/loader.py
"""Bridge config loading and command map construction.

This module finds and parses the YAML or TOML config file, validates it,
tokenizes each command template once, and resolves the Slack credentials.
Everything here runs at startup; any error aborts before the bot serves.
"""

import logging
import os
import tomllib
from collections.abc import Callable, Mapping
from pathlib import Path
from types import MappingProxyType
from typing import Any

import yaml
from dotenv import dotenv_values
from pydantic import ValidationError

from cmdslack.core.commands.errors import ConfigError
from cmdslack.core.commands.models import (
    BridgeConfig,
    CommandConfig,
    CommandDefinition,
    SlackCredentials,
)
from cmdslack.core.commands.templating import validate_placeholders
from cmdslack.core.commands.tokenizer import tokenize

logger = logging.getLogger(__name__)

CONFIG_CANDIDATES = ("./cmdslack.yaml", "./cmdslack.yml", "./cmdslack.toml")

Parser = Callable[[str], Any]

PARSERS: dict[str, Parser] = {
    "yaml": yaml.safe_load,
    "toml": tomllib.loads,
}

CommandMap = Mapping[str, CommandDefinition]


def _parsers_for(path: str, parser: str | None) -> list[Parser]:
    if parser:
        if parser not in PARSERS:
            raise ConfigError(
                f"Unknown config parser {parser!r}. Use one of: {', '.join(PARSERS)}."
            )
        return [PARSERS[parser]]
    if Path(path).suffix.lower() == ".toml":
        return [PARSERS["toml"], PARSERS["yaml"]]
    return [PARSERS["yaml"], PARSERS["toml"]]


def parse_config_text(text: str, parsers: list[Parser]) -> dict[str, Any] | None:
    """Parse config text with the first parser that yields a mapping.

    Args:
        text: Raw config file content.
        parsers: Parsers to try, in order.

    Returns:
        The parsed mapping, or None if no parser produced one.
    """
    for parse in parsers:
        try:
            data = parse(text)
        except (yaml.YAMLError, ValueError):
            continue
        if isinstance(data, dict):
            return data
    return None


def load_config(path: str | None = None, parser: str | None = None) -> BridgeConfig:
    """Find, parse and validate the bridge config file.

    Without an explicit path, ./cmdslack.yaml, ./cmdslack.yml and
    ./cmdslack.toml are tried in order. Without an explicit parser, a .toml
    file is tried as TOML then YAML, anything else as YAML then TOML.

    Args:
        path: Config file path. Defaults to the candidates above.
        parser: Force a parser ("yaml" or "toml").

    Returns:
        Validated BridgeConfig.

    Raises:
        ConfigError: If no file is found, it cannot be parsed, or it fails
            validation.
    """
    candidates = [path] if path else list(CONFIG_CANDIDATES)

    for candidate in candidates:
        parsers = _parsers_for(candidate, parser)
        try:
            text = Path(candidate).read_text(encoding="utf-8")
        except FileNotFoundError:
            continue

        data = parse_config_text(text, parsers)
        if data is None:
            raise ConfigError(f"Failed to parse config file {candidate}.")

        logger.info("Loaded config file %s", candidate)
        try:
            return BridgeConfig.model_validate(data)
        except ValidationError as e:
            raise ConfigError(f"Invalid config file {candidate}: {e}") from e

    raise ConfigError("Failed to find config file.")


def build_command_definition(config: CommandConfig) -> CommandDefinition:
    """Tokenize a command template and check its placeholders.

    Args:
        config: Validated command config.

    Returns:
        CommandDefinition holding the tokenized template.

    Raises:
        MalformedQuoteError: If the template has an unmatched quote.
        UnknownOptionReferenceError: If a placeholder has no matching option.
    """
    argv = tokenize(config.command)
    validate_placeholders(
        config.name, argv, (option.name for option in config.options)
    )
    return CommandDefinition(config=config, argv=tuple(argv))


def build_command_map(config: BridgeConfig) -> CommandMap:
    """Build the read-only command map for a bridge config.

    Args:
        config: Validated bridge config.

    Returns:
        Read-only mapping of command name to CommandDefinition.

    Raises:
        MalformedQuoteError: If any command template has an unmatched quote.
        UnknownOptionReferenceError: If any placeholder has no matching option.
    """
    commands: dict[str, CommandDefinition] = {}
    for command_config in config.commands:
        try:
            definition = build_command_definition(command_config)
        except Exception:
            logger.error("Rejected command definition %s", command_config.name)
            raise
        commands[definition.name] = definition
        logger.debug("Loaded command /%s: %s", definition.name, list(definition.argv))

    logger.info("Loaded %d command(s)", len(commands))
    return MappingProxyType(commands)


def resolve_credentials(
    config: BridgeConfig, env_file: str | os.PathLike[str] = ".env"
) -> SlackCredentials:
    """Resolve the Slack tokens for a bridge config.

    ``env: dotenv`` reads the process environment overlaid with the .env
    file, inline tokens are used as given, and no ``env`` section reads the
    process environment only.

    Args:
        config: Validated bridge config.
        env_file: .env file used for ``env: dotenv``.

    Returns:
        SlackCredentials with both tokens set.

    Raises:
        ConfigError: If a token is missing or empty.
    """
    if isinstance(config.env, SlackCredentials):
        credentials = config.env
    else:
        env: dict[str, str | None] = dict(os.environ)
        if config.env == "dotenv":
            env.update(dotenv_values(env_file))
        credentials = SlackCredentials(
            SLACK_BOT_TOKEN=env.get("SLACK_BOT_TOKEN") or "",
            SLACK_APP_TOKEN=env.get("SLACK_APP_TOKEN") or "",
        )

    if not credentials.slack_bot_token:
        raise ConfigError("SLACK_BOT_TOKEN is not set.")
    if not credentials.slack_app_token:
        raise ConfigError("SLACK_APP_TOKEN is not set.")
    return credentials
