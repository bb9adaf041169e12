# cmdslack/core/commands/models.py
"""Data models for bridge config files and loaded command definitions.

The pydantic models validate the config file shape. CommandDefinition pairs a
validated CommandConfig with its tokenized argument vector and is built once
per command at startup.
"""

from dataclasses import dataclass
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, model_validator

NAME_PATTERN = r"^[\w-]{1,32}$"

_MODEL_CONFIG = ConfigDict(
    populate_by_name=True,  # Accept both camelCase aliases and field names
    coerce_numbers_to_str=True,  # YAML/TOML `default: 5` becomes "5"
    frozen=True,
)


class CommandOption(BaseModel):
    """A named, optionally defaulted slash command parameter.

    Attributes:
        name: Option name, referenced as ``{name}`` in the command template.
        description: Optional help text shown in the Slack usage hint.
        default: Value used when the user does not supply the option.
    """

    model_config = _MODEL_CONFIG

    name: str = Field(..., pattern=NAME_PATTERN)
    description: str | None = None
    default: str | None = None


class OutputTemplatePair(BaseModel):
    """Output templates chosen by the process exit status."""

    model_config = _MODEL_CONFIG

    success: str
    error: str


OutputTemplate = str | OutputTemplatePair


class CommandConfig(BaseModel):
    """One bridged slash command as declared in the config file.

    Attributes:
        name: Slash command name without the leading slash.
        description: Optional description; the template is used when absent.
        command: Command template, e.g. ``echo {greeting} to {name}``.
        options: Declared options, in positional order.
        working_directory: Working directory for the process.
        env: Environment variables overlaid on the bridge's environment.
        stdin: Text piped to the process stdin.
        output_template: Response template, or a success/error pair.
    """

    model_config = _MODEL_CONFIG

    name: str = Field(..., pattern=NAME_PATTERN)
    description: str | None = None
    command: str
    options: list[CommandOption] = Field(default_factory=list)
    working_directory: str | None = Field(None, alias="workingDirectory")
    env: dict[str, str] | None = None
    stdin: str | None = None
    output_template: OutputTemplate | None = Field(None, alias="outputTemplate")

    @model_validator(mode="after")
    def _check_unique_options(self) -> "CommandConfig":
        seen: set[str] = set()
        for option in self.options:
            if option.name in seen:
                raise ValueError(
                    f"Command {self.name} declares option {option.name} twice."
                )
            seen.add(option.name)
        return self

    def get_option(self, name: str) -> CommandOption | None:
        """Get a declared option by name.

        Args:
            name: Option name.

        Returns:
            The option, or None if it is not declared.
        """
        for option in self.options:
            if option.name == name:
                return option
        return None


class SlackCredentials(BaseModel):
    """Slack tokens given inline in the config file."""

    model_config = _MODEL_CONFIG

    slack_bot_token: str = Field(..., alias="SLACK_BOT_TOKEN")
    slack_app_token: str = Field(..., alias="SLACK_APP_TOKEN")


class BridgeConfig(BaseModel):
    """Top-level bridge config file.

    Attributes:
        name: Bridge name, used in the Slack app manifest.
        env: ``"dotenv"`` to read a .env file, inline Slack tokens, or None
            to read the process environment.
        commands: Bridged slash commands.
    """

    model_config = _MODEL_CONFIG

    name: str
    env: Literal["dotenv"] | SlackCredentials | None = None
    commands: list[CommandConfig]

    @model_validator(mode="after")
    def _check_unique_commands(self) -> "BridgeConfig":
        seen: set[str] = set()
        for command in self.commands:
            if command.name in seen:
                raise ValueError(f"Command {command.name} is declared twice.")
            seen.add(command.name)
        return self


@dataclass(frozen=True)
class CommandDefinition:
    """A validated command config together with its tokenized template.

    Attributes:
        config: The validated command config.
        argv: Tokenized command template, still containing placeholders.
    """

    config: CommandConfig
    argv: tuple[str, ...]

    @property
    def name(self) -> str:
        return self.config.name

    @property
    def slash_command(self) -> str:
        """Slash command as registered with Slack, e.g. ``/greet``."""
        return f"/{self.config.name}"
