"""cmdslack CLI entry point."""

import asyncio
import logging

import typer
import yaml
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from cmdslack.config import settings
from cmdslack.core.commands.errors import CommandError
from cmdslack.core.commands.formatter import render_args
from cmdslack.core.commands.loader import (
    CommandMap,
    build_command_map,
    load_config,
    resolve_credentials,
)
from cmdslack.core.commands.models import BridgeConfig
from cmdslack.interfaces.slack.bot import start_bot
from cmdslack.interfaces.slack.manifest import build_manifest
from cmdslack.utils.logging import configure_logging

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="cmdslack",
    help="Run configured local commands from Slack slash commands",
    no_args_is_help=True,
)
console = Console()

ConfigOption = typer.Option(
    None, "--config", "-c", help="Config file (default: ./cmdslack.yaml|yml|toml)"
)
ParserOption = typer.Option(
    None, "--parser", "-p", help="Config parser: yaml or toml (default: by extension)"
)


def _load(
    config_path: str | None, parser: str | None
) -> tuple[BridgeConfig, CommandMap]:
    """Load the config and build the command map, exiting on load-time errors."""
    try:
        config = load_config(
            config_path or settings.cmdslack_config or None,
            parser or settings.cmdslack_parser or None,
        )
        return config, build_command_map(config)
    except CommandError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1) from e


@app.command()
def run(config_path: str | None = ConfigOption, parser: str | None = ParserOption):
    """Start the Slack bot."""
    configure_logging(settings.log_level, settings.log_format)
    config, commands = _load(config_path, parser)
    try:
        credentials = resolve_credentials(config)
    except CommandError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1) from e

    try:
        asyncio.run(start_bot(commands, credentials))
    except KeyboardInterrupt:
        logger.info("Shutdown complete")


@app.command()
def check(config_path: str | None = ConfigOption, parser: str | None = ParserOption):
    """Validate the config and show each command's argument vector."""
    config, commands = _load(config_path, parser)

    table = Table(title=f"{config.name}: {len(commands)} command(s)")
    table.add_column("Command", style="cyan")
    table.add_column("Arguments", style="white")
    table.add_column("Options", style="green")

    for definition in commands.values():
        options = ", ".join(
            option.name if option.default is None else f"{option.name}={option.default}"
            for option in definition.config.options
        )
        table.add_row(
            definition.slash_command,
            escape(render_args(definition.argv)),
            escape(options),
        )

    console.print(table)


@app.command()
def manifest(config_path: str | None = ConfigOption, parser: str | None = ParserOption):
    """Print the Slack app manifest for the configured commands."""
    config, commands = _load(config_path, parser)
    typer.echo(
        yaml.safe_dump(
            build_manifest(config, commands),
            default_flow_style=False,
            allow_unicode=True,
            sort_keys=False,
        ),
        nl=False,
    )


def main() -> None:
    """Console script entry point."""
    app()


if __name__ == "__main__":
    main()
