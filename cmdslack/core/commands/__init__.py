"""Command module for bridged slash commands.

This module provides:
- tokenize: Split a command template into an argument vector
- substitute / build_lookup: Expand {key} placeholders with option values
- render_args / render_response: Format command lines and process output
- load_config / build_command_map: Load and validate the bridge config
- parse_invocation: Map slash command text onto declared options
- run_process: Run an argument vector without a shell
- CommandExecutor: Execute commands and render responses
"""

from cmdslack.core.commands.errors import (
    CommandError,
    ConfigError,
    InvocationError,
    MalformedQuoteError,
    ProcessExecutionError,
    UnknownOptionReferenceError,
)
from cmdslack.core.commands.executor import CommandExecutor, build_argv
from cmdslack.core.commands.formatter import render_args, render_response
from cmdslack.core.commands.loader import (
    build_command_map,
    load_config,
    resolve_credentials,
)
from cmdslack.core.commands.models import (
    BridgeConfig,
    CommandConfig,
    CommandDefinition,
    CommandOption,
    OutputTemplatePair,
    SlackCredentials,
)
from cmdslack.core.commands.parser import parse_invocation
from cmdslack.core.commands.runner import ProcessResult, run_process
from cmdslack.core.commands.templating import build_lookup, substitute
from cmdslack.core.commands.tokenizer import tokenize

__all__ = [
    "CommandError",
    "ConfigError",
    "InvocationError",
    "MalformedQuoteError",
    "ProcessExecutionError",
    "UnknownOptionReferenceError",
    "CommandExecutor",
    "build_argv",
    "render_args",
    "render_response",
    "build_command_map",
    "load_config",
    "resolve_credentials",
    "BridgeConfig",
    "CommandConfig",
    "CommandDefinition",
    "CommandOption",
    "OutputTemplatePair",
    "SlackCredentials",
    "parse_invocation",
    "ProcessResult",
    "run_process",
    "build_lookup",
    "substitute",
    "tokenize",
]
