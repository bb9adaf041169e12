# cmdslack/core/commands/formatter.py
"""Render argument vectors and process output into Slack response text."""

import json
import re
from collections.abc import Iterable

from cmdslack.core.commands.models import OutputTemplate, OutputTemplatePair

DEFAULT_OUTPUT_TEMPLATE = "{output}"

_NEEDS_QUOTING = re.compile(r'[\s"]|^$')


def render_arg(arg: str) -> str:
    """Quote an argument as a JSON string if it is empty or has whitespace or quotes."""
    if _NEEDS_QUOTING.search(arg):
        return json.dumps(arg, ensure_ascii=False)
    return arg


def render_args(args: Iterable[str]) -> str:
    """Render an argument vector as one human-readable command line.

    Only used for logging and the ``{command}`` output key. The result is
    never tokenized again for execution.

    Args:
        args: Argument vector.

    Returns:
        Space-joined arguments, quoted where needed.

    Example:
        >>> render_args(["echo", "hello world", ""])
        'echo "hello world" ""'
    """
    return " ".join(render_arg(arg) for arg in args)


def select_output_template(template: OutputTemplate | None, success: bool) -> str:
    """Pick the output template for a finished process.

    Args:
        template: Configured template: None, a string, or a success/error pair.
        success: Whether the process exited successfully.

    Returns:
        The template string to render.
    """
    if template is None:
        return DEFAULT_OUTPUT_TEMPLATE
    if isinstance(template, OutputTemplatePair):
        return template.success if success else template.error
    return template


def render_response(
    template: OutputTemplate | None,
    stdout: str,
    stderr: str,
    command: str,
    success: bool = True,
) -> str:
    """Render process output into the response text.

    Replaces every occurrence of ``{command}``, ``{output}``, ``{stdout}`` and
    ``{stderr}``, in that order. ``{output}`` is stderr and stdout joined by a
    newline, with surrounding whitespace stripped.

    Args:
        template: Configured output template (see select_output_template).
        stdout: Decoded process stdout.
        stderr: Decoded process stderr.
        command: Rendered command line (see render_args).
        success: Whether the process exited successfully.

    Returns:
        Response text to send back to the user.

    Example:
        >>> render_response("{output}", "out\\n", "err\\n", "cmd")
        'err\\n\\nout'
    """
    text = select_output_template(template, success)
    return (
        text.replace("{command}", command)
        .replace("{output}", f"{stderr}\n{stdout}".strip())
        .replace("{stdout}", stdout)
        .replace("{stderr}", stderr)
    )
