# cmdslack/core/commands/runner.py
"""Process execution for bridged commands.

Commands run from a literal argument vector via create_subprocess_exec and
are never passed to a shell, so substituted values cannot inject commands.
"""

import asyncio
import contextlib
import logging
import os
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Protocol

from cmdslack.core.commands.errors import ProcessExecutionError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ProcessResult:
    """Result of a finished process.

    Attributes:
        success: True if the process exited with status 0.
        returncode: Process exit status.
        stdout: Decoded standard output.
        stderr: Decoded standard error.
    """

    success: bool
    returncode: int
    stdout: str
    stderr: str


class ProcessRunner(Protocol):
    """Protocol for running an argument vector and collecting its output."""

    async def __call__(
        self,
        argv: Sequence[str],
        *,
        cwd: str | None = None,
        stdin: str | None = None,
        env: Mapping[str, str] | None = None,
        timeout: float | None = None,
    ) -> ProcessResult: ...


def _decode(data: bytes | None) -> str:
    return data.decode("utf-8", errors="replace") if data else ""


async def _kill(process: asyncio.subprocess.Process) -> None:
    """Kill a process that is still running and reap it."""
    if process.returncode is None:
        with contextlib.suppress(ProcessLookupError):
            process.kill()
    await process.wait()


async def run_process(
    argv: Sequence[str],
    *,
    cwd: str | None = None,
    stdin: str | None = None,
    env: Mapping[str, str] | None = None,
    timeout: float | None = None,
) -> ProcessResult:
    """Run an argument vector and collect its output.

    Args:
        argv: Program and arguments. Never interpreted by a shell.
        cwd: Working directory (optional).
        stdin: Text piped to stdin. Stdin is /dev/null when not given.
        env: Variables overlaid on the current environment (optional).
        timeout: Seconds before the process is killed, or None to wait forever.

    Returns:
        ProcessResult with exit status and decoded stdout/stderr.

    Raises:
        ProcessExecutionError: If argv is empty, the process cannot be
            started, or it times out.
    """
    if not argv:
        raise ProcessExecutionError("Command is empty.")

    process_env = {**os.environ, **env} if env else None

    try:
        process = await asyncio.create_subprocess_exec(
            *argv,
            stdin=asyncio.subprocess.PIPE if stdin else asyncio.subprocess.DEVNULL,
            stdout=asyncio.subprocess.PIPE,
            stderr=asyncio.subprocess.PIPE,
            cwd=cwd,
            env=process_env,
        )
    except OSError as e:
        raise ProcessExecutionError(f"Failed to start {argv[0]}: {e}") from e

    input_data = stdin.encode("utf-8") if stdin else None
    try:
        stdout, stderr = await asyncio.wait_for(
            process.communicate(input_data), timeout=timeout
        )
    except asyncio.TimeoutError:
        await _kill(process)
        raise ProcessExecutionError(f"Command timed out after {timeout}s") from None
    except BaseException:
        # Cancelled while waiting; the child must not outlive the task
        await _kill(process)
        raise

    returncode = process.returncode if process.returncode is not None else -1
    logger.debug("Process %s exited with %d", argv[0], returncode)
    return ProcessResult(
        success=returncode == 0,
        returncode=returncode,
        stdout=_decode(stdout),
        stderr=_decode(stderr),
    )
