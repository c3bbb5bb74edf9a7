"""Blocking execution of hadoop commands with rich error context.

run_hadoop_command() is used by the operations that only care about success
or failure (and du, which parses the captured text). A command that cannot be
started raises InvocationError; one that exits non-zero raises
HdfsCommandError carrying the operation, the command line, the exit code and
whatever the command printed.
"""

import logging
import shlex
import subprocess
from collections.abc import Sequence

from hdfs_client.core.errors import HdfsCommandError, InvocationError

logger = logging.getLogger(__name__)


def format_command(cmd: Sequence[str]) -> str:
    """Render an argument vector as a shell-quoted command line."""
    return shlex.join(str(arg) for arg in cmd)


def run_hadoop_command(
    cmd: Sequence[str],
    operation_context: str,
    *,
    merge_stderr: bool = False,
) -> str:
    """Run a command to completion and return its stdout.

    Output is decoded as UTF-8, with undecodable bytes replaced, since hadoop
    log lines are not guaranteed to be valid UTF-8.

    Args:
        cmd: Command and arguments to execute
        operation_context: Human-readable description of operation
        merge_stderr: Send stderr into stdout so both are returned together

    Returns:
        Captured stdout (including stderr when merge_stderr is set)

    Raises:
        InvocationError: If the command could not be started
        HdfsCommandError: If the command exited non-zero
    """
    cmd_str = format_command(cmd)
    logger.debug("Running %s: %s", operation_context, cmd_str)

    try:
        result = subprocess.run(
            list(cmd),
            stdin=subprocess.DEVNULL,
            stdout=subprocess.PIPE,
            stderr=subprocess.STDOUT if merge_stderr else subprocess.PIPE,
            text=True,
            encoding="utf-8",
            errors="replace",
            check=False,
        )
    except OSError as e:
        error_msg = f"Failed to start command while trying to {operation_context}: {e}"
        error_msg += f"\nFull command: {cmd_str}"
        raise InvocationError(error_msg) from e

    if result.returncode == 0:
        return result.stdout

    error_msg = f"Failed to {operation_context}"
    error_msg += f"\nCommand: {cmd_str}"
    error_msg += f"\nExit code: {result.returncode}"

    stdout_stripped = (result.stdout or "").strip()
    if stdout_stripped:
        error_msg += f"\nstdout: {stdout_stripped}"

    stderr_stripped = (result.stderr or "").strip()
    if stderr_stripped:
        error_msg += f"\nstderr: {stderr_stripped}"

    raise HdfsCommandError(error_msg)
