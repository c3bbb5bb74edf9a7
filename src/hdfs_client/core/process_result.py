"""Collect the outcome of an asyncio subprocess in one step.

A child process that fills its stdout or stderr pipe blocks until somebody
reads it, so waiting for the exit status before draining the pipes can hang
forever. collect_process_result() awaits the exit status and both pipe reads
concurrently and only returns once all three have completed.
"""

import asyncio
import logging
from collections.abc import Awaitable
from dataclasses import dataclass

from hdfs_client.core.errors import ProcessResultError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ProcessResult:
    """Exit status and full output of a finished subprocess.

    Attributes:
        status: Return code, negative when killed by a signal, None if unknown
        stdout: Everything the process wrote to stdout
        stderr: Everything the process wrote to stderr
    """

    status: int | None
    stdout: str
    stderr: str


_SIGNAL_FAILURES = (
    ("status", "Failed to get the exit status of the subprocess"),
    ("stdout", "Failed to read stdout from the subprocess"),
    ("stderr", "Failed to read stderr from the subprocess"),
)


def _decode(data: bytes | str) -> str:
    if isinstance(data, bytes):
        return data.decode("utf-8", errors="replace")
    return data


def _failure_reason(error: BaseException) -> str:
    if isinstance(error, asyncio.CancelledError):
        return "discarded"
    return str(error) or type(error).__name__


async def join_process_signals(
    status: Awaitable[int | None],
    stdout: Awaitable[bytes | str],
    stderr: Awaitable[bytes | str],
) -> ProcessResult:
    """Await the three process signals concurrently and combine them.

    Args:
        status: Resolves to the process return code
        stdout: Resolves to the full stdout content
        stderr: Resolves to the full stderr content

    Returns:
        ProcessResult built from all three values

    Raises:
        ProcessResultError: If any signal failed or was cancelled. Signals are
            checked in order status, stdout, stderr and the first failure wins.
    """
    outcomes = await asyncio.gather(status, stdout, stderr, return_exceptions=True)

    for (signal, message), outcome in zip(_SIGNAL_FAILURES, outcomes, strict=True):
        if isinstance(outcome, BaseException):
            reason = _failure_reason(outcome)
            raise ProcessResultError(f"{message}: {reason}", signal=signal, reason=reason)

    return_code, out, err = outcomes
    return ProcessResult(status=return_code, stdout=_decode(out), stderr=_decode(err))


async def collect_process_result(process: asyncio.subprocess.Process) -> ProcessResult:
    """Wait for a subprocess to exit while draining both of its pipes.

    The process must have been created with stdout=PIPE and stderr=PIPE.

    Raises:
        ValueError: If stdout or stderr is not piped
        ProcessResultError: If waiting or reading failed
    """
    if process.stdout is None or process.stderr is None:
        raise ValueError("Subprocess must be created with stdout and stderr piped")

    result = await join_process_signals(
        process.wait(),
        process.stdout.read(),
        process.stderr.read(),
    )
    logger.debug(
        "Subprocess %s finished: status=%s, stdout=%d chars, stderr=%d chars",
        process.pid,
        result.status,
        len(result.stdout),
        len(result.stderr),
    )
    return result
