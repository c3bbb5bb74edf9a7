"""Real HDFS operations using the hadoop CLI.

exists() launches `hadoop fs -test -e` through asyncio and interprets the exit
code. The remaining operations run blocking commands through
run_hadoop_command() and only care about success or failure, except
du() which parses the size out of the command output.
"""

import asyncio
import logging
import os
import re

from hdfs_client.core.config import HdfsConfig
from hdfs_client.core.errors import (
    FormatError,
    HadoopUnavailableError,
    HdfsCommandError,
    InvocationError,
    PreconditionError,
    UnexpectedResultError,
)
from hdfs_client.core.paths import absolute_path
from hdfs_client.core.process_result import collect_process_result
from hdfs_client.core.subprocess import format_command, run_hadoop_command
from hdfs_client.integrations.hdfs.abc import Hdfs

logger = logging.getLogger(__name__)

_WHITESPACE = re.compile(r"\s+")
_DIGITS = re.compile(r"[0-9]+")


def parse_du_output(output: str, path: str) -> int:
    """Extract the byte count for `path` from `hadoop fs -du` output.

    hadoop interleaves WARN and other log lines with the data, so every line
    is scanned and only a line with exactly two fields, the second being
    `path`, is used. Fields may be separated by several spaces.

    Raises:
        FormatError: If no line matches or the size is not a non-negative integer
    """
    for line in output.splitlines():
        fields = [field for field in _WHITESPACE.split(line) if field]
        if len(fields) != 2 or fields[1] != path:
            continue

        size = fields[0]
        if _DIGITS.fullmatch(size) is None:
            raise FormatError(
                f"HDFS du returned unexpected format: invalid size '{size}'",
                output=output,
            )
        return int(size)

    raise FormatError(f"HDFS du returned an unexpected format: '{output}'", output=output)


class RealHdfs(Hdfs):
    """Production implementation calling the hadoop CLI via subprocess.

    Example:
        hdfs = RealHdfs.create(load_config())
        if await hdfs.exists("/data/input"):
            size = hdfs.du("/data/input")
    """

    def __init__(self, hadoop: str) -> None:
        """Create a client bound to a hadoop executable without checking it.

        Args:
            hadoop: Path or command name of the hadoop client
        """
        self._hadoop = hadoop

    @property
    def hadoop(self) -> str:
        return self._hadoop

    @classmethod
    def create(cls, config: HdfsConfig) -> "RealHdfs":
        """Create a client after verifying the executable answers `version`.

        Raises:
            HadoopUnavailableError: If `hadoop version` cannot be run or fails
        """
        try:
            run_hadoop_command(
                [config.hadoop, "version"],
                operation_context="check the hadoop client",
                merge_stderr=True,
            )
        except (InvocationError, HdfsCommandError) as e:
            raise HadoopUnavailableError(str(e)) from e

        logger.debug("Using hadoop client %s (from %s)", config.hadoop, config.source)
        return cls(config.hadoop)

    async def exists(self, path: str) -> bool:
        cmd = [self._hadoop, "fs", "-test", "-e", absolute_path(path)]
        logger.debug("Launching %s", format_command(cmd))

        try:
            process = await asyncio.create_subprocess_exec(
                *cmd,
                stdin=asyncio.subprocess.DEVNULL,
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE,
            )
        except OSError as e:
            raise InvocationError(f"Failed to execute the subprocess: {e}") from e

        result = await collect_process_result(process)

        if result.status is None:
            raise UnexpectedResultError(
                "Failed to reap the subprocess: "
                f"stdout='{result.stdout}', "
                f"stderr='{result.stderr}'",
                status=None,
                stdout=result.stdout,
                stderr=result.stderr,
            )

        if result.status == 0:
            return True
        if result.status == 1:
            return False

        raise UnexpectedResultError(
            "Unexpected result from the subprocess: "
            f"status='{result.status}', "
            f"stdout='{result.stdout}', "
            f"stderr='{result.stderr}'",
            status=result.status,
            stdout=result.stdout,
            stderr=result.stderr,
        )

    def du(self, path: str) -> int:
        hdfs_path = absolute_path(path)

        # stderr goes to stdout so failures and log chatter show up together
        try:
            output = run_hadoop_command(
                [self._hadoop, "fs", "-du", hdfs_path],
                operation_context=f"get disk usage of '{hdfs_path}'",
                merge_stderr=True,
            )
        except HdfsCommandError as e:
            raise HdfsCommandError(f"HDFS du failed: {e}") from e

        return parse_du_output(output, hdfs_path)

    def rm(self, path: str) -> None:
        hdfs_path = absolute_path(path)
        run_hadoop_command([self._hadoop, "fs", "-rm", hdfs_path], f"remove '{hdfs_path}'")

    def copy_from_local(self, from_path: str, to_path: str) -> None:
        if not os.path.exists(from_path):
            raise PreconditionError(f"Failed to find {from_path}")

        hdfs_path = absolute_path(to_path)
        run_hadoop_command(
            [self._hadoop, "fs", "-copyFromLocal", from_path, hdfs_path],
            f"copy '{from_path}' to '{hdfs_path}'",
        )

    def copy_to_local(self, from_path: str, to_path: str) -> None:
        hdfs_path = absolute_path(from_path)
        run_hadoop_command(
            [self._hadoop, "fs", "-copyToLocal", hdfs_path, to_path],
            f"copy '{hdfs_path}' to '{to_path}'",
        )
