"""In-memory fake implementation of Hdfs for testing."""

from hdfs_client.core.errors import FormatError, HdfsCommandError, PreconditionError
from hdfs_client.core.paths import absolute_path
from hdfs_client.integrations.hdfs.abc import Hdfs


class FakeHdfs(Hdfs):
    """In-memory fake implementation for testing.

    All state is provided via constructor using keyword arguments.
    This class has NO public setup methods.

    Files are tracked as normalized HDFS path -> size in bytes. Local files
    are tracked the same way, keyed by local path, so copies move sizes
    between the two tables without touching disk.
    """

    def __init__(
        self,
        *,
        files: dict[str, int] | None = None,
        local_files: dict[str, int] | None = None,
        malformed_du_paths: set[str] | None = None,
        failing_commands: set[str] | None = None,
    ) -> None:
        """Create FakeHdfs with pre-configured state.

        Args:
            files: HDFS paths (normalized on entry) mapped to sizes
            local_files: Local paths mapped to sizes
            malformed_du_paths: HDFS paths whose du output cannot be parsed
            failing_commands: Operation names ("rm", "du", ...) that always fail
        """
        self._files = {absolute_path(p): size for p, size in (files or {}).items()}
        self._local_files = dict(local_files or {})
        self._malformed_du_paths = {absolute_path(p) for p in (malformed_du_paths or set())}
        self._failing_commands = failing_commands or set()
        self._calls: list[tuple[str, tuple[str, ...]]] = []

    @property
    def calls(self) -> list[tuple[str, tuple[str, ...]]]:
        """Read-only access to (operation, args) tuples for test assertions."""
        return self._calls.copy()

    @property
    def files(self) -> dict[str, int]:
        return self._files.copy()

    @property
    def local_files(self) -> dict[str, int]:
        return self._local_files.copy()

    async def exists(self, path: str) -> bool:
        hdfs_path = absolute_path(path)
        self._record("exists", hdfs_path)
        return hdfs_path in self._files

    def du(self, path: str) -> int:
        hdfs_path = absolute_path(path)
        self._record("du", hdfs_path)
        if hdfs_path in self._malformed_du_paths:
            raise FormatError(
                f"HDFS du returned an unexpected format: 'garbage {hdfs_path}'",
                output=f"garbage {hdfs_path}",
            )
        if hdfs_path not in self._files:
            raise HdfsCommandError(f"HDFS du failed: du: `{hdfs_path}': No such file or directory")
        return self._files[hdfs_path]

    def rm(self, path: str) -> None:
        hdfs_path = absolute_path(path)
        self._record("rm", hdfs_path)
        if hdfs_path not in self._files:
            raise HdfsCommandError(f"rm: `{hdfs_path}': No such file or directory")
        del self._files[hdfs_path]

    def copy_from_local(self, from_path: str, to_path: str) -> None:
        if from_path not in self._local_files:
            raise PreconditionError(f"Failed to find {from_path}")

        hdfs_path = absolute_path(to_path)
        self._record("copy_from_local", from_path, hdfs_path)
        if hdfs_path in self._files:
            raise HdfsCommandError(f"copyFromLocal: `{hdfs_path}': File exists")
        self._files[hdfs_path] = self._local_files[from_path]

    def copy_to_local(self, from_path: str, to_path: str) -> None:
        hdfs_path = absolute_path(from_path)
        self._record("copy_to_local", hdfs_path, to_path)
        if hdfs_path not in self._files:
            raise HdfsCommandError(f"copyToLocal: `{hdfs_path}': No such file or directory")
        self._local_files[to_path] = self._files[hdfs_path]

    def _record(self, operation: str, *args: str) -> None:
        self._calls.append((operation, args))
        if operation in self._failing_commands:
            raise HdfsCommandError(f"Simulated {operation} failure")
