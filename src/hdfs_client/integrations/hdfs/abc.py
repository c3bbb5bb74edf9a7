"""Abstract interface for HDFS operations.

Follows the integration pattern used across the client: an ABC describing the
operations, a real implementation calling the hadoop CLI, and an in-memory
fake for tests of higher layers.
"""

from abc import ABC, abstractmethod


class Hdfs(ABC):
    """Abstract interface for the supported HDFS operations.

    HDFS-side paths are normalized with absolute_path() before use. Local
    paths are used as given.
    """

    @abstractmethod
    async def exists(self, path: str) -> bool:
        """Check whether a path exists in HDFS.

        Returns:
            True if `hadoop fs -test -e` exits 0, False if it exits 1

        Raises:
            InvocationError: If the hadoop process could not be started
            ProcessResultError: If the exit status or output could not be collected
            UnexpectedResultError: For any other exit status
        """
        ...

    @abstractmethod
    def du(self, path: str) -> int:
        """Return the disk usage of a path in bytes.

        Raises:
            InvocationError: If the hadoop process could not be started
            HdfsCommandError: If the du command fails
            FormatError: If no output line reports the requested path
        """
        ...

    @abstractmethod
    def rm(self, path: str) -> None:
        """Remove a path from HDFS.

        Raises:
            InvocationError: If the hadoop process could not be started
            HdfsCommandError: If the rm command fails
        """
        ...

    @abstractmethod
    def copy_from_local(self, from_path: str, to_path: str) -> None:
        """Copy a local file into HDFS.

        Raises:
            PreconditionError: If the local source does not exist
            InvocationError: If the hadoop process could not be started
            HdfsCommandError: If the copy command fails
        """
        ...

    @abstractmethod
    def copy_to_local(self, from_path: str, to_path: str) -> None:
        """Copy an HDFS file to the local filesystem.

        Raises:
            InvocationError: If the hadoop process could not be started
            HdfsCommandError: If the copy command fails
        """
        ...
