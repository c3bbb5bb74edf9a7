"""Application context with dependency injection."""

from dataclasses import dataclass

from hdfs_client.core.config import HdfsConfig, load_config
from hdfs_client.integrations.hdfs.abc import Hdfs
from hdfs_client.integrations.hdfs.fake import FakeHdfs
from hdfs_client.integrations.hdfs.real import RealHdfs


@dataclass(frozen=True)
class HdfsContext:
    """Immutable context holding all dependencies for CLI commands.

    Created at CLI entry point and threaded through the application.
    Frozen to prevent accidental modification at runtime.
    """

    hdfs: Hdfs
    config: HdfsConfig

    @staticmethod
    def for_test(hdfs: Hdfs | None = None, config: HdfsConfig | None = None) -> "HdfsContext":
        """Create a context backed by fakes unless overridden.

        Example:
            >>> ctx = HdfsContext.for_test(FakeHdfs(files={"/data": 10}))
        """
        return HdfsContext(
            hdfs=hdfs if hdfs is not None else FakeHdfs(),
            config=config if config is not None else HdfsConfig(hadoop="hadoop", source="PATH"),
        )


def create_context(hadoop: str | None = None) -> HdfsContext:
    """Create production context with a verified hadoop client.

    Args:
        hadoop: Explicit executable overriding environment discovery

    Raises:
        HadoopUnavailableError: If the resolved executable does not run
        ValueError: If the config file is malformed
    """
    config = load_config(override=hadoop)
    return HdfsContext(hdfs=RealHdfs.create(config), config=config)
