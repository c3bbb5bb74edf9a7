"""Client for HDFS operations driven through the hadoop command-line tool."""

from hdfs_client.core.config import HdfsConfig, load_config
from hdfs_client.core.errors import (
    FormatError,
    HadoopUnavailableError,
    HdfsCommandError,
    HdfsError,
    InvocationError,
    PreconditionError,
    ProcessResultError,
    UnexpectedResultError,
)
from hdfs_client.core.paths import absolute_path
from hdfs_client.core.process_result import ProcessResult, collect_process_result
from hdfs_client.integrations.hdfs import FakeHdfs, Hdfs, RealHdfs

__all__ = [
    "FakeHdfs",
    "FormatError",
    "HadoopUnavailableError",
    "Hdfs",
    "HdfsCommandError",
    "HdfsConfig",
    "HdfsError",
    "InvocationError",
    "PreconditionError",
    "ProcessResult",
    "ProcessResultError",
    "RealHdfs",
    "UnexpectedResultError",
    "absolute_path",
    "collect_process_result",
    "load_config",
]
