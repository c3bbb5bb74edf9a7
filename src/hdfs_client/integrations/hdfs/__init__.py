"""HDFS integration built on the hadoop CLI."""

from hdfs_client.integrations.hdfs.abc import Hdfs
from hdfs_client.integrations.hdfs.fake import FakeHdfs
from hdfs_client.integrations.hdfs.real import RealHdfs

__all__ = ["FakeHdfs", "Hdfs", "RealHdfs"]
