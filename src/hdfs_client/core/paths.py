"""HDFS path normalization."""

import posixpath

HDFS_SCHEME = "hdfs://"


def absolute_path(hdfs_path: str) -> str:
    """Return the absolute form of an HDFS path.

    Scheme-qualified paths and paths starting with "/" are returned unchanged.
    Anything else is joined onto an empty root, which makes it absolute.
    The result is stable: absolute_path(absolute_path(p)) == absolute_path(p).

    Examples:
        >>> absolute_path("hdfs://namenode/data")
        'hdfs://namenode/data'
        >>> absolute_path("data/file")
        '/data/file'
    """
    if hdfs_path.startswith(HDFS_SCHEME) or hdfs_path.startswith("/"):
        return hdfs_path

    return posixpath.join("/", hdfs_path)
