"""Discovery of the hadoop client executable.

Resolution order:
1. An explicit override (CLI --hadoop or HDFS_CLIENT_HADOOP)
2. The "hadoop" key of ~/.hdfs-client/config.toml (HDFS_CLIENT_CONFIG overrides the path)
3. $HADOOP_HOME/bin/hadoop
4. Bare "hadoop", looked up on PATH when it is executed
"""

import os
import tomllib
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

DEFAULT_EXECUTABLE = "hadoop"


@dataclass(frozen=True)
class HdfsConfig:
    """Resolved client configuration.

    Attributes:
        hadoop: Executable used for every hadoop invocation
        source: Which rule produced the executable: "override", "config_file",
            "HADOOP_HOME" or "PATH"
    """

    hadoop: str
    source: str


def default_config_path(environ: Mapping[str, str]) -> Path:
    """Location of the TOML config file."""
    configured = environ.get("HDFS_CLIENT_CONFIG")
    if configured:
        return Path(configured).expanduser()
    return Path.home() / ".hdfs-client" / "config.toml"


def _read_config_file(config_path: Path) -> str | None:
    if not config_path.exists():
        return None

    try:
        data = tomllib.loads(config_path.read_text(encoding="utf-8"))
    except tomllib.TOMLDecodeError as e:
        raise ValueError(f"Malformed config file {config_path}: {e}") from e

    hadoop = data.get("hadoop")
    if hadoop is None:
        return None
    if not isinstance(hadoop, str) or not hadoop:
        raise ValueError(f"'hadoop' in {config_path} must be a non-empty string")
    return hadoop


def load_config(
    override: str | None = None,
    environ: Mapping[str, str] | None = None,
    config_path: Path | None = None,
) -> HdfsConfig:
    """Resolve the hadoop executable.

    Args:
        override: Executable given explicitly by the caller
        environ: Environment to read (defaults to os.environ)
        config_path: TOML file to read (defaults to default_config_path())

    Returns:
        HdfsConfig naming the executable and where it came from

    Raises:
        ValueError: If the config file exists but is malformed
    """
    env = os.environ if environ is None else environ

    explicit = override or env.get("HDFS_CLIENT_HADOOP")
    if explicit:
        return HdfsConfig(hadoop=explicit, source="override")

    from_file = _read_config_file(config_path or default_config_path(env))
    if from_file is not None:
        return HdfsConfig(hadoop=from_file, source="config_file")

    hadoop_home = env.get("HADOOP_HOME")
    if hadoop_home:
        return HdfsConfig(
            hadoop=os.path.join(hadoop_home, "bin", DEFAULT_EXECUTABLE),
            source="HADOOP_HOME",
        )

    return HdfsConfig(hadoop=DEFAULT_EXECUTABLE, source="PATH")
