"""Shared fixtures.

fake_hadoop writes a small POSIX shell script that behaves like the parts of
`hadoop` the client uses, keyed on path prefixes:

- /present...  exists, can be removed and copied out
- /missing...  does not exist
- /broken...   `-test` exits 255 after printing to both streams
- /killed...   `-test` is terminated by SIGKILL
- /big...      `-test` prints 256 KiB to stdout and stderr, then exits 0
- /slow...     `-test` sleeps briefly, then exits 0
- /fail...     `-copyFromLocal` fails

Every invocation is appended to calls.log next to the script.
"""

import stat
from pathlib import Path

import pytest

HADOOP_STUB = r"""#!/bin/sh
echo "$*" >> "$(dirname "$0")/calls.log"

if [ "$1" = "version" ]; then
    echo "Hadoop 3.3.6"
    exit 0
fi

case "$2" in
    -test)
        case "$4" in
            /present*) exit 0 ;;
            /missing*) exit 1 ;;
            /broken*) echo "boom out"; echo "boom err" >&2; exit 255 ;;
            /killed*) kill -9 $$ ;;
            /big*)
                head -c 262144 /dev/zero
                head -c 262144 /dev/zero >&2
                exit 0 ;;
            /slow*) sleep 0.2; exit 0 ;;
        esac
        exit 1 ;;
    -du)
        case "$3" in
            /data/file)
                echo "WARN util.NativeCodeLoader: Unable to load native-hadoop library" >&2
                echo "1234  /data/file"
                exit 0 ;;
            /data/other) echo "1234 /data/elsewhere"; exit 0 ;;
            /data/garbage) echo "abc /data/garbage"; exit 0 ;;
            /data/negative) echo "-5 /data/negative"; exit 0 ;;
            /data/latin1)
                printf 'WARN caf\351\n' >&2
                echo "12 /data/latin1"
                exit 0 ;;
        esac
        echo "du: \`$3': No such file or directory" >&2
        exit 1 ;;
    -rm)
        case "$3" in
            /present*) echo "Deleted $3"; exit 0 ;;
        esac
        echo "rm: \`$3': No such file or directory" >&2
        exit 1 ;;
    -copyFromLocal)
        case "$4" in
            /fail*) echo "copyFromLocal: Permission denied" >&2; exit 1 ;;
        esac
        exit 0 ;;
    -copyToLocal)
        case "$3" in
            /present*) echo "remote data" > "$4"; exit 0 ;;
        esac
        echo "copyToLocal: \`$3': No such file or directory" >&2
        exit 1 ;;
esac

echo "Unknown command: $*" >&2
exit 2
"""


@pytest.fixture
def fake_hadoop(tmp_path: Path) -> Path:
    """Executable stub standing in for the hadoop client."""
    bin_dir = tmp_path / "bin"
    bin_dir.mkdir()
    script = bin_dir / "hadoop"
    script.write_text(HADOOP_STUB, encoding="utf-8")
    script.chmod(script.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
    return script


@pytest.fixture
def hadoop_calls(fake_hadoop: Path):
    """Return a callable listing the argument lines the stub has received."""

    def read_calls() -> list[str]:
        log = fake_hadoop.parent / "calls.log"
        if not log.exists():
            return []
        return log.read_text(encoding="utf-8").splitlines()

    return read_calls
