"""Output helpers for CLI commands with clear intent.

user_output() is for messages meant for a person and goes to stderr.
machine_output() is for results another program may consume and goes to stdout.
"""

from collections.abc import Iterator
from contextlib import contextmanager

import click

from hdfs_client.core.errors import HdfsError


def user_output(message: str = "") -> None:
    click.echo(message, err=True)


def machine_output(message: str = "") -> None:
    click.echo(message)


def error_output(message: str) -> None:
    """Print a message with the red "Error: " prefix."""
    user_output(click.style("Error: ", fg="red") + message)


@contextmanager
def exit_on_hdfs_error() -> Iterator[None]:
    """Report HdfsError with styled output and exit 1.

    Raises:
        SystemExit: If the wrapped block raised HdfsError
    """
    try:
        yield
    except HdfsError as e:
        error_output(str(e))
        raise SystemExit(1) from e


def format_size(size: int) -> str:
    """Format a byte count the way `hadoop fs -du -h` does.

    Examples:
        >>> format_size(512)
        '512'
        >>> format_size(1536)
        '1.5 K'
    """
    if size < 1024:
        return str(size)

    value = size / 1024
    for unit in ("K", "M", "G", "T"):
        if value < 1024:
            return f"{value:.1f} {unit}"
        value /= 1024
    return f"{value:.1f} P"
