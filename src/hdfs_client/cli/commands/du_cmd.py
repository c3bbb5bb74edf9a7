import click
from rich.console import Console
from rich.table import Table

from hdfs_client.cli.output import exit_on_hdfs_error, format_size, machine_output
from hdfs_client.core.context import HdfsContext
from hdfs_client.core.paths import absolute_path


@click.command("du")
@click.argument("paths", nargs=-1, required=True)
@click.option(
    "-H",
    "--human-readable",
    is_flag=True,
    help="Show sizes with K/M/G suffixes instead of bytes.",
)
@click.option("--bytes-only", is_flag=True, help="Print only the byte count of each path.")
@click.pass_obj
def du_cmd(
    ctx: HdfsContext, paths: tuple[str, ...], human_readable: bool, bytes_only: bool
) -> None:
    """Show the disk usage of PATHS in HDFS."""
    sizes: list[tuple[str, int]] = []
    with exit_on_hdfs_error():
        for path in paths:
            sizes.append((absolute_path(path), ctx.hdfs.du(path)))

    if bytes_only:
        for _, size in sizes:
            machine_output(str(size))
        return

    table = Table(show_header=True, header_style="bold")
    table.add_column("size", justify="right", no_wrap=True)
    table.add_column("path", style="cyan", no_wrap=True)
    for path, size in sizes:
        table.add_row(format_size(size) if human_readable else str(size), path)

    console = Console(width=200)
    console.print(table)
