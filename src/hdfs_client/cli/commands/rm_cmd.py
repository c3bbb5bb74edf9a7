import click

from hdfs_client.cli.output import exit_on_hdfs_error, user_output
from hdfs_client.core.context import HdfsContext
from hdfs_client.core.paths import absolute_path


@click.command("rm")
@click.argument("path")
@click.pass_obj
def rm_cmd(ctx: HdfsContext, path: str) -> None:
    """Remove PATH from HDFS."""
    with exit_on_hdfs_error():
        ctx.hdfs.rm(path)

    user_output(f"✓ Removed {click.style(absolute_path(path), fg='green')}")
