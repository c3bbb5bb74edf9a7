import click

from hdfs_client.cli.output import exit_on_hdfs_error, user_output
from hdfs_client.core.context import HdfsContext
from hdfs_client.core.paths import absolute_path


@click.command("put")
@click.argument("local_path", type=click.Path(dir_okay=False))
@click.argument("hdfs_path")
@click.pass_obj
def put_cmd(ctx: HdfsContext, local_path: str, hdfs_path: str) -> None:
    """Copy LOCAL_PATH into HDFS at HDFS_PATH."""
    with exit_on_hdfs_error():
        ctx.hdfs.copy_from_local(local_path, hdfs_path)

    user_output(f"✓ Copied {local_path} to {click.style(absolute_path(hdfs_path), fg='green')}")


@click.command("get")
@click.argument("hdfs_path")
@click.argument("local_path", type=click.Path())
@click.pass_obj
def get_cmd(ctx: HdfsContext, hdfs_path: str, local_path: str) -> None:
    """Copy HDFS_PATH out of HDFS to LOCAL_PATH."""
    with exit_on_hdfs_error():
        ctx.hdfs.copy_to_local(hdfs_path, local_path)

    user_output(f"✓ Copied {absolute_path(hdfs_path)} to {click.style(local_path, fg='green')}")
