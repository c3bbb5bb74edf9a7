import click

from hdfs_client.cli.output import machine_output
from hdfs_client.core.context import HdfsContext


@click.command("which")
@click.pass_obj
def which_cmd(ctx: HdfsContext) -> None:
    """Show which hadoop executable is used and how it was found."""
    machine_output(f"{ctx.config.hadoop} ({ctx.config.source})")
