import logging
import os

import click

from hdfs_client.cli.commands.copy_cmd import get_cmd, put_cmd
from hdfs_client.cli.commands.du_cmd import du_cmd
from hdfs_client.cli.commands.exists_cmd import exists_cmd
from hdfs_client.cli.commands.rm_cmd import rm_cmd
from hdfs_client.cli.commands.which_cmd import which_cmd
from hdfs_client.cli.output import error_output
from hdfs_client.core.context import create_context
from hdfs_client.core.errors import HadoopUnavailableError

CONTEXT_SETTINGS = dict(help_option_names=["-h", "--help"])  # terse help flags

DEBUG_FORMAT = "[DEBUG %(name)s:%(lineno)d] %(message)s"


@click.group(context_settings=CONTEXT_SETTINGS)
@click.version_option(package_name="hdfs-client")
@click.option(
    "--hadoop",
    "hadoop",
    default=None,
    metavar="PATH",
    help="hadoop executable to use instead of HADOOP_HOME or PATH discovery.",
)
@click.option("--debug", is_flag=True, help="Log every hadoop command that is run.")
@click.pass_context
def cli(ctx: click.Context, hadoop: str | None, debug: bool) -> None:
    """Run HDFS operations through the hadoop command-line client."""
    if debug or os.getenv("HDFS_CLIENT_DEBUG"):
        logging.basicConfig(level=logging.DEBUG, format=DEBUG_FORMAT)

    # Only create context if not already provided (e.g., by tests)
    if ctx.obj is None:
        try:
            ctx.obj = create_context(hadoop=hadoop)
        except (HadoopUnavailableError, ValueError) as e:
            error_output(f"hadoop client is not usable: {e}")
            raise SystemExit(1) from e


cli.add_command(du_cmd)
cli.add_command(exists_cmd)
cli.add_command(get_cmd)
cli.add_command(put_cmd)
cli.add_command(rm_cmd)
cli.add_command(which_cmd)


def main() -> None:
    """CLI entry point used by the `hdfs-client` console script."""
    cli()
