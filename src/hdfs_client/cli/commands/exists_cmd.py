import asyncio

import click

from hdfs_client.cli.output import exit_on_hdfs_error, machine_output
from hdfs_client.core.context import HdfsContext
from hdfs_client.integrations.hdfs.abc import Hdfs


async def _check_all(hdfs: Hdfs, paths: tuple[str, ...]) -> list[bool]:
    return list(await asyncio.gather(*(hdfs.exists(path) for path in paths)))


@click.command("exists")
@click.argument("paths", nargs=-1, required=True)
@click.pass_obj
def exists_cmd(ctx: HdfsContext, paths: tuple[str, ...]) -> None:
    """Check whether PATHS exist in HDFS.

    Prints true or false for each path. Exits 0 only if every path exists.
    """
    with exit_on_hdfs_error():
        results = asyncio.run(_check_all(ctx.hdfs, paths))

    for path, found in zip(paths, results, strict=True):
        if len(paths) == 1:
            machine_output("true" if found else "false")
        else:
            machine_output(f"{path}\t{'true' if found else 'false'}")

    if not all(results):
        raise SystemExit(1)
