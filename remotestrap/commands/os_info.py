"""远程系统识别命令"""

import asyncio
import logging

import click

from remotestrap.commands.options import get_config, ssh_options
from remotestrap.core.connector import open_session
from remotestrap.core.errors import RemotestrapError
from remotestrap.core.probes import osinfo

logger = logging.getLogger(__name__)


@click.command()
@ssh_options
@click.pass_context
def os_command(ctx, ssh_args):
    """识别远程主机的操作系统"""
    cfg = get_config(ctx)
    try:
        detected = asyncio.run(_osinfo_async(ssh_args, cfg))
    except RemotestrapError as e:
        logger.debug(f"os detection failed: {e}", exc_info=True)
        raise click.ClickException(str(e)) from e
    click.echo(detected.value)


async def _osinfo_async(ssh_args, cfg):
    async with open_session(ssh_args, cfg) as conn:
        return await osinfo(conn)
