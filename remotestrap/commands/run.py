"""远程执行单条命令"""

import asyncio
import logging
import sys

import click

from remotestrap.commands.options import get_config, ssh_options
from remotestrap.core.connector import open_session
from remotestrap.core.errors import CommandFailed, RemotestrapError
from remotestrap.core.runner import run, silent

logger = logging.getLogger(__name__)


@click.command()
@click.argument("command")
@ssh_options
@click.option("--silent", "-s", "silent_mode", is_flag=True, help="忽略非 0 退出码")
@click.pass_context
def run_command(ctx, command, silent_mode, ssh_args):
    """在远程主机上执行 COMMAND，退出码与远程命令一致"""
    cfg = get_config(ctx)
    try:
        outcome = asyncio.run(_run_async(ssh_args, cfg, command, silent_mode))
    except CommandFailed as e:
        click.echo(e.outcome.output_text, nl=False)
        sys.exit(e.outcome.exit_code)
    except RemotestrapError as e:
        logger.debug(f"run {command!r} failed: {e}", exc_info=True)
        raise click.ClickException(str(e)) from e

    click.echo(outcome.output_text, nl=False)
    sys.exit(outcome.exit_code)


async def _run_async(ssh_args, cfg, command, silent_mode):
    async with open_session(ssh_args, cfg) as conn:
        if silent_mode:
            return await silent(conn, command)
        return await run(conn, command)
