"""检查远程主机上的软件"""

import asyncio
import logging
import shlex
import sys
from typing import List, Tuple

import click

from remotestrap.commands.options import get_config, ssh_options
from remotestrap.core.connector import open_session
from remotestrap.core.errors import ProbeError, RemotestrapError
from remotestrap.core.models import Config, SshSettings
from remotestrap.core.probes import file_exists, some_output, which
from remotestrap.core.status import NotInstalled, Status
from remotestrap.ui.renderer import RichStatusRenderer, format_statuses

logger = logging.getLogger(__name__)


@click.command()
@click.argument("alias")
@ssh_options
@click.option("--which", "-w", "binaries", multiple=True, help="检查命令是否在 PATH 上")
@click.option("--file", "-f", "files", multiple=True, help="检查文件是否存在")
@click.option("--output-of", "-c", "commands", multiple=True, help="检查命令是否有输出")
@click.option(
    "--output",
    "-o",
    type=click.Choice(["default", "json", "yaml"]),
    default="default",
    help="输出格式",
)
@click.pass_context
def check_command(ctx, alias, binaries, files, commands, output, ssh_args):
    """依次执行检查并输出 ALIAS 的汇总结果"""

    cfg = get_config(ctx)
    status = asyncio.run(_check_async(ssh_args, cfg, binaries, files, commands))

    if output == "default":
        status.print(alias, RichStatusRenderer())
    else:
        click.echo(format_statuses({alias: status}, output))

    if isinstance(status, NotInstalled):
        sys.exit(1)


async def _check_async(
    ssh_args: SshSettings,
    cfg: Config,
    binaries: Tuple[str, ...],
    files: Tuple[str, ...],
    commands: Tuple[str, ...],
) -> Status:
    """在同一个会话里顺序执行所有检查"""
    success: List[str] = []
    fail: List[str] = []

    try:
        async with open_session(ssh_args, cfg) as conn:
            for name in binaries:
                try:
                    path = await which(conn, f"command -v {shlex.quote(name)}")
                    logger.debug(f"{name} found at {path}")
                    success.append(name)
                except ProbeError as e:
                    fail.append(str(e) or f"{name}: not found")

            for filename in files:
                if await file_exists(conn, filename):
                    success.append(filename)
                else:
                    fail.append(f"{filename}: no such file")

            for command in commands:
                if await some_output(conn, command):
                    success.append(command)
                else:
                    fail.append(f"{command}: no output")
    except RemotestrapError as e:
        logger.debug(f"check aborted: {e}", exc_info=True)
        fail.append(str(e))

    return Status.new(success, fail)
