"""远程命令执行

同一会话上的命令必须顺序执行，不要并发调用。
"""

import logging

import asyncssh

from remotestrap.core.errors import CommandFailed, TransportError
from remotestrap.core.models import CommandOutcome

logger = logging.getLogger(__name__)


async def _execute(conn: asyncssh.SSHClientConnection, command: str) -> CommandOutcome:
    try:
        result = await conn.run(
            command,
            check=False,
            stderr=asyncssh.STDOUT,
            encoding="utf-8",
            errors="replace",
        )
    except (asyncssh.Error, OSError) as e:
        logger.debug(f"{command} transport error: {e}")
        raise TransportError(command, str(e)) from e

    exit_code = result.exit_status if result.exit_status is not None else -1
    return CommandOutcome(exit_code=exit_code, output_text=result.stdout or "")


async def run(conn: asyncssh.SSHClientConnection, command: str) -> CommandOutcome:
    """执行命令，退出码非 0 时抛出 CommandFailed"""
    outcome = await _execute(conn, command)
    if outcome.exit_code == 0:
        logger.debug(f"{command} {outcome!r}")
        return outcome
    logger.warning(f"{command} {outcome!r}")
    raise CommandFailed(command, outcome)


async def silent(conn: asyncssh.SSHClientConnection, command: str) -> CommandOutcome:
    """执行命令，忽略退出码，由调用方检查结果"""
    outcome = await _execute(conn, command)
    logger.debug(f"{command} {outcome!r}")
    return outcome
