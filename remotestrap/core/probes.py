"""基于 silent 的远程探测"""

import logging
import asyncssh

from remotestrap.core.errors import ProbeError, RemotestrapError
from remotestrap.core.models import Os
from remotestrap.core.runner import silent

logger = logging.getLogger(__name__)

SHELL_PREFIX = "bash: line 1: "


async def osinfo(conn: asyncssh.SSHClientConnection) -> Os:
    """根据 uname -a 判断系统类型"""
    try:
        outcome = await silent(conn, "uname -a")
    except RemotestrapError as e:
        logger.debug(f"osinfo failed: {e}")
        return Os.UNSUPPORTED

    if "Ubuntu" in outcome.output_text:
        return Os.UBUNTU
    if "Debian" in outcome.output_text:
        return Os.DEBIAN
    return Os.UNSUPPORTED


async def which(conn: asyncssh.SSHClientConnection, command: str) -> str:
    """执行检查命令，成功时返回去掉空白的输出，否则抛出 ProbeError"""
    try:
        outcome = await silent(conn, command)
    except RemotestrapError as e:
        raise ProbeError("not installed") from e

    if outcome.exit_code == 0:
        return outcome.output_text.strip()
    message = outcome.output_text.strip().replace(SHELL_PREFIX, "")
    raise ProbeError(message)


async def some_output(conn: asyncssh.SSHClientConnection, command: str) -> bool:
    """命令成功且输出非空"""
    try:
        outcome = await silent(conn, command)
    except RemotestrapError:
        return False
    return outcome.exit_code == 0 and bool(outcome.output_text.strip())


async def file_exists(conn: asyncssh.SSHClientConnection, filename: str) -> bool:
    try:
        outcome = await silent(conn, f"ls -1 {filename}")
    except RemotestrapError:
        return False
    return outcome.exit_code == 0
