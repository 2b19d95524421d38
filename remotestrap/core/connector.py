"""建立 SSH 会话"""

import asyncio
import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

import asyncssh

from remotestrap.core.auth import resolve_credentials, resolve_target
from remotestrap.core.errors import ConnectionFailed
from remotestrap.core.models import Config, PasswordAuth, SshSettings

logger = logging.getLogger(__name__)


async def connect(args: SshSettings, cfg: Config) -> asyncssh.SSHClientConnection:
    """合并参数与配置并完成握手

    不校验服务器身份 (known_hosts=None)，只适用于可信的初始化目标。
    """
    target = resolve_target(args, cfg)
    credentials = resolve_credentials(args, cfg)

    # 准备连接参数
    connect_kwargs = {
        "host": target.host,
        "port": target.port,
        "username": target.username,
        "known_hosts": None,
        "agent_path": None,
    }

    if isinstance(credentials, PasswordAuth):
        connect_kwargs["password"] = credentials.password
        connect_kwargs["client_keys"] = None
    else:
        try:
            key = asyncssh.import_private_key(
                credentials.contents, credentials.passphrase
            )
        except (asyncssh.KeyImportError, ValueError) as e:
            raise ConnectionFailed(
                target.host, target.port, f"invalid private key: {e}"
            ) from e
        connect_kwargs["client_keys"] = [key]

    logger.debug(f"connecting to {target.username}@{target.host}:{target.port}")
    try:
        return await asyncssh.connect(**connect_kwargs)
    except asyncssh.PermissionDenied as e:
        raise ConnectionFailed(
            target.host, target.port, f"authentication failed: {e}"
        ) from e
    except (asyncssh.Error, OSError, asyncio.TimeoutError) as e:
        raise ConnectionFailed(target.host, target.port, str(e)) from e


@asynccontextmanager
async def open_session(
    args: SshSettings, cfg: Config
) -> AsyncIterator[asyncssh.SSHClientConnection]:
    """连接的上下文管理器，任何退出路径都会关闭连接"""
    conn = await connect(args, cfg)
    try:
        yield conn
    finally:
        conn.close()
        await conn.wait_closed()
