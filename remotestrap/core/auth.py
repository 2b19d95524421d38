"""认证与连接目标解析

命令行参数和配置文件都可以提供 SSH 参数，同一字段两边都有时以配置文件为准。
"""

import logging
from typing import Optional, TypeVar, Union

from remotestrap.core.errors import ConfigurationError, KeyFileError
from remotestrap.core.models import (
    Config,
    ConnectionTarget,
    PasswordAuth,
    PrivateKeyAuth,
    SshSettings,
)
from remotestrap.core.paths import expand_tilde

logger = logging.getLogger(__name__)

T = TypeVar("T")

Credentials = Union[PasswordAuth, PrivateKeyAuth]

DEFAULT_PORT = 22


def resolve(config_value: Optional[T], arg_value: Optional[T], default: T) -> T:
    """配置优先，其次参数，最后默认值"""
    if config_value is not None:
        return config_value
    if arg_value is not None:
        return arg_value
    return default


def _field(settings: Optional[SshSettings], name: str):
    if settings is None:
        return None
    return getattr(settings, name)


def _merged(args: SshSettings, cfg: Config, name: str, default):
    return resolve(_field(cfg.ssh, name), _field(args, name), default)


def resolve_target(args: SshSettings, cfg: Config) -> ConnectionTarget:
    """合并 host/port/username"""
    return ConnectionTarget(
        host=_merged(args, cfg, "remote_host", ""),
        port=int(_merged(args, cfg, "remote_port", DEFAULT_PORT)),
        username=_merged(args, cfg, "remote_user", ""),
    )


def resolve_credentials(args: SshSettings, cfg: Config) -> Credentials:
    """得到唯一的认证方式，有密码时总是使用密码"""
    password = _merged(args, cfg, "remote_password", "")
    if password:
        logger.debug("using password authentication")
        return PasswordAuth(password)

    raw_path = _merged(args, cfg, "remote_key_file", None)
    if raw_path is None:
        raise ConfigurationError("no private key file provided")

    path = expand_tilde(raw_path)
    try:
        with open(path, encoding="utf-8") as fh:
            contents = fh.read()
    except (OSError, UnicodeDecodeError) as e:
        raise KeyFileError(path, str(e)) from e

    logger.debug(f"using private key {path}")
    return PrivateKeyAuth(contents)
