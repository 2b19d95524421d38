"""数据模型"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional


class Os(Enum):
    UBUNTU = "ubuntu"
    DEBIAN = "debian"
    UNSUPPORTED = "unsupported"


@dataclass
class SshSettings:
    """SSH 参数，命令行参数和配置文件的 ssh 段共用"""

    remote_password: Optional[str] = None
    remote_key_file: Optional[str] = None
    remote_host: Optional[str] = None
    remote_port: Optional[int] = None
    remote_user: Optional[str] = None


@dataclass
class Config:
    """配置文件模型"""

    ssh: Optional[SshSettings] = None


@dataclass(frozen=True)
class PasswordAuth:
    """密码认证"""

    password: str = field(repr=False)


@dataclass(frozen=True)
class PrivateKeyAuth:
    """私钥认证"""

    contents: str = field(repr=False)
    passphrase: Optional[str] = field(default=None, repr=False)


@dataclass(frozen=True)
class ConnectionTarget:
    """连接目标"""

    host: str = ""
    port: int = 22
    username: str = ""


@dataclass(frozen=True)
class CommandOutcome:
    """命令执行结果"""

    exit_code: int
    output_text: str
