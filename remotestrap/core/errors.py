"""异常定义"""

from remotestrap.core.models import CommandOutcome


class RemotestrapError(Exception):
    """所有错误的基类"""


class ConfigurationError(RemotestrapError):
    """配置或参数无法得到可用的认证方式"""


class KeyFileError(RemotestrapError):
    """私钥文件无法读取"""

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"invalid private key {path}: {reason}")


class ConnectionFailed(RemotestrapError):
    """SSH 握手失败"""

    def __init__(self, host: str, port: int, reason: str):
        self.host = host
        self.port = port
        self.reason = reason
        super().__init__(f"connection to {host}:{port} failed: {reason}")


class TransportError(RemotestrapError):
    """会话本身出错，命令没有得到执行结果"""

    def __init__(self, command: str, reason: str):
        self.command = command
        self.reason = reason
        super().__init__(f"failed to execute {command!r}: {reason}")


class CommandFailed(RemotestrapError):
    """命令退出码非 0"""

    def __init__(self, command: str, outcome: CommandOutcome):
        self.command = command
        self.outcome = outcome
        super().__init__(outcome.output_text)


class ProbeError(RemotestrapError):
    """which 检查失败"""
