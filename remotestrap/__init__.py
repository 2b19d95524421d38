"""remotestrap - remote host bootstrap helper"""

__version__ = "0.1.0"

from .core.auth import resolve, resolve_credentials, resolve_target
from .core.connector import connect, open_session
from .core.errors import (
    CommandFailed,
    ConfigurationError,
    ConnectionFailed,
    KeyFileError,
    ProbeError,
    RemotestrapError,
    TransportError,
)
from .core.models import (
    CommandOutcome,
    Config,
    ConnectionTarget,
    Os,
    PasswordAuth,
    PrivateKeyAuth,
    SshSettings,
)
from .core.paths import expand_tilde
from .core.probes import file_exists, osinfo, some_output, which
from .core.runner import run, silent
from .core.status import Installed, NotInstalled, Status

__all__ = [
    "CommandFailed",
    "CommandOutcome",
    "Config",
    "ConfigurationError",
    "ConnectionFailed",
    "ConnectionTarget",
    "Installed",
    "KeyFileError",
    "NotInstalled",
    "Os",
    "PasswordAuth",
    "PrivateKeyAuth",
    "ProbeError",
    "RemotestrapError",
    "SshSettings",
    "Status",
    "TransportError",
    "connect",
    "expand_tilde",
    "file_exists",
    "open_session",
    "osinfo",
    "resolve",
    "resolve_credentials",
    "resolve_target",
    "run",
    "silent",
    "some_output",
    "which",
]
