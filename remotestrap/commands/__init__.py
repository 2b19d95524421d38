"""命令行命令模块"""

from .check import check_command
from .os_info import os_command
from .run import run_command
from .version import version_command

__all__ = ["check_command", "os_command", "run_command", "version_command"]
