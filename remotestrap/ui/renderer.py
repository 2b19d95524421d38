"""检查结果输出"""

import json
import sys
from abc import ABC, abstractmethod
from typing import Dict, TextIO

import yaml
from rich.console import Console
from rich.text import Text

from remotestrap.core.status import Installed, Status


class StatusRenderer(ABC):
    """输出一行检查结果"""

    @abstractmethod
    def render(self, alias: str, status: Status):
        pass


class RichStatusRenderer(StatusRenderer):
    """彩色输出，Installed 为绿色，NotInstalled 为红色"""

    def __init__(self, console: Console = None):
        self.console = console or Console()

    def render(self, alias: str, status: Status):
        color = "green" if isinstance(status, Installed) else "red"
        line = Text("+ ")
        line.append(alias, style=color)
        line.append(": ")
        line.append(status.describe(), style=color)
        self.console.print(line, soft_wrap=True)


class PlainStatusRenderer(StatusRenderer):
    def __init__(self, stream: TextIO = None):
        self.stream = stream or sys.stdout

    def render(self, alias: str, status: Status):
        self.stream.write(status.line(alias) + "\n")


def format_statuses(statuses: Dict[str, Status], format_type: str) -> str:
    """结构化格式输出 (json/yaml)"""
    data = {alias: status.to_dict() for alias, status in statuses.items()}
    if format_type == "json":
        return json.dumps(data, indent=2, ensure_ascii=False)
    elif format_type == "yaml":
        return yaml.safe_dump(data, indent=2, allow_unicode=True, sort_keys=False)
    raise ValueError(f"unsupported format: {format_type}")
