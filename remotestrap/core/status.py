"""检查结果汇总"""

import json
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Dict, Sequence, Tuple


def _quote(items: Sequence[str]) -> str:
    return "[" + ", ".join(json.dumps(item, ensure_ascii=False) for item in items) + "]"


class Status(ABC):
    """一组检查步骤的汇总结果

    只有两种取值：fail 为空时是 Installed，否则是 NotInstalled。
    构造之后不再修改，只用于输出。
    """

    @staticmethod
    def new(success: Sequence[str], fail: Sequence[str]) -> "Status":
        if not fail:
            return Installed(success=success)
        return NotInstalled(success=success, fail=fail)

    @abstractmethod
    def fields(self) -> Dict[str, Tuple[str, ...]]:
        """非空的字段"""

    @property
    def name(self) -> str:
        return type(self).__name__

    def to_dict(self) -> Dict[str, Any]:
        """结构化表示，省略空列表"""
        return {self.name: {key: list(value) for key, value in self.fields().items()}}

    def describe(self) -> str:
        fields = self.fields()
        if not fields:
            return self.name
        body = ", ".join(f"{key}: {_quote(value)}" for key, value in fields.items())
        return f"{self.name} {{ {body} }}"

    def line(self, alias: str) -> str:
        return f"+ {alias}: {self.describe()}"

    def print(self, alias: str, renderer=None):
        """打印一行汇总，默认彩色输出到终端"""
        if renderer is None:
            from remotestrap.ui.renderer import RichStatusRenderer

            renderer = RichStatusRenderer()
        renderer.render(alias, self)


@dataclass(frozen=True)
class Installed(Status):
    success: Tuple[str, ...] = ()

    def __post_init__(self):
        object.__setattr__(self, "success", tuple(self.success))

    def fields(self) -> Dict[str, Tuple[str, ...]]:
        return {"success": self.success} if self.success else {}


@dataclass(frozen=True)
class NotInstalled(Status):
    success: Tuple[str, ...] = ()
    fail: Tuple[str, ...] = field(default=())

    def __post_init__(self):
        object.__setattr__(self, "success", tuple(self.success))
        object.__setattr__(self, "fail", tuple(self.fail))

    def fields(self) -> Dict[str, Tuple[str, ...]]:
        out = {}
        if self.success:
            out["success"] = self.success
        if self.fail:
            out["fail"] = self.fail
        return out
