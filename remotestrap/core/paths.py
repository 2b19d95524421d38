from pathlib import Path
from typing import Callable, Optional, Union

PathLike = Union[str, Path]


def home_dir() -> Optional[Path]:
    """当前用户主目录，无法确定时返回 None"""
    try:
        return Path.home()
    except (RuntimeError, KeyError):
        return None


def expand_tilde(
    path: PathLike, home: Callable[[], Optional[PathLike]] = home_dir
) -> str:
    """展开开头的 ~ ，不支持 ~user 形式"""
    path = str(path)
    if not path.startswith("~"):
        return path

    rest = path[1:]
    if rest and not rest.startswith("/"):
        # ~otheruser/...
        return path

    resolved = home()
    if resolved is None:
        return path
    return f"{resolved}{rest}"
