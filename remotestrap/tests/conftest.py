import logging
from contextlib import asynccontextmanager
from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock

import pytest


def completed(exit_status=0, stdout=""):
    """模拟 asyncssh.SSHCompletedProcess"""
    return SimpleNamespace(exit_status=exit_status, stdout=stdout, stderr=None)


def fake_conn(*results):
    """按顺序返回 results 的假连接，元素为异常时抛出"""
    conn = MagicMock()
    conn.run = AsyncMock(side_effect=list(results))
    conn.wait_closed = AsyncMock()
    return conn


def fake_session(conn=None, error=None):
    """替代 open_session"""

    @asynccontextmanager
    async def _session(ssh_args, cfg):
        if error is not None:
            raise error
        yield conn

    return _session


@pytest.fixture(autouse=True)
def reset_logger():
    yield
    logger = logging.getLogger("remotestrap")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
    logger.propagate = True


@pytest.fixture
def home(tmp_path, monkeypatch):
    """把 HOME 指向临时目录"""
    monkeypatch.setenv("HOME", str(tmp_path))
    return tmp_path


@pytest.fixture
def make_conn():
    return fake_conn


@pytest.fixture
def result():
    return completed
