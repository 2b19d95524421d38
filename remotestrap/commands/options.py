"""各命令共用的 SSH 选项"""

import functools

import click

from remotestrap.config.loader import load_config
from remotestrap.core.errors import ConfigurationError
from remotestrap.core.models import Config, SshSettings


def ssh_options(func):
    """添加 --host/--port/--user/--password/--key-file，合并为 ssh_args 参数"""

    @click.option("--host", "-H", "remote_host", help="远程主机")
    @click.option("--port", "-p", "remote_port", type=int, help="SSH 端口 (默认 22)")
    @click.option("--user", "-u", "remote_user", help="登录用户名")
    @click.option("--password", "remote_password", help="登录密码")
    @click.option("--key-file", "-i", "remote_key_file", help="私钥文件路径")
    @functools.wraps(func)
    def wrapper(*args, remote_host, remote_port, remote_user, remote_password,
                remote_key_file, **kwargs):
        ssh_args = SshSettings(
            remote_password=remote_password,
            remote_key_file=remote_key_file,
            remote_host=remote_host,
            remote_port=remote_port,
            remote_user=remote_user,
        )
        return func(*args, ssh_args=ssh_args, **kwargs)

    return wrapper


def get_config(ctx: click.Context) -> Config:
    """加载 --config 指定的配置，未指定时使用默认位置"""
    ctx.ensure_object(dict)
    if "config" not in ctx.obj:
        try:
            ctx.obj["config"] = load_config(ctx.obj.get("config_path"))
        except ConfigurationError as e:
            raise click.ClickException(str(e)) from e
    return ctx.obj["config"]
