"""主命令行接口"""

import click

from remotestrap import __version__
from remotestrap.commands.check import check_command
from remotestrap.commands.os_info import os_command
from remotestrap.commands.run import run_command
from remotestrap.commands.version import version_command
from remotestrap.ui.log import setup_logging


@click.group()
@click.version_option(version=__version__)
@click.option("--config", "config_path", type=click.Path(dir_okay=False), help="配置文件路径")
@click.option("--verbose", "-v", is_flag=True, help="输出调试日志")
@click.pass_context
def cli(ctx, config_path, verbose):
    """remotestrap - remote host bootstrap helper

    Connects to a single host over SSH, detects its OS and checks what is
    installed. Values from the config file take priority over command-line
    options.
    """
    ctx.ensure_object(dict)
    ctx.obj["config_path"] = config_path
    setup_logging(verbose)


# 注册子命令
cli.add_command(check_command, name="check")
cli.add_command(os_command, name="os")
cli.add_command(run_command, name="run")
cli.add_command(version_command, name="version")


def main():
    """主入口函数"""
    cli()


if __name__ == "__main__":
    main()
