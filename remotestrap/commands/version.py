import ssl
import sys

import asyncssh
import click

from remotestrap import __version__


def version_lines():
    interpreter_version = "Python " + " ".join(sys.version.split("\n"))
    return [
        f"Version: {__version__}",
        f"Running-Interpreter-Version: {interpreter_version}",
        f"Running-Platform: {sys.platform}",
        f"OpenSSL version: {ssl.OPENSSL_VERSION}",
        f"asyncssh version: {asyncssh.__version__}",
    ]


@click.command()
def version_command():
    """显示版本信息"""
    click.echo("\n".join(version_lines()))
