import click
from .commands import *


@click.group()
@click.option("--path", "-p", default=".", help="Path to the project directory.")
@click.pass_context
def cli(ctx, path):
    """PlatformProbe CLI tool."""
    ctx.obj = {"path": path}

cli.add_command(discover)
cli.add_command(config)
cli.add_command(log)
cli.add_command(version)
