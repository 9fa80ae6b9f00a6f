"""
Native Click implementation of the config command.

Usage: chksum config [list|get] [key]
"""

import click

from ...config import config_get, config_list
from ...core.exceptions import InvalidConfigurationError
from ..context import ChksumContext


@click.group("config", invoke_without_command=True)
@click.pass_context
def config(ctx: click.Context) -> None:
    """View configuration.

    Config is read from .chksum/config.toml (or [tool.chksum] in
    pyproject.toml) and CHKSUM_<SECTION>__<KEY> environment variables.

    \b
    Examples:

        chksum config list                 # List all options

        chksum config get digest.algorithms
    """
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


@config.command("list")
@click.pass_obj
def config_list_cmd(ctx: ChksumContext) -> None:
    """List all config options."""
    config_file = ctx.config_file
    click.echo(f"Config file: {config_file if config_file else '(none, using defaults)'}")
    click.echo("")
    click.echo("Available config options:")
    click.echo("")

    for key, info in config_list().items():
        click.echo(f"  {key}")
        click.echo(f"    {info['description']}")
        click.echo(f"    Default: {info['default']}")
        click.echo("")


@config.command("get")
@click.argument("key")
@click.pass_obj
def config_get_cmd(ctx: ChksumContext, key: str) -> None:
    """Get an effective config value.

    Arguments:

        KEY    The config key to get (e.g. output.csv_summary_file)
    """
    try:
        value = config_get(key, config_path=ctx.config_path, start_dir=str(ctx.cwd))
    except InvalidConfigurationError as e:
        error = click.ClickException(str(e))
        error.exit_code = e.exit_code
        raise error from e
    if value is None:
        click.echo(f"{key}: (not set)")
    else:
        click.echo(f"{key}: {value}")
