"""
Click-based CLI for chksum.

This module provides the main Click command group and serves as the
entry point for the chksum CLI.

Usage:
    from chksum.cli import cli
    cli()  # Invokes the CLI
"""

from __future__ import annotations

from pathlib import Path

import click

from .context import ChksumContext

# Version is loaded from package metadata
try:
    from importlib.metadata import PackageNotFoundError, version

    __version__ = version("chksum")
except PackageNotFoundError:
    __version__ = "0.1.0"


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="chksum")
@click.option(
    "--config",
    "config_path",
    type=click.Path(path_type=Path, dir_okay=False),
    default=None,
    help="Config file to use instead of searching for .chksum/config.toml.",
)
@click.pass_context
def cli(ctx: click.Context, config_path: Path | None) -> None:
    """chksum - compute file checksums and report them

    \b
    Quick Start:
        chksum files dist/*.whl          MD5 and SHA-1 of each file
        chksum files -a SHA-256 app.jar  Only SHA-256

    \b
    Information:
        chksum algorithms                Supported algorithms

    \b
    Configuration:
        chksum config                    View configuration
    """
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())
        ctx.exit(0)
    else:
        ctx.obj = ChksumContext.create(config_path=config_path)


def register_commands() -> None:
    """Register all CLI commands with the main group."""
    from .commands import COMMANDS

    for cmd in COMMANDS:
        cli.add_command(cmd)


register_commands()


__all__ = [
    "ChksumContext",
    "__version__",
    "cli",
    "register_commands",
]
