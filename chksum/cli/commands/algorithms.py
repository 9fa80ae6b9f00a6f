"""
Native Click implementation of the algorithms command.

Usage: chksum algorithms
"""

import click

from ...hashing import HashAlgorithmRegistry


@click.command("algorithms")
@click.option("--all", "show_all", is_flag=True, help="Include algorithms this Python cannot compute.")
def algorithms(show_all: bool) -> None:
    """List supported digest algorithms."""
    registry = HashAlgorithmRegistry()
    names = registry.registered_algorithms if show_all else registry.available_algorithms
    available = set(registry.available_algorithms)
    for name in names:
        if name in available:
            click.echo(name)
        else:
            click.echo(f"{name} (unavailable)")
