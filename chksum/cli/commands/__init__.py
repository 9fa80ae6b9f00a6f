"""
Click command implementations for chksum CLI.

Each module corresponds to a chksum command (e.g., files.py implements
'chksum files'). Commands are registered with the main CLI group via
register_commands() in chksum.cli.
"""

from .algorithms import algorithms
from .config import config
from .files import files

COMMANDS = [
    algorithms,
    config,
    files,
]

__all__ = [
    "COMMANDS",
    "algorithms",
    "config",
    "files",
]
