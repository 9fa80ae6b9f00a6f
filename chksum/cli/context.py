"""
Click context extension for chksum CLI.

Provides ChksumContext dataclass that holds data passed through the Click
command chain via ctx.obj.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any

from ..core.settings import ChksumSettings, find_config_file, load_settings


@dataclass
class ChksumContext:
    """Extended context passed through Click command chain.

    Attributes:
        cwd: Working directory; relative paths and config discovery start here
        config_path: Explicit config file (--config), or None to search
    """

    cwd: Path
    config_path: Path | None = None

    @classmethod
    def create(cls, cwd: Path | None = None, config_path: Path | None = None) -> ChksumContext:
        """Create a ChksumContext for the current environment."""
        return cls(cwd=cwd or Path.cwd(), config_path=config_path)

    @property
    def config_file(self) -> Path | None:
        """Config file in effect, explicit or discovered."""
        return self.config_path or find_config_file(str(self.cwd))

    def load_settings(self, **overrides: Any) -> ChksumSettings:
        """Load settings, with explicit section overrides taking priority."""
        return load_settings(config_path=self.config_path, start_dir=str(self.cwd), **overrides)
