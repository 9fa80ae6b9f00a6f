"""
Pydantic Settings for chksum configuration.

Provides settings loading from TOML files, environment variables, and defaults.
"""

from __future__ import annotations

import tomllib
from pathlib import Path
from typing import Any

from pydantic import ValidationError
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from .exceptions import ConfigFileError, InvalidConfigurationError
from .interfaces.logger import ILogger
from .models.config import DigestConfig, LoggingConfig, OutputConfig

CONFIG_DIR_NAME = ".chksum"
CONFIG_FILE_NAME = "config.toml"


def find_config_file(start_dir: str | None = None, logger: ILogger | None = None) -> Path | None:
    """
    Find .chksum/config.toml by walking up from start_dir (or cwd).

    A pyproject.toml with a [tool.chksum] table also counts.

    Returns:
        Path to config file, or None if not found.
    """
    start = Path(start_dir) if start_dir else Path.cwd()

    for parent in [start, *list(start.parents)]:
        config_path = parent / CONFIG_DIR_NAME / CONFIG_FILE_NAME
        if config_path.exists():
            return config_path

        pyproject = parent / "pyproject.toml"
        if pyproject.exists():
            try:
                with open(pyproject, "rb") as f:
                    data = tomllib.load(f)
                if "tool" in data and "chksum" in data["tool"]:
                    return pyproject
            except (tomllib.TOMLDecodeError, OSError) as e:
                if logger is not None:
                    logger.debug("Skipping unreadable pyproject.toml at %s: %s", pyproject, e)

    return None


def read_config_file(path: Path) -> dict[str, Any]:
    """
    Load the chksum table from a config file.

    Raises:
        ConfigFileError: If the file cannot be read or parsed
    """
    try:
        with open(path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigFileError(
            f"Failed to parse config file: {e}", file_path=str(path), cause=e
        ) from e
    except OSError as e:
        raise ConfigFileError(
            f"Failed to read config file: {e}", file_path=str(path), cause=e
        ) from e

    if path.name == "pyproject.toml":
        data = data.get("tool", {}).get("chksum", {})
    return data


class TomlConfigSource(PydanticBaseSettingsSource):
    """Custom settings source that loads from TOML config files."""

    def __init__(
        self,
        settings_cls: type[BaseSettings],
        config_path: Path | None = None,
        start_dir: str | None = None,
    ):
        super().__init__(settings_cls)
        self._config_path = config_path
        self._start_dir = start_dir
        self._data: dict[str, Any] | None = None

    @property
    def resolved_path(self) -> Path | None:
        return self._config_path or find_config_file(self._start_dir)

    def _load_toml(self) -> dict[str, Any]:
        """Load and cache TOML data."""
        if self._data is None:
            path = self.resolved_path
            self._data = read_config_file(path) if path is not None else {}
        return self._data

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        """Get field value from TOML data."""
        data = self._load_toml()
        return data.get(field_name), field_name, False

    def __call__(self) -> dict[str, Any]:
        """Return all TOML data for settings initialization."""
        return dict(self._load_toml())


class ChksumSettings(BaseSettings):
    """chksum configuration settings with TOML and environment variable support.

    Priority (highest to lowest):
    1. Explicit init values
    2. Environment variables (CHKSUM_<section>__<field>)
    3. TOML config file (.chksum/config.toml or pyproject.toml [tool.chksum])
    4. Model defaults
    """

    model_config = {
        "env_prefix": "CHKSUM_",
        "env_nested_delimiter": "__",
        "extra": "ignore",
    }

    digest: DigestConfig = DigestConfig()
    output: OutputConfig = OutputConfig()
    logging: LoggingConfig = LoggingConfig()

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Customize settings sources to add TOML loading.

        Source constructors cannot receive per-call arguments here, so the
        config location is passed through module-level variables set by
        load_settings().
        """
        toml_source = TomlConfigSource(
            settings_cls,
            config_path=_current_config_path,
            start_dir=_current_start_dir,
        )
        return (
            init_settings,
            env_settings,
            toml_source,
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert settings to a plain nested dict."""
        return {
            "digest": self.digest.model_dump(),
            "output": self.output.model_dump(),
            "logging": self.logging.model_dump(),
        }


# Module-level variables for passing to settings_customise_sources
_current_config_path: Path | None = None
_current_start_dir: str | None = None


def load_settings(
    config_path: Path | None = None, start_dir: str | None = None, **overrides: Any
) -> ChksumSettings:
    """Load chksum settings from config file and environment.

    Args:
        config_path: Explicit path to config file
        start_dir: Directory to start searching from (if config_path not given)
        **overrides: Explicit section values, highest priority

    Returns:
        ChksumSettings instance with all sources merged

    Raises:
        ConfigFileError: If the config file cannot be read or parsed
        InvalidConfigurationError: If a value fails validation
    """
    global _current_config_path, _current_start_dir

    _current_config_path = config_path
    _current_start_dir = start_dir

    try:
        return ChksumSettings(**overrides)
    except ValidationError as e:
        raise InvalidConfigurationError(f"Invalid chksum settings: {e}", cause=e) from e
    finally:
        _current_config_path = None
        _current_start_dir = None
