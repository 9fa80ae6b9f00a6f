"""Configuration loading and inspection for chksum."""

from __future__ import annotations

from pathlib import Path
from typing import Any

from .core.models.config import (
    DEFAULT_ALGORITHMS,
    DEFAULT_CHUNK_SIZE,
    DEFAULT_CSV_SUMMARY_FILE,
    DEFAULT_ENCODING,
    DEFAULT_XML_SUMMARY_FILE,
)
from .core.settings import load_settings

# Config keys shown by `chksum config list`
CONFIGURABLE_KEYS: dict[str, dict[str, Any]] = {
    "digest.algorithms": {
        "type": list,
        "default": list(DEFAULT_ALGORITHMS),
        "description": "Digest algorithms to compute (see `chksum algorithms`)",
    },
    "digest.fail_on_error": {
        "type": bool,
        "default": True,
        "description": "Stop at the first unreadable file instead of recording it and continuing",
    },
    "digest.fail_on_partial": {
        "type": bool,
        "default": False,
        "description": "When continuing on errors, still report failure if anything failed",
    },
    "digest.workers": {
        "type": int,
        "default": 1,
        "description": "Threads computing digests (output order is unchanged)",
    },
    "digest.chunk_size": {
        "type": int,
        "default": DEFAULT_CHUNK_SIZE,
        "description": "Bytes read per iteration while digesting",
    },
    "output.directory": {
        "type": str,
        "default": ".",
        "description": "Base directory for summary files and the individual files directory",
    },
    "output.encoding": {
        "type": str,
        "default": DEFAULT_ENCODING,
        "description": "Encoding of generated files",
    },
    "output.quiet": {
        "type": bool,
        "default": False,
        "description": "Do not log digests",
    },
    "output.individual_files": {
        "type": bool,
        "default": True,
        "description": "Write one digest file per file and algorithm",
    },
    "output.individual_files_directory": {
        "type": str,
        "default": None,
        "description": "Directory for individual digest files (unset: next to each file)",
    },
    "output.csv_summary": {
        "type": bool,
        "default": True,
        "description": "Write a CSV summary of all digests",
    },
    "output.csv_summary_file": {
        "type": str,
        "default": DEFAULT_CSV_SUMMARY_FILE,
        "description": "CSV summary file name",
    },
    "output.xml_summary": {
        "type": bool,
        "default": False,
        "description": "Write an XML summary of all digests",
    },
    "output.xml_summary_file": {
        "type": str,
        "default": DEFAULT_XML_SUMMARY_FILE,
        "description": "XML summary file name",
    },
    "logging.level": {
        "type": str,
        "default": "warning",
        "description": "Log level (debug, info, warning, error)",
    },
    "logging.console": {
        "type": bool,
        "default": False,
        "description": "Output diagnostic logs to stderr",
    },
    "logging.file": {
        "type": bool,
        "default": False,
        "description": "Output diagnostic logs to logging.file_path",
    },
    "logging.file_path": {
        "type": str,
        "default": "~/.chksum/chksum.log",
        "description": "Diagnostic log file",
    },
}


def _get_nested(d: dict, key: str, default=None):
    """Get a nested key like 'output.quiet'."""
    for part in key.split("."):
        if isinstance(d, dict) and part in d:
            d = d[part]
        else:
            return default
    return d


def load_config(config_path: Path | None = None, start_dir: str | None = None) -> dict:
    """
    Load configuration from file and environment.

    Args:
        config_path: Explicit path to config file
        start_dir: Directory to start searching from (if config_path not given)

    Returns:
        Configuration dict with defaults applied
    """
    return load_settings(config_path=config_path, start_dir=start_dir).to_dict()


def config_get(key: str, config_path: Path | None = None, start_dir: str | None = None):
    """Get an effective config value, or None if the key is unknown."""
    return _get_nested(load_config(config_path=config_path, start_dir=start_dir), key)


def config_list() -> dict[str, dict[str, Any]]:
    """List all configurable keys with descriptions."""
    return CONFIGURABLE_KEYS
