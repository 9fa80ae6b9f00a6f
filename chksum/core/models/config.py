"""
Configuration models.

Provides Pydantic models for chksum configuration with validation.
"""

from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import Annotated, Any, Literal

from pydantic import ConfigDict, Field, field_validator

from .base import ChksumBaseModel

LogLevel = Literal["debug", "info", "warning", "error"]

DEFAULT_ALGORITHMS = ["MD5", "SHA-1"]
DEFAULT_CHUNK_SIZE = 1024 * 1024  # 1MB
DEFAULT_ENCODING = "utf-8"
DEFAULT_CSV_SUMMARY_FILE = "files-checksums.csv"
DEFAULT_XML_SUMMARY_FILE = "files-checksums.xml"


class ErrorPolicy(str, Enum):
    """What the engine does when an entity cannot be digested."""

    FAIL_FAST = "fail_fast"
    CONTINUE = "continue"


def _split_algorithms(v: Any) -> Any:
    if isinstance(v, str):
        return [x.strip() for x in v.split(",") if x.strip()]
    return v


class ConfigBaseModel(ChksumBaseModel):
    """Base model for config sections with relaxed strict mode for TOML loading."""

    model_config = ConfigDict(
        strict=False,  # Allow coercion from TOML types
        validate_assignment=True,
        extra="ignore",  # Ignore unknown fields in config files
        populate_by_name=True,
        use_enum_values=True,
        revalidate_instances="never",
    )


class ExecutionConfig(ConfigBaseModel):
    """Everything the execution engine needs besides entities and sinks.

    Built once by the adapter and handed to the engine at construction.
    """

    algorithms: list[str]
    error_policy: ErrorPolicy = ErrorPolicy.FAIL_FAST
    fail_on_partial: bool = False
    workers: Annotated[int, Field(ge=1, le=64)] = 1
    chunk_size: Annotated[int, Field(ge=1)] = DEFAULT_CHUNK_SIZE

    @field_validator("algorithms", mode="before")
    @classmethod
    def parse_comma_separated(cls, v: Any) -> Any:
        """Parse comma-separated string to list."""
        return _split_algorithms(v)

    @property
    def fail_fast(self) -> bool:
        return self.error_policy == ErrorPolicy.FAIL_FAST


class DigestConfig(ConfigBaseModel):
    """Digest configuration section."""

    algorithms: list[str] = Field(default_factory=lambda: list(DEFAULT_ALGORITHMS))
    fail_on_error: bool = True
    fail_on_partial: bool = False
    workers: Annotated[int, Field(ge=1, le=64)] = 1
    chunk_size: Annotated[int, Field(ge=1)] = DEFAULT_CHUNK_SIZE

    @field_validator("algorithms", mode="before")
    @classmethod
    def parse_comma_separated(cls, v: Any) -> Any:
        """Parse comma-separated string to list."""
        return _split_algorithms(v)

    def to_execution_config(self) -> ExecutionConfig:
        """Translate the settings section into an engine configuration."""
        return ExecutionConfig(
            algorithms=list(self.algorithms),
            error_policy=ErrorPolicy.FAIL_FAST if self.fail_on_error else ErrorPolicy.CONTINUE,
            fail_on_partial=self.fail_on_partial,
            workers=self.workers,
            chunk_size=self.chunk_size,
        )


class OutputConfig(ConfigBaseModel):
    """Output (sink) configuration section."""

    directory: str = "."
    encoding: str = DEFAULT_ENCODING
    quiet: bool = False
    individual_files: bool = True
    individual_files_directory: str | None = None
    csv_summary: bool = True
    csv_summary_file: str = DEFAULT_CSV_SUMMARY_FILE
    xml_summary: bool = False
    xml_summary_file: str = DEFAULT_XML_SUMMARY_FILE

    @field_validator("encoding")
    @classmethod
    def validate_encoding(cls, v: str) -> str:
        """Reject encodings Python does not know about."""
        import codecs

        try:
            codecs.lookup(v)
        except LookupError as e:
            raise ValueError(f"Unknown encoding: {v}") from e
        return v

    @field_validator("individual_files_directory", mode="before")
    @classmethod
    def empty_as_unset(cls, v: str | None) -> str | None:
        if v == "":
            return None
        return v


class LoggingConfig(ConfigBaseModel):
    """Logging configuration section."""

    level: LogLevel = "warning"
    console: bool = False
    file: bool = False
    file_path: str = str(Path.home() / ".chksum" / "chksum.log")


class ChksumConfig(ConfigBaseModel):
    """Complete chksum configuration.

    This model represents the full configuration with all sections.
    It can be loaded from TOML files or constructed programmatically.
    """

    digest: DigestConfig = Field(default_factory=DigestConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    def get(self, key: str, default: Any = None) -> Any:
        """Get config value by dot-notation key.

        Args:
            key: Dot-notation key (e.g., 'output.quiet')
            default: Default value if key not found

        Returns:
            Config value or default
        """
        obj: Any = self
        for part in key.split("."):
            if hasattr(obj, part):
                obj = getattr(obj, part)
            elif isinstance(obj, dict) and part in obj:
                obj = obj[part]
            else:
                return default
        return obj

    def to_dict(self) -> dict[str, Any]:
        """Convert config to dictionary."""
        return self.model_dump()
