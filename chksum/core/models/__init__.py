"""
Pydantic models for chksum.

This package provides typed, validated models for chksum data structures.
"""

from .base import ChksumBaseModel, ImmutableModel

# Configuration models
from .config import (
    ChksumConfig,
    DigestConfig,
    ErrorPolicy,
    ExecutionConfig,
    LoggingConfig,
    OutputConfig,
)

# Digest domain models
from .digest import (
    DigestFailure,
    DigestResult,
    Entity,
    RunOutcome,
    RunState,
    SinkFailure,
)

__all__ = [
    "ChksumBaseModel",
    "ChksumConfig",
    "DigestConfig",
    "DigestFailure",
    "DigestResult",
    "Entity",
    "ErrorPolicy",
    "ExecutionConfig",
    "ImmutableModel",
    "LoggingConfig",
    "OutputConfig",
    "RunOutcome",
    "RunState",
    "SinkFailure",
]
