"""
Core types for chksum.

This module provides:
- Protocol definitions for loggers and output sinks
- Pydantic models for entities, results and configuration
- Custom exception hierarchy
"""

from .exceptions import (
    ChksumException,
    ConfigFileError,
    DigestComputationError,
    DigestError,
    EngineStateError,
    EntityReadError,
    InvalidConfigurationError,
    RunFailedError,
    SinkWriteError,
    UnknownAlgorithmError,
)

__all__ = [
    "ChksumException",
    "ConfigFileError",
    "DigestComputationError",
    "DigestError",
    "EngineStateError",
    "EntityReadError",
    "InvalidConfigurationError",
    "RunFailedError",
    "SinkWriteError",
    "UnknownAlgorithmError",
]
