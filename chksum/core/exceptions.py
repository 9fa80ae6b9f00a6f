"""
Custom exception hierarchy for chksum.

Configuration problems surface before any entity is touched; per-entity
problems are mapped into the active error policy by the execution engine;
sink problems are always fatal to the run.
"""

from __future__ import annotations


class ChksumException(Exception):
    """
    Base exception for all chksum errors.

    Attributes:
        message: Human-readable error description
        context: Additional debugging context (paths, algorithm names, etc.)
        exit_code: Suggested exit code for CLI (default: 1)
        recoverable: Whether retry/recovery may be possible
    """

    exit_code: int = 1
    recoverable: bool = True

    def __init__(
        self,
        message: str,
        *,
        context: dict | None = None,
        cause: Exception | None = None,
    ) -> None:
        self.message = message
        self.context = context or {}
        if cause is not None:
            self.__cause__ = cause
        super().__init__(message)

    def __str__(self) -> str:
        if self.context:
            ctx_str = ", ".join(f"{k}={v!r}" for k, v in self.context.items())
            return f"{self.message} ({ctx_str})"
        return self.message


# =============================================================================
# Configuration Errors
# =============================================================================


class InvalidConfigurationError(ChksumException, ValueError):
    """
    Invalid or missing configuration value.

    Raised for empty algorithm or entity lists, duplicate algorithms and
    unusable settings. Inherits from ValueError so callers validating input
    generically can catch it.
    """

    exit_code: int = 2
    recoverable: bool = False

    def __init__(
        self,
        message: str,
        *,
        key: str | None = None,
        value: str | None = None,
        context: dict | None = None,
        cause: Exception | None = None,
    ) -> None:
        ctx = context or {}
        if key:
            ctx["key"] = key
        if value is not None:
            ctx["value"] = value
        super().__init__(message, context=ctx, cause=cause)


class UnknownAlgorithmError(InvalidConfigurationError):
    """Requested digest algorithm is not supported by the registry."""

    def __init__(
        self,
        algorithm: str,
        *,
        available: list[str] | None = None,
        reason: str | None = None,
        cause: Exception | None = None,
    ) -> None:
        message = f"Unknown digest algorithm: {algorithm}"
        if reason:
            message = f"{message}: {reason}"
        ctx: dict = {}
        if available:
            ctx["available"] = ", ".join(available)
        super().__init__(message, key="algorithm", value=algorithm, context=ctx, cause=cause)
        self.algorithm = algorithm


class ConfigFileError(InvalidConfigurationError):
    """
    Error reading or parsing a configuration file.

    Raised for TOML parsing errors, permission errors, etc.
    """

    def __init__(
        self,
        message: str,
        *,
        file_path: str | None = None,
        context: dict | None = None,
        cause: Exception | None = None,
    ) -> None:
        ctx = context or {}
        if file_path:
            ctx["file_path"] = file_path
        super().__init__(message, context=ctx, cause=cause)


# =============================================================================
# Digest Errors
# =============================================================================


class DigestError(ChksumException):
    """Base class for errors raised while digesting one entity."""

    def __init__(
        self,
        message: str,
        *,
        entity: str | None = None,
        algorithm: str | None = None,
        context: dict | None = None,
        cause: Exception | None = None,
    ) -> None:
        ctx = context or {}
        if entity:
            ctx["entity"] = entity
        if algorithm:
            ctx["algorithm"] = algorithm
        super().__init__(message, context=ctx, cause=cause)
        self.entity = entity
        self.algorithm = algorithm


class EntityReadError(DigestError):
    """
    The entity's byte stream could not be opened or read.

    Affects every algorithm requested for that entity.
    """

    pass


class DigestComputationError(DigestError):
    """A single hash accumulator failed while the stream was being read."""

    pass


# =============================================================================
# Sink Errors
# =============================================================================


class SinkWriteError(ChksumException):
    """
    A sink could not write its output.

    Always fatal to the run, regardless of the error policy.
    """

    recoverable: bool = False

    def __init__(
        self,
        message: str,
        *,
        sink: str | None = None,
        path: str | None = None,
        context: dict | None = None,
        cause: Exception | None = None,
    ) -> None:
        ctx = context or {}
        if sink:
            ctx["sink"] = sink
        if path:
            ctx["path"] = path
        super().__init__(message, context=ctx, cause=cause)
        self.sink = sink


# =============================================================================
# Execution Errors
# =============================================================================


class EngineStateError(ChksumException):
    """An execution engine was asked to run outside of its configured state."""

    recoverable: bool = False


class RunFailedError(ChksumException):
    """
    Raised by RunOutcome.raise_for_failure() for a failed run.

    Carries every error message collected during the run.
    """

    def __init__(
        self,
        message: str,
        *,
        errors: list[str] | None = None,
        context: dict | None = None,
        cause: Exception | None = None,
    ) -> None:
        ctx = context or {}
        if errors:
            ctx["errors"] = errors
        super().__init__(message, context=ctx, cause=cause)
        self.errors = list(errors or [])
