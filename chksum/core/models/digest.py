"""
Digest domain models.

Entities are the byte sources being digested; DigestResult and DigestFailure
record what happened to each (entity, algorithm) pair; RunOutcome owns
everything one engine run produced.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Annotated, BinaryIO

from pydantic import Field

from ..exceptions import RunFailedError
from .base import ImmutableModel

HexDigest = Annotated[str, Field(min_length=2, max_length=256, pattern=r"^[a-f0-9]+$")]


class Entity(ImmutableModel):
    """A byte source to digest.

    Uniqueness is by logical_name within a run; duplicates are not checked.
    """

    logical_name: Annotated[str, Field(min_length=1)]
    location: Path
    classifier: str | None = None

    @classmethod
    def from_path(
        cls,
        path: Path | str,
        base_dir: Path | str | None = None,
        classifier: str | None = None,
    ) -> Entity:
        """
        Build an entity for a file.

        The logical name is the path relative to base_dir when the file lives
        under it, otherwise the path as given, always with POSIX separators.

        Args:
            path: File to digest
            base_dir: Directory the logical name is made relative to
            classifier: Optional classifier used to disambiguate reports

        Returns:
            Entity for the file
        """
        location = Path(path)
        name = location
        if base_dir is not None:
            try:
                name = location.resolve().relative_to(Path(base_dir).resolve())
            except ValueError:
                name = location
        return cls(logical_name=name.as_posix(), location=location, classifier=classifier)

    @property
    def display_name(self) -> str:
        """Name used in reports: logical name, suffixed with the classifier if any."""
        if self.classifier:
            return f"{self.logical_name}:{self.classifier}"
        return self.logical_name

    def open(self) -> BinaryIO:
        """Open the entity's byte stream. Caller closes it."""
        return open(self.location, "rb")


class DigestResult(ImmutableModel):
    """Digest of one entity under one algorithm."""

    entity: Entity
    algorithm: str
    hex_digest: HexDigest


class DigestFailure(ImmutableModel):
    """Failure to digest one entity under one algorithm."""

    entity: Entity
    algorithm: str
    message: str


class SinkFailure(ImmutableModel):
    """A sink that could not write its output."""

    sink: str
    message: str


class RunState(str, Enum):
    """Execution engine lifecycle states."""

    CONFIGURING = "configuring"
    RUNNING = "running"
    FINALIZING = "finalizing"
    SUCCEEDED = "succeeded"
    FAILED = "failed"

    @property
    def is_terminal(self) -> bool:
        return self in (RunState.SUCCEEDED, RunState.FAILED)


@dataclass
class RunOutcome:
    """Everything produced by one execution engine run.

    Results and failures are ordered by entity input order, then by
    configured algorithm order.
    """

    results: list[DigestResult] = field(default_factory=list)
    failures: list[DigestFailure] = field(default_factory=list)
    sink_failures: list[SinkFailure] = field(default_factory=list)
    state: RunState = RunState.RUNNING
    cancelled: bool = False

    @property
    def success(self) -> bool:
        return self.state is RunState.SUCCEEDED

    @property
    def errors(self) -> list[str]:
        """All error messages, digest failures first."""
        messages = [
            f"{failure.entity.display_name} [{failure.algorithm}]: {failure.message}"
            for failure in self.failures
        ]
        messages.extend(f"{failure.sink}: {failure.message}" for failure in self.sink_failures)
        if self.cancelled:
            messages.append("Run cancelled")
        return messages

    def digests_for(self, entity: Entity) -> dict[str, str]:
        """Map of algorithm -> hex digest for one entity."""
        return {r.algorithm: r.hex_digest for r in self.results if r.entity == entity}

    def failures_for(self, entity: Entity) -> list[DigestFailure]:
        return [f for f in self.failures if f.entity == entity]

    def raise_for_failure(self) -> None:
        """
        Raise RunFailedError if the run did not succeed.

        Raises:
            RunFailedError: With every collected error message
        """
        if self.success:
            return
        errors = self.errors
        raise RunFailedError(
            f"Checksum run failed with {len(errors)} error(s)",
            errors=errors,
        )
