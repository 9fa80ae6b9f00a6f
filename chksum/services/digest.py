"""
Single-pass digest computation.

Each entity's stream is opened once and every requested algorithm is fed
from the same buffer, so the I/O cost does not grow with the number of
algorithms.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Any

from pydantic import TypeAdapter, ValidationError

from ..core.exceptions import DigestComputationError, EntityReadError
from ..core.interfaces.logger import ILogger
from ..core.models.config import DEFAULT_CHUNK_SIZE
from ..core.models.digest import Entity, HexDigest
from ..hashing.strategies import HashStrategy
from .logging import NullLogger

_HEX_DIGEST = TypeAdapter(HexDigest)


def _checked_hex(value: str) -> str:
    try:
        return _HEX_DIGEST.validate_python(value)
    except ValidationError as e:
        raise ValueError(f"not a lowercase hex digest: {value!r}") from e


@dataclass
class EntityDigests:
    """Digests of one entity, keyed by canonical algorithm name."""

    entity: Entity
    digests: dict[str, str] = field(default_factory=dict)
    errors: dict[str, DigestComputationError] = field(default_factory=dict)

    @property
    def complete(self) -> bool:
        return not self.errors


class DigestComputer:
    """
    Computes several digests of an entity in one read of its bytes.

    Read failures raise EntityReadError and affect every algorithm. A failure
    inside one hash accumulator only removes that algorithm; the others keep
    consuming the stream.
    """

    def __init__(self, chunk_size: int = DEFAULT_CHUNK_SIZE, logger: ILogger | None = None):
        """
        Initialize the computer.

        Args:
            chunk_size: Bytes read per iteration
            logger: Logger for diagnostics
        """
        if chunk_size < 1:
            raise ValueError(f"chunk_size must be positive, got {chunk_size}")
        self._chunk_size = chunk_size
        self._logger = logger or NullLogger()

    @property
    def chunk_size(self) -> int:
        return self._chunk_size

    def compute(self, entity: Entity, strategies: Sequence[HashStrategy]) -> EntityDigests:
        """
        Digest one entity under every strategy.

        Args:
            entity: Entity to read
            strategies: Resolved strategies, in configured order

        Returns:
            EntityDigests with one digest or one error per strategy

        Raises:
            EntityReadError: If the entity cannot be opened or read
        """
        outcome = EntityDigests(entity=entity)
        active: dict[str, tuple[HashStrategy, Any]] = {}

        for strategy in strategies:
            try:
                active[strategy.algorithm_name] = (strategy, strategy.create_hasher())
            except Exception as e:
                outcome.errors[strategy.algorithm_name] = self._failure(entity, strategy, e)

        total = 0
        try:
            with entity.open() as stream:
                for chunk in iter(lambda: stream.read(self._chunk_size), b""):
                    if not active:
                        break
                    total += len(chunk)
                    for name, (strategy, hasher) in list(active.items()):
                        try:
                            strategy.update(hasher, chunk)
                        except Exception as e:
                            outcome.errors[name] = self._failure(entity, strategy, e)
                            del active[name]
        except OSError as e:
            raise EntityReadError(
                f"Cannot read {entity.location}: {e.strerror or e}",
                entity=entity.display_name,
                context={"path": str(entity.location)},
                cause=e,
            ) from e

        for name, (strategy, hasher) in active.items():
            try:
                outcome.digests[name] = _checked_hex(strategy.hexdigest(hasher))
            except Exception as e:
                outcome.errors[name] = self._failure(entity, strategy, e)

        self._logger.debug(
            "Digested %s (%d bytes, %d algorithm(s))", entity.display_name, total, len(outcome.digests)
        )
        return outcome

    @staticmethod
    def _failure(entity: Entity, strategy: HashStrategy, error: Exception) -> DigestComputationError:
        return DigestComputationError(
            f"{strategy.algorithm_name} computation failed: {error}",
            entity=entity.display_name,
            algorithm=strategy.algorithm_name,
            cause=error,
        )
