"""
Output sink interface.

Every sink variant (log, per-entity files, CSV summary, XML summary)
implements this contract, so the execution engine never needs to know which
concrete sink it is feeding.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..models.digest import DigestResult, Entity


class DigestSink(ABC):
    """
    Consumer of digest results.

    The engine calls on_entity_digested() once per entity, in input order,
    then exactly one terminal method: finalize(), or discard() when a
    fail-fast run aborts and the sink supports rollback.

    Implementations raise SinkWriteError when output cannot be written.
    """

    #: Short name used in logs and sink failure records.
    name: str = "sink"

    @property
    def supports_discard(self) -> bool:
        """Whether partial output can be rolled back on an aborted run."""
        return False

    @abstractmethod
    def on_entity_digested(self, entity: Entity, results: list[DigestResult]) -> None:
        """
        Receive the successful results for one entity.

        Args:
            entity: The entity that was digested
            results: One result per successful algorithm, in configured order
        """
        pass

    @abstractmethod
    def finalize(self) -> None:
        """Flush any buffered output. Called once at the end of the run."""
        pass

    def discard(self) -> None:
        """Roll back output written during this run. No-op by default."""
        pass
