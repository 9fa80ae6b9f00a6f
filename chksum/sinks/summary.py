"""
Shared buffering for aggregate summary sinks (CSV, XML).
"""

from __future__ import annotations

from abc import abstractmethod
from collections.abc import Sequence
from pathlib import Path

from ..core.exceptions import InvalidConfigurationError, SinkWriteError
from ..core.interfaces.sink import DigestSink
from ..core.models.config import DEFAULT_ENCODING
from ..core.models.digest import DigestResult, Entity
from ..hashing.registry import normalize_algorithm_name


class SummarySink(DigestSink):
    """
    Buffers one row per entity and writes a single file at finalize().

    Columns are fixed at construction from the configured algorithms; rows
    keep first-seen entity order. An algorithm that failed for an entity
    leaves its cell empty.
    """

    def __init__(
        self, path: Path, algorithms: Sequence[str], encoding: str = DEFAULT_ENCODING
    ) -> None:
        if not algorithms:
            raise InvalidConfigurationError(
                f"{self.name} sink needs at least one algorithm column", key="algorithms"
            )
        self._path = Path(path)
        self._columns = list(algorithms)
        self._column_keys = {normalize_algorithm_name(c): c for c in self._columns}
        self._encoding = encoding
        self._rows: dict[str, tuple[Entity, dict[str, str]]] = {}
        self._finalized = False

    @property
    def path(self) -> Path:
        return self._path

    @property
    def columns(self) -> list[str]:
        return list(self._columns)

    @property
    def supports_discard(self) -> bool:
        return True

    def rows(self) -> list[tuple[Entity, dict[str, str]]]:
        """Buffered rows in first-seen order."""
        return list(self._rows.values())

    def on_entity_digested(self, entity: Entity, results: list[DigestResult]) -> None:
        _, cells = self._rows.setdefault(entity.display_name, (entity, {}))
        for result in results:
            column = self._column_keys.get(normalize_algorithm_name(result.algorithm))
            if column is not None:
                cells[column] = result.hex_digest

    def finalize(self) -> None:
        if self._finalized:
            return
        self._finalized = True
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            self._write()
        except (OSError, UnicodeError, LookupError) as e:
            raise SinkWriteError(
                f"Cannot write {self.name} summary {self._path}: {e}",
                sink=self.name,
                path=str(self._path),
                cause=e,
            ) from e

    def discard(self) -> None:
        self._rows.clear()
        self._finalized = True

    @abstractmethod
    def _write(self) -> None:
        """Serialize the buffered rows to self.path."""
        pass
