"""
Per-entity digest files.

Writes one small text file per (entity, algorithm), e.g. ``app.jar.sha256``,
either next to the entity or in a dedicated output directory.
"""

from __future__ import annotations

from contextlib import suppress
from pathlib import Path, PurePosixPath

from ..core.exceptions import SinkWriteError
from ..core.interfaces.sink import DigestSink
from ..core.models.config import DEFAULT_ENCODING
from ..core.models.digest import DigestResult, Entity
from ..hashing.strategies import extension_for


class IndividualFilesSink(DigestSink):
    """
    Writes each digest to ``<entity basename>.<algorithm extension>``.

    The extension differs per algorithm, so digests of one entity never
    collide; a path already written during this run is never overwritten.
    discard() removes every file this sink wrote.
    """

    name = "individual-files"

    def __init__(self, output_directory: Path | None = None, encoding: str = DEFAULT_ENCODING) -> None:
        """
        Args:
            output_directory: Where digest files go; None writes each one
                beside its entity
            encoding: Text encoding of the digest files
        """
        self._output_directory = output_directory
        self._encoding = encoding
        self._written: list[Path] = []
        self._written_set: set[Path] = set()

    @property
    def supports_discard(self) -> bool:
        return True

    @property
    def written_files(self) -> list[Path]:
        return list(self._written)

    def target_path(self, entity: Entity, algorithm: str) -> Path:
        """Digest file path for one (entity, algorithm) pair."""
        directory = self._output_directory or entity.location.parent
        basename = PurePosixPath(entity.logical_name).name or entity.location.name
        return directory / f"{basename}.{extension_for(algorithm)}"

    def on_entity_digested(self, entity: Entity, results: list[DigestResult]) -> None:
        for result in results:
            path = self.target_path(entity, result.algorithm)
            if path in self._written_set:
                raise SinkWriteError(
                    f"Refusing to overwrite digest file written earlier in this run: {path}",
                    sink=self.name,
                    path=str(path),
                )
            try:
                path.parent.mkdir(parents=True, exist_ok=True)
                path.write_text(result.hex_digest, encoding=self._encoding)
            except (OSError, UnicodeError, LookupError) as e:
                if not isinstance(e, OSError):
                    # the file was opened before the codec failed
                    with suppress(OSError):
                        path.unlink(missing_ok=True)
                raise SinkWriteError(
                    f"Cannot write digest file {path}: {e}",
                    sink=self.name,
                    path=str(path),
                    cause=e,
                ) from e
            self._written.append(path)
            self._written_set.add(path)

    def finalize(self) -> None:
        pass

    def discard(self) -> None:
        for path in reversed(self._written):
            try:
                path.unlink(missing_ok=True)
            except OSError as e:
                raise SinkWriteError(
                    f"Cannot remove digest file {path}: {e.strerror or e}",
                    sink=self.name,
                    path=str(path),
                    cause=e,
                ) from e
        self._written.clear()
        self._written_set.clear()
