"""
Log sink: writes every digest to a logger as it arrives.
"""

from __future__ import annotations

from ..core.exceptions import InvalidConfigurationError
from ..core.interfaces.logger import ILogger
from ..core.interfaces.sink import DigestSink
from ..core.models.digest import DigestResult, Entity


class LogSink(DigestSink):
    """Emits '<entity> - <ALGORITHM> : <digest>' at info level. Buffers nothing."""

    name = "log"

    def __init__(self, logger: ILogger) -> None:
        if logger is None:
            raise InvalidConfigurationError("Log sink requires a logger", key="logger")
        self._logger = logger

    def on_entity_digested(self, entity: Entity, results: list[DigestResult]) -> None:
        for result in results:
            self._logger.digest(entity.display_name, result.algorithm, result.hex_digest)

    def finalize(self) -> None:
        pass
