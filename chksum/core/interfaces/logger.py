"""
Logger interface for chksum.

Two loggers exist per run: the diagnostic one (engine progress, recorded
failures, sink errors; stderr or a log file) and the digest one behind
the log sink, which prints one line per digest to stdout.
"""

from abc import ABC, abstractmethod
from typing import Any

DIGEST_LINE_FORMAT = "%s - %s : %s"


class ILogger(ABC):
    """Levelled %-style logger. Arguments are formatted lazily."""

    @abstractmethod
    def debug(self, message: str, *args: Any, **kwargs: Any) -> None:
        pass

    @abstractmethod
    def info(self, message: str, *args: Any, **kwargs: Any) -> None:
        pass

    @abstractmethod
    def warning(self, message: str, *args: Any, **kwargs: Any) -> None:
        pass

    @abstractmethod
    def error(self, message: str, *args: Any, **kwargs: Any) -> None:
        pass

    @abstractmethod
    def set_level(self, level: str) -> None:
        """Set the threshold: 'debug', 'info', 'warning' or 'error'."""
        pass

    def digest(self, entity_name: str, algorithm: str, hex_digest: str) -> None:
        """Log one digest as '<entity> - <ALGORITHM> : <hex>' at info level."""
        self.info(DIGEST_LINE_FORMAT, entity_name, algorithm, hex_digest)
