"""
Shared pytest fixtures for chksum tests.

- make_file: writes a file under tmp_path and returns its path
- recording_logger: ILogger that keeps every formatted message
- RecordingSink: DigestSink that records every call it receives
- run_chksum: runs the chksum CLI in a subprocess
"""

from __future__ import annotations

import subprocess
import sys
from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest

from chksum.core.interfaces.logger import ILogger
from chksum.core.interfaces.sink import DigestSink
from chksum.core.models.digest import DigestResult, Entity


class RecordingLogger(ILogger):
    """Keeps (level, message) pairs for assertions."""

    def __init__(self) -> None:
        self.records: list[tuple[str, str]] = []

    def _log(self, level: str, message: str, *args: Any) -> None:
        self.records.append((level, message % args if args else message))

    def debug(self, message: str, *args: Any, **kwargs: Any) -> None:
        self._log("debug", message, *args)

    def info(self, message: str, *args: Any, **kwargs: Any) -> None:
        self._log("info", message, *args)

    def warning(self, message: str, *args: Any, **kwargs: Any) -> None:
        self._log("warning", message, *args)

    def error(self, message: str, *args: Any, **kwargs: Any) -> None:
        self._log("error", message, *args)

    def set_level(self, level: str) -> None:
        pass

    def messages(self, level: str | None = None) -> list[str]:
        return [m for lvl, m in self.records if level is None or lvl == level]


class RecordingSink(DigestSink):
    """Records notifications and terminal calls."""

    def __init__(self, name: str = "recording", discardable: bool = False, events: list | None = None):
        self.name = name
        self._discardable = discardable
        self.notified: list[tuple[str, list[str]]] = []
        self.finalize_calls = 0
        self.discard_calls = 0
        self.events = events if events is not None else []

    @property
    def supports_discard(self) -> bool:
        return self._discardable

    def on_entity_digested(self, entity: Entity, results: list[DigestResult]) -> None:
        self.notified.append((entity.logical_name, [r.algorithm for r in results]))

    def finalize(self) -> None:
        self.finalize_calls += 1
        self.events.append(("finalize", self.name))

    def discard(self) -> None:
        self.discard_calls += 1
        self.events.append(("discard", self.name))

    @property
    def terminal_calls(self) -> int:
        return self.finalize_calls + self.discard_calls


@pytest.fixture
def make_file(tmp_path: Path) -> Callable[..., Path]:
    """Factory writing bytes (or text) to tmp_path/<name>."""

    def _make(name: str, content: bytes | str = b"") -> Path:
        path = tmp_path / name
        path.parent.mkdir(parents=True, exist_ok=True)
        if isinstance(content, str):
            content = content.encode("utf-8")
        path.write_bytes(content)
        return path

    return _make


@pytest.fixture
def recording_logger() -> RecordingLogger:
    return RecordingLogger()


def _run_chksum_cmd(*args: str, cwd: Path, check: bool = True) -> subprocess.CompletedProcess:
    """Run a chksum command using the current Python interpreter."""
    result = subprocess.run(
        [sys.executable, "-m", "chksum", *args],
        cwd=cwd,
        capture_output=True,
        text=True,
    )
    if check and result.returncode != 0:
        raise subprocess.CalledProcessError(
            result.returncode,
            [sys.executable, "-m", "chksum", *args],
            result.stdout,
            result.stderr,
        )
    return result


@pytest.fixture
def run_chksum() -> Callable[..., subprocess.CompletedProcess]:
    """Helper to run chksum CLI commands in a subprocess."""
    return _run_chksum_cmd


@pytest.fixture
def make_sink() -> Callable[..., RecordingSink]:
    """Factory for RecordingSink instances."""
    return RecordingSink
