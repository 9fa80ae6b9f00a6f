"""
Tests for the digest domain models.
"""

from pathlib import Path

import pytest
from pydantic import ValidationError

from chksum.core.exceptions import RunFailedError
from chksum.core.models.digest import (
    DigestFailure,
    DigestResult,
    Entity,
    RunOutcome,
    RunState,
    SinkFailure,
)


class TestEntity:
    def test_from_path_relative_to_base(self, tmp_path):
        entity = Entity.from_path(tmp_path / "lib" / "app.jar", base_dir=tmp_path)
        assert entity.logical_name == "lib/app.jar"
        assert entity.location == tmp_path / "lib" / "app.jar"

    def test_from_path_outside_base_keeps_path(self, tmp_path):
        outside = tmp_path / "elsewhere" / "app.jar"
        entity = Entity.from_path(outside, base_dir=tmp_path / "project")
        assert entity.logical_name == outside.as_posix()

    def test_from_path_accepts_strings(self):
        entity = Entity.from_path("dist/app.jar")
        assert entity.logical_name == "dist/app.jar"
        assert entity.location == Path("dist/app.jar")

    def test_display_name(self, tmp_path):
        plain = Entity(logical_name="app.jar", location=tmp_path / "app.jar")
        classified = Entity(logical_name="app.jar", location=tmp_path / "app.jar", classifier="sources")
        assert plain.display_name == "app.jar"
        assert classified.display_name == "app.jar:sources"

    def test_empty_name_rejected(self, tmp_path):
        with pytest.raises(ValidationError):
            Entity(logical_name="", location=tmp_path)

    def test_immutable(self, tmp_path):
        entity = Entity(logical_name="app.jar", location=tmp_path / "app.jar")
        with pytest.raises(ValidationError):
            entity.logical_name = "other.jar"

    def test_hashable(self, tmp_path):
        first = Entity(logical_name="app.jar", location=tmp_path / "app.jar")
        second = Entity(logical_name="app.jar", location=tmp_path / "app.jar")
        assert {first, second} == {first}

    def test_strict_and_no_unknown_fields(self, tmp_path):
        with pytest.raises(ValidationError):
            Entity(logical_name="app.jar", location=str(tmp_path))
        with pytest.raises(ValidationError):
            Entity(logical_name="app.jar", location=tmp_path, size=3)

    def test_open_reads_bytes(self, make_file):
        entity = Entity.from_path(make_file("data.bin", b"\x00\x01"))
        with entity.open() as stream:
            assert stream.read() == b"\x00\x01"


class TestDigestResult:
    def test_rejects_uppercase_hex(self, tmp_path):
        entity = Entity(logical_name="a", location=tmp_path / "a")
        with pytest.raises(ValidationError):
            DigestResult(entity=entity, algorithm="MD5", hex_digest="ABCDEF")


class TestRunOutcome:
    @pytest.fixture
    def entities(self, tmp_path):
        return [Entity(logical_name=n, location=tmp_path / n) for n in ("a", "b")]

    def test_helpers(self, entities):
        a, b = entities
        outcome = RunOutcome(
            results=[
                DigestResult(entity=a, algorithm="MD5", hex_digest="aa"),
                DigestResult(entity=a, algorithm="SHA-1", hex_digest="bb"),
            ],
            failures=[DigestFailure(entity=b, algorithm="MD5", message="gone")],
            state=RunState.SUCCEEDED,
        )

        assert outcome.success
        assert outcome.digests_for(a) == {"MD5": "aa", "SHA-1": "bb"}
        assert outcome.digests_for(b) == {}
        assert [f.message for f in outcome.failures_for(b)] == ["gone"]
        assert outcome.errors == ["b [MD5]: gone"]
        outcome.raise_for_failure()

    def test_raise_for_failure(self, entities):
        outcome = RunOutcome(
            failures=[DigestFailure(entity=entities[0], algorithm="MD5", message="gone")],
            sink_failures=[SinkFailure(sink="csv-summary", message="disk full")],
            state=RunState.FAILED,
            cancelled=True,
        )

        with pytest.raises(RunFailedError) as exc_info:
            outcome.raise_for_failure()

        assert exc_info.value.errors == ["a [MD5]: gone", "csv-summary: disk full", "Run cancelled"]
        assert "3 error(s)" in exc_info.value.message

    def test_terminal_states(self):
        assert RunState.SUCCEEDED.is_terminal
        assert RunState.FAILED.is_terminal
        assert not RunState.RUNNING.is_terminal
        assert not RunState.FINALIZING.is_terminal
