"""
Unit tests for the output sinks and the sink factory.
"""

import csv
import xml.etree.ElementTree as ET

import pytest

from chksum.core.exceptions import InvalidConfigurationError, SinkWriteError
from chksum.core.models.config import OutputConfig
from chksum.core.models.digest import DigestResult, Entity
from chksum.sinks import (
    CsvSummarySink,
    IndividualFilesSink,
    LogSink,
    XmlSummarySink,
    build_sinks,
)

MD5 = "d41d8cd98f00b204e9800998ecf8427e"
SHA1 = "da39a3ee5e6b4b0d3255bfef95601890afd80709"


def results_for(entity, **digests):
    return [
        DigestResult(entity=entity, algorithm=algorithm.replace("_", "-"), hex_digest=digest)
        for algorithm, digest in digests.items()
    ]


@pytest.fixture
def entity(make_file, tmp_path):
    return Entity.from_path(make_file("lib/app.jar", b""), base_dir=tmp_path)


@pytest.fixture
def other(make_file, tmp_path):
    return Entity.from_path(make_file("lib/other.jar", b""), base_dir=tmp_path)


class TestLogSink:
    def test_logs_each_digest(self, entity, recording_logger):
        sink = LogSink(recording_logger)
        sink.on_entity_digested(entity, results_for(entity, MD5=MD5, SHA_1=SHA1))
        sink.finalize()

        assert recording_logger.messages("info") == [
            f"lib/app.jar - MD5 : {MD5}",
            f"lib/app.jar - SHA-1 : {SHA1}",
        ]

    def test_includes_classifier(self, tmp_path, recording_logger):
        classified = Entity(logical_name="app", location=tmp_path / "app", classifier="sources")
        LogSink(recording_logger).on_entity_digested(classified, results_for(classified, MD5=MD5))
        assert recording_logger.messages() == [f"app:sources - MD5 : {MD5}"]

    def test_requires_logger(self):
        with pytest.raises(InvalidConfigurationError):
            LogSink(None)

    def test_cannot_discard(self, recording_logger):
        assert not LogSink(recording_logger).supports_discard


class TestIndividualFilesSink:
    def test_writes_next_to_entity(self, entity, tmp_path):
        sink = IndividualFilesSink()
        sink.on_entity_digested(entity, results_for(entity, MD5=MD5, SHA_1=SHA1))
        sink.finalize()

        assert (tmp_path / "lib" / "app.jar.md5").read_text() == MD5
        assert (tmp_path / "lib" / "app.jar.sha1").read_text() == SHA1
        assert sink.written_files == [tmp_path / "lib" / "app.jar.md5", tmp_path / "lib" / "app.jar.sha1"]

    def test_writes_to_output_directory(self, entity, tmp_path):
        out = tmp_path / "out" / "digests"
        sink = IndividualFilesSink(out)
        sink.on_entity_digested(entity, results_for(entity, MD5=MD5))

        assert (out / "app.jar.md5").read_text() == MD5
        assert not (tmp_path / "lib" / "app.jar.md5").exists()

    def test_refuses_to_overwrite_within_run(self, make_file, tmp_path):
        """Two entities with the same basename collide in a shared directory."""
        first = Entity.from_path(make_file("a/app.jar"), base_dir=tmp_path)
        second = Entity.from_path(make_file("b/app.jar"), base_dir=tmp_path)
        sink = IndividualFilesSink(tmp_path / "out")
        sink.on_entity_digested(first, results_for(first, MD5=MD5))

        with pytest.raises(SinkWriteError) as exc_info:
            sink.on_entity_digested(second, results_for(second, MD5=MD5))

        assert exc_info.value.sink == "individual-files"
        assert (tmp_path / "out" / "app.jar.md5").read_text() == MD5

    def test_discard_removes_written_files(self, entity, tmp_path):
        sink = IndividualFilesSink()
        sink.on_entity_digested(entity, results_for(entity, MD5=MD5, SHA_1=SHA1))

        assert sink.supports_discard
        sink.discard()

        assert not (tmp_path / "lib" / "app.jar.md5").exists()
        assert not (tmp_path / "lib" / "app.jar.sha1").exists()
        assert sink.written_files == []

    def test_encoding(self, entity, tmp_path):
        IndividualFilesSink(encoding="utf-16").on_entity_digested(entity, results_for(entity, MD5=MD5))
        assert (tmp_path / "lib" / "app.jar.md5").read_bytes() == MD5.encode("utf-16")

    def test_unknown_encoding(self, entity, tmp_path):
        sink = IndividualFilesSink(encoding="no-such-codec")

        with pytest.raises(SinkWriteError, match="no-such-codec") as exc_info:
            sink.on_entity_digested(entity, results_for(entity, MD5=MD5))

        assert isinstance(exc_info.value.__cause__, LookupError)
        assert not (tmp_path / "lib" / "app.jar.md5").exists()
        assert sink.written_files == []

    def test_unwritable_directory(self, entity, tmp_path):
        blocker = tmp_path / "blocker"
        blocker.write_text("not a directory")
        sink = IndividualFilesSink(blocker / "sub")

        with pytest.raises(SinkWriteError, match="Cannot write"):
            sink.on_entity_digested(entity, results_for(entity, MD5=MD5))


class TestCsvSummarySink:
    def read_rows(self, path):
        with open(path, newline="", encoding="utf-8") as f:
            return list(csv.reader(f))

    def test_header_and_rows(self, entity, other, tmp_path):
        path = tmp_path / "files-checksums.csv"
        sink = CsvSummarySink(path, ["MD5", "SHA-1"])
        sink.on_entity_digested(entity, results_for(entity, MD5=MD5, SHA_1=SHA1))
        sink.on_entity_digested(other, results_for(other, MD5=MD5, SHA_1=SHA1))

        assert not path.exists()
        sink.finalize()

        assert self.read_rows(path) == [
            ["entity", "MD5", "SHA-1"],
            ["lib/app.jar", MD5, SHA1],
            ["lib/other.jar", MD5, SHA1],
        ]

    def test_missing_digest_leaves_empty_cell(self, entity, tmp_path):
        path = tmp_path / "sums.csv"
        sink = CsvSummarySink(path, ["MD5", "SHA-1"])
        sink.on_entity_digested(entity, results_for(entity, SHA_1=SHA1))
        sink.finalize()

        assert self.read_rows(path)[1] == ["lib/app.jar", "", SHA1]

    def test_rows_merge_by_entity(self, entity, tmp_path):
        sink = CsvSummarySink(tmp_path / "sums.csv", ["MD5", "SHA-1"])
        sink.on_entity_digested(entity, results_for(entity, MD5=MD5))
        sink.on_entity_digested(entity, results_for(entity, SHA_1=SHA1))

        assert sink.rows() == [(entity, {"MD5": MD5, "SHA-1": SHA1})]

    def test_creates_parent_directory(self, entity, tmp_path):
        path = tmp_path / "target" / "reports" / "sums.csv"
        sink = CsvSummarySink(path, ["MD5"])
        sink.on_entity_digested(entity, results_for(entity, MD5=MD5))
        sink.finalize()
        assert path.exists()

    def test_discard_writes_nothing(self, entity, tmp_path):
        path = tmp_path / "sums.csv"
        sink = CsvSummarySink(path, ["MD5"])
        sink.on_entity_digested(entity, results_for(entity, MD5=MD5))
        sink.discard()
        sink.finalize()

        assert not path.exists()
        assert sink.rows() == []

    def test_path_is_directory(self, entity, tmp_path):
        sink = CsvSummarySink(tmp_path, ["MD5"])
        sink.on_entity_digested(entity, results_for(entity, MD5=MD5))

        with pytest.raises(SinkWriteError) as exc_info:
            sink.finalize()
        assert exc_info.value.sink == "csv-summary"

    def test_requires_columns(self, tmp_path):
        with pytest.raises(InvalidConfigurationError):
            CsvSummarySink(tmp_path / "sums.csv", [])


class TestXmlSummarySink:
    def test_document(self, entity, tmp_path):
        path = tmp_path / "sums.xml"
        sink = XmlSummarySink(path, ["MD5", "SHA-1"])
        sink.on_entity_digested(entity, results_for(entity, MD5=MD5, SHA_1=SHA1))
        sink.finalize()

        root = ET.parse(path).getroot()
        assert root.tag == "entities"
        (element,) = root.findall("entity")
        assert element.get("name") == "lib/app.jar"
        assert element.get("classifier") is None
        assert element.findtext("MD5") == MD5
        assert element.findtext("SHA-1") == SHA1
        assert path.read_bytes().startswith(b"<?xml")

    def test_classifier_and_missing_digest(self, tmp_path):
        classified = Entity(logical_name="app.jar", location=tmp_path / "app.jar", classifier="sources")
        sink = XmlSummarySink(tmp_path / "sums.xml", ["MD5", "SHA-1"])
        sink.on_entity_digested(classified, results_for(classified, MD5=MD5))

        element = sink.build_document().getroot().find("entity")
        assert element.get("classifier") == "sources"
        assert [child.tag for child in element] == ["MD5"]


class TestBuildSinks:
    def test_defaults(self, tmp_path, recording_logger):
        sinks = build_sinks(
            OutputConfig(), ["md5", "sha1"], digest_logger=recording_logger, base_dir=tmp_path
        )

        assert [s.name for s in sinks] == ["log", "individual-files", "csv-summary"]
        assert sinks[2].path == tmp_path / "files-checksums.csv"
        assert sinks[2].columns == ["MD5", "SHA-1"]

    def test_quiet_and_xml(self, tmp_path, recording_logger):
        output = OutputConfig(
            quiet=True, individual_files=False, csv_summary=False, xml_summary=True
        )
        sinks = build_sinks(output, ["SHA-256"], digest_logger=recording_logger, base_dir=tmp_path)

        assert [s.name for s in sinks] == ["xml-summary"]
        assert sinks[0].path == tmp_path / "files-checksums.xml"

    def test_individual_files_directory_relative_to_base(self, tmp_path, recording_logger, entity):
        output = OutputConfig(individual_files_directory="digests", csv_summary=False, quiet=True)
        (sink,) = build_sinks(output, ["MD5"], digest_logger=recording_logger, base_dir=tmp_path)

        assert sink.target_path(entity, "MD5") == tmp_path / "digests" / "app.jar.md5"
