"""
Build the sink list from the [output] settings section.
"""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

from ..core.interfaces.logger import ILogger
from ..core.interfaces.sink import DigestSink
from ..core.models.config import OutputConfig
from ..hashing.registry import HashAlgorithmRegistry
from .csv_summary import CsvSummarySink
from .individual_files import IndividualFilesSink
from .log import LogSink
from .xml_summary import XmlSummarySink


def _resolve(base_dir: Path, value: str) -> Path:
    path = Path(value).expanduser()
    return path if path.is_absolute() else base_dir / path


def build_sinks(
    output: OutputConfig,
    algorithms: Sequence[str],
    *,
    digest_logger: ILogger,
    base_dir: Path | None = None,
    registry: HashAlgorithmRegistry | None = None,
) -> list[DigestSink]:
    """
    Create sinks in registration order: log, individual files, CSV, XML.

    Args:
        output: Output settings
        algorithms: Configured algorithm names (summary columns)
        digest_logger: Logger the log sink writes to
        base_dir: Directory relative output paths resolve against
            (defaults to output.directory)
        registry: Registry used to canonicalize column names

    Returns:
        Configured sinks

    Raises:
        UnknownAlgorithmError: If an algorithm cannot be resolved
    """
    registry = registry or HashAlgorithmRegistry()
    columns = [s.algorithm_name for s in registry.resolve_all(algorithms)]
    base = base_dir if base_dir is not None else Path(output.directory)

    sinks: list[DigestSink] = []
    if not output.quiet:
        sinks.append(LogSink(digest_logger))
    if output.individual_files:
        directory = None
        if output.individual_files_directory:
            directory = _resolve(base, output.individual_files_directory)
        sinks.append(IndividualFilesSink(directory, encoding=output.encoding))
    if output.csv_summary:
        sinks.append(
            CsvSummarySink(_resolve(base, output.csv_summary_file), columns, encoding=output.encoding)
        )
    if output.xml_summary:
        sinks.append(
            XmlSummarySink(_resolve(base, output.xml_summary_file), columns, encoding=output.encoding)
        )
    return sinks
