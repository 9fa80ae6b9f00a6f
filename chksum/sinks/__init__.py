"""
Output sinks for digest results.

All sinks implement chksum.core.interfaces.sink.DigestSink:
- LogSink: digests written to a logger as they arrive
- IndividualFilesSink: one digest file per (entity, algorithm)
- CsvSummarySink / XmlSummarySink: one aggregate file written at finalize
"""

from .csv_summary import CsvSummarySink
from .factory import build_sinks
from .individual_files import IndividualFilesSink
from .log import LogSink
from .summary import SummarySink
from .xml_summary import XmlSummarySink

__all__ = [
    "CsvSummarySink",
    "IndividualFilesSink",
    "LogSink",
    "SummarySink",
    "XmlSummarySink",
    "build_sinks",
]
