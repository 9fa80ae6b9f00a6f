"""
chksum - compute file checksum digests and report them through pluggable sinks.

The core lives in chksum.services.execution (engine), chksum.services.digest
(single-pass digest computer), chksum.hashing (algorithm registry) and
chksum.sinks (log, per-file, CSV and XML outputs).
"""
