"""
Services for chksum runs.

- digest: single-pass multi-algorithm digest computation
- execution: the execution engine driving entities into sinks
- logging: ILogger implementations
"""
