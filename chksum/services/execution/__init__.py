"""
Execution engine for checksum runs.
"""

from .engine import ExecutionEngine
from .signal_handler import CancelOnInterrupt

__all__ = ["CancelOnInterrupt", "ExecutionEngine"]
