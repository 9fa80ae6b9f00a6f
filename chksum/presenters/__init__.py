"""
Presenters for CLI output.
"""

from .console import ConsolePresenter
from .run_report import RunReportPresenter

__all__ = ["ConsolePresenter", "RunReportPresenter"]
