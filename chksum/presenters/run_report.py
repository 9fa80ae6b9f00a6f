"""
Run report presenter for displaying checksum run outcomes.
"""

from ..core.interfaces.presenter import IPresenter
from ..core.models.digest import RunOutcome


class RunReportPresenter:
    """Formats the end-of-run summary: errors first, then one status line."""

    def __init__(self, presenter: IPresenter) -> None:
        """
        Initialize report presenter.

        Args:
            presenter: Base presenter for output
        """
        self._out = presenter

    def show_report(self, outcome: RunOutcome, quiet: bool = False) -> None:
        """
        Display the outcome of a run.

        Errors are always shown; the success line is suppressed when quiet.

        Args:
            outcome: Outcome returned by the execution engine
            quiet: If True, only errors are printed
        """
        for message in outcome.errors:
            self._out.print_error(message)

        entities = len({r.entity.display_name for r in outcome.results})
        summary = f"{len(outcome.results)} digest(s) for {entity_count(entities)}"

        if outcome.success:
            if outcome.failures:
                self._out.print_warning(f"{len(outcome.failures)} digest(s) could not be computed")
            if not quiet:
                self._out.print_success(f"Computed {summary}")
        elif outcome.cancelled:
            self._out.print_error(f"Run cancelled after {summary}")
        else:
            self._out.print_error(f"Run failed after {summary}")


def entity_count(count: int) -> str:
    """'1 file' / '3 files'."""
    return f"{count} file" if count == 1 else f"{count} files"
