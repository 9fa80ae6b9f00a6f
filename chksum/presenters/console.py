"""
Console presenter for the chksum CLI.

Status lines go to stdout, errors and warnings to stderr. Styling goes
through click, which strips ANSI codes when the stream is not a terminal.
"""

import os
from typing import IO

import click

from ..core.interfaces.presenter import IPresenter


class ConsolePresenter(IPresenter):
    """
    Prints run status for a human at a terminal.

    Digest lines themselves never pass through here; they are written by
    the log sink so they can be redirected independently.
    """

    def __init__(
        self,
        color: bool | None = None,
        file: IO[str] | None = None,
        err_file: IO[str] | None = None,
    ) -> None:
        """
        Args:
            color: Force styling on or off; None lets click decide per stream,
                and the NO_COLOR environment variable turns it off
            file: Stream for status lines (defaults to stdout)
            err_file: Stream for errors and warnings (defaults to stderr)
        """
        if color is None and os.environ.get("NO_COLOR"):
            color = False
        self._color = color
        self._file = file
        self._err_file = err_file

    def print(self, message: str) -> None:
        click.echo(message, file=self._file)

    def print_error(self, message: str) -> None:
        self._echo_err(click.style(f"Error: {message}", fg="red"))

    def print_warning(self, message: str) -> None:
        self._echo_err(click.style(f"Warning: {message}", fg="yellow"))

    def print_success(self, message: str) -> None:
        click.echo(click.style(message, fg="green"), file=self._file, color=self._color)

    def _echo_err(self, text: str) -> None:
        if self._err_file is None:
            click.echo(text, err=True, color=self._color)
        else:
            click.echo(text, file=self._err_file, color=self._color)
