"""
Native Click implementation of the files command.

Usage: chksum files [OPTIONS] PATH...

Digests the given files and writes the configured outputs. Options left
unset fall back to the [digest] and [output] settings.
"""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Any

import click

from ...core.exceptions import InvalidConfigurationError
from ...core.models.digest import Entity
from ...hashing import HashAlgorithmRegistry
from ...presenters import ConsolePresenter, RunReportPresenter
from ...services.execution import CancelOnInterrupt, ExecutionEngine
from ...services.logging import ChksumLogger
from ...sinks import build_sinks
from ..context import ChksumContext


def _overrides(**values: Any) -> dict[str, Any]:
    return {k: v for k, v in values.items() if v is not None}


@click.command("files")
@click.argument("paths", nargs=-1, required=True, type=click.Path(path_type=Path, dir_okay=False))
@click.option(
    "-a",
    "--algorithm",
    "algorithms",
    multiple=True,
    help="Digest algorithm (repeatable). Default: MD5 and SHA-1.",
)
@click.option(
    "--fail-on-error/--no-fail-on-error",
    default=None,
    help="Stop at the first unreadable file, or record it and continue.",
)
@click.option(
    "--fail-on-partial/--no-fail-on-partial",
    default=None,
    help="With --no-fail-on-error, still exit non-zero if anything failed.",
)
@click.option(
    "--individual-files/--no-individual-files",
    default=None,
    help="Write one digest file per file and algorithm.",
)
@click.option(
    "--individual-files-directory",
    type=click.Path(path_type=Path, file_okay=False),
    default=None,
    help="Directory for individual digest files (default: next to each file).",
)
@click.option("--csv-summary/--no-csv-summary", default=None, help="Write a CSV summary.")
@click.option("--csv-summary-file", default=None, help="CSV summary file name.")
@click.option("--xml-summary/--no-xml-summary", default=None, help="Write an XML summary.")
@click.option("--xml-summary-file", default=None, help="XML summary file name.")
@click.option(
    "-o",
    "--output-directory",
    type=click.Path(path_type=Path, file_okay=False),
    default=None,
    help="Base directory for summary files.",
)
@click.option("--encoding", default=None, help="Encoding of generated files.")
@click.option("-q", "--quiet/--no-quiet", default=None, help="Do not print digests.")
@click.option("-j", "--workers", type=click.IntRange(1, 64), default=None, help="Digest threads.")
@click.pass_obj
def files(
    ctx: ChksumContext,
    paths: tuple[Path, ...],
    algorithms: tuple[str, ...],
    fail_on_error: bool | None,
    fail_on_partial: bool | None,
    individual_files: bool | None,
    individual_files_directory: Path | None,
    csv_summary: bool | None,
    csv_summary_file: str | None,
    xml_summary: bool | None,
    xml_summary_file: str | None,
    output_directory: Path | None,
    encoding: str | None,
    quiet: bool | None,
    workers: int | None,
) -> None:
    """Compute checksums of files.

    \b
    Examples:
        chksum files app.jar lib/*.jar
        chksum files -a SHA-256 -a SHA-512 --xml-summary dist/*
        chksum files --no-fail-on-error -o target build/*.zip
    """
    out = ConsolePresenter()

    digest = _overrides(
        algorithms=list(algorithms) or None,
        fail_on_error=fail_on_error,
        fail_on_partial=fail_on_partial,
        workers=workers,
    )
    output = _overrides(
        directory=str(output_directory) if output_directory is not None else None,
        encoding=encoding,
        quiet=quiet,
        individual_files=individual_files,
        individual_files_directory=(
            str(individual_files_directory) if individual_files_directory is not None else None
        ),
        csv_summary=csv_summary,
        csv_summary_file=csv_summary_file,
        xml_summary=xml_summary,
        xml_summary_file=xml_summary_file,
    )

    try:
        settings = ctx.load_settings(digest=digest, output=output)
        logger = ChksumLogger.from_config(settings.logging)
        digest_logger = ChksumLogger(
            name="chksum.digests", level="info", console_enabled=True, stream=sys.stdout
        )
        registry = HashAlgorithmRegistry()
        base_dir = Path(settings.output.directory)
        if not base_dir.is_absolute():
            base_dir = ctx.cwd / base_dir

        sinks = build_sinks(
            settings.output,
            settings.digest.algorithms,
            digest_logger=digest_logger,
            base_dir=base_dir,
            registry=registry,
        )
        entities = [Entity.from_path(path, base_dir=ctx.cwd) for path in paths]
        engine = ExecutionEngine(
            settings.digest.to_execution_config(),
            entities,
            sinks,
            registry=registry,
            logger=logger,
        )
    except InvalidConfigurationError as e:
        out.print_error(str(e))
        raise SystemExit(e.exit_code) from e

    with CancelOnInterrupt(logger=logger) as cancel:
        outcome = engine.run(cancel=cancel)

    RunReportPresenter(out).show_report(outcome, quiet=settings.output.quiet)
    if not outcome.success:
        raise SystemExit(1)
