"""Click CLI entry point for the FDS namelist decoder."""

from __future__ import annotations

import json
import logging
import sys
from pathlib import Path

import click

from fdsdecode import __version__
from fdsdecode.document import decode_fds_file
from fdsdecode.errors import FdsDecodeError
from fdsdecode.inspection import inspect_document
from fdsdecode.inspection import render_text as render_inspection_text
from fdsdecode.loader import load_namelists
from fdsdecode.options import ON_ERROR_CHOICES, SINGLETON_CHOICES, DecodeOptions
from fdsdecode.warning_policy import WarningPolicy, parse_code_list

logger = logging.getLogger(__name__)


def _build_warning_policy(warn_as_error: str | None, suppress_warning: str | None) -> WarningPolicy:
    """Parse CLI warning options into a WarningPolicy."""
    try:
        wae = parse_code_list(warn_as_error) if warn_as_error else frozenset()
        sup = parse_code_list(suppress_warning) if suppress_warning else frozenset()
    except ValueError as e:
        raise click.ClickException(str(e)) from e
    return WarningPolicy(warn_as_error=wae, suppress=sup)


def _setup_logging(level: int) -> None:
    """Send package log records to stderr at the given level."""
    package_logger = logging.getLogger("fdsdecode")
    package_logger.setLevel(level)
    if package_logger.hasHandlers():
        package_logger.handlers.clear()
    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter("%(levelname)s %(name)s: %(message)s"))
    package_logger.addHandler(handler)


@click.group()
@click.version_option(version=__version__, prog_name="fdsdecode")
@click.option("-v", "--verbose", is_flag=True, default=False, help="Log each decoded group.")
def main(verbose: bool = False) -> None:
    """fdsdecode: typed decoding of FDS namelist input decks."""
    _setup_logging(logging.DEBUG if verbose else logging.WARNING)


@main.command()
@click.argument("input_file", type=click.Path(exists=True, path_type=Path))
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["text", "json"]),
    default="text",
    show_default=True,
    help="Output format.",
)
@click.option(
    "--intersections",
    is_flag=True,
    default=False,
    help="List every pair of records whose bounding boxes overlap.",
)
@click.option(
    "--on-error",
    type=click.Choice(ON_ERROR_CHOICES),
    default="abort",
    show_default=True,
    help="Stop at the first undecodable group, or skip it and keep going.",
)
@click.option(
    "--singleton",
    type=click.Choice(SINGLETON_CHOICES),
    default="last",
    show_default=True,
    help="Which repeated HEAD/TIME/DUMP/MISC group wins, or reject repeats.",
)
@click.option(
    "-j",
    "--jobs",
    type=click.IntRange(min=1),
    default=1,
    show_default=True,
    help="Number of threads used to decode groups.",
)
@click.option(
    "--warn-as-error",
    "warn_as_error",
    type=str,
    default=None,
    help="Comma-separated W-codes to treat as errors (e.g. W01,W02).",
)
@click.option(
    "--suppress-warning",
    "suppress_warning",
    type=str,
    default=None,
    help="Comma-separated W-codes to suppress (e.g. W03).",
)
def inspect(
    input_file: Path,
    output_format: str = "text",
    intersections: bool = False,
    on_error: str = "abort",
    singleton: str = "last",
    jobs: int = 1,
    warn_as_error: str | None = None,
    suppress_warning: str | None = None,
) -> None:
    """Decode a tokenized namelist file and summarize the document."""
    options = DecodeOptions(
        on_error=on_error,
        singleton=singleton,
        warning_policy=_build_warning_policy(warn_as_error, suppress_warning),
        max_workers=jobs,
    )

    try:
        namelists = load_namelists(input_file)
        logger.debug("Loaded %d namelists from %s", len(namelists), input_file)
        fds = decode_fds_file(namelists, options)
        payload = inspect_document(fds, intersections=intersections)
    except FdsDecodeError as e:
        raise click.ClickException(str(e))

    if output_format == "json":
        click.echo(json.dumps(payload, indent=2))
    else:
        click.echo(render_inspection_text(payload), nl=False)
