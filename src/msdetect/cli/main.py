"""Command-line interface for msdetect."""
from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import Optional

import click
from rich.console import Console
from rich.table import Table

from msdetect import __version__
from msdetect.core.engine import DetectionEngine
from msdetect.models.config import DetectionConfig
from msdetect.models.result import DetectionResult, FormatKind
from msdetect.utils.logging import set_log_level

console = Console()

# Rule that identifies each format, in detection order
FORMAT_RULES: dict[FormatKind, str] = {
    FormatKind.WATERS_RAW: "directory containing a _FUNCnnn.DAT file",
    FormatKind.AGILENT_CSV: "file name ending in .csv",
    FormatKind.THERMO_RAW: "header starts with 01 A1 + 'Finnigan' (UTF-16LE)",
    FormatKind.NETCDF: "header starts with 'CDF'",
    FormatKind.MZML: "'<mzML' in the first 1024 bytes",
    FormatKind.MZDATA: "'<mzData' in the first 1024 bytes",
    FormatKind.MZXML: "'<msRun' in the first 1024 bytes",
}


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="msdetect")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(ctx: click.Context, verbose: bool) -> None:
    """msdetect - Raw data format detection for mass-spectrometry files."""
    if verbose:
        set_log_level("DEBUG")
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


@cli.command(name="detect")
@click.argument("paths", nargs=-1, type=click.Path())
@click.option("-o", "--output", type=click.Path(), help="Output file path")
@click.option(
    "-f", "--format",
    "output_format",
    type=click.Choice(["table", "json", "text"]),
    default="table",
    help="Output format",
)
@click.option("--mime", is_flag=True, help="Also report the MIME type of headers")
@click.option("-j", "--workers", type=click.IntRange(min=1), default=4,
              help="Parallel workers")
@click.option("-q", "--quiet", is_flag=True, help="Suppress progress output")
def detect_cmd(
    paths: tuple[str, ...],
    output: Optional[str],
    output_format: str,
    mime: bool,
    workers: int,
    quiet: bool,
) -> None:
    """Detect the raw data format of files and directories.

    Examples:

        msdetect detect sample.mzML

        msdetect detect data/*.raw -f json -o formats.json
    """
    if not paths:
        console.print("[red]Error: No paths specified[/red]")
        sys.exit(1)

    config = DetectionConfig(sniff_mimetype=mime, max_workers=workers)
    engine = DetectionEngine(config)

    # Machine-readable output on stdout gets no spinner, even on stderr
    show_progress = not quiet and (output_format == "table" or output is not None)
    by_path = dict(engine.detect_batch(paths, show_progress=show_progress))
    # Report in the order given on the command line
    results = [by_path[Path(p)] for p in paths]

    output_content = _format_output(results, output_format)
    if output_content is None and output:
        # Tables are for the terminal; files get the text rendering
        output_content = _format_output(results, "text")

    if output_content is None:
        _print_table(results)
    elif output:
        Path(output).write_text(output_content)
        console.print(f"[green]Output written to {output}[/green]")
    else:
        click.echo(output_content)

    if any(not r.success for r in results):
        sys.exit(1)


@cli.command()
def formats() -> None:
    """List recognised raw data formats."""
    table = Table(title="Supported Formats")
    table.add_column("Format", style="cyan")
    table.add_column("Detected by", style="green")

    for kind, rule in FORMAT_RULES.items():
        table.add_row(kind.value, rule)

    console.print(table)


def _format_output(
    results: list[DetectionResult],
    output_format: str,
) -> str | None:
    """Format detection results for output; None means render a table."""
    if output_format == "json":
        return json.dumps([r.to_dict() for r in results], indent=2)
    elif output_format == "text":
        return "\n".join(
            f"{r.path}\t{r.kind.value if r.success and r.kind else 'error'}"
            for r in results
        )
    return None


def _print_table(results: list[DetectionResult]) -> None:
    table = Table(title="Detected Formats")
    table.add_column("Path", style="cyan")
    table.add_column("Format", style="green")
    table.add_column("Detail", style="yellow")

    for r in results:
        if not r.success or r.kind is None:
            table.add_row(str(r.path), "[red]error[/red]", r.error or "")
            continue
        detail = []
        if r.header_size is not None:
            detail.append(f"{r.header_size} header bytes")
        if r.mime_type:
            detail.append(r.mime_type)
        if r.is_directory:
            detail.append("directory")
        table.add_row(str(r.path), r.kind.value, ", ".join(detail))

    console.print(table)


if __name__ == "__main__":
    cli()
