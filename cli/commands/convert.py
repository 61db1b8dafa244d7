"""
Convert command - JD-990 patch or special setup to JD-800.
"""

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from cli.display.diagnostics import display_diagnostics
from cli.logging_config import configure_logging
from jdconv.converters import convert_patch_990_to_800, convert_setup_990_to_800
from jdconv.formats import RecordReader, RecordWriter
from jdconv.models import Patch990, SpecialSetup990
from jdconv.utils import ValidationError

console = Console()
app = typer.Typer()

OUTPUT_SUFFIXES = {"json": ".json", "bin": ".bin"}


@app.command()
def convert(
    source: Path = typer.Argument(..., help="JD-990 record (.json or packed block)"),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Output file path"),
    setup: bool = typer.Option(False, "--setup", "-s", help="Source is a special setup"),
    output_format: str = typer.Option(
        "json", "--format", "-f", help="Output format when no output path is given (json, bin)"
    ),
    quiet: bool = typer.Option(False, "--quiet", "-q", help="Do not list diagnostics"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug logging"),
) -> None:
    """
    Convert a JD-990 patch or special setup to the JD-800.

    Every parameter that cannot be converted exactly is listed after the
    conversion. The conversion itself always completes.

    Examples:

        jdconv convert brass.json

        jdconv convert drums.json --setup -o drums_800.bin
    """
    configure_logging(verbose)

    if not source.exists():
        console.print(f"[red]Error: Source file not found: {source}[/red]")
        raise typer.Exit(1)

    if output_format not in OUTPUT_SUFFIXES:
        console.print(f"[red]Error: Unknown output format: {output_format}[/red]")
        console.print(f"Supported formats: {', '.join(OUTPUT_SUFFIXES)}")
        raise typer.Exit(1)

    output_path = output or source.with_name(f"{source.stem}_800{OUTPUT_SUFFIXES[output_format]}")

    try:
        if setup:
            result = convert_setup_990_to_800(RecordReader.read(source, SpecialSetup990))
        else:
            result = convert_patch_990_to_800(RecordReader.read(source, Patch990))
        RecordWriter.write(result.target, output_path)
    except (ValidationError, ValueError) as e:
        console.print(f"[red]Error: {e}[/red]")
        if verbose:
            console.print_exception()
        raise typer.Exit(1)

    kind = "setup" if setup else "patch"
    console.print(f"[green]Converted {kind}:[/green] {source} -> {output_path}")

    if not quiet:
        display_diagnostics(result.diagnostics)


if __name__ == "__main__":
    app()
