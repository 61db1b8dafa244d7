"""
Show command - display a JD-990 or JD-800 record.
"""

from pathlib import Path

import typer
from rich.console import Console

from cli.display.tables import display_patch, display_setup
from jdconv.formats import RecordReader
from jdconv.models import Patch800, Patch990, SpecialSetup800, SpecialSetup990
from jdconv.utils import ValidationError

console = Console()
app = typer.Typer()

RECORD_TYPES = {
    ("990", False): Patch990,
    ("990", True): SpecialSetup990,
    ("800", False): Patch800,
    ("800", True): SpecialSetup800,
}


@app.command()
def show(
    filepath: Path = typer.Argument(..., help="Record file (.json or packed block)"),
    model: str = typer.Option("990", "--model", "-m", help="Record model (990, 800)"),
    setup: bool = typer.Option(False, "--setup", "-s", help="Record is a special setup"),
) -> None:
    """
    Display a patch or special setup.

    Examples:

        jdconv show brass.json

        jdconv show brass_800.bin --model 800
    """
    if not filepath.exists():
        console.print(f"[red]Error: File not found: {filepath}[/red]")
        raise typer.Exit(1)

    record_type = RECORD_TYPES.get((model, setup))
    if record_type is None:
        console.print(f"[red]Error: Unknown model: {model}[/red]")
        console.print("Supported models: 990, 800")
        raise typer.Exit(1)

    try:
        record = RecordReader.read(filepath, record_type)
    except (ValidationError, ValueError) as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1)

    if setup:
        display_setup(record)
    else:
        display_patch(record)


if __name__ == "__main__":
    app()
