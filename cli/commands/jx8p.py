"""
JX-8P command - extract JX-8P tone data from SysEx dumps.
"""

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from cli.display.hex_view import display_parameter_bytes
from jdconv.formats import extract_from_sysex, read_sysex_stream

console = Console()
app = typer.Typer()


@app.command()
def jx8p(
    filepath: Path = typer.Argument(..., help="SysEx dump (.syx) or Standard MIDI File"),
    limit: Optional[int] = typer.Option(None, "--limit", "-n", help="Show at most N patches"),
    raw: bool = typer.Option(False, "--raw", help="Print plain hex instead of a parameter grid"),
) -> None:
    """
    Extract JX-8P patches from a SysEx dump.

    Examples:

        jdconv jx8p tones.syx

        jdconv jx8p song.mid --limit 4
    """
    try:
        stream = read_sysex_stream(filepath)
    except (OSError, EOFError, ValueError) as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1)

    patches = extract_from_sysex(stream)
    console.print(f"[bold]{len(patches)}[/bold] JX-8P patch(es) in {filepath}")

    for index, patch in enumerate(patches[:limit]):
        if raw:
            console.print(patch.debug_string())
        else:
            display_parameter_bytes(patch.data, title=f"Patch {index + 1}")


if __name__ == "__main__":
    app()
