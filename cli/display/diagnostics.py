"""
Rich display of conversion diagnostics.
"""

from typing import List

from rich import box
from rich.console import Console
from rich.table import Table

from jdconv.converters import Diagnostic, Severity

console = Console()

SEVERITY_STYLES = {
    Severity.LOSSY: "yellow",
    Severity.OUT_OF_RANGE: "red",
    Severity.INFO: "dim",
}


def display_diagnostics(diagnostics: List[Diagnostic]) -> None:
    """Display conversion diagnostics as a table."""
    if not diagnostics:
        console.print("[green]Lossless conversion.[/green]")
        return

    table = Table(title="Conversion Diagnostics", box=box.ROUNDED)
    table.add_column("#", justify="right", style="dim")
    table.add_column("Severity")
    table.add_column("Where", style="cyan")
    table.add_column("Parameter")
    table.add_column("Value", justify="right")
    table.add_column("Message")

    for index, diagnostic in enumerate(diagnostics, start=1):
        style = SEVERITY_STYLES[diagnostic.severity]
        table.add_row(
            str(index),
            f"[{style}]{diagnostic.severity.value}[/{style}]",
            diagnostic.context,
            diagnostic.parameter,
            "" if diagnostic.value is None else str(diagnostic.value),
            diagnostic.message,
        )

    console.print(table)

    lossy = sum(1 for d in diagnostics if d.severity != Severity.INFO)
    console.print(f"[yellow]{lossy} parameter(s) could not be converted exactly[/yellow]")
