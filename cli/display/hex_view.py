"""
Parameter byte display for raw tone data.
"""

from rich import box
from rich.console import Console
from rich.table import Table

console = Console()

BYTES_PER_ROW = 8


def display_parameter_bytes(data: bytes, title: str) -> None:
    """Display tone data as a grid of parameter offsets and hex values."""
    table = Table(title=title, box=box.SIMPLE, title_justify="left")
    table.add_column("Offset", style="dim", justify="right")
    for column in range(BYTES_PER_ROW):
        table.add_column(f"+{column}", justify="right")

    for row in range(0, len(data), BYTES_PER_ROW):
        chunk = data[row : row + BYTES_PER_ROW]
        # Values above 0x7F cannot be tone parameters
        cells = [f"[red]{b:02X}[/red]" if b > 0x7F else f"{b:02X}" for b in chunk]
        table.add_row(f"{row:02d}", *cells)

    console.print(table)
