"""
Rich table displays for JD parameter records.
"""

from typing import Any, List, Union

from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from jdconv.models import Patch800, Patch990, SpecialSetup800, SpecialSetup990
from jdconv.utils import iter_parameters

console = Console()

TONE_NAMES = "ABCD"


def tone_mask_to_string(mask: int) -> str:
    """Convert a tone bit mask to e.g. "AB-D"."""
    return "".join(name if mask & (1 << i) else "-" for i, name in enumerate(TONE_NAMES))


def _parameter_table(title: str, records: List[Any], columns: List[str]) -> Table:
    table = Table(title=title, box=box.SIMPLE_HEAVY, show_lines=False)
    table.add_column("Parameter", style="cyan")
    for column in columns:
        table.add_column(column, justify="right")

    rows = [list(iter_parameters(record)) for record in records]
    for index, (path, _) in enumerate(rows[0]):
        values = [row[index][1] for row in rows]
        # Highlight parameters that differ between tones
        style = "bold" if len(set(values)) > 1 else None
        table.add_row(path, *(str(v) for v in values), style=style)
    return table


def display_patch(patch: Union[Patch990, Patch800]) -> None:
    """Display a JD-990 or JD-800 patch."""
    model = "JD-990" if isinstance(patch, Patch990) else "JD-800"
    common = patch.common

    header_content = f"""[bold]Name:[/bold] {common.name}
[bold]Level:[/bold] {common.patch_level}
[bold]Active Tones:[/bold] {tone_mask_to_string(common.active_tone)}
[bold]Layer Tones:[/bold] {tone_mask_to_string(common.layer_tone)}"""
    if isinstance(patch, Patch990):
        header_content += f"""
[bold]Structure AB/CD:[/bold] {patch.structure.structure_ab}/{patch.structure.structure_cd}
[bold]Control Sources:[/bold] {common.tone_control_source1}/{common.tone_control_source2}"""
    else:
        header_content += f"""
[bold]Aftertouch Bend:[/bold] {common.aftertouch_bend}"""

    console.print(
        Panel(
            header_content,
            title=f"[bold blue]{model} Patch[/bold blue]",
            border_style="blue",
            expand=False,
        )
    )
    console.print(_parameter_table("Tones", patch.tones, list(TONE_NAMES)))


def display_setup(setup: Union[SpecialSetup990, SpecialSetup800]) -> None:
    """Display a JD-990 or JD-800 special setup."""
    is_990 = isinstance(setup, SpecialSetup990)
    model = "JD-990" if is_990 else "JD-800"

    table = Table(title=f"{model} Special Setup", box=box.ROUNDED)
    table.add_column("Key", justify="right", style="dim")
    table.add_column("Name", style="cyan")
    table.add_column("Mute", justify="right")
    table.add_column("Env", justify="right")
    table.add_column("Pan", justify="right")
    table.add_column("FX Mode", justify="right")
    table.add_column("FX Level", justify="right")
    table.add_column("Waveform", justify="right")

    for index, key in enumerate(setup.keys):
        pan = key.tone.tva.pan if is_990 else key.pan
        wg = key.tone.wg
        table.add_row(
            str(index),
            key.name,
            str(key.mute_group),
            str(key.env_mode),
            str(pan),
            str(key.effect_mode),
            str(key.effect_level),
            f"{wg.wave_source}:{(wg.waveform_msb << 7) | wg.waveform_lsb}",
        )

    console.print(table)
