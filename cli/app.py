"""
jdconv - Convert Roland JD-990 patches to the Roland JD-800.

A CLI tool for converting and inspecting JD parameter records.
"""

import typer
from rich.console import Console

from cli.commands.convert import convert
from cli.commands.jx8p import jx8p
from cli.commands.show import show
from jdconv import __version__

console = Console()

# Main app
app = typer.Typer(
    name="jdconv",
    help="Convert Roland JD-990 patches and special setups to the JD-800.",
    add_completion=False,
    rich_markup_mode="rich",
)

app.command(name="convert")(convert)
app.command(name="show")(show)
app.command(name="jx8p")(jx8p)


@app.command()
def version() -> None:
    """Show version information."""
    console.print(f"[bold]jdconv[/bold] version {__version__}")
    console.print("[dim]Roland JD-990 to JD-800 patch converter[/dim]")


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    version_flag: bool = typer.Option(False, "--version", "-V", help="Show version"),
) -> None:
    """
    jdconv - Convert Roland JD-990 patches to the JD-800.

    [bold]Quick Start:[/bold]

        jdconv convert brass.json            # Convert a JD-990 patch
        jdconv convert drums.json --setup    # Convert a special setup
        jdconv show brass_800.json --model 800

    [bold]Utility Commands:[/bold]

        jdconv jx8p dump.syx                 # Extract JX-8P tone data

    Use --help with any command for more details.
    """
    if version_flag:
        version()
        raise typer.Exit()

    if ctx.invoked_subcommand is None:
        console.print(ctx.get_help())


def run() -> None:
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    run()
