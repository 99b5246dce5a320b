"""transferlut CLI application.

Running with no command writes the three fixed LUTs into the output
directory.

Commands:
    list     - Show the fixed LUTs and their titles
    inspect  - Summarize an existing 1D .cube file
"""

from __future__ import annotations

import logging
from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from transferlut import __version__
from transferlut.config import DEFAULT_OUTPUT_DIR
from transferlut.errors import TransferLutError
from transferlut.io.cube import format_value, read_cube_1d
from transferlut.pipeline.runner import PRESETS, generate_all

app = typer.Typer(
    name="transferlut",
    help="Generate 1D transfer-curve LUTs for 8-bit video.",
    invoke_without_command=True,
)
console = Console()
err_console = Console(stderr=True)

# Set up logging
logging.basicConfig(
    level=logging.WARNING,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    datefmt="%H:%M:%S",
)


def version_callback(value: bool):
    if value:
        console.print(f"transferlut v{__version__}")
        raise typer.Exit()


@app.callback()
def main_callback(
    ctx: typer.Context,
    output_dir: Path = typer.Option(
        Path(DEFAULT_OUTPUT_DIR), "-o", "--output-dir",
        help="Existing directory to write LUTs into.",
    ),
    version: bool = typer.Option(
        False, "--version", "-V", help="Show version and exit.",
        callback=version_callback, is_eager=True,
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging."),
):
    if verbose:
        logging.getLogger("transferlut").setLevel(logging.DEBUG)
    if ctx.invoked_subcommand is not None:
        return

    try:
        generate_all(output_dir)
    except TransferLutError as e:
        err_console.print(f"[red]Error:[/red] {escape(str(e))}", soft_wrap=True)
        raise typer.Exit(code=1)


@app.command("list")
def list_presets():
    """List the LUTs written by a plain run."""
    table = Table(title="Generated LUTs")
    table.add_column("File", style="cyan")
    table.add_column("Title")
    for preset in PRESETS:
        table.add_row(preset.filename, preset.title)
    console.print(table)


@app.command()
def inspect(
    path: Path = typer.Argument(..., help="1D .cube file to read."),
):
    """Show the header and end entries of a 1D .cube file."""
    try:
        lut, meta = read_cube_1d(path)
    except (TransferLutError, FileNotFoundError) as e:
        err_console.print(f"[red]Error:[/red] {escape(str(e))}", soft_wrap=True)
        raise typer.Exit(code=1)

    first, last = lut[0], lut[len(lut) - 1]
    console.print(f"\n[bold]{meta['title'] or path.name}[/bold]")
    console.print(f"  Size:  {meta['size']}")
    console.print(f"  First: {' '.join(format_value(v) for v in first.as_tuple())}")
    console.print(f"  Last:  {' '.join(format_value(v) for v in last.as_tuple())}")


def main():
    app()


if __name__ == "__main__":
    main()
