"""Command-line interface for chunkcodec."""

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from . import __version__
from .addressing import split
from .config import ChunkLayout, get_preset, list_presets
from .logs import setup_logging
from .pairing import decode as decode_key, encode as encode_pair
from .powers import ceil_power_of_two, is_power_of_two, size_of_power

app = typer.Typer(
    name="chunkcodec",
    help="Split voxel world coordinates into chunk addresses and pack 2D positions into keys.",
    no_args_is_help=True,
)
console = Console()

# Negative coordinates such as -33 must not be parsed as options
NUMERIC_ARGS = {"ignore_unknown_options": True}

PRESET_DESCRIPTIONS = {
    "default": "32x64x32 chunks",
    "cubic16": "16x16x16 cubic chunks",
    "cubic32": "32x32x32 cubic chunks",
    "column16": "16x256x16 columns",
    "flat": "32x1x32, y unchunked",
}


def version_callback(value: bool):
    if value:
        console.print(f"chunkcodec version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        None, "--version", "-V",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit.",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug logging."),
):
    """chunkcodec: chunk addressing and pairing keys for voxel worlds."""
    setup_logging(verbose, console=console)


def _resolve_layout(preset_name: str, layout_file: Optional[Path]) -> ChunkLayout:
    if layout_file is not None:
        try:
            return ChunkLayout.load(layout_file)
        except (OSError, ValueError) as e:
            console.print(f"[red]Error:[/red] Cannot load layout {layout_file}: {e}")
            raise typer.Exit(1)

    layout = get_preset(preset_name)
    if layout is None:
        console.print(f"[red]Error:[/red] Unknown preset: {preset_name}")
        console.print("Available presets:")
        for p in list_presets():
            console.print(f"  - {p}")
        raise typer.Exit(1)
    return layout


@app.command("split", context_settings=NUMERIC_ARGS)
def split_cmd(
    x: int = typer.Argument(..., help="World X coordinate"),
    y: int = typer.Argument(..., help="World Y coordinate"),
    z: int = typer.Argument(..., help="World Z coordinate"),
    preset_name: str = typer.Option("default", "--preset", "-p", help="Preset chunk layout"),
    layout_file: Optional[Path] = typer.Option(None, "--layout", "-l", help="Chunk layout JSON file"),
):
    """Split a world position into chunk and block positions.

    Example:
        chunkcodec split -33 70 12 --preset cubic32
    """
    layout = _resolve_layout(preset_name, layout_file)
    address = split((x, y, z), layout)

    table = Table(title=f"Position ({x}, {y}, {z})")
    table.add_column("Axis", style="cyan")
    table.add_column("Chunk size", justify="right")
    table.add_column("Chunk", justify="right")
    table.add_column("Block", justify="right")
    for axis, size, chunk, block in zip("xyz", layout.sizes, address.chunk, address.block):
        table.add_row(axis, str(size), str(chunk), str(block))

    console.print(table)


@app.command(context_settings=NUMERIC_ARGS)
def encode(
    x: int = typer.Argument(..., help="First signed component"),
    y: int = typer.Argument(..., help="Second signed component"),
):
    """Encode a signed pair into a single key.

    Example:
        chunkcodec encode -3 7
    """
    try:
        key = encode_pair(x, y)
    except ValueError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)
    console.print(key)


@app.command(context_settings=NUMERIC_ARGS)
def decode(
    key: int = typer.Argument(..., help="Key produced by encode"),
):
    """Decode a key into its signed pair."""
    try:
        x, y = decode_key(key)
    except ValueError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)
    console.print(f"{x} {y}")


@app.command(context_settings=NUMERIC_ARGS)
def power(
    value: int = typer.Argument(..., help="Value to inspect"),
):
    """Show power-of-two information for a value."""
    console.print(f"[cyan]Ceil power of two:[/cyan] {ceil_power_of_two(value)}")
    console.print(f"[cyan]Is power of two:[/cyan]   {is_power_of_two(value)}")
    console.print(f"[cyan]Exponent:[/cyan]          {size_of_power(value)}")
    if value <= 0:
        console.print("[yellow]Note:[/yellow] values <= 0 have no power of two; ceil is reported as 0")


@app.command("list-presets")
def list_presets_cmd():
    """List available preset chunk layouts."""
    table = Table(title="Available Presets")
    table.add_column("Name", style="cyan")
    table.add_column("Description")
    table.add_column("Powers")
    table.add_column("Blocks per chunk", justify="right")

    for name in list_presets():
        layout = get_preset(name)
        powers_str = "({}, {}, {})".format(*layout.powers)
        table.add_row(name, PRESET_DESCRIPTIONS.get(name, ""), powers_str, str(layout.volume))

    console.print(table)


@app.command()
def layout(
    name: str = typer.Argument(..., help="Preset layout name"),
    output: Path = typer.Option(Path("layout.json"), "--output", "-o", help="Output JSON file"),
):
    """Write a preset chunk layout to a JSON file."""
    chunk_layout = _resolve_layout(name, None)
    try:
        chunk_layout.save(output)
    except OSError as e:
        console.print(f"[red]Error:[/red] Cannot write layout {output}: {e}")
        raise typer.Exit(1)
    console.print(f"[green]Success![/green] Layout saved to: {output}")


if __name__ == "__main__":
    app()
