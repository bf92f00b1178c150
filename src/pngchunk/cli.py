"""Command-line interface for encoding and inspecting single chunks."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from .exceptions import ValidationError
from .framing import Chunk, ChunkType, decode_chunk, encode_chunk
from .utils import configure_logging

console = Console()


def _read_chunk(path: Path) -> Chunk:
    try:
        return decode_chunk(path.read_bytes())
    except ValidationError as exc:
        raise click.ClickException(f"{path}: {exc}") from exc


@click.group()
@click.option(
    "--log-level",
    type=click.Choice(["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"], case_sensitive=False),
    default=None,
    help="Set the log level for the CLI session.",
)
def main(log_level: Optional[str]) -> None:
    """pngchunk command-line interface."""
    configure_logging(log_level)


@main.command()
@click.option("--type", "type_code", required=True, help="Four letter chunk type, e.g. RuSt.")
@click.option("--message", default=None, help="UTF-8 text to store in the chunk.")
@click.option(
    "--in",
    "in_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="File whose bytes become the chunk data.",
)
@click.option(
    "--out",
    "out_path",
    type=click.Path(dir_okay=False, path_type=Path),
    required=True,
    help="Where to write the encoded chunk.",
)
def encode(type_code: str, message: Optional[str], in_path: Optional[Path], out_path: Path) -> None:
    """Build a chunk and write its wire bytes."""
    if (message is None) == (in_path is None):
        raise click.UsageError("exactly one of --message or --in is required")

    try:
        chunk_type = ChunkType.from_str(type_code)
        if message is not None:
            chunk = Chunk.from_text(chunk_type, message)
        else:
            chunk = Chunk(chunk_type, in_path.read_bytes())  # type: ignore[union-attr]
        blob = encode_chunk(chunk)
    except ValidationError as exc:
        raise click.ClickException(str(exc)) from exc

    if not chunk_type.is_valid():
        console.print(f"[yellow]Chunk type {chunk_type} has its reserved bit set.[/yellow]")
    out_path.write_bytes(blob)
    console.print(f"[green]Wrote {len(blob)} bytes to {escape(str(out_path))}[/green]")


@main.command()
@click.option(
    "--in",
    "in_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    required=True,
    help="Encoded chunk file.",
)
@click.option(
    "--out",
    "out_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Write the raw chunk data here instead of printing it as text.",
)
def decode(in_path: Path, out_path: Optional[Path]) -> None:
    """Validate a chunk and extract its data."""
    chunk = _read_chunk(in_path)
    if out_path is not None:
        out_path.write_bytes(chunk.data())
        console.print(f"[green]Wrote {chunk.length()} bytes to {escape(str(out_path))}[/green]")
        return

    try:
        text = chunk.data_as_string()
    except ValidationError as exc:
        raise click.ClickException(f"{exc}; use --out to save the raw bytes") from exc
    click.echo(text)


@main.command()
@click.option(
    "--in",
    "in_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    required=True,
    help="Encoded chunk file.",
)
def inspect(in_path: Path) -> None:
    """Show the fields and property bits of a chunk."""
    chunk = _read_chunk(in_path)
    chunk_type = chunk.chunk_type()

    table = Table(title=escape(str(in_path)))
    table.add_column("Field")
    table.add_column("Value")
    table.add_row("Length", str(chunk.length()))
    table.add_row("Type", str(chunk_type))
    table.add_row("Crc", str(chunk.crc()))
    table.add_row("Critical", str(chunk_type.is_critical()))
    table.add_row("Public", str(chunk_type.is_public()))
    table.add_row("Reserved bit valid", str(chunk_type.is_reserved_bit_valid()))
    table.add_row("Safe to copy", str(chunk_type.is_safe_to_copy()))
    console.print(table)
