# inkwell/cli/commands/diff.py
# `inkwell diff` - show the paragraph-aligned edit chunks between two documents

from __future__ import annotations

import json
from pathlib import Path
from typing import Optional

import typer
from rich.table import Table
from rich.text import Text

from ...config.settings import get_settings
from ...core.constants import ChunkKind, DiffGranularity, EditChunk
from ...core.differ import ChunkIdAllocator, compute_diff_chunks
from ...inkwell_io.console import console
from ...inkwell_io.documents import read_document
from ..app import app
from ..decorators import handle_inkwell_error

KIND_LABELS = {
    ChunkKind.EQUAL: ("=", "dim"),
    ChunkKind.INSERTION: ("+", "diff.insert"),
    ChunkKind.DELETION: ("-", "diff.delete"),
}


def _chunk_table(chunks: list[EditChunk]) -> Table:
    table = Table(border_style="inkwell.accent2", show_lines=False, expand=True)
    table.add_column("ID", style="dim", no_wrap=True)
    table.add_column("", no_wrap=True)
    table.add_column("Text", ratio=1)
    for chunk in chunks:
        sign, style = KIND_LABELS[chunk.kind]
        table.add_row(chunk.id, Text(sign, style=style), Text(chunk.text, style=style))
    return table


# * Diff ORIGINAL against SUGGESTION
@app.command()
@handle_inkwell_error
def diff(
    ctx: typer.Context,
    original: Path = typer.Argument(..., exists=True, dir_okay=False),
    suggestion: Path = typer.Argument(..., exists=True, dir_okay=False),
    as_json: bool = typer.Option(False, "--json", help="Print chunks as JSON"),
    granularity: Optional[DiffGranularity] = typer.Option(
        None, "--granularity", help="Diff granularity (char or word)"
    ),
) -> None:
    settings = get_settings(ctx)
    chunks = compute_diff_chunks(
        read_document(original),
        read_document(suggestion),
        id_source=ChunkIdAllocator(),
        granularity=granularity or settings.granularity,
    )

    if as_json:
        # plain stdout so the output stays machine-readable
        typer.echo(json.dumps([c.to_dict() for c in chunks], indent=2, ensure_ascii=False))
        return

    edits = [c for c in chunks if c.is_edit]
    if not edits:
        console.print("[success]✓[/] Documents are identical")
        return

    console.print(_chunk_table(chunks))
    inserted = sum(1 for c in edits if c.kind is ChunkKind.INSERTION)
    console.print(
        f"[inkwell.accent2]{len(edits)}[/] edit(s): "
        f"{inserted} insertion(s), {len(edits) - inserted} deletion(s)"
    )
