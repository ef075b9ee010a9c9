# inkwell/cli/commands/rewrite.py
# `inkwell rewrite` - open a review session on a selection & write the merged document

from __future__ import annotations

import asyncio
from pathlib import Path
from typing import Optional

import typer

from ...ai.coordinator import StreamingCoordinator
from ...config.settings import InkwellSettings, get_settings
from ...core.constants import DiffGranularity, SelectionRange
from ...core.exceptions import AIError, SelectionError
from ...core.merge import MergeResult
from ...core.selection import select_offsets, select_paragraphs, select_text
from ...core.session import ReviewSession
from ...core.verbose import vlog
from ...inkwell_io.console import console
from ...inkwell_io.documents import read_document, write_document
from ..app import app
from ..decorators import handle_inkwell_error


# * Exactly one way of selecting; no selector means the whole document
def resolve_selection(
    document_text: str,
    start: Optional[int],
    end: Optional[int],
    find: Optional[str],
    occurrence: int,
    paragraphs: Optional[str],
) -> SelectionRange:
    chosen = sum(
        [start is not None or end is not None, find is not None, paragraphs is not None]
    )
    if chosen > 1:
        raise SelectionError("Use only one of --from/--to, --find or --paragraphs")

    if find is not None:
        return select_text(document_text, find, occurrence)
    if paragraphs is not None:
        return select_paragraphs(document_text, paragraphs)
    return select_offsets(document_text, start or 0, end)


async def _review(
    session: ReviewSession,
    coordinator: StreamingCoordinator,
    selection: SelectionRange,
    document_text: str,
    action: str,
    filename: str,
    settings: InkwellSettings,
    accept_all: bool,
) -> Optional[MergeResult]:
    selected = selection.extract(document_text)
    if session.enter(selected, selection, action, document_text) is None:
        raise SelectionError("Could not open a review for this selection")

    if accept_all:
        with console.status("[inkwell.accent2]Generating suggestion...[/]"):
            await session.wait()
        if session.last_error:
            error = session.last_error
            session.cancel_all()
            raise AIError(error)
        accepted = session.accept_all()
        vlog("SESSION", f"Accepted all {accepted} edit(s)")
        return session.finish()

    from ...ui.review import run_review_screen

    return await run_review_screen(
        session,
        filename=filename,
        action=action,
        confirm_discard=settings.confirm_discard,
        completion_source=lambda: coordinator.completion,
    )


# * Rewrite a selection w/ AI & review each edit before it lands
@app.command()
@handle_inkwell_error
def rewrite(
    ctx: typer.Context,
    document: Path = typer.Argument(
        ..., exists=True, dir_okay=False, help="Document to edit (.txt, .md, .docx)"
    ),
    start: Optional[int] = typer.Option(
        None, "--from", help="Start character offset of the selection"
    ),
    end: Optional[int] = typer.Option(
        None, "--to", help="End character offset of the selection (exclusive)"
    ),
    find: Optional[str] = typer.Option(
        None, "--find", help="Select the first occurrence of this exact text"
    ),
    occurrence: int = typer.Option(
        1, "--occurrence", min=1, help="Which occurrence of --find to select"
    ),
    paragraphs: Optional[str] = typer.Option(
        None, "--paragraphs", "-p", help="Select paragraphs N or A-B (1-based)"
    ),
    action: Optional[str] = typer.Option(
        None, "--action", "-a", help="Built-in action (see `inkwell actions`)"
    ),
    instruction: Optional[str] = typer.Option(
        None, "--instruction", "-i", help="Free-form instruction instead of an action"
    ),
    persona: Optional[str] = typer.Option(
        None, "--persona", help="Writing persona placed before the instruction"
    ),
    model: Optional[str] = typer.Option(None, "--model", "-m", help="AI model"),
    granularity: Optional[DiffGranularity] = typer.Option(
        None, "--granularity", help="Diff granularity (char or word)"
    ),
    output: Optional[Path] = typer.Option(
        None, "--output", "-o", help="Write here instead of editing DOCUMENT in place"
    ),
    accept_all: bool = typer.Option(
        False, "--accept-all", help="Accept every suggested edit without the review screen"
    ),
) -> None:
    settings = get_settings(ctx)
    if instruction is not None and not instruction.strip():
        raise typer.BadParameter("--instruction must not be empty")
    chosen_action = instruction or action or settings.default_action

    document_text = read_document(document)
    selection = resolve_selection(document_text, start, end, find, occurrence, paragraphs)
    if selection.is_empty:
        raise SelectionError("Selection is empty", selection.start, selection.end)

    coordinator = StreamingCoordinator(model, persona=persona, settings=settings)
    session = ReviewSession(
        coordinator,
        granularity=granularity or settings.granularity,
    )

    result = asyncio.run(
        _review(
            session,
            coordinator,
            selection,
            document_text,
            chosen_action,
            document.name,
            settings,
            accept_all,
        )
    )

    if result is None:
        console.print("[warning]Review cancelled; document unchanged[/]")
        return

    target = output or document
    if not result.changed and output is None:
        console.print("[dim]No edits accepted; document unchanged[/]")
        return

    write_document(target, result.spliced_document())
    console.print(
        f"[success]✓[/] Applied {result.accepted_count} edit(s) "
        f"[dim]->[/] [inkwell.accent2]{target}[/]"
    )
