# inkwell/ui/review/review_renderer.py
# Rendering components for the split-view review screen

from __future__ import annotations

from typing import Sequence

from rich.align import Align
from rich.columns import Columns
from rich.console import Group, RenderableType
from rich.layout import Layout
from rich.panel import Panel
from rich.spinner import Spinner
from rich.table import Table
from rich.text import Text

from ...ai.prompts import describe_action
from ...core.constants import ChunkKind, ChunkStatus, EditChunk
from ...core.session import ReviewPhase, SessionSnapshot
from .review_state import ReviewMode, ReviewViewState, editable_chunks

MIN_W, MAX_W = 80, 200
MIN_H, MAX_H = 24, 60

# rows of the chunk list shown around the cursor
CHUNK_LIST_ROWS = 5
PREVIEW_CHARS = 60

KEY_HELP = (
    "[j/k] move  [a] accept  [r] reject  [u] revert  [A] accept all  "
    "[g] regenerate  [i] instruct  [z] undo  [Enter] finish  [Esc] cancel"
)

STATUS_STYLES = {
    ChunkStatus.ACCEPTED: "diff.accepted",
    ChunkStatus.PENDING: "diff.pending",
    ChunkStatus.REJECTED: "diff.rejected",
}


def _clamp(n: int, lo: int, hi: int) -> int:
    return max(lo, min(hi, n))


def _preview(text: str, limit: int = PREVIEW_CHARS) -> str:
    flat = text.replace("\n", "⏎")
    return flat if len(flat) <= limit else flat[: limit - 3] + "..."


class ReviewRenderer:

    def __init__(self, width: int, height: int):
        self.width = width
        self.height = height

    # ===== TEXT PANES =====

    def _append(self, out: Text, text: str, style: str | None, focus: bool) -> None:
        start = len(out)
        out.append(text, style=style)
        if focus:
            out.stylize("reverse", start, len(out))

    # baseline as it was: equal text plus deletions (highlighted), no insertions
    def render_original(
        self, chunks: Sequence[EditChunk], baseline: str, current_id: str | None
    ) -> Text:
        if not chunks:
            return Text(baseline)
        out = Text()
        for chunk in chunks:
            if chunk.kind is ChunkKind.EQUAL:
                out.append(chunk.text)
            elif chunk.kind is ChunkKind.DELETION:
                self._append(out, chunk.text, "diff.delete", chunk.id == current_id)
        return out

    # live merged preview; pending edits stay visible so they can be judged
    def render_preview(self, chunks: Sequence[EditChunk], current_id: str | None) -> Text:
        out = Text()
        for chunk in chunks:
            focus = chunk.id == current_id
            if chunk.kind is ChunkKind.EQUAL:
                out.append(chunk.text)
            elif chunk.kind is ChunkKind.INSERTION:
                if chunk.status is ChunkStatus.ACCEPTED:
                    self._append(out, chunk.text, "diff.insert", focus)
                elif chunk.status is ChunkStatus.PENDING:
                    self._append(out, chunk.text, "diff.insert_pending", focus)
            elif chunk.status is ChunkStatus.PENDING:
                self._append(out, chunk.text, "diff.delete_pending", focus)
            elif chunk.status is ChunkStatus.REJECTED:
                self._append(out, chunk.text, None, focus)
        return out

    def render_loading(self, completion: str) -> RenderableType:
        spinner = Columns(
            [Spinner("dots", style="inkwell.accent2"), Text(" Generating suggestion...")]
        )
        if not completion:
            return spinner
        return Group(spinner, Text(""), Text(completion, style="dim"))

    # ===== CHUNK LIST =====

    def render_chunk_list(self, chunks: Sequence[EditChunk], cursor: int) -> RenderableType:
        editable = editable_chunks(chunks)
        if not editable:
            return Text("No differences to review", style="dim")

        start = _clamp(cursor - CHUNK_LIST_ROWS // 2, 0, max(0, len(editable) - CHUNK_LIST_ROWS))
        grid = Table.grid(padding=(0, 1), expand=True)
        grid.add_column(no_wrap=True, width=2)
        grid.add_column(no_wrap=True, width=5)
        grid.add_column(no_wrap=True, width=9)
        grid.add_column(ratio=1, no_wrap=True)

        for i, chunk in enumerate(editable[start : start + CHUNK_LIST_ROWS], start=start):
            is_sel = i == cursor
            marker = Text("> " if is_sel else "  ", style="inkwell.title")
            sign = "+" if chunk.kind is ChunkKind.INSERTION else "-"
            kind_style = "diff.insert" if sign == "+" else "diff.delete"
            grid.add_row(
                marker,
                Text(f"{sign}{i + 1}", style=kind_style),
                Text(chunk.status.value, style=STATUS_STYLES[chunk.status]),
                Text(_preview(chunk.text), style="bold" if is_sel else None),
            )
        return grid

    # ===== HEADER/FOOTER =====

    def render_header(self, state: ReviewViewState, snapshot: SessionSnapshot) -> RenderableType:
        left_text = Text(f"Reviewing: {state.filename}", style="inkwell.title")
        left_text.append(f"  ({describe_action(state.action)})", style="inkwell.accent2")

        if snapshot.phase is ReviewPhase.LOADING:
            right = "Generating..."
        else:
            right = (
                f"Accepted {snapshot.accepted_count} | Pending {snapshot.pending_count}"
            )
        if snapshot.save_point_count:
            right += f" | Undo x{snapshot.save_point_count}"

        header_table = Table.grid(padding=0, expand=True)
        header_table.add_column(ratio=1, justify="left")
        header_table.add_column(no_wrap=True, justify="right")
        header_table.add_row(left_text, Text(right, style="inkwell.accent2"))
        return Panel(header_table, border_style="dim", padding=(0, 1))

    def render_footer(self, state: ReviewViewState, snapshot: SessionSnapshot) -> RenderableType:
        lines: list[RenderableType] = []
        if snapshot.last_error:
            lines.append(Text(f"Error: {snapshot.last_error}", style="error"))
        elif state.status_message:
            lines.append(Text(state.status_message, style="warning"))

        if state.mode == ReviewMode.TEXT_INPUT:
            display = (
                state.text_input_buffer[: state.text_input_cursor]
                + "|"
                + state.text_input_buffer[state.text_input_cursor :]
            )
            frame_w = max(20, self.width - 8)
            if len(display) > frame_w:
                display = "..." + display[-(frame_w - 3) :]
            lines.append(Text("Instruction> " + display, style="bold"))
            lines.append(Text("[Enter] regenerate  [Esc] back", style="dim italic"))
        else:
            lines.append(Text(KEY_HELP, style="dim"))
        return Panel(Group(*lines), border_style="dim", padding=(0, 1))

    # ===== CONFIRM SCREEN =====

    def render_confirm_discard(self, snapshot: SessionSnapshot) -> RenderableType:
        body = Group(
            Text("DISCARD CHANGES?", style="warning"),
            Text(""),
            Text(f"You have accepted {snapshot.accepted_count} edit(s)."),
            Text("Cancelling leaves the document unchanged."),
            Text(""),
            Text("[y] discard & close   [any other key] keep reviewing", style="dim italic"),
        )
        return Align.center(
            Panel(body, border_style="warning", padding=(1, 4), width=min(self.width, 64)),
            vertical="middle",
            height=self.height,
        )

    # ===== MAIN SCREEN LAYOUT =====

    def render_screen(
        self,
        state: ReviewViewState,
        snapshot: SessionSnapshot,
        completion: str = "",
    ) -> RenderableType:
        if state.mode == ReviewMode.CONFIRM_DISCARD:
            return self.render_confirm_discard(snapshot)

        editable = editable_chunks(snapshot.chunks)
        current_id = editable[state.cursor].id if 0 <= state.cursor < len(editable) else None

        main_layout = Layout()
        main_layout.split_column(
            Layout(name="header", size=3),
            Layout(name="panes", ratio=1),
            Layout(name="chunks", size=CHUNK_LIST_ROWS + 2),
            Layout(name="footer", size=4),
        )

        panes = Layout()
        panes.split_row(Layout(name="original", ratio=1), Layout(name="preview", ratio=1))

        panes["original"].update(
            Panel(
                self.render_original(snapshot.chunks, snapshot.baseline_text, current_id),
                title="Original",
                border_style="inkwell.accent2",
            )
        )
        if snapshot.phase is ReviewPhase.LOADING:
            preview: RenderableType = self.render_loading(completion)
        else:
            preview = self.render_preview(snapshot.chunks, current_id)
        panes["preview"].update(
            Panel(preview, title="Suggestion", border_style="inkwell.accent2")
        )

        main_layout["header"].update(self.render_header(state, snapshot))
        main_layout["panes"].update(panes)
        main_layout["chunks"].update(
            Panel(
                self.render_chunk_list(snapshot.chunks, state.cursor),
                title="Edits",
                border_style="dim",
            )
        )
        main_layout["footer"].update(self.render_footer(state, snapshot))

        return Panel(
            main_layout,
            border_style="inkwell.accent",
            width=self.width,
            height=self.height,
        )


def create_renderer_from_console() -> ReviewRenderer:
    from ...inkwell_io.console import console

    width = _clamp(console.size.width, MIN_W, MAX_W)
    height = _clamp(console.size.height, MIN_H, MAX_H)
    return ReviewRenderer(width, height)
