# inkwell/ui/review/review_state.py
# View state for the interactive review screen (cursor, modes, text input)

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Sequence

from ...core.constants import EditChunk
from ...core.merge import MergeResult


# UI state enum for mode transitions
class ReviewMode(Enum):
    BROWSE = "browse"
    TEXT_INPUT = "text_input"
    CONFIRM_DISCARD = "confirm_discard"


# how the screen was closed
class ReviewOutcome(Enum):
    FINISHED = "finished"
    CANCELLED = "cancelled"


@dataclass
class ReviewViewState:

    filename: str = "document.txt"
    action: str = "rewrite"

    # index into the editable chunks (insertions & deletions only)
    cursor: int = 0

    mode: ReviewMode = ReviewMode.BROWSE

    # instruction input state
    text_input_buffer: str = ""
    text_input_cursor: int = 0

    # transient one-line message (e.g. "Nothing to undo")
    status_message: str | None = None

    outcome: ReviewOutcome | None = None
    result: MergeResult | None = None

    @property
    def is_complete(self) -> bool:
        return self.outcome is not None


# * Editable chunks in display order
def editable_chunks(chunks: Sequence[EditChunk]) -> list[EditChunk]:
    return [c for c in chunks if c.is_edit]


class ReviewStateManager:

    def __init__(self, state: ReviewViewState):
        self.state = state

    # ===== CURSOR =====

    def move_up(self, count: int) -> None:
        if count:
            self.state.cursor = (self.state.cursor - 1) % count

    def move_down(self, count: int) -> None:
        if count:
            self.state.cursor = (self.state.cursor + 1) % count

    # keep the cursor valid after chunks change (regenerate / undo)
    def clamp_cursor(self, count: int) -> None:
        if count == 0:
            self.state.cursor = 0
        elif self.state.cursor >= count:
            self.state.cursor = count - 1

    def current_chunk(self, chunks: Sequence[EditChunk]) -> EditChunk | None:
        editable = editable_chunks(chunks)
        self.clamp_cursor(len(editable))
        if not editable:
            return None
        return editable[self.state.cursor]

    # ===== MODE TRANSITIONS =====

    def enter_text_input(self) -> None:
        self.state.mode = ReviewMode.TEXT_INPUT
        self._reset_text_input()

    def enter_confirm_discard(self) -> None:
        self.state.mode = ReviewMode.CONFIRM_DISCARD

    def return_to_browse(self) -> None:
        self.state.mode = ReviewMode.BROWSE
        self._reset_text_input()

    def take_text_input(self) -> str:
        text = self.state.text_input_buffer.strip()
        self.return_to_browse()
        return text

    # ===== TEXT INPUT OPERATIONS =====

    def insert_char(self, char: str) -> None:
        self.state.text_input_buffer = (
            self.state.text_input_buffer[: self.state.text_input_cursor]
            + char
            + self.state.text_input_buffer[self.state.text_input_cursor :]
        )
        self.state.text_input_cursor += len(char)

    def delete_before_cursor(self) -> None:
        if self.state.text_input_cursor > 0:
            self.state.text_input_buffer = (
                self.state.text_input_buffer[: self.state.text_input_cursor - 1]
                + self.state.text_input_buffer[self.state.text_input_cursor :]
            )
            self.state.text_input_cursor -= 1

    def move_cursor_left(self) -> None:
        if self.state.text_input_cursor > 0:
            self.state.text_input_cursor -= 1

    def move_cursor_right(self) -> None:
        if self.state.text_input_cursor < len(self.state.text_input_buffer):
            self.state.text_input_cursor += 1

    def _reset_text_input(self) -> None:
        self.state.text_input_buffer = ""
        self.state.text_input_cursor = 0

    # ===== STATUS & COMPLETION =====

    def set_status(self, message: str | None) -> None:
        self.state.status_message = message

    def finish(self, result: MergeResult | None) -> None:
        self.state.result = result
        self.state.outcome = ReviewOutcome.FINISHED

    def cancel(self) -> None:
        self.state.result = None
        self.state.outcome = ReviewOutcome.CANCELLED
