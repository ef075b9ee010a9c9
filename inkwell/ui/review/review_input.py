# inkwell/ui/review/review_input.py
# Input handling for the interactive review screen

from __future__ import annotations

from readchar import key

from ...core.session import ReviewSession
from .review_state import (
    ReviewMode,
    ReviewStateManager,
    ReviewViewState,
    editable_chunks,
)

QUIT_KEYS = (key.ESC, "q", key.CTRL_C)


class ReviewInputHandler:

    def __init__(
        self,
        session: ReviewSession,
        state: ReviewViewState,
        state_manager: ReviewStateManager,
        confirm_discard: bool = True,
    ):
        self.session = session
        self.state = state
        self.manager = state_manager
        self.confirm_discard = confirm_discard

    # returns False once the screen should close
    def handle_key(self, k: str) -> bool:
        self.manager.set_status(None)
        if self.state.mode == ReviewMode.TEXT_INPUT:
            self._handle_text_input_key(k)
        elif self.state.mode == ReviewMode.CONFIRM_DISCARD:
            self._handle_confirm_key(k)
        else:
            self._handle_browse_key(k)
        return not self.state.is_complete

    def _handle_browse_key(self, k: str) -> None:
        count = len(editable_chunks(self.session.chunks))

        if k in (key.UP, "k"):
            self.manager.move_up(count)
        elif k in (key.DOWN, "j"):
            self.manager.move_down(count)
        elif k == "a":
            self._decide(self.session.accept_chunk, "Only pending edits can be accepted")
        elif k == "r":
            self._decide(self.session.reject_chunk, "Only pending edits can be rejected")
        elif k == "u":
            self._decide(self.session.revert_chunk, "Only accepted edits can be reverted")
        elif k == "A":
            changed = self.session.accept_all()
            self.manager.set_status(f"Accepted {changed} edit(s)")
        elif k == "g":
            self._regenerate(self.state.action)
        elif k == "i":
            self.manager.enter_text_input()
        elif k == "z":
            if self.session.undo_regeneration():
                self.manager.clamp_cursor(len(editable_chunks(self.session.chunks)))
                self.manager.set_status("Restored previous suggestion")
            else:
                self.manager.set_status("Nothing to undo")
        elif k in (key.ENTER, "\r", "\n"):
            self.manager.finish(self.session.finish())
        elif k in QUIT_KEYS:
            self._request_cancel()

    def _handle_text_input_key(self, k: str) -> None:
        if k == key.ESC:
            self.manager.return_to_browse()
        elif k in (key.ENTER, "\r", "\n"):
            instruction = self.manager.take_text_input()
            if instruction:
                self._regenerate(instruction)
        elif k == key.BACKSPACE:
            self.manager.delete_before_cursor()
        elif k == key.LEFT:
            self.manager.move_cursor_left()
        elif k == key.RIGHT:
            self.manager.move_cursor_right()
        elif len(k) == 1 and k.isprintable():
            self.manager.insert_char(k)

    def _handle_confirm_key(self, k: str) -> None:
        if k in ("y", "Y"):
            self.session.cancel_all()
            self.manager.cancel()
        else:
            self.manager.return_to_browse()

    def _decide(self, operation, refusal: str) -> None:
        chunk = self.manager.current_chunk(self.session.chunks)
        if chunk is None:
            return
        if not operation(chunk.id):
            self.manager.set_status(refusal)

    def _regenerate(self, action: str) -> None:
        self.state.action = action
        if self.session.regenerate(action) is not None:
            self.manager.clamp_cursor(0)

    def _request_cancel(self) -> None:
        if self.confirm_discard and self.session.needs_discard_confirmation:
            self.manager.enter_confirm_discard()
            return
        self.session.cancel_all()
        self.manager.cancel()
