# inkwell/ui/review/review_display.py
# Interactive split-view review screen driving a ReviewSession from the keyboard

from __future__ import annotations

import asyncio
from typing import Callable

from readchar import readkey
from rich.console import RenderableType
from rich.live import Live

from ...core.merge import MergeResult
from ...core.session import ReviewSession
from ...inkwell_io.console import get_console
from .review_input import ReviewInputHandler
from .review_renderer import ReviewRenderer, create_renderer_from_console
from .review_state import ReviewOutcome, ReviewStateManager, ReviewViewState

# seconds between redraws while a suggestion streams in
REFRESH_INTERVAL = 0.1

KeyReader = Callable[[], str]


# * Orchestrates the interactive review: state, rendering & keyboard input
class InteractiveReviewScreen:
    def __init__(
        self,
        session: ReviewSession,
        filename: str = "document.txt",
        action: str = "rewrite",
        confirm_discard: bool = True,
        renderer: ReviewRenderer | None = None,
        completion_source: Callable[[], str] | None = None,
        key_reader: KeyReader = readkey,
    ):
        self._session = session
        self._state = ReviewViewState(filename=filename, action=action)
        self._state_manager = ReviewStateManager(self._state)
        self._renderer = renderer or create_renderer_from_console()
        self._input_handler = ReviewInputHandler(
            session, self._state, self._state_manager, confirm_discard
        )
        self._completion_source = completion_source
        self._key_reader = key_reader

    @property
    def state(self) -> ReviewViewState:
        return self._state

    @property
    def input_handler(self) -> ReviewInputHandler:
        return self._input_handler

    @property
    def is_complete(self) -> bool:
        return self._state.is_complete

    def render_screen(self) -> RenderableType:
        completion = self._completion_source() if self._completion_source else ""
        return self._renderer.render_screen(
            self._state, self._session.snapshot(), completion
        )

    def handle_key(self, k: str) -> bool:
        return self._input_handler.handle_key(k)

    def get_result(self) -> MergeResult | None:
        if self._state.outcome is ReviewOutcome.FINISHED:
            return self._state.result
        return None

    # redraw on a timer so streamed text & a finished suggestion show w/o a key press
    async def _refresh_loop(self, live: Live) -> None:
        while True:
            await asyncio.sleep(REFRESH_INTERVAL)
            live.update(self.render_screen(), refresh=True)

    # * Run until the user finishes or cancels; returns the merge result or None
    async def run(self) -> MergeResult | None:
        with Live(
            self.render_screen(), console=get_console(), screen=True, auto_refresh=False
        ) as live:
            refresher = asyncio.create_task(self._refresh_loop(live))
            try:
                while not self.is_complete:
                    k = await asyncio.to_thread(self._key_reader)
                    should_continue = self.handle_key(k)
                    live.update(self.render_screen(), refresh=True)
                    if not should_continue:
                        break
            finally:
                refresher.cancel()
                # leaving the screen any other way discards the review
                if self._session.active:
                    self._session.cancel_all()

        return self.get_result()


# * Open an interactive review for an already-entered session
async def run_review_screen(
    session: ReviewSession,
    filename: str = "document.txt",
    action: str = "rewrite",
    confirm_discard: bool = True,
    completion_source: Callable[[], str] | None = None,
) -> MergeResult | None:
    screen = InteractiveReviewScreen(
        session,
        filename=filename,
        action=action,
        confirm_discard=confirm_discard,
        completion_source=completion_source,
    )
    return await screen.run()
