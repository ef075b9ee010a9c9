# inkwell/core/session.py
# Review session state machine: owns chunks, baseline & undo stack for one AI split-view review

from __future__ import annotations

import asyncio
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable

from ..ai.types import GenerateResult, GenerationCoordinator, failure_reason
from .constants import (
    ChunkStatus,
    DiffGranularity,
    EditChunk,
    SavePoint,
    SelectionRange,
)
from .debug import debug_error
from .differ import ChunkIdAllocator, compute_diff_chunks
from .exceptions import SelectionError
from .merge import (
    MergeResult,
    count_accepted,
    count_pending,
    decide_all,
    has_editable_chunks,
    resolve,
)
from .verbose import vlog_session

# type alias for the generation-failure notification channel
ErrorCallback = Callable[[str], None]


# * Lifecycle phase: CLOSED -> LOADING -> REVIEWING -> CLOSED (REVIEWING -> LOADING on regenerate)
class ReviewPhase(Enum):
    CLOSED = "closed"
    LOADING = "loading"
    REVIEWING = "reviewing"


# * Mutable state owned exclusively by one ReviewSession
@dataclass
class SessionState:
    active: bool = False
    document_text: str = ""
    selection_range: SelectionRange | None = None
    baseline_text: str = ""
    chunks: list[EditChunk] = field(default_factory=list)
    save_points: list[SavePoint] = field(default_factory=list)
    is_loading: bool = False
    action: str | None = None
    last_error: str | None = None


# * Read-only view of a session for renderers & callers
@dataclass(frozen=True, slots=True)
class SessionSnapshot:
    phase: ReviewPhase
    baseline_text: str
    chunks: tuple[EditChunk, ...]
    selection_range: SelectionRange | None
    save_point_count: int
    accepted_count: int
    pending_count: int
    action: str | None
    last_error: str | None

    @property
    def preview_text(self) -> str:
        return resolve(self.chunks) if self.chunks else self.baseline_text


class ReviewSession:
    """Interactive accept/reject review of one AI suggestion for a selection.

    All mutations are synchronous. The only suspension point is the call
    into the generation coordinator, which runs as an asyncio task; every
    request carries a sequence number and its result is applied only if
    that number is still current when it arrives. enter, regenerate,
    undo_regeneration, finish and cancel_all all advance the number, so a
    superseded request can never overwrite newer state.

    Invalid operations (unknown chunk ids, wrong status, empty undo stack,
    finishing with nothing open) return False/None instead of raising.
    """

    def __init__(
        self,
        coordinator: GenerationCoordinator,
        *,
        on_error: ErrorCallback | None = None,
        granularity: DiffGranularity = DiffGranularity.CHAR,
        id_source: ChunkIdAllocator | None = None,
    ):
        self._coordinator = coordinator
        self._on_error = on_error
        self._granularity = granularity
        self._ids = id_source if id_source is not None else ChunkIdAllocator()
        self._state = SessionState()
        self._generation_seq = 0
        self._task: asyncio.Task[None] | None = None

    # ===== READ-ONLY STATE =====

    @property
    def state(self) -> SessionState:
        return self._state

    @property
    def phase(self) -> ReviewPhase:
        if not self._state.active:
            return ReviewPhase.CLOSED
        if self._state.is_loading:
            return ReviewPhase.LOADING
        return ReviewPhase.REVIEWING

    @property
    def active(self) -> bool:
        return self._state.active

    @property
    def is_loading(self) -> bool:
        return self._state.is_loading

    @property
    def baseline_text(self) -> str:
        return self._state.baseline_text

    @property
    def chunks(self) -> tuple[EditChunk, ...]:
        return tuple(self._state.chunks)

    @property
    def selection_range(self) -> SelectionRange | None:
        return self._state.selection_range

    @property
    def document_text(self) -> str:
        return self._state.document_text

    @property
    def save_points(self) -> tuple[SavePoint, ...]:
        return tuple(self._state.save_points)

    @property
    def last_error(self) -> str | None:
        return self._state.last_error

    @property
    def accepted_count(self) -> int:
        return count_accepted(self._state.chunks)

    @property
    def pending_count(self) -> int:
        return count_pending(self._state.chunks)

    @property
    def has_editable_chunks(self) -> bool:
        return has_editable_chunks(self._state.chunks)

    # cancelling w/ accepted edits should be confirmed by the caller
    @property
    def needs_discard_confirmation(self) -> bool:
        return self.accepted_count > 0

    @property
    def preview_text(self) -> str:
        return self._merged_text()

    def snapshot(self) -> SessionSnapshot:
        return SessionSnapshot(
            phase=self.phase,
            baseline_text=self._state.baseline_text,
            chunks=tuple(self._state.chunks),
            selection_range=self._state.selection_range,
            save_point_count=len(self._state.save_points),
            accepted_count=self.accepted_count,
            pending_count=self.pending_count,
            action=self._state.action,
            last_error=self._state.last_error,
        )

    # ===== SESSION LIFECYCLE =====

    def enter(
        self,
        selected_text: str,
        selection_range: SelectionRange,
        action: str,
        document_text: str,
    ) -> asyncio.Task[None] | None:
        if self._state.active:
            vlog_session("Enter ignored", "A review session is already active")
            return None
        if not selected_text:
            vlog_session("Enter ignored", "Selection is empty")
            return None
        try:
            selection_range.validate_against(document_text)
        except SelectionError as e:
            vlog_session("Enter ignored", str(e))
            return None

        # fail before touching state if there is no loop to run generation on
        asyncio.get_running_loop()

        self._state = SessionState(
            active=True,
            document_text=document_text,
            selection_range=selection_range,
            baseline_text=selected_text,
        )
        vlog_session(
            f"Opened review for '{action}'",
            f"Range {selection_range.start}-{selection_range.end}, "
            f"{len(selected_text):,} chars selected",
        )
        return self._start_generation(action, selected_text)

    def finish(self) -> MergeResult | None:
        if not self._state.active or self._state.selection_range is None:
            return None

        self._supersede()
        result = MergeResult(
            text=self._merged_text(),
            selection_range=self._state.selection_range,
            document_text=self._state.document_text,
            accepted_count=self.accepted_count,
        )
        vlog_session(
            "Finished review",
            f"{result.accepted_count} accepted edit(s), {len(result.text):,} chars merged",
        )
        self._reset()
        return result

    def cancel_all(self) -> None:
        if self._state.active:
            vlog_session(
                "Cancelled review", f"Discarded {self.accepted_count} accepted edit(s)"
            )
        self._supersede()
        self._reset()

    # ===== CHUNK DECISIONS =====

    def accept_chunk(self, chunk_id: str) -> bool:
        return self._transition(chunk_id, ChunkStatus.PENDING, ChunkStatus.ACCEPTED)

    def reject_chunk(self, chunk_id: str) -> bool:
        return self._transition(chunk_id, ChunkStatus.PENDING, ChunkStatus.REJECTED)

    def revert_chunk(self, chunk_id: str) -> bool:
        return self._transition(chunk_id, ChunkStatus.ACCEPTED, ChunkStatus.PENDING)

    def accept_all(self) -> int:
        before = self._state.chunks
        self._state.chunks = decide_all(before, ChunkStatus.ACCEPTED)
        return sum(1 for old, new in zip(before, self._state.chunks) if old is not new)

    def _transition(
        self, chunk_id: str, expected: ChunkStatus, target: ChunkStatus
    ) -> bool:
        for i, chunk in enumerate(self._state.chunks):
            if chunk.id != chunk_id:
                continue
            if not chunk.is_edit or chunk.status is not expected:
                return False
            self._state.chunks[i] = chunk.with_status(target)
            return True
        return False

    # ===== REGENERATION & UNDO =====

    def regenerate(self, action: str) -> asyncio.Task[None] | None:
        if not self._state.active:
            return None

        if self._state.is_loading:
            # nothing to merge yet: restart against the same baseline
            vlog_session(f"Regenerate '{action}' superseded the in-flight request")
            return self._start_generation(action, self._state.baseline_text)

        chunks = tuple(self._state.chunks)
        self._state.save_points.append(SavePoint(self._state.baseline_text, chunks))
        merged = self._merged_text()
        self._state.baseline_text = merged
        self._state.chunks = []
        vlog_session(
            f"Regenerating with '{action}'",
            f"Save point #{len(self._state.save_points)}, new baseline {len(merged):,} chars",
        )
        return self._start_generation(action, merged)

    def undo_regeneration(self) -> bool:
        if not self._state.save_points:
            return False

        point = self._state.save_points.pop()
        self._supersede()
        self._state.is_loading = False
        self._state.last_error = None
        self._state.baseline_text = point.baseline_text
        self._state.chunks = list(point.chunks)
        vlog_session(
            "Undid regeneration", f"{len(self._state.save_points)} save point(s) left"
        )
        return True

    # ===== GENERATION =====

    async def wait(self) -> None:
        # wait for the current request (if any) to settle
        task = self._task
        if task is not None and not task.done():
            await asyncio.shield(task)

    def _start_generation(self, action: str, text: str) -> asyncio.Task[None]:
        loop = asyncio.get_running_loop()
        self._supersede()
        seq = self._generation_seq
        self._state.is_loading = True
        self._state.last_error = None
        self._state.action = action
        self._task = loop.create_task(self._run_generation(seq, action, text))
        return self._task

    async def _run_generation(self, seq: int, action: str, text: str) -> None:
        try:
            result = await self._coordinator.generate(action, text)
        except asyncio.CancelledError:
            if self._is_current(seq):
                self._state.is_loading = False
            raise
        except Exception as e:
            debug_error(e, "Generation coordinator raised")
            result = GenerateResult.failure(str(e) or type(e).__name__)
        self._apply_result(seq, result)

    def _apply_result(self, seq: int, result: GenerateResult) -> bool:
        if not self._is_current(seq):
            vlog_session(
                "Discarded stale generation result",
                f"Request #{seq}, current #{self._generation_seq}",
            )
            return False

        self._state.is_loading = False
        reason = failure_reason(result)
        if reason is not None:
            self._fail(reason)
            return False

        self._state.chunks = compute_diff_chunks(
            self._state.baseline_text,
            result.text,
            id_source=self._ids,
            granularity=self._granularity,
        )
        vlog_session(
            "Suggestion ready for review",
            f"{len(self._state.chunks)} chunk(s), {self.pending_count} pending edit(s)",
        )
        return True

    def _fail(self, message: str) -> None:
        self._state.last_error = message
        vlog_session("[red]Generation failed[/]", message)
        if self._on_error is not None:
            self._on_error(message)

    def _is_current(self, seq: int) -> bool:
        return self._state.active and seq == self._generation_seq

    # advance the sequence so any in-flight result is dropped; cancel is best-effort
    def _supersede(self) -> None:
        was_loading = self._state.is_loading
        self._generation_seq += 1
        if not was_loading:
            return
        try:
            self._coordinator.cancel()
        except Exception as e:
            debug_error(e, "Coordinator cancel failed")

    def _merged_text(self) -> str:
        if not self._state.chunks:
            return self._state.baseline_text
        return resolve(self._state.chunks)

    def _reset(self) -> None:
        self._state = SessionState()
        self._task = None
