# inkwell/core/merge.py
# Merge resolver: rebuild text from edit chunks & their review decisions (pure, no I/O)

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Sequence

from .constants import ChunkKind, ChunkStatus, EditChunk, SelectionRange


# * Text contributed by one chunk given its kind & status
def chunk_contribution(chunk: EditChunk) -> str:
    if chunk.kind is ChunkKind.EQUAL:
        return chunk.text
    if chunk.kind is ChunkKind.INSERTION:
        # only accepted insertions add text
        return chunk.text if chunk.status is ChunkStatus.ACCEPTED else ""
    if chunk.kind is ChunkKind.DELETION:
        # accepted deletion removes text; pending/rejected keeps the original
        return "" if chunk.status is ChunkStatus.ACCEPTED else chunk.text
    raise ValueError(f"Unknown chunk kind: {chunk.kind}")


# * Resolve chunks into the merged text (total: empty input -> "")
def resolve(chunks: Iterable[EditChunk]) -> str:
    return "".join(chunk_contribution(chunk) for chunk in chunks)


def _count_status(chunks: Iterable[EditChunk], status: ChunkStatus) -> int:
    return sum(1 for c in chunks if c.is_edit and c.status is status)


def count_accepted(chunks: Iterable[EditChunk]) -> int:
    return _count_status(chunks, ChunkStatus.ACCEPTED)


def count_pending(chunks: Iterable[EditChunk]) -> int:
    return _count_status(chunks, ChunkStatus.PENDING)


def count_rejected(chunks: Iterable[EditChunk]) -> int:
    return _count_status(chunks, ChunkStatus.REJECTED)


def has_editable_chunks(chunks: Iterable[EditChunk]) -> bool:
    return any(c.is_edit for c in chunks)


# * Replace the selected span of a document w/ merged text
def splice(document_text: str, selection: SelectionRange, replacement: str) -> str:
    selection.validate_against(document_text)
    return document_text[: selection.start] + replacement + document_text[selection.end :]


# * Final output of a review session: replacement text & where it goes
@dataclass(frozen=True, slots=True)
class MergeResult:
    text: str
    selection_range: SelectionRange
    document_text: str
    accepted_count: int = 0

    def spliced_document(self) -> str:
        return splice(self.document_text, self.selection_range, self.text)

    @property
    def changed(self) -> bool:
        return self.text != self.selection_range.extract(self.document_text)


# * Accept or reject every edit chunk at once; chunks that cannot move are kept as-is
def decide_all(chunks: Sequence[EditChunk], status: ChunkStatus) -> list[EditChunk]:
    return [
        chunk.with_status(status) if chunk.can_transition(status) else chunk
        for chunk in chunks
    ]
