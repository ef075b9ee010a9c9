# inkwell/core/constants.py
# Constants, enums & value types for the diff-review data model

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum

from .exceptions import ChunkTransitionError, SelectionError


# * Paragraph boundary used for re-segmenting edit chunks
PARAGRAPH_BREAK = "\n\n"

# * Prefix for sequential chunk identifiers
CHUNK_ID_PREFIX = "chunk-"


# * Kind of span in a computed difference
class ChunkKind(Enum):
    EQUAL = "equal"
    INSERTION = "insertion"
    DELETION = "deletion"


# * Per-chunk review decision
class ChunkStatus(Enum):
    ACCEPTED = "accepted"
    PENDING = "pending"
    REJECTED = "rejected"


# * Token size used by the differ
class DiffGranularity(Enum):
    CHAR = "char"
    WORD = "word"


# allowed (from, to) status transitions for edit chunks
_ALLOWED_TRANSITIONS: frozenset[tuple[ChunkStatus, ChunkStatus]] = frozenset(
    {
        (ChunkStatus.PENDING, ChunkStatus.ACCEPTED),
        (ChunkStatus.PENDING, ChunkStatus.REJECTED),
        (ChunkStatus.ACCEPTED, ChunkStatus.PENDING),
    }
)


# * One contiguous span of a diff w/ its review decision
@dataclass(frozen=True, slots=True)
class EditChunk:
    id: str
    kind: ChunkKind
    text: str
    status: ChunkStatus

    @classmethod
    def equal(cls, chunk_id: str, text: str) -> "EditChunk":
        return cls(chunk_id, ChunkKind.EQUAL, text, ChunkStatus.ACCEPTED)

    @classmethod
    def insertion(
        cls, chunk_id: str, text: str, status: ChunkStatus = ChunkStatus.PENDING
    ) -> "EditChunk":
        return cls(chunk_id, ChunkKind.INSERTION, text, status)

    @classmethod
    def deletion(
        cls, chunk_id: str, text: str, status: ChunkStatus = ChunkStatus.PENDING
    ) -> "EditChunk":
        return cls(chunk_id, ChunkKind.DELETION, text, status)

    @property
    def is_edit(self) -> bool:
        return self.kind is not ChunkKind.EQUAL

    def can_transition(self, status: ChunkStatus) -> bool:
        if not self.is_edit:
            return False
        return (self.status, status) in _ALLOWED_TRANSITIONS

    # return a copy w/ the new status; equal chunks & illegal moves are rejected
    def with_status(self, status: ChunkStatus) -> "EditChunk":
        if not self.can_transition(status):
            raise ChunkTransitionError(
                f"Cannot move {self.kind.value} chunk from "
                f"{self.status.value} to {status.value}",
                chunk_id=self.id,
            )
        return replace(self, status=status)

    def to_dict(self) -> dict[str, str]:
        return {
            "id": self.id,
            "kind": self.kind.value,
            "text": self.text,
            "status": self.status.value,
        }


# * Snapshot pushed before a regeneration so it can be undone
@dataclass(frozen=True, slots=True)
class SavePoint:
    baseline_text: str
    chunks: tuple[EditChunk, ...]


# * Character offsets of the reviewed span inside the full document
@dataclass(frozen=True, slots=True)
class SelectionRange:
    start: int
    end: int

    def __post_init__(self) -> None:
        if self.start < 0 or self.end < self.start:
            raise SelectionError(
                f"Invalid selection range {self.start}-{self.end}",
                start=self.start,
                end=self.end,
            )

    @property
    def length(self) -> int:
        return self.end - self.start

    @property
    def is_empty(self) -> bool:
        return self.start == self.end

    def validate_against(self, text: str) -> None:
        if self.end > len(text):
            raise SelectionError(
                f"Selection {self.start}-{self.end} exceeds document length {len(text)}",
                start=self.start,
                end=self.end,
            )

    def extract(self, text: str) -> str:
        self.validate_against(text)
        return text[self.start : self.end]
