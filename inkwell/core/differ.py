# inkwell/core/differ.py
# Text differ: semantic diff between two strings, re-segmented into paragraph-sized edit chunks

from __future__ import annotations

import re
import threading
from typing import Iterable

from diff_match_patch import diff_match_patch

from .constants import (
    CHUNK_ID_PREFIX,
    PARAGRAPH_BREAK,
    ChunkKind,
    ChunkStatus,
    DiffGranularity,
    EditChunk,
)
from .debug import debug_print, is_debug_enabled

# diff-match-patch operation codes
DIFF_DELETE = -1
DIFF_EQUAL = 0
DIFF_INSERT = 1

# word tokens: runs of non-whitespace or runs of whitespace
_WORD_TOKEN_RE = re.compile(r"\S+|\s+")

# first code point used when encoding word tokens (above ASCII)
_TOKEN_CODE_START = 0x100


# * Monotonic chunk-id source; a shared instance keeps ids unique across diff runs
class ChunkIdAllocator:
    def __init__(self, start: int = 0):
        self._next = start
        self._lock = threading.Lock()

    def next_id(self) -> str:
        with self._lock:
            value = self._next
            self._next += 1
        return f"{CHUNK_ID_PREFIX}{value}"

    def peek(self) -> str:
        return f"{CHUNK_ID_PREFIX}{self._next}"


_default_allocator = ChunkIdAllocator()


def get_default_allocator() -> ChunkIdAllocator:
    return _default_allocator


def _new_engine() -> diff_match_patch:
    dmp = diff_match_patch()
    # no time limit: output must depend only on the inputs
    dmp.Diff_Timeout = 0
    return dmp


# * Split text on paragraph breaks; each break travels w/ the paragraph that follows it
def split_by_paragraphs(text: str) -> list[str]:
    if PARAGRAPH_BREAK not in text:
        return [text]

    parts: list[str] = []
    remaining = text
    width = len(PARAGRAPH_BREAK)

    while remaining:
        idx = remaining.find(PARAGRAPH_BREAK)
        if idx == -1:
            parts.append(remaining)
            break
        if idx > 0:
            parts.append(remaining[:idx])
        remaining = remaining[idx:]
        next_idx = remaining.find(PARAGRAPH_BREAK, width)
        if next_idx == -1:
            parts.append(remaining)
            break
        parts.append(remaining[:next_idx])
        remaining = remaining[next_idx:]

    return [part for part in parts if part]


def _char_diff(original: str, suggestion: str) -> list[tuple[int, str]]:
    dmp = _new_engine()
    diffs = dmp.diff_main(original, suggestion)
    dmp.diff_cleanupSemantic(diffs)
    return diffs


# * Word-level diff: encode each token as one code point, diff, then decode
def _word_diff(original: str, suggestion: str) -> list[tuple[int, str]]:
    token_to_char: dict[str, str] = {}
    char_to_token: dict[str, str] = {}
    next_code = _TOKEN_CODE_START

    def encode(text: str) -> str:
        nonlocal next_code
        chars = []
        for token in _WORD_TOKEN_RE.findall(text):
            if token not in token_to_char:
                token_to_char[token] = chr(next_code)
                char_to_token[chr(next_code)] = token
                next_code += 1
            chars.append(token_to_char[token])
        return "".join(chars)

    encoded = _char_diff(encode(original), encode(suggestion))
    return [(op, "".join(char_to_token[c] for c in data)) for op, data in encoded]


def _raw_diff(
    original: str, suggestion: str, granularity: DiffGranularity
) -> list[tuple[int, str]]:
    if granularity is DiffGranularity.WORD:
        return _word_diff(original, suggestion)
    return _char_diff(original, suggestion)


def _kind_for(op: int) -> ChunkKind:
    if op == DIFF_EQUAL:
        return ChunkKind.EQUAL
    if op == DIFF_INSERT:
        return ChunkKind.INSERTION
    if op == DIFF_DELETE:
        return ChunkKind.DELETION
    raise ValueError(f"Unknown diff operation: {op}")


# * Build chunks from raw (op, text) pairs, splitting edits by paragraph
def build_chunks(
    diffs: Iterable[tuple[int, str]], id_source: ChunkIdAllocator | None = None
) -> list[EditChunk]:
    allocator = id_source if id_source is not None else _default_allocator
    chunks: list[EditChunk] = []

    for op, text in diffs:
        kind = _kind_for(op)
        if kind is ChunkKind.EQUAL:
            chunks.append(EditChunk.equal(allocator.next_id(), text))
            continue
        for part in split_by_paragraphs(text):
            chunks.append(
                EditChunk(allocator.next_id(), kind, part, ChunkStatus.PENDING)
            )

    return chunks


# * Compute paragraph-aligned edit chunks between original & suggestion
def compute_diff_chunks(
    original: str,
    suggestion: str,
    *,
    id_source: ChunkIdAllocator | None = None,
    granularity: DiffGranularity = DiffGranularity.CHAR,
) -> list[EditChunk]:
    diffs = _raw_diff(original, suggestion, granularity)
    chunks = build_chunks(diffs, id_source)

    if is_debug_enabled():
        edits = sum(1 for c in chunks if c.is_edit)
        debug_print(
            f"{len(chunks)} chunks ({edits} editable) from "
            f"{len(original)} -> {len(suggestion)} chars [{granularity.value}]",
            "DIFF",
        )
    return chunks
