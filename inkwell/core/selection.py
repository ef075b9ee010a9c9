# inkwell/core/selection.py
# Selection helpers: turn character offsets, search text or paragraph numbers into a SelectionRange

from __future__ import annotations

import re

from .constants import PARAGRAPH_BREAK, SelectionRange
from .exceptions import SelectionError

_PARAGRAPH_RANGE_RE = re.compile(r"^\s*(\d+)\s*(?:-\s*(\d+)\s*)?$")


# * Explicit character offsets, validated against the document
def select_offsets(document_text: str, start: int, end: int | None = None) -> SelectionRange:
    selection = SelectionRange(start, len(document_text) if end is None else end)
    selection.validate_against(document_text)
    return selection


# * Nth occurrence (1-based) of an exact search string
def select_text(document_text: str, needle: str, occurrence: int = 1) -> SelectionRange:
    if not needle:
        raise SelectionError("Search text must not be empty")
    if occurrence < 1:
        raise SelectionError(f"Occurrence must be >= 1, got {occurrence}")

    index = -1
    for _ in range(occurrence):
        index = document_text.find(needle, index + 1)
        if index == -1:
            raise SelectionError(
                f"Text not found in document (occurrence {occurrence}): {needle[:40]!r}"
            )
    return SelectionRange(index, index + len(needle))


# * Character spans of each blank-line separated paragraph
def paragraph_spans(document_text: str) -> list[tuple[int, int]]:
    spans: list[tuple[int, int]] = []
    pos = 0
    for block in document_text.split(PARAGRAPH_BREAK):
        start, end = pos, pos + len(block)
        pos = end + len(PARAGRAPH_BREAK)
        # blocks of pure newlines come from runs of 3+ newlines
        stripped = block.strip("\n")
        if not stripped.strip():
            continue
        lead = len(block) - len(block.lstrip("\n"))
        trail = len(block) - len(block.rstrip("\n"))
        spans.append((start + lead, end - trail))
    return spans


# * Paragraph range "A" or "A-B" (1-based, inclusive)
def select_paragraphs(document_text: str, paragraph_range: str) -> SelectionRange:
    match = _PARAGRAPH_RANGE_RE.match(paragraph_range)
    if not match:
        raise SelectionError(f"Invalid paragraph range '{paragraph_range}' (expected N or A-B)")

    first = int(match.group(1))
    last = int(match.group(2) or first)
    spans = paragraph_spans(document_text)

    if first < 1 or last < first:
        raise SelectionError(f"Invalid paragraph range '{paragraph_range}'")
    if last > len(spans):
        raise SelectionError(
            f"Paragraph {last} out of range (document has {len(spans)} paragraph(s))"
        )
    return SelectionRange(spans[first - 1][0], spans[last - 1][1])
