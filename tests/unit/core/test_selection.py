# tests/unit/core/test_selection.py
# Unit tests for offset, search & paragraph selection helpers

import pytest

from inkwell.core.exceptions import SelectionError
from inkwell.core.selection import (
    paragraph_spans,
    select_offsets,
    select_paragraphs,
    select_text,
)


# * Test explicit offsets
class TestSelectOffsets:

    # * Verify missing end selects to the end of the document
    def test_open_end(self):
        selection = select_offsets("abcdef", 2)
        assert (selection.start, selection.end) == (2, 6)

    # * Verify out-of-range end is rejected
    def test_out_of_range(self):
        with pytest.raises(SelectionError):
            select_offsets("abc", 0, 10)


# * Test search-based selection
class TestSelectText:

    # * Verify first occurrence is selected by default
    def test_first_occurrence(self, sample_document):
        selection = select_text(sample_document, "The quick")
        assert selection.extract(sample_document) == "The quick"
        assert selection.start == 0

    # * Verify later occurrences are reachable
    def test_nth_occurrence(self):
        doc = "cat dog cat dog cat"
        selection = select_text(doc, "cat", occurrence=3)
        assert (selection.start, selection.end) == (16, 19)

    # * Verify missing text & bad arguments raise
    @pytest.mark.parametrize(
        "needle,occurrence", [("zebra", 1), ("cat", 2), ("", 1), ("cat", 0)]
    )
    def test_errors(self, needle, occurrence):
        with pytest.raises(SelectionError):
            select_text("one cat here", needle, occurrence)


# * Test paragraph-based selection
class TestSelectParagraphs:

    # * Verify spans skip blank blocks & trim stray newlines
    def test_paragraph_spans(self):
        doc = "First.\n\n\n\nSecond.\n\n\nThird."
        spans = paragraph_spans(doc)
        assert [doc[s:e] for s, e in spans] == ["First.", "Second.", "Third."]

    # * Verify single paragraph selection
    def test_single(self, sample_document):
        selection = select_paragraphs(sample_document, "3")
        assert selection.extract(sample_document) == "Call me Ishmael."

    # * Verify inclusive range keeps the break between paragraphs
    def test_range(self, sample_document):
        text = select_paragraphs(sample_document, "1-2").extract(sample_document)
        assert text.startswith("The quick brown fox")
        assert text.endswith("striking thirteen.")
        assert "\n\n" in text

    # * Verify malformed or out-of-range paragraph ranges raise
    @pytest.mark.parametrize("paragraph_range", ["0", "2-1", "4", "one", "1-"])
    def test_invalid(self, sample_document, paragraph_range):
        with pytest.raises(SelectionError):
            select_paragraphs(sample_document, paragraph_range)
