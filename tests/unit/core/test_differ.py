# tests/unit/core/test_differ.py
# Unit tests for the text differ: chunk building, paragraph splitting & granularity

import pytest

from inkwell.core.constants import ChunkKind, ChunkStatus, DiffGranularity
from inkwell.core.differ import (
    ChunkIdAllocator,
    build_chunks,
    compute_diff_chunks,
    get_default_allocator,
    split_by_paragraphs,
)
from inkwell.core.merge import decide_all, resolve


def _shape(chunks):
    return [(c.kind, c.text) for c in chunks]


# * Test paragraph splitting used to segment edits
class TestSplitByParagraphs:

    # * Verify text without a paragraph break is returned whole
    def test_no_break_returns_single_part(self):
        assert split_by_paragraphs("one line\nsecond line") == ["one line\nsecond line"]

    # * Verify break travels w/ the paragraph that follows it
    def test_break_attaches_to_following_paragraph(self):
        assert split_by_paragraphs("A\n\nB\n\nC") == ["A", "\n\nB", "\n\nC"]

    # * Verify leading break stays on the first paragraph
    def test_leading_break(self):
        assert split_by_paragraphs("\n\nA") == ["\n\nA"]

    # * Verify trailing break becomes its own part
    def test_trailing_break(self):
        assert split_by_paragraphs("A\n\n") == ["A", "\n\n"]

    # * Verify empty string passes through unchanged
    def test_empty_text(self):
        assert split_by_paragraphs("") == [""]

    @pytest.mark.parametrize(
        "text",
        ["A\n\n\nB", "\n\n\n\n", "x\n\ny\n\n\n\nz", "no breaks", "\n\nlead and trail\n\n"],
    )
    # * Verify parts always concatenate back to the input
    def test_parts_concatenate_to_input(self, text):
        parts = split_by_paragraphs(text)
        assert "".join(parts) == text
        assert all(parts)


# * Test chunk id allocation
class TestChunkIdAllocator:

    # * Verify ids are sequential & prefixed
    def test_sequential_ids(self):
        allocator = ChunkIdAllocator()
        assert allocator.peek() == "chunk-0"
        assert allocator.next_id() == "chunk-0"
        assert allocator.next_id() == "chunk-1"
        assert allocator.peek() == "chunk-2"

    # * Verify custom start offset
    def test_custom_start(self):
        assert ChunkIdAllocator(start=41).next_id() == "chunk-41"

    # * Verify default allocator is shared
    def test_default_allocator_is_shared(self):
        assert get_default_allocator() is get_default_allocator()


# * Test building chunks from raw diff operations
class TestBuildChunks:

    # * Verify equal text is never split even across paragraphs
    def test_equal_not_split(self):
        chunks = build_chunks([(0, "A\n\nB\n\nC")], ChunkIdAllocator())
        assert _shape(chunks) == [(ChunkKind.EQUAL, "A\n\nB\n\nC")]
        assert chunks[0].status is ChunkStatus.ACCEPTED

    # * Verify insertions & deletions are split per paragraph & start pending
    def test_edits_split_and_pending(self):
        chunks = build_chunks([(1, "X\n\nY"), (-1, "P\n\nQ")], ChunkIdAllocator())
        assert _shape(chunks) == [
            (ChunkKind.INSERTION, "X"),
            (ChunkKind.INSERTION, "\n\nY"),
            (ChunkKind.DELETION, "P"),
            (ChunkKind.DELETION, "\n\nQ"),
        ]
        assert all(c.status is ChunkStatus.PENDING for c in chunks)

    # * Verify unknown operation codes are rejected
    def test_unknown_op_raises(self):
        with pytest.raises(ValueError):
            build_chunks([(7, "x")], ChunkIdAllocator())


# * Test compute_diff_chunks end to end
class TestComputeDiffChunks:

    # * Verify identical texts produce a single equal chunk
    def test_identical_texts(self):
        chunks = compute_diff_chunks("same text", "same text", id_source=ChunkIdAllocator())
        assert _shape(chunks) == [(ChunkKind.EQUAL, "same text")]

    # * Verify two empty texts produce no chunks
    def test_both_empty(self):
        assert compute_diff_chunks("", "", id_source=ChunkIdAllocator()) == []

    # * Verify appended paragraphs become one insertion each
    def test_inserted_paragraphs_split(self):
        chunks = compute_diff_chunks("A", "A\n\nB\n\nC", id_source=ChunkIdAllocator())
        assert _shape(chunks) == [
            (ChunkKind.EQUAL, "A"),
            (ChunkKind.INSERTION, "\n\nB"),
            (ChunkKind.INSERTION, "\n\nC"),
        ]

    # * Verify removed paragraphs become one deletion each
    def test_deleted_paragraphs_split(self):
        chunks = compute_diff_chunks("A\n\nB\n\nC", "A", id_source=ChunkIdAllocator())
        assert _shape(chunks) == [
            (ChunkKind.EQUAL, "A"),
            (ChunkKind.DELETION, "\n\nB"),
            (ChunkKind.DELETION, "\n\nC"),
        ]

    # * Verify an unchanged multi-paragraph prefix stays one equal chunk
    def test_equal_prefix_not_split(self):
        chunks = compute_diff_chunks("P1\n\nP2", "P1\n\nP2 extra", id_source=ChunkIdAllocator())
        assert _shape(chunks) == [
            (ChunkKind.EQUAL, "P1\n\nP2"),
            (ChunkKind.INSERTION, " extra"),
        ]

    # * Verify character granularity isolates the changed letter
    def test_char_granularity(self):
        chunks = compute_diff_chunks(
            "the cart sat", "the card sat", id_source=ChunkIdAllocator()
        )
        assert _shape(chunks) == [
            (ChunkKind.EQUAL, "the car"),
            (ChunkKind.DELETION, "t"),
            (ChunkKind.INSERTION, "d"),
            (ChunkKind.EQUAL, " sat"),
        ]

    # * Verify word granularity replaces whole words
    def test_word_granularity(self):
        chunks = compute_diff_chunks(
            "the cart sat",
            "the card sat",
            id_source=ChunkIdAllocator(),
            granularity=DiffGranularity.WORD,
        )
        assert _shape(chunks) == [
            (ChunkKind.EQUAL, "the "),
            (ChunkKind.DELETION, "cart"),
            (ChunkKind.INSERTION, "card"),
            (ChunkKind.EQUAL, " sat"),
        ]

    # * Verify ids are unique within & across runs sharing an allocator
    def test_ids_unique_across_runs(self):
        allocator = ChunkIdAllocator()
        first = compute_diff_chunks("a b c", "a x c\n\nd", id_source=allocator)
        second = compute_diff_chunks("one", "two\n\nthree", id_source=allocator)
        ids = [c.id for c in first + second]
        assert len(ids) == len(set(ids))

    # * Verify default allocator keeps ids unique between independent calls
    def test_default_allocator_ids_unique(self):
        first = compute_diff_chunks("abc", "abd")
        second = compute_diff_chunks("abc", "abd")
        assert not {c.id for c in first} & {c.id for c in second}

    @pytest.mark.parametrize("granularity", list(DiffGranularity))
    @pytest.mark.parametrize(
        "original,suggestion",
        [
            ("", "Brand new text."),
            ("Old text.", ""),
            ("The fox.\n\nThe dog.", "A fox jumped.\n\nThe dog slept.\n\nThe end."),
            ("Paragraph one.\n\nParagraph two.\n\nThree.", "Paragraph one.\n\nThree!"),
            ("Unicode: café naïve", "Unicode: cafe naive ✓"),
        ],
    )
    # * Verify accepting every edit yields the suggestion & rejecting yields the original
    def test_full_accept_and_full_reject(self, original, suggestion, granularity):
        chunks = compute_diff_chunks(
            original, suggestion, id_source=ChunkIdAllocator(), granularity=granularity
        )
        assert resolve(decide_all(chunks, ChunkStatus.ACCEPTED)) == suggestion
        assert resolve(decide_all(chunks, ChunkStatus.REJECTED)) == original
        # pending behaves like rejected
        assert resolve(chunks) == original
