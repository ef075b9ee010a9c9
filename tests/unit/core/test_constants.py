# tests/unit/core/test_constants.py
# Unit tests for chunk, save-point & selection value types

import pytest

from inkwell.core.constants import (
    ChunkKind,
    ChunkStatus,
    DiffGranularity,
    EditChunk,
    SavePoint,
    SelectionRange,
)
from inkwell.core.exceptions import ChunkTransitionError, SelectionError


# * Test EditChunk transitions
class TestEditChunk:

    # * Verify constructors set kind & default status
    def test_constructors(self):
        assert EditChunk.equal("e", "x").status is ChunkStatus.ACCEPTED
        assert EditChunk.insertion("i", "x").kind is ChunkKind.INSERTION
        assert EditChunk.insertion("i", "x").status is ChunkStatus.PENDING
        assert EditChunk.deletion("d", "x").kind is ChunkKind.DELETION

    @pytest.mark.parametrize(
        "start,target,allowed",
        [
            (ChunkStatus.PENDING, ChunkStatus.ACCEPTED, True),
            (ChunkStatus.PENDING, ChunkStatus.REJECTED, True),
            (ChunkStatus.ACCEPTED, ChunkStatus.PENDING, True),
            (ChunkStatus.REJECTED, ChunkStatus.ACCEPTED, False),
            (ChunkStatus.REJECTED, ChunkStatus.PENDING, False),
            (ChunkStatus.ACCEPTED, ChunkStatus.REJECTED, False),
        ],
    )
    # * Verify allowed status moves for edit chunks
    def test_transition_table(self, start, target, allowed):
        chunk = EditChunk.insertion("i", "x", start)
        assert chunk.can_transition(target) is allowed

    # * Verify with_status returns a new chunk & leaves the original alone
    def test_with_status_is_copy(self):
        chunk = EditChunk.deletion("d", "gone")
        moved = chunk.with_status(ChunkStatus.ACCEPTED)
        assert moved.status is ChunkStatus.ACCEPTED
        assert chunk.status is ChunkStatus.PENDING
        assert moved.id == chunk.id and moved.text == chunk.text

    # * Verify equal chunks never transition
    def test_equal_chunk_is_fixed(self):
        chunk = EditChunk.equal("e", "same")
        assert not chunk.can_transition(ChunkStatus.PENDING)
        with pytest.raises(ChunkTransitionError) as exc:
            chunk.with_status(ChunkStatus.PENDING)
        assert exc.value.chunk_id == "e"

    # * Verify illegal move raises w/ chunk id
    def test_illegal_move_raises(self):
        chunk = EditChunk.insertion("i", "x", ChunkStatus.REJECTED)
        with pytest.raises(ChunkTransitionError):
            chunk.with_status(ChunkStatus.ACCEPTED)

    # * Verify dict form uses enum values
    def test_to_dict(self):
        assert EditChunk.insertion("chunk-3", "hi").to_dict() == {
            "id": "chunk-3",
            "kind": "insertion",
            "text": "hi",
            "status": "pending",
        }


# * Test SelectionRange validation & extraction
class TestSelectionRange:

    # * Verify negative or inverted ranges are rejected
    @pytest.mark.parametrize("start,end", [(-1, 2), (5, 3)])
    def test_invalid_ranges(self, start, end):
        with pytest.raises(SelectionError):
            SelectionRange(start, end)

    # * Verify length, emptiness & extraction
    def test_extract(self):
        selection = SelectionRange(4, 9)
        assert selection.length == 5
        assert not selection.is_empty
        assert selection.extract("The quick fox") == "quick"
        assert SelectionRange(2, 2).is_empty

    # * Verify range past the end of text is rejected
    def test_validate_against(self):
        with pytest.raises(SelectionError) as exc:
            SelectionRange(0, 10).validate_against("short")
        assert exc.value.end == 10


# * Test SavePoint & enum values
class TestMisc:

    # * Verify save points are immutable snapshots
    def test_save_point_frozen(self):
        point = SavePoint("base", (EditChunk.equal("e", "base"),))
        with pytest.raises(AttributeError):
            point.baseline_text = "other"

    # * Verify granularity parses from its config value
    def test_granularity_values(self):
        assert DiffGranularity("char") is DiffGranularity.CHAR
        assert DiffGranularity("word") is DiffGranularity.WORD
