"""Unit tests for OSA distance and traceback."""

import numpy as np
import pytest

from typeahead.distance import (
    UNSET,
    EditOp,
    backtrace,
    compute_distance,
    osa_distance,
)
from typeahead.errors import CorruptedTracebackError
from typeahead.scratch import ScratchBuffer

NONE = EditOp.NONE
SUB = EditOp.SUBSTITUTION
DEL = EditOp.DELETION
INS = EditOp.INSERTION
TRANS = EditOp.TRANSPOSITION

SAMPLE_PAIRS = [
    ("", ""),
    ("", "abc"),
    ("abc", "abc"),
    ("abc", "ab"),
    ("abc", "acb"),
    ("ca", "abc"),
    ("kitten", "sitting"),
    ("abcdef", "badcfe"),
    ("first", "frist"),
    ("seventh", "sevneth"),
]


@pytest.mark.unit
class TestOsaDistance:
    """Test suite for osa_distance."""

    @pytest.mark.parametrize("text", ["", "a", "abc", "first item", "x" * 40])
    def test_identity(self, text):
        assert osa_distance(text, text) == 0

    @pytest.mark.parametrize("source,target", SAMPLE_PAIRS)
    def test_symmetric(self, source, target):
        assert osa_distance(source, target) == osa_distance(target, source)

    @pytest.mark.parametrize("text", ["a", "abc", "string", "y" * 30])
    def test_empty_side_costs_length(self, text):
        assert osa_distance("", text) == len(text)
        assert osa_distance(text, "") == len(text)

    @pytest.mark.parametrize("source,target,expected", [
        ("abc", "abc", 0),
        ("abc", "ab", 1),
        ("abc", "b", 2),
        ("abc", "acb", 1),
        ("abc", "cba", 2),
        ("kitten", "sitting", 3),
        ("abcdef", "badcfe", 3),
    ])
    def test_known_distances(self, source, target, expected):
        assert osa_distance(source, target) == expected

    def test_restricted_transposition(self):
        """A transposed pair is not edited again, unlike Damerau-Levenshtein."""
        assert osa_distance("ca", "abc") == 3

    def test_strings_beyond_inline_capacity(self):
        assert osa_distance("a" * 20, "a" * 19 + "b") == 1
        assert osa_distance("abcdefghijklmnopqrstuvwxyz", "bacdefghijklmnopqrstuvwxzy") == 2

    def test_bytes_input(self):
        assert osa_distance(b"abc", "acb") == 1

    def test_never_above_levenshtein(self):
        Levenshtein = pytest.importorskip("Levenshtein")
        for source, target in SAMPLE_PAIRS:
            assert osa_distance(source, target) <= Levenshtein.distance(source, target)

    @pytest.mark.parametrize("source,target", [
        ("kitten", "sitting"),
        ("flaw", "lawn"),
        ("", "abc"),
        ("second", "secant"),
    ])
    def test_matches_levenshtein_without_transpositions(self, source, target):
        Levenshtein = pytest.importorskip("Levenshtein")
        assert osa_distance(source, target) == Levenshtein.distance(source, target)


@pytest.mark.unit
class TestTraceback:
    """Test suite for compute_distance(want_trace=True)."""

    def test_no_trace_by_default(self):
        assert compute_distance("abc", "abd").trace is None

    def test_trace_does_not_change_distance(self):
        for source, target in SAMPLE_PAIRS:
            assert (
                compute_distance(source, target, want_trace=True).distance
                == compute_distance(source, target).distance
            )

    def test_empty_strings(self):
        result = compute_distance("", "", want_trace=True)
        assert result.distance == 0
        assert result.trace == ()

    def test_only_insertions(self):
        assert compute_distance("abc", "", want_trace=True).trace == (INS, INS, INS)

    def test_only_deletions(self):
        assert compute_distance("", "abc", want_trace=True).trace == (DEL, DEL, DEL)

    def test_trailing_insertion_first(self):
        """Element 0 is the edit nearest the tail of the strings."""
        result = compute_distance("abcd", "abc", want_trace=True)
        assert result.distance == 1
        assert result.trace == (INS, NONE, NONE, NONE)

    def test_substitution(self):
        assert compute_distance("abc", "abx", want_trace=True).trace == (SUB, NONE, NONE)

    def test_transposition_steps_two_cells(self):
        assert compute_distance("abc", "acb", want_trace=True).trace == (TRANS, NONE)
        assert compute_distance("ab", "ba", want_trace=True).trace == (TRANS,)

    def test_insertion_wins_tie_with_substitution(self):
        result = compute_distance("abcdz", "abcy", want_trace=True)
        assert result.distance == 2
        assert result.trace == (INS, SUB, NONE, NONE, NONE)

    def test_substitution_wins_tie_with_deletion(self):
        result = compute_distance("abcy", "abcdz", want_trace=True)
        assert result.distance == 2
        assert result.trace == (SUB, DEL, NONE, NONE, NONE)

    def test_trace_cost_matches_distance(self):
        for source, target in SAMPLE_PAIRS:
            result = compute_distance(source, target, want_trace=True)
            assert sum(op is not NONE for op in result.trace) == result.distance

    def test_long_strings_trace(self):
        source = "x" * 20
        target = "x" * 18
        result = compute_distance(source, target, want_trace=True)
        assert result.distance == 2
        # matching tails align first, the surplus lands in row 0
        assert result.trace[-2:] == (INS, INS)
        assert set(result.trace[:-2]) == {NONE}
        assert len(result.trace) == 20


@pytest.mark.unit
class TestBacktraceCorruption:
    """An operation grid that is not a valid EditOp grid aborts the walk."""

    def test_unset_cell(self):
        ops = ScratchBuffer(4, dtype=np.uint8, fill=UNSET)
        with pytest.raises(CorruptedTracebackError, match=r"\(1, 1\)"):
            backtrace(ops, 2, 2)

    def test_is_an_assertion_failure(self):
        ops = ScratchBuffer(4, dtype=np.uint8, fill=UNSET)
        with pytest.raises(AssertionError):
            backtrace(ops, 2, 2)

    def test_step_outside_grid(self):
        ops = ScratchBuffer(4, dtype=np.uint8, fill=int(EditOp.TRANSPOSITION))
        with pytest.raises(CorruptedTracebackError):
            backtrace(ops, 2, 2)
