"""Unit tests for the LCS aligner.

WHY: The aligner decides which words count as kept. A wrong pair, or a
different choice among equally long alignments, changes highlighting
for every user, so both the LCS properties and the exact tie-break are
pinned here.

HOW: A fixed table of sequence pairs is run through the general
properties (bounds, monotonicity, validity, length symmetry). Targeted
tests cover identity, empty input, and tie-break determinism.
"""

import pytest

from grammar_checker.core.aligner import align
from grammar_checker.core.ir import AlignmentResult

_CASES = [
    ([], []),
    ([], ["a"]),
    (["a"], []),
    (["a"], ["a"]),
    (["a"], ["b"]),
    (["a", "b"], ["b", "a"]),
    ("a b c b d a b".split(), "b d c a b a".split()),
    ("the cat sat on the mat".split(), "a cat sat on a mat".split()),
    (["x", "x", "x"], ["x"]),
    (["", "a", ""], ["", "", "a"]),
    ("one two three four".split(), "four three two one".split()),
]


def _lcs_length(a, b):
    """Reference LCS length with a rolling row."""
    prev = [0] * (len(b) + 1)
    for x in a:
        row = [0]
        for j, y in enumerate(b, 1):
            row.append(prev[j - 1] + 1 if x == y else max(prev[j], row[j - 1]))
        prev = row
    return prev[-1]


class TestAlignmentProperties:
    """General LCS properties over a fixed set of inputs."""

    @pytest.mark.parametrize("a, b", _CASES)
    def test_length_bounds(self, a, b):
        result = align(a, b)
        assert 0 <= result.length <= min(len(a), len(b))

    @pytest.mark.parametrize("a, b", _CASES)
    def test_length_matches_pairs(self, a, b):
        result = align(a, b)
        assert result.length == len(result.pairs)

    @pytest.mark.parametrize("a, b", _CASES)
    def test_pairs_strictly_increasing(self, a, b):
        pairs = align(a, b).pairs
        for (i1, j1), (i2, j2) in zip(pairs, pairs[1:]):
            assert i1 < i2
            assert j1 < j2

    @pytest.mark.parametrize("a, b", _CASES)
    def test_pairs_point_at_equal_keys(self, a, b):
        for i, j in align(a, b).pairs:
            assert a[i] == b[j]

    @pytest.mark.parametrize("a, b", _CASES)
    def test_length_is_optimal(self, a, b):
        assert align(a, b).length == _lcs_length(a, b)

    @pytest.mark.parametrize("a, b", _CASES)
    def test_length_symmetric(self, a, b):
        assert align(a, b).length == align(b, a).length


class TestIdentityAndEmpty:
    def test_identity(self):
        keys = ["this", "is", "a", "test"]
        result = align(keys, keys)
        assert result.length == 4
        assert result.pairs == ((0, 0), (1, 1), (2, 2), (3, 3))

    def test_empty_left(self):
        assert align([], ["a", "b"]) == AlignmentResult(length=0, pairs=())

    def test_empty_right(self):
        assert align(["a", "b"], []) == AlignmentResult(length=0, pairs=())

    def test_no_common_elements(self):
        assert align(["a", "b", "c"], ["x", "y", "z"]).length == 0

    def test_empty_string_keys_match_each_other(self):
        assert align(["", "a"], ["", "a"]).pairs == ((0, 0), (1, 1))

    def test_accepts_tuples(self):
        assert align(("a", "b"), ("a", "b")).length == 2


class TestTieBreak:
    """Ties during backtracking move left (decrement the B index)."""

    def test_swapped_pair_reports_second_a_element(self):
        assert align(["a", "b"], ["b", "a"]).pairs == ((1, 0),)

    def test_swapped_pair_reverse_direction(self):
        assert align(["b", "a"], ["a", "b"]).pairs == ((1, 0),)

    def test_repeated_key_matches_last_occurrence(self):
        assert align(["x", "x"], ["x"]).pairs == ((1, 0),)

    def test_repeated_runs_are_deterministic(self):
        first = align(["a", "b"], ["b", "a"])
        second = align(["a", "b"], ["b", "a"])
        assert first == second

    def test_moved_word_keeps_longer_run(self):
        a = ["one", "two", "three"]
        b = ["three", "one", "two"]
        assert align(a, b).pairs == ((0, 1), (1, 2))
