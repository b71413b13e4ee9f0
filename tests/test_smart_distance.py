"""Unit tests for the incremental (prefix-aware) distance."""

import pytest

from typeahead.distance import EditOp, compute_distance, osa_distance, smart_distance


@pytest.mark.unit
class TestSmartDistance:
    """Test suite for smart_distance."""

    def test_prefix_is_free(self):
        assert smart_distance("abcd", "abc", True) == 0
        assert smart_distance("abcde", "abc", True) == 0

    def test_correction_then_prefix(self):
        assert smart_distance("abcde", "xbcd", True) == 1

    def test_short_query_is_not_discounted(self):
        assert smart_distance("abcd", "ab", True) == 2
        assert smart_distance("abcd", "ab", False) == 2

    def test_threshold_is_configurable(self):
        assert smart_distance("abcd", "ab", True, min_prefix_length=2) == 0

    def test_not_incremental_is_plain_osa(self):
        assert smart_distance("abcde", "abc") == osa_distance("abcde", "abc") == 2

    def test_asymmetric(self):
        assert smart_distance("abcd", "abc", True) == 0
        assert smart_distance("abc", "abcd", True) == 1

    def test_same_length_is_not_discounted(self):
        assert smart_distance("abcd", "abcx", True) == 1

    def test_substitutions_before_the_tail_still_count(self):
        assert smart_distance("abcdefgh", "abcxyz", True) == 3

    def test_repeated_tail_character_aligns_as_match(self):
        """The last query character matches the last word character, so no insertion run leads the trace."""
        assert smart_distance("aaaa", "aaa", True) == 1

    def test_query_tail_repeated_later_in_word(self):
        """The final "e" of the query aligns with the second "e" of the word, so only "n" is discounted."""
        assert compute_distance("green", "gre", want_trace=True).trace == (
            EditOp.INSERTION, EditOp.NONE, EditOp.INSERTION, EditOp.NONE, EditOp.NONE,
        )
        assert smart_distance("green", "gre", True) == 1

    def test_earlier_deletion_with_trailing_insertions(self):
        """Regression: an extra leading query character combined with a long unmatched tail.

        Plain distance is 5 (one deletion, four insertions); only the four
        trailing insertions are discounted.
        """
        assert osa_distance("abcdefg", "xabc") == 5
        assert smart_distance("abcdefg", "xabc", True) == 1

    @pytest.mark.parametrize("word,query", [
        ("first", "fir"),
        ("string", "strng"),
        ("second", "xyz"),
        ("element", "elmn"),
        ("abcdefg", "xabc"),
    ])
    def test_bounded_by_plain_distance(self, word, query):
        discounted = smart_distance(word, query, True)
        assert 0 <= discounted <= osa_distance(word, query)
