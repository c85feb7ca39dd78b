"""Tests for edit distance algorithms: Levenshtein and Damerau-Levenshtein.

This module tests the raw distances and their normalized similarity
variants provided by typoscore.
"""

import pytest

import typoscore as ts


class TestLevenshtein:
    """Tests for Levenshtein distance functions."""

    def test_identical_strings(self):
        assert ts.levenshtein("hello", "hello") == 0, "Identical strings should have distance 0"
        assert ts.levenshtein("", "") == 0, "Two empty strings should have distance 0"

    def test_empty_strings(self):
        assert ts.levenshtein("hello", "") == 5, "Distance to empty string equals string length"
        assert ts.levenshtein("", "abc") == 3, "Distance from empty string equals target length"

    def test_classic_examples(self):
        # kitten -> sitten (s for k) -> sittin (i for e) -> sitting (g added) = 3 edits
        assert ts.levenshtein("kitten", "sitting") == 3, "kitten->sitting requires 3 edits"
        assert ts.levenshtein("saturday", "sunday") == 3, "saturday->sunday requires 3 edits"
        assert ts.levenshtein("flaw", "lawn") == 2

    def test_transposition_costs_two(self):
        assert ts.levenshtein("ab", "ba") == 2

    def test_unicode(self):
        # cafe with accent vs without: 1 character difference
        assert ts.levenshtein("café", "cafe") == 1, "Accent difference is 1 edit"
        # 3 chars vs 2 chars: 1 deletion
        assert ts.levenshtein("日本語", "日本") == 1, \
            "Removing one Japanese character is 1 edit"

    def test_argument_order_does_not_matter(self):
        assert ts.levenshtein("sitting", "kitten") == ts.levenshtein("kitten", "sitting")
        assert ts.levenshtein("a", "abcdef") == ts.levenshtein("abcdef", "a") == 5

    def test_similarity(self):
        assert ts.levenshtein_similarity("hello", "hello") == 1.0, \
            "Identical strings should have similarity 1.0"
        assert ts.levenshtein_similarity("", "") == 1.0
        assert ts.levenshtein_similarity("hello", "") == 0.0, \
            "Comparing to empty string should have similarity 0.0"
        # "hello" vs "hallo": 1 edit out of 5 chars = 0.8 similarity
        assert ts.levenshtein_similarity("hello", "hallo") == 0.8, \
            "1 edit in 5 chars = 0.8 similarity"

    def test_edit_distance_alias(self):
        assert ts.edit_distance is ts.levenshtein


class TestDamerauLevenshtein:
    """Tests for Damerau-Levenshtein distance."""

    def test_identical_and_empty(self):
        assert ts.damerau_levenshtein("", "") == 0
        assert ts.damerau_levenshtein("abc", "abc") == 0
        assert ts.damerau_levenshtein("", "abc") == 3
        assert ts.damerau_levenshtein("abcd", "") == 4

    def test_transposition(self):
        # Damerau counts transposition as 1 edit
        assert ts.damerau_levenshtein("ab", "ba") == 1
        assert ts.damerau_levenshtein("ca", "ac") == 1
        assert ts.damerau_levenshtein("teh", "the") == 1

        # Regular Levenshtein would count this as 2
        assert ts.levenshtein("ab", "ba") == 2

    def test_unrestricted_transposition(self):
        # Optimal string alignment gives 3 here; the unrestricted distance is 2
        # (transpose "ca" -> "ac", then insert "b" between the swapped pair).
        assert ts.damerau_levenshtein("ca", "abc") == 2

    def test_never_exceeds_levenshtein(self):
        pairs = [("kitten", "sitting"), ("abcdef", "badcfe"), ("receive", "recieve"), ("", "x")]
        for a, b in pairs:
            assert ts.damerau_levenshtein(a, b) <= ts.levenshtein(a, b)

    def test_multiple_transpositions(self):
        assert ts.damerau_levenshtein("abcdef", "badcfe") == 3

    def test_repeated_characters(self):
        assert ts.damerau_levenshtein("aaaa", "aaa") == 1
        assert ts.damerau_levenshtein("abab", "baba") == 2

    def test_unicode(self):
        assert ts.damerau_levenshtein("éa", "aé") == 1
        assert ts.damerau_levenshtein("\U0001F600x", "x\U0001F600") == 1

    def test_similarity(self):
        # "hello" vs "ehllo": 1 transposition out of 5 chars = 0.8 similarity
        sim = ts.damerau_levenshtein_similarity("hello", "ehllo")
        assert sim == 0.8, f"Expected 0.8 for single transposition, got {sim}"
        assert ts.damerau_levenshtein_similarity("", "") == 1.0


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
