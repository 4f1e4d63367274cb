"""Tests for matching/similarity.py -- Levenshtein ratio."""

import pytest

from rom_picker.matching.similarity import similarity


class TestSimilarity:
    def test_identical(self):
        assert similarity("golden axe", "golden axe") == 1.0

    def test_both_empty_is_zero(self):
        assert similarity("", "") == 0.0

    @pytest.mark.parametrize("a,b", [("abc", ""), ("", "abc")])
    def test_one_empty_is_zero(self, a: str, b: str):
        assert similarity(a, b) == 0.0

    def test_classic_distance(self):
        # kitten -> sitting is 3 edits over 7 chars
        assert similarity("kitten", "sitting") == pytest.approx(4 / 7)

    def test_one_substitution(self):
        assert similarity("streets rage 3", "streets rage 2") == pytest.approx(1 - 1 / 14)

    @pytest.mark.parametrize(
        "a,b",
        [
            ("sonic hedgehog 2", "sonic hedgehog"),
            ("ecco dolphin", "ecco jr"),
            ("x", "completely different"),
        ],
    )
    def test_symmetric(self, a: str, b: str):
        assert similarity(a, b) == similarity(b, a)

    def test_range(self):
        score = similarity("abc", "xyz")
        assert score == 0.0
        assert 0.0 <= similarity("abcd", "abxy") <= 1.0

    def test_not_token_aware(self):
        # Same words, different order, scores well below 1
        assert similarity("rage streets", "streets rage") < 0.6
