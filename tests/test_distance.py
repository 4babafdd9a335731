"""Tests for Damerau-Levenshtein distance."""

import pytest

from railradar.matching.distance import damerau_levenshtein


class TestDamerauLevenshtein:
    """Tests for the edit distance."""

    def test_classic_example(self) -> None:
        """Test kitten -> sitting (two substitutions, one insertion)."""
        assert damerau_levenshtein("kitten", "sitting") == 3

    def test_transposition(self) -> None:
        """Test that swapping adjacent characters costs one edit."""
        assert damerau_levenshtein("ab", "ba") == 1
        assert damerau_levenshtein("bren", "bern") == 1

    def test_empty_strings(self) -> None:
        """Test that distance to or from empty is the other length."""
        assert damerau_levenshtein("", "abc") == 3
        assert damerau_levenshtein("abc", "") == 3
        assert damerau_levenshtein("", "") == 0

    def test_identical(self) -> None:
        """Test identical strings."""
        assert damerau_levenshtein("lausanne", "lausanne") == 0

    def test_symmetric(self) -> None:
        """Test that argument order does not matter."""
        assert damerau_levenshtein("genva", "genevac") == damerau_levenshtein("genevac", "genva")

    def test_restricted_transposition(self) -> None:
        """Test that a transposed pair is not edited again (OSA, not full DL)."""
        assert damerau_levenshtein("ca", "abc") == 3

    @pytest.mark.parametrize(
        ("a", "b", "expected"),
        [
            ("zurih", "zurich", 1),
            ("lausane", "lausanne", 1),
            ("centrle", "centrale", 1),
            ("mialno", "milano", 1),
            ("rogoerdo", "rogoredo", 1),
            ("venezia", "vnezia", 1),
            ("bienne", "biel", 3),
        ],
    )
    def test_station_name_typos(self, a: str, b: str, expected: int) -> None:
        """Test typical station name typos."""
        assert damerau_levenshtein(a, b) == expected
