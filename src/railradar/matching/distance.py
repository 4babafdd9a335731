"""Damerau-Levenshtein edit distance (optimal string alignment variant)."""

from rapidfuzz.distance import OSA


def damerau_levenshtein(a: str, b: str) -> int:
    """Minimum number of edits turning ``a`` into ``b``.

    An edit is a single-character insertion, deletion, substitution, or a
    swap of two adjacent characters. A substring is never edited twice, so
    this is the restricted (optimal string alignment) form of the metric.

    Examples:
        damerau_levenshtein("kitten", "sitting") -> 3
        damerau_levenshtein("ab", "ba") -> 1
        damerau_levenshtein("", "abc") -> 3
    """
    return OSA.distance(a, b)
