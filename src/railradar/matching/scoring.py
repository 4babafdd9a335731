"""Tiered relevance scoring of station names against a free-text query."""

from railradar.matching.distance import damerau_levenshtein
from railradar.matching.models import NO_MATCH, MatchResult, MatchType, best_of
from railradar.matching.normalizers import normalize_text, searchable_names, split_words
from railradar.models.station import SearchableStation

EXACT_SCORE = 1.0
PREFIX_SCORE = 0.95
WORD_PREFIX_SCORE = 0.9
SUBSTRING_SCORE = 0.7

# Fuzzy matches are scaled down so their raw similarity reads below the other tiers
FUZZY_SCALE = 0.6
# Weight given to a matching first letter (typos rarely hit the first letter)
FIRST_LETTER_BOOST = 0.2
MAX_EDIT_DISTANCE = 2
# Name words are cut to len(query word) + this before the edit distance is taken
FUZZY_LENGTH_SLACK = 2

# Every word of a multi-word query must reach this score
MULTI_WORD_MIN_SCORE = 0.3


def score_word(query_word: str, name_word: str) -> MatchResult:
    """Score one normalized query word against one normalized name word.

    Checks, in order: exact, prefix, substring, then a bounded
    Damerau-Levenshtein comparison. A fuzzy match allows at most
    min(2, len(query_word) // 2) edits against the start of the name word.

    Examples:
        score_word("bern", "bern") -> MatchResult(1.0, EXACT)
        score_word("ber", "bern") -> MatchResult(0.95, PREFIX)
        score_word("ern", "bern") -> MatchResult(0.7, SUBSTRING)
        score_word("bren", "bern") -> MatchResult(~0.48, FUZZY)
    """
    if name_word == query_word:
        return MatchResult(EXACT_SCORE, MatchType.EXACT)
    if name_word.startswith(query_word):
        return MatchResult(PREFIX_SCORE, MatchType.PREFIX)
    if query_word in name_word:
        return MatchResult(SUBSTRING_SCORE, MatchType.SUBSTRING)

    # Trailing characters of long names should not count as mistakes
    compare_word = name_word[: len(query_word) + FUZZY_LENGTH_SLACK]
    distance = damerau_levenshtein(query_word, compare_word)

    max_allowed = min(MAX_EDIT_DISTANCE, len(query_word) // 2)
    if distance > max_allowed:
        return NO_MATCH

    max_len = max(len(query_word), len(compare_word))
    similarity = 1 - distance / max_len

    if query_word and name_word and query_word[0] == name_word[0]:
        similarity = similarity * (1 - FIRST_LETTER_BOOST) + FIRST_LETTER_BOOST

    return MatchResult(similarity * FUZZY_SCALE, MatchType.FUZZY)


def score_name(query: str, name: str) -> MatchResult:
    """Score a whole query against a whole station name.

    Resolution strategy (priority order):
    1. Name equals query -> EXACT
    2. Name starts with query -> PREFIX
    3. Some word of the name starts with query -> WORD_PREFIX
    4. Name contains query -> SUBSTRING
    5. Best fuzzy score of query against each name word -> FUZZY

    Example: score_name("centrale", "Milano Centrale") -> MatchResult(0.9, WORD_PREFIX)
    """
    query = normalize_text(query)
    name = normalize_text(name)
    words = split_words(name)

    if name == query:
        return MatchResult(EXACT_SCORE, MatchType.EXACT)
    if name.startswith(query):
        return MatchResult(PREFIX_SCORE, MatchType.PREFIX)
    if any(word.startswith(query) for word in words):
        return MatchResult(WORD_PREFIX_SCORE, MatchType.WORD_PREFIX)
    if query in name:
        return MatchResult(SUBSTRING_SCORE, MatchType.SUBSTRING)

    best_score = 0.0
    for word in words:
        result = score_word(query, word)
        if result.score > best_score:
            best_score = result.score

    if best_score <= 0:
        return NO_MATCH
    return MatchResult(best_score, MatchType.FUZZY)


def score_multi_word(query_words: list[str], name: str) -> MatchResult:
    """Score a multi-word query against a name, ignoring word order.

    Every query word is matched against its best word in the name. The
    result is only as strong as the weakest query word: lowest score,
    weakest tier. Any query word scoring below MULTI_WORD_MIN_SCORE fails
    the whole match.

    Args:
        query_words: Normalized query words
        name: Station name (normalized here)

    Example: score_multi_word(["centrale", "milano"], "Milano Centrale")
        -> MatchResult(1.0, EXACT)
    """
    if not query_words:
        return NO_MATCH

    name_words = split_words(normalize_text(name))
    word_results: list[MatchResult] = []

    for query_word in query_words:
        best = best_of(score_word(query_word, name_word) for name_word in name_words)
        if best.score < MULTI_WORD_MIN_SCORE:
            return NO_MATCH
        word_results.append(best)

    return MatchResult(
        min(result.score for result in word_results),
        max(result.match_type for result in word_results),
    )


def score_station(query: str, station: SearchableStation) -> MatchResult:
    """Best match of a query across all searchable names of a station.

    Single-word queries go through score_name only. Multi-word queries are
    scored both as a whole (so "Milano Centrale" typed in order keeps its
    exact/prefix tier) and word by word (so "centrale milano" still
    matches).
    """
    query = query.strip()
    query_words = split_words(normalize_text(query))
    if not query_words:
        return NO_MATCH

    names = searchable_names(station.name)

    if len(query_words) == 1:
        return best_of(score_name(query, name) for name in names)

    results: list[MatchResult] = []
    for name in names:
        results.append(score_name(query, name))
        results.append(score_multi_word(query_words, name))
    return best_of(results)
