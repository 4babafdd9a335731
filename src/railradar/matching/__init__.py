"""Fuzzy station search and ranking."""

from railradar.matching.distance import damerau_levenshtein
from railradar.matching.models import (
    NO_MATCH,
    MatchResult,
    MatchType,
    StationMatch,
    StationResolutionResponse,
    best_of,
)
from railradar.matching.normalizers import (
    normalize_text,
    remove_accents,
    searchable_names,
    split_words,
)
from railradar.matching.scoring import (
    score_multi_word,
    score_name,
    score_station,
    score_word,
)
from railradar.matching.station_matcher import rank_stations, resolve_station, search

__all__ = [
    # Search
    "search",
    "rank_stations",
    "resolve_station",
    # Scoring
    "score_word",
    "score_name",
    "score_multi_word",
    "score_station",
    "damerau_levenshtein",
    # Models
    "MatchType",
    "MatchResult",
    "NO_MATCH",
    "best_of",
    "StationMatch",
    "StationResolutionResponse",
    # Normalizers
    "normalize_text",
    "remove_accents",
    "split_words",
    "searchable_names",
]
