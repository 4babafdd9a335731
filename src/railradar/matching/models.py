from collections.abc import Iterable
from dataclasses import dataclass
from enum import IntEnum

from pydantic import BaseModel, Field

from railradar.models.station import Station


class MatchType(IntEnum):
    """Match category, strongest first.

    The tier always outranks the numeric score: a weak prefix match still
    sorts ahead of a strong fuzzy one.
    """

    EXACT = 0  # Whole name equals the query
    PREFIX = 1  # Name starts with the query
    WORD_PREFIX = 2  # A later word of the name starts with the query
    SUBSTRING = 3  # Query appears inside the name
    FUZZY = 4  # Within the allowed edit distance
    NO_MATCH = 5


@dataclass(frozen=True)
class MatchResult:
    """Score (0-1) and tier for one comparison."""

    score: float
    match_type: MatchType

    def beats(self, other: "MatchResult") -> bool:
        """True if this result ranks strictly ahead of ``other``."""
        if self.match_type != other.match_type:
            return self.match_type < other.match_type
        return self.score > other.score


NO_MATCH = MatchResult(0.0, MatchType.NO_MATCH)


def best_of(results: Iterable[MatchResult]) -> MatchResult:
    """Pick the strongest result (lowest tier, then highest score).

    The first of several equally strong results wins. An empty iterable
    gives NO_MATCH.
    """
    best = NO_MATCH
    for result in results:
        if result.beats(best):
            best = result
    return best


class StationMatch(BaseModel):
    """A matched station with its ranking information."""

    station: Station
    score: float = Field(description="Match score (0-1)")
    match_type: MatchType = Field(description="Match tier, 0 = exact ... 4 = fuzzy")


class StationResolutionResponse(BaseModel):
    """Response from resolve_station tool."""

    query: str = Field(description="Original query string")
    matches: list[StationMatch] = Field(description="Matched stations, best first")
    best_match: StationMatch | None = Field(
        default=None, description="Best match (always set to top match when matches exist)"
    )
