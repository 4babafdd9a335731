import logging
from collections.abc import Sequence
from pathlib import Path
from typing import TypeVar

from railradar.data.station_store import StationDirectory
from railradar.matching.models import MatchResult, StationMatch, StationResolutionResponse
from railradar.matching.scoring import score_station
from railradar.models.station import SearchableStation

logger = logging.getLogger(__name__)

S = TypeVar("S", bound=SearchableStation)

# Stations must score strictly above this to be returned
SCORE_THRESHOLD = 0.3


def _is_blank(query: object) -> bool:
    return not isinstance(query, str) or not query.strip()


def rank_stations(
    stations: Sequence[S], query: str, limit: int
) -> list[tuple[S, MatchResult]]:
    """Score, filter and order stations for a non-empty query.

    Ordering: match tier ascending, then importance ascending, then score
    descending. Python's stable sort keeps input order for full ties.

    Returns:
        Up to ``limit`` (station, match) pairs, best first. Blank queries
        and non-positive limits give an empty list.
    """
    if _is_blank(query) or limit <= 0:
        return []

    scored: list[tuple[S, MatchResult]] = []
    for station in stations:
        result = score_station(query, station)
        if result.score > SCORE_THRESHOLD:
            scored.append((station, result))

    scored.sort(key=lambda pair: (pair[1].match_type, pair[0].importance, -pair[1].score))

    logger.debug(f"Query {query!r}: {len(scored)} of {len(stations)} stations matched")
    return scored[:limit]


def search(stations: Sequence[S], query: str, limit: int) -> list[S]:
    """Search stations by free-text query.

    An empty or whitespace-only query returns the ``limit`` most important
    stations (lowest importance value first, file order on ties). Otherwise
    stations are ranked by rank_stations().

    Never raises: non-string queries count as empty, and a non-positive
    limit returns an empty list.

    Example:
        search(stations, "milano", 10) -> [Milano Centrale, Milano Rogoredo]
    """
    if not isinstance(limit, int) or limit <= 0:
        return []

    if _is_blank(query):
        return sorted(stations, key=lambda station: station.importance)[:limit]

    return [station for station, _ in rank_stations(stations, query, limit)]


async def resolve_station(
    query: str,
    limit: int = 5,
    stations_path: Path | None = None,
) -> StationResolutionResponse:
    """Resolve a query to matching stations, keeping tier and score.

    Uses the same filtering and ordering as search(), but a blank query
    resolves to nothing rather than the most important stations.

    Args:
        query: Search query (station name, possibly misspelled or reordered)
        limit: Maximum number of results to return
        stations_path: Optional stations file for directory loading

    Returns:
        StationResolutionResponse with matches, best first
    """
    query = query.strip()
    if not query:
        return StationResolutionResponse(query=query, matches=[], best_match=None)

    directory = await StationDirectory.get_instance(stations_path)
    matches = [
        StationMatch(station=station, score=result.score, match_type=result.match_type)
        for station, result in rank_stations(directory.stations, query, limit)
    ]

    return StationResolutionResponse(
        query=query,
        matches=matches,
        best_match=matches[0] if matches else None,
    )
