"""MCP tools for listing, searching and resolving stations."""

from railradar.app import mcp
from railradar.data.config import get_config
from railradar.matching.models import StationResolutionResponse
from railradar.matching.station_matcher import resolve_station as _resolve_station
from railradar.models.responses import SearchStationsResponse
from railradar.models.station import Station
from railradar.services.station_service import get_station as _get_station
from railradar.services.station_service import search_stations as _search_stations


def _clamp_limit(limit: int | None) -> int:
    config = get_config()
    if limit is None:
        return config.search_limit
    if limit < 1:
        return 1
    if limit > config.max_search_limit:
        return config.max_search_limit
    return limit


@mcp.tool()
async def search_stations(
    query: str | None = None,
    limit: int | None = None,
) -> SearchStationsResponse:
    """Search for stations by name.

    Matching ignores case and accents, tolerates small typos, splits
    bilingual names ("Biel/Bienne") and accepts words in any order.

    Examples:
        search_stations()  # Every station
        search_stations(query="")  # Most important stations first
        search_stations(query="milano")  # Milano Centrale, Milano Rogoredo, ...
        search_stations(query="zurih")  # Typo -> Zürich HB

    Args:
        query: Station name to search for. Omit to list all stations.
        limit: Maximum number of results (default 20, max 100).

    Returns:
        SearchStationsResponse with matching stations, best first, and count.
    """
    if query is None:
        return await _search_stations(query=None)
    return await _search_stations(query=query, limit=_clamp_limit(limit))


@mcp.tool()
async def get_station(station_id: int) -> Station | None:
    """Get a station by its numeric ID.

    Args:
        station_id: Station ID.

    Returns:
        The station, or None if no station has that ID.
    """
    return await _get_station(station_id)


@mcp.tool()
async def resolve_station(
    query: str,
    limit: int = 5,
) -> StationResolutionResponse:
    """Resolve a station query and explain each match.

    Same ranking as search_stations, but every match carries its score
    (0-1) and match_type (0=exact, 1=prefix, 2=word prefix, 3=substring,
    4=fuzzy).

    Examples:
        resolve_station("bienne")  # Biel/Bienne, match_type=1
        resolve_station("centrale milano")  # Words in any order

    Args:
        query: Station name query.
        limit: Maximum number of matches to return (default 5, max 100).

    Returns:
        StationResolutionResponse with matches and best_match.
    """
    return await _resolve_station(query=query, limit=_clamp_limit(limit))
