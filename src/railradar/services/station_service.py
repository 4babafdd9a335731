"""Station directory service: listing, search and lookup."""

from pathlib import Path

from railradar.data.config import get_config
from railradar.data.station_store import StationDirectory
from railradar.matching.station_matcher import search
from railradar.models.responses import SearchStationsResponse
from railradar.models.station import Station


async def list_stations(stations_path: Path | None = None) -> SearchStationsResponse:
    """List every station in file order.

    Args:
        stations_path: Optional stations file override.

    Returns:
        SearchStationsResponse with all stations.
    """
    directory = await StationDirectory.get_instance(stations_path)
    stations = list(directory.stations)
    return SearchStationsResponse(stations=stations, count=len(stations))


async def search_stations(
    query: str | None = None,
    limit: int | None = None,
    stations_path: Path | None = None,
) -> SearchStationsResponse:
    """Search stations by name.

    A missing query lists every station. A blank query returns the most
    important stations. Anything else is ranked by fuzzy matching.

    Args:
        query: Free-text station name query.
        limit: Maximum number of results (default from RAILRADAR_SEARCH_LIMIT).
        stations_path: Optional stations file override.

    Returns:
        SearchStationsResponse with matching stations, best first.
    """
    if query is None:
        return await list_stations(stations_path)

    if limit is None:
        limit = get_config().search_limit

    directory = await StationDirectory.get_instance(stations_path)
    stations = search(directory.stations, query, limit)
    return SearchStationsResponse(stations=stations, count=len(stations))


async def get_station(
    station_id: int,
    stations_path: Path | None = None,
) -> Station | None:
    """Get a single station by its ID.

    Args:
        station_id: The station ID to look up.
        stations_path: Optional stations file override.

    Returns:
        Station if found, None otherwise.
    """
    directory = await StationDirectory.get_instance(stations_path)
    return directory.stations_by_id.get(station_id)
