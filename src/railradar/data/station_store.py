"""In-memory station directory loaded from a flat JSON file."""

import asyncio
import json
import logging
from pathlib import Path

from railradar.data.config import get_config
from railradar.models.station import Station

logger = logging.getLogger(__name__)


def get_stations_path() -> Path:
    """Get the stations file path from configuration."""
    return get_config().stations_path


def read_station_records(path: Path) -> list[dict]:
    """Read the raw station records from a JSON file.

    Raises:
        FileNotFoundError: If the file doesn't exist.
        ValueError: If the file is not a JSON array of objects.
    """
    if not path.exists():
        raise FileNotFoundError(
            f"Stations file not found at {path}. Set RAILRADAR_STATIONS_PATH to point at it."
        )

    data = json.loads(path.read_text(encoding="utf-8"))
    if not isinstance(data, list):
        raise ValueError(f"Expected a JSON array of stations in {path}")
    for index, record in enumerate(data):
        if not isinstance(record, dict):
            raise ValueError(f"Station at index {index} in {path} is not an object")
    return data


def load_stations(path: Path) -> list[Station]:
    """Load and validate stations, keeping file order.

    Raises:
        FileNotFoundError: If the file doesn't exist.
        ValueError: If the file is not a JSON array of objects.
        pydantic.ValidationError: If a record is not a valid station.
    """
    return [Station.model_validate(record) for record in read_station_records(path)]


class StationDirectory:
    """Lazy-loaded singleton holding every known station.

    Usage:
        directory = await StationDirectory.get_instance()
        # Use directory.stations, directory.stations_by_id

    After editing the stations file:
        await StationDirectory.invalidate()  # Clear cached instance
    """

    _instance: "StationDirectory | None" = None
    _lock: asyncio.Lock = asyncio.Lock()

    def __init__(self) -> None:
        """Initialize empty directory. Use get_instance() instead."""
        self.stations: list[Station] = []  # file order
        self.stations_by_id: dict[int, Station] = {}  # id -> station
        self.path: Path | None = None  # file the stations were loaded from

    @classmethod
    async def get_instance(cls, path: Path | None = None) -> "StationDirectory":
        """Get or create the singleton directory instance.

        The cached instance is replaced when it was loaded from a different
        file than the one requested.

        Args:
            path: Optional stations file path. Uses configured path if not provided.

        Returns:
            The loaded StationDirectory singleton.
        """
        if path is None:
            path = get_stations_path()

        async with cls._lock:
            if cls._instance is None or cls._instance.path != path:
                directory = StationDirectory()
                await directory._load(path)
                cls._instance = directory
            return cls._instance

    @classmethod
    async def invalidate(cls) -> None:
        """Invalidate the cached directory. Call after the stations file changes."""
        async with cls._lock:
            cls._instance = None
            logger.info("StationDirectory invalidated")

    @classmethod
    async def reload(cls, path: Path | None = None) -> "StationDirectory":
        """Force reload the directory from disk."""
        await cls.invalidate()
        return await cls.get_instance(path)

    async def _load(self, path: Path) -> None:
        """Load all stations from disk and build lookups."""
        logger.info(f"Loading StationDirectory from {path}...")

        self.stations = await asyncio.to_thread(load_stations, path)
        self.stations_by_id = {station.id: station for station in self.stations}
        self.path = path

        logger.info(f"StationDirectory loaded: {len(self.stations)} stations")
