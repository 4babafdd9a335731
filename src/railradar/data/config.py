from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class RailRadarConfig(BaseSettings):
    """Configuration for the station directory and search tools.

    Automatically loads from environment variables and .env file.
    """

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    stations_path: Path = Field(
        default=Path("data/stations.json"), alias="RAILRADAR_STATIONS_PATH"
    )

    # Result caps for station search
    search_limit: int = Field(default=20, alias="RAILRADAR_SEARCH_LIMIT")
    max_search_limit: int = Field(default=100, alias="RAILRADAR_MAX_SEARCH_LIMIT")


@lru_cache
def get_config() -> RailRadarConfig:
    """Get Rail Radar configuration (cached singleton).

    Returns:
        RailRadarConfig with values from .env file or environment variables.
    """
    return RailRadarConfig()
