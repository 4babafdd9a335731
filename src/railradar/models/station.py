from typing import Protocol

from pydantic import BaseModel, ConfigDict, Field


class SearchableStation(Protocol):
    """Anything the matcher can rank: a display name and an importance rank."""

    name: str
    importance: int


class Station(BaseModel):
    """A station record from the station directory.

    Fields beyond the ones declared here (geo data, operator codes, ...) are
    kept as-is and returned untouched.
    """

    model_config = ConfigDict(extra="allow", frozen=True)

    id: int
    name: str = Field(description="Display name, bilingual names as 'Biel/Bienne'")
    importance: int = Field(
        default=1, ge=1, description="Prominence rank, 1 = most important"
    )
    lat: float | None = None
    lon: float | None = None
