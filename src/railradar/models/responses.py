from pydantic import BaseModel, Field

from railradar.models.station import Station


class SearchStationsResponse(BaseModel):
    stations: list[Station]
    count: int = Field(description="Number of stations returned")


class FieldChange(BaseModel):
    field: str
    old_value: object | None = None
    new_value: object | None = None


class ModifiedStation(BaseModel):
    id: int
    name: str | None = None
    changes: list[FieldChange]


class StationDiff(BaseModel):
    added: list[dict] = Field(default_factory=list)
    removed: list[dict] = Field(default_factory=list)
    modified: list[ModifiedStation] = Field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not (self.added or self.removed or self.modified)


class ValidationIssue(BaseModel):
    station_id: int | str = Field(description="Station ID, or 'unknown' if it is unusable")
    station_name: str
    field: str = Field(description="Offending field, e.g. 'id' or 'lat'")
    message: str
