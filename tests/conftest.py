"""Shared station fixtures."""

import json
from pathlib import Path

import pytest

from railradar.data.station_store import StationDirectory
from railradar.models.station import Station

SAMPLE_STATIONS = [
    {"id": 1, "name": "Milano Centrale", "importance": 1, "lat": 45.486, "lon": 9.204},
    {"id": 2, "name": "Milano Rogoredo", "importance": 3, "lat": 45.433, "lon": 9.239},
    {"id": 3, "name": "Roma Termini", "importance": 1, "lat": 41.901, "lon": 12.501},
    {"id": 4, "name": "Biel/Bienne", "importance": 2, "lat": 47.133, "lon": 7.243},
    {"id": 5, "name": "Zürich HB", "importance": 1, "lat": 47.378, "lon": 8.540},
    {"id": 6, "name": "Genève", "importance": 1, "lat": 46.210, "lon": 6.142},
    {"id": 7, "name": "Lausanne", "importance": 2, "lat": 46.517, "lon": 6.629},
    {"id": 8, "name": "Bern", "importance": 1, "lat": 46.949, "lon": 7.439},
    {"id": 9, "name": "Venezia Santa Lucia", "importance": 2, "operator": "trenitalia"},
]


@pytest.fixture
def stations() -> list[Station]:
    """Sample stations as Station models, in file order."""
    return [Station.model_validate(record) for record in SAMPLE_STATIONS]


@pytest.fixture
def stations_file(tmp_path: Path) -> Path:
    """Write the sample stations to a JSON file."""
    path = tmp_path / "stations.json"
    path.write_text(json.dumps(SAMPLE_STATIONS, ensure_ascii=False), encoding="utf-8")
    return path


@pytest.fixture
async def stations_path(stations_file: Path) -> Path:
    """Sample stations file with the directory singleton cleared around the test."""
    # Clear any cached directory from previous tests
    await StationDirectory.invalidate()
    yield stations_file
    await StationDirectory.invalidate()
