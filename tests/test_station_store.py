"""Tests for station file loading and the station directory."""

import json
from pathlib import Path

import pytest
from pydantic import ValidationError

from railradar.data.station_store import StationDirectory, load_stations, read_station_records


class TestLoadStations:
    """Tests for reading the stations file."""

    def test_load_keeps_file_order(self, stations_file: Path) -> None:
        """Test stations come back in file order."""
        stations = load_stations(stations_file)

        assert [station.id for station in stations] == [1, 2, 3, 4, 5, 6, 7, 8, 9]
        assert stations[4].name == "Zürich HB"

    def test_load_keeps_unknown_fields(self, stations_file: Path) -> None:
        """Test extra fields pass through untouched."""
        venezia = load_stations(stations_file)[8]

        assert venezia.model_extra == {"operator": "trenitalia"}
        assert venezia.model_dump()["operator"] == "trenitalia"

    def test_missing_importance_defaults(self, tmp_path: Path) -> None:
        """Test stations without a rank get importance 1."""
        path = tmp_path / "stations.json"
        path.write_text(json.dumps([{"id": 1, "name": "Olten"}]))

        assert load_stations(path)[0].importance == 1

    def test_missing_file(self, tmp_path: Path) -> None:
        """Test a missing file raises FileNotFoundError."""
        with pytest.raises(FileNotFoundError, match="RAILRADAR_STATIONS_PATH"):
            load_stations(tmp_path / "missing.json")

    def test_not_an_array(self, tmp_path: Path) -> None:
        """Test a non-array document is rejected."""
        path = tmp_path / "stations.json"
        path.write_text(json.dumps({"id": 1, "name": "Bern"}))

        with pytest.raises(ValueError, match="JSON array"):
            read_station_records(path)

    def test_non_object_record(self, tmp_path: Path) -> None:
        """Test array entries must be objects."""
        path = tmp_path / "stations.json"
        path.write_text(json.dumps([{"id": 1, "name": "Bern"}, "Thun"]))

        with pytest.raises(ValueError, match="index 1"):
            read_station_records(path)

    def test_invalid_record(self, tmp_path: Path) -> None:
        """Test a record the model refuses."""
        path = tmp_path / "stations.json"
        path.write_text(json.dumps([{"id": "abc", "name": "Bern"}]))

        with pytest.raises(ValidationError):
            load_stations(path)


class TestStationDirectory:
    """Tests for the lazy singleton directory."""

    async def test_get_instance_loads(self, stations_path: Path) -> None:
        """Test the directory loads every station and indexes by id."""
        directory = await StationDirectory.get_instance(stations_path)

        assert len(directory.stations) == 9
        assert directory.stations_by_id[4].name == "Biel/Bienne"

    async def test_get_instance_is_cached(self, stations_path: Path) -> None:
        """Test repeated calls return the same instance."""
        first = await StationDirectory.get_instance(stations_path)
        second = await StationDirectory.get_instance(stations_path)

        assert first is second

    async def test_invalidate_and_reload(self, stations_path: Path) -> None:
        """Test reload picks up an edited file."""
        first = await StationDirectory.get_instance(stations_path)

        stations_path.write_text(json.dumps([{"id": 42, "name": "Olten", "importance": 2}]))
        reloaded = await StationDirectory.reload(stations_path)

        assert reloaded is not first
        assert [station.name for station in reloaded.stations] == ["Olten"]

    async def test_other_path_reloads(self, stations_path: Path, tmp_path: Path) -> None:
        """Test asking for a different file replaces the cached directory."""
        first = await StationDirectory.get_instance(stations_path)

        other_path = tmp_path / "other.json"
        other_path.write_text(json.dumps([{"id": 42, "name": "Olten"}]))
        other = await StationDirectory.get_instance(other_path)

        assert other is not first
        assert other.path == other_path
        assert [station.name for station in other.stations] == ["Olten"]
