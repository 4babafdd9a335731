"""Validation and diffing of raw station records before they ship."""

from railradar.models.responses import (
    FieldChange,
    ModifiedStation,
    StationDiff,
    ValidationIssue,
)

# Fields compared by diff_stations, in report order
DIFF_FIELDS = ("name", "importance", "lat", "lon")

COORDINATE_BOUNDS = {
    "lat": (-90.0, 90.0),
    "lon": (-180.0, 180.0),
}


def _is_int(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _is_number(value: object) -> bool:
    return isinstance(value, int | float) and not isinstance(value, bool)


def _display_name(record: dict, fallback: str) -> str:
    name = record.get("name")
    if isinstance(name, str) and name.strip():
        return name
    return fallback


def validate_stations(records: list[dict]) -> list[ValidationIssue]:
    """Check raw station records for problems.

    Checks:
    - id is an integer (records without one are not checked further)
    - id is unique
    - name is a non-empty string
    - importance, when present, is an integer >= 1
    - lat/lon, when present, are numbers within range

    Returns:
        One ValidationIssue per problem, in record order. Empty if valid.
    """
    issues: list[ValidationIssue] = []
    seen_ids: dict[int, str] = {}  # id -> name of first station using it

    for index, record in enumerate(records):
        station_id = record.get("id")
        name = _display_name(record, f"index {index}")

        if not _is_int(station_id):
            issues.append(
                ValidationIssue(
                    station_id="unknown",
                    station_name=name,
                    field="id",
                    message=f"ID is not an integer: {station_id!r}",
                )
            )
            continue

        if station_id in seen_ids:
            issues.append(
                ValidationIssue(
                    station_id=station_id,
                    station_name=name,
                    field="id",
                    message=f'Duplicate ID (also used by "{seen_ids[station_id]}")',
                )
            )
        else:
            seen_ids[station_id] = name

        raw_name = record.get("name")
        if not isinstance(raw_name, str) or not raw_name.strip():
            issues.append(
                ValidationIssue(
                    station_id=station_id,
                    station_name=_display_name(record, "(empty)"),
                    field="name",
                    message="Name must be a non-empty string",
                )
            )

        if "importance" in record:
            importance = record["importance"]
            if not _is_int(importance) or importance < 1:
                issues.append(
                    ValidationIssue(
                        station_id=station_id,
                        station_name=name,
                        field="importance",
                        message=f"Invalid importance: {importance!r} (must be an integer >= 1)",
                    )
                )

        for field, (low, high) in COORDINATE_BOUNDS.items():
            if record.get(field) is None:
                continue
            value = record[field]
            if not _is_number(value) or not low <= value <= high:
                issues.append(
                    ValidationIssue(
                        station_id=station_id,
                        station_name=name,
                        field=field,
                        message=f"Invalid {field}: {value!r} (must be {low:g} to {high:g})",
                    )
                )

    return issues


def _index_by_id(records: list[dict]) -> dict[int, dict]:
    by_id: dict[int, dict] = {}
    for record in records:
        station_id = record.get("id")
        if _is_int(station_id):
            by_id.setdefault(station_id, record)
    return by_id


def diff_stations(base: list[dict], head: list[dict]) -> StationDiff:
    """Compare two versions of the station list by station id.

    Records without a usable id are ignored and only the first record of a
    duplicated id is compared; validate_stations reports both.
    """
    base_by_id = _index_by_id(base)
    head_by_id = _index_by_id(head)

    diff = StationDiff()

    for station_id, head_record in head_by_id.items():
        base_record = base_by_id.get(station_id)
        if base_record is None:
            diff.added.append(head_record)
            continue

        changes = [
            FieldChange(
                field=field,
                old_value=base_record.get(field),
                new_value=head_record.get(field),
            )
            for field in DIFF_FIELDS
            if base_record.get(field) != head_record.get(field)
        ]
        if changes:
            diff.modified.append(
                ModifiedStation(id=station_id, name=head_record.get("name"), changes=changes)
            )

    for station_id, base_record in base_by_id.items():
        if station_id not in head_by_id:
            diff.removed.append(base_record)

    return diff
