import argparse
import json
import logging
import sys
from datetime import UTC, datetime
from pathlib import Path

from pydantic import BaseModel

from railradar import tools  # noqa: F401  (registers the station tools on `mcp`)
from railradar.app import mcp
from railradar.data.validation import diff_stations, validate_stations


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    version: str
    timestamp: str


@mcp.tool()
def health() -> HealthResponse:
    """Check if the Rail Radar MCP server is running and healthy.

    Returns the server status, version, and current timestamp.
    """
    from railradar import __version__

    return HealthResponse(
        status="ok",
        version=__version__,
        timestamp=datetime.now(UTC).isoformat(),
    )


def run_search(query: str, limit: int, stations_path: Path) -> None:
    """Print ranked stations for a query."""
    from railradar.data.station_store import load_stations
    from railradar.matching.station_matcher import rank_stations, search

    stations = load_stations(stations_path)

    if not query.strip():
        for station in search(stations, query, limit):
            print(f"  {station.id:>8}  {station.name}  (importance {station.importance})")
        return

    ranked = rank_stations(stations, query, limit)
    if not ranked:
        print(f"No stations match {query!r}")
        return
    for station, result in ranked:
        print(
            f"  {station.id:>8}  {station.name}  "
            f"(tier {int(result.match_type)}, score {result.score:.2f}, "
            f"importance {station.importance})"
        )


def run_validate(stations_path: Path, base_path: Path | None) -> int:
    """Validate a stations file, optionally diffing it against a base version.

    Returns:
        Process exit code: 1 if validation issues were found, 0 otherwise.
    """
    from railradar.data.station_store import read_station_records

    head = read_station_records(stations_path)
    issues = validate_stations(head)

    print(f"\nValidated {len(head):,} stations in {stations_path}")
    print(f"  Validation errors: {len(issues)}")
    for issue in issues:
        print(f"    [{issue.station_id}] {issue.station_name} ({issue.field}): {issue.message}")

    if base_path is not None:
        base = read_station_records(base_path)
        diff = diff_stations(base, head)
        print(f"\nChanges against {base_path} ({len(base):,} stations):")
        if diff.is_empty:
            print("  No changes detected in station data.")
        else:
            print(
                f"  Added: {len(diff.added)}, Removed: {len(diff.removed)}, "
                f"Modified: {len(diff.modified)}"
            )
            for modified in diff.modified:
                for change in modified.changes:
                    print(
                        f"    [{modified.id}] {change.field}: "
                        f"{json.dumps(change.old_value)} -> {json.dumps(change.new_value)}"
                    )

    return 1 if issues else 0


def main() -> None:
    parser = argparse.ArgumentParser(
        prog="railradar",
        description="Rail Radar station MCP server",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable verbose logging",
    )
    subparsers = parser.add_subparsers(dest="command")

    # search command
    search_parser = subparsers.add_parser(
        "search",
        help="Search stations from the command line",
    )
    search_parser.add_argument("query", help="Station name query")
    search_parser.add_argument(
        "--limit",
        type=int,
        default=None,
        help="Maximum number of results (default: RAILRADAR_SEARCH_LIMIT or 20)",
    )
    search_parser.add_argument(
        "--stations",
        type=Path,
        default=None,
        help="Stations JSON file (default: RAILRADAR_STATIONS_PATH or data/stations.json)",
    )

    # validate command
    validate_parser = subparsers.add_parser(
        "validate",
        help="Validate a stations JSON file",
    )
    validate_parser.add_argument(
        "stations_path",
        type=Path,
        help="Stations JSON file to validate",
    )
    validate_parser.add_argument(
        "--base",
        type=Path,
        default=None,
        help="Previous version of the file to report changes against",
    )

    args = parser.parse_args()

    # Configure logging
    log_level = logging.DEBUG if args.verbose else logging.INFO
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    if args.command == "search":
        from railradar.data.config import get_config

        config = get_config()
        limit = args.limit if args.limit is not None else config.search_limit
        stations_path = args.stations or config.stations_path
        run_search(args.query, limit, stations_path)
    elif args.command == "validate":
        sys.exit(run_validate(args.stations_path, args.base))
    else:
        # Default: run MCP server
        mcp.run()


if __name__ == "__main__":
    main()
