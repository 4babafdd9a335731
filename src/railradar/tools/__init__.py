"""MCP tool registrations."""

from railradar.tools import station_tools

__all__ = ["station_tools"]
