"""Services backing the MCP tools."""
