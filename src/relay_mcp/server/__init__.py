"""Transport adapters for the Relay MCP server."""
