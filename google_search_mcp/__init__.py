"""Google Search MCP server."""
