"""MCP server surface for postfind."""
