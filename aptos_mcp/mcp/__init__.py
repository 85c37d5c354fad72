"""MCP surface: FastMCP instance, tool handler and server bootstrap."""
