"""Aptos MCP server: one tool forwarding messages to a remote workflow API."""

__version__ = "0.1.0"
