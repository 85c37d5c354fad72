"""Shared FastMCP instance that tool modules register against."""

from fastmcp import FastMCP

from .. import __version__

SERVER_NAME = "Aptos-MCP"

mcp = FastMCP(SERVER_NAME, version=__version__)
