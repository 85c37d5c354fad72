"""Run the Aptos MCP server.

    aptos-mcp                 # stdio transport (default)
    aptos-mcp -t sse          # SSE transport on MCP_HOST:MCP_PORT
"""

from __future__ import annotations

import argparse

from aptos_mcp.core.config import get_settings
from aptos_mcp.core.logging_config import configure_logging, get_logger


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    settings = get_settings()
    parser = argparse.ArgumentParser(description="Run the Aptos MCP server")
    parser.add_argument(
        "-t",
        "--transport",
        choices=["stdio", "sse"],
        default=settings.mcp_transport,
        help="Transport type (stdio or sse)",
    )
    parser.add_argument("--host", default=settings.mcp_host, help="SSE bind host")
    parser.add_argument("--port", type=int, default=settings.mcp_port, help="SSE bind port")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> None:
    args = parse_args(argv)
    configure_logging()
    logger = get_logger(__name__)
    logger.info("aptos_mcp_starting", transport=args.transport)

    from aptos_mcp.mcp.server import serve

    serve(args.transport, host=args.host, port=args.port)


if __name__ == "__main__":
    main()
