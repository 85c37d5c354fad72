"""FastMCP server configuration and lifecycle helpers."""

from __future__ import annotations

from typing import Any, Literal, Mapping

from fastmcp.exceptions import NotFoundError
from fastmcp.tools.tool import ToolResult
from mcp import types as mcp_types

from ..core.audit import FileAuditSink
from ..core.config import get_settings
from ..core.logging_config import get_logger
from .registry import mcp

# Import tool modules so decorators run at import time.
from . import tools  # noqa: F401

logger = get_logger(__name__)

Transport = Literal["stdio", "sse"]

_LOGGED_NOTIFICATIONS: tuple[type, ...] = (
    mcp_types.InitializedNotification,
    mcp_types.RootsListChangedNotification,
    mcp_types.ProgressNotification,
    mcp_types.CancelledNotification,
)


async def handle_notification(notification: Any) -> None:
    """Log client notifications; no other action is taken."""

    method = getattr(notification, "method", type(notification).__name__)
    logger.info("mcp_notification_received", method=method)


def register_notification_handlers() -> None:
    """Attach the logging handler without replacing any handler FastMCP set up."""

    handlers = mcp._mcp_server.notification_handlers
    for notification_type in _LOGGED_NOTIFICATIONS:
        handlers.setdefault(notification_type, handle_notification)


async def call_tool(name: str, arguments: Mapping[str, Any]) -> Any:
    """Execute a tool by name in-process, bypassing any transport."""

    logger.debug("mcp_tool_call", name=name, arguments=dict(arguments))
    try:
        tool_result = await mcp._tool_manager.call_tool(name, dict(arguments))
    except NotFoundError as exc:
        raise KeyError(f"Unknown tool: {name}") from exc

    return _serialize_tool_result(tool_result)


async def list_tool_names() -> list[str]:
    tools_by_key = await mcp.get_tools()
    return sorted(tool.name for tool in tools_by_key.values() if tool.enabled)


def _serialize_tool_result(tool_result: ToolResult) -> Any:
    """Convert FastMCP ToolResult into a JSON-serialisable payload."""

    if tool_result.structured_content is not None:
        payload = tool_result.structured_content
        if isinstance(payload, dict) and set(payload.keys()) == {"result"}:
            return payload["result"]
        return payload

    texts = [block.text for block in tool_result.content if isinstance(block, mcp_types.TextContent)]
    if len(texts) == 1:
        return texts[0]
    return [block.model_dump() for block in tool_result.content]


def serve(
    transport: Transport | None = None,
    *,
    host: str | None = None,
    port: int | None = None,
) -> None:
    """Run the server until the transport closes."""

    settings = get_settings()
    transport = transport or settings.mcp_transport

    if settings.audit_enabled:
        FileAuditSink(settings.audit_log_dir).ensure_directory()

    register_notification_handlers()
    logger.info("aptos_mcp_initialized", server=mcp.name, transport=transport)

    if transport == "sse":
        host = host or settings.mcp_host
        port = port or settings.mcp_port
        logger.info("sse_server_starting", host=host, port=port)
        mcp.run(transport="sse", host=host, port=port)
    else:
        logger.info("stdio_server_starting")
        mcp.run(transport="stdio")
