"""Aptos-TOOL: forward a message to the remote workflow and return its reply."""

from __future__ import annotations

from typing import Annotated

from pydantic import Field

from ..handler import APTOS_TOOL_NAME, build_default_handler
from ..registry import mcp
from ...core.types import ToolInvocation

aptos_tool_handler = build_default_handler()


@mcp.tool(
    name=APTOS_TOOL_NAME,
    description="Retrieval-Augmented Generation tool for contextual responses",
)
async def aptos_tool(
    message: Annotated[str, Field(description="Input message to process")],
) -> str:
    invocation = ToolInvocation(name=APTOS_TOOL_NAME, arguments={"message": message})
    return await aptos_tool_handler.handle(invocation)
